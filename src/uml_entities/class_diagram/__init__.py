from __future__ import annotations

from .types import (
    AttributeDescriptor,
    ClassBlock,
    ClassDescriptor,
    ClassModelDiagram,
    ClassRegistry,
    LabeledAssociation,
    RelationshipDescriptor,
    SkippedLine,
    SymbolAssociation,
    Token,
)
from .tokenizer import tokenize
from .parser import parse_class_diagram
from .resolver import build_registry, pluralize, resolve_relationships

__all__ = [
    "AttributeDescriptor",
    "ClassBlock",
    "ClassDescriptor",
    "ClassModelDiagram",
    "ClassRegistry",
    "LabeledAssociation",
    "RelationshipDescriptor",
    "SkippedLine",
    "SymbolAssociation",
    "Token",
    "tokenize",
    "parse_class_diagram",
    "build_registry",
    "pluralize",
    "resolve_relationships",
]
