from __future__ import annotations

from .types import (
    CSharpTarget,
    DEFAULTS,
    ListType,
    PrimitiveType,
    ReferenceType,
    TypeRef,
    map_type,
    render_type,
)
from .emitter import capitalize, emit_context, emit_entity, emit_model
from .scaffold import scaffold_files

__all__ = [
    "CSharpTarget",
    "DEFAULTS",
    "ListType",
    "PrimitiveType",
    "ReferenceType",
    "TypeRef",
    "map_type",
    "render_type",
    "capitalize",
    "emit_context",
    "emit_entity",
    "emit_model",
    "scaffold_files",
]
