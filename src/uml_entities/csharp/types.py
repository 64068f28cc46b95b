from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

# ============================================================================
# C# target types
#
# `TypeRef` is the mapped form of a raw diagram type token. Unmapped tokens
# become an explicit `ReferenceType` rather than falling through silently.
# ============================================================================

PrimitiveKind = Literal["string", "datetime", "int32", "single", "bool"]


@dataclass(frozen=True, slots=True)
class PrimitiveType:
    kind: PrimitiveKind


@dataclass(frozen=True, slots=True)
class ListType:
    # Element type text, copied verbatim from between `List<` and the final `>`
    element: str


@dataclass(frozen=True, slots=True)
class ReferenceType:
    """Another generated entity, or a token no other variant recognizes."""

    name: str


TypeRef = Union[PrimitiveType, ListType, ReferenceType]

# Exact, case-sensitive diagram tokens
PRIMITIVE_TOKENS: dict[str, PrimitiveKind] = {
    "String": "string",
    "Date": "datetime",
    "int": "int32",
    "float": "single",
    "boolean": "bool",
}

CSHARP_PRIMITIVES: dict[PrimitiveKind, str] = {
    "string": "string",
    "datetime": "DateTime",
    "int32": "int",
    "single": "float",
    "bool": "bool",
}


def map_type(token: str) -> TypeRef:
    """Map a raw diagram type token to a `TypeRef`."""
    kind = PRIMITIVE_TOKENS.get(token)
    if kind is not None:
        return PrimitiveType(kind)
    if token.startswith("List<"):
        inner = token[len("List<") :]
        end = inner.rfind(">")
        return ListType(inner[:end] if end >= 0 else inner)
    return ReferenceType(token)


def render_type(ref: TypeRef) -> str:
    """C# spelling of a mapped type. Everything but lists is nullable."""
    if isinstance(ref, PrimitiveType):
        return CSHARP_PRIMITIVES[ref.kind] + "?"
    if isinstance(ref, ListType):
        return f"IList<{ref.element}>"
    return ref.name + "?"


# ============================================================================
# Emit target -- resolved configuration
# ============================================================================


@dataclass(frozen=True, slots=True)
class CSharpTarget:
    namespace: str
    context_name: str
    base_class: str
    class_attribute: str
    project_name: str
    target_framework: str
    model_dir: str


DEFAULTS: dict[str, str] = {
    "namespace": "Zen.Model",
    "context_name": "ZenContext",
    "base_class": "BaseEntity",
    "class_attribute": "DefaultClassOptions",
    "project_name": "Zen",
    "target_framework": "net8.0",
    "model_dir": "Model",
}
