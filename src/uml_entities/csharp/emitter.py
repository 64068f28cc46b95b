from __future__ import annotations

from ..class_diagram.resolver import pluralize
from ..class_diagram.types import (
    AttributeDescriptor,
    ClassDescriptor,
    ClassRegistry,
    RelationshipDescriptor,
)
from .types import CSharpTarget, map_type, render_type

# ============================================================================
# C# source emitter
#
# Emits one entity class per diagram class plus one EF Core DbContext that
# exposes a DbSet per distinct class.
#
# Entity layout:
#   1. Usings + namespace
#   2. [DefaultClassOptions] public class Name : BaseEntity
#   3. Attribute properties (diagram order)
#   4. Blank line, only when there are both attributes and navigations
#   5. Navigation properties (association order)
# ============================================================================

INDENT = "    "

ENTITY_USINGS = [
    "DevExpress.Persistent.Base",
    "System",
    "System.Collections.Generic",
    "System.Collections.ObjectModel",
]

CONTEXT_USINGS = [
    "Microsoft.EntityFrameworkCore",
    "System",
    "System.Collections.Generic",
    "System.Linq",
    "System.Text",
    "System.Threading.Tasks",
]


def emit_model(registry: ClassRegistry, target: CSharpTarget) -> dict[str, str]:
    """Emit `{file name: source}` for every class plus the context.

    An empty registry yields an empty map.
    """
    if not len(registry):
        return {}

    files: dict[str, str] = {}
    for cls in registry:
        files[f"{cls.name}.cs"] = emit_entity(cls, target)
    files[f"{target.context_name}.cs"] = emit_context(registry, target)
    return files


def emit_entity(cls: ClassDescriptor, target: CSharpTarget) -> str:
    """Render one entity class."""
    body: list[str] = []
    body.extend(_attribute_property(attr) for attr in cls.attributes)
    if cls.attributes and cls.relationships:
        body.append("")
    body.extend(_navigation_property(rel) for rel in cls.relationships)

    declaration = [
        f"[{target.class_attribute}]",
        f"public class {cls.name} : {target.base_class}",
    ]
    return _compilation_unit(ENTITY_USINGS, target.namespace, declaration, body)


def emit_context(registry: ClassRegistry, target: CSharpTarget) -> str:
    """Render the DbContext with one DbSet per distinct class name."""
    body = [
        f"public {target.context_name}(DbContextOptions options) : base(options)",
        "{",
        "}",
        "",
    ]
    for name in registry.names():
        body.append(f"public DbSet<{name}> {pluralize(name)} {{ get; set; }}")

    declaration = [f"public class {target.context_name} : DbContext"]
    return _compilation_unit(CONTEXT_USINGS, target.namespace, declaration, body)


def capitalize(name: str) -> str:
    """Property name for a diagram attribute."""
    if name.lower() == "id":
        return "Id"
    return name[:1].upper() + name[1:]


def _attribute_property(attr: AttributeDescriptor) -> str:
    cs_type = render_type(map_type(attr.type))
    return f"public virtual {cs_type} {capitalize(attr.name)} {{ get; set; }}"


def _navigation_property(rel: RelationshipDescriptor) -> str:
    if rel.is_collection:
        return (
            f"public virtual IList<{rel.target}> {rel.name} {{ get; set; }}"
            f" = new ObservableCollection<{rel.target}>();"
        )
    return f"public virtual {rel.target}? {rel.name} {{ get; set; }}"


def _compilation_unit(
    usings: list[str],
    namespace: str,
    declaration: list[str],
    body: list[str],
) -> str:
    parts: list[str] = [f"using {u};" for u in usings]
    parts.append("")
    parts.append(f"namespace {namespace}")
    parts.append("{")
    parts.extend(INDENT + line for line in declaration)
    parts.append(INDENT + "{")
    parts.extend(INDENT * 2 + line if line else "" for line in body)
    parts.append(INDENT + "}")
    parts.append("}")
    return "\n".join(parts) + "\n"
