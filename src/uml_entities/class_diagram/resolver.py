from __future__ import annotations

from typing import Callable

from .types import (
    Association,
    ClassBlock,
    ClassModelDiagram,
    ClassRegistry,
    LabeledAssociation,
    RelationshipDescriptor,
    SkippedLine,
    SymbolAssociation,
)

# ============================================================================
# Relationship resolver
#
# Turns parsed association statements into navigation properties on both
# endpoint classes. Every applied statement adds exactly one property to each
# side, so repeating a line repeats the properties.
#
#   A -- B               A.Bs (many)      B.As (many)
#   A o-- B / A *-- B    A.Bs (many)      B.A  (one)
#   A --o B / A --* B    A.B  (one)       B.As (many)
#   A "x" <--> "*y" B    A.y  (many)      B.x  (one)   labels cross over
# ============================================================================


def pluralize(name: str) -> str:
    """Naive English plural used for collection and context property names."""
    if not name:
        return name
    if name.endswith("y"):
        return name[:-1] + "ies"
    if name.endswith("s"):
        return name + "es"
    return name + "s"


def build_registry(diagram: ClassModelDiagram) -> ClassRegistry:
    """Index the diagram's class blocks by name.

    A later block with an already-seen name replaces the earlier one.
    """
    registry = ClassRegistry()
    for statement in diagram.statements:
        if isinstance(statement, ClassBlock):
            registry.register(statement.descriptor)
    return registry


def resolve_relationships(
    diagram: ClassModelDiagram,
    on_skip: Callable[[SkippedLine], None] | None = None,
) -> ClassRegistry:
    """Attach navigation properties for every association in the diagram.

    Associations naming an unknown class are dropped.
    """
    registry = build_registry(diagram)
    for association in diagram.associations:
        if not _apply(registry, association) and on_skip is not None:
            on_skip(
                SkippedLine(
                    line=association.line,
                    text=association.text,
                    reason="unknown_class",
                )
            )
    return registry


def _apply(registry: ClassRegistry, association: Association) -> bool:
    left = registry.get(association.left)
    right = registry.get(association.right)
    if left is None or right is None:
        return False

    if isinstance(association, LabeledAssociation):
        # Each end is named after the label written at the other end
        far, near = association.right_label, association.left_label
        left.relationships.append(
            RelationshipDescriptor(name=far.text, target=right.name, is_collection=far.is_collection)
        )
        right.relationships.append(
            RelationshipDescriptor(name=near.text, target=left.name, is_collection=near.is_collection)
        )
        return True

    left_many, right_many = _multiplicity(association)
    left.relationships.append(_navigation(right.name, left_many))
    right.relationships.append(_navigation(left.name, right_many))
    return True


def _multiplicity(association: SymbolAssociation) -> tuple[bool, bool]:
    """Collection flags for (left side's property, right side's property)."""
    if association.operator in ("o--", "*--"):
        return True, False
    if association.operator in ("--o", "--*"):
        return False, True
    return True, True


def _navigation(target: str, is_collection: bool) -> RelationshipDescriptor:
    name = pluralize(target) if is_collection else target
    return RelationshipDescriptor(name=name, target=target, is_collection=is_collection)
