from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal, Union

# ============================================================================
# Class diagram types
#
# Models the tokens, statements and resolved descriptors of a PlantUML-style
# class diagram. Descriptors are created fresh for every translation call.
# ============================================================================

# Tokens -- produced by the tokenizer

TokenKind = Literal[
    "NEWLINE",
    "STRING",    # "label"  (never spans a line or contains a brace)
    "ARROW",     # <-->  --  o--  *--  --o  --*  (and other [*o]?--[*o]? forms)
    "LBRACE",
    "RBRACE",
    "COLON",
    "LT",
    "GT",
    "LBRACKET",
    "RBRACKET",
    "MARKER",    # + # -   (attribute visibility)
    "IDENT",
    "OTHER",
]


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    # Offsets into the source text: text == source[start:end]
    start: int
    end: int
    # 1-based source line
    line: int


# Descriptors -- the resolved object model


@dataclass(slots=True)
class AttributeDescriptor:
    """A class attribute exactly as written in the diagram."""

    name: str
    # Raw type token, unvalidated (e.g. "String", "List<Tour>", "int []")
    type: str


@dataclass(slots=True)
class RelationshipDescriptor:
    """A navigation property derived from an association line."""

    # Property name on the owning class
    name: str
    # Name of the class the property points at
    target: str
    is_collection: bool


@dataclass(slots=True)
class ClassDescriptor:
    """A class definition in the diagram, identified by name only."""

    name: str
    attributes: list[AttributeDescriptor] = field(default_factory=list)
    relationships: list[RelationshipDescriptor] = field(default_factory=list)
    # Line of the `class` keyword
    line: int = 0


class ClassRegistry:
    """Name-keyed store of class descriptors.

    Registering a name twice replaces the descriptor but keeps the position
    of the first occurrence, so iteration yields distinct classes in the
    order their names first appeared.
    """

    def __init__(self) -> None:
        self._classes: dict[str, ClassDescriptor] = {}

    def register(self, descriptor: ClassDescriptor) -> None:
        self._classes[descriptor.name] = descriptor

    def get(self, name: str) -> ClassDescriptor | None:
        return self._classes.get(name)

    def names(self) -> list[str]:
        return list(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __iter__(self) -> Iterator[ClassDescriptor]:
        return iter(self._classes.values())

    def __len__(self) -> int:
        return len(self._classes)


# Statements -- the parse result, in source order

AssociationOperator = Literal["--", "o--", "*--", "--o", "--*"]


@dataclass(slots=True)
class ClassBlock:
    """`class Name { ... }` -- relationships are always empty here."""

    descriptor: ClassDescriptor


@dataclass(slots=True)
class AssociationLabel:
    """One quoted end label of a labeled association, e.g. "* Tours"."""

    text: str
    # Leading `*` inside the quotes
    is_collection: bool = False


@dataclass(slots=True)
class LabeledAssociation:
    """`A "label1" <--> "label2" B`"""

    left: str
    left_label: AssociationLabel
    right_label: AssociationLabel
    right: str
    line: int = 0
    # Trimmed source line
    text: str = ""


@dataclass(slots=True)
class SymbolAssociation:
    """`A <op> B [trailing text]`"""

    left: str
    operator: AssociationOperator
    right: str
    line: int = 0
    # Trimmed source line
    text: str = ""


Association = Union[LabeledAssociation, SymbolAssociation]
Statement = Union[ClassBlock, LabeledAssociation, SymbolAssociation]


@dataclass(slots=True)
class ClassModelDiagram:
    """Parsed diagram -- ordered statement list."""

    statements: list[Statement] = field(default_factory=list)

    @property
    def classes(self) -> list[ClassDescriptor]:
        return [s.descriptor for s in self.statements if isinstance(s, ClassBlock)]

    @property
    def associations(self) -> list[Association]:
        return [s for s in self.statements if not isinstance(s, ClassBlock)]


# Diagnostics

SkipReason = Literal["unrecognized", "attribute", "unknown_class"]


@dataclass(frozen=True, slots=True)
class SkippedLine:
    """A line the translator dropped without producing output."""

    line: int
    text: str
    reason: SkipReason
