from __future__ import annotations

import re
from itertools import groupby
from typing import Callable

from .tokenizer import adjacent, split_lines, tokenize
from .types import (
    AssociationLabel,
    AssociationOperator,
    AttributeDescriptor,
    ClassBlock,
    ClassDescriptor,
    ClassModelDiagram,
    LabeledAssociation,
    SkippedLine,
    Statement,
    SymbolAssociation,
    Token,
)

# ============================================================================
# Class diagram parser
#
# Recursive-descent parser over the token stream. Produces an ordered list of
# statements; anything that does not match is dropped (and optionally
# reported through `on_skip`).
#
# Supported syntax:
#   class Customer {              (class block, body ends at the first `}`)
#     + name: String              (attribute: marker, name, colon, type)
#     - tours: List<Tour>
#     # scores: int[]
#   }
#   Tour "* Tours" <--> "Guide" Guide      (labeled association)
#   Customer -- Tour : makes reservation > (plain association)
#   Agency o-- Tour                        (aggregation, collection on Agency)
#   Tour --* Stop                          (composition, collection on Stop)
#
# Every physical line, including lines inside a class body, is tried as an
# association: labeled grammar first, symbol grammar second.
# ============================================================================

SkipHook = Callable[[SkippedLine], None]

SYMBOL_OPERATORS: frozenset[str] = frozenset({"--", "o--", "*--", "--o", "--*"})

_LABEL_RE = re.compile(r"^\s*(\*?)\s*(\w+)\s*$", re.ASCII)


def parse_class_diagram(text: str, on_skip: SkipHook | None = None) -> ClassModelDiagram:
    """Parse diagram text into class blocks and association statements.

    Never raises on malformed input. Relationships on the returned class
    descriptors are empty; see `resolve_relationships`.
    """
    parser = _Parser(text)
    diagram = ClassModelDiagram(statements=parser.parse())
    if on_skip is not None:
        for skipped in parser.skipped():
            on_skip(skipped)
    return diagram


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = tokenize(text)
        self.lines = split_lines(text)
        self.pos = 0
        self.statements: list[Statement] = []
        # Tokens of each line, NEWLINE excluded
        self.line_tokens: dict[int, list[Token]] = {
            line: list(group)
            for line, group in groupby(
                (t for t in self.tokens if t.kind != "NEWLINE"), key=lambda t: t.line
            )
        }
        self.visited_line = 0
        self.consumed_lines: set[int] = set()
        self.bad_attribute_lines: set[int] = set()
        self.association_lines: set[int] = set()

    # --- Document ---

    def parse(self) -> list[Statement]:
        while self.pos < len(self.tokens):
            tok = self.tokens[self.pos]
            self._visit_line(tok.line)
            if tok.kind == "IDENT" and tok.text == "class":
                block = self._class_block()
                if block is not None:
                    self.statements.append(block)
                    continue
            self.pos += 1
        return self.statements

    def skipped(self) -> list[SkippedLine]:
        result: list[SkippedLine] = []
        for line_no, text in enumerate(self.lines, start=1):
            if line_no in self.bad_attribute_lines:
                result.append(SkippedLine(line=line_no, text=text.strip(), reason="attribute"))
            elif text.strip() and line_no not in self.consumed_lines:
                result.append(SkippedLine(line=line_no, text=text.strip(), reason="unrecognized"))
        return result

    def _visit_line(self, line: int) -> None:
        """Try every not-yet-seen line up to `line` as an association."""
        while self.visited_line < line:
            self.visited_line += 1
            toks = self.line_tokens.get(self.visited_line)
            if not toks:
                continue
            statement = _labeled_association(toks) or _symbol_association(toks)
            if statement is not None:
                statement.text = self.lines[self.visited_line - 1].strip()
                self.statements.append(statement)
                self.consumed_lines.add(self.visited_line)
                self.association_lines.add(self.visited_line)

    # --- Class block: `class` IDENT `{` body `}` ---

    def _class_block(self) -> ClassBlock | None:
        keyword = self.tokens[self.pos]
        name_at = self._skip_newlines(self.pos + 1)
        if name_at >= len(self.tokens) or self.tokens[name_at].kind != "IDENT":
            return None
        brace_at = self._skip_newlines(name_at + 1)
        if brace_at >= len(self.tokens) or self.tokens[brace_at].kind != "LBRACE":
            return None
        close_at = next(
            (i for i in range(brace_at + 1, len(self.tokens)) if self.tokens[i].kind == "RBRACE"),
            None,
        )
        if close_at is None:
            return None

        descriptor = ClassDescriptor(name=self.tokens[name_at].text, line=keyword.line)
        body = [t for t in self.tokens[brace_at + 1 : close_at] if t.kind != "NEWLINE"]
        for line, group in groupby(body, key=lambda t: t.line):
            self._visit_line(line)
            attributes, had_marker = _attribute_line(self.text, list(group))
            descriptor.attributes.extend(attributes)
            if had_marker and not attributes and line not in self.association_lines:
                self.bad_attribute_lines.add(line)

        closing = self.tokens[close_at]
        self._visit_line(closing.line)
        self.consumed_lines.update(range(keyword.line, closing.line + 1))
        self.pos = close_at + 1
        return ClassBlock(descriptor=descriptor)

    def _skip_newlines(self, i: int) -> int:
        while i < len(self.tokens) and self.tokens[i].kind == "NEWLINE":
            i += 1
        return i


# ============================================================================
# Attributes
# ============================================================================


def _attribute_line(source: str, toks: list[Token]) -> tuple[list[AttributeDescriptor], bool]:
    """Collect every attribute on one body line.

    Returns the attributes and whether the line had any visibility marker.
    """
    attributes: list[AttributeDescriptor] = []
    had_marker = False
    i = 0
    while i < len(toks):
        if _is_marker(toks[i]):
            had_marker = True
            parsed = _attribute(source, toks, i)
            if parsed is not None:
                attribute, i = parsed
                attributes.append(attribute)
                continue
        i += 1
    return attributes, had_marker


def _is_marker(tok: Token) -> bool:
    """A visibility marker, or an arrow whose last `-` is one (`--name: int`)."""
    return tok.kind == "MARKER" or (tok.kind == "ARROW" and tok.text.endswith("-"))


def _attribute(source: str, toks: list[Token], i: int) -> tuple[AttributeDescriptor, int] | None:
    """MARKER IDENT `:` TYPE  ->  (attribute, index after TYPE)."""
    if not _kinds_at(toks, i + 1, "IDENT", "COLON", "IDENT"):
        return None
    name = toks[i + 1]
    first = last = toks[i + 3]
    j = i + 4

    # Generic parameter: Ident<Ident>, no whitespace anywhere
    if (
        _kinds_at(toks, j, "LT", "IDENT", "GT")
        and adjacent(last, toks[j])
        and adjacent(toks[j], toks[j + 1])
        and adjacent(toks[j + 1], toks[j + 2])
    ):
        last = toks[j + 2]
        j += 3

    # Array marker: optional whitespace, then []
    if _kinds_at(toks, j, "LBRACKET", "RBRACKET") and adjacent(toks[j], toks[j + 1]):
        last = toks[j + 1]
        j += 2

    return AttributeDescriptor(name=name.text, type=source[first.start : last.end]), j


# ============================================================================
# Associations
# ============================================================================


def _labeled_association(toks: list[Token]) -> LabeledAssociation | None:
    """IDENT "label" <--> "label" IDENT, nothing else on the line."""
    if len(toks) != 5 or not _kinds_at(toks, 0, "IDENT", "STRING", "ARROW", "STRING", "IDENT"):
        return None
    if toks[2].text != "<-->":
        return None
    left_label = _association_label(toks[1])
    right_label = _association_label(toks[3])
    if left_label is None or right_label is None:
        return None
    return LabeledAssociation(
        left=toks[0].text,
        left_label=left_label,
        right_label=right_label,
        right=toks[4].text,
        line=toks[0].line,
    )


def _association_label(tok: Token) -> AssociationLabel | None:
    match = _LABEL_RE.match(tok.text[1:-1])
    if not match:
        return None
    return AssociationLabel(text=match.group(2), is_collection=bool(match.group(1)))


def _symbol_association(toks: list[Token]) -> SymbolAssociation | None:
    """IDENT <op> IDENT at line start; the rest of the line is ignored."""
    if not _kinds_at(toks, 0, "IDENT", "ARROW", "IDENT"):
        return None
    left, op, right = toks[0], toks[1], toks[2]
    if op.text not in SYMBOL_OPERATORS:
        return None
    # Whitespace is required on both sides of the operator
    if adjacent(left, op) or adjacent(op, right):
        return None
    operator: AssociationOperator = op.text  # type: ignore[assignment]
    return SymbolAssociation(left=left.text, operator=operator, right=right.text, line=left.line)


def _kinds_at(toks: list[Token], i: int, *kinds: str) -> bool:
    if i + len(kinds) > len(toks):
        return False
    return all(toks[i + k].kind == kind for k, kind in enumerate(kinds))
