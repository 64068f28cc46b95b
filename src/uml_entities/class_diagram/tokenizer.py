from __future__ import annotations

import re

from .types import Token, TokenKind

# ============================================================================
# Class diagram tokenizer
#
# Splits diagram text into a flat token stream in a single pass. Horizontal
# whitespace is dropped; whether two tokens touch can be checked through
# their offsets (see `adjacent`).
# ============================================================================

_TOKEN_SPEC: list[tuple[TokenKind | None, str]] = [
    ("NEWLINE", r"\r?\n"),
    (None, r"[^\S\n]+"),
    # Braces never hide inside a label; the first `}` always closes a block
    ("STRING", r'"[^"\r\n{}]*"'),
    # Longest operators first; `o--` must win over an identifier `o`
    ("ARROW", r"<-->|[*o]?--[*o]?"),
    ("LBRACE", r"\{"),
    ("RBRACE", r"\}"),
    ("COLON", r":"),
    ("LT", r"<"),
    ("GT", r">"),
    ("LBRACKET", r"\["),
    ("RBRACKET", r"\]"),
    ("MARKER", r"[+#-]"),
    ("IDENT", r"\w+"),
    ("OTHER", r"."),
]

_MASTER = re.compile(
    "|".join(
        f"(?P<{kind}>{pattern})" if kind else f"(?:{pattern})"
        for kind, pattern in _TOKEN_SPEC
    ),
    re.ASCII | re.DOTALL,
)


def tokenize(text: str) -> list[Token]:
    """Tokenize diagram text. Never fails: unknown characters become OTHER."""
    tokens: list[Token] = []
    line = 1
    for match in _MASTER.finditer(text):
        kind = match.lastgroup
        if kind is None:
            continue
        tokens.append(
            Token(
                kind=kind,  # type: ignore[arg-type]
                text=match.group(),
                start=match.start(),
                end=match.end(),
                line=line,
            )
        )
        if kind == "NEWLINE":
            line += 1
    return tokens


def split_lines(text: str) -> list[str]:
    """Physical source lines, numbered the same way tokens are."""
    return re.split(r"\r?\n", text)


def adjacent(left: Token, right: Token) -> bool:
    """True when no whitespace separates the two tokens."""
    return left.end == right.start
