"""
  qlisp Lexer

- Single pass over the input, linear in its length
- Every pattern is anchored at the current position; the longest match wins,
  ties go to the pattern listed first (so `-5` is a number, `-x` an identifier)
- Whitespace is matched and dropped by `tokenize`; `lex` still yields it
- Tokens keep no position, only a `glued` flag telling the parser whether
  whitespace separated them from the previous token
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from qlisp.errors import UnrecognizedCharacter

WHITESPACE = "whitespace"
OPEN = "open"
CLOSE = "close"
NUMBER = "number"
STRING = "string"
IDENTIFIER = "identifier"

# Operator glyphs allowed anywhere in an identifier
_GLYPHS = r"+\-*/\\=<>!&"

PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    (WHITESPACE, re.compile(r"[ \t\r\n]+")),
    (OPEN, re.compile(r"[({]")),
    (CLOSE, re.compile(r"[)}]")),
    (NUMBER, re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")),
    (STRING, re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)),
    (IDENTIFIER, re.compile(rf"[A-Za-z_{_GLYPHS}][A-Za-z0-9_{_GLYPHS}]*")),
)


class Token(NamedTuple):
    kind: str
    text: str
    glued: bool = False

    def __str__(self) -> str:
        return f"{self.kind}({self.text})"


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every token, whitespace included."""
    pos = 0
    n = len(source)
    while pos < n:
        best_kind, best_end = None, pos
        for kind, pattern in PATTERNS:
            m = pattern.match(source, pos)
            if m and m.end() > best_end:
                best_kind, best_end = kind, m.end()
        if best_kind is None:
            raise UnrecognizedCharacter(source[pos])
        yield Token(best_kind, source[pos:best_end])
        pos = best_end


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens, dropping whitespace.

    Raises UnrecognizedCharacter on the first character no pattern accepts.
    """
    tokens: list[Token] = []
    separated = True
    for tok in lex(source):
        if tok.kind == WHITESPACE:
            separated = True
            continue
        tokens.append(tok._replace(glued=not separated))
        separated = False
    return tokens
