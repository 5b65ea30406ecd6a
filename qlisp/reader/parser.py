"""
  qlisp Parser

Recursive descent over the token list, one nesting level per call:

    - identifier       -> Identifier
    - number           -> Number (float)
    - string           -> String, unescaped here (may fail)
    - ( ... ) / { ... } -> child Expression of kind S / Q

The matching close bracket is found by depth counting over both bracket
styles; the glyph found there must match the opener.
"""

from __future__ import annotations

import string
from typing import Sequence

from qlisp.errors import UnexpectedToken, UnexpectedEndOfInput, MalformedString
from qlisp.reader.lexer import (
    Token,
    tokenize,
    WHITESPACE,
    OPEN,
    CLOSE,
    NUMBER,
    STRING,
    IDENTIFIER,
)
from qlisp.types.node import Node, Number, String, Identifier, Expression, S_EXPR, Q_EXPR

# Opening glyph -> (expression kind, closing glyph)
BRACKETS: dict[str, tuple[str, str]] = {
    "(": (S_EXPR, ")"),
    "{": (Q_EXPR, "}"),
}

_ATOMS = (NUMBER, STRING, IDENTIFIER)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_HEX_ESCAPES = {"x": 2, "u": 4, "U": 8}


def unquote_string(literal: str) -> str:
    """Strip the quotes from a string token and resolve its escapes."""
    body = literal[1:-1]
    out: list[str] = []
    i, n = 0, len(body)
    while i < n:
        ch = body[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise MalformedString(literal, "trailing backslash")
        esc = body[i + 1]
        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            i += 2
        elif esc in _HEX_ESCAPES:
            width = _HEX_ESCAPES[esc]
            digits = body[i + 2 : i + 2 + width]
            if len(digits) != width or any(c not in string.hexdigits for c in digits):
                raise MalformedString(literal, f"invalid \\{esc} escape")
            code = int(digits, 16)
            if code > 0x10FFFF:
                raise MalformedString(literal, f"code point out of range in \\{esc} escape")
            out.append(chr(code))
            i += 2 + width
        else:
            raise MalformedString(literal, f"unknown escape sequence \\{esc}")
    return "".join(out)


def find_matching_close(tokens: Sequence[Token], start: int) -> int:
    """Index of the bracket closing the one at `start`, or -1 if input ends first."""
    depth = 0
    for i in range(start, len(tokens)):
        kind = tokens[i].kind
        if kind == OPEN:
            depth += 1
        elif kind == CLOSE:
            depth -= 1
            if depth == 0:
                return i
    return -1


def parse_expression(tokens: Sequence[Token], kind: str = S_EXPR) -> Expression:
    """Build an Expression of `kind` from `tokens`.

    Raises UnexpectedToken, UnexpectedEndOfInput or MalformedString.
    """
    children: list[Node] = []
    i, n = 0, len(tokens)
    prev_atom = False
    separated = True
    while i < n:
        tok = tokens[i]
        if tok.kind == WHITESPACE:
            separated = True
            i += 1
            continue

        glued = tok.glued and not separated
        separated = False
        if prev_atom and glued and tok.kind in _ATOMS:
            raise UnexpectedToken(tok)

        if tok.kind == IDENTIFIER:
            children.append(Identifier(tok.text))
            i += 1
        elif tok.kind == NUMBER:
            children.append(Number(float(tok.text)))
            i += 1
        elif tok.kind == STRING:
            children.append(String(unquote_string(tok.text)))
            i += 1
        elif tok.kind == OPEN:
            close = find_matching_close(tokens, i)
            if close == -1:
                raise UnexpectedEndOfInput()
            child_kind, closer = BRACKETS[tok.text]
            if tokens[close].text != closer:
                raise UnexpectedToken(tokens[close])
            children.append(parse_expression(tokens[i + 1 : close], child_kind))
            i = close + 1
        else:
            raise UnexpectedToken(tok)
        prev_atom = tok.kind in _ATOMS

    return Expression(kind, children)


def read(source: str, kind: str = S_EXPR) -> Expression:
    """Tokenize and parse `source` in one step."""
    return parse_expression(tokenize(source), kind)
