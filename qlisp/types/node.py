"""Value model for qlisp.

Every runtime value is a Node. The set of variants is closed:

    - Number      -> 64-bit float
    - String      -> immutable text
    - Identifier  -> bare name, evaluated by environment lookup
    - Expression  -> ordered children plus a kind, S (applied) or Q (quoted)
    - Function    -> Builtin or Closure (qlisp.types.function)
    - Error       -> wrapped runtime diagnostic (qlisp.types.error)

Each variant reports a `type_name` for diagnostics and renders its canonical
display form through `__str__`. Evaluation lives in qlisp.evaluation.evaluator.
"""

from __future__ import annotations

import math
import sys
from typing import Iterable, Iterator

S_EXPR = "S"
Q_EXPR = "Q"

_BRACKETS = {S_EXPR: ("(", ")"), Q_EXPR: ("{", "}")}

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def format_number(value: float) -> str:
    """Shortest decimal that reads back as the same float; integral values drop '.0'."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def quote_string(text: str) -> str:
    out: list[str] = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            code = ord(ch)
            if code < 0x100:
                out.append(f"\\x{code:02x}")
            elif code < 0x10000:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
    return '"' + "".join(out) + '"'


class Node:
    __slots__ = ()
    type_name = "Node"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class Number(Node):
    __slots__ = ("value",)
    type_name = "Number"

    def __init__(self, value: float):
        self.value = float(value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return format_number(self.value)


class String(Node):
    __slots__ = ("value",)
    type_name = "String"

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, String) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __add__(self, other: String) -> String:
        return String(self.value + other.value)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return quote_string(self.value)


class Identifier(Node):
    __slots__ = ("name",)
    type_name = "Identifier"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash for environment keys
        self.name = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Identifier) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


class Expression(Node):
    """An S- or Q-expression. The kind is fixed once the node is built."""

    __slots__ = ("_kind", "children")

    def __init__(self, kind: str, children: Iterable[Node] = ()):
        if kind not in _BRACKETS:
            raise ValueError(f"unknown expression kind {kind!r}")
        self._kind = kind
        self.children: tuple[Node, ...] = tuple(children)

    @classmethod
    def sexpr(cls, children: Iterable[Node] = ()) -> Expression:
        return cls(S_EXPR, children)

    @classmethod
    def qexpr(cls, children: Iterable[Node] = ()) -> Expression:
        return cls(Q_EXPR, children)

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def type_name(self) -> str:
        return "S-Expression" if self._kind == S_EXPR else "Q-Expression"

    @property
    def is_quoted(self) -> bool:
        return self._kind == Q_EXPR

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Expression)
            and self._kind == other._kind
            and self.children == other.children
        )

    def __hash__(self) -> int:
        return hash((self._kind, self.children))

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __str__(self) -> str:
        open_, close = _BRACKETS[self._kind]
        return open_ + " ".join(str(c) for c in self.children) + close
