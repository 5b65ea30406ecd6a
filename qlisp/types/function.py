"""Function values: native builtins and user-defined closures."""

from __future__ import annotations

from io import StringIO

from qlisp import NativeFn
from qlisp.types.node import Node, Expression, Identifier
from qlisp.types.environment import Environment


class Function(Node):
    __slots__ = ()
    type_name = "Function"


class Builtin(Function):
    """A fixed native operation, called with (environment, arguments)."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __str__(self) -> str:
        return "<builtin>"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"


class Closure(Function):
    """A user-defined function with formal parameters, body, and private environment.

    The environment holds arguments already bound by partial application; its
    `outer` link is never set, the caller's environment is supplied per call.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(
        self,
        formals: tuple[Identifier, ...],
        body: Expression,
        env: Environment | None = None,
    ):
        self.formals: tuple[Identifier, ...] = tuple(formals)
        self.body: Expression = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()
