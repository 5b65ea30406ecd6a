"""Runtime environment for qlisp.

The Environment maps Identifiers to values and chains to an optional `outer`
environment for lookup. Three write modes exist:

    - put:    bind in this frame only (parameters, `let`)
    - define: bind in the root frame (`def`), found by walking `outer`
    - update: bulk `put`, used to install builtins

Rebinding a name in the same frame silently overwrites it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from qlisp import Value
from qlisp.errors import UnknownIdentifier
from qlisp.types.node import Identifier


class Environment:
    """Hierarchical mapping from Identifiers to qlisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Identifier, Value] = {}
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, name: Identifier) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Identifier) -> Value:
        """Look up `name` here, then in each outer frame.

        Raises UnknownIdentifier if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnknownIdentifier(name.name)
        return env.vars[name]

    def put(self, name: Identifier, value: Value) -> None:
        self.vars[name] = value

    def define(self, name: Identifier, value: Value) -> None:
        self.root().vars[name] = value

    def update(self, bindings: Iterable[tuple[Identifier, Value]]) -> None:
        for k, v in bindings:
            self.vars[k] = v

    def extend(self, outer: Optional[Environment]) -> Environment:
        """Copy this frame's bindings into a new frame chained to `outer`."""
        env = Environment(outer)
        env.vars.update(self.vars)
        return env

    def __contains__(self, name: Identifier) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
