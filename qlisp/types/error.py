from __future__ import annotations

from qlisp.errors import QLispError
from qlisp.types.node import Node


class Error(Node):
    """Error value. Once produced it short-circuits every enclosing evaluation."""

    __slots__ = ("diagnostic",)
    type_name = "Error"

    def __init__(self, diagnostic: QLispError):
        self.diagnostic = diagnostic

    @property
    def message(self) -> str:
        return str(self.diagnostic)

    def __str__(self) -> str:
        return f"Error: {self.message}"
