# Core type aliases for the qlisp data model.
# Every runtime value is a Node (see qlisp.types.node): numbers, strings,
# identifiers, S/Q expressions, functions and error values.
#
# Naming guidance:
# - Expr:  use in reader/parser code to denote a parsed expression tree.
# - Value: use in evaluator/runtime code to denote an evaluated result.
# Both aliases resolve to `Any` so the type modules can import them without cycles.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Parsed expression alias (interchangeable with Value)
Expr = Value

# Native operation signature: (calling environment, evaluated arguments) -> value
NativeFn = Callable[..., Value]

__version__ = "0.3.0"
