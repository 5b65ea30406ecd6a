"""Application engine for qlisp.

This module centralizes function application semantics for the evaluator:
- Builtins are invoked with the calling environment and their arguments; any
  runtime diagnostic they raise becomes an Error value.
- Closures bind arguments to formals in a fresh frame whose outer link is the
  caller's environment, so the closure's stored environment is never mutated.
- Supplying fewer arguments than formals returns a partially-applied Closure.
- A `&` formal collects every remaining argument into a Q-expression.
"""

from __future__ import annotations

from typing import Callable

from qlisp import Value
from qlisp.errors import QLispRuntimeError, ArityMismatch, InvalidFormals
from qlisp.types.node import Expression, Identifier
from qlisp.types.function import Function, Builtin, Closure
from qlisp.types.environment import Environment
from qlisp.types.error import Error

VARIADIC = Identifier("&")

BodyEvaluator = Callable[[Expression, Environment], Value]


def _bind_variadic(formals: list[Identifier], rest: list[Value], frame: Environment) -> None:
    """Bind the name following `&` (formals[0] is the marker) to `rest`."""
    if len(formals) != 2 or formals[1] == VARIADIC:
        raise InvalidFormals("`&` not followed by a single symbol")
    frame.put(formals[1], Expression.qexpr(rest))


def apply_closure(
    fn: Closure,
    args: list[Value],
    caller_env: Environment,
    evaluate_body: BodyEvaluator,
) -> Value:
    """Apply a user-defined Closure.

    Parameters:
    - fn: The Closure being applied.
    - args: The already-evaluated argument values.
    - caller_env: The environment the call originates from; used as the
      lookup fallback for the duration of this call only.
    - evaluate_body: Evaluates the body as an S-expression in the call frame.

    Raises ArityMismatch on surplus arguments and InvalidFormals on a
    malformed `&`; `apply` turns both into Error values.
    """
    formals = list(fn.formals)
    given = list(args)
    total = len(formals)
    frame = fn.env.extend(caller_env)

    while given:
        if not formals:
            raise ArityMismatch("fn", total, len(args))
        name = formals.pop(0)
        if name == VARIADIC:
            _bind_variadic([name, *formals], given, frame)
            formals, given = [], []
            break
        frame.put(name, given.pop(0))

    # Variadic never triggered: bind its name to an empty list
    if formals and formals[0] == VARIADIC:
        _bind_variadic(formals, [], frame)
        formals = []

    if formals:
        # Under-application: keep what is bound so far, without the caller link
        bound = Environment()
        bound.vars.update(frame.vars)
        return Closure(tuple(formals), fn.body, bound)

    return evaluate_body(fn.body, frame)


def apply(
    head: Function,
    args: list[Value],
    env: Environment,
    evaluate_body: BodyEvaluator,
) -> Value:
    """Apply either a Builtin or a Closure; never raises runtime diagnostics."""
    try:
        if isinstance(head, Builtin):
            return head.fn(env, args)
        return apply_closure(head, args, env, evaluate_body)
    except QLispRuntimeError as e:
        return Error(e)
