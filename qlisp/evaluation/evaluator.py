"""Core evaluator for the qlisp interpreter.

Evaluation is total: every call returns a Node, runtime failures come back
as Error values. Recursion depth follows expression and call nesting; there
is no tail-call elimination, so very deep recursion ends in RecursionError.
"""

from __future__ import annotations

import logging

from qlisp import Value, Expr
from qlisp.errors import UnknownIdentifier, NotAFunction
from qlisp.reader.parser import read
from qlisp.types.node import Number, String, Identifier, Expression, S_EXPR, Q_EXPR
from qlisp.types.function import Function
from qlisp.types.environment import Environment
from qlisp.types.error import Error
from qlisp.evaluation.apply import apply

logger = logging.getLogger(__name__)


def evaluate_node(expr: Expr, env: Environment) -> Value:
    """Evaluate a single node against `env`."""
    match expr:
        case Identifier():
            try:
                return env.get(expr)
            except UnknownIdentifier as e:
                return Error(e)
        case Expression() if expr.is_quoted:
            return expr
        case Expression():
            return eval_sexpr(expr, env)
        case Number() | String() | Function() | Error():
            return expr
    raise TypeError(f"cannot evaluate {expr!r}")


def eval_sexpr(expr: Expression, env: Environment) -> Value:
    """Evaluate `expr` as an S-expression, whatever its stored kind.

    Children are evaluated left to right and the first Error stops the rest.
    A single result is returned as-is, so `(5)` is `5`.
    """
    if not expr.children:
        return expr

    values: list[Value] = []
    for child in expr.children:
        value = evaluate_node(child, env)
        if isinstance(value, Error):
            return value
        values.append(value)

    if len(values) == 1:
        return values[0]

    head, *args = values
    if not isinstance(head, Function):
        return Error(NotAFunction(head.type_name))
    return apply(head, args, env, eval_sexpr)


def evaluate(env: Environment, source: str, multi_statement: bool = False) -> Value:
    """Read and evaluate `source`.

    With `multi_statement`, the input is read as a Q-expression and each top
    level item is evaluated in turn; the first Error aborts and is returned,
    otherwise the empty S-expression is returned. Without it the input is one
    S-expression evaluated once.

    Raises QLispLexError / QLispSyntaxError for malformed input.
    """
    if not multi_statement:
        return eval_sexpr(read(source, S_EXPR), env)

    program = read(source, Q_EXPR)
    logger.debug("evaluating %d top-level forms", len(program))
    for form in program:
        result = evaluate_node(form, env)
        if isinstance(result, Error):
            logger.debug("load aborted: %s", result.message)
            return result
    return Expression.sexpr()
