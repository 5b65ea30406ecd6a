"""Built-in functions for the qlisp runtime environment.

Every builtin receives the calling Environment and a list of already
evaluated arguments. Argument problems are raised as QLispRuntimeError
subclasses; the application engine turns them into Error values.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from qlisp import Value, NativeFn
from qlisp.errors import (
    ArityMismatch,
    TypeMismatch,
    EmptyList,
    DivisionByZero,
    Uncomparable,
)
from qlisp.types.node import Node, Number, String, Identifier, Expression
from qlisp.types.function import Function, Builtin, Closure
from qlisp.types.environment import Environment
from qlisp.types.error import Error
from qlisp.evaluation.evaluator import evaluate_node, eval_sexpr
from qlisp.modules.loader import import_module

TRUE = Number(1)
FALSE = Number(0)

# -------------------------------
# Argument checks
# -------------------------------
def _expect_count(name: str, args: list[Value], n: int) -> None:
    if len(args) != n:
        raise ArityMismatch(name, n, len(args))


def _expect_at_least(name: str, args: list[Value], n: int) -> None:
    if len(args) < n:
        raise ArityMismatch(name, f"at least {n}", len(args))


def _expect_number(name: str, value: Value) -> float:
    if not isinstance(value, Number):
        raise TypeMismatch(name, Number.type_name, value.type_name)
    return value.value


def _expect_qexpr(name: str, value: Value) -> Expression:
    if not (isinstance(value, Expression) and value.is_quoted):
        raise TypeMismatch(name, "Q-Expression", value.type_name)
    return value


def _expect_identifiers(name: str, names: Expression) -> list[Identifier]:
    for sym in names:
        if not isinstance(sym, Identifier):
            raise TypeMismatch(name, Identifier.type_name, sym.type_name)
    return list(names)


def _boolean(flag: bool) -> Number:
    return TRUE if flag else FALSE


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Value]) -> Value:
    return Number(sum(_expect_number("+", a) for a in args))


def sub(env: Environment, args: list[Value]) -> Value:
    _expect_at_least("-", args, 1)
    nums = [_expect_number("-", a) for a in args]
    if len(nums) == 1:
        return Number(-nums[0])
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return Number(result)


def mul(env: Environment, args: list[Value]) -> Value:
    result = 1.0
    for x in [_expect_number("*", a) for a in args]:
        result *= x
    return Number(result)


def div(env: Environment, args: list[Value]) -> Value:
    _expect_at_least("/", args, 1)
    nums = [_expect_number("/", a) for a in args]
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise DivisionByZero("/")
        result /= x
    return Number(result)


def mod(env: Environment, args: list[Value]) -> Value:
    _expect_count("mod", args, 2)
    a, b = (_expect_number("mod", x) for x in args)
    if b == 0:
        raise DivisionByZero("mod")
    return Number(math.fmod(a, b))


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op) -> NativeFn:
    def compare(env: Environment, args: list[Value]) -> Value:
        _expect_count(name, args, 2)
        a, b = (_expect_number(name, x) for x in args)
        return _boolean(op(a, b))

    compare.__name__ = f"compare_{name}"
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: Node, b: Node) -> bool:
    """Structural equality. Different variants are unequal; functions and
    errors cannot be compared at all."""
    if isinstance(a, (Function, Error)):
        raise Uncomparable(a.type_name)
    if isinstance(b, (Function, Error)):
        raise Uncomparable(b.type_name)
    if a.type_name != b.type_name:
        return False
    if isinstance(a, Expression):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def equals(env: Environment, args: list[Value]) -> Value:
    _expect_at_least("=", args, 2)
    first = args[0]
    return _boolean(all(is_equal(first, other) for other in args[1:]))


def not_equals(env: Environment, args: list[Value]) -> Value:
    _expect_at_least("!=", args, 2)
    first = args[0]
    return _boolean(not all(is_equal(first, other) for other in args[1:]))


# -------------------------------
# List operations
# -------------------------------
def head(env: Environment, args: list[Value]) -> Value:
    _expect_count("head", args, 1)
    target = args[0]
    if isinstance(target, String):
        if not target.value:
            raise EmptyList("head")
        return String(target.value[:1])
    lst = _expect_qexpr("head", target)
    if not lst.children:
        raise EmptyList("head")
    return Expression.qexpr(lst.children[:1])


def tail(env: Environment, args: list[Value]) -> Value:
    _expect_count("tail", args, 1)
    target = args[0]
    if isinstance(target, String):
        if not target.value:
            raise EmptyList("tail")
        return String(target.value[1:])
    lst = _expect_qexpr("tail", target)
    if not lst.children:
        raise EmptyList("tail")
    return Expression.qexpr(lst.children[1:])


def list_builtin(env: Environment, args: list[Value]) -> Value:
    return Expression.qexpr(args)


def join(env: Environment, args: list[Value]) -> Value:
    _expect_at_least("join", args, 1)
    if isinstance(args[0], String):
        result = String("")
        for a in args:
            if not isinstance(a, String):
                raise TypeMismatch("join", String.type_name, a.type_name)
            result = result + a
        return result
    children: list[Node] = []
    for a in args:
        children.extend(_expect_qexpr("join", a))
    return Expression.qexpr(children)


def eval_builtin(env: Environment, args: list[Value]) -> Value:
    _expect_count("eval", args, 1)
    target = args[0]
    if isinstance(target, Expression):
        return eval_sexpr(target, env)
    return evaluate_node(target, env)


# -------------------------------
# Definitions and functions
# -------------------------------
def _bind(name: str, env: Environment, args: list[Value], global_scope: bool) -> Value:
    _expect_at_least(name, args, 1)
    names = _expect_identifiers(name, _expect_qexpr(name, args[0]))
    values = args[1:]
    if len(names) != len(values):
        raise ArityMismatch(name, len(names), len(values))
    for sym, value in zip(names, values):
        if global_scope:
            env.define(sym, value)
        else:
            env.put(sym, value)
    return Expression.sexpr()


def define(env: Environment, args: list[Value]) -> Value:
    return _bind("def", env, args, global_scope=True)


def let(env: Environment, args: list[Value]) -> Value:
    return _bind("let", env, args, global_scope=False)


def fn(env: Environment, args: list[Value]) -> Value:
    _expect_count("fn", args, 2)
    formals = _expect_identifiers("fn", _expect_qexpr("fn", args[0]))
    body = _expect_qexpr("fn", args[1])
    return Closure(tuple(formals), body)


# -------------------------------
# Control flow and modules
# -------------------------------
def if_builtin(env: Environment, args: list[Value]) -> Value:
    _expect_count("if", args, 3)
    cond = _expect_number("if", args[0])
    then_branch = _expect_qexpr("if", args[1])
    else_branch = _expect_qexpr("if", args[2])
    return eval_sexpr(then_branch if cond != 0 else else_branch, env)


def import_builtin(env: Environment, args: list[Value]) -> Value:
    _expect_count("import", args, 1)
    name = args[0]
    if not isinstance(name, String):
        raise TypeMismatch("import", String.type_name, name.type_name)
    return import_module(env, name.value)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: Mapping[str, NativeFn] = MappingProxyType({
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    'mod': mod,
    '<': lt,
    '<=': lte,
    '>': gt,
    '>=': gte,
    '=': equals,
    '!=': not_equals,
    'head': head,
    'tail': tail,
    'list': list_builtin,
    'join': join,
    'eval': eval_builtin,
    'def': define,
    'let': let,
    'fn': fn,
    'if': if_builtin,
    'import': import_builtin,
})


def register(env: Environment) -> None:
    env.update((Identifier(name), Builtin(name, op)) for name, op in BUILTINS.items())
