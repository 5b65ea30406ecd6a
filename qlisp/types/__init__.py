from qlisp.types.node import Node, Number, String, Identifier, Expression, S_EXPR, Q_EXPR
from qlisp.types.function import Function, Builtin, Closure
from qlisp.types.error import Error
from qlisp.types.environment import Environment

__all__ = [
    "Node",
    "Number",
    "String",
    "Identifier",
    "Expression",
    "S_EXPR",
    "Q_EXPR",
    "Function",
    "Builtin",
    "Closure",
    "Error",
    "Environment",
]
