"""Exception hierarchy for qlisp.

Lexical and syntactic errors are raised to whoever called the reader.
Runtime diagnostics are raised inside builtins and lookups, then wrapped into
Error values by the evaluator so evaluation itself never raises them.
"""

from __future__ import annotations


class QLispError(Exception):
    """ Base class for all qlisp errors"""
    pass


# -------------------------------
# Lexical tier
# -------------------------------
class QLispLexError(QLispError):
    """ Raised when the input cannot be split into tokens"""


class UnrecognizedCharacter(QLispLexError):
    """ Raised when no token pattern matches at the current input position"""

    def __init__(self, char: str):
        super().__init__(f"unexpected character in input: {char}")
        self.char = char


# -------------------------------
# Syntactic tier
# -------------------------------
class QLispSyntaxError(QLispError):
    """ Raised when the token stream does not form a valid expression"""


class UnexpectedToken(QLispSyntaxError):
    def __init__(self, token):
        super().__init__(f"unexpected token in input: {token.text}")
        self.token = token


class UnexpectedEndOfInput(QLispSyntaxError):
    def __init__(self):
        super().__init__("unexpected end of input")


class MalformedString(QLispSyntaxError):
    """ Raised when a string literal cannot be unescaped"""

    def __init__(self, literal: str, reason: str):
        super().__init__(f"malformed string literal {literal}: {reason}")
        self.literal = literal
        self.reason = reason


# -------------------------------
# Runtime tier (wrapped into Error values)
# -------------------------------
class QLispRuntimeError(QLispError):
    """ Base class for diagnostics carried by Error values"""


class UnknownIdentifier(QLispRuntimeError):
    def __init__(self, name: str):
        super().__init__(f"unknown identifier `{name}`")
        self.name = name


class TypeMismatch(QLispRuntimeError):
    def __init__(self, function: str, expected: str, actual: str):
        super().__init__(
            f"function `{function}` passed incorrect type: expected {expected}, got {actual}"
        )
        self.function = function
        self.expected = expected
        self.actual = actual


class ArityMismatch(QLispRuntimeError):
    def __init__(self, function: str, expected, actual: int):
        super().__init__(
            f"function `{function}` passed incorrect number of arguments: expected {expected}, got {actual}"
        )
        self.function = function
        self.expected = expected
        self.actual = actual


class EmptyList(QLispRuntimeError):
    def __init__(self, function: str):
        super().__init__(f"cannot take {function} of empty list")
        self.function = function


class NotAFunction(QLispRuntimeError):
    def __init__(self, actual: str):
        super().__init__(f"S-expressions should start with a function, got {actual}")
        self.actual = actual


class InvalidFormals(QLispRuntimeError):
    def __init__(self, reason: str):
        super().__init__(f"function format invalid: {reason}")
        self.reason = reason


class DivisionByZero(QLispRuntimeError):
    def __init__(self, function: str):
        super().__init__("division by zero")
        self.function = function


class Uncomparable(QLispRuntimeError):
    def __init__(self, type_name: str):
        super().__init__(f"cannot compare values of type {type_name}")
        self.type_name = type_name


class ImportFailure(QLispRuntimeError):
    def __init__(self, path, reason: str):
        super().__init__(f"could not load module {path}: {reason}")
        self.path = path
        self.reason = reason
