from qlisp.reader.lexer import Token, lex, tokenize
from qlisp.reader.parser import parse_expression, read

__all__ = ["Token", "lex", "tokenize", "parse_expression", "read"]
