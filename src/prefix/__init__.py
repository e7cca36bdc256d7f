'''
Prefix notation calculator.

Evaluates binary arithmetic written operator first, like "+ 3 / * 12 0.5 2",
and keeps a bounded, most recent first history of results that can be
reordered.

Supports + - * / % and ^ on floating point numbers. No variables, functions,
or precedence; the notation itself says what applies to what.

Each expression is lexed on whitespace, validated for operator/operand
balance, built into a binary tree right to left, then evaluated.
'''

from .util import (PrefixError, MalformedExpressionError, EmptyInputError,
                   InsufficientOperandsError, DivisionByZeroError,
                   UnknownTokenError, IndexOutOfRangeError)
from .cli import CLI
from .lexer import Lexer
from .calculator import Calculator, ErrorKind, Outcome


__all__ = ('Calculator', 'ErrorKind', 'Outcome', 'Lexer', 'CLI',
           'PrefixError', 'MalformedExpressionError', 'EmptyInputError',
           'InsufficientOperandsError', 'DivisionByZeroError',
           'UnknownTokenError', 'IndexOutOfRangeError')
