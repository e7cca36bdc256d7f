from collections import namedtuple
from enum import Enum
import logging
import math

from .util import (PrefixError, MalformedExpressionError, UnknownTokenError,
                   WRONG_FORMAT, UNKNOWN_TOKEN)
from .lexer import Lexer
from .validator import validate
from .builder import build
from .expression import evaluate, format_number
from .history import HistoryCache


logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    WRONG_FORMAT = WRONG_FORMAT
    UNKNOWN_TOKEN = UNKNOWN_TOKEN


Outcome = namedtuple('Outcome', ['result', 'kind', 'message'])
Outcome.__doc__ = '''
Result of Calculator.try_calculate.

On success, kind and message are None. On failure, result is None.
'''


class Calculator:
    '''
    Prefix notation calculator.

    Evaluates expressions like "+ 3 / * 12 0.5 2" and remembers a bounded
    number of past results, most recent first. The history is the only state
    and belongs to this instance.
    '''

    DEFAULT_HISTORY_LENGTH = 10
    SEPARATOR = ' => '

    def __init__(self, history_length=None):
        '''
        Create calculator with empty history.

        :param history_length: History capacity, at least 1.
        '''
        if history_length is None:
            history_length = type(self).DEFAULT_HISTORY_LENGTH
        self.lexer = Lexer()
        self.history = HistoryCache(history_length)

    def parse(self, expression):
        '''
        Lex, validate and build expression into a tree.

        Raises the internal error classes, with details.
        '''
        tokens = self.lexer.lex(expression)
        logger.debug('lexed %r into %d token(s)', expression, len(tokens))
        validate(tokens)
        return build(tokens)

    def _calculate(self, expression):
        tree = self.parse(expression)
        value = evaluate(tree)
        if not math.isfinite(value):
            raise MalformedExpressionError(
                '{!r} does not evaluate to a finite number'.format(expression))
        result = expression + type(self).SEPARATOR + format_number(value)
        self.history.record(result)
        logger.debug('recorded %r', result)
        return result

    def calculate(self, expression):
        '''
        Evaluate expression, record and return "<expression> => <result>".

        Unknown tokens raise UnknownTokenError, every other bad input raises
        MalformedExpressionError, each with its fixed user message.
        '''
        try:
            return self._calculate(expression)
        except UnknownTokenError as e:
            logger.debug('rejected %r: %s', expression, e.args[0])
            raise UnknownTokenError(UnknownTokenError.message) from e
        except MalformedExpressionError as e:
            logger.debug('rejected %r: %s', expression, e.args[0])
            raise MalformedExpressionError(
                MalformedExpressionError.message) from e

    def try_calculate(self, expression):
        '''
        Like calculate, but return an Outcome instead of raising.
        '''
        try:
            return Outcome(self.calculate(expression), None, None)
        except UnknownTokenError as e:
            return Outcome(None, ErrorKind.UNKNOWN_TOKEN, e.args[0])
        except MalformedExpressionError as e:
            return Outcome(None, ErrorKind.WRONG_FORMAT, e.args[0])

    def get_expression_history(self):
        '''
        Return past results, most recent first.
        '''
        return self.history.snapshot()

    def set_history_length(self, length):
        '''
        Set history capacity, dropping the oldest entries that no longer fit.
        '''
        self.history.capacity = length

    def get_history_length(self):
        return self.history.capacity

    def update_expression_history(self, index):
        '''
        Move the history entry at index to the front.
        '''
        self.history.promote(index)

    def clear_history(self):
        self.history.clear()


__all__ = 'Calculator', 'ErrorKind', 'Outcome', 'PrefixError'
