from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .util import EmptyInputError
from .expression import OPERATORS


class TokenKind(Enum):
    NUMBER = 'number'
    OPERATOR = 'operator'
    UNKNOWN = 'unknown'


Token = namedtuple('Token', ['kind', 'text', 'value'])
Token.__doc__ = '''
One whitespace-delimited piece of an expression.

value is the parsed float for numbers, None otherwise.
'''


class Lexer:
    '''
    Lexer for the prefix calculator's *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Digits, with an optional fractional part
    MANTISSA = r'''
                (?:
                    # 1, 12, 1. (notice trailing dot), 1.3
                    \d+
                    (?:
                        \.
                        \d*
                    )?
                )|(?:
                    # .2
                    \.
                    \d+
                )
                '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+-]?
              (?:{MANTISSA})
              (?:
                  # 1e3, 2.5E-2
                  [eE]
                  [+-]?
                  \d+
              )?
              '''.format(MANTISSA=MANTISSA)

    assert not [symbol
                for symbol
                in OPERATORS
                if len(symbol) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    # Anything between spaces
    PIECE = r'\S+'

    # All possible lexemes.
    LEXEME = r'(?<operator>' + OPERATOR + r')|' \
             r'(?<number>' + NUMBER + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all its tokens, in order.

        Unrecognized pieces become UNKNOWN tokens; judging them is the
        validator's job.
        '''
        tokens = [self.classify(piece)
                  for piece
                  in regex.findall(type(self).PIECE, line)]
        if not tokens:
            raise EmptyInputError('Nothing to lex in {0!r}'.format(line))
        return tokens

    def classify(self, text):
        '''
        Turn one piece of text into a token.

        Operators win over numbers, so a lone - is subtraction and -5 is a
        number.
        '''
        match = regex.fullmatch(type(self).LEXEME, text,
                                flags=type(self).FLAGS)
        if match is None:
            return Token(TokenKind.UNKNOWN, text, None)
        groups = self.matchedgroups(match)
        if 'operator' in groups:
            return Token(TokenKind.OPERATOR, text, None)
        return Token(TokenKind.NUMBER, text, float(text))

    def matchedgroups(self, match):
        '''
        Return the named groups that took part in the match.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
