from collections import deque

from .util import (InsufficientOperandsError, MalformedExpressionError,
                   UnknownTokenError)
from .lexer import TokenKind
from .expression import NumberLeaf, BinaryOp


def build(tokens):
    '''
    Reduce prefix tokens into an expression tree, returning its root.

    Scans right to left, so every operator finds its operands already built
    on the stack. The first node popped is the left child.
    '''
    stack = deque()
    for token in reversed(tokens):
        if token.kind is TokenKind.NUMBER:
            stack.append(NumberLeaf(token.value))
        elif token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise InsufficientOperandsError(
                    'Less than 2 operands for {}'.format(token.text))
            left = stack.pop()
            right = stack.pop()
            stack.append(BinaryOp(token.text, left, right))
        else:
            raise UnknownTokenError('Cannot build {0!r}'.format(token.text))
    if len(stack) != 1:
        raise MalformedExpressionError(
            '{} expressions left unconsumed'.format(len(stack)))
    return stack.pop()
