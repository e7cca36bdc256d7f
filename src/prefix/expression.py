'''
Expression trees and their evaluation.

A tree is a tagged union of two node kinds: NumberLeaf, which is terminal,
and BinaryOp, which always has exactly two children. Evaluation is a single
recursive function over the union.
'''

from collections import namedtuple
from decimal import Decimal
import operator
import math

from .util import DivisionByZeroError, wrap_user_errors


NumberLeaf = namedtuple('NumberLeaf', ['value'])
BinaryOp = namedtuple('BinaryOp', ['operator', 'left', 'right'])


def _divide(left, right):
    if right == 0:
        raise DivisionByZeroError('Division of {} by zero'.format(left))
    return operator.__truediv__(left, right)


def _modulo(left, right):
    if right == 0:
        raise DivisionByZeroError('Modulo of {} by zero'.format(left))
    # Remainder takes the sign of the dividend, unlike Python's %.
    return math.fmod(left, right)


# Binary operators by symbol. Insertion order is the order shown in help.
OPERATORS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': _divide,
    '%': _modulo,
    '^': math.pow,
}


@wrap_user_errors('Cannot apply {0} to {1} and {2}')
def apply(symbol, left, right):
    '''
    Apply the binary operator named by symbol.
    '''
    return OPERATORS[symbol](left, right)


def evaluate(node):
    '''
    Evaluate an expression tree to a float.
    '''
    if isinstance(node, NumberLeaf):
        return node.value
    left = evaluate(node.left)
    right = evaluate(node.right)
    return apply(node.operator, left, right)


def format_number(value):
    '''
    Render a result: integral values without a decimal point, everything
    else as the shortest decimal that reads back as the same float.

    Always positional, never scientific: 1e-05 renders as 0.00001.
    '''
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), 'f')


def count_nodes(node):
    '''
    Return (internal, leaves) node counts of a tree.
    '''
    if isinstance(node, NumberLeaf):
        return 0, 1
    linternal, lleaves = count_nodes(node.left)
    rinternal, rleaves = count_nodes(node.right)
    return linternal + rinternal + 1, lleaves + rleaves


def render(node):
    '''
    Render a tree back into prefix notation.
    '''
    if isinstance(node, NumberLeaf):
        return format_number(node.value)
    return ' '.join([node.operator, render(node.left), render(node.right)])
