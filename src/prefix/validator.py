from .util import MalformedExpressionError, UnknownTokenError
from .lexer import TokenKind


def validate(tokens):
    '''
    Check that tokens can form exactly one binary expression tree.

    Prefix expressions need one more operand than operators, and operators
    may never fall behind operands before the final two tokens. Otherwise,
    operands run out before their operators, or tokens trail the root.

    A lone unrecognized token is not an expression at all, so it is
    malformed rather than unknown.
    '''
    if len(tokens) == 1 and tokens[0].kind is TokenKind.UNKNOWN:
        raise MalformedExpressionError(
            'Lone token {0!r} is not an expression'.format(tokens[0].text))

    operands = operators = 0
    for i, token in enumerate(tokens):
        if token.kind is TokenKind.UNKNOWN:
            raise UnknownTokenError(
                'Unknown token {0!r} at position {1}'.format(token.text, i))
        if token.kind is TokenKind.OPERATOR:
            operators += 1
        else:
            operands += 1
        if i < len(tokens) - 2 and operands > operators:
            raise MalformedExpressionError(
                '{0} operand(s) but only {1} operator(s) by position {2}'
                .format(operands, operators, i))

    if operands != operators + 1:
        raise MalformedExpressionError(
            '{0} operand(s) need exactly {1} operator(s), got {2}'
            .format(operands, operands - 1, operators))
