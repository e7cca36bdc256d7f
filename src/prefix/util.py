from functools import wraps


WRONG_FORMAT = 'Wrong format! Please use prefix notation!'
UNKNOWN_TOKEN = 'Not a valid operator or number!'


class PrefixError(Exception):
    '''
    Root of all user (input) errors.

    Never an internal fault; callers recover by resubmitting corrected input.
    '''
    pass


class MalformedExpressionError(PrefixError):
    message = WRONG_FORMAT


class EmptyInputError(MalformedExpressionError):
    pass


class InsufficientOperandsError(MalformedExpressionError):
    pass


class DivisionByZeroError(MalformedExpressionError):
    pass


class UnknownTokenError(PrefixError):
    message = UNKNOWN_TOKEN


class IndexOutOfRangeError(PrefixError, IndexError):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts arithmetic faults to malformed expressions.

    Passes through PrefixErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except PrefixError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise MalformedExpressionError(fmt.format(*args, **kwargs),
                                               e) from e
        return wrapper
    return decorator
