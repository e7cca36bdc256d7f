'''
Calculator facade tests
'''

import regex

from prefix.util import (MalformedExpressionError, UnknownTokenError,
                         IndexOutOfRangeError, WRONG_FORMAT, UNKNOWN_TOKEN)
from prefix.calculator import Calculator, ErrorKind, Outcome

from pytest import raises, mark


@mark.parametrize('expression, expected', [
    ('^ 5 2', '^ 5 2 => 25'),
    ('* 5 2', '* 5 2 => 10'),
    ('/ 5 2', '/ 5 2 => 2.5'),
    ('% 5 2', '% 5 2 => 1'),
    ('+ 5 2', '+ 5 2 => 7'),
    ('- 5 2', '- 5 2 => 3'),
    ('3', '3 => 3'),
    ('- 2 5', '- 2 5 => -3'),
    ('+ -1.5 0.25', '+ -1.5 0.25 => -1.25'),
])
def test_calculate(calculator, expression, expected):
    assert calculator.calculate(expression) == expected


@mark.parametrize('expression, expected', [
    ('+ 3 / * 12 0.5 2', '+ 3 / * 12 0.5 2 => 6'),
    ('- 8 % 5 4', '- 8 % 5 4 => 7'),
    ('+ / ^ 19 2 4 35', '+ / ^ 19 2 4 35 => 125.25'),
])
def test_calculate_compound(calculator, expression, expected):
    assert calculator.calculate(expression) == expected


def test_keeps_expression_text(calculator):
    assert calculator.calculate('+  1   2') == '+  1   2 => 3'


@mark.parametrize('expression', [
    'n',
    '/ 5 0',
    '% 5 0',
    '8 / 6',
    '/ 4',
    '- 5 7 3',
    '',
    '   ',
    '^ -8 0.5',
    '^ 10 400',
    '1e999',
])
def test_wrong_format(calculator, expression):
    with raises(MalformedExpressionError,
                match='^' + regex.escape(WRONG_FORMAT) + '$'):
        calculator.calculate(expression)


@mark.parametrize('expression', ['- n 7', '* 1 orange', '+ 1 2x'])
def test_unknown_token(calculator, expression):
    with raises(UnknownTokenError,
                match='^' + regex.escape(UNKNOWN_TOKEN) + '$'):
        calculator.calculate(expression)


def test_error_keeps_cause(calculator):
    with raises(MalformedExpressionError) as excinfo:
        calculator.calculate('/ 5 0')
    assert 'by zero' in excinfo.value.__cause__.args[0]


def test_failures_not_recorded(calculator):
    calculator.calculate('+ 1 1')
    for expression in ['/ 5 0', '- n 7', '']:
        calculator.try_calculate(expression)
    assert calculator.get_expression_history() == ['+ 1 1 => 2']


def test_try_calculate(calculator):
    assert calculator.try_calculate('^ 5 2') == Outcome('^ 5 2 => 25',
                                                        None, None)
    assert calculator.try_calculate('/ 5 0') == \
        Outcome(None, ErrorKind.WRONG_FORMAT, WRONG_FORMAT)
    assert calculator.try_calculate('- n 7') == \
        Outcome(None, ErrorKind.UNKNOWN_TOKEN, UNKNOWN_TOKEN)


def test_get_expression_history(calculator):
    calculator.calculate('/ 10 5')
    calculator.calculate('+ 5 3')
    calculator.calculate('* 9 1')
    assert calculator.get_expression_history() == ['* 9 1 => 9',
                                                   '+ 5 3 => 8',
                                                   '/ 10 5 => 2']


def test_update_expression_history(calculator):
    calculator.calculate('/ 10 5')
    calculator.calculate('+ 5 3')
    calculator.calculate('* 9 1')
    calculator.update_expression_history(2)
    assert calculator.get_expression_history() == ['/ 10 5 => 2',
                                                   '* 9 1 => 9',
                                                   '+ 5 3 => 8']


def test_update_expression_history_out_of_range(calculator):
    calculator.calculate('+ 5 3')
    with raises(IndexOutOfRangeError):
        calculator.update_expression_history(1)


def test_history_length(calculator):
    assert calculator.get_history_length() == 3
    for expression in ['+ 1 1', '+ 1 2', '+ 1 3', '+ 1 4']:
        calculator.calculate(expression)
    assert calculator.get_expression_history() == ['+ 1 4 => 5',
                                                   '+ 1 3 => 4',
                                                   '+ 1 2 => 3']
    calculator.set_history_length(1)
    assert calculator.get_history_length() == 1
    assert calculator.get_expression_history() == ['+ 1 4 => 5']


def test_history_length_must_be_positive(calculator):
    with raises(ValueError):
        calculator.set_history_length(0)
    assert calculator.get_history_length() == 3


def test_same_expression_twice(calculator):
    calculator.calculate('+ 1 1')
    calculator.calculate('+ 1 1')
    assert calculator.get_expression_history() == ['+ 1 1 => 2'] * 2


def test_clear_history(calculator):
    calculator.calculate('+ 1 1')
    calculator.clear_history()
    assert calculator.get_expression_history() == []


def test_default_history_length():
    assert Calculator().get_history_length() == \
        Calculator.DEFAULT_HISTORY_LENGTH


def test_histories_are_separate():
    first, second = Calculator(), Calculator()
    first.calculate('+ 1 1')
    assert second.get_expression_history() == []


def test_small_results_are_positional(calculator):
    assert calculator.calculate('/ 1 100000') == '/ 1 100000 => 0.00001'


def test_errors_carry_their_class_message(calculator):
    assert MalformedExpressionError.message == WRONG_FORMAT
    assert UnknownTokenError.message == UNKNOWN_TOKEN
    for expression, cls in [('/ 5 0', MalformedExpressionError),
                            ('- n 7', UnknownTokenError)]:
        with raises(cls) as excinfo:
            calculator.calculate(expression)
        assert excinfo.value.args == (cls.message,)
