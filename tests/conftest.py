from pytest import Item, fixture

from prefix.calculator import Calculator
from prefix.lexer import Lexer


@fixture
def calculator() -> Calculator:
    '''
    Fresh calculator, with the three entry history the examples assume.
    '''
    return Calculator(history_length=3)


@fixture
def lexer() -> Lexer:
    return Lexer()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))
