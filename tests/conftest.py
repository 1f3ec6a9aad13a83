from pytest import fixture

from infixcalc.machine import Calculator
from infixcalc.util import AngleMode


@fixture
def calculator() -> Calculator:
    return Calculator()


@fixture
def radians() -> Calculator:
    return Calculator(angle_mode=AngleMode.RADIANS)


@fixture
def display(calculator: Calculator):
    '''
    Evaluate an expression on a fresh calculator and return the display.
    '''
    def evaluate(expression: str) -> str:
        calculator.evaluate(expression)
        return calculator.display
    return evaluate
