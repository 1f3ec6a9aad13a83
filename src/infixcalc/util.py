from enum import Enum
from functools import wraps
import math


class ErrorKind(Enum):
    NONE = 'none'
    SYNTAX = 'syntax'
    DIVIDE_BY_ZERO = 'divide by zero'
    DOMAIN = 'domain'
    STACK_OVERFLOW = 'stack overflow'


class AngleMode(Enum):
    DEGREES = 'DEG'
    RADIANS = 'RAD'

    def toggled(self):
        '''
        Return the other angle mode.
        '''
        if self is AngleMode.DEGREES:
            return AngleMode.RADIANS
        return AngleMode.DEGREES


# Not an error kind: shown for infinite results.
OVERFLOW_MESSAGE = 'Error: Overflow'


class CalculatorError(Exception):
    '''
    Base of every error that ends up on the display.

    The first argument is the display message, the second the error kind.
    '''
    KIND = ErrorKind.SYNTAX
    MESSAGE = 'Syntax Error: Invalid expression'

    def __init__(self, message=None):
        super().__init__(message or type(self).MESSAGE, type(self).KIND)

    def __str__(self):
        return self.message

    @property
    def message(self):
        return self.args[0]

    @property
    def kind(self):
        return self.args[1]


class InvalidExpression(CalculatorError):
    pass


class MismatchedParentheses(InvalidExpression):
    MESSAGE = 'Syntax Error: Mismatched parentheses'


class DivisionByZero(CalculatorError):
    KIND = ErrorKind.DIVIDE_BY_ZERO
    MESSAGE = 'Math Error: Division by zero'


class DomainError(CalculatorError):
    KIND = ErrorKind.DOMAIN
    MESSAGE = 'Math Error: Domain error (e.g., sqrt(-1))'


class StackOverflow(CalculatorError):
    KIND = ErrorKind.STACK_OVERFLOW
    MESSAGE = 'Error: Operator stack overflow'


def wrap_math_errors(overflow=math.inf):
    '''
    Decorator that converts math module exceptions to IEEE results.

    Domain errors become NaN, overflows become ``overflow``. Passes through
    CalculatorErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except ValueError:
                return math.nan
            except OverflowError:
                return overflow
        return wrapper
    return decorator
