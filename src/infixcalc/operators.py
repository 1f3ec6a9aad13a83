'''
Operators and functions of the calculator language, and their arithmetic.

Every operator and function is identified by a one-character code, which is
also how it is spelt in an expression (functions by their first letter).
'''

from enum import Enum
import math
import operator

from .util import AngleMode, DivisionByZero, DomainError, wrap_math_errors


class Operator(Enum):
    LEFT_PAREN = '('

    # Binary
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    MODULO = '%'
    POWER = '^'

    # Unary functions
    SIN = 's'
    COS = 'c'
    TAN = 't'
    ASIN = 'S'
    ACOS = 'C'
    ATAN = 'T'
    LN = 'l'
    LOG10 = 'L'
    SQRT = 'q'
    FACTORIAL = '!'
    EXP = 'E'
    RECIPROCAL = 'R'
    NEGATE = 'N'

    @property
    def precedence(self):
        return PRECEDENCE.get(self, FUNCTION_PRECEDENCE)

    @property
    def right_associative(self):
        return self is Operator.POWER

    @property
    def arity(self):
        return 2 if self in BINARY else 1

    @property
    def function(self):
        return self in UNARY


def divide(a, b):
    if b == 0.0:
        raise DivisionByZero()
    return a / b


@wrap_math_errors()
def modulo(a, b):
    if b == 0.0:
        raise DivisionByZero()
    return math.fmod(a, b)


def power(a, b):
    if a == 0.0 and b < 0.0:
        return math.inf
    try:
        return math.pow(a, b)
    except ValueError:
        # Negative base, fractional exponent.
        return math.nan
    except OverflowError:
        odd = float(b).is_integer() and b % 2 == 1
        return -math.inf if a < 0.0 and odd else math.inf


def ln(a):
    if a <= 0.0:
        raise DomainError()
    return math.log(a)


def log10(a):
    if a <= 0.0:
        raise DomainError()
    return math.log10(a)


def sqrt(a):
    if a < 0.0:
        raise DomainError()
    return math.sqrt(a)


# Largest n whose factorial is a finite double.
FACTORIAL_LIMIT = 170


def factorial(a):
    '''
    Factorial of a non-negative integral float.

    Anything else, including a result too large for a float, is a domain
    error.
    '''
    if math.isnan(a) or a < 0.0 or a > FACTORIAL_LIMIT or math.floor(a) != a:
        raise DomainError()
    return float(math.factorial(int(a)))


def reciprocal(a):
    if a == 0.0:
        raise DivisionByZero()
    return 1.0 / a


BINARY = {
    Operator.ADD: operator.__add__,
    Operator.SUBTRACT: operator.__sub__,
    Operator.MULTIPLY: operator.__mul__,
    Operator.DIVIDE: divide,
    Operator.MODULO: modulo,
    Operator.POWER: power,
}

# Take their argument in the current angle mode.
TRIGONOMETRIC = {
    Operator.SIN: wrap_math_errors()(math.sin),
    Operator.COS: wrap_math_errors()(math.cos),
    Operator.TAN: wrap_math_errors()(math.tan),
}

# Give their result in the current angle mode.
INVERSE_TRIGONOMETRIC = {
    Operator.ASIN: wrap_math_errors()(math.asin),
    Operator.ACOS: wrap_math_errors()(math.acos),
    Operator.ATAN: math.atan,
}

UNARY = {
    Operator.LN: ln,
    Operator.LOG10: log10,
    Operator.SQRT: sqrt,
    Operator.FACTORIAL: factorial,
    Operator.EXP: wrap_math_errors()(math.exp),
    Operator.RECIPROCAL: reciprocal,
    Operator.NEGATE: operator.__neg__,
}
UNARY.update(TRIGONOMETRIC)
UNARY.update(INVERSE_TRIGONOMETRIC)

PRECEDENCE = {
    Operator.LEFT_PAREN: 0,
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
    Operator.MULTIPLY: 2,
    Operator.DIVIDE: 2,
    Operator.MODULO: 2,
    Operator.POWER: 3,
}
FUNCTION_PRECEDENCE = 4

# Spelling to operator, as the lexer sees them.
SYMBOLS = {op.value: op for op in BINARY}
FUNCTIONS = {op.value: op for op in UNARY}


def apply(op, args, angle_mode=AngleMode.DEGREES):
    '''
    Compute operator on its arguments, leftmost operand first.

    Raises CalculatorErrors on division by zero and domain errors. Other
    math failures give NaN or infinity.
    '''
    if op in BINARY:
        return BINARY[op](*args)
    (a,) = args
    degrees = angle_mode is AngleMode.DEGREES
    if op in TRIGONOMETRIC:
        return TRIGONOMETRIC[op](math.radians(a) if degrees else a)
    elif op in INVERSE_TRIGONOMETRIC:
        result = INVERSE_TRIGONOMETRIC[op](a)
        return math.degrees(result) if degrees else result
    elif op in UNARY:
        return UNARY[op](a)
    raise ValueError('Cannot apply {}'.format(op))
