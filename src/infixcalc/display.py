import math

from .util import DomainError, OVERFLOW_MESSAGE


SIGNIFICANT_DIGITS = 10
# Decimal exponents %g would show in exponential notation, but we don't.
FIXED_EXPONENTS = range(-6, -4)


def format_number(value):
    '''
    Format finite value to 10 significant digits.

    Exponential notation only from 1e10 up and below 1e-6.
    '''
    _, _, exponent = '{:.{}e}'.format(value, SIGNIFICANT_DIGITS - 1) \
        .partition('e')
    exponent = int(exponent)
    if value and exponent in FIXED_EXPONENTS:
        text = '{:.{}f}'.format(value, SIGNIFICANT_DIGITS - 1 - exponent)
        return text.rstrip('0').rstrip('.')
    return '{:.{}g}'.format(value, SIGNIFICANT_DIGITS)


def format_result(value):
    '''
    Format an evaluation result for the display.

    NaN can only come out of a failed operation, so it reads as a domain
    error; infinities are overflows.
    '''
    if math.isnan(value):
        return DomainError.MESSAGE
    elif math.isinf(value):
        return OVERFLOW_MESSAGE
    return format_number(value)
