'''
Infix calculator.

Evaluates one-line arithmetic expressions for a calculator display: numbers,
+ - * / % ^, parentheses, the constants p (pi) and e, and single-letter
functions (s c t sines and cosines and tangents, S C T their inverses, l ln,
L log10, q sqrt, E exp, R reciprocal, N negate, ! factorial). Juxtaposition
multiplies, so 2p is two pi and 3(4+5) is 27.

Results and errors both go to the display as text; there is no other error
channel.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Calculator
from .util import AngleMode, ErrorKind


__all__ = 'Calculator', 'Lexer', 'CLI', 'AngleMode', 'ErrorKind'
