from collections import namedtuple
from enum import Enum
from functools import reduce
import logging
import math
import operator

import regex

from .util import InvalidExpression
from .operators import FUNCTIONS, SYMBOLS


logger = logging.getLogger(__name__)


class TokenClass(Enum):
    NONE = 'none'
    NUMBER = 'number'
    OPERATOR = 'operator'
    LEFT_PAREN = 'lparen'
    RIGHT_PAREN = 'rparen'
    FUNCTION = 'function'
    CONSTANT = 'constant'


Token = namedtuple('Token', 'cls lexeme value start end')


class Lexer:
    '''
    Lexer for infix expressions.

    Holds no state between calls; the previous token class is passed in
    because it decides whether a sign starts a number or is an operator.
    '''
    # Number, as far as strtod would read a decimal one.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              |
                  # .2
                  \.
                  \d+
              )
              (?:
                  # 1e3, 2.5E-7, but not the constant in 2e
                  [eE]
                  [+-]?
                  \d+
              )?
              '''
    SIGN = r'[+-]'
    # Single letters, never the start of a function name
    CONSTANT = r'[pe]'
    # Only the first letter counts; ! is factorial
    FUNCTION = r'[A-Za-z]+|!'
    OPERATOR = r'[' + r''.join(map(regex.escape, SYMBOLS)) + r']'
    SPACE = r'\s*'

    # All possible lexemes, first alternative wins.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<constant>' + CONSTANT + r')|' \
             r'(?<lparen>\()|' \
             r'(?<rparen>\))|' \
             r'(?<function>' + FUNCTION + r')|' \
             r'(?<operator>' + OPERATOR + r')'
    # Where a sign may start a number instead.
    SIGNED = r'(?<number>' + SIGN + r'(?=[\d.])' + NUMBER + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    CONSTANTS = {
        'p': math.pi,
        'e': math.e,
    }
    # Previous token classes after which + and - may be a sign.
    SIGNABLE = {
        TokenClass.NONE,
        TokenClass.OPERATOR,
        TokenClass.LEFT_PAREN,
        TokenClass.FUNCTION,
    }

    def __init__(self):
        cls = type(self)
        self.space = regex.compile(cls.SPACE, cls.FLAGS)
        self.lexeme = regex.compile(cls.LEXEME, cls.FLAGS)
        self.signed = regex.compile(cls.SIGNED, cls.FLAGS)

    def match(self, line, pos=0, previous=TokenClass.NONE):
        '''
        Return the next token at or after pos, or None at end of line.

        Raises InvalidExpression on anything that isn't a lexeme.
        '''
        pos = self.space.match(line, pos).end()
        if pos >= len(line):
            return None
        match = None
        if previous in type(self).SIGNABLE:
            match = self.signed.match(line, pos)
        if match is None:
            match = self.lexeme.match(line, pos)
        if match is None:
            self._fail(line, pos)
        return self.token(line, match)

    def token(self, line, match):
        '''
        Turn a lexeme match into a token with its value.
        '''
        kind = match.lastgroup
        lexeme = match.group(kind)
        start, end = match.span()
        if kind == 'number':
            # 2.3.4 isn't 2.3 followed by .4
            if line.startswith('.', end):
                self._fail(line, end)
            return Token(TokenClass.NUMBER, lexeme, float(lexeme), start, end)
        elif kind == 'constant':
            return Token(TokenClass.CONSTANT, lexeme,
                         type(self).CONSTANTS[lexeme], start, end)
        elif kind == 'lparen':
            return Token(TokenClass.LEFT_PAREN, lexeme, None, start, end)
        elif kind == 'rparen':
            return Token(TokenClass.RIGHT_PAREN, lexeme, None, start, end)
        elif kind == 'function':
            # sin, sqrt and s are all sine.
            function = FUNCTIONS.get(lexeme[0])
            if function is None:
                self._fail(line, start)
            return Token(TokenClass.FUNCTION, lexeme, function, start, end)
        else:
            return Token(TokenClass.OPERATOR, lexeme, SYMBOLS[lexeme],
                         start, end)

    def lex(self, line):
        '''
        Take a line and yield all tokens.

        Raises InvalidExpression on the first bad lexeme, after yielding the
        good ones before it.
        '''
        pos, previous = 0, TokenClass.NONE
        while True:
            token = self.match(line, pos, previous)
            if token is None:
                return
            yield token
            pos, previous = token.end, token.cls

    def _fail(self, line, pos):
        logger.debug("Couldn't lex %r at %d", line[pos:].strip(), pos)
        raise InvalidExpression()
