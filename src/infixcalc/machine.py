import logging
import math

from .display import format_result
from .lexer import Lexer, TokenClass
from .operators import Operator, apply
from .stack import OperandStack, OperatorStack
from .util import (AngleMode, CalculatorError, ErrorKind, InvalidExpression,
                   MismatchedParentheses, StackOverflow)


logger = logging.getLogger(__name__)


class Calculator:
    '''
    Infix calculator with a display.

    Evaluates one expression at a time with the shunting-yard algorithm:
    operands go straight onto one stack, operators wait on another until
    something of lower precedence (or a closing parenthesis, or the end of
    the line) forces them to be applied.

    Not thread-safe. Callers sharing an instance must serialize calls.
    '''

    CAPACITY = 100
    DISPLAY_CAPACITY = 256
    DEFAULT_DISPLAY = '0'
    DEFAULT_ANGLE_MODE = AngleMode.DEGREES

    # Tokens that a value directly before them multiplies
    MULTIPLICANDS = {
        TokenClass.NUMBER,
        TokenClass.CONSTANT,
        TokenClass.FUNCTION,
        TokenClass.LEFT_PAREN,
    }
    # Tokens that end a value
    MULTIPLIERS = {
        TokenClass.NUMBER,
        TokenClass.CONSTANT,
        TokenClass.RIGHT_PAREN,
    }

    def __init__(self, capacity=None, angle_mode=None):
        '''
        Create calculator showing 0.

        :param capacity: Size of both stacks, and limit on operators per
                         evaluation.
        :param angle_mode: Initial angle mode, degrees by default.
        '''
        cls = type(self)
        capacity = capacity or cls.CAPACITY
        self.display = cls.DEFAULT_DISPLAY
        self.angle_mode = angle_mode or cls.DEFAULT_ANGLE_MODE
        self.operands = OperandStack(capacity)
        self.operators = OperatorStack(capacity)
        self.latched = None
        self.lexer = Lexer()

    @property
    def error(self):
        '''
        Kind of the error latched by the last evaluation.
        '''
        if self.latched is None:
            return ErrorKind.NONE
        return self.latched.kind

    def evaluate(self, expression):
        '''
        Evaluate expression, showing the result or an error on the display.
        '''
        self._reset()
        try:
            self._run(expression)
        except CalculatorError as e:
            # Fatal: nothing after this gets evaluated
            logger.debug('Aborted %r: %s', expression, e.message)
            self.latch(e)
            self._show(e.message)
            return
        if self.latched is None:
            self._drain()
        self._show(self._render())

    def clear(self):
        '''
        Show 0 again and forget the last error. Keeps the angle mode.
        '''
        self.display = type(self).DEFAULT_DISPLAY
        self.latched = None

    def toggle_angle_mode(self):
        self.angle_mode = self.angle_mode.toggled()

    def destroy(self):
        '''
        Release the stacks' contents.
        '''
        self.operands.clear()
        self.operators.clear()
        self.latched = None

    def latch(self, error):
        '''
        Remember error, unless an earlier one already is.
        '''
        if self.latched is None:
            logger.debug('Latched %s', error.kind.value)
            self.latched = error

    def _reset(self):
        self.operands.clear()
        self.operators.clear()
        self.latched = None

    def _show(self, text):
        self.display = text[:type(self).DISPLAY_CAPACITY]

    def _run(self, expression):
        '''
        Feed every token to the stacks, stopping at the first latched error.
        '''
        previous = TokenClass.NONE
        for token in self.lexer.lex(expression):
            try:
                self._feed(token, previous)
            except StackOverflow as e:
                self.latch(e)
            if self.latched is not None:
                break
            previous = token.cls

    def _feed(self, token, previous):
        if token.cls in self.MULTIPLICANDS and previous in self.MULTIPLIERS:
            # 2p, 3(4+5), (1+1)(2+2)
            self._operator(Operator.MULTIPLY)
            if self.latched is not None:
                return

        if token.cls in (TokenClass.NUMBER, TokenClass.CONSTANT):
            self.operands.push(token.value)
        elif token.cls is TokenClass.LEFT_PAREN:
            self.operators.push(Operator.LEFT_PAREN)
        elif token.cls is TokenClass.RIGHT_PAREN:
            self._close()
        elif token.cls is TokenClass.FUNCTION:
            # Applied when its operand is complete, like any operator
            self.operators.push(token.value)
        else:
            self._operator(token.value)

    def _operator(self, new):
        '''
        Apply waiting operators that bind tighter than new, then push it.
        '''
        while self.operators:
            top = self.operators.peek()
            if top.precedence > new.precedence or \
               top.precedence == new.precedence and not new.right_associative:
                self._apply(self.operators.pop())
                if self.latched is not None:
                    return
            else:
                break
        self.operators.push(new)

    def _close(self):
        '''
        Apply operators back to the matching open parenthesis.
        '''
        while self.operators and \
              self.operators.peek() is not Operator.LEFT_PAREN:
            self._apply(self.operators.pop())
            if self.latched is not None:
                return
        if not self.operators:
            raise MismatchedParentheses()
        self.operators.pop()

    def _drain(self):
        while self.operators and self.latched is None:
            if self.operators.peek() is Operator.LEFT_PAREN:
                self.latch(MismatchedParentheses())
                break
            self._apply(self.operators.pop())

    def _pop_operand(self):
        '''
        Pop an operand, or latch an error and stand in NaN if there's none.
        '''
        try:
            return self.operands.pop()
        except InvalidExpression as e:
            self.latch(e)
            return math.nan

    def _apply(self, op):
        '''
        Apply operator to operands on the stack, pushing its result.

        Errors are latched and NaN is pushed in place of the result, so the
        operand stack keeps the shape it would have had.
        '''
        # Pop right operand first; a - b has b on top.
        args = [self._pop_operand() for _ in range(op.arity)][::-1]
        try:
            result = apply(op, args, self.angle_mode)
        except CalculatorError as e:
            self.latch(e)
            result = math.nan
        self.operands.push(result)

    def _render(self):
        if self.latched is not None:
            return self.latched.message
        if len(self.operands) == 1:
            return format_result(self.operands.pop())
        # Empty expression, or operands left over
        self.latch(InvalidExpression())
        return self.latched.message
