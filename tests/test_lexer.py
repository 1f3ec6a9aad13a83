'''
Lexer tests
'''

import math

from infixcalc.util import InvalidExpression
from infixcalc.lexer import Lexer, TokenClass
from infixcalc.operators import Operator

from pytest import raises


def classes(line):
    return [t.cls for t in Lexer().lex(line)]


def values(line):
    return [t.value for t in Lexer().lex(line)]


def test_numbers():
    assert values('12 1.5 .25 3.') == [12.0, 1.5, 0.25, 3.0]


def test_exponent():
    assert values('1e3') == [1000.0]
    assert values('2.5E-2') == [0.025]
    assert values('1e+10') == [1e10]


def test_e_after_number_is_constant():
    assert classes('2e') == [TokenClass.NUMBER, TokenClass.CONSTANT]


def test_constants():
    assert values('p e') == [math.pi, math.e]
    assert classes('pe') == [TokenClass.CONSTANT, TokenClass.CONSTANT]


def test_leading_sign():
    assert values('-5') == [-5.0]
    assert values('+.5') == [0.5]


def test_binary_minus():
    assert classes('3-2') == [TokenClass.NUMBER,
                              TokenClass.OPERATOR,
                              TokenClass.NUMBER]
    assert values('3-2')[1] is Operator.SUBTRACT


def test_sign_after_operator():
    assert values('3+-2') == [3.0, Operator.ADD, -2.0]


def test_sign_after_paren_and_function():
    assert values('(-1)') == [None, -1.0, None]
    assert values('q-4') == [Operator.SQRT, -4.0]


def test_minus_after_paren_is_operator():
    assert values('(1)-1')[3] is Operator.SUBTRACT


def test_sign_needs_digit():
    assert values('-p') == [Operator.SUBTRACT, math.pi]


def test_function_first_letter():
    assert values('sin') == [Operator.SIN]
    # Only the first letter counts
    assert values('sqrt') == [Operator.SIN]
    assert values('q') == [Operator.SQRT]
    assert values('log') == [Operator.LN]
    assert values('Log') == [Operator.LOG10]


def test_factorial():
    assert values('!5') == [Operator.FACTORIAL, 5.0]


def test_operators():
    assert values('1+2*3/4%5^6')[1::2] == [Operator.ADD,
                                            Operator.MULTIPLY,
                                            Operator.DIVIDE,
                                            Operator.MODULO,
                                            Operator.POWER]


def test_positions():
    tokens = list(Lexer().lex(' 12 + p'))
    assert [(t.start, t.end) for t in tokens] == [(1, 3), (4, 5), (6, 7)]


def test_match_end_of_line():
    assert Lexer().match('  ', 0) is None


def test_two_decimal_points():
    with raises(InvalidExpression):
        list(Lexer().lex('2.3.4'))


def test_lone_point():
    with raises(InvalidExpression):
        list(Lexer().lex('.'))


def test_unknown_character():
    with raises(InvalidExpression, match='Invalid expression'):
        list(Lexer().lex('2#3'))


def test_unknown_function():
    with raises(InvalidExpression):
        list(Lexer().lex('x5'))


def test_good_tokens_before_bad():
    l = Lexer()
    tokens = l.lex('1+$')
    assert next(tokens).value == 1.0
    assert next(tokens).value is Operator.ADD
    with raises(InvalidExpression):
        next(tokens)
