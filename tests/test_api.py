'''
Host interface tests
'''

from infixcalc import api
from infixcalc.util import AngleMode


def test_lifecycle():
    calculator = api.create()
    assert api.get_display(calculator) == '0'
    assert api.get_angle_mode(calculator) is AngleMode.DEGREES
    api.evaluate(calculator, '5/(2-2)')
    assert api.get_display(calculator) == 'Math Error: Division by zero'
    api.clear(calculator)
    assert api.get_display(calculator) == '0'
    api.destroy(calculator)


def test_evaluate_returns_nothing():
    calculator = api.create()
    assert api.evaluate(calculator, '2+3*4') is None
    assert api.get_display(calculator) == '14'


def test_angle_mode():
    calculator = api.create()
    api.toggle_angle_mode(calculator)
    assert api.get_angle_mode(calculator) is AngleMode.RADIANS
    api.evaluate(calculator, 's(p/2)')
    assert api.get_display(calculator) == '1'
    api.toggle_angle_mode(calculator)
    assert api.get_angle_mode(calculator) is AngleMode.DEGREES
    api.evaluate(calculator, 's90')
    assert api.get_display(calculator) == '1'


def test_clear_is_idempotent():
    calculator = api.create()
    for expression in ['q(-1)', '', '(((', '2p']:
        api.evaluate(calculator, expression)
        api.clear(calculator)
        assert api.get_display(calculator) == '0'
        api.clear(calculator)
        assert api.get_display(calculator) == '0'


def test_instances_are_independent():
    first, second = api.create(), api.create()
    api.toggle_angle_mode(first)
    api.evaluate(first, '1+1')
    assert api.get_display(second) == '0'
    assert api.get_angle_mode(second) is AngleMode.DEGREES
