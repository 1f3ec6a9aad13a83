'''
Functional interface for hosts (UIs) embedding the calculator.

All state lives in the calculator passed in; calls on one calculator must
not overlap.
'''

from .machine import Calculator


def create(**kwargs):
    '''
    Return a new calculator showing 0, in degrees, with no error.
    '''
    return Calculator(**kwargs)


def evaluate(calculator, expression):
    calculator.evaluate(expression)


def clear(calculator):
    calculator.clear()


def toggle_angle_mode(calculator):
    calculator.toggle_angle_mode()


def get_angle_mode(calculator):
    return calculator.angle_mode


def get_display(calculator):
    return calculator.display


def destroy(calculator):
    calculator.destroy()


__all__ = ('create', 'evaluate', 'clear', 'toggle_angle_mode',
           'get_angle_mode', 'get_display', 'destroy')
