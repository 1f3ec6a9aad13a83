from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.key_binding import KeyBindings

from .util import AngleMode, CalculatorError, ErrorKind
from .machine import Calculator
from .lexer import Lexer
from .operators import Operator


class InteractiveInput:
    '''
    Prompting line source; shows and toggles a calculator's angle mode.
    '''

    def __init__(self, prompt, calculator):
        self.prompt = prompt
        self.calculator = calculator

    def _key_bindings(self):
        bindings = KeyBindings()

        @bindings.add('c-t')
        def _(event):
            self.calculator.toggle_angle_mode()
            event.app.invalidate()

        return bindings

    def _rprompt(self):
        return self.calculator.angle_mode.value

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    rprompt=self._rprompt,
                                    key_bindings=self._key_bindings(),
                                    bottom_toolbar='^T: degrees/radians',
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=True,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '= '

    def dumper(self):
        '''
        Dump all tokens: class, lexeme, and value.
        '''
        lexer = Lexer()
        print('<class>\t<repr(lexeme)>\t<value>')
        for line in self.args.expressions:
            try:
                for token in lexer.lex(line):
                    value = token.value
                    if isinstance(value, Operator):
                        value = value.name
                    print(token.cls.value,
                          repr(token.lexeme),
                          value,
                          sep='\t')
            except CalculatorError as e:
                print(e.message, file=sys.stderr)

    def executor(self):
        '''
        Evaluate every line, printing the display after each.
        '''
        calculator = self.calculator
        for line in self.args.expressions:
            if not line.strip():
                continue
            calculator.evaluate(line)
            if calculator.error is ErrorKind.NONE:
                print(calculator.display)
            else:
                print(calculator.display, file=sys.stderr)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input instead of stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    calculator=self.calculator)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-r', '--radians',
                                          action='store_const',
                                          const=AngleMode.RADIANS,
                                          default=AngleMode.DEGREES,
                                          dest='angle_mode')
        self.argument_parser.add_argument('-c', '--capacity',
                                          type=int,
                                          default=Calculator.CAPACITY)
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
        self.calculator = Calculator(capacity=self.args.capacity,
                                     angle_mode=self.args.angle_mode)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
