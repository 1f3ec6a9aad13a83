'''
Command line tests
'''

from infixcalc.cli import CLI
from infixcalc.lexer import Lexer


def test_expressions(capsys):
    CLI().run(args=['-e', '2+3', '2^3^2'])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ['5', '512']
    assert captured.err == ''


def test_errors_to_stderr(capsys):
    CLI().run(args=['-e', '1/0', '7'])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ['7']
    assert captured.err.splitlines() == ['Math Error: Division by zero']


def test_radians(capsys):
    CLI().run(args=['-r', '-e', 's(p/2)'])
    assert capsys.readouterr().out.splitlines() == ['1']


def test_capacity(capsys):
    CLI().run(args=['-c', '3', '-e', '1+1+1+1+1'])
    assert capsys.readouterr().err.splitlines() == [
        'Error: Operator stack overflow',
    ]


def test_blank_lines_skipped(capsys):
    CLI().run(args=['-e', '', '  ', '1'])
    assert capsys.readouterr().out.splitlines() == ['1']


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '2sin'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == ["number\t'2'\t2.0", "function\t'sin'\tSIN"]


def test_dump_bad_lexeme(capsys):
    CLI().run(args=['-D', '-e', '1$'])
    captured = capsys.readouterr()
    assert captured.out.splitlines()[1:] == ["number\t'1'\t1.0"]
    assert captured.err.strip() == 'Syntax Error: Invalid expression'


def test_raw_grammar(capsys):
    # -e so stdin is left alone
    CLI().run(args=['-G', '-e'])
    assert capsys.readouterr().out.strip() == Lexer.LEXEME.strip()
