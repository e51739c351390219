'''
Command line interface tests
'''

from infix.cli import CLI, InteractiveInput, Lines
from infix.compute import compute


def run(capsys, *args):
    CLI().run(args=list(args))
    return capsys.readouterr()


def test_expressions(capsys):
    captured = run(capsys, '-e', '2+3*4', '0.1+0.2', '(2+3)*4')
    assert captured.out.splitlines() == ['14', '0.3', '20']
    assert captured.err == ''


def test_errors_on_stderr(capsys):
    captured = run(capsys, '-e', '5/0', '1.2.3', '7')
    assert captured.out.splitlines() == ['7']
    assert captured.err.splitlines() == [
        'Error (eval): division by zero',
        "Error (lex): invalid number: '1.2.3'",
    ]


def test_noop_prints_nothing(capsys):
    captured = run(capsys, '-e', '+', '')
    assert captured.out == ''
    assert captured.err == ''


def test_verbose_traceback(capsys):
    captured = run(capsys, '-v', '-e', '(1')
    assert captured.err.startswith('Error (syntax): mismatched parentheses')
    assert 'Traceback' in captured.err


def test_dump(capsys):
    captured = run(capsys, '-D', '-e', '3*-2', '(1')
    assert captured.out.splitlines() == [
        '<tokens>\t<postfix>',
        '3 * _ 2\t3 2 _ *',
    ]
    assert captured.err == 'Error (syntax): mismatched parentheses\n'


def test_raw_grammar(capsys):
    captured = run(capsys, '-G', '-e')
    assert '(?<number>' in captured.out


def test_dump_keeps_every_digit(capsys):
    captured = run(capsys, '-D', '-e', '12.345678*0.1')
    assert captured.out.splitlines()[1] == \
        '12.345678 * 0.1\t12.345678 0.1 *'


def test_reseeding():
    prompt = InteractiveInput(prompt='= ')
    prompt.reseed('0.1+0.2', compute('0.1+0.2'))
    assert prompt.default == '0.3'
    prompt.reseed(' 5/0\n', compute('5/0'))
    assert prompt.default == '5/0'
    prompt.reseed('+', compute('+'))
    assert prompt.default == ''


def test_plain_lines_ignore_reseeding():
    lines = Lines(['1+1'])
    lines.reseed('1+1', compute('1+1'))
    assert list(lines) == ['1+1']
