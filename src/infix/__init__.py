'''
Infix calculator.

Plain old four-function arithmetic, the way you'd type it on a pocket
calculator: precedence, parentheses, unary minus, and a postfix percent.
Lexes, converts to postfix by shunting-yard, then runs the postfix on a
stack machine.

Floats throughout. Results are rounded to 12 decimals so 0.1 + 0.2 is 0.3.
'''

from .cli import CLI
from .compute import Result, compute, format_result, round_result
from .converter import to_postfix
from .lexer import Lexer, Token, Kind, Associativity, tokenize
from .machine import Machine, evaluate
from .util import InfixError, LexError, SyntaxError, EvalError


# SyntaxError is left out so star imports don't shadow the builtin.
__all__ = ('CLI', 'Lexer', 'Machine', 'Token', 'Kind', 'Associativity',
           'Result', 'tokenize', 'to_postfix', 'evaluate', 'compute',
           'round_result', 'format_result',
           'InfixError', 'LexError', 'EvalError')
