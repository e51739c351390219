'''
Drive the pipeline: tokenize, convert, evaluate, round.
'''

from collections import namedtuple
from decimal import Decimal
import math

from .converter import to_postfix
from .lexer import tokenize
from .machine import evaluate
from .util import InfixError


# Digits kept after the decimal point; enough to hide binary float noise
# such as 0.1 + 0.2.
ROUNDING_DIGITS = 12


class Result(namedtuple('Result', 'value error')):
    '''
    Outcome of one computation: a value, an InfixError, or neither (no-op).
    '''
    __slots__ = ()

    @classmethod
    def nothing(cls):
        return cls(None, None)

    @property
    def ok(self):
        return self.error is None and self.value is not None

    @property
    def noop(self):
        return self.error is None and self.value is None


def round_result(value, digits=ROUNDING_DIGITS):
    '''
    Round half up to digits decimals. Non-finite values pass through as is.
    '''
    scale = 10 ** digits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    # Not floor(scaled + 0.5): above 2**52 the addition itself rounds.
    whole = math.floor(scaled)
    return (whole + (scaled - whole >= 0.5)) / scale


def format_result(value):
    '''
    Render a result so that it lexes back to the same value.

    Never uses exponent notation, which the lexer doesn't accept.
    '''
    if not math.isfinite(value):
        return str(value)
    elif value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), 'f')


def compute(line):
    '''
    Compute the value of an infix expression.

    Returns a Result. Bad input comes back as Result.error, tagged with the
    phase that rejected it; it is never raised.
    '''
    if not line.strip():
        return Result.nothing()
    try:
        tokens = tokenize(line)
        if not tokens:
            return Result.nothing()
        value = evaluate(to_postfix(tokens))
    except InfixError as e:
        return Result(None, e)
    return Result(round_result(value), None)
