from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .util import LexError, wrap_user_errors


class Kind(Enum):
    NUMBER = 'number'
    PAREN_OPEN = 'paren_open'
    PAREN_CLOSE = 'paren_close'
    PERCENT = 'percent'
    BINARY_OPERATOR = 'operator'
    UNARY_MINUS = 'unary_minus'


class Associativity(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class Token(namedtuple('Token', 'kind value precedence associativity',
                       defaults=(None, None))):
    '''
    Lexeme, typed.

    value is the float for numbers, the symbol for everything else.
    precedence and associativity only mean anything for operators.
    '''
    __slots__ = ()

    @property
    def isoperator(self):
        return self.kind in (Kind.BINARY_OPERATOR, Kind.UNARY_MINUS)

    def __str__(self):
        if self.kind is Kind.NUMBER:
            if self.value.is_integer():
                return str(int(self.value))
            return repr(self.value)
        elif self.kind is Kind.UNARY_MINUS:
            # Like dc.
            return '_'
        return self.value


class Lexer:
    '''
    Lexer for the infix arithmetic grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # What people see on a calculator's keys, and what we mean by it.
    GLYPHS = {
        '\N{MULTIPLICATION SIGN}': '*',
        '\N{DIVISION SIGN}': '/',
    }
    SPACE = r'\s+'
    # Half-typed operator or decimal point at the very end. Dropped, not
    # an error.
    TRAILING = r'[-+*/.]+\Z'

    # Binary precedence. Everything binary is left-associative.
    PRECEDENCE = {
        '+': 2,
        '-': 2,
        '*': 3,
        '/': 3,
    }
    UNARY_PRECEDENCE = 4

    # Greedy run; we check the dots ourselves for a better message.
    NUMBER = r'[0-9.]+'
    OPERATOR = r'[' + r''.join(map(regex.escape, PRECEDENCE)) + r']'

    # All possible lexemes.
    LEXEME = r'''
              (?<number>''' + NUMBER + r''')
              |
              (?<paren_open>\()
              |
              (?<paren_close>\))
              |
              (?<percent>%)
              |
              (?<operator>''' + OPERATOR + r''')
              '''
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, FLAGS)

    # Whatever may precede a binary minus. Anything else makes it unary.
    VALUES = frozenset({Kind.NUMBER, Kind.PERCENT, Kind.PAREN_CLOSE})

    def normalize(self, line):
        '''
        Canonicalize glyphs, drop whitespace and any incomplete tail.
        '''
        for glyph, symbol in type(self).GLYPHS.items():
            line = line.replace(glyph, symbol)
        line = regex.sub(type(self).SPACE, '', line)
        return regex.sub(type(self).TRAILING, '', line)

    def lex(self, line):
        '''
        Take a line and yield all tokens.

        Stops on, and raises, the first bad lexeme.
        '''
        line = self.normalize(line)
        previous = None
        position = 0
        while position < len(line):
            match = type(self).PATTERN.match(line, position)
            if match is None:
                raise LexError(
                    'invalid character: {!r}'.format(line[position]))
            token = self.token(match, previous)
            yield token
            previous = token
            position = match.end()

    def token(self, match, previous=None):
        '''
        Turn a lexeme match into a token.

        :param previous: Last token emitted, to tell unary from binary minus.
        '''
        group = match.lastgroup
        matched = match.group(0)
        if group == 'number':
            return Token(Kind.NUMBER, self._number(matched))
        elif group == 'paren_open':
            return Token(Kind.PAREN_OPEN, matched)
        elif group == 'paren_close':
            return Token(Kind.PAREN_CLOSE, matched)
        elif group == 'percent':
            return Token(Kind.PERCENT, matched)
        elif matched == '-' and (previous is None or
                                 previous.kind not in type(self).VALUES):
            return Token(Kind.UNARY_MINUS, matched,
                         type(self).UNARY_PRECEDENCE, Associativity.RIGHT)
        return Token(Kind.BINARY_OPERATOR, matched,
                     type(self).PRECEDENCE[matched], Associativity.LEFT)

    @wrap_user_errors('invalid number: {1!r}', error=LexError)
    def _number(self, run):
        '''
        Convert a run of digits and dots to a float.
        '''
        if run.count('.') > 1:
            raise LexError('invalid number: {!r}'.format(run))
        return float(run)


def tokenize(line):
    '''
    Return the list of tokens in line. Empty if there is nothing to compute.
    '''
    return list(Lexer().lex(line))
