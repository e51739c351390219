from collections import deque
import operator

from .lexer import Kind
from .util import EvalError


class Machine:
    '''
    Arithmetic stack machine.

    Takes postfix tokens and runs them. One machine per evaluation; the
    stack is never reused.
    '''

    # Arithmetic operators on the items of a machine.
    BUILTINS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': operator.__truediv__,
    }

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def run(self, postfix):
        '''
        Feed every token, and return the one value left over.
        '''
        for token in postfix:
            self.feed(token)
        if len(self.stack) != 1:
            raise EvalError('invalid expression')
        return self.stack[0]

    def feed(self, token):
        '''
        Stack a number, or apply an operator to the stack.
        '''
        if token.kind is Kind.NUMBER:
            self._pshstack(token.value)
        elif token.kind is Kind.PERCENT:
            only, = self._popstack(1, 'invalid use of %')
            self._pshstack(only / 100)
        elif token.kind is Kind.UNARY_MINUS:
            only, = self._popstack(1, 'invalid unary usage')
            self._pshstack(-only)
        elif token.kind is Kind.BINARY_OPERATOR:
            self._pshstack(self._binary(token.value))
        else:
            raise EvalError('unknown token {!r}'.format(token))

    def _binary(self, symbol):
        '''
        Pop both operands, and apply.
        '''
        # Topmost first, so the right hand side comes out first.
        right, left = self._popstack(2, 'incomplete expression')
        if symbol == '/' and right == 0:
            raise EvalError('division by zero')
        try:
            f = type(self).BUILTINS[symbol]
        except KeyError:
            raise EvalError('unknown operator {!r}'.format(symbol)) from None
        return f(left, right)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n, message):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise EvalError(message)
        return [self.stack.pop() for _ in range(n)]


def evaluate(postfix):
    '''
    Reduce a postfix token sequence to a float.
    '''
    return Machine().run(postfix)
