'''
Infix to postfix (RPN) conversion, by shunting-yard.
'''

from .lexer import Associativity, Kind
from .util import SyntaxError


def _outranks(top, token):
    '''
    Return True if operator top, on the stack, must be output before token.
    '''
    return (top.precedence > token.precedence or
            top.precedence == token.precedence and
            token.associativity is Associativity.LEFT)


def to_postfix(tokens):
    '''
    Reorder infix tokens into a new list, in postfix order.

    Percent is postfix already, so it goes straight through. Unary minus
    outranks everything binary and is right-associative, so 3*-2 is 3*(-2)
    and --2 is -(-2).
    '''
    output = []
    operators = []
    for token in tokens:
        if token.kind in (Kind.NUMBER, Kind.PERCENT):
            output.append(token)
        elif token.isoperator:
            while (operators and
                   operators[-1].kind is not Kind.PAREN_OPEN and
                   _outranks(operators[-1], token)):
                output.append(operators.pop())
            operators.append(token)
        elif token.kind is Kind.PAREN_OPEN:
            operators.append(token)
        elif token.kind is Kind.PAREN_CLOSE:
            while operators and operators[-1].kind is not Kind.PAREN_OPEN:
                output.append(operators.pop())
            if not operators:
                raise SyntaxError('mismatched parentheses')
            operators.pop()
        else:
            raise SyntaxError('unknown token {!r}'.format(token))
    while operators:
        top = operators.pop()
        if top.kind is Kind.PAREN_OPEN:
            raise SyntaxError('mismatched parentheses')
        output.append(top)
    return output
