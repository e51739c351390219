from pytest import Item, fixture

from infix.lexer import Lexer


@fixture
def lexer():
    return Lexer()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, to audit which expressions were checked.

    Only called with enable_assertion_pass_hook set. Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
