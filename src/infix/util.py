from functools import wraps


class InfixError(Exception):
    '''
    Base of all errors a user can provoke by typing a bad expression.

    :attr phase: Which stage of the pipeline gave up: lex, syntax, or eval.
    '''
    phase = None

    @property
    def message(self):
        return self.args[0] if self.args else ''

    def __str__(self):
        return '{}: {}'.format(self.phase, self.message)


class LexError(InfixError):
    phase = 'lex'


# Shadows the builtin inside the package only. Import it by name.
class SyntaxError(InfixError):
    phase = 'syntax'


class EvalError(InfixError):
    phase = 'eval'


def wrap_user_errors(fmt, error=InfixError):
    '''
    Decorator that converts stray exceptions into our own.

    Passes through InfixErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except InfixError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
