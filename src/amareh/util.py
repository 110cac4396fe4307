from functools import wraps


class AmarehError(Exception):
    '''
    Base of every error raised while solving an expression.

    ``kind`` is a language-neutral name for the failure, for callers that
    localize their own messages.
    '''
    kind = 'Error'

    def __str__(self):
        if self.args:
            return '{}: {}'.format(self.describe(), self.args[0])
        return self.describe()

    def describe(self):
        return type(self).__doc__.strip().splitlines()[0].rstrip('.')


class UnexpectedCharacterError(AmarehError):
    '''
    Unexpected character.

    Malformed numeric literal, e.g. a leading % or consecutive grouping
    commas.
    '''
    kind = 'UnexpectedCharacter'


class InvalidDecimalError(AmarehError):
    '''
    Invalid decimal.
    '''
    kind = 'InvalidDecimal'


class InvalidExpressionError(AmarehError):
    '''
    Invalid expression.
    '''
    kind = 'InvalidExpression'


def wrap_user_errors(error, fmt):
    '''
    Decorator that converts foreign exceptions to ``error``.

    Passes through AmarehErrors. ``fmt`` is formatted with the call's
    arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except AmarehError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
