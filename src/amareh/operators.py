'''
Binary operator functions, Token x Token -> Token.

Arithmetic follows IEEE 754: nothing here raises for division by zero,
overflow or domain errors, the result is an infinity or NaN instead. Only
the bitwise operators can fail, on non-integral operands.
'''

from functools import wraps
from types import MappingProxyType

import math
import operator

from .tokens import Token, TokenKind, BOOLEANS, OPERATOR_SYMBOLS, OR_EQUAL
from .util import InvalidDecimalError, wrap_user_errors


def _decimal(f):
    '''
    Lift a function on floats to one on tokens, giving a decimal token.
    '''
    @wraps(f)
    def wrapped(left, right):
        return Token.decimal(f(left.value, right.value))
    return wrapped


def _boolean(f):
    '''
    Lift a float predicate to one on tokens, giving a boolean token.
    '''
    @wraps(f)
    def wrapped(left, right):
        return BOOLEANS[bool(f(left.value, right.value))]
    return wrapped


def _odd(number):
    return number.is_integer() and number % 2 == 1


def divide(dividend, divisor):
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1, divisor)


def modulo(dividend, divisor):
    '''
    Remainder with the sign of the dividend, like C's fmod.
    '''
    try:
        return math.fmod(dividend, divisor)
    except ValueError:
        # Zero divisor, or infinite dividend.
        return math.nan


def power(base, exponent):
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _odd(exponent) else math.inf
    except ValueError:
        if base == 0:
            # Zero to a negative power.
            return math.copysign(math.inf, base) if _odd(exponent) else math.inf
        return math.nan


def _integral(token):
    '''
    Integer value of an operand, if it has no fractional part.
    '''
    if not token.value.is_integer():
        raise InvalidDecimalError('{} is not an integer'.format(token))
    return int(token.value)


def _bitwise(f, symbol):
    '''
    Lift a function on ints to one on tokens, giving a decimal token.
    '''
    @wraps(f)
    @wrap_user_errors(InvalidDecimalError, '{0} ' + symbol + ' {1}')
    def wrapped(left, right):
        return Token.decimal(f(_integral(left), _integral(right)))
    return wrapped


# Registered function of every operator the solver can apply.
# Punctuation is lexed but has no entry.
OPERATORS = MappingProxyType({
    # Arithmetic
    TokenKind.PLUS: _decimal(operator.__add__),
    TokenKind.MINUS: _decimal(operator.__sub__),
    TokenKind.MULTIPLY: _decimal(operator.__mul__),
    TokenKind.DIVIDE: _decimal(divide),
    TokenKind.MOD: _decimal(modulo),
    TokenKind.CARET: _decimal(power),

    # Bitwise
    TokenKind.AMPERSAND: _bitwise(operator.__and__, '&'),
    TokenKind.PIPE: _bitwise(operator.__or__, '|'),

    # Comparison
    TokenKind.EQUAL: _boolean(operator.__eq__),
    TokenKind.GREATER_THAN: _boolean(operator.__gt__),
    TokenKind.GREATER_THAN_OR_EQUAL: _boolean(operator.__ge__),
    TokenKind.LESS_THAN: _boolean(operator.__lt__),
    TokenKind.LESS_THAN_OR_EQUAL: _boolean(operator.__le__),
})

# Precomputed token of every kind the lexer can emit for a symbol.
OPERATOR_TOKENS = MappingProxyType({
    kind: Token(kind, str(kind), OPERATORS.get(kind))
    for kind
    in [*OPERATOR_SYMBOLS.values(), *OR_EQUAL.values()]
})
