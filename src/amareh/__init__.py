'''
Infix calculator.

Solves one-line expressions over decimal numbers and a few named
constants: arithmetic, comparison and bitwise operators, applied strictly
left to right. There is no operator precedence and no grouping, so
1+2*3 is 9.

    >>> solve('2^10')
    '1024'
    >>> solve('10% + 1')
    '1.1'

A trailing % divides a number by 100. Commas are scanned as part of a
number and then rejected by the float parser, so 1,000 is an invalid
decimal and 1,,000 an unexpected character. Named constants are
φ/phi, π/pi, e/E, ∞/inf and nan. ** × ÷ ∧ are accepted as synonyms of
^ * / ^.
'''

from .cli import CLI
from .lexer import Lexer, normalize, tokenize
from .solver import Reducer, solve
from .tokens import Token, TokenKind
from .util import (AmarehError, UnexpectedCharacterError,
                   InvalidDecimalError, InvalidExpressionError)


__all__ = ('solve', 'tokenize', 'normalize', 'Lexer', 'Reducer', 'Token',
           'TokenKind', 'CLI', 'AmarehError', 'UnexpectedCharacterError',
           'InvalidDecimalError', 'InvalidExpressionError')
