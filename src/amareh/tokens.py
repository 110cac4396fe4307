'''
Token model and the static lookup tables shared by lexer and solver.

Every table here is built once, at import, and exposed read-only.
'''

from collections import namedtuple
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

import math


class TokenKind(Enum):
    '''
    Closed set of token kinds.

    The value of each kind is its symbol, or its name when it has none.
    '''
    EOF = 'EOF'
    ILLEGAL = 'ILLEGAL'

    # Types
    DECIMAL = 'DECIMAL'
    BOOLEAN = 'BOOLEAN'

    # Logical operators. Declared only, never lexed.
    AND = 'AND'
    OR = 'OR'
    NOT = 'NOT'

    # Arithmetic and bitwise operators
    PLUS = '+'
    MINUS = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    MOD = '%'
    CARET = '^'
    AMPERSAND = '&'
    PIPE = '|'

    # Punctuation. Lexed, but never reduced.
    PARENTHESIS_OPEN = '('
    PARENTHESIS_CLOSE = ')'
    COMMA = ','
    SEMICOLON = ';'
    COLON = ':'

    # Comparison operators
    EQUAL = '='
    GREATER_THAN = '>'
    GREATER_THAN_OR_EQUAL = '>='
    LESS_THAN = '<'
    LESS_THAN_OR_EQUAL = '<='

    # Constants
    PHI = 'φ'
    PI = 'π'
    E = 'e'
    INFINITY = '∞'
    NOT_A_NUMBER = 'NaN'

    # Functions. Declared only, never lexed.
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    COT = 'cot'
    SEC = 'sec'
    CSC = 'csc'
    COSEC = 'cosec'
    ABS = 'abs'
    SQRT = 'sqrt'
    CBRT = 'cbrt'
    LOG = 'log'
    LN = 'ln'
    EXP = 'exp'
    FACTORIAL = '!'
    LIMIT = 'lim'

    # Calculus. Declared only, never lexed.
    SUM = 'Σ'
    PRODUCT = 'Π'
    INTEGRAL = '∫'
    DERIVATIVE = '∂'

    def __str__(self):
        return self.value

    @property
    def is_operator(self):
        return self in _OPERATOR_KINDS

    @property
    def is_logical_operator(self):
        return self in _LOGICAL_KINDS

    @property
    def is_parenthesis(self):
        return self in _PARENTHESIS_KINDS

    @property
    def is_constant(self):
        '''
        Named constants that may stand in for a decimal operand.

        NaN is not one of them.
        '''
        return self in _CONSTANT_KINDS

    @property
    def is_illegal(self):
        return self is TokenKind.ILLEGAL

    @property
    def is_nan(self):
        return self is TokenKind.NOT_A_NUMBER


_PARENTHESIS_KINDS = frozenset({
    TokenKind.PARENTHESIS_OPEN,
    TokenKind.PARENTHESIS_CLOSE,
})
_OPERATOR_KINDS = frozenset({
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.MULTIPLY,
    TokenKind.DIVIDE,
    TokenKind.MOD,
    TokenKind.CARET,
    TokenKind.AMPERSAND,
    TokenKind.PIPE,
    TokenKind.COMMA,
    TokenKind.SEMICOLON,
    TokenKind.COLON,
    TokenKind.EQUAL,
    TokenKind.GREATER_THAN,
    TokenKind.GREATER_THAN_OR_EQUAL,
    TokenKind.LESS_THAN,
    TokenKind.LESS_THAN_OR_EQUAL,
}) | _PARENTHESIS_KINDS
_LOGICAL_KINDS = frozenset({TokenKind.AND, TokenKind.OR, TokenKind.NOT})
_CONSTANT_KINDS = frozenset({
    TokenKind.PHI,
    TokenKind.PI,
    TokenKind.E,
    TokenKind.INFINITY,
})


def format_number(number):
    '''
    Canonical text of a float.

    Shortest digits that round-trip, positional for decimal exponents in
    [-4, 21), scientific (1.5e+21, 1e-05) otherwise. Integral values carry
    no fractional part.
    '''
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return '+Inf' if number > 0 else '-Inf'
    shortest = Decimal(repr(number)).normalize()
    exponent = shortest.adjusted()
    if -4 <= exponent < 21:
        return '{:f}'.format(shortest)
    sign, digits, _ = shortest.as_tuple()
    digits = ''.join(map(str, digits))
    mantissa = digits[0] + ('.' + digits[1:] if digits[1:] else '')
    return '{}{}e{}{:02d}'.format('-' if sign else '',
                                  mantissa,
                                  '-' if exponent < 0 else '+',
                                  abs(exponent))


def format_token(token):
    '''
    Canonical text of a token's value.
    '''
    if token.kind is TokenKind.BOOLEAN:
        return 'true' if token.value else 'false'
    if token.kind.is_illegal or token.kind.is_operator:
        return token.raw
    return format_number(token.value)


class Token(namedtuple('Token', 'kind raw value')):
    '''
    Immutable lexeme.

    ``value`` holds a float for decimals and constants, a bool for
    booleans, the binary function for operators, and None for illegal
    lexemes and punctuation.
    '''
    __slots__ = ()

    @classmethod
    def decimal(cls, number, raw=None):
        number = float(number)
        if raw is None:
            raw = format_number(number)
        return cls(TokenKind.DECIMAL, raw, number)

    def __str__(self):
        return format_token(self)


ILLEGAL = Token(TokenKind.ILLEGAL, '', None)

BOOLEANS = MappingProxyType({
    True: Token(TokenKind.BOOLEAN, 'true', True),
    False: Token(TokenKind.BOOLEAN, 'false', False),
})

CONSTANTS = MappingProxyType({
    kind: Token(kind, str(kind), value)
    for kind, value
    in [(TokenKind.PHI, (1 + math.sqrt(5)) / 2),
        (TokenKind.PI, math.pi),
        (TokenKind.E, math.e),
        (TokenKind.INFINITY, math.inf),
        (TokenKind.NOT_A_NUMBER, math.nan)]
})

# Lexer tries these in order, first prefix match wins.
CONSTANT_SPELLINGS = MappingProxyType({
    'φ': CONSTANTS[TokenKind.PHI],
    'phi': CONSTANTS[TokenKind.PHI],
    'π': CONSTANTS[TokenKind.PI],
    'pi': CONSTANTS[TokenKind.PI],
    'e': CONSTANTS[TokenKind.E],
    'E': CONSTANTS[TokenKind.E],
    '∞': CONSTANTS[TokenKind.INFINITY],
    'inf': CONSTANTS[TokenKind.INFINITY],
    'nan': CONSTANTS[TokenKind.NOT_A_NUMBER],
})

BOOLEAN_SPELLINGS = MappingProxyType({
    token.raw: token
    for token
    in BOOLEANS.values()
})

OPERATOR_SYMBOLS = MappingProxyType({
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.MULTIPLY,
    '/': TokenKind.DIVIDE,
    '(': TokenKind.PARENTHESIS_OPEN,
    ')': TokenKind.PARENTHESIS_CLOSE,
    ',': TokenKind.COMMA,
    ';': TokenKind.SEMICOLON,
    ':': TokenKind.COLON,
    '%': TokenKind.MOD,
    '^': TokenKind.CARET,
    '&': TokenKind.AMPERSAND,
    '|': TokenKind.PIPE,
    '=': TokenKind.EQUAL,
    '>': TokenKind.GREATER_THAN,
    '<': TokenKind.LESS_THAN,
})

# Comparisons that grow into their -or-equal form when followed by '='.
OR_EQUAL = MappingProxyType({
    TokenKind.GREATER_THAN: TokenKind.GREATER_THAN_OR_EQUAL,
    TokenKind.LESS_THAN: TokenKind.LESS_THAN_OR_EQUAL,
})
