'''
Lexer tests
'''

import math

import regex

from amareh.lexer import Lexer, normalize, tokenize
from amareh.tokens import TokenKind, CONSTANTS, BOOLEANS
from amareh.util import UnexpectedCharacterError, InvalidDecimalError

from pytest import raises


def test_normalize_synonyms():
    assert normalize('2**3×4÷5∧6') == '2^3*4/5^6'


def test_normalize_leaves_everything_else():
    assert normalize('1 + 2 * 3 % pi') == '1 + 2 * 3 % pi'


def test_empty(kinds):
    assert kinds('') == []
    assert kinds(' \t\n') == []


def test_arithmetic(kinds):
    assert kinds('1 + 2') == [TokenKind.DECIMAL,
                              TokenKind.PLUS,
                              TokenKind.DECIMAL]


def test_every_operator_symbol(kinds):
    assert kinds('+-*/(),;:%^&|=><') == [
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.MULTIPLY,
        TokenKind.DIVIDE,
        TokenKind.PARENTHESIS_OPEN,
        TokenKind.PARENTHESIS_CLOSE,
        TokenKind.COMMA,
        TokenKind.SEMICOLON,
        TokenKind.COLON,
        TokenKind.MOD,
        TokenKind.CARET,
        TokenKind.AMPERSAND,
        TokenKind.PIPE,
        TokenKind.EQUAL,
        TokenKind.GREATER_THAN,
        TokenKind.LESS_THAN,
    ]


def test_or_equal(kinds):
    assert kinds('2>=1') == [TokenKind.DECIMAL,
                             TokenKind.GREATER_THAN_OR_EQUAL,
                             TokenKind.DECIMAL]
    assert kinds('2<=1') == [TokenKind.DECIMAL,
                             TokenKind.LESS_THAN_OR_EQUAL,
                             TokenKind.DECIMAL]
    assert kinds('2> =1') == [TokenKind.DECIMAL,
                              TokenKind.GREATER_THAN,
                              TokenKind.EQUAL,
                              TokenKind.DECIMAL]
    assert kinds('1<') == [TokenKind.DECIMAL, TokenKind.LESS_THAN]


def test_operator_carries_function():
    plus, = Lexer('+').lex()
    assert callable(plus.value)
    paren, = Lexer('(').lex()
    assert paren.value is None


def test_constants():
    assert Lexer('pi').lex() == [CONSTANTS[TokenKind.PI]]
    assert Lexer('π').lex() == [CONSTANTS[TokenKind.PI]]
    assert Lexer('φ').lex() == Lexer('phi').lex()
    assert Lexer('e').lex() == Lexer('E').lex() == [CONSTANTS[TokenKind.E]]
    assert Lexer('∞').lex() == Lexer('inf').lex()
    nan, = Lexer('nan').lex()
    assert nan.kind is TokenKind.NOT_A_NUMBER
    assert math.isnan(nan.value)


def test_constant_values():
    phi, = Lexer('phi').lex()
    assert phi.value == (1 + math.sqrt(5)) / 2
    inf, = Lexer('inf').lex()
    assert inf.value == math.inf


def test_booleans():
    assert Lexer('true').lex() == [BOOLEANS[True]]
    assert Lexer('false').lex() == [BOOLEANS[False]]


def test_constant_next_to_number(kinds):
    assert kinds('2pi') == [TokenKind.DECIMAL, TokenKind.PI]


def test_illegal_does_not_stop_lexing(kinds):
    assert kinds('2 $ 3') == [TokenKind.DECIMAL,
                              TokenKind.ILLEGAL,
                              TokenKind.DECIMAL]
    illegal = Lexer('$').lex()[0]
    assert illegal.raw == '$'


def test_functions_are_not_lexed(kinds):
    assert kinds('sin') == [TokenKind.ILLEGAL] * 3


def test_decimal():
    one, = Lexer('12.5').lex()
    assert one.kind is TokenKind.DECIMAL
    assert one.raw == '12.5'
    assert one.value == 12.5


def test_decimal_dots():
    assert Lexer('.5').lex()[0].value == 0.5
    assert Lexer('5.').lex()[0].value == 5.0
    with raises(InvalidDecimalError):
        Lexer('.').lex()
    with raises(InvalidDecimalError, match=regex.escape("'1.2.3'")):
        Lexer('1.2.3').lex()


def test_percent():
    percent, = Lexer('10%').lex()
    assert percent.value == 0.1
    assert percent.raw == '10%'


def test_percent_followed_by_digit_is_modulo(kinds):
    assert kinds('10%3') == [TokenKind.DECIMAL,
                             TokenKind.MOD,
                             TokenKind.DECIMAL]
    assert Lexer('10%3').lex()[0].value == 10


def test_percent_followed_by_other(kinds):
    assert kinds('50%+1') == [TokenKind.DECIMAL,
                              TokenKind.PLUS,
                              TokenKind.DECIMAL]
    assert Lexer('50% 3').lex()[0].value == 0.5


def test_consecutive_commas():
    with raises(UnexpectedCharacterError):
        Lexer('1,,2').lex()


def test_grouping_comma_reaches_parser():
    with raises(InvalidDecimalError, match=regex.escape("'1,000'")):
        Lexer('1,000').lex()


def test_e_inside_number():
    thousand, = Lexer('2e3').lex()
    assert thousand.value == 2000
    assert thousand.raw == '2e3'
    with raises(InvalidDecimalError):
        Lexer('2e').lex()
    # No signed exponents.
    with raises(InvalidDecimalError):
        Lexer('1e-3').lex()


def test_cursor_after_number():
    lexer = Lexer('12 34')
    tokens = lexer.tokens()
    next(tokens)
    assert lexer.pos == 2
    next(tokens)
    assert lexer.pos == 5


def test_cursor_after_percent():
    lexer = Lexer('7%+')
    tokens = lexer.tokens()
    next(tokens)
    assert lexer.pos == 2


def test_tokenize_normalizes(kinds):
    assert [token.kind for token in tokenize('2**3')] == kinds('2^3')


def test_out_of_range_literal():
    with raises(InvalidDecimalError, match='out of range'):
        Lexer('1' + '0' * 400).lex()
    with raises(InvalidDecimalError, match='out of range'):
        Lexer('1e400').lex()
    with raises(InvalidDecimalError, match='out of range'):
        Lexer('1' + '0' * 400 + '%').lex()
