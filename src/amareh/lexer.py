import logging
import math

import regex

from .operators import OPERATOR_TOKENS
from .tokens import (Token, TokenKind, ILLEGAL, CONSTANTS, CONSTANT_SPELLINGS,
                     BOOLEAN_SPELLINGS, OPERATOR_SYMBOLS, OR_EQUAL)
from .util import UnexpectedCharacterError, InvalidDecimalError, \
    wrap_user_errors


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for calculator expressions.

    Holds a cursor over one (normalized) expression and nothing else, so
    needs one instance per expression.
    '''
    # Textual and unicode synonyms, rewritten before lexing.
    SYNONYMS = {
        '**': '^',
        '\N{MULTIPLICATION SIGN}': '*',
        '\N{DIVISION SIGN}': '/',
        '\N{LOGICAL AND}': '^',
    }
    # Named constants first, then booleans. Alternation order is table
    # order, so the first spelling that is a prefix wins, not the longest.
    SPELLINGS = dict(CONSTANT_SPELLINGS)
    SPELLINGS.update(BOOLEAN_SPELLINGS)
    # Default regex flags. Deliberately not POSIX (leftmost-longest).
    FLAGS = regex.VERSION1
    SYNONYM = regex.compile(r'|'.join(map(regex.escape, SYNONYMS)),
                            flags=FLAGS)
    SPELLING = regex.compile(r'|'.join(map(regex.escape, SPELLINGS)),
                             flags=FLAGS)

    def __init__(self, expression):
        self.expression = expression
        self.pos = 0

    @classmethod
    def normalize(cls, expression):
        '''
        Rewrite operator synonyms (**, ×, ÷, ∧) to their canonical symbol.
        '''
        return cls.SYNONYM.sub(lambda match: cls.SYNONYMS[match.group(0)],
                               expression)

    def lex(self):
        '''
        Take the expression and return all tokens.
        '''
        return list(self.tokens())

    def tokens(self):
        '''
        Yield tokens until the cursor reaches the end of the expression.

        Unknown characters become ILLEGAL tokens rather than stopping the
        lexer. Malformed numbers raise.
        '''
        while self.pos < len(self.expression):
            char = self.expression[self.pos]
            if char.isdecimal() or char == '.':
                token = self._lex_decimal()
            elif char.isspace():
                self.pos += 1
                continue
            elif char in OPERATOR_SYMBOLS:
                token = self._lex_operator(OPERATOR_SYMBOLS[char])
            else:
                token = self._lex_spelling()
            logger.debug('lexed %s %r', token.kind.name, token.raw)
            yield token

    def _peek(self, offset=1):
        idx = self.pos + offset
        if idx >= len(self.expression):
            return None
        return self.expression[idx]

    def _lex_operator(self, kind):
        '''
        Operator or punctuation at the cursor; > and < may take an =.
        '''
        self.pos += 1
        if kind in OR_EQUAL and self._peek(0) == '=':
            kind = OR_EQUAL[kind]
            self.pos += 1
        return OPERATOR_TOKENS[kind]

    def _lex_spelling(self):
        '''
        Named constant or boolean at the cursor, else one ILLEGAL character.
        '''
        match = self.SPELLING.match(self.expression, self.pos)
        if match is None:
            token = ILLEGAL._replace(raw=self.expression[self.pos])
            self.pos += 1
            return token
        self.pos = match.end()
        return self.SPELLINGS[match.group(0)]

    def _lex_decimal(self):
        '''
        Scan a number: digits, dots, grouping commas, trailing percent.

        Leaves the cursor on the first character not part of the number.
        '''
        raw = ''
        while self.pos < len(self.expression):
            char = self.expression[self.pos]
            if char.isdecimal() or char == '.':
                pass
            elif char == 'e':
                # A lone e is Euler's number. Anywhere else it is kept as
                # a literal character and left to the float parser.
                if not raw:
                    self.pos += 1
                    return CONSTANTS[TokenKind.E]
            elif char == ',':
                if raw.endswith(','):
                    raise UnexpectedCharacterError(
                        '{!r} at {}'.format(char, self.pos))
            elif char == '%':
                if not raw:
                    raise UnexpectedCharacterError(
                        '{!r} at {}'.format(char, self.pos))
                following = self._peek()
                # 10%3 is a modulo, leave the % to the next token.
                if following is not None and following.isdecimal():
                    break
                self.pos += 1
                return Token.decimal(self._parse(raw) / 100, raw + char)
            else:
                break
            raw += char
            self.pos += 1
        return Token.decimal(self._parse(raw), raw)

    @wrap_user_errors(InvalidDecimalError, 'Cannot convert {1!r}')
    def _parse(self, raw):
        number = float(raw)
        # Only digits, dots and e reach here, so inf means out of range.
        if math.isinf(number):
            raise InvalidDecimalError(
                '{!r} is out of range'.format(raw))
        return number


def normalize(expression):
    return Lexer.normalize(expression)


def tokenize(expression):
    '''
    Normalize and lex an expression in one go.
    '''
    return Lexer(normalize(expression)).lex()
