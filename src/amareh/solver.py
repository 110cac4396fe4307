import logging

from .lexer import Lexer, normalize
from .tokens import TokenKind, format_token
from .util import AmarehError, InvalidExpressionError


logger = logging.getLogger(__name__)


class Reducer:
    '''
    Collapse a token sequence into a single token.

    Operators apply strictly in textual order, left to right. There is no
    precedence and no grouping: 1+2*3 is (1+2)*3.
    '''

    def __init__(self, tokens):
        # Own copy; reduction replaces slots.
        self.tokens = list(tokens)

    def reduce(self):
        '''
        Apply every operator and return the one token left.
        '''
        tokens = self.tokens
        for token in tokens:
            if token.kind.is_illegal:
                raise InvalidExpressionError(
                    'Unknown symbol {!r}'.format(token.raw))
        i = 0
        while i < len(tokens):
            if tokens[i].kind.is_operator:
                result = self._apply(tokens, i)
                logger.debug('reduced %s %s %s to %s',
                             *tokens[i - 1:i + 2], result)
                # Result takes the right operand's slot and everything up to
                # the operator is dropped; scanning resumes relative to the
                # shortened window.
                tokens[i + 1] = result
                del tokens[:i + 1]
                i -= 2
            i += 1
        if len(tokens) != 1:
            raise InvalidExpressionError(
                'Expected one value, got {}'.format(len(tokens)))
        return tokens[0]

    def _apply(self, tokens, i):
        '''
        Apply operator at i to its neighbours.
        '''
        operator = tokens[i]
        if i == 0 or i == len(tokens) - 1:
            raise InvalidExpressionError(
                '{} needs a left and a right operand'.format(operator.raw))
        left, right = tokens[i - 1], tokens[i + 1]
        # A named constant may stand in for the right operand.
        if left.kind is not TokenKind.DECIMAL or \
           right.kind is not TokenKind.DECIMAL and \
           not (left.kind.is_constant or right.kind.is_constant):
            raise InvalidExpressionError(
                'Cannot apply {} to {!r} and {!r}'.format(operator.raw,
                                                          left.raw,
                                                          right.raw))
        if operator.value is None:
            raise InvalidExpressionError(
                '{} is not supported'.format(operator.raw))
        return operator.value(left, right)


def solve(expression):
    '''
    Compute an expression and return its value as canonical text.

    Raises an AmarehError subclass on the first problem found; there are
    no partial results.
    '''
    try:
        tokens = Lexer(normalize(expression)).lex()
        result = Reducer(tokens).reduce()
    except AmarehError as e:
        logger.debug('cannot solve %r: %s', expression, e)
        raise
    return format_token(result)
