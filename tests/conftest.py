from pytest import fixture

from amareh import CLI, Lexer


@fixture
def cli() -> CLI:
    '''
    Fresh CLI. Parses no arguments until run.
    '''
    return CLI()


@fixture
def kinds():
    '''
    Lex an (already normalized) expression down to its token kinds.
    '''
    def lex(expression: str) -> list:
        return [token.kind for token in Lexer(expression).lex()]
    return lex
