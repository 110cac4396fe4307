from os import isatty, path
from sys import stdin, stdout, stderr
from argparse import ArgumentParser, REMAINDER, OPTIONAL

import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .lexer import Lexer, normalize
from .operators import OPERATOR_TOKENS
from .solver import solve
from .util import AmarehError


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Persistent
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.amareh_history'

    def dumper(self):
        '''
        Dump every token: kind, raw text and value.
        '''
        print('<kind>\t<repr(raw)>\t<value>')
        for line in self.args.expressions:
            try:
                for token in Lexer(normalize(line)).tokens():
                    print(token.kind.name, repr(token.raw), token, sep='\t')
            except AmarehError as e:
                self._report(line, e)

    def executor(self):
        '''
        Solve each expression, one per line, and print its value.
        '''
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                print(solve(line))
            # Abort rest of line, carry on with the next
            except AmarehError as e:
                self._report(line, e)

    def raw_grammar(self):
        '''
        Print operator symbols, spellings and synonyms the lexer knows.
        '''
        print('operators:', *sorted(token.raw
                                    for token in OPERATOR_TOKENS.values()))
        print('spellings:', *Lexer.SPELLINGS)
        print('synonyms:', *('{}={}'.format(synonym, canonical)
                             for synonym, canonical
                             in Lexer.SYNONYMS.items()))

    def _report(self, line, error):
        self.failures += 1
        logger.debug('failed on %r', line, exc_info=self.args.verbose)
        print('error:', error, file=stderr)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.failures = 0
        self.argument_parser = ArgumentParser(description='Calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return exit status: 1 if any expression failed.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            format='%(name)s: %(message)s')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        self.failures = 0
        try:
            self.args.action()
        except KeyboardInterrupt:
            return 1
        return 1 if self.failures else 0
