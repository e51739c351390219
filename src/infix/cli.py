from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession

from .compute import compute, format_result
from .converter import to_postfix
from .lexer import Lexer
from .util import InfixError


class Lines:
    '''
    Source of expressions, one per line: -e arguments or stdin.
    '''
    def __init__(self, lines):
        self.lines = lines

    def __iter__(self):
        return iter(self.lines)

    def reseed(self, line, result):
        '''
        Note the outcome of a line. Only matters when prompting.
        '''


class InteractiveInput(Lines):
    '''
    Prompting line source, pre-filled with whatever we want edited next.
    '''
    def __init__(self, prompt):
        super().__init__(())
        self.prompt = prompt
        self.default = ''

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,  # TODO: ~/.infix_history
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt(default=self.default)
        except EOFError:
            return

    def reseed(self, line, result):
        '''
        Offer the result for further editing, or the line that failed.
        '''
        if result.error is not None:
            self.default = line.strip()
        elif result.ok:
            self.default = format_result(result.value)
        else:
            self.default = ''


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = '= '

    def dumper(self):
        '''
        Dump each line's tokens and postfix form.
        '''
        lexer = Lexer()
        print('<tokens>\t<postfix>')
        for line in self.expressions:
            try:
                tokens = list(lexer.lex(line))
                postfix = to_postfix(tokens)
            except InfixError as e:
                self._error(e)
                continue
            print(' '.join(map(str, tokens)),
                  ' '.join(map(str, postfix)),
                  sep='\t')

    def executor(self):
        '''
        Compute every line, printing results.
        '''
        for line in self.expressions:
            result = compute(line)
            if result.error is not None:
                self._error(result.error)
            elif result.ok:
                print(format_result(result.value))
            self.expressions.reseed(line, result)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _error(self, e):
        print('Error ({}): {}'.format(e.phase, e.message), file=sys.stderr)
        if self.args.verbose:
            traceback.print_exception(type(e), e, e.__traceback__,
                                      file=sys.stderr)

    def _source(self):
        '''
        Pick where expressions come from.

        -e arguments if given; otherwise a prompt, when asked for one or when
        both stdin and stdout are ttys; otherwise plain stdin.
        '''
        if self.args.expressions is not None:
            return Lines(self.args.expressions)
        elif self.args.prompt or (isatty(sys.stdin.fileno()) and
                                  isatty(sys.stdout.fileno())):
            return InteractiveInput(self.args.prompt or self.DEFAULT_PROMPT)
        return Lines(sys.stdin)

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        parser = ArgumentParser(description='Infix arithmetic calculator')
        parser.add_argument('-v', '--verbose', action='store_true',
                            help='print stack traces of errors')
        sources = parser.add_mutually_exclusive_group()
        sources.add_argument('-e', '--expression', nargs=REMAINDER,
                             dest='expressions', metavar='EXPR',
                             help='compute these instead of reading stdin')
        sources.add_argument('-p', '--prompt', nargs=OPTIONAL,
                             const=self.DEFAULT_PROMPT,
                             help='prompt for expressions, even off a tty')
        actions = parser.add_mutually_exclusive_group()
        actions.add_argument('-G', '--raw-grammar', dest='action',
                             action='store_const', const=self.raw_grammar,
                             help='print the lexer grammar')
        actions.add_argument('-D', '--dump', dest='action',
                             action='store_const', const=self.dumper,
                             help='print tokens and postfix, not results')
        parser.set_defaults(action=self.executor)
        self.argument_parser = parser

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.expressions = self._source()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
