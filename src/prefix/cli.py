from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .util import PrefixError
from .lexer import Lexer
from .validator import validate
from .builder import build
from .expression import count_nodes, render
from .calculator import Calculator


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Lives as long as the process does.
                                    history=InMemoryHistory(),
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=True,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the prefix calculator.
    '''

    DEFAULT_PROMPT = '> '
    # Lines starting with this are history commands, not expressions.
    COMMAND_PREFIX = ':'

    def dumper(self):
        '''
        Dump tokens, then node counts and the rebuilt expression.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(text)>\t<value>')
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                tokens = lexer.lex(line)
                for token in tokens:
                    print(token.kind.value, repr(token.text), token.value,
                          sep='\t')
                validate(tokens)
                tree = build(tokens)
            except PrefixError as e:
                print(e.args[0], file=stderr)
                continue
            internal, leaves = count_nodes(tree)
            print('internal={}\tleaves={}\t{}'.format(internal, leaves,
                                                      render(tree)))

    def executor(self):
        '''
        Run calculator on every expression, printing results.
        '''
        calculator = Calculator(history_length=self.args.history_length)
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            try:
                if line.startswith(self.COMMAND_PREFIX):
                    self.command(calculator, line[len(self.COMMAND_PREFIX):])
                else:
                    print(calculator.calculate(line))
            # Abort entire rest of line, makes sense anyway
            except PrefixError as e:
                logger.debug('user error on %r', line, exc_info=True)
                print(e.args[0], file=stderr)

    def printhistory(self, calculator):
        '''
        Print history, most recent first, with the index to promote it by.
        '''
        for index, entry in enumerate(calculator.get_expression_history()):
            print('{}: {}'.format(index, entry))

    def command(self, calculator, line):
        '''
        Run a history command (the line, less its prefix).

        h           print history
        u INDEX     move entry INDEX to the front, then print history
        l [LENGTH]  print, or set, history length
        c           clear history
        '''
        name, *args = line.split() or ['']
        try:
            if name == 'h' and not args:
                self.printhistory(calculator)
            elif name == 'u' and len(args) == 1:
                calculator.update_expression_history(int(args[0]))
                self.printhistory(calculator)
            elif name == 'l' and not args:
                print(calculator.get_history_length())
            elif name == 'l' and len(args) == 1:
                calculator.set_history_length(int(args[0]))
            elif name == 'c' and not args:
                calculator.clear_history()
            else:
                raise PrefixError('Unknown command {!r}; try one of:\n{}'
                                  .format(line, self.command.__doc__))
        except (TypeError, ValueError) as e:
            raise PrefixError('Bad argument to {!r}: {}'.format(name, e)) \
                from e

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Prefix notation calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument(
            '-n', '--history-length',
            type=int,
            default=Calculator.DEFAULT_HISTORY_LENGTH)
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
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.history_length < 1:
            self.argument_parser.error('history length must be at least 1')
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=stderr,
                                format='%(name)s: %(message)s')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
