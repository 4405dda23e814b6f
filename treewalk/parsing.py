from collections import namedtuple
import logging

from rply import ParserGenerator
from rply import LexingError as RplyLexingError

from . import AST
from . import lexing


__all__ = ['parse_program', 'parse_file', 'format_error',
           'TreewalkSyntaxError', 'TreewalkUnterminatedString',
           'TreewalkUnknownToken', 'TreewalkUnexpectedToken']

logger = logging.getLogger(__name__)

ParserState = namedtuple('ParserState', ['source', 'tokens'])

END_OF_INPUT = 'end of input'

# What may follow each token type in a valid program, keyed by the type of
# the last token successfully read (None at the start of the input)
expected_after = {
    None: ('let', END_OF_INPUT),
    'LET': ('identifier',),
    'NAME': ("'='", 'let', END_OF_INPUT),
    'ASSIGN': ('string literal',),
    'STRING': ('let', END_OF_INPUT),
}

# -------------------------- Exceptions -------------------------- #

class TreewalkSyntaxError(RuntimeError):
    description = 'syntax error'

    def __init__(self, offset, line, col, found, expected):
        self.offset = offset
        self.line, self.col = line, col
        self.found = found
        self.expected = tuple(expected)
        super().__init__(self.message())

    def message(self):
        return (f'{self.line}:{self.col}: {self.description}, expected '
                f'{join_alternatives(self.expected)}, found {self.found}')

class TreewalkUnterminatedString(TreewalkSyntaxError):
    description = 'unterminated string literal'

class TreewalkUnknownToken(TreewalkSyntaxError):
    description = 'unknown token'

class TreewalkUnexpectedToken(TreewalkSyntaxError):
    description = 'unexpected token'


def join_alternatives(items):
    if len(items) == 1:
        return items[0]
    return ', '.join(items[:-1]) + ' or ' + items[-1]


# -------------------------- Positions -------------------------- #

def line_col(source, offset):
    line = source.count('\n', 0, offset) + 1
    col = offset - (source.rfind('\n', 0, offset) + 1) + 1
    return line, col


def expected_at(state, offset):
    previous = None
    for token in state.tokens:
        if token.getsourcepos().idx >= offset:
            break
        previous = token.gettokentype()
    return expected_after[previous]


def syntax_error(cls, state, offset, found, expected=None):
    if expected is None:
        expected = expected_at(state, offset)
    line, col = line_col(state.source, offset)
    return cls(offset, line, col, found, expected)


# -------------------------- Grammar -------------------------- #

pgen = ParserGenerator(lexing.token_types)


@pgen.production('program : statements')
def program(state, p):
    return p[0]


@pgen.production('statements : ')
@pgen.production('statements : statements statement')
def statements(state, p):
    if not p:
        return []
    p[0].append(p[1])
    return p[0]


# -------------------- let -------------------- #

@pgen.production('statement : LET NAME')
@pgen.production('statement : LET NAME ASSIGN expression')
def let(state, p):
    name = p[1].getstr()
    value = p[3] if len(p) == 4 else None
    return AST.Let(name, value)


# -------------------- expression -------------------- #

@pgen.production('expression : string')
def expression_string(state, p):
    return p[0]


@pgen.production('string : STRING')
def string_string(state, p):
    return AST.StringLiteral(p[0].getstr()[1:-1])


@pgen.error
def error_handler(state, token):
    sourcepos = token.getsourcepos()
    if sourcepos is None:
        raise syntax_error(TreewalkUnexpectedToken, state,
                           len(state.source), END_OF_INPUT)
    raise syntax_error(TreewalkUnexpectedToken, state,
                       sourcepos.idx, repr(token.getstr()))


parser = pgen.build()


# ------------------- Public parsing functions ------------------- #

def recording_lexer(source, tokens):
    for token in lexing.lex(source):
        tokens.append(token)
        yield token


def parse_program(source):
    """Parse source text into a list of statements.

    Empty or whitespace-only source is a valid, empty program. Raises a
    TreewalkSyntaxError for the first problem found; nothing is returned for
    a program that fails to parse.
    """
    state = ParserState(source=source, tokens=[])
    try:
        program = parser.parse(recording_lexer(source, state.tokens),
                               state=state)
    except RplyLexingError as e:
        offset = e.getsourcepos().idx
        if source[offset] == '"':
            error = syntax_error(TreewalkUnterminatedString, state, offset,
                                 END_OF_INPUT, expected=("'\"'",))
        else:
            error = syntax_error(TreewalkUnknownToken, state, offset,
                                 repr(source[offset]))
        logger.debug('Lexing failed: %s', error)
        raise error from e
    except TreewalkSyntaxError as e:
        logger.debug('Parsing failed: %s', e)
        raise
    logger.debug('Parsed %d statements from %d tokens',
                 len(program), len(state.tokens))
    return program


def parse_file(filename):
    with open(filename, 'r', encoding='utf-8') as f:
        source = f.read()
    return parse_program(source)


def format_error(error, source, filename='<string>'):
    lines = source.split('\n')
    marker = ' ' * (error.col - 1) + '^'
    return (f'Syntax Error of type {type(error).__name__}\n'
            f' File: {filename}\n'
            f' Line: {error.line}\n\n' +
            lines[error.line - 1] + '\n' +
            marker + '\n' +
            f'{error.description}, expected '
            f'{join_alternatives(error.expected)}, found {error.found}')
