from .AST import Let, StringLiteral
from .parsing import (
    parse_program, parse_file, format_error, TreewalkSyntaxError,
    TreewalkUnterminatedString, TreewalkUnknownToken, TreewalkUnexpectedToken
)
