import logging
import os
import sys

from . import AST
from .parsing import parse_program, format_error, TreewalkSyntaxError


fixture = 'let foo'


def run(args):
    if len(args) > 1:
        sys.exit('Usage: treewalk [FILE]')
    if args:
        filename = args[0]
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                source = f.read()
        except FileNotFoundError:
            sys.exit(f'File "{filename}" not found')
    else:
        filename, source = '<fixture>', fixture

    try:
        program = parse_program(source)
    except TreewalkSyntaxError as e:
        sys.exit('\n' + format_error(e, source, filename))
    AST.display(program)
    return program


def main():
    if os.environ.get('TREEWALK_DEBUG'):
        logging.basicConfig(level=logging.DEBUG)
    run(sys.argv[1:])


if __name__ == '__main__':
    main()
