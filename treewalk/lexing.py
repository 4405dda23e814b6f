from rply import LexerGenerator

__all__ = ["lexer", "lex", "token_types"]

name_pattern = r"[a-zA-Z_][a-zA-Z0-9_]*"

lg = LexerGenerator()

# Keywords must come before NAME, and only match whole words
lg.add("LET", r"let(?![a-zA-Z0-9_])")

lg.add("ASSIGN", r"\=")

lg.add("NAME", name_pattern)
# No escapes, everything between the quotes is taken verbatim
lg.add("STRING", r"\"[^\"]*\"")

# Whitespace, including newlines
lg.ignore(r"[ \t\r\n\f\v]+")

lexer = lg.build()

token_types = [rule.name for rule in lexer.rules]


def lex(source):
    return lexer.lex(source)
