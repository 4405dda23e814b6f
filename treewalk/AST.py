import sys


class Node:
    """Base for syntax tree nodes.

    Nodes are immutable, compare structurally (same variant, equal fields)
    and print in constructor form.
    """
    __slots__ = []

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} nodes are immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} nodes are immutable')

    def fields(self):
        return tuple(getattr(self, slot) for slot in self.__slots__)

    # Immutable, so copies can share the node
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return type(self), self.fields()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.fields() == other.fields()

    def __hash__(self):
        return hash((type(self).__name__,) + self.fields())

    def __repr__(self):
        args = ', '.join(f'{slot}={getattr(self, slot)!r}'
                         for slot in self.__slots__)
        return f'{type(self).__name__}({args})'


# -------------------- Expressions -------------------- #

class StringLiteral(Node):
    __slots__ = ['text']

    def __init__(self, text):
        object.__setattr__(self, 'text', text)


# -------------------- Statements -------------------- #

class Let(Node):
    __slots__ = ['name', 'value']

    def __init__(self, name, value=None):
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)


# The closed sets of syntactic forms. A new variant is one class above plus
# an entry here.
expressions = (StringLiteral,)
statements = (Let,)


def is_expression(node):
    return type(node) in expressions


def is_statement(node):
    return type(node) in statements


def display(program, file=None):
    if file is None:
        file = sys.stdout
    for statement in program:
        print(repr(statement), file=file)
