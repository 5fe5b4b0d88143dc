from collections import namedtuple

# Symbol, NonTerminal, Terminal are convenience classes for the symbols that compose a ParseRule
# These classes are duck-typed, anything with `is_terminal` and `name` will do

#: Name of the terminal appended to every token stream
EOF = "EOF"


class _Empty:
    """Marker put in a FIRST set when a nonterminal has an empty production"""
    def __repr__(self):
        return "EMPTY"

EMPTY = _Empty()


class Symbol:
    """Base class for non-terminals and terminals, this is used when defining ParseRule objects"""
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return (isinstance(other, Symbol) and
                self.is_terminal == other.is_terminal and
                self.name == other.name)

    def __hash__(self):
        return hash((self.is_terminal, self.name))


class NonTerminal(Symbol):
    """Represents a non-terminal symbol in the grammar, matching tokens according to
    any ParseRules with the same head"""
    is_terminal = False

    @property
    def head(self):
        return self.name

    def __repr__(self):
        return "NonTerminal({0!r})".format(self.name)

    def __str__(self):
        return "<{0}>".format(self.name)


class Terminal(Symbol):
    """Represents a terminal symbol in the grammar, matching a single token of the input"""
    is_terminal = True

    def match(self, token):
        """Returns true if token's terminal type is this Terminal"""
        return token.type == self.name

    def __repr__(self):
        return "Terminal({0!r})".format(self.name)

    def __str__(self):
        return self.name


Token = namedtuple("Token", ["type", "word", "tag"])
Token.__new__.__defaults__ = (None, None)
Token.__doc__ = """A classified input token, the leaves of a derivation tree.

.. py:attribute:: type

    Name of the terminal symbol this token matches.

.. py:attribute:: word

    The surface word, or ``None`` for synthetic tokens such as the end marker.

.. py:attribute:: tag

    The part-of-speech tag the token was classified from, or ``None``.
"""
