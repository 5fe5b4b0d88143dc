import logging
from collections import namedtuple

from .errors import GrammarError, NoParseError
from .grammar import Action, ParseRule
from .np_grammar import PHRASE, SENT, make_rule_set
from .symbols import EMPTY, EOF, NonTerminal, Terminal, Token
from .tree import build_tree

logger = logging.getLogger(__name__)

#: Head of the augmented start rule, ``START ::= <entry> EOF``
START = "START"


class StateItem:
    """A dotted rule anchored at the column where its recognition began.
     This is often called an Earley Item in the literature"""

    def __init__(self, rule, position, origin):
        self.rule = rule
        self.position = position
        self.origin = origin

    @property
    def is_complete(self):
        # Not cached, the entry rule can grow after the item is made
        return len(self.rule.symbols) == self.position

    @property
    def next_symbol(self):
        return self.rule.symbols[self.position]

    def advance(self):
        return StateItem(self.rule, self.position + 1, self.origin)

    def at(self, position):
        """The same rule and origin with the dot moved to position"""
        return StateItem(self.rule, position, self.origin)

    def __repr__(self):
        symbols = [str(symbol) for symbol in self.rule.symbols]
        symbols.insert(self.position, ".")
        return "<{0} ::= {1}, {2}>".format(self.rule.head, " ".join(symbols), self.origin)

    def to_tuple(self):
        return (id(self.rule), self.position, self.origin)

    def __hash__(self):
        return hash(self.to_tuple())

    def __eq__(self, other):
        return self.to_tuple() == other.to_tuple()


class State:
    """The ordered, duplicate free list of items valid at one chart column"""
    def __init__(self):
        self.items = []
        self._members = set()

    def add(self, item):
        """Appends item unless an equal one is present. Returns true if it was appended."""
        if item in self._members:
            return False
        self._members.add(item)
        self.items.append(item)
        return True

    def __contains__(self, item):
        return item in self._members

    def __getitem__(self, index):
        return self.items[index]

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __repr__(self):
        return "[" + ", ".join(map(repr, self.items)) + "]"


class ParseForest:
    """Maps (item, column) to the (child item, child column) pairs that justified advancing
    the item past a nonterminal. A cell with several children is an ambiguity."""
    def __init__(self):
        self._cells = {}

    def new_key(self, item, column):
        self._cells[(item, column)] = []

    def append(self, item, column, child, child_column):
        children = self._cells.setdefault((item, column), [])
        # Rebuilding a column after a rollback revisits the same completions
        if (child, child_column) not in children:
            children.append((child, child_column))

    def get(self, item, column):
        """Returns the recorded children, or ``None`` if item was reached by scanning a token"""
        return self._cells.get((item, column))

    def discard_from(self, column):
        """Forgets every cell at column or later"""
        for key in [key for key in self._cells if key[1] >= column]:
            del self._cells[key]

    def snapshot(self):
        """A plain description of every cell, in recording order"""
        return [(repr(item), column, [(repr(child), child_column) for child, child_column in children])
                for (item, column), children in self._cells.items()]

    def __contains__(self, key):
        return key in self._cells

    def __len__(self):
        return len(self._cells)


Recovery = namedtuple("Recovery", ["kind", "column", "word", "rule_length", "token_count"])
Recovery.__doc__ = """One step taken by the error recovery of a `Chart`.

.. py:attribute:: kind

    ``"widen"`` when the entry rule grew and the chart was rolled back, ``"drop"`` when the
    trailing token was dropped and the parse restarted.

.. py:attribute:: column

    The column recognition failed at.

.. py:attribute:: word

    The surface word of the token before that column, or ``None``.

.. py:attribute:: rule_length

    Length of the entry rule's right-hand-side after the step.

.. py:attribute:: token_count

    Number of real tokens left after the step.
"""

_NO_ERROR = object()


class Chart:
    """Everything owned by the parse of a single sentence: the columns, the parse forest,
    the token stream and a private copy of the entry rule that recovery widens."""
    def __init__(self, parser, tokens):
        self.rule_set = parser.rule_set
        self.first = parser.first
        self.phrase = NonTerminal(parser.phrase)
        shared_entry = parser.entry_rule
        self.entry = ParseRule(shared_entry.head, list(shared_entry.symbols), shared_entry.action)
        self.start_rule = ParseRule(START, [NonTerminal(self.entry.head), Terminal(EOF)], Action.START)
        self.accept = StateItem(self.start_rule, 2, 0)
        self.tokens = list(tokens) + [Token(EOF)]
        #: `Recovery` steps taken so far, in order
        self.recoveries = []
        self._restart()

    @property
    def token_count(self):
        """Number of real tokens, not counting the end marker"""
        return len(self.tokens) - 1

    def _restart(self):
        self.states = [State()]
        self.states[0].add(StateItem(self.start_rule, 0, 0))
        self.forest = ParseForest()

    def rules_for(self, head):
        if head == self.entry.head:
            return [self.entry]
        return self.rule_set.get(head)

    def widen(self):
        """Lets the entry rule match one more PHRASE"""
        self.entry.symbols.append(self.phrase)

    def _admit(self, rule, token):
        # Prune predictions that cannot start with the lookahead token
        if not rule.symbols:
            return True
        symbol = rule.symbols[0]
        if symbol.is_terminal:
            return symbol.match(token)
        if token.type == EOF:
            return True
        first = self.first.get(symbol.head, ())
        return EMPTY in first or token.type in first

    def _add_advanced(self, state, item, column, child, child_column):
        if state.add(item):
            self.forest.new_key(item, column)
        self.forest.append(item, column, child, child_column)

    def build_state(self, i):
        """Runs completer, predictor and scanner over column i until it stops growing"""
        token = self.tokens[i]
        state = self.states[i]
        # Empty rules completed in this column, by head
        needs_completion = {}
        predicted = set()

        j = 0
        while j < len(state):
            item = state[j]
            j += 1
            rule = item.rule

            if item.is_complete:
                # Completion
                if not rule.symbols:
                    needs_completion[rule.head] = item
                for parent in self.states[item.origin]:
                    if parent == item:
                        break
                    if parent.is_complete:
                        continue
                    symbol = parent.next_symbol
                    if not symbol.is_terminal and symbol.head == rule.head:
                        self._add_advanced(state, parent.advance(), i, item, i)
                continue

            symbol = item.next_symbol
            if not symbol.is_terminal:
                # Prediction
                head = symbol.head
                if head in needs_completion:
                    self._add_advanced(state, item.advance(), i, needs_completion[head], i)
                if head in predicted:
                    continue
                predicted.add(head)
                for prediction in self.rules_for(head):
                    if self._admit(prediction, token):
                        state.add(StateItem(prediction, 0, i))
            elif symbol.match(token):
                # Scanning
                self.states[i + 1].add(item.advance())

        logger.debug("Column %d (%s): %d items", i, token.type, len(state))

    def recognize(self):
        """Fills the chart, recovering from errors by widening the entry rule and dropping
        trailing tokens. Returns the accepting column, or ``None`` if no tokens are left."""
        prev_error = _NO_ERROR
        i = 0
        while True:
            if self.token_count == 0:
                return None

            stopped = False
            while i < len(self.tokens):
                self.states.append(State())
                if not self.states[i]:
                    stopped = True
                    break
                self.build_state(i)
                i += 1
            if not stopped:
                i -= 1

            if i >= len(self.tokens) - 1 and self.accept in self.states[i + 1]:
                return i + 1

            word = self.tokens[i - 1].word if i > 0 else None
            # An entry rule with more PHRASE slots than tokens can never match
            hopeless = len(self.entry.symbols) >= self.token_count
            if i == 0 or hopeless or (prev_error is not _NO_ERROR and word == prev_error):
                # Same failure twice: drop the trailing token and start over
                self.widen()
                del self.tokens[-2]
                self._note("drop", i, word)
                self._restart()
                prev_error = _NO_ERROR
                i = 0
                continue

            prev_error = word
            self.widen()
            self._note("widen", i, word)
            # Roll back the last two columns and try again
            del self.states[-2:]
            self.forest.discard_from(len(self.states))
            i -= 1

    def _note(self, kind, column, word):
        step = Recovery(kind, column, word, len(self.entry.symbols), self.token_count)
        self.recoveries.append(step)
        logger.debug("Recovery %s at column %d near %r: rule length %d, %d tokens left",
                     kind, column, word, step.rule_length, step.token_count)

    def build_tree(self, column):
        """Builds the derivation tree of the accepting item found at column"""
        return build_tree(self.forest, self.tokens, self.accept, column)


class EarleyParser:
    """Parses token streams against a `ParseRuleSet` whose entry rule is ``start ::= phrase``.
    The rule set is shared and never modified, each parse widens its own copy of the entry rule."""
    def __init__(self, rule_set=None, *, start=SENT, phrase=PHRASE):
        if rule_set is None:
            rule_set = make_rule_set()
        entry_rules = rule_set.get(start)
        if len(entry_rules) != 1:
            raise GrammarError("Entry head {0!r} needs exactly one rule, found {1}".format(
                start, len(entry_rules)))
        self.rule_set = rule_set
        self.entry_rule = entry_rules[0]
        self.phrase = phrase
        # Computed once, widening the entry rule never changes its first symbol
        self.first = rule_set.first

    def chart(self, tokens):
        """Returns a fresh `Chart` for tokens, without running it"""
        return Chart(self, tokens)

    def parse(self, tokens, *, fail_if_empty=True):
        """Parses a stream of classified ``tokens`` and returns the derivation tree of the
        sentence. Raises `NoParseError` if recovery dropped every token, or returns ``None``
        when ``fail_if_empty`` is false."""
        chart = self.chart(tokens)
        token_count = chart.token_count
        column = chart.recognize()
        if column is None:
            if not fail_if_empty:
                return None
            raise NoParseError("No derivation found for {0} tokens".format(token_count),
                               0, token_count, token_count)
        if chart.recoveries:
            logger.debug("Parsed after %d recovery steps, %d of %d tokens kept",
                         len(chart.recoveries), chart.token_count, token_count)
        return chart.build_tree(column)
