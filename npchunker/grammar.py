from collections import defaultdict
from enum import Enum

from .errors import GrammarError
from .symbols import EMPTY


class Action(Enum):
    """The closed set of semantic actions. Each one carries the priority used to resolve
    ambiguity, higher wins."""
    START = ("start", 0)
    SENT = ("sent", 0)
    S_BASE1 = ("S_base1", 20)
    S_BASE2 = ("S_base2", 10)
    S_TERM = ("S_term", 30)
    S_NONTERM = ("S_nonterm", 30)
    S_NONTERM1 = ("S_nonterm1", 30)
    S_NONTERM2 = ("S_nonterm2", 30)
    S_NONTERM3 = ("S_nonterm3", 500)
    Q_0 = ("Q_0", 20)
    Q_1_TERM = ("Q_1_term", 30)
    Q_1_NONTERM = ("Q_1_nonterm", 30)
    DEFAULT = ("default", 10)
    PHRASE_2A_30 = ("phrase_2a", 30)
    PHRASE_2A_40 = ("phrase_2a", 40)
    PHRASE_2B = ("phrase_2b", 40)
    PHRASE_3A = ("phrase_3a", 50)
    PHRASE_3B = ("phrase_3b", 50)
    PHRASE_3C = ("phrase_3c", 50)
    PHRASE_4 = ("phrase_4", 60)
    PHRASE_5 = ("phrase_5", 70)
    ADVP_TERM = ("advp_term", 90)
    DET = ("det", 90)
    DET_POSS_PRON_TERM = ("det_poss_pron_term", 90)
    DET_POSS_PRON_NONTERM = ("det_poss_pron_nonterm", 90)
    ADJ_SING_PLUR = ("adj_sing_plur", 100)
    AP_MIN_SING_PLUR = ("ap_min_sing_plur", 110)
    AP_MIN = ("ap_min", 120)
    AP_MIN_SING_CONT = ("ap_min_sing_cont", 130)
    AP1 = ("ap1", 140)
    AP2 = ("ap2", 150)
    AP_MAX = ("ap_max", 150)
    CONJ_DEL_MINQ = ("conj_del_minq", 160)
    PROP_COMP_NOUN_CONT = ("prop_comp_noun_cont", 170)
    COMP_NOUN_CONT = ("comp_noun_cont", 170)
    SIFFER = ("siffer", 170)
    NP1 = ("np1", 180)
    NP_REST = ("np_rest", 180)
    NP2 = ("np2", 190)
    NP_SIF = ("np_sif", 190)
    NP_COM_1 = ("np_com_1", 200)
    NP_COM_2 = ("np_com_2", 200)
    NP_COM_3 = ("np_com_3", 200)
    NP3 = ("np3", 210)
    NP_COM = ("np_com", 210)
    NP_PROP = ("np_prop", 210)
    NPPC = ("nppc", 210)
    NP_COMP = ("np_comp", 210)
    PP1 = ("pp1", 220)
    VC_TERM = ("vc_term", 220)
    PP2 = ("pp2", 230)
    VC_TERM_LIST = ("vc_term_list", 230)
    PP_MELLAN = ("pp_mellan", 240)
    PP_KONJ = ("pp_konj", 240)
    VC_TERM_LIST_SV = ("vc_term_list_sv", 240)
    INFP = ("infp", 250)

    def __init__(self, label, priority):
        self.label = label
        self.priority = priority

    def __str__(self):
        return "{0}_{1}".format(self.label, self.priority)


class ParseRule:
    """Represents a single production in a context free grammar."""
    def __init__(self, head, symbols, action=Action.DEFAULT):
        #: The left-hand-side of the production, a string indicating the name of the symbol produced.
        self.head = head
        #: The right-hand-side of the production, a list of terminals and non-terminals (symbols).
        self.symbols = symbols
        #: The `Action` that builds a tree node from this rule's children.
        self.action = action

    @property
    def priority(self):
        return self.action.priority

    def same_as(self, other):
        """Returns true if other has the same head and right-hand-side"""
        return self.head == other.head and list(self.symbols) == list(other.symbols)

    def __repr__(self):
        return "ParseRule({0!r}, {1!r}, {2})".format(self.head, self.symbols, self.action)

    def __str__(self):
        return "<{0}> ::= {1}".format(self.head, " ".join(map(str, self.symbols)))


class ParseRuleSet:
    """Stores a set of `ParseRule`, with fast retrieval by rule head"""
    def __init__(self):
        self._rules = defaultdict(list)
        self._first = None

    def get(self, head):
        """Returns a list of `ParseRule` objects with matching head, in declaration order"""
        return self._rules.get(head, [])

    def add(self, rule):
        """Adds a new `ParseRule` to the set. Returns the rule actually stored, which is an
        existing equal rule if there was one."""
        if not isinstance(rule.head, str):
            raise GrammarError("Rule head must be a nonterminal name, got {0!r}".format(rule.head))
        if not isinstance(rule.action, Action):
            raise GrammarError("Rule {0} has no semantic action".format(rule))
        for existing in self._rules[rule.head]:
            if existing.same_as(rule):
                return existing
        self._rules[rule.head].append(rule)
        self._first = None
        return rule

    def __iter__(self):
        for rules in self._rules.values():
            for rule in rules:
                yield rule

    def __contains__(self, head):
        return head in self._rules

    def __len__(self):
        return sum(len(rules) for rules in self._rules.values())

    @property
    def first(self):
        """FIRST sets of every head, computed on demand"""
        if self._first is None:
            self._first = compute_first(self)
        return self._first


def first_edges(rule_set):
    """Returns the initial FIRST sets and the list of (src, dest) heads where
    FIRST(dest) must include FIRST(src)"""
    first = {}
    edges = []
    for rule in rule_set:
        first.setdefault(rule.head, set())
        if not rule.symbols:
            first[rule.head].add(EMPTY)
            continue
        symbol = rule.symbols[0]
        if symbol.is_terminal:
            first[rule.head].add(symbol.name)
        else:
            edge = (symbol.head, rule.head)
            if edge not in edges:
                edges.append(edge)
    return first, edges


def union_first(first, edges):
    """Single pass over the dependency edges. Returns true if any set grew."""
    changed = False
    for src, dest in edges:
        dest_set = first.setdefault(dest, set())
        size = len(dest_set)
        dest_set |= first.get(src, set())
        if len(dest_set) != size:
            changed = True
    return changed


def compute_first(rule_set):
    """Returns a dict from head to the set of terminal names (and possibly `EMPTY`)
    that can start one of its expansions."""
    first, edges = first_edges(rule_set)
    # Every pass either grows a set or stops, and sets are bounded by the terminal alphabet
    while union_first(first, edges):
        pass
    return first
