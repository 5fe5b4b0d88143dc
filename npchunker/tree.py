import logging

from .errors import GrammarError
from .grammar import Action

logger = logging.getLogger(__name__)

#: Tag of the synthetic list nodes whose children are spliced into their parent
LIST = "NONE"


class AST:
    """Derivation tree node: a symbol tag and an ordered list of children.
    Leaves carry the token they were built from."""
    def __init__(self, tag, children=None, token=None):
        #: Name of the symbol this node represents
        self.tag = tag
        #: Child `AST` nodes, in input order
        self.children = children or []
        #: The `Token` of a leaf, ``None`` for inner nodes
        self.token = token

    @classmethod
    def leaf(cls, token):
        return cls(token.type, [], token)

    @property
    def word(self):
        return self.token.word if self.token is not None else None

    def __repr__(self):
        if self.token is not None:
            return "{0}={1}".format(self.tag, self.token.word)
        return "(" + self.tag + ": " + " ".join(map(repr, self.children)) + ")"

    def to_tuple(self):
        return (self.tag, self.token, tuple(child.to_tuple() for child in self.children))

    def __eq__(self, other):
        return isinstance(other, AST) and self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())


def _node(tag, *parts):
    children = []
    for part in parts:
        children.extend(part)
    return AST(tag, children)


def _kids(node):
    return node.children


def _leaf(token):
    return [AST.leaf(token)]


def _passthrough(args):
    return args[0]


def _wrap_first(args):
    return AST.leaf(args[0])


def _sent(args):
    return AST("SENT", list(args))


def _empty_list(args):
    return AST(LIST)


def _s_term(args):
    return _node(LIST, _leaf(args[0]), _kids(args[1]))


def _s_nonterm(args):
    return _node(LIST, [args[0]], _kids(args[1]))


def _s_nonterm3(args):
    # Left recursive list, PHRASE_S ::= PHRASE_S PHRASE
    return _node(LIST, _kids(args[0]), [args[1]])


def _q_1_term(args):
    return _node(LIST, _leaf(args[0]))


def _q_1_nonterm(args):
    return _node(LIST, [args[0]])


def _advp_term(args):
    return _node("ADVP", _leaf(args[0]))


def _ap_min_sing_plur(args):
    return _node(LIST, _kids(args[0]), [args[1]])


def _ap_min(args):
    return _node("APMIN", _kids(args[0]))


def _ap_min_sing_cont(args):
    return _node(LIST, _leaf(args[0]), _kids(args[1]))


def _ap_max(args):
    return _node("APMAX", *map(_kids, args[:4]))


def _prop_comp_noun_cont(args):
    return _node(LIST, _kids(args[0]), _kids(args[1]), _leaf(args[2]))


def _comp_noun_cont(args):
    return _node(LIST, _kids(args[0]), _leaf(args[1]))


def _siffer(args):
    return _node("NUMP", _kids(args[0]), _leaf(args[1]), _kids(args[2]))


def _np(args):
    return _node("NP", _kids(args[0]))


def _np_rest(args):
    return _node(LIST, [args[0]], _kids(args[1]))


def _np_sif(args):
    return _node(LIST, _kids(args[0]), _kids(args[1]), [args[2]])


def _np_com_1(args):
    return _node(LIST, _leaf(args[0]), _kids(args[1]))


def _np_com_2(args):
    return _node(LIST, _kids(args[0]), _leaf(args[1]), *map(_kids, args[2:7]),
                 _leaf(args[7]), _kids(args[8]))


def _np_com_3(args):
    return _node(LIST, *map(_kids, args[:7]), _leaf(args[7]), _kids(args[8]))


def _np_prop(args):
    return _node(LIST, _kids(args[0]), _kids(args[1]), _kids(args[2]), _leaf(args[3]),
                 _kids(args[4]))


def _nppc(args):
    return _node(LIST, _leaf(args[0]), _kids(args[1]), _kids(args[2]), _leaf(args[3]),
                 _kids(args[4]))


def _np_comp(args):
    # DET_Q AP_Q comp_noun COMPNOUNCONT_S konj NGEN_Q NUM_Q AP_Q com_noun COMNOUN_S
    return _node(LIST, _kids(args[0]), _kids(args[1]), _leaf(args[2]), _kids(args[3]),
                 _leaf(args[4]), _kids(args[5]), _kids(args[6]), _kids(args[7]),
                 _leaf(args[8]), _kids(args[9]))


def _pp(args):
    return _node("PP", _leaf(args[0]), [args[1]])


def _pp_mellan(args):
    return _node("PP", _leaf(args[0]), [args[1]], _leaf(args[2]), [args[3]])


def _pp_konj(args):
    return _node("PP", _leaf(args[0]), _leaf(args[1]), _leaf(args[2]), [args[3]])


def _vc_term(args):
    return _node("VC", _leaf(args[0]))


def _vc_term_list(args):
    return _node("VC", _leaf(args[0]), _kids(args[1]))


def _vc_term_list_sv(args):
    return _node("VC", _leaf(args[0]), _kids(args[1]), _leaf(args[2]))


def _infp(args):
    return _node("INFP", _leaf(args[0]), _kids(args[1]), _leaf(args[2]), _kids(args[3]))


# One builder per semantic action. Each receives the already built children of its rule,
# terminals as tokens and nonterminals as AST nodes, and returns a new node.
ACTIONS = {
    Action.START: _passthrough,
    Action.SENT: _sent,
    Action.S_BASE1: _empty_list,
    Action.S_BASE2: _empty_list,
    Action.S_TERM: _s_term,
    Action.S_NONTERM: _s_nonterm,
    Action.S_NONTERM1: _s_nonterm,
    Action.S_NONTERM2: _s_nonterm,
    Action.S_NONTERM3: _s_nonterm3,
    Action.Q_0: _empty_list,
    Action.Q_1_TERM: _q_1_term,
    Action.Q_1_NONTERM: _q_1_nonterm,
    Action.DEFAULT: _wrap_first,
    Action.PHRASE_2A_30: _passthrough,
    Action.PHRASE_2A_40: _passthrough,
    Action.PHRASE_2B: _passthrough,
    Action.PHRASE_3A: _passthrough,
    Action.PHRASE_3B: _passthrough,
    Action.PHRASE_3C: _passthrough,
    Action.PHRASE_4: _passthrough,
    Action.PHRASE_5: _passthrough,
    Action.ADVP_TERM: _advp_term,
    Action.DET: _wrap_first,
    Action.DET_POSS_PRON_TERM: _wrap_first,
    Action.DET_POSS_PRON_NONTERM: _passthrough,
    Action.ADJ_SING_PLUR: _wrap_first,
    Action.AP_MIN_SING_PLUR: _ap_min_sing_plur,
    Action.AP_MIN: _ap_min,
    Action.AP_MIN_SING_CONT: _ap_min_sing_cont,
    Action.AP1: _passthrough,
    Action.AP2: _passthrough,
    Action.AP_MAX: _ap_max,
    Action.CONJ_DEL_MINQ: _passthrough,
    Action.PROP_COMP_NOUN_CONT: _prop_comp_noun_cont,
    Action.COMP_NOUN_CONT: _comp_noun_cont,
    Action.SIFFER: _siffer,
    Action.NP1: _np,
    Action.NP_REST: _np_rest,
    Action.NP2: _np,
    Action.NP_SIF: _np_sif,
    Action.NP_COM_1: _np_com_1,
    Action.NP_COM_2: _np_com_2,
    Action.NP_COM_3: _np_com_3,
    Action.NP3: _np,
    Action.NP_COM: _passthrough,
    Action.NP_PROP: _np_prop,
    Action.NPPC: _nppc,
    Action.NP_COMP: _np_comp,
    Action.PP1: _pp,
    Action.VC_TERM: _vc_term,
    Action.PP2: _pp,
    Action.VC_TERM_LIST: _vc_term_list,
    Action.PP_MELLAN: _pp_mellan,
    Action.PP_KONJ: _pp_konj,
    Action.VC_TERM_LIST_SV: _vc_term_list_sv,
    Action.INFP: _infp,
}


def apply_action(action, children):
    """Builds the node for one rule application"""
    try:
        builder = ACTIONS[action]
    except KeyError:
        raise GrammarError("No tree builder for action {0}".format(action))
    return builder(children)


def resolve_ambiguity(candidates):
    """Picks one of several (item, column) children recorded for a forest cell: the one
    whose rule has the highest action priority. Candidates are scanned last recorded
    first and only a strictly higher priority replaces the pick, so on a tie the last
    recorded candidate wins."""
    best = None
    for candidate in reversed(candidates):
        if best is None or candidate[0].rule.priority > best[0].rule.priority:
            best = candidate
    return best


def build_tree(forest, tokens, item, column):
    """Reconstructs the derivation of a completed item ending at column, taking tokens
    from the end of ``tokens``."""
    node, cursor = _build(forest, tokens, item, column, len(tokens) - 1)
    return node


def _build(forest, tokens, item, column, cursor):
    # Walks the rule right to left. Returns the node and the index of the last token
    # not yet consumed.
    children = []
    position = item.position
    while position > 0:
        candidates = forest.get(item.at(position), column)
        if candidates is None:
            # Reached by the scanner, so the symbol is a terminal
            children.append(tokens[cursor])
            cursor -= 1
            column -= 1
        else:
            if len(candidates) > 1:
                child, child_column = resolve_ambiguity(candidates)
                logger.debug("Resolved %d-way ambiguity at %r to %r", len(candidates),
                             item.at(position), child)
            else:
                child, child_column = candidates[0]
            node, cursor = _build(forest, tokens, child, child_column, cursor)
            children.append(node)
            column = child.origin
        position -= 1
    children.reverse()
    return apply_action(item.rule.action, children), cursor
