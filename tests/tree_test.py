from npchunker import AST, Action, GrammarError, ParseRule, StateItem, Terminal as T, Token, resolve_ambiguity
from npchunker.tree import LIST, apply_action
import unittest


def tok(type, word):
    return Token(type, word, None)


def leaves(*words):
    return AST(LIST, [AST.leaf(tok("x", word)) for word in words])


class ResolveAmbiguityTest(unittest.TestCase):
    def candidate(self, action, origin=0):
        return (StateItem(ParseRule("A", [T("a")], action), 1, origin), 1)

    def test_single(self):
        only = self.candidate(Action.DEFAULT)
        self.assertIs(resolve_ambiguity([only]), only)

    def test_highest_priority(self):
        low, high = self.candidate(Action.DEFAULT), self.candidate(Action.PHRASE_4)
        self.assertIs(resolve_ambiguity([low, high]), high)
        self.assertIs(resolve_ambiguity([high, low]), high)
        self.assertIs(resolve_ambiguity([low, high, self.candidate(Action.S_BASE1)]), high)

    def test_tie_goes_to_last_recorded(self):
        first = self.candidate(Action.PHRASE_4, 0)
        middle = self.candidate(Action.DEFAULT, 1)
        last = self.candidate(Action.PHRASE_4, 2)
        self.assertIs(resolve_ambiguity([first, middle, last]), last)
        same = [self.candidate(Action.S_TERM, origin) for origin in range(4)]
        self.assertIs(resolve_ambiguity(same), same[-1])


class ActionTest(unittest.TestCase):
    def apply(self, action, children, expected):
        node = apply_action(action, children)
        self.assertEqual(repr(node), expected)
        return node

    def test_default_wraps_token(self):
        node = self.apply(Action.DEFAULT, [tok("det", "den")], "det=den")
        self.assertEqual(node.word, "den")

    def test_empty_list(self):
        self.apply(Action.S_BASE1, [], "(NONE: )")
        self.apply(Action.Q_0, [], "(NONE: )")

    def test_right_list_splices(self):
        self.apply(Action.S_TERM, [tok("num", "tre"), leaves("fyra", "fem")],
                   "(NONE: num=tre x=fyra x=fem)")
        self.apply(Action.S_NONTERM, [AST("NP", [AST.leaf(tok("pron", "han"))]), leaves("a")],
                   "(NONE: (NP: pron=han) x=a)")

    def test_left_list_appends(self):
        phrase = AST.leaf(tok("adv", "inte"))
        self.apply(Action.S_NONTERM3, [leaves("a", "b"), phrase], "(NONE: x=a x=b adv=inte)")

    def test_np_wraps_spliced_children(self):
        self.apply(Action.NP3, [leaves("den", "hunden")], "(NP: x=den x=hunden)")

    def test_np_comp(self):
        children = [leaves("de"), leaves(), tok("comp_noun", "barn-"), leaves(),
                    tok("konj", "och"), leaves(), leaves(), leaves("unga"),
                    tok("com_noun", "vuxenutbildningen"), leaves()]
        self.apply(Action.NP_COMP, children,
                   "(NONE: x=de comp_noun=barn- konj=och x=unga com_noun=vuxenutbildningen)")

    def test_pp(self):
        np = AST("NP", [AST.leaf(tok("com_noun", "huset"))])
        self.apply(Action.PP2, [tok("prep", "i"), np], "(PP: prep=i (NP: com_noun=huset))")
        self.apply(Action.PP_MELLAN, [tok("prep_mellan", "mellan"), np, tok("konj", "och"), np],
                   "(PP: prep_mellan=mellan (NP: com_noun=huset) konj=och (NP: com_noun=huset))")

    def test_verb_chain(self):
        self.apply(Action.VC_TERM_LIST_SV, [tok("fin_verb", "har"), leaves(), tok("sup_verb", "sett")],
                   "(VC: fin_verb=har sup_verb=sett)")

    def test_passthrough(self):
        np = AST("NP", [])
        self.assertIs(apply_action(Action.PHRASE_4, [np]), np)

    def test_unknown_action(self):
        with self.assertRaises(GrammarError):
            apply_action("np3", [])


class ASTTest(unittest.TestCase):
    def test_equality(self):
        self.assertEqual(leaves("a", "b"), leaves("a", "b"))
        self.assertNotEqual(leaves("a", "b"), leaves("b", "a"))
        self.assertEqual(len({leaves("a"), leaves("a")}), 1)

    def test_inner_node_has_no_word(self):
        self.assertIsNone(leaves("a").word)


if __name__ == '__main__':
    unittest.main()
