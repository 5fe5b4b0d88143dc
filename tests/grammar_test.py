from npchunker import (Action, EMPTY, GrammarError, NonTerminal as NT, ParseRule, ParseRuleSet,
                       Terminal as T, compute_first, make_rule_set)
from npchunker.grammar import first_edges, union_first
from npchunker.tree import ACTIONS
import unittest


class FirstTest(unittest.TestCase):
    def setUp(self):
        self.p = ParseRuleSet()

    def first(self):
        return compute_first(self.p)

    def test_terminal_and_empty(self):
        p = self.p
        p.add(ParseRule("A", [T("a")]))
        p.add(ParseRule("A", []))
        p.add(ParseRule("B", [NT("A"), T("b")]))
        p.add(ParseRule("C", [NT("B")]))

        first = self.first()
        self.assertEqual(first["A"], {"a", EMPTY})
        # Only the leading symbol contributes
        self.assertEqual(first["B"], {"a", EMPTY})
        self.assertEqual(first["C"], {"a", EMPTY})

    def test_cycle(self):
        p = self.p
        p.add(ParseRule("A", [NT("B"), T("x")]))
        p.add(ParseRule("B", [NT("A"), T("y")]))
        p.add(ParseRule("B", [T("b")]))

        first = self.first()
        self.assertEqual(first["A"], {"b"})
        self.assertEqual(first["B"], {"b"})

    def test_union_converges(self):
        first, edges = first_edges(make_rule_set())
        while union_first(first, edges):
            pass
        self.assertFalse(union_first(first, edges))
        self.assertEqual(first, compute_first(make_rule_set()))

    def test_cached_until_add(self):
        p = self.p
        p.add(ParseRule("A", [T("a")]))
        self.assertEqual(p.first["A"], {"a"})
        p.add(ParseRule("A", [T("b")]))
        self.assertEqual(p.first["A"], {"a", "b"})

    def test_np_grammar(self):
        first = make_rule_set().first
        self.assertEqual(first["ADVP_S"], {EMPTY, "adv", "here_there"})
        self.assertEqual(first["DET"], {"det", "n_gen", "prop_n_gen"})
        self.assertEqual(first["PP"], {"prep", "prep_mellan"})
        self.assertEqual(first["NPCOM1_L"], {"pron"})
        self.assertIn(EMPTY, first["NP"])
        self.assertIn("det", first["NP"])
        self.assertIn("pron", first["NP"])
        self.assertIn(EMPTY, first["PHRASE_S"])


class RuleSetTest(unittest.TestCase):
    def test_duplicate_is_stored_once(self):
        p = ParseRuleSet()
        rule = p.add(ParseRule("NUM_S", [], Action.S_BASE1))
        again = p.add(ParseRule("NUM_S", [], Action.S_BASE1))
        self.assertIs(rule, again)
        self.assertEqual(len(p), 1)

    def test_declaration_order(self):
        p = ParseRuleSet()
        p.add(ParseRule("A", [T("b")]))
        p.add(ParseRule("A", [T("a")]))
        p.add(ParseRule("A", []))
        self.assertEqual([str(rule) for rule in p.get("A")],
                         ["<A> ::= b", "<A> ::= a", "<A> ::= "])

    def test_unknown_head(self):
        self.assertEqual(ParseRuleSet().get("A"), [])
        self.assertNotIn("A", ParseRuleSet())

    def test_bad_head(self):
        with self.assertRaises(GrammarError):
            ParseRuleSet().add(ParseRule(T("a"), [T("a")]))

    def test_bad_action(self):
        with self.assertRaises(GrammarError):
            ParseRuleSet().add(ParseRule("A", [T("a")], "default"))


class NPGrammarTest(unittest.TestCase):
    def setUp(self):
        self.p = make_rule_set()

    def test_entry_rule(self):
        rules = self.p.get("SENT")
        self.assertEqual(len(rules), 1)
        self.assertEqual(rules[0].symbols, [NT("PHRASE")])
        self.assertIs(rules[0].action, Action.SENT)

    def test_phrase_alternatives(self):
        rules = self.p.get("PHRASE")
        self.assertEqual(len(rules), 41)
        self.assertEqual(rules[0].symbols, [T("here_there")])
        self.assertEqual(rules[-1].symbols, [NT("PP")])
        self.assertEqual([rule.priority for rule in rules[-8:]],
                         [30, 40, 40, 50, 50, 50, 60, 70])

    def test_single_empty_alternatives(self):
        for head in ["APMINPLURCONT_S", "APMINSINGCONT_S"]:
            rules = self.p.get(head)
            self.assertEqual(len(rules), 1)
            self.assertEqual(rules[0].symbols, [])
        self.assertEqual([rule.symbols for rule in self.p.get("NUM_S")],
                         [[], [NT("NUMP"), NT("NUM_S")], [T("num"), NT("NUM_S")]])

    def test_every_rule_has_a_builder(self):
        for rule in self.p:
            self.assertIn(rule.action, ACTIONS)

    def test_every_nonterminal_is_defined(self):
        for rule in self.p:
            for symbol in rule.symbols:
                if not symbol.is_terminal:
                    self.assertIn(symbol.head, self.p, str(rule))


class ActionTest(unittest.TestCase):
    def test_priorities(self):
        self.assertEqual(Action.NP3.priority, 210)
        self.assertEqual(Action.S_NONTERM3.priority, 500)
        self.assertEqual(Action.DEFAULT.priority, 10)
        self.assertEqual(ParseRule("A", [T("a")], Action.PP2).priority, 230)

    def test_labels(self):
        self.assertEqual(str(Action.PHRASE_2A_30), "phrase_2a_30")
        self.assertEqual(str(Action.PHRASE_2A_40), "phrase_2a_40")
        self.assertIsNot(Action.PHRASE_2A_30, Action.PHRASE_2A_40)
        self.assertEqual(Action.S_BASE1.label, "S_base1")

    def test_every_action_has_a_builder(self):
        for action in Action:
            self.assertIn(action, ACTIONS)


if __name__ == '__main__':
    unittest.main()
