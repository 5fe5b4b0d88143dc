"""The fixed grammar for Swedish noun phrase chunking.

Nonterminals are written in upper case and terminals in lower case. Alternatives are listed
in declaration order, which is the order the predictor tries them in.
"""
from .grammar import Action as A, ParseRule, ParseRuleSet
from .symbols import NonTerminal, Terminal

#: Head of the entry production, widened by error recovery
SENT = "SENT"
#: The symbol appended to the entry production on each recovery
PHRASE = "PHRASE"

# Every terminal that can stand on its own as a PHRASE, in declaration order
PHRASE_TERMINALS = [
    "here_there", "particip", "prep_mellan", "sent_adv", "adj_plur", "adj_sing",
    "adj_sing_plur", "adv", "com_noun", "comp_noun", "conj_verb", "del_maj", "del_min",
    "del_paren", "det", "fin_verb", "imp_verb", "inf", "inf_verb", "interj", "konj",
    "n_gen", "num", "part", "poss_pron", "prep", "pron", "prop_comp_noun", "prop_n_gen",
    "prop_noun", "subj", "sup_verb", "u_o",
]

_TABLE = [
    ("ADJPLUR", [("adj_plur", A.ADJ_SING_PLUR),
                 ("adj_sing_plur", A.ADJ_SING_PLUR)]),
    ("ADJSING", [("adj_sing", A.ADJ_SING_PLUR),
                 ("adj_sing_plur", A.ADJ_SING_PLUR)]),
    ("ADVP", [("adv", A.ADVP_TERM),
              ("here_there", A.ADVP_TERM)]),
    ("ADVP_Q", [("", A.Q_0),
                ("ADVP", A.Q_1_NONTERM)]),
    ("ADVP_S", [("", A.S_BASE1),
                ("ADVP ADVP_S", A.S_NONTERM)]),
    ("AP", [("APMIN", A.AP1),
            ("APMAX", A.AP2)]),
    ("AP_Q", [("", A.Q_0),
              ("AP", A.Q_1_NONTERM)]),
    ("AP_S", [("", A.S_BASE1),
              ("AP AP_S", A.S_NONTERM)]),
    ("APMAX", [("APMINPLUR_L APMINPLUR_S APMINPLURCONT_L APMINPLURCONT_S", A.AP_MAX),
               ("APMINSING_L APMINSING_S APMINSINGCONT_L APMINSINGCONT_S", A.AP_MAX)]),
    ("APMIN", [("APMINSING_L", A.AP_MIN),
               ("APMINPLUR_L", A.AP_MIN)]),
    ("APMINPLURCONT_L", [("del_min APMINPLUR_L", A.AP_MIN_SING_CONT),
                         ("konj APMINPLUR_L", A.AP_MIN_SING_CONT)]),
    ("APMINPLURCONT_S", [("", A.S_BASE1)]),
    ("APMINPLUR_L", [("ADVP_S ADJPLUR", A.AP_MIN_SING_PLUR)]),
    ("APMINPLUR_S", [("APMINPLUR_L APMINPLUR_S", A.S_NONTERM2),
                     ("", A.S_BASE1)]),
    ("APMINSING_L", [("ADVP_S ADJSING", A.AP_MIN_SING_PLUR)]),
    ("APMINSING_S", [("", A.S_BASE1),
                     ("APMINSING_L APMINSING_S", A.S_NONTERM1)]),
    ("APMINSINGCONT_L", [("del_min APMINSING_L", A.AP_MIN_SING_CONT),
                         ("konj APMINSING_L", A.AP_MIN_SING_CONT)]),
    ("APMINSINGCONT_S", [("", A.S_BASE1)]),
    ("COMNOUN_S", [("", A.S_BASE1),
                   ("com_noun COMNOUN_S", A.S_TERM)]),
    ("COMPNOUN_S", [("comp_noun COMPNOUN_S", A.S_TERM),
                    ("", A.S_BASE1)]),
    ("COMPNOUNCONT_L", [("KONJDELMINQ comp_noun", A.COMP_NOUN_CONT)]),
    ("COMPNOUNCONT_S", [("COMPNOUNCONT_L COMPNOUNCONT_S", A.S_NONTERM),
                        ("", A.S_BASE1)]),
    ("DELMIN_Q", [("del_min", A.Q_1_TERM),
                  ("", A.Q_0)]),
    ("DET", [("det", A.DET),
             ("n_gen", A.DET),
             ("prop_n_gen", A.DET)]),
    ("DET_Q", [("", A.Q_0),
               ("DET", A.Q_1_NONTERM)]),
    ("DETPOSSPRON", [("poss_pron", A.DET_POSS_PRON_TERM),
                     ("DET", A.DET_POSS_PRON_NONTERM)]),
    ("DETPOSSPRON_Q", [("", A.Q_0),
                       ("DETPOSSPRON", A.Q_1_NONTERM)]),
    ("HERETHERE_Q", [("here_there", A.Q_1_TERM),
                     ("", A.Q_0)]),
    ("INFVERB_S", [("inf_verb INFVERB_S", A.S_TERM),
                   ("", A.S_BASE1)]),
    ("INFP", [("inf ADVP_S inf_verb PART_Q", A.INFP),
              ("inf SADVP_S inf_verb PART_Q", A.INFP)]),
    ("KONJDELMINQ", [("DELMIN_Q", A.CONJ_DEL_MINQ),
                     ("KONJ_Q", A.CONJ_DEL_MINQ)]),
    ("KONJ_Q", [("konj", A.Q_1_TERM),
                ("", A.Q_0)]),
    ("NGEN_Q", [("", A.Q_0),
                ("n_gen", A.Q_1_TERM)]),
    ("NP", [("NPREST_L", A.NP1),
            ("NPSIF_L", A.NP2),
            ("NPPC_L", A.NP3),
            ("NPCOMP_L", A.NP3),
            ("NPCOM_L", A.NP3),
            ("NPPROP_L", A.NP3)]),
    ("NP_S", [("NP NP_S", A.S_NONTERM),
              ("", A.S_BASE1)]),
    ("NPCOM_L", [("NPCOM1_L", A.NP_COM),
                 ("NPCOM2_L", A.NP_COM),
                 ("NPCOM3_L", A.NP_COM)]),
    ("NPCOM1_L", [("pron HERETHERE_Q", A.NP_COM_1)]),
    ("NPCOM2_L", [("DET_Q poss_pron AP_Q NGEN_Q AP_S NUM_Q AP_Q com_noun COMNOUN_S",
                   A.NP_COM_2)]),
    ("NPCOM3_L", [("DET_Q HERETHERE_Q NUM_S AP_Q NGEN_Q AP_S NUM_S com_noun COMNOUN_S",
                   A.NP_COM_3)]),
    ("NPCOMP_L", [("DET_Q AP_Q comp_noun COMPNOUNCONT_S konj NGEN_Q NUM_Q AP_Q com_noun COMNOUN_S",
                   A.NP_COMP)]),
    ("NPPC_L", [("prop_comp_noun PROPCOMPNOUNCONT_S KONJ_Q com_noun COMNOUN_S", A.NPPC),
                ("prop_comp_noun PROPCOMPNOUNCONT_S KONJ_Q prop_noun PROPNOUN_S", A.NPPC)]),
    ("NPPROP_L", [("DET_Q NUM_Q AP_Q prop_noun PROPNOUN_S", A.NP_PROP)]),
    ("NPREST_L", [("DETPOSSPRON AP_Q", A.NP_REST)]),
    ("NPSIF_L", [("DETPOSSPRON_Q ADVP_Q NUMP", A.NP_SIF)]),
    ("NUM_Q", [("", A.Q_0),
               ("NUMP", A.Q_1_NONTERM)]),
    ("NUM_S", [("", A.S_BASE1),
               ("NUMP NUM_S", A.S_NONTERM),
               ("num NUM_S", A.S_TERM)]),
    ("NUMP", [("AP_S num NUM_S", A.SIFFER),
              ("ADVP_S num NUM_S", A.SIFFER)]),
    ("PART_Q", [("part", A.Q_1_TERM),
                ("", A.Q_0)]),
    ("PHRASE", [(name, A.DEFAULT) for name in PHRASE_TERMINALS] + [
        ("DETPOSSPRON", A.PHRASE_2A_30),
        ("ADVP", A.PHRASE_2A_40),
        ("VC", A.PHRASE_2B),
        ("AP", A.PHRASE_3A),
        ("INFP", A.PHRASE_3B),
        ("NUMP", A.PHRASE_3C),
        ("NP", A.PHRASE_4),
        ("PP", A.PHRASE_5)]),
    ("PHRASE_S", [("PHRASE_S PHRASE", A.S_NONTERM3),
                  ("", A.S_BASE2)]),
    ("PP", [("prep AP", A.PP1),
            ("prep NP", A.PP2),
            ("prep_mellan NP konj NP", A.PP_MELLAN),
            ("prep konj prep NP", A.PP_KONJ)]),
    ("PP_Q", [("PP", A.Q_1_NONTERM),
              ("", A.Q_0)]),
    ("PP_S", [("PP PP_S", A.S_NONTERM),
              ("", A.S_BASE1)]),
    ("PROPCOMPNOUNCONT_L", [("KONJDELMINQ AP_Q prop_comp_noun", A.PROP_COMP_NOUN_CONT)]),
    ("PROPCOMPNOUNCONT_S", [("PROPCOMPNOUNCONT_L PROPCOMPNOUNCONT_S", A.S_NONTERM),
                            ("", A.S_BASE1)]),
    ("PROPNOUN_S", [("prop_noun PROPNOUN_S", A.S_TERM),
                    ("", A.S_BASE1)]),
    ("SADVP_S", [("sent_adv SADVP_S", A.S_TERM),
                 ("", A.S_BASE1)]),
    (SENT, [(PHRASE, A.SENT)]),
    ("VC", [("imp_verb", A.VC_TERM),
            ("inf_verb", A.VC_TERM),
            ("sup_verb", A.VC_TERM),
            ("konj_verb", A.VC_TERM),
            ("fin_verb INFVERB_S", A.VC_TERM_LIST),
            ("fin_verb INFVERB_S sup_verb", A.VC_TERM_LIST_SV)]),
]


def symbols(text):
    """Converts a space separated right-hand-side into symbol objects"""
    return [NonTerminal(name) if name.isupper() else Terminal(name)
            for name in text.split()]


def make_rule_set():
    """Returns a new `ParseRuleSet` holding the noun phrase grammar"""
    rule_set = ParseRuleSet()
    for head, alternatives in _TABLE:
        for rhs, action in alternatives:
            rule_set.add(ParseRule(head, symbols(rhs), action))
    return rule_set
