"""Noun phrase chunking with an error recovering Earley parser.

The chart engine is in `earley`, the grammar it runs on in `np_grammar`, and `Chunker`
ties tokenization, parsing and extraction together.
"""
from .chunker import Chunker, extract_np, extract_nps
from .earley import Chart, EarleyParser, ParseForest, Recovery, State, StateItem
from .errors import GrammarError, NoParseError, ParseError
from .grammar import Action, ParseRule, ParseRuleSet, compute_first
from .np_grammar import make_rule_set
from .symbols import EMPTY, EOF, NonTerminal, Symbol, Terminal, Token
from .tokenizer import TagClassifier, segment_line, split_token
from .tree import AST, build_tree, resolve_ambiguity

__all__ = [
    "Chunker",
    "extract_np",
    "extract_nps",
    "Chart",
    "EarleyParser",
    "ParseForest",
    "Recovery",
    "State",
    "StateItem",
    "ParseError",
    "NoParseError",
    "GrammarError",
    "Action",
    "ParseRule",
    "ParseRuleSet",
    "compute_first",
    "make_rule_set",
    "EMPTY",
    "EOF",
    "Symbol",
    "NonTerminal",
    "Terminal",
    "Token",
    "TagClassifier",
    "segment_line",
    "split_token",
    "AST",
    "build_tree",
    "resolve_ambiguity",
]
