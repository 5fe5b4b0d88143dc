"""Turns lines of ``word/tag`` pieces into classified tokens."""
import logging
import re

from .symbols import Token

logger = logging.getLogger(__name__)

#: Default number of pieces per segment, the parser is quadratic in sentence length
MAX_TOKENS = 20

_SENTENCE_ADVERBS = [
    "[aA]ldrig", "[aA]lltid", "[aA]lltså", "[bB]ara", "[dD]it", "[dD]ock", "[dD]ärför",
    "[fF]aktiskt", "[gG]enast", "[gG]ivetvis", "[hH]eller", "[hH]it", "[hH]ittills", "[hH]ur",
    "[iI]från", "[iI]nte", "[jJ]u", "[kK]anske", "[nN]aturligtvis", "[nN]u", "[nN]og",
    "[nN]ämligen", "[nN]är", "[nN]ödvändigtvis", "[oO]ckså", "[oO]fta", "[pP]lötsligt",
    "[sS]äkert", "[uU]pp", "[vV]ad", "[vV]arför", "[vV]isserligen", "[äÄ]ndå", "[äÄ]ven",
]

#: Checked against the whole ``word/tag`` piece, before any tag pattern
WORD_PATTERNS = [
    ("|".join(adverb + "/R..." for adverb in _SENTENCE_ADVERBS), "sent_adv"),
    ("[HhDd]är/RG0S", "here_there"),
    ("[Mm]ellan/SPS", "prep_mellan"),
]

#: Checked against the tag alone, in order
TAG_PATTERNS = [
    ("D......", "det"),
    ("NC..G@.S", "n_gen"),
    ("NP00G@0S", "prop_n_gen"),
    ("R...", "adv"),
    ("CC.", "konj"),
    ("CSS", "subj"),
    ("SP.", "prep"),
    ("A...S...", "adj_sing"),
    ("A...P...", "adj_plur"),
    ("A...0...", "adj_sing_plur"),
    ("M......", "num"),
    ("P[FEHI]......", "pron"),
    ("PS......", "poss_pron"),
    ("(NC...@.C|V@000C)", "comp_noun"),
    ("NP000@0C", "prop_comp_noun"),
    ("NP00N@.S", "prop_noun"),
    ("NC..[N0]@.[SA]", "com_noun"),
    ("CIS", "inf"),
    ("V@N...", "inf_verb"),
    ("QS", "part"),
    ("V@I[IP]..", "fin_verb"),
    ("V@IU..", "sup_verb"),
    ("(V@M...|V@000A)", "imp_verb"),
    ("V@S...", "conj_verb"),
    ("FI", "del_min"),
    ("FE", "del_maj"),
    ("FP", "del_paren"),
    ("I", "interj"),
    ("XF", "u_o"),
]


def split_pieces(line):
    """Splits a line on single spaces, dropping trailing empty pieces"""
    pieces = line.split(" ")
    while pieces and not pieces[-1]:
        pieces.pop()
    return pieces


def split_token(piece):
    """Splits a ``word/tag`` piece at its last slash. A piece without a slash is used
    as both word and tag."""
    word, sep, tag = piece.rpartition("/")
    if not sep:
        logger.debug("Piece %r has no tag separator", piece)
        return piece, piece
    return word, tag


def segment_line(line, max_tokens=MAX_TOKENS):
    """Cuts a line into segments of at most max_tokens pieces"""
    pieces = split_pieces(line)
    if len(pieces) <= max_tokens:
        return [line]
    return [" ".join(pieces[start:start + max_tokens])
            for start in range(0, len(pieces), max_tokens)]


class TagClassifier:
    """Maps ``word/tag`` pieces to terminal names using ordered pattern lists.
    The first matching pattern wins."""
    def __init__(self, word_patterns=None, tag_patterns=None):
        if word_patterns is None:
            word_patterns = WORD_PATTERNS
        if tag_patterns is None:
            tag_patterns = TAG_PATTERNS
        self.word_patterns = [(re.compile(pattern), terminal) for pattern, terminal in word_patterns]
        self.tag_patterns = [(re.compile(pattern), terminal) for pattern, terminal in tag_patterns]

    def classify(self, word, tag):
        """Returns the terminal name for a word and its tag, or ``None``"""
        piece = "{0}/{1}".format(word, tag)
        for pattern, terminal in self.word_patterns:
            if pattern.fullmatch(piece):
                return terminal
        for pattern, terminal in self.tag_patterns:
            if pattern.fullmatch(tag):
                return terminal
        return None

    def token(self, piece):
        """Returns the `Token` for one piece, or ``None`` if it is not classifiable"""
        word, tag = split_token(piece)
        terminal = self.classify(word, tag)
        if terminal is None:
            return None
        return Token(terminal, word, tag)

    def tokenize(self, line):
        """Returns the tokens of a line, silently dropping unclassifiable pieces"""
        tokens = []
        for piece in split_pieces(line):
            token = self.token(piece)
            if token is None:
                if piece:
                    logger.debug("Dropped unclassifiable piece %r", piece)
                continue
            tokens.append(token)
        return tokens
