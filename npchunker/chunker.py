import logging

from .earley import EarleyParser
from .errors import ParseError
from .tokenizer import MAX_TOKENS, TagClassifier, segment_line

logger = logging.getLogger(__name__)


def extract_nps(tree):
    """Returns the surface strings of every NP node in tree, children before parents"""
    nps = []
    # Post-order without recursion: a node is emitted once all its children are done
    stack = [(tree, False)]
    while stack:
        node, visited = stack.pop()
        if visited:
            if node.tag == "NP":
                nps.append(extract_np(node))
            continue
        stack.append((node, True))
        for child in reversed(node.children):
            stack.append((child, False))
    return nps


def extract_np(node):
    """Joins the words under node with single spaces"""
    parts = []
    for child in node.children:
        if child.word is not None:
            parts.append(child.word)
        else:
            parts.append(extract_np(child))
    return " ".join(parts)


class Chunker:
    """Extracts noun phrases from lines of part-of-speech tagged text"""
    def __init__(self, max_tokens=MAX_TOKENS, classifier=None, rule_set=None):
        if max_tokens < 1:
            raise ValueError("max_tokens must be positive, got {0}".format(max_tokens))
        self.max_tokens = max_tokens
        self.classifier = classifier or TagClassifier()
        self.parser = EarleyParser(rule_set)

    def parse_segment(self, segment):
        """Returns the derivation tree of one segment, or ``None`` if it has no
        classifiable tokens or no derivation"""
        tokens = self.classifier.tokenize(segment)
        if not tokens:
            return None
        try:
            return self.parser.parse(tokens)
        except ParseError as e:
            logger.warning("Skipping segment %r: %s", segment, e.message)
            return None

    def parse_line(self, line):
        """Returns the noun phrases of one line, in order"""
        nps = []
        line = line.rstrip("\r\n")
        if not line.strip():
            return nps
        for segment in segment_line(line, self.max_tokens):
            tree = self.parse_segment(segment)
            if tree is not None:
                nps.extend(extract_nps(tree))
        return nps

    def parse_input(self, lines):
        """Returns the noun phrases of all lines, in order. A line that cannot be parsed
        contributes nothing."""
        nps = []
        for line in lines:
            nps.extend(self.parse_line(line))
        return nps
