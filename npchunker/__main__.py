"""Extract noun phrases from part-of-speech tagged text.

Reads lines of space separated ``word/tag`` pieces, one sentence per line, and prints
one noun phrase per line.
"""
import argparse
import logging
import sys

from .chunker import Chunker
from .tokenizer import MAX_TOKENS

logger = logging.getLogger("npchunker")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="npchunker", description=__doc__)
    parser.add_argument(
        "inputs", nargs="*", metavar="FILE",
        help="tagged text files, '-' or nothing for standard input")
    parser.add_argument(
        "--max-tokens", type=int, default=MAX_TOKENS,
        help="longest segment handed to the parser (default %(default)s)")

    # for verbosity of logging
    parser.set_defaults(logging_level=logging.INFO)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", dest="logging_level", action="store_const", const=logging.DEBUG)
    verbosity.add_argument(
        "-q", "--quiet", dest="logging_level", action="store_const", const=logging.WARNING)

    args = parser.parse_args(argv)
    if args.max_tokens < 1:
        parser.error("--max-tokens must be positive")
    return args


def read_lines(path):
    """Returns the lines of a UTF-8 file, or of standard input for '-'"""
    if path == "-":
        return sys.stdin.read().splitlines()
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.logging_level)

    chunker = Chunker(max_tokens=args.max_tokens)
    for path in args.inputs or ["-"]:
        lines = read_lines(path)
        nps = chunker.parse_input(lines)
        for np in nps:
            print(np)
        logger.info("%s: %d noun phrases from %d lines", path, len(nps), len(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
