from npchunker import AST, Chunker, Token, extract_np, extract_nps
from npchunker.__main__ import main, parse_args, read_lines
from npchunker.tree import LIST
import io
import logging
import os
import tempfile
import unittest
from unittest import mock


def leaf(word, type="x"):
    return AST.leaf(Token(type, word, None))


class ExtractTest(unittest.TestCase):
    def test_post_order(self):
        inner = AST("NP", [leaf("huset")])
        outer = AST("NP", [leaf("taket"), AST("PP", [leaf("på"), inner])])
        tree = AST("SENT", [outer, leaf("är"), AST("NP", [leaf("rött")])])
        self.assertEqual(extract_nps(tree), ["huset", "taket på huset", "rött"])

    def test_nested_words(self):
        node = AST("NP", [leaf("de"), AST("APMIN", [leaf("mycket"), leaf("stora")]), leaf("husen")])
        self.assertEqual(extract_np(node), "de mycket stora husen")

    def test_no_np(self):
        self.assertEqual(extract_nps(AST("SENT", [leaf("springer")])), [])
        self.assertEqual(extract_nps(AST(LIST)), [])


class ChunkerTest(unittest.TestCase):
    def setUp(self):
        self.c = Chunker()

    def check(self, line, expected):
        self.assertEqual(self.c.parse_line(line), expected)

    def test_noun_phrase(self):
        self.check("den/DF@US@S stora/AQPUSNDS hunden/NCUSN@DS", ["den stora hunden"])

    def test_single_noun(self):
        self.check("hunden/NCUSN@DS", ["hunden"])

    def test_unclassifiable_piece_is_skipped(self):
        self.check("den/DF@US@S stora/AQPUSNDS xyz/ZZZ hunden/NCUSN@DS", ["den stora hunden"])

    def test_recovers_from_second_phrase(self):
        self.check("hunden/NCUSN@DS springer/V@IPAS", ["hunden"])

    def test_prepositional_phrase(self):
        self.check("i/SPS huset/NCNSN@DS", ["huset"])

    def test_blank_lines(self):
        self.check("", [])
        self.check("   \r\n", [])
        self.assertEqual(self.c.parse_input(["", "\n", "xyz/ZZZ"]), [])

    def test_input_order(self):
        lines = ["hunden/NCUSN@DS springer/V@IPAS", "", "i/SPS huset/NCNSN@DS\n"]
        self.assertEqual(self.c.parse_input(lines), ["hunden", "huset"])

    def test_long_line_is_segmented(self):
        chunker = Chunker(max_tokens=1)
        self.assertEqual(chunker.parse_line("hunden/NCUSN@DS huset/NCNSN@DS"), ["hunden", "huset"])

    def test_bad_max_tokens(self):
        with self.assertRaises(ValueError):
            Chunker(max_tokens=0)


class MainTest(unittest.TestCase):
    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".txt")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("den/DF@US@S stora/AQPUSNDS hunden/NCUSN@DS\n\ni/SPS huset/NCNSN@DS\n")

    def tearDown(self):
        os.remove(self.path)

    def run_main(self, argv):
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            status = main(argv)
        return status, out.getvalue()

    def test_file(self):
        status, output = self.run_main(["-q", self.path])
        self.assertEqual(status, 0)
        self.assertEqual(output.splitlines(), ["den stora hunden", "huset"])

    def test_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("hunden/NCUSN@DS\n")):
            status, output = self.run_main(["-q"])
        self.assertEqual(output, "hunden\n")

    def test_dash_reads_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("hunden/NCUSN@DS\n")):
            status, output = self.run_main(["-q", self.path, "-"])
        self.assertEqual(output.splitlines(), ["den stora hunden", "huset", "hunden"])

    def test_paths_are_opened_by_main(self):
        args = parse_args([self.path, "-"])
        self.assertEqual(args.inputs, [self.path, "-"])
        self.assertEqual(read_lines(self.path)[1], "")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            read_lines(self.path + ".missing")

    def test_arguments(self):
        args = parse_args(["-v", "--max-tokens", "5"])
        self.assertEqual(args.max_tokens, 5)
        self.assertEqual(args.logging_level, logging.DEBUG)
        self.assertEqual(args.inputs, [])
        self.assertEqual(parse_args([]).logging_level, logging.INFO)

    def test_bad_arguments(self):
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                parse_args(["--max-tokens", "0"])
            with self.assertRaises(SystemExit):
                parse_args(["-v", "-q"])


if __name__ == '__main__':
    unittest.main()
