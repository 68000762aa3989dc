"""Tests for humanizer/tokenizer.py"""

import unittest

from humanizer.models import Span, SpanKind
from humanizer.tokenizer import LineTokenizer


class TestTokenize(unittest.TestCase):
    def setUp(self):
        self.tokenizer = LineTokenizer()

    def test_quoted_span_keeps_delimiters_apart(self):
        spans = self.tokenizer.tokenize('he said "100% sure" ok')
        self.assertEqual(spans, [
            Span(SpanKind.BARE, 'he'),
            Span(SpanKind.WHITESPACE, ' '),
            Span(SpanKind.BARE, 'said'),
            Span(SpanKind.WHITESPACE, ' '),
            Span(SpanKind.QUOTED, '100% sure', '"', '"'),
            Span(SpanKind.WHITESPACE, ' '),
            Span(SpanKind.BARE, 'ok'),
        ])

    def test_bracketed_span(self):
        spans = self.tokenizer.tokenize('[10/Oct/2023:13:55:36 +0000] GET')
        self.assertEqual(spans[0], Span(SpanKind.BRACKETED, '10/Oct/2023:13:55:36 +0000', '[', ']'))
        self.assertEqual(spans[-1], Span(SpanKind.BARE, 'GET'))

    def test_quoted_span_is_non_greedy(self):
        spans = self.tokenizer.tokenize('"a""b"')
        self.assertEqual([s.text for s in spans], ['a', 'b'])
        self.assertTrue(all(s.kind is SpanKind.QUOTED for s in spans))

    def test_empty_quotes(self):
        spans = self.tokenizer.tokenize('""')
        self.assertEqual(spans, [Span(SpanKind.QUOTED, '', '"', '"')])

    def test_unterminated_quote_is_bare_text(self):
        spans = self.tokenizer.tokenize('say "hello world')
        self.assertEqual([(s.kind, s.text) for s in spans], [
            (SpanKind.BARE, 'say'),
            (SpanKind.WHITESPACE, ' '),
            (SpanKind.BARE, '"hello'),
            (SpanKind.WHITESPACE, ' '),
            (SpanKind.BARE, 'world'),
        ])

    def test_unterminated_bracket_is_bare_text(self):
        spans = self.tokenizer.tokenize('[oops')
        self.assertEqual(spans, [Span(SpanKind.BARE, '[oops')])

    def test_quote_inside_bare_token(self):
        spans = self.tokenizer.tokenize('key="a b"')
        self.assertEqual(spans[0], Span(SpanKind.BARE, 'key="a'))

    def test_whitespace_runs_preserved(self):
        spans = self.tokenizer.tokenize('  a \t b  ')
        self.assertEqual([s.text for s in spans], ['  ', 'a', ' \t ', 'b', '  '])
        self.assertFalse(spans[0].humanizable)

    def test_empty_line(self):
        self.assertEqual(self.tokenizer.tokenize(''), [])

    def test_spans_cover_the_line(self):
        lines = [
            '127.0.0.1 - - [10/Oct/2023:13:55:36 +0000] "GET / HTTP/1.1" 200 2326',
            '  leading and trailing  ',
            'unterminated "quote and [bracket',
            '[]"" x\t\ty',
            '"nested [brackets] inside" [and "quotes" inside]',
        ]
        for line in lines:
            with self.subTest(line=line):
                spans = self.tokenizer.tokenize(line)
                self.assertEqual(''.join(s.raw for s in spans), line)


if __name__ == "__main__":
    unittest.main()
