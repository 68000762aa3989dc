"""Humanizer - Line tokenizer"""

from typing import List

from .models import Span, SpanKind
from .patterns import SPAN_PATTERN, BARE_PATTERN, SPACE_PATTERN

DELIMITED_KINDS = {'"': SpanKind.QUOTED, '[': SpanKind.BRACKETED}


class LineTokenizer:
    """Split a line into quoted, bracketed, bare and whitespace spans.

    Concatenating ``span.raw`` over the result always gives back the line.
    An unterminated quote or bracket is not a span start; it is scanned as
    part of a bare token.
    """

    def tokenize(self, line: str) -> List[Span]:
        spans = []
        pos = 0
        end = len(line)

        while pos < end:
            match = SPAN_PATTERN.match(line, pos)
            if match:
                s = match.group()
                spans.append(Span(DELIMITED_KINDS[s[0]], s[1:-1], s[0], s[-1]))
                pos = match.end()
                continue

            match = BARE_PATTERN.match(line, pos)
            if match:
                spans.append(Span(SpanKind.BARE, match.group()))
                pos = match.end()
                continue

            match = SPACE_PATTERN.match(line, pos)
            spans.append(Span(SpanKind.WHITESPACE, match.group()))
            pos = match.end()

        return spans
