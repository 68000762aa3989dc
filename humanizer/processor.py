"""Humanizer - Line processing engine"""

import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, Optional, TextIO

from .handlers import HandlerChain
from .tokenizer import LineTokenizer

logger = logging.getLogger(__name__)


def chomp(line: str) -> str:
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith(('\n', '\r')):
        return line[:-1]
    return line


class LineHumanizer:
    """Rewrites machine-oriented tokens of each line, one line at a time"""

    def __init__(self, chain: HandlerChain, tokenizer: Optional[LineTokenizer] = None):
        self.chain = chain
        self.tokenizer = tokenizer or LineTokenizer()
        self.stats: Counter = Counter()

    def humanize_line(self, line: str) -> str:
        readable = []
        for span in self.tokenizer.tokenize(line):
            if not span.humanizable:
                readable.append(span.text)
                continue

            text, tag = self.chain.format(span.text)
            if tag:
                self.stats[tag] += 1
            readable.append(span.opener)
            readable.append(text)
            readable.append(span.closer)

        self.stats['lines'] += 1
        return ''.join(readable)

    def process_stream(self, lines: Iterable[str], out: TextIO):
        for line in lines:
            print(self.humanize_line(chomp(line)), file=out)

    def process_file(self, filepath: str, out: TextIO):
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {filepath}")

        logger.debug("Humanizing %s", path)
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            self.process_stream(f, out)

    def report(self) -> Dict:
        by_tag = {tag: count for tag, count in self.stats.most_common() if tag != 'lines'}
        return {
            'lines': self.stats['lines'],
            'rewritten': sum(by_tag.values()),
            'by_tag': by_tag,
        }
