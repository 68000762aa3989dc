"""Humanizer - Format handlers and the handler chain"""

import logging
import math
import re
from typing import Callable, Iterable, Optional, Tuple
from urllib.parse import unquote

from .models import ParsedUserAgent, ScaledSize
from .output import Colorizer
from .patterns import (
    BINARY_BASE, BINARY_PREFIXES, DIGIT_RUN, PERCENT_ESCAPE, PERCENT_RUN,
    ROUGH_VERSION, SIZE_RUN, TIME_FORMAT, USER_AGENT_SHAPE,
)
from .timestamps import parse_timestamp
from .useragent import parse_user_agent

logger = logging.getLogger(__name__)


def splice(text: str, matches: Iterable[re.Match], render: Callable[[str], str]) -> str:
    """Rebuild ``text`` with every matched region replaced by ``render(region)``."""
    parts = []
    pos = 0
    for match in matches:
        parts.append(text[pos:match.start()])
        parts.append(render(match.group()))
        pos = match.end()
    parts.append(text[pos:])
    return ''.join(parts)


class FormatHandler:
    """Recognizes one encoding and rewrites it for humans"""

    tag = ''

    def __init__(self, colorizer: Colorizer):
        self.colorizer = colorizer

    def colorize(self, s: str) -> str:
        return self.colorizer.colorize(s, self.tag)

    def try_format(self, s: str) -> Optional[str]:
        raise NotImplementedError


class URIDecoder(FormatHandler):
    tag = 'uri'

    def try_format(self, s: str) -> Optional[str]:
        if not PERCENT_ESCAPE.search(s):
            return None
        return splice(s, PERCENT_RUN.finditer(s), self._decode)

    def _decode(self, escaped: str) -> str:
        return self.colorize(unquote(escaped, encoding='utf-8', errors='replace'))


def scale_size(n: float) -> ScaledSize:
    i = 0
    while n >= BINARY_BASE and i < len(BINARY_PREFIXES) - 1:
        n = n / BINARY_BASE
        i += 1
    return ScaledSize(n, i)


def format_size(size: ScaledSize) -> str:
    prefix = BINARY_PREFIXES[size.prefix_index]
    if size.magnitude < 10:
        return '%.1f%s' % (size.magnitude, prefix)
    return '%d%s' % (size.magnitude, prefix)


class SizeHumanizer(FormatHandler):
    """Byte counts of four or more digits, scaled to binary prefixes.

    Digit runs may be embedded in other text (``bytes=1048576``), but a
    token that also holds shorter digit runs is left alone: dates such as
    ``10/Oct/2023:13:55:36`` and ids such as ``id=12-34567`` pass through.
    Runs too long to scale as a float are declined as well.
    """

    tag = 'size'

    def try_format(self, s: str) -> Optional[str]:
        runs = DIGIT_RUN.findall(s)
        if not runs or any(len(run) < 4 for run in runs):
            return None
        if not all(math.isfinite(float(run)) for run in runs):
            return None
        return splice(s, SIZE_RUN.finditer(s), self._humanize)

    def _humanize(self, digits: str) -> str:
        return self.colorize(format_size(scale_size(float(digits))))


class TimestampHumanizer(FormatHandler):
    tag = 'time'

    def try_format(self, s: str) -> Optional[str]:
        parsed = parse_timestamp(s)
        if parsed is None:
            return None
        return self.colorize(parsed.strftime(TIME_FORMAT))


def rough_version(s: str) -> str:
    """Keep the leading major.minor group and drop a trailing '.0'.

    >>> rough_version('5.1.3')
    '5.1'
    >>> rough_version('5.0')
    '5'
    """
    s = ROUGH_VERSION.sub(r'\1', s, count=1)
    if s.endswith('.0'):
        s = s[:-2]
    return s


class UserAgentHumanizer(FormatHandler):
    tag = 'useragent'

    def __init__(self, colorizer: Colorizer,
                 grammar: Callable[[str], Optional[ParsedUserAgent]] = parse_user_agent):
        super().__init__(colorizer)
        self.grammar = grammar

    def try_format(self, s: str) -> Optional[str]:
        if not USER_AGENT_SHAPE.match(s):
            return None

        ua = self.grammar(s)
        if ua is None or not ua.version:
            return None

        if ua.is_bot:
            return self.colorize(ua.os) if ua.os else None

        readable = f"{ua.browser} {rough_version(ua.version)}"
        if ua.os:
            readable += f" ({rough_version(ua.os)})"
        return self.colorize(readable)


class HandlerChain:
    """Applies the first handler that can format a token"""

    def __init__(self, handlers: Iterable[FormatHandler]):
        self.handlers: Tuple[FormatHandler, ...] = tuple(handlers)

    def format(self, s: str) -> Tuple[str, Optional[str]]:
        """Return the rewritten text and the tag of the handler that matched."""
        for handler in self.handlers:
            readable = handler.try_format(s)
            if readable is not None:
                logger.debug("%s rewrote %r", type(handler).__name__, s)
                return readable, handler.tag
        return s, None

    def apply(self, s: str) -> str:
        return self.format(s)[0]


def default_chain(colorizer: Colorizer,
                  grammar: Callable[[str], Optional[ParsedUserAgent]] = parse_user_agent) -> HandlerChain:
    return HandlerChain([
        URIDecoder(colorizer),
        SizeHumanizer(colorizer),
        TimestampHumanizer(colorizer),
        UserAgentHumanizer(colorizer, grammar),
    ])
