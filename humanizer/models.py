"""Humanizer - Data models"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SpanKind(Enum):
    QUOTED = 'quoted'
    BRACKETED = 'bracketed'
    BARE = 'bare'
    WHITESPACE = 'whitespace'


@dataclass(frozen=True)
class Span:
    """Contiguous piece of a line"""
    kind: SpanKind
    text: str
    opener: str = ''
    closer: str = ''

    @property
    def humanizable(self) -> bool:
        return self.kind is not SpanKind.WHITESPACE

    @property
    def raw(self) -> str:
        return f"{self.opener}{self.text}{self.closer}"


@dataclass(frozen=True)
class ScaledSize:
    """Byte count reduced to a binary prefix tier"""
    magnitude: float
    prefix_index: int


@dataclass(frozen=True)
class ParsedUserAgent:
    """Structured user-agent record"""
    browser: str
    version: Optional[str]
    os: Optional[str]
    is_bot: bool = False
