"""Humanizer package"""

from .patterns import VERSION
from .models import ParsedUserAgent, ScaledSize, Span, SpanKind
from .tokenizer import LineTokenizer
from .handlers import (
    FormatHandler, HandlerChain, SizeHumanizer, TimestampHumanizer,
    URIDecoder, UserAgentHumanizer, default_chain,
)
from .output import Colorizer, print_summary
from .processor import LineHumanizer

__all__ = [
    'VERSION', 'Colorizer', 'FormatHandler', 'HandlerChain', 'LineHumanizer',
    'LineTokenizer', 'ParsedUserAgent', 'ScaledSize', 'SizeHumanizer', 'Span',
    'SpanKind', 'TimestampHumanizer', 'URIDecoder', 'UserAgentHumanizer',
    'default_chain', 'print_summary',
]
