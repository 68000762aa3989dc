"""Humanizer - Constants and patterns"""

import re

VERSION = "1.0.0"

# Quoted or bracketed span at the scan position (non-greedy, single line)
SPAN_PATTERN = re.compile(r'".*?"|\[.*?\]')
BARE_PATTERN = re.compile(r'\S+')
SPACE_PATTERN = re.compile(r'\s+')

# Handler triggers
PERCENT_ESCAPE = re.compile(r'%[A-Fa-f0-9]{2}')
PERCENT_RUN = re.compile(r'(?:%[A-Fa-f0-9]{2})+')
DIGIT_RUN = re.compile(r'\d+')
SIZE_RUN = re.compile(r'\d{4,}')
USER_AGENT_SHAPE = re.compile(r'^(?:[\w-]++(?:/[\w.-]++)?+(?:\s*+\([^\)]++\))?+\s*+)+$')
ROUGH_VERSION = re.compile(r'(\d+\.\d+)(?:\.\d+)*')
ISO_8601_SHAPE = re.compile(
    r'^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?$'
)

# IEC binary prefixes, powers of 1024
BINARY_BASE = 1024
BINARY_PREFIXES = ['', 'Ki', 'Mi', 'Gi', 'Ti', 'Pi', 'Ei', 'Zi', 'Yi']

# Semantic tag -> rich style
TAG_STYLES = {
    'uri': 'green',
    'size': 'cyan',
    'time': 'yellow',
    'useragent': 'magenta',
}

TIME_FORMAT = '%Y-%m-%d %H:%M:%S %z'
