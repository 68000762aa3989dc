"""Humanizer - Timestamp grammars

Each grammar takes the whole token and returns an aware ``datetime`` or
``None``. ``parse_timestamp`` tries them in order and keeps the first hit.
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Callable, List, Optional

from .patterns import ISO_8601_SHAPE


def _strptime(s: str, fmt: str) -> Optional[datetime]:
    try:
        return datetime.strptime(s, fmt)
    except ValueError:
        return None


def _local(parsed: datetime) -> Optional[datetime]:
    try:
        return parsed.astimezone()
    except (OverflowError, OSError):
        return None


def apache_common_log(s: str) -> Optional[datetime]:
    """10/Oct/2023:13:55:36 +0000"""
    return _strptime(s, '%d/%b/%Y:%H:%M:%S %z')


def ctime(s: str) -> Optional[datetime]:
    """Tue Oct 10 13:55:36 2023, read as local time"""
    parsed = _strptime(s, '%a %b %d %H:%M:%S %Y')
    return _local(parsed) if parsed else None


def iso8601(s: str) -> Optional[datetime]:
    if not ISO_8601_SHAPE.match(s):
        return None
    if s.endswith('Z'):
        s = s[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError:
        return None
    return parsed if parsed.tzinfo else _local(parsed)


def httpdate(s: str) -> Optional[datetime]:
    """Tue, 10 Oct 2023 13:55:36 GMT"""
    parsed = _strptime(s, '%a, %d %b %Y %H:%M:%S GMT')
    return parsed.replace(tzinfo=timezone.utc) if parsed else None


def rfc822(s: str) -> Optional[datetime]:
    """Tue, 10 Oct 2023 13:55:36 +0200 and the zone-name variants"""
    try:
        parsed = parsedate_to_datetime(s)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


GRAMMARS: List[Callable[[str], Optional[datetime]]] = [
    apache_common_log,
    ctime,
    iso8601,
    httpdate,
    rfc822,
]


def parse_timestamp(s: str) -> Optional[datetime]:
    for grammar in GRAMMARS:
        parsed = grammar(s)
        if parsed is not None:
            return parsed
    return None
