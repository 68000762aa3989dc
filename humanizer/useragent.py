"""Humanizer - User-agent grammar backed by the user-agents library"""

import logging
from typing import Optional

from user_agents import parse

from .models import ParsedUserAgent

logger = logging.getLogger(__name__)

UNKNOWN_FAMILY = 'Other'


def parse_user_agent(text: str) -> Optional[ParsedUserAgent]:
    """Parse a raw user-agent string, ``None`` if it cannot be parsed."""
    try:
        ua = parse(text)
    except Exception:
        logger.debug("user-agent parser failed on %r", text, exc_info=True)
        return None

    version = ua.browser.version_string or None
    os_name = None
    if ua.os.family and ua.os.family != UNKNOWN_FAMILY:
        os_name = f"{ua.os.family} {ua.os.version_string}".strip()

    return ParsedUserAgent(
        browser=ua.browser.family,
        version=version,
        os=os_name,
        is_bot=ua.is_bot,
    )
