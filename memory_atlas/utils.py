"""Shared utilities for memory-atlas."""

import logging
from datetime import date, datetime
from typing import Callable, Optional

logger = logging.getLogger("memory_atlas")

# Stand-in calendar date for values that do not parse.  Always the same,
# so malformed records sort and bucket consistently.
FALLBACK_DATE = date(1970, 1, 1)

Clock = Callable[[], datetime]


def parse_date(value) -> date:
    """Return the calendar date of *value*, ignoring any time of day.

    Accepts ``date``/``datetime`` objects and ISO strings
    (``2026-10-18``, ``2026-10-18T09:30:00Z``).  Anything else yields
    :data:`FALLBACK_DATE` instead of raising.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_datetime(value)
    if parsed is None:
        logger.debug(f"Unparseable date {value!r}, using {FALLBACK_DATE}")
        return FALLBACK_DATE
    return parsed.date()


def parse_datetime(value) -> Optional[datetime]:
    """Parse an ISO timestamp, tolerating a trailing ``Z``. None on failure."""
    if not isinstance(value, str) or not value.strip():
        return None
    s = value.strip()
    if s.endswith("Z"):
        s = s[:-1]
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError:
        return None
    # Aware timestamps are compared against a naive local clock.
    return parsed.replace(tzinfo=None)


def naive_local(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive ones pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)
