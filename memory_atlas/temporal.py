"""Temporal reasoning — day streaks, timeline grouping and date labels."""

import math
from collections import OrderedDict
from datetime import datetime, time
from typing import Dict, List, Optional

from .entry import MemoryRecord
from .utils import Clock, naive_local, parse_date, parse_datetime

SECONDS_PER_DAY = 86400


def _midnight(value) -> datetime:
    return datetime.combine(parse_date(value), time.min)


def _whole_days(later: datetime, earlier: datetime) -> int:
    return math.floor((later - earlier).total_seconds() / SECONDS_PER_DAY)


class StreakCalculator:
    """Count the run of recent days with memories, walking back from now.

    The walk is deliberately loose: a date extends the streak when it lies
    at most ``streak + 1`` whole days before the previous reference point,
    so same-day duplicates count and the allowed gap widens as the streak
    grows.
    """

    def __init__(self, clock: Clock = datetime.now):
        self.clock = clock

    def streak_days(self, records: List[MemoryRecord], now: datetime = None) -> int:
        if not records:
            return 0
        reference = naive_local(now or self.clock())
        days = sorted((parse_date(r.date) for r in records), reverse=True)

        streak = 0
        for day in days:
            day_start = datetime.combine(day, time.min)
            if _whole_days(reference, day_start) <= streak + 1:
                streak += 1
                reference = day_start
            else:
                break
        return streak


class TemporalEngine:
    """Timeline ordering and human-readable date labels."""

    @staticmethod
    def newest_first(records: List[MemoryRecord]) -> List[MemoryRecord]:
        return sorted(records, key=lambda r: parse_date(r.date), reverse=True)

    @staticmethod
    def group_by_year(records: List[MemoryRecord]) -> "OrderedDict[int, List[MemoryRecord]]":
        """Group records by year, years descending, newest record first."""
        groups: Dict[int, List[MemoryRecord]] = {}
        for r in TemporalEngine.newest_first(records):
            groups.setdefault(parse_date(r.date).year, []).append(r)
        return OrderedDict(sorted(groups.items(), reverse=True))

    @staticmethod
    def format_date(value) -> str:
        """``2026-10-18`` -> ``October 18, 2026``."""
        d = parse_date(value)
        return f"{d:%B} {d.day}, {d.year}"

    @staticmethod
    def format_relative_date(value, now: Optional[datetime] = None) -> str:
        now = naive_local(now or datetime.now())
        moment = parse_datetime(value) if isinstance(value, str) else None
        diff = _whole_days(now, moment or _midnight(value))

        if diff <= 0:
            return "Today"
        if diff == 1:
            return "Yesterday"
        if diff < 7:
            return f"{diff} days ago"
        if diff < 30:
            return f"{diff // 7} weeks ago"
        if diff < 365:
            return f"{diff // 30} months ago"
        return f"{diff // 365} years ago"
