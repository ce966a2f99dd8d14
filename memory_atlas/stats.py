"""Dashboard statistics folded from the full memory collection.

Everything is recomputed from scratch on each call; there is no cached or
incremental state.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from .entry import MemoryRecord
from .geo import GeoAttributor
from .sentiment import MOOD_LABELS
from .temporal import StreakCalculator
from .utils import Clock, parse_date

# Months shown on the activity chart
MONTHLY_LIMIT = 12


def _empty_breakdown() -> Dict[str, int]:
    return {label: 0 for label in MOOD_LABELS}


@dataclass
class UserStats:
    """Aggregate view of a memory collection."""
    total_memories: int = 0
    regions_visited: int = 0
    mood_breakdown: Dict[str, int] = field(default_factory=_empty_breakdown)
    streak_days: int = 0

    def to_dict(self) -> Dict:
        return {
            "totalMemories": self.total_memories,
            "countriesVisited": self.regions_visited,
            "sentimentBreakdown": dict(self.mood_breakdown),
            "streakDays": self.streak_days,
        }


@dataclass
class MonthlyBucket:
    """Memories dated within one calendar month."""
    year: int
    month: int
    count: int

    @property
    def label(self) -> str:
        """Short chart label, e.g. ``Oct 26``."""
        return f"{date(self.year, self.month, 1):%b %y}"


@dataclass
class TopMood:
    label: str
    count: int
    percentage: int


class StatsAggregator:
    """Fold memories into :class:`UserStats` and chart-friendly views.

    Args:
        geo: region attribution used for the distinct-region count.
        streaks: streak calculator; its clock is the aggregator's clock.
    """

    def __init__(self, geo: GeoAttributor = None,
                 streaks: StreakCalculator = None,
                 clock: Clock = datetime.now):
        self.geo = geo or GeoAttributor()
        self.streaks = streaks or StreakCalculator(clock=clock)

    def aggregate(self, records: List[MemoryRecord], now: datetime = None) -> UserStats:
        regions = {self.geo.region_of(r.latitude, r.longitude) for r in records}
        breakdown = _empty_breakdown()
        for r in records:
            if r.mood in breakdown:
                breakdown[r.mood] += 1
        return UserStats(
            total_memories=len(records),
            regions_visited=len(regions),
            mood_breakdown=breakdown,
            streak_days=self.streaks.streak_days(records, now=now),
        )

    @staticmethod
    def monthly_view(records: List[MemoryRecord],
                     limit: int = MONTHLY_LIMIT) -> List[MonthlyBucket]:
        """Per-month counts, oldest first, trimmed to the latest *limit* months."""
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        counts = Counter()
        for r in records:
            d = parse_date(r.date)
            counts[(d.year, d.month)] += 1
        keys = sorted(counts)[-limit:]
        return [MonthlyBucket(year, month, counts[(year, month)]) for year, month in keys]

    @staticmethod
    def mood_chart(stats: UserStats) -> List[Tuple[str, int]]:
        """Non-zero mood buckets in label order, for the pie chart."""
        return [(label, n) for label, n in stats.mood_breakdown.items() if n > 0]

    @staticmethod
    def top_mood(stats: UserStats) -> Optional[TopMood]:
        """Most common mood and its share of all memories, or None."""
        if not stats.total_memories:
            return None
        # max() keeps the first of equal counts, i.e. label order
        label, count = max(stats.mood_breakdown.items(), key=lambda kv: kv[1])
        if count == 0:
            return None
        # Half-up rounding; round() would go to even on .5
        return TopMood(label, count, int(count * 100 / stats.total_memories + 0.5))

    @staticmethod
    def story_count(records: List[MemoryRecord]) -> int:
        return sum(1 for r in records if r.story)

    @staticmethod
    def profile_counts(records: List[MemoryRecord]) -> Dict[str, int]:
        return {
            "total": len(records),
            "public": sum(1 for r in records if not r.is_private),
            "private": sum(1 for r in records if r.is_private),
            "with_story": StatsAggregator.story_count(records),
            "with_photos": sum(1 for r in records if r.photos),
            "with_videos": sum(1 for r in records if r.video_links),
        }
