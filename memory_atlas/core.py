"""
MemoryAtlas — the main interface to memory-atlas.

Usage:
    from memory_atlas import MemoryAtlas

    atlas = MemoryAtlas()
    memories = []
    rec = atlas.new_record("Amazing happy trip", "Sunset on the pier",
                           51.5, -0.1, "2026-10-18")
    memories = atlas.save(memories, rec)
    board = atlas.dashboard(memories)
    board.stats.mood_breakdown["happy"]   # 1
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .badges import Badge, BadgeEngine
from .collection import MemoryCollection
from .entry import MemoryRecord
from .geo import GeoAttributor, RegionBox
from .sentiment import MoodAnalysis, SentimentClassifier
from .stats import MONTHLY_LIMIT, MonthlyBucket, StatsAggregator, TopMood, UserStats
from .temporal import StreakCalculator, TemporalEngine
from .utils import Clock


@dataclass
class Dashboard:
    """Everything the dashboard view renders, from one clock reading."""
    stats: UserStats
    monthly: List[MonthlyBucket] = field(default_factory=list)
    badges: List[Badge] = field(default_factory=list)
    mood_chart: List[Tuple[str, int]] = field(default_factory=list)
    top_mood: Optional[TopMood] = None
    generated_at: str = ""

    @property
    def is_empty(self) -> bool:
        return self.stats.total_memories == 0


class MemoryAtlas:
    """Mood, region, streak, stats and badge engines behind one clock.

    Parameters
    ----------
    clock : callable
        Zero-argument callable returning the current naive ``datetime``.
        Tests pass a fixed instant here.
    keywords : dict | None
        Mood keyword table override for the classifier.
    region_boxes : list[RegionBox] | None
        Bounding box table override for region attribution.
    badge_definitions : list[dict] | None
        Badge table override.
    monthly_limit : int
        Months kept on the activity chart (default 12).
    """

    def __init__(
        self,
        clock: Clock = datetime.now,
        keywords: Dict[str, List[str]] = None,
        region_boxes: List[RegionBox] = None,
        badge_definitions: List[Dict] = None,
        monthly_limit: int = MONTHLY_LIMIT,
    ):
        if monthly_limit < 1:
            raise ValueError(f"monthly_limit must be positive, got {monthly_limit}")
        self.clock = clock
        self.monthly_limit = monthly_limit

        # Engines
        self.sentiment = SentimentClassifier(keywords=keywords)
        self.geo = GeoAttributor(boxes=region_boxes)
        self.streaks = StreakCalculator(clock=clock)
        self.stats = StatsAggregator(geo=self.geo, streaks=self.streaks)
        self.badges = BadgeEngine(definitions=badge_definitions, clock=clock)
        self.temporal = TemporalEngine()
        self.collection = MemoryCollection(classifier=self.sentiment, clock=clock)

    # ── single-value engines ────────────────────────────────────────────

    def classify(self, text: str) -> MoodAnalysis:
        return self.sentiment.classify(text)

    def region_of(self, lat: float, lng: float) -> str:
        return self.geo.region_of(lat, lng)

    # ── record lifecycle ────────────────────────────────────────────────

    def new_record(self, title: str, description: str, latitude: float,
                   longitude: float, date: str, **fields) -> MemoryRecord:
        return self.collection.new_record(title, description, latitude,
                                          longitude, date, **fields)

    def edit_record(self, record: MemoryRecord, **changes) -> MemoryRecord:
        return self.collection.edit_record(record, **changes)

    def save(self, records: List[MemoryRecord], record: MemoryRecord) -> List[MemoryRecord]:
        return self.collection.upsert(records, record)

    # ── read-time analytics ─────────────────────────────────────────────

    def aggregate(self, records: List[MemoryRecord], now: datetime = None) -> UserStats:
        return self.stats.aggregate(records, now=now)

    def monthly_view(self, records: List[MemoryRecord]) -> List[MonthlyBucket]:
        return self.stats.monthly_view(records, limit=self.monthly_limit)

    def evaluate(self, stats: UserStats, records: List[MemoryRecord],
                 now: datetime = None) -> List[Badge]:
        return self.badges.evaluate(stats, records, now=now)

    def dashboard(self, records: List[MemoryRecord]) -> Dashboard:
        """Compute stats, chart data and badges from a single clock reading."""
        now = self.clock()
        stats = self.aggregate(records, now=now)
        return Dashboard(
            stats=stats,
            monthly=self.monthly_view(records),
            badges=self.evaluate(stats, records, now=now),
            mood_chart=self.stats.mood_chart(stats),
            top_mood=self.stats.top_mood(stats),
            generated_at=now.isoformat(),
        )

    def timeline(self, records: List[MemoryRecord]):
        return self.temporal.group_by_year(records)
