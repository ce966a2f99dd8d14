"""
Achievement badges for memory-atlas.

Four canonical badges, each a threshold on one collection metric:

  first-memory      — at least 1 memory
  memory-collector  — at least 10 memories
  world-explorer    — memories in at least 5 distinct regions
  storyteller       — at least 5 memories carrying a generated story

Badges are recomputed on every evaluation.  ``unlocked_at`` is the clock
reading at evaluation time, not the moment the threshold was first
crossed, so it moves forward on every call.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional

from .entry import MemoryRecord
from .stats import StatsAggregator, UserStats
from .utils import Clock

MEMORY_COUNT = "memory_count"
COUNTRY_COUNT = "country_count"
STORY_GENERATION = "story_generation"

Metric = Callable[[UserStats, List[MemoryRecord]], int]

# ── metric registry ───────────────────────────────────────────────────────────

METRICS: Dict[str, Metric] = {
    MEMORY_COUNT: lambda stats, records: stats.total_memories,
    COUNTRY_COUNT: lambda stats, records: stats.regions_visited,
    STORY_GENERATION: lambda stats, records: StatsAggregator.story_count(records),
}

# ── canonical badge definitions (evaluation and output order) ─────────────────

BADGE_DEFINITIONS: List[Dict] = [
    {
        "id": "first-memory",
        "name": "First Step",
        "description": "Created your first memory",
        "icon": "👶",
        "requirement": {"type": MEMORY_COUNT, "threshold": 1},
    },
    {
        "id": "memory-collector",
        "name": "Memory Collector",
        "description": "Saved 10 memories",
        "icon": "📚",
        "requirement": {"type": MEMORY_COUNT, "threshold": 10},
    },
    {
        "id": "world-explorer",
        "name": "World Explorer",
        "description": "Visited 5 different countries",
        "icon": "🌍",
        "requirement": {"type": COUNTRY_COUNT, "threshold": 5},
    },
    {
        "id": "storyteller",
        "name": "Storyteller",
        "description": "Generated 5 AI stories",
        "icon": "📖",
        "requirement": {"type": STORY_GENERATION, "threshold": 5},
    },
]


@dataclass
class Badge:
    """An achievement; ``unlocked_at`` is set only on unlocked badges."""
    id: str
    name: str
    description: str
    icon: str
    requirement_type: str
    threshold: int
    unlocked_at: Optional[str] = None

    @property
    def unlocked(self) -> bool:
        return self.unlocked_at is not None

    @classmethod
    def from_definition(cls, definition: Dict, unlocked_at: str = None) -> "Badge":
        req = definition["requirement"]
        return cls(
            id=definition["id"],
            name=definition["name"],
            description=definition["description"],
            icon=definition["icon"],
            requirement_type=req["type"],
            threshold=req["threshold"],
            unlocked_at=unlocked_at,
        )

    def to_dict(self) -> Dict:
        d = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "requirement": {"type": self.requirement_type, "threshold": self.threshold},
        }
        if self.unlocked_at:
            d["unlockedAt"] = self.unlocked_at
        return d


class BadgeEngine:
    """Evaluate the badge table against aggregated stats.

    Rules are independent; every satisfied rule yields a badge.  A table
    entry naming a metric missing from *metrics* is rejected here, so
    :meth:`evaluate` itself never fails.
    """

    def __init__(self, definitions: List[Dict] = None,
                 metrics: Dict[str, Metric] = None,
                 clock: Clock = datetime.now):
        self.definitions = list(definitions or BADGE_DEFINITIONS)
        self.metrics = dict(METRICS)
        if metrics:
            self.metrics.update(metrics)
        self.clock = clock

        unknown = sorted({
            d["requirement"]["type"] for d in self.definitions
            if d["requirement"]["type"] not in self.metrics
        })
        if unknown:
            raise ValueError(f"Badge definitions use unknown metrics: {unknown}")

    def _satisfied(self, definition: Dict, stats: UserStats,
                   records: List[MemoryRecord]) -> bool:
        req = definition["requirement"]
        return self.metrics[req["type"]](stats, records) >= req["threshold"]

    def evaluate(self, stats: UserStats, records: List[MemoryRecord],
                 now: datetime = None) -> List[Badge]:
        """Return freshly built badges for every satisfied rule, in table order."""
        unlocked_at = (now or self.clock()).isoformat()
        return [
            Badge.from_definition(d, unlocked_at=unlocked_at)
            for d in self.definitions
            if self._satisfied(d, stats, records)
        ]

    def locked(self, stats: UserStats, records: List[MemoryRecord]) -> List[Badge]:
        """Badges not yet earned, without an unlock time."""
        return [
            Badge.from_definition(d)
            for d in self.definitions
            if not self._satisfied(d, stats, records)
        ]
