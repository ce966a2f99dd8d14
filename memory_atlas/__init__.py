"""
Memory Atlas — analytics and achievements for geotagged personal memories.

Classify the mood of a memory, attribute it to a coarse region, and
derive day streaks, dashboard statistics and badges from a collection of
memories using only the Python standard library.  Every engine is a pure
function of its inputs plus an injectable clock.

Usage:
    from memory_atlas import MemoryAtlas

    atlas = MemoryAtlas()
    rec = atlas.new_record("Amazing happy trip", "Beach day", 36.7, -4.4, "2026-10-18")
    memories = atlas.save([], rec)
    board = atlas.dashboard(memories)
"""

__version__ = "1.0.0"

# Core
from memory_atlas.core import MemoryAtlas, Dashboard
from memory_atlas.entry import MemoryRecord, generate_memory_id

# Engines
from memory_atlas.sentiment import (
    SentimentClassifier,
    MoodAnalysis,
    MOOD_KEYWORDS,
    MOOD_LABELS,
    MOOD_PRIORITY,
)
from memory_atlas.geo import GeoAttributor, RegionBox, REGION_BOXES, UNKNOWN_REGION
from memory_atlas.temporal import StreakCalculator, TemporalEngine
from memory_atlas.stats import StatsAggregator, UserStats, MonthlyBucket, TopMood
from memory_atlas.badges import Badge, BadgeEngine, BADGE_DEFINITIONS, METRICS

# Record lifecycle + export
from memory_atlas.collection import MemoryCollection
from memory_atlas.export import export_json, export_text, export_filename, share_summary

__all__ = [
    "MemoryAtlas",
    "Dashboard",
    "MemoryRecord",
    "generate_memory_id",

    # Engines
    "SentimentClassifier",
    "MoodAnalysis",
    "MOOD_KEYWORDS",
    "MOOD_LABELS",
    "MOOD_PRIORITY",
    "GeoAttributor",
    "RegionBox",
    "REGION_BOXES",
    "UNKNOWN_REGION",
    "StreakCalculator",
    "TemporalEngine",
    "StatsAggregator",
    "UserStats",
    "MonthlyBucket",
    "TopMood",
    "Badge",
    "BadgeEngine",
    "BADGE_DEFINITIONS",
    "METRICS",

    # Records
    "MemoryCollection",

    # Export
    "export_json",
    "export_text",
    "export_filename",
    "share_summary",
]
