"""Mood classification for memories.

Keyword-membership heuristic: each mood owns a keyword list, a keyword
counts once if it appears anywhere in the lower-cased text, and the mood
with the most hits wins.  Ties go to the earlier mood in
:data:`MOOD_PRIORITY`.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

HAPPY = "happy"
NOSTALGIC = "nostalgic"
SAD = "sad"
EXCITED = "excited"
NEUTRAL = "neutral"

# Order used for breakdowns and charts
MOOD_LABELS = (HAPPY, NOSTALGIC, SAD, EXCITED, NEUTRAL)

# Tie-break order for classification
MOOD_PRIORITY = (HAPPY, SAD, NOSTALGIC, EXCITED)

MOOD_KEYWORDS: Dict[str, List[str]] = {
    HAPPY: [
        "happy", "joy", "amazing", "wonderful", "great", "love",
        "beautiful", "perfect", "excited", "fun",
    ],
    SAD: [
        "sad", "terrible", "awful", "horrible", "bad", "worst", "hate",
        "disappointed", "tragic",
    ],
    NOSTALGIC: [
        "remember", "nostalgia", "childhood", "past", "memories", "miss",
        "used to", "back then",
    ],
    EXCITED: [
        "excited", "thrilling", "adventure", "amazing", "incredible",
        "spectacular", "awesome",
    ],
}

NEUTRAL_SCORE = 0.5
NEUTRAL_CONFIDENCE = 0.3
# Hits needed for full confidence
CONFIDENCE_SATURATION = 3.0

MOOD_DESCRIPTIONS: Dict[str, str] = {
    HAPPY: "A joyful memory",
    EXCITED: "A thrilling experience",
    NOSTALGIC: "A cherished memory",
    SAD: "A somber moment",
    NEUTRAL: "A neutral memory",
}


@dataclass(frozen=True)
class MoodAnalysis:
    """Result of classifying a piece of text."""
    label: str
    score: float       # 0.0-1.0, grows with hit count, never reaches 1
    confidence: float  # 0.0-1.0

    def __repr__(self):
        return f"<MoodAnalysis {self.label} score={self.score:.2f} conf={self.confidence:.2f}>"


class SentimentClassifier:
    """Lightweight keyword-based mood classifier.

    Args:
        keywords: mood -> keyword list.  Defaults to :data:`MOOD_KEYWORDS`.
        priority: tie-break order over the keyword moods.  Defaults to
            :data:`MOOD_PRIORITY`.
    """

    def __init__(self, keywords: Dict[str, List[str]] = None,
                 priority: Sequence[str] = None):
        self.keywords = keywords or MOOD_KEYWORDS
        self.priority = tuple(priority or MOOD_PRIORITY)
        missing = [m for m in self.priority if m not in self.keywords]
        if missing:
            raise ValueError(f"No keywords configured for moods: {missing}")

    def hits(self, text: str) -> Dict[str, int]:
        """Return {mood: number of distinct keywords present} for each mood."""
        text_lower = (text or "").lower()
        return {
            mood: sum(1 for kw in self.keywords[mood] if kw.lower() in text_lower)
            for mood in self.priority
        }

    def classify(self, text: str) -> MoodAnalysis:
        counts = self.hits(text)
        max_score = max(counts.values(), default=0)
        if max_score == 0:
            return MoodAnalysis(NEUTRAL, NEUTRAL_SCORE, NEUTRAL_CONFIDENCE)

        label = next(m for m in self.priority if counts[m] == max_score)
        return MoodAnalysis(
            label=label,
            score=max_score / (max_score + 1),
            confidence=min(max_score / CONFIDENCE_SATURATION, 1.0),
        )

    @staticmethod
    def describe(label: Optional[str]) -> str:
        """One-line description of a mood for detail views."""
        return MOOD_DESCRIPTIONS.get(label, MOOD_DESCRIPTIONS[NEUTRAL])
