"""Memory record — a single geotagged journal entry."""

import random
import string
import time
from datetime import datetime
from typing import Dict, List, Optional

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_memory_id() -> str:
    """Millisecond timestamp in base 36 followed by a random base-36 tail."""
    stamp = _to_base36(int(time.time() * 1000))
    tail = "".join(random.choice(_BASE36) for _ in range(11))
    return stamp + tail


class MemoryRecord:
    """User-authored memory pinned to a point on the map.

    ``mood`` and ``mood_score`` are filled in once, when the record is
    created or edited (see :mod:`memory_atlas.collection`).  The analytics
    engines only read them.

    ``story`` holds the generated narrative for the memory, if any.
    ``is_private`` only matters to export and sharing.
    """

    __slots__ = (
        "id", "title", "description", "latitude", "longitude", "date",
        "photos", "video_links", "story", "mood", "mood_score", "tags",
        "is_private", "created_at", "updated_at",
    )

    def __init__(
        self,
        title: str,
        description: str,
        latitude: float,
        longitude: float,
        date: str,
        id: str = None,
        mood: Optional[str] = None,
        mood_score: Optional[float] = None,
        tags: List[str] = None,
        photos: List[str] = None,
        video_links: List[str] = None,
        story: Optional[str] = None,
        is_private: bool = False,
        created_at: str = None,
        updated_at: str = None,
    ):
        self.id = id or generate_memory_id()
        self.title = title
        self.description = description
        self.latitude = latitude
        self.longitude = longitude
        self.date = date
        self.mood = mood
        self.mood_score = mood_score
        self.tags: List[str] = list(tags or [])
        self.photos: List[str] = list(photos or [])
        self.video_links: List[str] = list(video_links or [])
        self.story = story
        self.is_private = is_private
        self.created_at = created_at or datetime.now().isoformat()
        self.updated_at = updated_at or self.created_at

    @property
    def text(self) -> str:
        """Text the mood is derived from."""
        return f"{self.title} {self.description}"

    @property
    def has_story(self) -> bool:
        return bool(self.story)

    # -- serialisation --------------------------------------------------------

    def to_dict(self) -> Dict:
        d = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "date": self.date,
            "photos": self.photos,
            "videoLinks": self.video_links,
            "tags": self.tags,
            "isPrivate": self.is_private,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        # Optional fields are omitted when unset, matching the app's JSON
        if self.story:
            d["aiStory"] = self.story
        if self.mood is not None:
            d["sentiment"] = self.mood
        if self.mood_score is not None:
            d["sentimentScore"] = self.mood_score
        return d

    @classmethod
    def from_dict(cls, d: Dict) -> "MemoryRecord":
        return cls(
            d.get("title", ""), d.get("description", ""),
            d.get("latitude", 0.0), d.get("longitude", 0.0), d.get("date", ""),
            id=d.get("id"),
            mood=d.get("sentiment"),
            mood_score=d.get("sentimentScore"),
            tags=d.get("tags", []),
            photos=d.get("photos", []),
            video_links=d.get("videoLinks", []),
            story=d.get("aiStory"),
            is_private=d.get("isPrivate", False),
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def copy(self, **changes) -> "MemoryRecord":
        """Return a new record with *changes* applied; self is untouched."""
        fields = {name: getattr(self, name) for name in self.__slots__}
        unknown = set(changes) - set(fields)
        if unknown:
            raise ValueError(f"Unknown memory fields: {sorted(unknown)}")
        fields.update(changes)
        return MemoryRecord(**fields)

    def __repr__(self) -> str:
        return (
            f"<Memory {self.id} mood={self.mood} "
            f"at=({self.latitude}, {self.longitude}) date={self.date}>"
        )
