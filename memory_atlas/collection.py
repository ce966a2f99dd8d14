"""Creating, editing and saving memory records.

Mood is derived here and nowhere else: once when a record is created and
again whenever it is edited, always from the title and description as
they stand at that moment.
"""

from datetime import datetime
from typing import List

from .entry import MemoryRecord
from .sentiment import SentimentClassifier
from .utils import Clock, logger


class MemoryCollection:
    """Record lifecycle helpers over a caller-owned list of records.

    None of the methods mutate the list they are given; saving returns a
    new list with the record appended or replaced by id.
    """

    def __init__(self, classifier: SentimentClassifier = None,
                 clock: Clock = datetime.now):
        self.classifier = classifier or SentimentClassifier()
        self.clock = clock

    def new_record(self, title: str, description: str, latitude: float,
                   longitude: float, date: str, **fields) -> MemoryRecord:
        """Build a record with a fresh id, timestamps and derived mood."""
        stamp = self.clock().isoformat()
        fields.setdefault("created_at", stamp)
        fields.setdefault("updated_at", stamp)
        record = MemoryRecord(title, description, latitude, longitude, date, **fields)
        return self._with_mood(record)

    def edit_record(self, record: MemoryRecord, **changes) -> MemoryRecord:
        """Apply *changes* to a copy of *record* and re-derive its mood.

        ``id`` and ``created_at`` are kept from the original.
        """
        changes.pop("id", None)
        changes.pop("created_at", None)
        changes["updated_at"] = self.clock().isoformat()
        return self._with_mood(record.copy(**changes))

    def _with_mood(self, record: MemoryRecord) -> MemoryRecord:
        analysis = self.classifier.classify(record.text)
        record.mood = analysis.label
        record.mood_score = analysis.score
        return record

    @staticmethod
    def upsert(records: List[MemoryRecord], record: MemoryRecord) -> List[MemoryRecord]:
        """Return a new list with *record* replacing its id, or appended."""
        updated = list(records)
        for i, existing in enumerate(updated):
            if existing.id == record.id:
                updated[i] = record
                logger.debug(f"Replaced memory {record.id}")
                return updated
        updated.append(record)
        return updated

    @staticmethod
    def remove(records: List[MemoryRecord], record_id: str) -> List[MemoryRecord]:
        return [r for r in records if r.id != record_id]
