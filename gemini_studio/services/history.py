"""Diagnosis history and feedback votes on top of the local store."""

import logging

from pydantic import ValidationError

from ..clients.store import LocalStore
from ..config import FEEDBACK_KEY_PREFIX, HISTORY_CAPACITY, HISTORY_KEY
from ..models.diagnosis import PlantDiagnosis, PlantMetadata
from ..models.history import HistoryRecord, Vote
from ..models.media import MediaPayload
from ..utils import new_id, now_ms

logger = logging.getLogger(__name__)


class HistoryService:
    """Bounded, newest-first list of past diagnoses."""

    def __init__(self, store: LocalStore, capacity: int = HISTORY_CAPACITY):
        self.store = store
        self.capacity = capacity

    def records(self) -> list[HistoryRecord]:
        """Return stored records, newest first. Malformed data reads as empty."""
        raw = self.store.get(HISTORY_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Stored history is not a list; ignoring")
            return []
        try:
            return [HistoryRecord.from_dict(item) for item in raw][: self.capacity]
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to load history: {e}")
            return []

    def add(self, record: HistoryRecord) -> list[HistoryRecord]:
        """Insert a record at the front, evicting the oldest beyond capacity."""
        records = [record, *self.records()][: self.capacity]
        self.store.set(HISTORY_KEY, [r.to_dict() for r in records])
        return records

    def get(self, record_id: str) -> HistoryRecord | None:
        for record in self.records():
            if record.id == record_id:
                return record
        return None

    def clear(self) -> None:
        self.store.delete(HISTORY_KEY)

    @staticmethod
    def build_record(
        result: PlantDiagnosis,
        thumbnail: MediaPayload,
        metadata: PlantMetadata,
    ) -> HistoryRecord:
        """Derive a history record from a finished diagnosis."""
        return HistoryRecord(
            id=new_id(),
            timestamp=now_ms(),
            thumbnail=thumbnail.data_url,
            diagnosis=result.diagnosis,
            plant_name=metadata.plant_name or result.plant_name_identified or "Unknown",
            result=result,
        )


class FeedbackService:
    """Per-diagnosis-label thumbs up/down, last write wins."""

    def __init__(self, store: LocalStore):
        self.store = store

    def get(self, label: str) -> Vote | None:
        value = self.store.get(self._key(label))
        try:
            return Vote(value) if value is not None else None
        except ValueError:
            return None

    def vote(self, label: str, vote: Vote) -> None:
        self.store.set(self._key(label), vote.value)

    @staticmethod
    def _key(label: str) -> str:
        return f"{FEEDBACK_KEY_PREFIX}{label}"
