"""Dict-backed record store for tests and throwaway runs."""

from __future__ import annotations

import threading
from typing import Optional

from sfc.errors import RecordNotFoundError, StoreError
from sfc.feedback.models import FeedbackRecord
from sfc.storage.base import RecordStore, merge_update


class InMemoryFeedbackStore(RecordStore):
    """Keeps serialised copies so callers never share mutable state with the store."""

    def __init__(self) -> None:
        self._records: dict[str, dict] = {}
        self._lock = threading.Lock()

    def create(self, record: FeedbackRecord) -> FeedbackRecord:
        with self._lock:
            if record.id in self._records:
                raise StoreError(f"Feedback '{record.id}' already exists")
            self._records[record.id] = record.to_dict()
            return FeedbackRecord.from_dict(self._records[record.id])

    def list_all(self) -> list[FeedbackRecord]:
        with self._lock:
            records = [FeedbackRecord.from_dict(d) for d in self._records.values()]
        records.sort(key=lambda r: r.submission_time, reverse=True)
        return records

    def get_by_id(self, record_id: str) -> Optional[FeedbackRecord]:
        with self._lock:
            data = self._records.get(record_id)
        return FeedbackRecord.from_dict(data) if data is not None else None

    def update(self, record: FeedbackRecord) -> FeedbackRecord:
        with self._lock:
            if record.id not in self._records:
                raise RecordNotFoundError(record.id)
            self._records[record.id] = merge_update(self._records[record.id], record)
            return FeedbackRecord.from_dict(self._records[record.id])
