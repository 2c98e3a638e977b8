"""File-based JSON storage for feedback records.

All records live in a single ``feedback.json`` list under the store's base
directory (``~/.sfc/data/`` by default).
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Optional

from sfc.errors import RecordNotFoundError, StoreError
from sfc.feedback.models import FeedbackRecord
from sfc.storage.base import RecordStore, merge_update

logger = logging.getLogger(__name__)


class JsonFeedbackStore(RecordStore):
    """File-based storage for feedback records.

    Storage path: ``<base_dir>/`` with:
    - ``feedback.json`` -- list of feedback record dicts
    """

    def __init__(self, base_dir: Optional[str | Path] = None) -> None:
        if base_dir is None:
            self._base = Path.home() / ".sfc" / "data"
        else:
            self._base = Path(base_dir).expanduser()
        self._base.mkdir(parents=True, exist_ok=True)
        self._records_path = self._base / "feedback.json"
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._records_path

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_json(self) -> list[dict]:
        if not self._records_path.exists():
            return []
        try:
            data = json.loads(self._records_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StoreError(f"Corrupt feedback store {self._records_path}: {exc}") from exc
        return data if isinstance(data, list) else []

    def _write_json(self, data: list[dict]) -> None:
        tmp_path = self._records_path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self._records_path)

    # ------------------------------------------------------------------
    # RecordStore
    # ------------------------------------------------------------------

    def create(self, record: FeedbackRecord) -> FeedbackRecord:
        with self._lock:
            records = self._read_json()
            if any(r.get("id") == record.id for r in records):
                raise StoreError(f"Feedback '{record.id}' already exists")
            records.append(record.to_dict())
            self._write_json(records)
        logger.debug("Stored feedback %s", record.id)
        return FeedbackRecord.from_dict(record.to_dict())

    def list_all(self) -> list[FeedbackRecord]:
        with self._lock:
            records = [FeedbackRecord.from_dict(r) for r in self._read_json()]
        records.sort(key=lambda r: r.submission_time, reverse=True)
        return records

    def get_by_id(self, record_id: str) -> Optional[FeedbackRecord]:
        with self._lock:
            for r in self._read_json():
                if r.get("id") == record_id:
                    return FeedbackRecord.from_dict(r)
        return None

    def update(self, record: FeedbackRecord) -> FeedbackRecord:
        with self._lock:
            records = self._read_json()
            for i, r in enumerate(records):
                if r.get("id") == record.id:
                    records[i] = merge_update(r, record)
                    self._write_json(records)
                    return FeedbackRecord.from_dict(records[i])
        raise RecordNotFoundError(record.id)
