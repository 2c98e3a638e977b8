"""Record store contract and the shared write-retry policy."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from sfc.errors import RateLimitedError
from sfc.feedback.models import FeedbackRecord

logger = logging.getLogger(__name__)

DEFAULT_RETRY_DELAY_SECONDS = 1.0

# Set at submission; updates never change them.
WRITE_ONCE_FIELDS = (
    "content",
    "submission_time",
    "is_content_safe",
    "severity_level",
    "flagged_categories",
)


class RecordStore(ABC):
    """Keyed storage for :class:`FeedbackRecord` objects.

    Implementations own write atomicity: ``update`` must not interleave with
    another write to the same id inside one store instance.
    """

    @abstractmethod
    def create(self, record: FeedbackRecord) -> FeedbackRecord:
        """Persist a new record and return the stored copy."""

    @abstractmethod
    def list_all(self) -> list[FeedbackRecord]:
        """Return every record, newest submission first."""

    @abstractmethod
    def get_by_id(self, record_id: str) -> Optional[FeedbackRecord]:
        """Return the record for *record_id*, or ``None`` if absent."""

    @abstractmethod
    def update(self, record: FeedbackRecord) -> FeedbackRecord:
        """Replace the stored record with the same id.

        Fields in :data:`WRITE_ONCE_FIELDS` keep their stored values.
        Raises :class:`~sfc.errors.RecordNotFoundError` if it does not exist.
        """


def merge_update(stored: dict[str, Any], record: FeedbackRecord) -> dict[str, Any]:
    """Return *record* serialised, with write-once fields taken from *stored*."""
    data = record.to_dict()
    changed = [name for name in WRITE_ONCE_FIELDS if name in stored and data[name] != stored[name]]
    if changed:
        logger.warning(
            "Ignoring changes to write-once fields of feedback %s: %s", record.id, ", ".join(changed)
        )
    for name in WRITE_ONCE_FIELDS:
        if name in stored:
            data[name] = stored[name]
    return data


def write_with_retry(
    write: Callable[[FeedbackRecord], FeedbackRecord],
    record: FeedbackRecord,
    *,
    delay: float = DEFAULT_RETRY_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> FeedbackRecord:
    """Call *write* once more after *delay* seconds if the store throttles.

    A second :class:`RateLimitedError` propagates to the caller.
    """
    try:
        return write(record)
    except RateLimitedError:
        logger.warning("Store rate limited writing feedback %s; retrying in %.1fs", record.id, delay)
        sleep(delay)
    try:
        return write(record)
    except RateLimitedError:
        logger.error("Store still rate limited writing feedback %s; giving up", record.id)
        raise
