"""Moderator review workflow.

Pending records can be approved or rejected once; both outcomes are final.
Approving a record that skipped enrichment (because it was flagged) runs the
enrichment before the update is written.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from sfc.analysis.base import TextAnalyzer
from sfc.feedback.enrichment import enrich
from sfc.feedback.models import FeedbackRecord, ReviewState
from sfc.storage.base import DEFAULT_RETRY_DELAY_SECONDS, RecordStore, write_with_retry

logger = logging.getLogger(__name__)


class ReviewWorkflow:
    """Approve / reject transitions and review-queue queries."""

    def __init__(
        self,
        store: RecordStore,
        analyzer: TextAnalyzer,
        *,
        retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.store = store
        self.analyzer = analyzer
        self.retry_delay = retry_delay
        self._sleep = sleep

    # -- transitions ---------------------------------------------------------

    def approve(self, record_id: str, notes: str = "") -> Optional[FeedbackRecord]:
        """Publish a pending record. Returns ``None`` if *record_id* is unknown."""
        record = self._load_pending(record_id, "approve")
        if record is None or record.state is not ReviewState.PENDING:
            return record

        record.is_approved = True
        record.requires_review = False
        record.review_notes = notes

        if record.sentiment_category is None:
            logger.info("Backfilling enrichment for approved feedback %s", record.id)
            enrich(self.analyzer, record.content, record.id).apply_to(record)

        return self._save(record, "approved")

    def reject(self, record_id: str, notes: str = "") -> Optional[FeedbackRecord]:
        """Reject a pending record. Returns ``None`` if *record_id* is unknown."""
        record = self._load_pending(record_id, "reject")
        if record is None or record.state is not ReviewState.PENDING:
            return record

        record.is_approved = False
        record.requires_review = False
        record.review_notes = notes
        return self._save(record, "rejected")

    def _load_pending(self, record_id: str, action: str) -> Optional[FeedbackRecord]:
        record = self.store.get_by_id(record_id)
        if record is None:
            logger.info("Cannot %s feedback %s: not found", action, record_id)
        elif record.state is not ReviewState.PENDING:
            logger.info(
                "Cannot %s feedback %s: already %s", action, record_id, record.state.value
            )
        return record

    def _save(self, record: FeedbackRecord, outcome: str) -> FeedbackRecord:
        stored = write_with_retry(
            self.store.update, record, delay=self.retry_delay, sleep=self._sleep
        )
        logger.info("Feedback %s %s", stored.id, outcome)
        return stored

    # -- queries -------------------------------------------------------------

    def pending_review(self) -> list[FeedbackRecord]:
        """Records waiting for a moderator decision."""
        return [r for r in self.store.list_all() if r.requires_review and not r.is_approved]

    def rejected(self) -> list[FeedbackRecord]:
        return [r for r in self.store.list_all() if not r.is_approved and not r.requires_review]

    def approved(self) -> list[FeedbackRecord]:
        return [r for r in self.store.list_all() if r.is_approved]

    def pending_count(self) -> int:
        return len(self.pending_review())
