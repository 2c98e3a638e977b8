"""Submission pipeline: classify, decide, enrich, persist.

Safety screening never blocks a submission. If the classifier is down the
content is treated as safe and published; this fail-open choice is logged on
every occurrence so it can be audited.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from sfc.analysis.base import SafetyClassifier, TextAnalyzer
from sfc.errors import InvalidFeedbackError
from sfc.feedback.enrichment import enrich
from sfc.feedback.models import FeedbackRecord
from sfc.moderation.decision import decide
from sfc.moderation.models import ModerationResult
from sfc.storage.base import DEFAULT_RETRY_DELAY_SECONDS, RecordStore, write_with_retry

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 10
DEFAULT_MAX_LENGTH = 1000


class SubmissionPipeline:
    """Turns submitted text into a persisted, classified feedback record."""

    def __init__(
        self,
        store: RecordStore,
        classifier: SafetyClassifier,
        analyzer: TextAnalyzer,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.store = store
        self.classifier = classifier
        self.analyzer = analyzer
        self.min_length = min_length
        self.max_length = max_length
        self.retry_delay = retry_delay
        self._sleep = sleep

    # -- submission ----------------------------------------------------------

    def validate(self, content: str) -> str:
        """Return *content* stripped, or raise :class:`InvalidFeedbackError`.

        Length limits apply to the stripped text.
        """
        text = (content or "").strip()
        if not text:
            raise InvalidFeedbackError("Feedback must not be empty")
        if len(text) < self.min_length:
            raise InvalidFeedbackError(
                f"Feedback must be at least {self.min_length} characters long"
            )
        if len(text) > self.max_length:
            raise InvalidFeedbackError(
                f"Feedback must be at most {self.max_length} characters long"
            )
        return text

    def submit(self, content: str) -> FeedbackRecord:
        """Screen, enrich and store new feedback. Returns the stored record.

        The record keeps *content* exactly as submitted.
        """
        self.validate(content)
        record = FeedbackRecord(content=content)

        moderation = self._classify(record)
        decide(moderation).apply_to(record)

        if record.is_content_safe:
            enrich(self.analyzer, record.content, record.id).apply_to(record)
        else:
            logger.info(
                "Feedback %s held for review (categories: %s, severity %d)",
                record.id, record.moderation_category, record.severity_level,
            )

        stored = write_with_retry(
            self.store.create, record, delay=self.retry_delay, sleep=self._sleep
        )
        logger.info("Feedback %s submitted (state=%s)", stored.id, stored.state.value)
        return stored

    def _classify(self, record: FeedbackRecord) -> ModerationResult:
        try:
            return self.classifier.analyze(record.content)
        except Exception as exc:
            logger.warning(
                "Content safety unavailable for feedback %s, accepting unscreened: %s",
                record.id, exc,
            )
            return ModerationResult.unscreened()

    # -- reads ---------------------------------------------------------------

    def list_all(self) -> list[FeedbackRecord]:
        return self.store.list_all()

    def list_approved(self) -> list[FeedbackRecord]:
        """Published feedback, newest first."""
        return [r for r in self.store.list_all() if r.is_approved]

    def get(self, record_id: str) -> Optional[FeedbackRecord]:
        return self.store.get_by_id(record_id)
