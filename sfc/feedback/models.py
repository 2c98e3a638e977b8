"""Feedback domain models."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from sfc.analysis.base import SentimentCategory, SentimentResult

__all__ = ["FeedbackRecord", "ReviewState", "SentimentCategory", "SentimentResult"]


class ReviewState(str, Enum):
    """Where a record sits in the moderation workflow."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class FeedbackRecord:
    """A single piece of submitted feedback and its moderation state."""

    content: str
    id: str = ""
    submission_time: Optional[datetime] = None

    # Enrichment
    sentiment_score: Optional[float] = None
    sentiment_category: Optional[SentimentCategory] = None
    key_phrases: list[str] = field(default_factory=list)
    language: Optional[str] = None

    # Safety
    is_content_safe: bool = True
    severity_level: int = 0
    flagged_categories: list[str] = field(default_factory=list)
    moderation_category: Optional[str] = None

    # Review
    requires_review: bool = False
    is_approved: bool = True
    review_notes: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = str(uuid.uuid4())
        if self.submission_time is None:
            self.submission_time = datetime.now(timezone.utc)
        if isinstance(self.sentiment_category, str):
            self.sentiment_category = SentimentCategory(self.sentiment_category)

    @property
    def state(self) -> ReviewState:
        if self.requires_review:
            return ReviewState.PENDING
        return ReviewState.APPROVED if self.is_approved else ReviewState.REJECTED

    @property
    def is_enriched(self) -> bool:
        return self.sentiment_category is not None

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "submission_time": self.submission_time.isoformat(),
            "sentiment_score": self.sentiment_score,
            "sentiment_category": self.sentiment_category.value if self.sentiment_category else None,
            "key_phrases": list(self.key_phrases),
            "language": self.language,
            "is_content_safe": self.is_content_safe,
            "severity_level": self.severity_level,
            "flagged_categories": list(self.flagged_categories),
            "moderation_category": self.moderation_category,
            "requires_review": self.requires_review,
            "is_approved": self.is_approved,
            "review_notes": self.review_notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FeedbackRecord:
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        submitted = values.get("submission_time")
        if isinstance(submitted, str):
            values["submission_time"] = datetime.fromisoformat(submitted)
        values["key_phrases"] = list(values.get("key_phrases") or [])
        values["flagged_categories"] = list(values.get("flagged_categories") or [])
        return cls(**values)
