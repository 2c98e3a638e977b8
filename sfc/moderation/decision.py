"""Moderation decision: maps a safety result onto a record's review state.

The decision is a pure function of the classifier output: safe content is
published immediately, anything flagged waits for a moderator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from sfc.moderation.models import ModerationResult

if TYPE_CHECKING:
    from sfc.feedback.models import FeedbackRecord


@dataclass(frozen=True)
class ModerationDecision:
    """Safety and review fields to stamp onto a new record."""

    is_content_safe: bool
    requires_review: bool
    is_approved: bool
    severity_level: int = 0
    flagged_categories: list[str] = field(default_factory=list)
    moderation_category: Optional[str] = None

    def apply_to(self, record: FeedbackRecord) -> FeedbackRecord:
        """Copy the decision onto *record* and return it."""
        record.is_content_safe = self.is_content_safe
        record.requires_review = self.requires_review
        record.is_approved = self.is_approved
        record.severity_level = self.severity_level
        record.flagged_categories = list(self.flagged_categories)
        record.moderation_category = self.moderation_category
        return record


def decide(result: ModerationResult) -> ModerationDecision:
    """Return the initial review state for content classified as *result*."""
    if result.is_content_safe:
        return ModerationDecision(
            is_content_safe=True,
            requires_review=False,
            is_approved=True,
            severity_level=result.max_severity_level,
            flagged_categories=list(result.flagged_categories),
        )

    return ModerationDecision(
        is_content_safe=False,
        requires_review=True,
        is_approved=False,
        severity_level=result.max_severity_level,
        flagged_categories=list(result.flagged_categories),
        moderation_category=", ".join(result.flagged_categories),
    )
