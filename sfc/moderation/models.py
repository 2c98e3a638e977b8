"""Data models for content safety classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RecommendedAction(str, Enum):
    """What the classifier suggests doing with the content."""

    ACCEPT = "Accept"
    REVIEW = "Review"


@dataclass
class ModerationResult:
    """Outcome of a safety classification for one piece of text."""

    is_content_safe: bool
    category_scores: dict[str, int] = field(default_factory=dict)
    flagged_categories: list[str] = field(default_factory=list)
    max_severity_level: int = 0
    recommended_action: RecommendedAction = RecommendedAction.ACCEPT

    @classmethod
    def from_scores(cls, scores: dict[str, int], threshold: int) -> ModerationResult:
        """Build a result from per-category severities.

        A category is flagged when its severity meets or exceeds *threshold*;
        content is safe only when nothing is flagged.
        """
        flagged = [name for name, severity in scores.items() if severity >= threshold]
        safe = not flagged
        return cls(
            is_content_safe=safe,
            category_scores=dict(scores),
            flagged_categories=flagged,
            max_severity_level=max(scores.values(), default=0),
            recommended_action=RecommendedAction.ACCEPT if safe else RecommendedAction.REVIEW,
        )

    @classmethod
    def unscreened(cls) -> ModerationResult:
        """Result used when no classifier could screen the text."""
        return cls(is_content_safe=True, recommended_action=RecommendedAction.ACCEPT)
