"""Content moderation: safety results and the publish/review decision."""

from sfc.moderation.decision import ModerationDecision, decide
from sfc.moderation.models import ModerationResult, RecommendedAction

__all__ = [
    "ModerationDecision",
    "ModerationResult",
    "RecommendedAction",
    "decide",
]
