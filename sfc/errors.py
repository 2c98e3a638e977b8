"""Error taxonomy shared across SFC."""

from __future__ import annotations


class SFCError(Exception):
    """Base class for all SFC errors."""


class InvalidFeedbackError(SFCError, ValueError):
    """Submitted feedback text is empty or outside the allowed length."""


class AnalysisUnavailableError(SFCError):
    """A safety or text-analysis provider could not produce a result."""


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class StoreError(SFCError):
    """Base class for record store failures."""


class RecordNotFoundError(StoreError):
    """No record exists for the requested id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Feedback '{record_id}' not found")
        self.record_id = record_id


class RateLimitedError(StoreError):
    """The store throttled the request; the caller may retry later."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(SFCError):
    """Configuration could not be loaded or is invalid."""


class MissingConfigurationError(ConfigurationError):
    """Required configuration keys could not be resolved from any source."""

    def __init__(self, missing_keys: list[str], sources: list[str] | None = None) -> None:
        self.missing_keys = list(missing_keys)
        self.sources = list(sources or [])
        message = "Couldn't load configuration. Missing: " + ", ".join(self.missing_keys)
        if self.sources:
            message += f" (checked: {', '.join(self.sources)})"
        super().__init__(message)
