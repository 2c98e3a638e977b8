"""Shared fakes for the SFC test suite."""

from __future__ import annotations

import os
from collections import Counter
from typing import Optional

import pytest

from sfc.analysis.base import SafetyClassifier, SentimentCategory, SentimentResult, TextAnalyzer
from sfc.errors import AnalysisUnavailableError, RateLimitedError
from sfc.feedback.models import FeedbackRecord
from sfc.moderation.models import ModerationResult
from sfc.storage.memory_store import InMemoryFeedbackStore


class FakeClassifier(SafetyClassifier):
    """Returns per-category scores, or raises when *error* is set."""

    def __init__(self, scores: Optional[dict[str, int]] = None, threshold: int = 4, error: bool = False):
        self.scores = scores or {"Hate": 0, "SelfHarm": 0, "Sexual": 0, "Violence": 0}
        self.threshold = threshold
        self.error = error
        self.calls = 0

    def analyze(self, text: str) -> ModerationResult:
        self.calls += 1
        if self.error:
            raise AnalysisUnavailableError("content safety service unreachable")
        return ModerationResult.from_scores(self.scores, self.threshold)


class FakeAnalyzer(TextAnalyzer):
    """Fixed enrichment answers; operations named in *failing* raise."""

    def __init__(self, failing: tuple[str, ...] = ()):
        self.failing = set(failing)
        self.calls: Counter[str] = Counter()

    def _call(self, op: str) -> None:
        self.calls[op] += 1
        if op in self.failing:
            raise AnalysisUnavailableError(f"{op} unavailable")

    def sentiment(self, text: str) -> SentimentResult:
        self._call("sentiment")
        return SentimentResult(score=0.92, category=SentimentCategory.POSITIVE)

    def key_phrases(self, text: str) -> list[str]:
        self._call("key_phrases")
        return ["checkout flow", "support"]

    def language(self, text: str) -> str:
        self._call("language")
        return "English"


class FlakyStore(InMemoryFeedbackStore):
    """Raises :class:`RateLimitedError` for the first *throttled* writes."""

    def __init__(self, throttled: int = 0):
        super().__init__()
        self.throttled = throttled
        self.writes = 0

    def _maybe_throttle(self) -> None:
        self.writes += 1
        if self.throttled > 0:
            self.throttled -= 1
            raise RateLimitedError("429 Too Many Requests")

    def create(self, record: FeedbackRecord) -> FeedbackRecord:
        self._maybe_throttle()
        return super().create(record)

    def update(self, record: FeedbackRecord) -> FeedbackRecord:
        self._maybe_throttle()
        return super().update(record)


@pytest.fixture
def safe_classifier():
    return FakeClassifier()


@pytest.fixture
def unsafe_classifier():
    return FakeClassifier({"Hate": 6, "SelfHarm": 0, "Sexual": 0, "Violence": 4})


@pytest.fixture
def analyzer():
    return FakeAnalyzer()


@pytest.fixture
def store():
    return FlakyStore()


@pytest.fixture
def sleeps():
    """Records requested sleep durations instead of sleeping."""
    return []


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the developer's SFC_* variables and ./sfc.yaml out of every test."""
    for key in list(os.environ):
        if key.startswith("SFC_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
