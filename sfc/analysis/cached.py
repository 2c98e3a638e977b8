"""Read-through caching wrappers for analysis providers.

Results are keyed by a SHA-256 digest of the text, prefixed per operation,
so identical submissions within the TTL reuse the earlier answer instead of
calling the provider again. Failed calls are never cached.
"""

from __future__ import annotations

import copy
import hashlib

from sfc.analysis.base import SafetyClassifier, SentimentResult, TextAnalyzer
from sfc.cache import TTLCache
from sfc.moderation.models import ModerationResult


def content_key(prefix: str, text: str) -> str:
    """Return the cache key for *text* under operation *prefix*."""
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return f"{prefix}:{digest}"


class CachedSafetyClassifier(SafetyClassifier):
    """Wraps a :class:`SafetyClassifier` with a content-keyed TTL cache."""

    def __init__(self, inner: SafetyClassifier, cache: TTLCache) -> None:
        self.inner = inner
        self.cache = cache

    def analyze(self, text: str) -> ModerationResult:
        result = self.cache.get_or_compute(
            content_key("content_safety", text), lambda: self.inner.analyze(text)
        )
        return copy.deepcopy(result)


class CachedTextAnalyzer(TextAnalyzer):
    """Wraps a :class:`TextAnalyzer`; each operation is cached independently."""

    def __init__(self, inner: TextAnalyzer, cache: TTLCache) -> None:
        self.inner = inner
        self.cache = cache

    def sentiment(self, text: str) -> SentimentResult:
        result = self.cache.get_or_compute(
            content_key("sentiment", text), lambda: self.inner.sentiment(text)
        )
        return SentimentResult(score=result.score, category=result.category)

    def key_phrases(self, text: str) -> list[str]:
        phrases = self.cache.get_or_compute(
            content_key("key_phrases", text), lambda: self.inner.key_phrases(text)
        )
        return list(phrases)

    def language(self, text: str) -> str:
        return self.cache.get_or_compute(
            content_key("language", text), lambda: self.inner.language(text)
        )
