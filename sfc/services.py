"""Application wiring.

Everything that talks to the outside world is built once at startup from a
validated :class:`~sfc.config.Settings`. Configuration problems surface here,
before the first request, rather than on first use of a provider.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sfc.analysis.base import SafetyClassifier, TextAnalyzer
from sfc.analysis.cached import CachedSafetyClassifier, CachedTextAnalyzer
from sfc.analysis.keyword import KeywordSafetyClassifier, KeywordTextAnalyzer
from sfc.cache import TTLCache
from sfc.config import Settings, load_settings
from sfc.errors import MissingConfigurationError
from sfc.feedback.models import FeedbackRecord
from sfc.feedback.pipeline import SubmissionPipeline
from sfc.feedback.review import ReviewWorkflow
from sfc.storage.base import RecordStore
from sfc.storage.json_store import JsonFeedbackStore
from sfc.storage.memory_store import InMemoryFeedbackStore

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Ready-to-use application components."""

    store: RecordStore
    pipeline: SubmissionPipeline
    review: ReviewWorkflow
    settings: Optional[Settings] = None

    def all_feedback(self) -> list[FeedbackRecord]:
        return self.store.list_all()


def build_store(settings: Settings) -> RecordStore:
    if settings.storage.backend == "memory":
        return InMemoryFeedbackStore()
    return JsonFeedbackStore(Path(settings.storage.path).expanduser())


def build_providers(settings: Settings) -> tuple[SafetyClassifier, TextAnalyzer]:
    """Construct the configured classifier and analyzer, cache-wrapped if enabled."""
    client = None
    if settings.needs_anthropic:
        if settings.anthropic is None:
            raise MissingConfigurationError(["anthropic:api_key"])
        from sfc.llm.client import LLMClient

        client = LLMClient(
            api_key=settings.anthropic.api_key,
            model=settings.anthropic.model,
            timeout=settings.anthropic.timeout_seconds,
        )

    threshold = settings.content_safety.severity_threshold
    classifier: SafetyClassifier
    if settings.content_safety.provider == "anthropic":
        from sfc.analysis.llm import LLMSafetyClassifier

        classifier = LLMSafetyClassifier(client, severity_threshold=threshold)
    else:
        classifier = KeywordSafetyClassifier(severity_threshold=threshold)

    max_phrases = settings.text_analytics.max_key_phrases
    analyzer: TextAnalyzer
    if settings.text_analytics.provider == "anthropic":
        from sfc.analysis.llm import LLMTextAnalyzer

        analyzer = LLMTextAnalyzer(client, max_key_phrases=max_phrases)
    else:
        analyzer = KeywordTextAnalyzer(max_key_phrases=max_phrases)

    if settings.cache.enabled:
        cache = TTLCache(ttl_seconds=settings.cache.ttl_seconds)
        classifier = CachedSafetyClassifier(classifier, cache)
        analyzer = CachedTextAnalyzer(analyzer, cache)

    return classifier, analyzer


def build_services(
    settings: Optional[Settings] = None,
    *,
    store: Optional[RecordStore] = None,
    classifier: Optional[SafetyClassifier] = None,
    analyzer: Optional[TextAnalyzer] = None,
) -> Services:
    """Build the application from *settings*; explicit components override them."""
    if settings is None:
        settings = load_settings()

    store = store or build_store(settings)
    if classifier is None or analyzer is None:
        built_classifier, built_analyzer = build_providers(settings)
        classifier = classifier or built_classifier
        analyzer = analyzer or built_analyzer

    retry_delay = settings.storage.retry_delay_seconds
    pipeline = SubmissionPipeline(
        store,
        classifier,
        analyzer,
        min_length=settings.feedback.min_length,
        max_length=settings.feedback.max_length,
        retry_delay=retry_delay,
    )
    review = ReviewWorkflow(store, analyzer, retry_delay=retry_delay)
    logger.debug(
        "Services ready (store=%s, safety=%s, analytics=%s)",
        settings.storage.backend,
        settings.content_safety.provider,
        settings.text_analytics.provider,
    )
    return Services(store=store, pipeline=pipeline, review=review, settings=settings)
