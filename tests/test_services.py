"""Tests for application wiring."""

from sfc.analysis.cached import CachedSafetyClassifier, CachedTextAnalyzer
from sfc.analysis.keyword import KeywordSafetyClassifier, KeywordTextAnalyzer
from sfc.analysis.llm import LLMSafetyClassifier, LLMTextAnalyzer
from sfc.config import ConfigurationProvider, load_settings
from sfc.services import build_providers, build_services
from sfc.storage import InMemoryFeedbackStore


def _settings(**overrides):
    return load_settings(ConfigurationProvider(**overrides))


def test_keyword_providers_are_cache_wrapped_by_default():
    classifier, analyzer = build_providers(_settings())
    assert isinstance(classifier, CachedSafetyClassifier)
    assert isinstance(classifier.inner, KeywordSafetyClassifier)
    assert isinstance(analyzer, CachedTextAnalyzer)
    assert isinstance(analyzer.inner, KeywordTextAnalyzer)


def test_cache_can_be_disabled():
    classifier, analyzer = build_providers(_settings(cache={"enabled": False}))
    assert isinstance(classifier, KeywordSafetyClassifier)
    assert isinstance(analyzer, KeywordTextAnalyzer)


def test_anthropic_providers(monkeypatch):
    monkeypatch.setenv("SFC_ANTHROPIC__API_KEY", "sk-test")
    settings = _settings(
        content_safety={"provider": "anthropic", "severity_threshold": 2},
        text_analytics={"provider": "anthropic", "max_key_phrases": 5},
        cache={"enabled": False},
    )
    classifier, analyzer = build_providers(settings)

    assert isinstance(classifier, LLMSafetyClassifier)
    assert classifier.severity_threshold == 2
    assert isinstance(analyzer, LLMTextAnalyzer)
    assert analyzer.max_key_phrases == 5
    assert classifier.client is analyzer.client


def test_build_services_end_to_end():
    services = build_services(_settings(storage={"backend": "memory"}))
    assert isinstance(services.store, InMemoryFeedbackStore)

    safe = services.pipeline.submit("This product is wonderful and exceeded expectations")
    held = services.pipeline.submit("Fix this or I will kill you")

    assert safe.is_approved is True
    assert safe.sentiment_category.value == "Positive"
    assert held.requires_review is True
    assert held.moderation_category == "Violence"
    assert services.review.pending_count() == 1
    assert len(services.all_feedback()) == 2
