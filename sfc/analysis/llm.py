"""LLM-backed analysis providers.

Each operation sends one prompt from :mod:`sfc.llm.prompts` and parses the
JSON object in the reply. SDK failures and unparseable replies surface as
:class:`~sfc.errors.AnalysisUnavailableError`.
"""

from __future__ import annotations

import json
import re
from typing import Any

import anthropic

from sfc.analysis.base import (
    CATEGORIES,
    DEFAULT_SEVERITY_THRESHOLD,
    UNKNOWN_LANGUAGE,
    SafetyClassifier,
    SentimentCategory,
    SentimentResult,
    TextAnalyzer,
)
from sfc.errors import AnalysisUnavailableError
from sfc.llm.client import LLMClient
from sfc.llm.prompts import (
    CONTENT_SAFETY_PROMPT,
    KEY_PHRASES_PROMPT,
    LANGUAGE_PROMPT,
    SENTIMENT_PROMPT,
)
from sfc.moderation.models import ModerationResult

_FENCED_JSON = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)
_BARE_JSON = re.compile(r"(\{.*\})", re.DOTALL)


def extract_json(text: str) -> dict[str, Any]:
    """Pull the first JSON object out of a model reply."""
    match = _FENCED_JSON.search(text) or _BARE_JSON.search(text)
    candidate = match.group(1) if match else text
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise AnalysisUnavailableError(f"Unparseable model response: {text[:200]!r}") from exc
    if not isinstance(data, dict):
        raise AnalysisUnavailableError(f"Expected a JSON object, got {type(data).__name__}")
    return data


class _LLMProvider:
    def __init__(self, client: LLMClient) -> None:
        self.client = client

    def _ask(self, prompt: str) -> dict[str, Any]:
        try:
            response = self.client.complete(prompt)
        except anthropic.APIError as exc:
            raise AnalysisUnavailableError(f"LLM request failed: {exc}") from exc
        return extract_json(response.content)


class LLMSafetyClassifier(_LLMProvider, SafetyClassifier):
    """Asks the model for a severity per harm category."""

    def __init__(self, client: LLMClient, severity_threshold: int = DEFAULT_SEVERITY_THRESHOLD) -> None:
        super().__init__(client)
        self.severity_threshold = severity_threshold

    def analyze(self, text: str) -> ModerationResult:
        data = self._ask(CONTENT_SAFETY_PROMPT.format(text=text))
        scores: dict[str, int] = {}
        for category in CATEGORIES:
            try:
                scores[category] = max(0, int(data.get(category, 0)))
            except (TypeError, ValueError) as exc:
                raise AnalysisUnavailableError(
                    f"Invalid severity for {category}: {data.get(category)!r}"
                ) from exc
        return ModerationResult.from_scores(scores, self.severity_threshold)


class LLMTextAnalyzer(_LLMProvider, TextAnalyzer):
    """Sentiment, key phrases and language via prompted JSON replies."""

    def __init__(self, client: LLMClient, max_key_phrases: int = 10) -> None:
        super().__init__(client)
        self.max_key_phrases = max_key_phrases

    def sentiment(self, text: str) -> SentimentResult:
        data = self._ask(SENTIMENT_PROMPT.format(text=text))
        try:
            category = SentimentCategory(str(data.get("category", "")).capitalize())
            score = min(1.0, max(0.0, float(data.get("score"))))
        except (TypeError, ValueError) as exc:
            raise AnalysisUnavailableError(f"Invalid sentiment payload: {data!r}") from exc
        return SentimentResult(score=score, category=category)

    def key_phrases(self, text: str) -> list[str]:
        data = self._ask(KEY_PHRASES_PROMPT.format(text=text, max_phrases=self.max_key_phrases))
        phrases = data.get("key_phrases")
        if not isinstance(phrases, list):
            raise AnalysisUnavailableError(f"Invalid key phrase payload: {data!r}")
        return [str(p).strip() for p in phrases if str(p).strip()][: self.max_key_phrases]

    def language(self, text: str) -> str:
        data = self._ask(LANGUAGE_PROMPT.format(text=text))
        language = str(data.get("language") or "").strip()
        return language or UNKNOWN_LANGUAGE
