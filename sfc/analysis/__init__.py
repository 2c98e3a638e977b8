"""Analysis capabilities: safety classification and text enrichment."""

from sfc.analysis.base import SafetyClassifier, SentimentCategory, SentimentResult, TextAnalyzer
from sfc.analysis.cached import CachedSafetyClassifier, CachedTextAnalyzer
from sfc.analysis.keyword import KeywordSafetyClassifier, KeywordTextAnalyzer

__all__ = [
    "CachedSafetyClassifier",
    "CachedTextAnalyzer",
    "KeywordSafetyClassifier",
    "KeywordTextAnalyzer",
    "SafetyClassifier",
    "SentimentCategory",
    "SentimentResult",
    "TextAnalyzer",
]
