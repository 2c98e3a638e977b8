"""Offline rule-based analysis providers.

Safety classification matches curated regular expressions per harm category.
Each rule carries a severity on the 0-7 scale used by hosted safety services
(0 safe, 2 low, 4 medium, 6 high); a category's severity is the highest of
its matching rules.

Text analysis uses small word lists: a sentiment lexicon with negation
handling, stop-word-delimited key phrase extraction, and stop-word overlap
for language detection. Good enough to run without network access.
"""

from __future__ import annotations

import re
from collections import Counter

from sfc.analysis.base import (
    CATEGORIES,
    DEFAULT_SEVERITY_THRESHOLD,
    UNKNOWN_LANGUAGE,
    SafetyClassifier,
    SentimentCategory,
    SentimentResult,
    TextAnalyzer,
)
from sfc.moderation.models import ModerationResult

# ---------------------------------------------------------------------------
# Safety rules
# ---------------------------------------------------------------------------

_RULES: dict[str, list[tuple[int, str]]] = {
    "Hate": [
        (2, r"\b(fuck(ing)?|shit(ty)?|crap|damn|idiots?|stupid|morons?)\b"),
        (4, r"\b(scum|trash people|worthless people|losers like you)\b"),
        (4, r"\bi\s+hate\s+(all\s+)?(you|them|these people|those people)\b"),
        (6, r"\b(subhuman|vermin|inferior race|go back to your country)\b"),
        (6, r"\b(exterminate|wipe out)\s+(all\s+)?(of\s+)?(them|those people|these people)\b"),
    ],
    "SelfHarm": [
        (2, r"\b(want to disappear|can'?t go on)\b"),
        (4, r"\b(hurt(ing)? myself|cut(ting)? myself|self[-\s]?harm)\b"),
        (6, r"\b(kill(ing)? myself|end(ing)? my life|suicide)\b"),
        (6, r"\b(kill yourself|kys)\b"),
    ],
    "Sexual": [
        (2, r"\b(sexy|flirt(ing)?)\b"),
        (4, r"\b(nude|naked|explicit photos?)\b"),
        (6, r"\b(porn(ography)?|xxx|sexual favou?rs?)\b"),
    ],
    "Violence": [
        (2, r"\b(fight|punch(ed)?|slap(ped)?)\b"),
        (4, r"\b(beat (you|him|her|them) up|break your (legs?|neck)|bomb|weapon)\b"),
        (6, r"\b(i('ll| will)\s+kill\s+(you|him|her|them)|shoot (you|him|her|them|everyone))\b"),
        (6, r"\b(murder|massacre|burn (it|the place) down)\b"),
    ],
}

_COMPILED_RULES: dict[str, list[tuple[int, re.Pattern[str]]]] = {
    category: [(severity, re.compile(pattern, re.IGNORECASE)) for severity, pattern in rules]
    for category, rules in _RULES.items()
}


class KeywordSafetyClassifier(SafetyClassifier):
    """Pattern-based safety classifier."""

    def __init__(self, severity_threshold: int = DEFAULT_SEVERITY_THRESHOLD) -> None:
        self.severity_threshold = severity_threshold

    def category_scores(self, text: str) -> dict[str, int]:
        scores: dict[str, int] = {}
        for category in CATEGORIES:
            severity = 0
            for rule_severity, pattern in _COMPILED_RULES[category]:
                if rule_severity > severity and pattern.search(text):
                    severity = rule_severity
            scores[category] = severity
        return scores

    def analyze(self, text: str) -> ModerationResult:
        return ModerationResult.from_scores(self.category_scores(text), self.severity_threshold)


# ---------------------------------------------------------------------------
# Text analysis word lists
# ---------------------------------------------------------------------------

_POSITIVE_WORDS = {
    "amazing", "awesome", "beautiful", "best", "brilliant", "clean", "comfortable",
    "delicious", "delightful", "easy", "efficient", "enjoy", "enjoyed", "excellent",
    "exceeded", "exceptional", "fantastic", "fast", "friendly", "glad", "good", "great",
    "happy", "helpful", "impressed", "impressive", "like", "liked", "love", "loved",
    "lovely", "nice", "perfect", "pleasant", "pleased", "polite", "quick", "recommend",
    "reliable", "satisfied", "smooth", "superb", "thank", "thanks", "useful", "wonderful",
    # Polish
    "dobry", "dobra", "dobre", "dziękuję", "polecam", "super", "świetny", "świetna",
    "wspaniały", "zadowolony",
}

_NEGATIVE_WORDS = {
    "angry", "annoying", "awful", "bad", "broken", "buggy", "confusing", "crashed",
    "crashes", "dirty", "disappointed", "disappointing", "expensive", "fail", "failed",
    "frustrating", "hate", "horrible", "poor", "problem", "problems", "rude", "slow",
    "terrible", "unhappy", "unreliable", "useless", "waste", "worse", "worst", "wrong",
    # Polish
    "zły", "zła", "złe", "okropny", "fatalny", "rozczarowany", "wolny", "problem",
}

_NEGATIONS = {"not", "no", "never", "hardly", "isn't", "wasn't", "don't", "didn't", "nie"}

_STOPWORDS: dict[str, set[str]] = {
    "English": {
        "a", "about", "after", "all", "also", "am", "an", "and", "any", "are", "as", "at",
        "be", "been", "but", "by", "can", "could", "did", "do", "does", "for", "from", "had",
        "has", "have", "he", "her", "his", "how", "i", "if", "in", "into", "is", "it", "its",
        "just", "me", "my", "of", "on", "or", "our", "she", "so", "than", "that", "the",
        "their", "them", "then", "there", "these", "they", "this", "to", "too", "us", "very",
        "was", "we", "were", "what", "when", "which", "who", "will", "with", "would", "you",
        "your",
    },
    "Polish": {
        "a", "ale", "bardzo", "być", "był", "była", "było", "by", "co", "czy", "dla", "do",
        "i", "jak", "jest", "jestem", "już", "mi", "mnie", "na", "nie", "o", "od", "oraz",
        "po", "przez", "się", "sa", "są", "tak", "tam", "ten", "to", "w", "we", "z", "za",
        "że",
    },
    "German": {
        "aber", "auch", "auf", "aus", "bei", "bin", "das", "dass", "dem", "den", "der", "die",
        "ein", "eine", "einen", "es", "für", "hat", "ich", "ist", "mit", "nicht", "noch",
        "sehr", "sie", "sind", "und", "war", "wir", "zu",
    },
    "French": {
        "au", "avec", "ce", "c'est", "dans", "de", "des", "du", "elle", "en", "est", "et",
        "il", "je", "la", "le", "les", "mais", "ne", "nous", "pas", "pour", "que", "qui",
        "sur", "très", "un", "une", "vous",
    },
    "Spanish": {
        "con", "de", "del", "el", "en", "es", "esta", "está", "la", "las", "lo", "los",
        "muy", "no", "para", "pero", "por", "que", "se", "su", "un", "una", "y",
    },
}

_ALL_STOPWORDS = set().union(*_STOPWORDS.values()) | _NEGATIONS

_WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?", re.UNICODE)
_SPLIT_RE = re.compile(r"[.!?,;:()\[\]\"\n]+")


def _words(text: str) -> list[str]:
    return [w.lower() for w in _WORD_RE.findall(text)]


class KeywordTextAnalyzer(TextAnalyzer):
    """Lexicon-based sentiment, phrase and language analysis."""

    def __init__(self, max_key_phrases: int = 10) -> None:
        self.max_key_phrases = max_key_phrases

    def sentiment(self, text: str) -> SentimentResult:
        positive = negative = 0
        negate_next = 0
        for word in _words(text):
            if word in _NEGATIONS:
                negate_next = 2
                continue
            polarity = 0
            if word in _POSITIVE_WORDS:
                polarity = 1
            elif word in _NEGATIVE_WORDS:
                polarity = -1
            if polarity and negate_next:
                polarity = -polarity
            if polarity > 0:
                positive += 1
            elif polarity < 0:
                negative += 1
            negate_next = max(0, negate_next - 1)

        total = positive + negative
        ratio = positive / total if total else 0.5
        if ratio > 0.6:
            return SentimentResult(score=round(ratio, 4), category=SentimentCategory.POSITIVE)
        if ratio < 0.4:
            return SentimentResult(score=round(1 - ratio, 4), category=SentimentCategory.NEGATIVE)
        return SentimentResult(
            score=round(1 - abs(2 * ratio - 1), 4), category=SentimentCategory.NEUTRAL
        )

    def key_phrases(self, text: str) -> list[str]:
        candidates: list[list[str]] = []
        for fragment in _SPLIT_RE.split(text):
            current: list[str] = []
            for word in _words(fragment):
                if word in _ALL_STOPWORDS or len(word) < 2:
                    if current:
                        candidates.append(current)
                    current = []
                else:
                    current.append(word)
            if current:
                candidates.append(current)

        frequency: Counter[str] = Counter()
        degree: Counter[str] = Counter()
        for phrase in candidates:
            for word in phrase:
                frequency[word] += 1
                degree[word] += len(phrase)

        scored: dict[str, float] = {}
        order: dict[str, int] = {}
        for index, phrase in enumerate(candidates):
            joined = " ".join(phrase)
            if joined in scored:
                continue
            scored[joined] = sum(degree[w] / frequency[w] for w in phrase)
            order[joined] = index

        ranked = sorted(scored, key=lambda p: (-scored[p], order[p]))
        return ranked[: self.max_key_phrases]

    def language(self, text: str) -> str:
        words = _words(text)
        if not words:
            return UNKNOWN_LANGUAGE
        hits = {name: sum(1 for w in words if w in vocab) for name, vocab in _STOPWORDS.items()}
        best = max(hits, key=lambda name: hits[name])
        if hits[best] == 0:
            return UNKNOWN_LANGUAGE
        return best
