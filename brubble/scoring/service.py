"""Heuristic scoring of result text.

The sentiment score is a keyword-count placeholder, not NLP: it only needs to be
bounded and move in the direction of the words it finds.
"""

import random

from brubble.personas.schemas import Persona

POSITIVE_WORDS = ("good", "great", "excellent", "positive", "success", "benefit")
NEGATIVE_WORDS = ("bad", "poor", "negative", "fail", "problem", "risk")

_WORD_WEIGHT = 0.1
_JITTER = 0.15
_RELEVANCE_FLOOR = 0.5


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def keyword_sentiment(text: str) -> float:
    """Deterministic part of the sentiment score: +/-0.1 per distinct word hit."""
    lowered = (text or "").lower()
    score = 0.0
    score += _WORD_WEIGHT * sum(1 for word in POSITIVE_WORDS if word in lowered)
    score -= _WORD_WEIGHT * sum(1 for word in NEGATIVE_WORDS if word in lowered)
    return score


def score_relevance(text: str, query: str) -> float:
    """Share of query words found in the text, mapped onto [0.5, 1.0]."""
    words = (query or "").lower().split()
    if not words:
        return _RELEVANCE_FLOOR
    lowered = (text or "").lower()
    matched = sum(1 for word in words if word in lowered)
    return _clamp(_RELEVANCE_FLOOR + (1.0 - _RELEVANCE_FLOOR) * matched / len(words), 0.0, 1.0)


class Scorer:
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def sentiment(self, text: str, persona: Persona) -> float:
        jitter = self._rng.uniform(-_JITTER, _JITTER)
        return _clamp(keyword_sentiment(text) + jitter, -1.0, 1.0)

    def relevance(self, text: str, query: str) -> float:
        return score_relevance(text, query)
