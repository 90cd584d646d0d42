import random

import pytest

from brubble.scoring.service import Scorer, keyword_sentiment, score_relevance


@pytest.mark.parametrize(
    "text,query,expected",
    [
        ("", "climate policy", 0.5),
        ("nothing relevant here", "climate policy", 0.5),
        ("New climate report", "climate policy", 0.75),
        ("Climate POLICY debate", "climate policy", 1.0),
        ("anything", "", 0.5),
        ("anything", "   ", 0.5),
    ],
)
def test_relevance_maps_matched_share_onto_floor(text, query, expected):
    assert score_relevance(text, query) == pytest.approx(expected)


def test_relevance_ignores_repeated_whitespace():
    assert score_relevance("climate policy", "climate   policy") == pytest.approx(1.0)


def test_sentiment_is_bounded(progressive):
    scorer = Scorer(random.Random(1))
    texts = [
        "",
        "good great excellent positive success benefit " * 20,
        "bad poor negative fail problem risk " * 20,
        "a mixed bag: good news and bad news",
    ]
    for text in texts:
        for _ in range(50):
            assert -1.0 <= scorer.sentiment(text, progressive) <= 1.0


def test_keyword_sentiment_counts_distinct_hits():
    assert keyword_sentiment("good good good") == pytest.approx(0.1)
    assert keyword_sentiment("great success, no problem") == pytest.approx(0.1)
    assert keyword_sentiment("") == 0.0


def test_positive_word_never_lowers_score(progressive):
    base = Scorer(random.Random(42)).sentiment("the council met today", progressive)
    boosted = Scorer(random.Random(42)).sentiment("the council met today, a success", progressive)
    assert boosted >= base


def test_seeded_scorer_is_deterministic(progressive):
    first = Scorer(random.Random(5))
    second = Scorer(random.Random(5))
    scores_a = [first.sentiment("great plan", progressive) for _ in range(5)]
    scores_b = [second.sentiment("great plan", progressive) for _ in range(5)]
    assert scores_a == scores_b
