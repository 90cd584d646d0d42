import pytest
from conftest import make_result

from brubble.analysis.comparator import compare, compare_consecutive, partition
from brubble.analysis.schemas import PersonaResults, SummaryStats


def _titles(results):
    return sorted(r.title for r in results)


def test_empty_inputs_yield_zero_ratios():
    metrics = compare([], [])
    assert metrics.overlap_percentage == 0.0
    assert metrics.echo_score == 0.0
    assert metrics.sentiment_divergence == 0.0
    assert metrics.source_diversity_score == 0.0
    assert metrics.common_results == []


def test_one_sided_empty_input():
    a = [make_result("Only A", sentiment=0.5)]
    metrics = compare(a, [])
    assert metrics.overlap_percentage == 0.0
    assert metrics.unique_to_a == a
    assert metrics.sentiment_divergence == 0.5


def test_matches_on_url_or_case_insensitive_title():
    a = [
        make_result("Shared by url", url="https://x.org/1"),
        make_result("Shared Title", url="https://x.org/2"),
        make_result("A only", url="https://x.org/3"),
    ]
    b = [
        make_result("Different title", url="https://x.org/1"),
        make_result("shared title", url="https://y.org/2"),
        make_result("B only", url="https://y.org/3"),
    ]
    common, unique_a, unique_b = partition(a, b)
    assert _titles(common) == ["Shared Title", "Shared by url"]
    assert _titles(unique_a) == ["A only"]
    assert _titles(unique_b) == ["B only"]


def test_each_b_item_matches_at_most_once():
    a = [make_result("Dup", url="https://x.org/d"), make_result("Dup", url="https://x.org/d")]
    b = [make_result("Dup", url="https://x.org/d")]
    metrics = compare(a, b)
    assert len(metrics.common_results) == 1
    assert len(metrics.unique_to_a) == 1
    assert metrics.unique_to_b == []


def test_partition_is_complete_and_symmetric():
    a = [make_result(t) for t in ("One", "Two", "Three", "Four")]
    b = [make_result(t) for t in ("Three", "Four", "Five")]

    ab = compare(a, b)
    ba = compare(b, a)

    assert len(ab.common_results) + len(ab.unique_to_a) == len(a)
    assert len(ab.common_results) + len(ab.unique_to_b) == len(b)
    assert _titles(ab.common_results) == _titles(ba.common_results)
    assert ab.overlap_percentage == ba.overlap_percentage
    assert _titles(ab.unique_to_a) == _titles(ba.unique_to_b)
    assert _titles(ab.unique_to_b) == _titles(ba.unique_to_a)


def test_overlap_and_echo_score():
    a = [make_result(t) for t in ("One", "Two", "Three", "Four")]
    b = [make_result(t) for t in ("Three", "Four", "Five", "Six")]
    metrics = compare(a, b)
    assert metrics.overlap_percentage == 50.0
    assert metrics.echo_score == pytest.approx(60.0)


def test_echo_score_is_capped():
    a = [make_result(t) for t in ("One", "Two")]
    metrics = compare(a, list(a))
    assert metrics.overlap_percentage == 100.0
    assert metrics.echo_score == 100.0


def test_sentiment_divergence_uses_zero_for_missing():
    a = [make_result("One", sentiment=0.8), make_result("Two", sentiment=None)]
    b = [make_result("Three", sentiment=-0.2)]
    assert compare(a, b).sentiment_divergence == pytest.approx(0.6)


def test_source_diversity_is_not_clamped():
    a = [make_result(f"A{i}", source=f"Outlet {i}") for i in range(8)]
    b = [make_result(f"B{i}", source=f"Outlet {i + 4}") for i in range(8)]
    metrics = compare(a, b)
    assert metrics.source_diversity_score == 1.2


def test_consecutive_pairs_only(progressive, conservative, gen_z):
    stats = SummaryStats(total_results=0, unique_sources=0, avg_sentiment=0.0, top_sources=[])
    persona_results = [
        PersonaResults(persona=p, results=[], summary_stats=stats)
        for p in (progressive, conservative, gen_z)
    ]
    metrics = compare_consecutive(persona_results)
    assert [(m.persona_a, m.persona_b) for m in metrics] == [
        ("progressive", "conservative"),
        ("conservative", "gen_z"),
    ]
