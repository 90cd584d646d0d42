from brubble.analysis.aggregator import mean_sentiment
from brubble.analysis.schemas import ComparisonMetrics, PersonaResults
from brubble.sources.dedup import same_result
from brubble.sources.schemas import SearchResult

ECHO_AMPLIFICATION = 1.2
SOURCE_DIVERSITY_NORMALIZER = 10


def partition(
    results_a: list[SearchResult], results_b: list[SearchResult]
) -> tuple[list[SearchResult], list[SearchResult], list[SearchResult]]:
    """Split two result lists into (common, unique_to_a, unique_to_b).

    Each item in B can be matched by at most one item in A.
    """
    common: list[SearchResult] = []
    unique_to_a: list[SearchResult] = []
    remaining_b = list(results_b)

    for result in results_a:
        match = next((i for i, other in enumerate(remaining_b) if same_result(result, other)), None)
        if match is None:
            unique_to_a.append(result)
        else:
            common.append(result)
            del remaining_b[match]

    return common, unique_to_a, remaining_b


def compare(
    results_a: list[SearchResult],
    results_b: list[SearchResult],
    persona_a: str | None = None,
    persona_b: str | None = None,
) -> ComparisonMetrics:
    common, unique_to_a, unique_to_b = partition(results_a, results_b)

    total = len(results_a) + len(results_b)
    overlap = (2 * len(common) / total) * 100 if total else 0.0
    sources = {r.source for r in results_a} | {r.source for r in results_b}

    return ComparisonMetrics(
        persona_a=persona_a,
        persona_b=persona_b,
        echo_score=min(100.0, overlap * ECHO_AMPLIFICATION),
        overlap_percentage=overlap,
        unique_to_a=unique_to_a,
        unique_to_b=unique_to_b,
        common_results=common,
        sentiment_divergence=abs(mean_sentiment(results_a) - mean_sentiment(results_b)),
        source_diversity_score=len(sources) / SOURCE_DIVERSITY_NORMALIZER,
    )


def compare_consecutive(persona_results: list[PersonaResults]) -> list[ComparisonMetrics]:
    """Compare each persona with the next one in input order (not all pairs)."""
    return [
        compare(a.results, b.results, a.persona.id, b.persona.id)
        for a, b in zip(persona_results, persona_results[1:])
    ]
