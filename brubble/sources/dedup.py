from collections.abc import Iterable

from brubble.sources.schemas import SearchResult


def same_result(a: SearchResult, b: SearchResult) -> bool:
    """Two results are the same item when URLs match or titles match case-insensitively."""
    return a.url == b.url or a.title.lower() == b.title.lower()


def dedupe_results(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Drop repeats, keeping the first occurrence of each URL or title."""
    seen_urls: set[str] = set()
    seen_titles: set[str] = set()
    unique: list[SearchResult] = []
    for result in results:
        title = result.title.lower()
        if result.url in seen_urls or title in seen_titles:
            continue
        seen_urls.add(result.url)
        seen_titles.add(title)
        unique.append(result)
    return unique


def rank_by_relevance(results: Iterable[SearchResult]) -> list[SearchResult]:
    # sorted() is stable, so equal scores keep their incoming order
    return sorted(results, key=lambda r: r.relevance_score or 0.0, reverse=True)
