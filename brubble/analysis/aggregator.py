import asyncio

import structlog

from brubble.analysis.schemas import PersonaResults, SummaryStats
from brubble.personas.schemas import Persona
from brubble.sources.dedup import dedupe_results, rank_by_relevance
from brubble.sources.mock import MockResultGenerator
from brubble.sources.providers.base import SourceAdapter
from brubble.sources.schemas import SearchResult

logger = structlog.get_logger()

_TOP_SOURCES = 5


def mean_sentiment(results: list[SearchResult]) -> float:
    """Mean sentiment with missing scores counted as 0; 0 for an empty list."""
    if not results:
        return 0.0
    return sum(r.sentiment or 0.0 for r in results) / len(results)


def summarize(results: list[SearchResult]) -> SummaryStats:
    sources = list(dict.fromkeys(r.source for r in results))
    return SummaryStats(
        total_results=len(results),
        unique_sources=len(sources),
        avg_sentiment=mean_sentiment(results),
        top_sources=sources[:_TOP_SOURCES],
    )


class ResultAggregator:
    """Fans a query out to every adapter for each persona and merges the results."""

    def __init__(
        self,
        adapters: list[SourceAdapter],
        mock_generator: MockResultGenerator | None = None,
        max_concurrency: int = 16,
    ) -> None:
        self._adapters = adapters
        self._mock = mock_generator
        self._semaphore = asyncio.Semaphore(max_concurrency)

    async def collect_all(self, query: str, personas: list[Persona]) -> list[PersonaResults]:
        outcomes = await asyncio.gather(
            *(self.collect(query, persona) for persona in personas),
            return_exceptions=True,
        )

        persona_results = []
        for persona, outcome in zip(personas, outcomes, strict=True):
            if isinstance(outcome, Exception):
                logger.error("persona_collect_failed", persona=persona.id, error=str(outcome))
                outcome = self._fallback(query, persona)
            persona_results.append(outcome)
        return persona_results

    async def collect(self, query: str, persona: Persona) -> PersonaResults:
        outcomes = await asyncio.gather(
            *(self._run_adapter(adapter, query, persona) for adapter in self._adapters),
            return_exceptions=True,
        )

        combined: list[SearchResult] = []
        for adapter, outcome in zip(self._adapters, outcomes, strict=True):
            if isinstance(outcome, Exception):
                logger.warning(
                    "adapter_failed", source=adapter.name, persona=persona.id, error=str(outcome)
                )
                continue
            combined.extend(outcome)

        results = rank_by_relevance(dedupe_results(combined))
        if not results:
            return self._fallback(query, persona)

        logger.info(
            "persona_collected", persona=persona.id, raw=len(combined), deduplicated=len(results)
        )
        return PersonaResults(
            persona=persona,
            results=results,
            summary_stats=summarize(results),
            used_mock_fallback=any(r.is_mock for r in results),
        )

    async def _run_adapter(
        self, adapter: SourceAdapter, query: str, persona: Persona
    ) -> list[SearchResult]:
        async with self._semaphore:
            return await adapter.fetch(query, persona)

    def _fallback(self, query: str, persona: Persona) -> PersonaResults:
        """Results for a persona whose live sources produced nothing."""
        results: list[SearchResult] = []
        if self._mock is not None:
            logger.info("persona_mock_fallback", persona=persona.id, query=query)
            results = rank_by_relevance(self._mock.generate(query, persona))
        else:
            logger.warning("persona_results_empty", persona=persona.id, query=query)
        return PersonaResults(
            persona=persona,
            results=results,
            summary_stats=summarize(results),
            used_mock_fallback=bool(results),
        )
