import asyncio

import httpx
import structlog

from brubble.config import Settings
from brubble.personas.schemas import Persona
from brubble.scoring.service import Scorer
from brubble.sources.dedup import dedupe_results, rank_by_relevance
from brubble.sources.mock import MockResultGenerator
from brubble.sources.providers.base import SourceAdapter
from brubble.sources.schemas import Platform, SearchResult

logger = structlog.get_logger()


class NewsAdapter(SourceAdapter):
    """Primary news path: combines the news feeds and APIs into one ranked list.

    Unlike the other adapters it falls back to mock results when every feed and
    API comes back empty.
    """

    name = "news"
    platform = Platform.news
    max_results = None

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient,
        scorer: Scorer,
        sources: list[SourceAdapter],
        mock_generator: MockResultGenerator | None = None,
    ) -> None:
        super().__init__(settings, client, scorer)
        self._sources = sources
        self._mock = mock_generator

    async def fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        results = await super().fetch(query, persona)
        if results or self._mock is None:
            return results
        logger.info("news_mock_fallback", persona=persona.id, query=query)
        return self._mock.generate(query, persona)

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        batches = await asyncio.gather(*(s.fetch(query, persona) for s in self._sources))
        combined = [result for batch in batches for result in batch]
        if not combined:
            logger.info("news_sources_empty", persona=persona.id, query=query)
        return rank_by_relevance(dedupe_results(combined))
