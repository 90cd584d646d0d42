import random
from typing import Annotated

import httpx
from fastapi import Depends

from brubble.analysis.aggregator import ResultAggregator
from brubble.analysis.service import AnalysisService
from brubble.config import Settings, settings
from brubble.http_client import get_http_client
from brubble.personas.service import PersonaService
from brubble.scoring.service import Scorer
from brubble.sources.mock import MockResultGenerator
from brubble.sources.providers.base import SourceAdapter
from brubble.sources.providers.google_news import GoogleNewsAdapter
from brubble.sources.providers.google_search import GoogleSearchAdapter
from brubble.sources.providers.guardian import GuardianAdapter
from brubble.sources.providers.news import NewsAdapter
from brubble.sources.providers.newsapi import NewsAPIAdapter
from brubble.sources.providers.reddit import RedditAdapter
from brubble.sources.providers.rss import RSSAdapter
from brubble.sources.providers.twitter import TwitterAdapter
from brubble.sources.providers.youtube import YouTubeAdapter


def build_adapters(
    config: Settings,
    client: httpx.AsyncClient,
    scorer: Scorer,
    mock_generator: MockResultGenerator | None,
) -> list[SourceAdapter]:
    """The per-persona adapter set, primary news path first."""
    news_sources: list[SourceAdapter] = [
        RSSAdapter(config, client, scorer),
        GuardianAdapter(config, client, scorer),
        GoogleNewsAdapter(config, client, scorer),
        NewsAPIAdapter(config, client, scorer),
    ]
    return [
        NewsAdapter(config, client, scorer, news_sources, mock_generator),
        YouTubeAdapter(config, client, scorer),
        RedditAdapter(config, client, scorer),
        TwitterAdapter(config, client, scorer),
        GoogleSearchAdapter(config, client, scorer),
    ]


def build_analysis_service(config: Settings, client: httpx.AsyncClient) -> AnalysisService:
    rng = random.Random(config.random_seed)
    scorer = Scorer(rng)
    mock_generator = MockResultGenerator(rng) if config.mock_fallback_enabled else None
    aggregator = ResultAggregator(
        build_adapters(config, client, scorer, mock_generator),
        mock_generator,
        config.max_concurrent_requests,
    )
    return AnalysisService(aggregator)


def get_analysis_service() -> AnalysisService:
    return build_analysis_service(settings, get_http_client())


def get_persona_service() -> PersonaService:
    return PersonaService(settings)


AnalysisServiceDep = Annotated[AnalysisService, Depends(get_analysis_service)]
PersonaServiceDep = Annotated[PersonaService, Depends(get_persona_service)]
