from datetime import UTC, datetime

import pytest

from brubble.config import Settings
from brubble.personas.schemas import Persona, PersonaAttributes, PersonaCategory, PoliticalLeaning
from brubble.sources.schemas import Platform, SearchResult


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        random_seed=7,
        guardian_api_key="guardian-key",
        newsapi_api_key="newsapi-key",
        youtube_api_key="youtube-key",
        twitter_bearer_token="twitter-token",
        google_api_key="google-key",
        google_search_engine_id="engine-id",
    )


@pytest.fixture
def progressive() -> Persona:
    return Persona(
        id="progressive",
        name="Progressive",
        category=PersonaCategory.political,
        attributes=PersonaAttributes(political_leaning=PoliticalLeaning.progressive),
        color="#3B82F6",
    )


@pytest.fixture
def conservative() -> Persona:
    return Persona(
        id="conservative",
        name="Conservative",
        category=PersonaCategory.political,
        attributes=PersonaAttributes(political_leaning=PoliticalLeaning.conservative),
        color="#EF4444",
    )


@pytest.fixture
def gen_z() -> Persona:
    return Persona(
        id="gen_z",
        name="Gen Z",
        category=PersonaCategory.generational,
        attributes=PersonaAttributes(age="18-25"),
        color="#10B981",
    )


@pytest.fixture
def european() -> Persona:
    return Persona(
        id="european",
        name="European",
        category=PersonaCategory.geographic,
        attributes=PersonaAttributes(location="Europe"),
        color="#06B6D4",
    )


def make_result(
    title: str,
    url: str | None = None,
    source: str = "Reuters",
    sentiment: float | None = 0.0,
    relevance: float | None = 0.5,
    platform: Platform = Platform.news,
    timestamp: datetime | None = None,
    snippet: str = "",
) -> SearchResult:
    return SearchResult(
        title=title,
        url=url or f"https://example.org/{title.lower().replace(' ', '-')}",
        snippet=snippet,
        source=source,
        timestamp=timestamp or datetime(2026, 10, 1, 12, tzinfo=UTC),
        sentiment=sentiment,
        relevance_score=relevance,
        platform=platform,
    )
