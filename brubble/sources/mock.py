import random
from datetime import UTC, datetime, timedelta

from brubble.personas.schemas import Persona
from brubble.sources.schemas import Platform, SearchResult

MOCK_SOURCES = [
    "New York Times",
    "Washington Post",
    "BBC News",
    "Reuters",
    "CNN",
    "Fox News",
    "NPR",
    "The Guardian",
    "Wall Street Journal",
    "Associated Press",
]

_MIN_RESULTS = 8
_MAX_RESULTS = 12
_MAX_AGE = timedelta(days=7)


class MockResultGenerator:
    """Synthetic results used when every live source comes back empty.

    Every result is marked ``is_mock=True`` so callers can tell it from live data.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(
        self, query: str, persona: Persona, now: datetime | None = None
    ) -> list[SearchResult]:
        now = now or datetime.now(UTC)
        count = self._rng.randint(_MIN_RESULTS, _MAX_RESULTS)
        return [self._build(query, persona, i, now) for i in range(count)]

    def _build(self, query: str, persona: Persona, index: int, now: datetime) -> SearchResult:
        age = timedelta(seconds=self._rng.uniform(0, _MAX_AGE.total_seconds()))
        return SearchResult(
            title=f"{query} - {persona.name} perspective {index + 1}",
            url=f"https://example.com/article-{persona.id}-{index}",
            snippet=(
                f"This article discusses {query} from a {persona.name} viewpoint. "
                "It covers various aspects and perspectives related to the topic, "
                "providing insights that may be particularly relevant to this demographic."
            ),
            source=self._rng.choice(MOCK_SOURCES),
            timestamp=now - age,
            sentiment=self._rng.uniform(-1.0, 1.0),
            relevance_score=self._rng.uniform(0.7, 1.0),
            platform=Platform.news,
            is_mock=True,
        )
