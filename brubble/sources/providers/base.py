import re
from abc import ABC, abstractmethod
from datetime import UTC, datetime

import httpx
import structlog

from brubble.config import Settings
from brubble.personas.schemas import Persona
from brubble.scoring.service import Scorer
from brubble.sources.query_hints import NO_HINTS, QueryHints
from brubble.sources.schemas import Platform, SearchResult

logger = structlog.get_logger()

_TAG_RE = re.compile(r"<[^>]+>")


def strip_html(text: str | None, limit: int | None = None) -> str:
    cleaned = _TAG_RE.sub("", text or "").strip()
    return cleaned[:limit] if limit else cleaned


def parse_timestamp(value: str | int | float | None) -> datetime:
    """Parse an ISO-8601 string or a unix epoch; fall back to now."""
    if value is None or value == "":
        return datetime.now(UTC)
    try:
        if isinstance(value, int | float):
            return datetime.fromtimestamp(value, tz=UTC)
        parsed = datetime.fromisoformat(value)
    except (ValueError, OverflowError, OSError):
        return datetime.now(UTC)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


class SourceAdapter(ABC):
    """A single external provider, mapped onto ``SearchResult``.

    ``fetch`` never raises: missing credentials and provider failures both
    degrade to an empty list.
    """

    name: str
    platform: Platform
    max_results: int | None = 10
    hints: QueryHints = NO_HINTS

    def __init__(self, settings: Settings, client: httpx.AsyncClient, scorer: Scorer) -> None:
        self._settings = settings
        self._client = client
        self._scorer = scorer

    def is_configured(self) -> bool:
        return True

    async def fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        if not self.is_configured():
            logger.info("source_not_configured", source=self.name)
            return []

        try:
            results = await self._fetch(query, persona)
        except Exception as exc:
            logger.warning(
                "source_fetch_failed", source=self.name, persona=persona.id, error=str(exc)
            )
            return []

        logger.debug("source_fetched", source=self.name, persona=persona.id, count=len(results))
        return results[: self.max_results]

    @abstractmethod
    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]: ...

    async def _get_json(
        self,
        url: str,
        params: dict | None = None,
        headers: dict | None = None,
    ) -> dict:
        response = await self._client.get(
            url,
            params=params,
            headers=headers,
            timeout=self._settings.request_timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    def _build_result(
        self,
        query: str,
        persona: Persona,
        *,
        title: str,
        url: str,
        snippet: str,
        source: str,
        timestamp: datetime | None,
        scored_text: str | None = None,
    ) -> SearchResult:
        text = scored_text if scored_text is not None else f"{title} {snippet}"
        return SearchResult(
            title=title,
            url=url,
            snippet=snippet,
            source=source,
            timestamp=timestamp or datetime.now(UTC),
            sentiment=self._scorer.sentiment(text, persona),
            relevance_score=self._scorer.relevance(text, query),
            platform=self.platform,
        )
