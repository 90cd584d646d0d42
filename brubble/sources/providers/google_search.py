from datetime import UTC, datetime

from brubble.personas.schemas import Persona
from brubble.sources.providers.base import SourceAdapter
from brubble.sources.query_hints import GOOGLE_HINTS
from brubble.sources.schemas import Platform, SearchResult


class GoogleSearchAdapter(SourceAdapter):
    """Google Custom Search JSON API. Results carry no publish date."""

    name = "google"
    platform = Platform.google
    hints = GOOGLE_HINTS

    def is_configured(self) -> bool:
        return bool(self._settings.google_api_key and self._settings.google_search_engine_id)

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        data = await self._get_json(
            self._settings.google_base_url,
            params={
                "key": self._settings.google_api_key,
                "cx": self._settings.google_search_engine_id,
                "q": self.hints.apply(query, persona),
                "num": str(self.max_results),
            },
            headers={"Accept": "application/json"},
        )

        now = datetime.now(UTC)
        return [
            self._build_result(
                query,
                persona,
                title=item.get("title", ""),
                url=item.get("link", ""),
                snippet=item.get("snippet") or "",
                source=item.get("displayLink") or "Google",
                timestamp=now,
            )
            for item in data.get("items") or []
        ]
