from brubble.personas.schemas import Persona
from brubble.sources.providers.base import SourceAdapter, strip_html
from brubble.sources.providers.feeds import entry_summary, entry_timestamp, fetch_feed
from brubble.sources.schemas import Platform, SearchResult


class GoogleNewsAdapter(SourceAdapter):
    """Query-specific Google News RSS search; needs no credentials."""

    name = "google_news"
    platform = Platform.news

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        feed = await fetch_feed(
            self._client,
            self._settings.google_news_rss_url,
            self._settings.request_timeout_seconds,
            params={
                "q": self.hints.apply(query, persona),
                "hl": "en-US",
                "gl": "US",
                "ceid": "US:en",
            },
        )
        return [
            self._build_result(
                query,
                persona,
                title=entry.get("title") or "Untitled",
                url=entry.get("link", ""),
                snippet=strip_html(entry_summary(entry), 300),
                source="Google News",
                timestamp=entry_timestamp(entry),
            )
            for entry in feed.entries[: self.max_results]
        ]
