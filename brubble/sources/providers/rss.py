import asyncio

import httpx
import structlog

from brubble.config import Settings
from brubble.exceptions import ProviderError
from brubble.personas.schemas import Persona, PersonaCategory, PoliticalLeaning
from brubble.scoring.service import Scorer
from brubble.sources.providers.base import SourceAdapter, strip_html
from brubble.sources.providers.feeds import entry_summary, entry_timestamp, fetch_feed
from brubble.sources.schemas import Platform, SearchResult

logger = structlog.get_logger()

RSS_FEEDS: dict[str, list[str]] = {
    "progressive": [
        "https://www.theguardian.com/us-news/rss",
        "https://www.npr.org/rss/rss.php?id=1001",
        "https://www.democracynow.org/democracynow.rss",
    ],
    "conservative": [
        "https://www.foxnews.com/rss",
        "https://www.wsj.com/xml/rss/3_7085.xml",
        "https://nypost.com/feed/",
    ],
    "centrist": [
        "https://rss.nytimes.com/services/xml/rss/nyt/HomePage.xml",
        "https://feeds.bbci.co.uk/news/rss.xml",
        "https://www.reuters.com/rssFeed/topNews",
    ],
    "general": [
        "https://news.google.com/rss",
        "https://www.theguardian.com/world/rss",
        "https://feeds.bbci.co.uk/news/world/rss.xml",
    ],
}

_PER_FEED_LIMIT = 5


def select_feeds(persona: Persona, feeds: dict[str, list[str]] = RSS_FEEDS) -> list[str]:
    """Pick the feed set for a persona; only political personas get a slanted set."""
    if persona.category != PersonaCategory.political:
        return feeds["general"]
    leaning = persona.attributes.political_leaning
    if leaning in (PoliticalLeaning.progressive, PoliticalLeaning.conservative):
        return feeds[leaning.value]
    return feeds["centrist"]


class RSSAdapter(SourceAdapter):
    name = "rss"
    platform = Platform.news
    max_results = None

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient,
        scorer: Scorer,
        feeds: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(settings, client, scorer)
        self._feeds = feeds or RSS_FEEDS

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        urls = select_feeds(persona, self._feeds)
        batches = await asyncio.gather(*(self._fetch_one(url, query, persona) for url in urls))
        return [result for batch in batches for result in batch]

    async def _fetch_one(self, feed_url: str, query: str, persona: Persona) -> list[SearchResult]:
        """Fetch one feed; a broken feed must not hide the others."""
        try:
            feed = await fetch_feed(self._client, feed_url, self._settings.request_timeout_seconds)
        except (httpx.HTTPError, ProviderError) as exc:
            logger.warning("rss_feed_failed", feed=feed_url, error=str(exc))
            return []

        source = feed.feed.get("title") or "RSS Feed"
        needle = query.lower()
        results: list[SearchResult] = []
        for entry in feed.entries:
            title = entry.get("title") or "Untitled"
            summary = strip_html(entry_summary(entry))
            if needle not in title.lower() and needle not in summary.lower():
                continue
            results.append(
                self._build_result(
                    query,
                    persona,
                    title=title,
                    url=entry.get("link", ""),
                    snippet=summary[:300],
                    source=source,
                    timestamp=entry_timestamp(entry),
                )
            )
            if len(results) >= _PER_FEED_LIMIT:
                break
        return results
