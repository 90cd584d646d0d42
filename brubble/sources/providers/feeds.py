import asyncio
import calendar
from datetime import UTC, datetime

import feedparser
import httpx

from brubble.exceptions import ProviderError


async def fetch_feed(
    client: httpx.AsyncClient,
    url: str,
    timeout: float,
    params: dict | None = None,
) -> feedparser.FeedParserDict:
    """Download a feed with httpx (so the timeout applies) and parse it with feedparser."""
    response = await client.get(url, params=params, timeout=timeout)
    response.raise_for_status()
    feed = await asyncio.to_thread(feedparser.parse, response.content)
    if feed.bozo and not feed.entries:
        raise ProviderError(url, f"unparseable feed: {feed.get('bozo_exception')}")
    return feed


def entry_summary(entry: feedparser.FeedParserDict) -> str:
    return entry.get("summary") or entry.get("description") or ""


def entry_timestamp(entry: feedparser.FeedParserDict) -> datetime:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return datetime.now(UTC)
    return datetime.fromtimestamp(calendar.timegm(parsed), tz=UTC)
