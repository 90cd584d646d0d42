from brubble.personas.schemas import Persona
from brubble.sources.providers.base import SourceAdapter, parse_timestamp
from brubble.sources.query_hints import TWITTER_HINTS
from brubble.sources.schemas import Platform, SearchResult

_TITLE_LENGTH = 100


class TwitterAdapter(SourceAdapter):
    """Twitter/X API v2 recent search."""

    name = "twitter"
    platform = Platform.twitter
    hints = TWITTER_HINTS

    def is_configured(self) -> bool:
        return bool(self._settings.twitter_bearer_token)

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        data = await self._get_json(
            f"{self._settings.twitter_base_url}/tweets/search/recent",
            params={
                "query": self.hints.apply(query, persona),
                "max_results": str(self.max_results),
                "tweet.fields": "created_at,public_metrics,author_id",
                "user.fields": "username,name",
                "expansions": "author_id",
            },
            headers={"Authorization": f"Bearer {self._settings.twitter_bearer_token}"},
        )

        users = {u["id"]: u for u in (data.get("includes") or {}).get("users") or [] if "id" in u}
        results = []
        for tweet in data.get("data") or []:
            text = tweet.get("text", "")
            author = users.get(tweet.get("author_id"))
            metrics = tweet.get("public_metrics")
            engagement = (
                f"{metrics.get('like_count', 0)} likes, {metrics.get('retweet_count', 0)} retweets"
                if metrics
                else ""
            )
            title = text[:_TITLE_LENGTH] + ("..." if len(text) > _TITLE_LENGTH else "")
            results.append(
                self._build_result(
                    query,
                    persona,
                    title=title,
                    url=f"https://twitter.com/i/web/status/{tweet.get('id', '')}",
                    snippet=f"{text} | {engagement}" if engagement else text,
                    source=f"@{author['username']}" if author else "Twitter User",
                    timestamp=parse_timestamp(tweet.get("created_at")),
                    scored_text=text,
                )
            )
        return results
