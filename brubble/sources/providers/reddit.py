from brubble.personas.schemas import Persona, PersonaCategory
from brubble.sources.providers.base import SourceAdapter, parse_timestamp
from brubble.sources.query_hints import REDDIT_HINTS
from brubble.sources.schemas import Platform, SearchResult


def _sort_order(persona: Persona) -> str:
    if persona.category == PersonaCategory.generational and persona.attributes.age == "18-25":
        return "hot"
    return "relevance"


class RedditAdapter(SourceAdapter):
    """Reddit's public JSON search; no credentials required."""

    name = "reddit"
    platform = Platform.reddit
    hints = REDDIT_HINTS

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        base_url = self._settings.reddit_base_url
        data = await self._get_json(
            f"{base_url}/search.json",
            params={
                "q": self.hints.apply(query, persona),
                "limit": str(self.max_results),
                "sort": _sort_order(persona),
                "t": "all",
                "type": "link,self",
            },
            headers={"Accept": "application/json"},
        )

        results = []
        for child in (data.get("data") or {}).get("children") or []:
            post = child.get("data") or {}
            url = post.get("url") or ""
            if not url.startswith("http"):
                url = f"{base_url}{post.get('permalink', '')}"
            selftext = post.get("selftext") or ""
            subreddit = post.get("subreddit", "")
            snippet = selftext[:300] or (
                f"Posted in r/{subreddit} by u/{post.get('author', '')}. "
                f"{post.get('score', 0)} upvotes, {post.get('num_comments', 0)} comments."
            )
            results.append(
                self._build_result(
                    query,
                    persona,
                    title=post.get("title", ""),
                    url=url,
                    snippet=snippet,
                    source=f"r/{subreddit}",
                    timestamp=parse_timestamp(post.get("created_utc")),
                    scored_text=f"{post.get('title', '')} {selftext}",
                )
            )
        return results
