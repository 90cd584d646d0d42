from brubble.exceptions import ProviderError
from brubble.personas.schemas import Persona
from brubble.sources.providers.base import SourceAdapter, parse_timestamp, strip_html
from brubble.sources.query_hints import NEWSAPI_HINTS
from brubble.sources.schemas import Platform, SearchResult


class NewsAPIAdapter(SourceAdapter):
    """Generic news search through NewsAPI's ``/everything`` endpoint."""

    name = "newsapi"
    platform = Platform.news
    hints = NEWSAPI_HINTS

    def is_configured(self) -> bool:
        return bool(self._settings.newsapi_api_key)

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        data = await self._get_json(
            f"{self._settings.newsapi_base_url}/everything",
            params={
                "q": self.hints.apply(query, persona),
                "pageSize": str(self.max_results),
                "language": "en",
                "sortBy": "relevancy",
            },
            headers={"X-Api-Key": self._settings.newsapi_api_key},
        )
        if data.get("status") != "ok":
            raise ProviderError(self.name, data.get("message") or "unexpected response")

        results = []
        for article in data.get("articles") or []:
            title = article.get("title")
            url = article.get("url")
            if not title or not url:
                continue
            source = (article.get("source") or {}).get("name") or "NewsAPI"
            results.append(
                self._build_result(
                    query,
                    persona,
                    title=title,
                    url=url,
                    snippet=strip_html(article.get("description"), 300),
                    source=source,
                    timestamp=parse_timestamp(article.get("publishedAt")),
                )
            )
        return results
