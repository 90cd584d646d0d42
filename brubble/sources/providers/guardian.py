from brubble.exceptions import ProviderError
from brubble.personas.schemas import Persona
from brubble.sources.providers.base import SourceAdapter, parse_timestamp, strip_html
from brubble.sources.schemas import Platform, SearchResult


class GuardianAdapter(SourceAdapter):
    name = "guardian"
    platform = Platform.news

    def is_configured(self) -> bool:
        return bool(self._settings.guardian_api_key)

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        data = await self._get_json(
            self._settings.guardian_base_url,
            params={
                "q": self.hints.apply(query, persona),
                "api-key": self._settings.guardian_api_key,
                "page-size": str(self.max_results),
                "show-fields": "trailText,bodyText",
                "order-by": "relevance",
            },
        )
        body = data.get("response") or {}
        if body.get("status") != "ok":
            raise ProviderError(self.name, f"unexpected status {body.get('status')!r}")

        results = []
        for article in body.get("results") or []:
            fields = article.get("fields") or {}
            snippet = strip_html(fields.get("trailText")) or strip_html(fields.get("bodyText"), 300)
            results.append(
                self._build_result(
                    query,
                    persona,
                    title=article.get("webTitle", ""),
                    url=article.get("webUrl", ""),
                    snippet=snippet,
                    source="The Guardian",
                    timestamp=parse_timestamp(article.get("webPublicationDate")),
                )
            )
        return results
