from brubble.personas.schemas import Persona
from brubble.sources.providers.base import SourceAdapter, parse_timestamp
from brubble.sources.query_hints import YOUTUBE_HINTS
from brubble.sources.schemas import Platform, SearchResult


class YouTubeAdapter(SourceAdapter):
    name = "youtube"
    platform = Platform.youtube
    hints = YOUTUBE_HINTS

    def is_configured(self) -> bool:
        return bool(self._settings.youtube_api_key)

    async def _fetch(self, query: str, persona: Persona) -> list[SearchResult]:
        data = await self._get_json(
            f"{self._settings.youtube_base_url}/search",
            params={
                "part": "snippet",
                "q": self.hints.apply(query, persona),
                "key": self._settings.youtube_api_key,
                "maxResults": str(self.max_results),
                "type": "video",
                "order": "relevance",
            },
            headers={"Accept": "application/json"},
        )

        results = []
        for video in data.get("items") or []:
            video_id = (video.get("id") or {}).get("videoId")
            if not video_id:
                continue
            snippet = video.get("snippet") or {}
            results.append(
                self._build_result(
                    query,
                    persona,
                    title=snippet.get("title", ""),
                    url=f"https://www.youtube.com/watch?v={video_id}",
                    snippet=snippet.get("description") or "",
                    source=snippet.get("channelTitle") or "YouTube",
                    timestamp=parse_timestamp(snippet.get("publishedAt")),
                )
            )
        return results
