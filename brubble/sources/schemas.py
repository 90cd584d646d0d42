from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Platform(StrEnum):
    news = "news"
    youtube = "youtube"
    reddit = "reddit"
    twitter = "twitter"
    google = "google"
    bing = "bing"
    duckduckgo = "duckduckgo"


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    snippet: str = ""
    source: str  # human-readable outlet or channel name
    timestamp: datetime | None = None
    sentiment: float | None = Field(default=None, ge=-1.0, le=1.0)
    relevance_score: float | None = Field(default=None, ge=0.0, le=1.0)
    platform: Platform
    is_mock: bool = False  # fabricated by the fallback generator

    @field_validator("timestamp")
    @classmethod
    def _ensure_aware(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
