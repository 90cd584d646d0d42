from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "BRUBBLE_", "env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    cors_origins: str = Field(default="http://localhost:3000")

    user_agent: str = Field(default="Brubble/1.0")
    request_timeout_seconds: float = Field(default=5.0, gt=0.0)
    max_concurrent_requests: int = Field(default=16, ge=1)
    mock_fallback_enabled: bool = Field(default=True)
    random_seed: int | None = Field(default=None)

    # Provider credentials; an empty value disables the provider
    guardian_api_key: str = Field(default="")
    newsapi_api_key: str = Field(default="")
    youtube_api_key: str = Field(default="")
    twitter_bearer_token: str = Field(default="")
    google_api_key: str = Field(default="")
    google_search_engine_id: str = Field(default="")
    # Reddit search runs on the public JSON endpoint; OAuth app credentials are optional
    reddit_client_id: str = Field(default="")
    reddit_client_secret: str = Field(default="")

    guardian_base_url: str = Field(default="https://content.guardianapis.com/search")
    newsapi_base_url: str = Field(default="https://newsapi.org/v2")
    google_news_rss_url: str = Field(default="https://news.google.com/rss/search")
    youtube_base_url: str = Field(default="https://www.googleapis.com/youtube/v3")
    reddit_base_url: str = Field(default="https://www.reddit.com")
    twitter_base_url: str = Field(default="https://api.twitter.com/2")
    google_base_url: str = Field(default="https://www.googleapis.com/customsearch/v1")


settings = Settings()
