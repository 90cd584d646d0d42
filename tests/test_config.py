from brubble.config import Settings


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("BRUBBLE_REDDIT_CLIENT_ID", "reddit-id")
    monkeypatch.setenv("BRUBBLE_REDDIT_CLIENT_SECRET", "reddit-secret")
    monkeypatch.setenv("BRUBBLE_MAX_CONCURRENT_REQUESTS", "4")

    settings = Settings(_env_file=None)

    assert settings.reddit_client_id == "reddit-id"
    assert settings.reddit_client_secret == "reddit-secret"
    assert settings.max_concurrent_requests == 4


def test_credentials_default_to_empty(monkeypatch):
    monkeypatch.delenv("BRUBBLE_GUARDIAN_API_KEY", raising=False)
    monkeypatch.delenv("BRUBBLE_REDDIT_CLIENT_ID", raising=False)

    settings = Settings(_env_file=None)

    assert settings.guardian_api_key == ""
    assert settings.reddit_client_id == ""
    assert settings.request_timeout_seconds == 5.0
