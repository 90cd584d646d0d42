import httpx
import structlog

from brubble.config import settings

logger = structlog.get_logger()

_client: httpx.AsyncClient | None = None


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=timeout or settings.request_timeout_seconds,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


async def init_http_client() -> None:
    global _client
    _client = create_http_client()
    logger.info("http_client_initialized", timeout=settings.request_timeout_seconds)


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("http_client_closed")


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("HTTP client not initialized. Call init_http_client() first.")
    return _client
