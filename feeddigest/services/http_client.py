"""Shared HTTP client utilities — reusable httpx client."""

import httpx

from feeddigest.config import get_settings

# Module-level shared client (created lazily, lives for the process lifetime)
_client: httpx.AsyncClient | None = None


def get_shared_client() -> httpx.AsyncClient:
    """Return a shared httpx.AsyncClient, creating it on first call."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(timeout=get_settings().request_timeout)
    return _client


def feed_headers() -> dict[str, str]:
    """Build request headers for fetching syndication feeds."""
    return {
        "User-Agent": get_settings().user_agent,
        "Accept": "application/atom+xml, application/rss+xml, application/xml, text/xml",
    }


async def close_shared_client() -> None:
    """Close the shared client if one was created."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None
