"""Shared fixtures for feed-digest tests."""

import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from feeddigest.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import feeddigest.services.http_client as http_mod

    http_mod._client = None


@pytest.fixture
def mock_settings(monkeypatch, tmp_path):
    """Provide a Settings object with safe test defaults."""
    from feeddigest.config import Settings, get_settings

    feeds_file = tmp_path / "feeds.txt"
    feeds_file.write_text("https://example.com/atom.xml\nhttps://example.com/rss.xml\n")

    test_settings = Settings(
        feeds_file=str(feeds_file),
        feed_links=[],
        days=7,
        request_timeout=5.0,
        user_agent="FeedDigest-Test/1.0",
        debug=False,
    )
    get_settings.cache_clear()
    monkeypatch.setattr("feeddigest.config.get_settings", lambda: test_settings)
    for module in (
        "feeddigest.services.http_client",
        "feeddigest.services.sources",
        "feeddigest.services.timing",
        "feeddigest.routers.digest",
        "feeddigest.main",
    ):
        monkeypatch.setattr(f"{module}.get_settings", lambda: test_settings)
    return test_settings


@pytest.fixture
def atom_feed() -> str:
    return """\
<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example</title>
  <link href="https://example.com"/>
  <updated>2024-01-02T00:00:00Z</updated>
  <entry>
    <title>First Post</title>
    <link href="https://example.com/first"/>
    <id>urn:uuid:first</id>
    <updated>2024-01-01T00:00:00Z</updated>
    <summary>Summary of the first post.</summary>
  </entry>
  <entry>
    <title>Second Post</title>
    <link href="https://example.com/second"/>
    <id>urn:uuid:second</id>
    <updated>2024-01-02T09:30:00+02:00</updated>
  </entry>
</feed>"""


@pytest.fixture
def rss_feed() -> str:
    return """\
<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Test Feed</title>
    <link>https://example.com</link>
    <description>An RSS test feed</description>
    <item>
      <title>RSS Article One</title>
      <link>https://example.com/rss-1</link>
      <description>First RSS article.</description>
      <pubDate>Sat, 15 Feb 2026 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>RSS Article Two</title>
      <link>https://example.com/rss-2</link>
      <description>Second RSS article.</description>
      <pubDate>Sat, 15 Feb 2026 09:00:00 +0100</pubDate>
    </item>
  </channel>
</rss>"""
