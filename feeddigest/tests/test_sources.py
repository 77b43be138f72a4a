"""Tests for feed source list loading."""

import pytest

from feeddigest.config import Settings
from feeddigest.services.sources import (
    load_feed_links,
    parse_feed_list,
    parse_feed_yaml,
    read_feeds,
)


class TestParseFeedList:
    def test_strips_comments_blanks_and_duplicates(self) -> None:
        text = """\
# Tech blogs
https://example.com/a.xml   # trailing comment
https://example.com/b.xml

   https://example.com/a.xml
#https://example.com/disabled.xml
"""
        assert parse_feed_list(text) == [
            "https://example.com/a.xml",
            "https://example.com/b.xml",
        ]

    def test_empty_text(self) -> None:
        assert parse_feed_list("") == []


class TestParseFeedYaml:
    def test_strings_and_mappings(self) -> None:
        text = """\
sources:
  - https://example.com/a.xml
  - name: "Feed B"
    url: "https://example.com/b.xml"
  - https://example.com/a.xml
"""
        assert parse_feed_yaml(text) == [
            "https://example.com/a.xml",
            "https://example.com/b.xml",
        ]

    def test_missing_sources_key_returns_empty(self) -> None:
        assert parse_feed_yaml("other_key: value\n") == []

    def test_skips_malformed_entries(self) -> None:
        text = """\
sources:
  - name: "No URL"
  - https://example.com/ok.xml
"""
        assert parse_feed_yaml(text) == ["https://example.com/ok.xml"]


class TestReadFeeds:
    def test_text_file(self, tmp_path) -> None:
        path = tmp_path / "feeds.txt"
        path.write_text("https://example.com/a.xml\n")
        assert read_feeds(path) == ["https://example.com/a.xml"]

    def test_yaml_file(self, tmp_path) -> None:
        path = tmp_path / "feeds.yaml"
        path.write_text("sources:\n  - url: https://example.com/a.xml\n")
        assert read_feeds(str(path)) == ["https://example.com/a.xml"]

    def test_file_not_found_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            read_feeds("/nonexistent/path/feeds.txt")


class TestLoadFeedLinks:
    def test_env_links_win(self, tmp_path) -> None:
        settings = Settings(
            feeds_file=str(tmp_path / "missing.txt"),
            feed_links=["https://example.com/env.xml", " https://example.com/env.xml "],
        )
        assert load_feed_links(settings) == ["https://example.com/env.xml"]

    def test_falls_back_to_file(self, mock_settings) -> None:
        assert load_feed_links() == [
            "https://example.com/atom.xml",
            "https://example.com/rss.xml",
        ]

    def test_feed_links_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("FEED_LINKS", '["https://example.com/x.xml"]')
        assert load_feed_links(Settings()) == ["https://example.com/x.xml"]
