"""Conversion contracts shared by every feed dialect.

A dialect supplies three things: an entry model with ``into_post``, a document
model with ``into_blog``, and a ``FeedFormat`` that builds the document model
from a ``feedparser`` result. The entry-to-blog aggregation lives here so it is
written once.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

import feedparser
from pydantic import ValidationError

from feeddigest.models.blog import Blog, Post
from feeddigest.services.feeds.errors import DeserializeError, ParseError, ParserError

logger = logging.getLogger(__name__)


class FeedEntry(Protocol):
    """A dialect-specific entry that can become a canonical ``Post``."""

    def into_post(self) -> Post: ...


class FeedDocument(Protocol):
    """A dialect-specific document that can become a canonical ``Blog``."""

    def into_blog(self) -> Blog: ...


class FeedFormat(ABC):
    """One registered feed dialect."""

    name: str = ""

    @abstractmethod
    def matches(self, document: feedparser.FeedParserDict) -> bool:
        """Return True if ``document`` was read as this dialect."""

    @abstractmethod
    def build(self, document: feedparser.FeedParserDict) -> FeedDocument:
        """Validate ``document`` into this dialect's typed model."""

    def parse(self, document: feedparser.FeedParserDict) -> FeedDocument:
        """Deserialize ``document`` into this dialect's model.

        Raises:
            DeserializeError: If the dialect does not match or required
                document fields are missing.
        """
        if not self.matches(document):
            version = document.get("version") or "unknown"
            raise DeserializeError(f"Not an {self.name} document (detected: {version})")
        try:
            return self.build(document)
        except ValidationError as e:
            raise DeserializeError(f"Invalid {self.name} document: {e}") from e


def declared_summary(entry: Mapping[str, Any]) -> str | None:
    """Return the entry's own summary/description, if it declared one.

    feedparser copies ``<content>`` (or ``<content:encoded>``) into
    ``summary`` when an entry has no summary element. Only a summary element
    sets ``summary_detail``, so a copied value is recognized and dropped.
    """
    summary = entry.get("summary")
    if summary is None or "summary_detail" in entry:
        return summary
    content = entry.get("content") or []
    if content and content[0].get("value") == summary:
        return None
    return summary


def build_blog(title: str, entries: Iterable[FeedEntry] | None) -> Blog:
    """Convert ``entries`` into posts and wrap them in a ``Blog``.

    Entries that fail conversion are logged and dropped; one broken entry
    never invalidates the feed.

    Raises:
        ParseError: If no entry survives conversion.
    """
    posts: list[Post] = []
    for entry in entries or ():
        try:
            posts.append(entry.into_post())
        except ParserError as e:
            logger.warning("Skipping entry in %s: %s", title, e)

    if not posts:
        raise ParseError(f"Empty feed: {title}")

    return Blog(title=title, posts=posts)
