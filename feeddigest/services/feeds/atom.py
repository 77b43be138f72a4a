"""Atom (RFC 4287) document model.

Only the subset the digest needs is modeled::

    <feed>
      <title></title>
      <entry>
        <title></title>
        <link href=""/>+
        <updated>RFC 3339</updated>
        <summary></summary>?
      </entry>*
    </feed>
"""

import feedparser
from pydantic import BaseModel, ConfigDict

from feeddigest.models.blog import Blog, Post
from feeddigest.services.feeds.base import FeedFormat, build_blog, declared_summary
from feeddigest.services.feeds.dates import DateParseError, parse_rfc3339
from feeddigest.services.feeds.errors import DateError, ParseError


class AtomLink(BaseModel):
    model_config = ConfigDict(extra="ignore")

    href: str | None = None
    rel: str | None = None


class AtomEntry(BaseModel):
    """An ``<entry>`` element."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    links: list[AtomLink] = []
    summary: str | None = None
    updated: str | None = None

    def into_post(self) -> Post:
        if not self.title:
            raise ParseError("Entry has no title")
        # First declared link wins, regardless of rel
        if not self.links or not self.links[0].href:
            raise ParseError(f"Entry has no link: {self.title}")

        try:
            published_at = parse_rfc3339(self.updated or "")
        except DateParseError as e:
            raise DateError(str(e)) from e

        return Post(
            title=self.title,
            link=self.links[0].href,
            description=self.summary,
            published_at=published_at,
        )


class AtomFeed(BaseModel):
    """A ``<feed>`` element."""

    model_config = ConfigDict(extra="ignore")

    title: str
    entries: list[AtomEntry] | None = None

    def into_blog(self) -> Blog:
        return build_blog(self.title, self.entries)


class AtomFormat(FeedFormat):
    name = "atom"

    def matches(self, document: feedparser.FeedParserDict) -> bool:
        return (document.get("version") or "").startswith("atom")

    def build(self, document: feedparser.FeedParserDict) -> AtomFeed:
        entries = document.get("entries")
        return AtomFeed.model_validate(
            {
                "title": document.get("feed", {}).get("title"),
                "entries": None
                if entries is None
                else [dict(entry, summary=declared_summary(entry)) for entry in entries],
            }
        )
