"""RSS 0.9x / 2.0 document model.

Only the subset the digest needs is modeled::

    <rss>
      <channel>
        <title></title>
        <item>
          <title></title>
          <link></link>
          <description></description>?
          <pubDate>RFC 822</pubDate>
        </item>*
      </channel>
    </rss>

RDF-based RSS 0.90 and 1.0 are a different schema and are not matched.
"""

import feedparser
from pydantic import BaseModel, ConfigDict, Field

from feeddigest.models.blog import Blog, Post
from feeddigest.services.feeds.base import FeedFormat, build_blog, declared_summary
from feeddigest.services.feeds.dates import DateParseError, parse_rfc822
from feeddigest.services.feeds.errors import DateError, ParseError

# feedparser version strings for the RDF family
_RDF_VERSIONS = frozenset({"rss090", "rss10"})


class RssItem(BaseModel):
    """An ``<item>`` element.

    feedparser reports ``<description>`` as ``summary`` and ``<pubDate>`` as
    ``published``; the aliases map those keys back onto RSS names.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = None
    link: str | None = None
    description: str | None = Field(default=None, alias="summary")
    pub_date: str | None = Field(default=None, alias="published")

    def into_post(self) -> Post:
        if not self.title:
            raise ParseError("Entry has no title")
        if not self.link:
            raise ParseError(f"Entry has no link: {self.title}")

        try:
            published_at = parse_rfc822(self.pub_date or "")
        except DateParseError as e:
            raise DateError(str(e)) from e

        return Post(
            title=self.title,
            link=self.link,
            description=self.description,
            published_at=published_at,
        )


class RssChannel(BaseModel):
    """A ``<channel>`` element."""

    model_config = ConfigDict(extra="ignore")

    title: str
    items: list[RssItem] | None = None

    def into_blog(self) -> Blog:
        return build_blog(self.title, self.items)


class RssFormat(FeedFormat):
    name = "rss"

    def matches(self, document: feedparser.FeedParserDict) -> bool:
        version = document.get("version") or ""
        return version.startswith("rss") and version not in _RDF_VERSIONS

    def build(self, document: feedparser.FeedParserDict) -> RssChannel:
        items = document.get("entries")
        return RssChannel.model_validate(
            {
                "title": document.get("feed", {}).get("title"),
                "items": None
                if items is None
                else [
                    dict(item, summary=declared_summary(item), link=_declared_link(item))
                    for item in items
                ],
            }
        )


def _declared_link(item: feedparser.FeedParserDict) -> str | None:
    """Return the item's ``<link>``, ignoring a permalink ``<guid>``.

    feedparser fills ``link`` from ``<guid isPermaLink="true">`` when no
    ``<link>`` precedes it; only a real ``<link>`` adds an alternate entry
    to ``links``.
    """
    if item.get("guidislink") and not any(
        link.get("rel") == "alternate" for link in item.get("links", [])
    ):
        return None
    return item.get("link")
