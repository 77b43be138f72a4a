"""Feed normalization: Atom and RSS documents converted to ``Blog``/``Post``."""

from feeddigest.services.feeds.atom import AtomEntry, AtomFeed, AtomFormat, AtomLink
from feeddigest.services.feeds.base import FeedFormat, build_blog, declared_summary
from feeddigest.services.feeds.dates import DateParseError, parse_rfc822, parse_rfc3339
from feeddigest.services.feeds.dispatcher import (
    DEFAULT_FORMATS,
    FeedDispatcher,
    parse_web_feed,
    read_document,
)
from feeddigest.services.feeds.errors import (
    DateError,
    DeserializeError,
    ParseError,
    ParserError,
)
from feeddigest.services.feeds.rss import RssChannel, RssFormat, RssItem

__all__ = [
    "DEFAULT_FORMATS",
    "AtomEntry",
    "AtomFeed",
    "AtomFormat",
    "AtomLink",
    "DateError",
    "DateParseError",
    "DeserializeError",
    "FeedDispatcher",
    "FeedFormat",
    "ParseError",
    "ParserError",
    "RssChannel",
    "RssFormat",
    "RssItem",
    "build_blog",
    "declared_summary",
    "parse_rfc3339",
    "parse_rfc822",
    "parse_web_feed",
    "read_document",
]
