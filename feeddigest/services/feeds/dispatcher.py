"""Format dispatch: raw feed text of unknown dialect in, one ``Blog`` out."""

import io
import logging
import re
from collections.abc import Sequence

import feedparser

from feeddigest.models.blog import Blog
from feeddigest.services.feeds.atom import AtomFormat
from feeddigest.services.feeds.base import FeedFormat
from feeddigest.services.feeds.errors import DeserializeError
from feeddigest.services.feeds.rss import RssFormat

logger = logging.getLogger(__name__)

# Priority order in which dialects are tried
DEFAULT_FORMATS: tuple[FeedFormat, ...] = (AtomFormat(), RssFormat())

# feedparser joins every link href onto the enclosing xml:base, with or
# without ``resolve_relative_uris``; removing the attribute keeps hrefs as written
_XML_BASE_RE = re.compile(rb"(<[A-Za-z_][^<>]*?)\s+xml:base\s*=\s*(?:\"[^\"]*\"|'[^']*')")


def read_document(text: str | bytes) -> feedparser.FeedParserDict:
    """Read raw feed XML once with feedparser.

    Text is kept as written: no HTML sanitizing, no relative URI
    resolution and no ``xml:base`` joining. Malformed-but-recoverable
    documents (``bozo``) are logged, not rejected; the formats decide
    whether what was recovered is usable.
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    data = _XML_BASE_RE.sub(rb"\1", data)
    # A stream keeps feedparser from treating the text as a URL or file path
    document = feedparser.parse(
        io.BytesIO(data),
        sanitize_html=False,
        resolve_relative_uris=False,
    )
    if document.get("bozo") and document.get("bozo_exception"):
        logger.debug("Feed parsing warning: %s", document.get("bozo_exception"))
    return document


class FeedDispatcher:
    """Ordered registry of feed dialects.

    Instances are immutable; ``with_format`` returns a new dispatcher so a
    dialect can be added without touching the existing ones.
    """

    def __init__(self, formats: Sequence[FeedFormat] = DEFAULT_FORMATS) -> None:
        self._formats = tuple(formats)

    @property
    def formats(self) -> tuple[FeedFormat, ...]:
        return self._formats

    def with_format(self, fmt: FeedFormat) -> "FeedDispatcher":
        return FeedDispatcher((*self._formats, fmt))

    def parse(self, text: str | bytes) -> Blog:
        """Convert raw feed text with the first dialect that deserializes it.

        Conversion errors from the matching dialect propagate unchanged; later
        dialects are not tried once one has matched.

        Raises:
            DeserializeError: If no registered dialect matches.
            ParseError: If the matching dialect yields no usable entries.
        """
        document = read_document(text)

        for fmt in self._formats:
            try:
                feed = fmt.parse(document)
            except DeserializeError as e:
                logger.debug("%s parser rejected document: %s", fmt.name, e)
                continue
            return feed.into_blog()

        tried = ", ".join(fmt.name for fmt in self._formats)
        raise DeserializeError(f"No known feed format matched (tried: {tried})")


_default_dispatcher = FeedDispatcher()


def parse_web_feed(text: str | bytes) -> Blog:
    """Parse ``text`` with the default Atom/RSS dispatcher."""
    return _default_dispatcher.parse(text)
