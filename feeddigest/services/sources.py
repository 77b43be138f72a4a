"""Feed source list loading.

Two file formats are accepted:

* plain text (``feeds.txt``): one link per line, ``#`` starts a comment;
* YAML (``*.yaml``/``*.yml``): a ``sources:`` list of URLs or ``{url: ...}``
  mappings.
"""

import logging
import re
from pathlib import Path

import yaml

from feeddigest.config import Settings, get_settings

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"#.*$")


def _unique(links: list[str]) -> list[str]:
    """Drop blanks and duplicates, keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for link in links:
        if link and link not in seen:
            seen.add(link)
            result.append(link)
    return result


def parse_feed_list(text: str) -> list[str]:
    """Parse plain-text feed list content into links."""
    return _unique([_COMMENT_RE.sub("", line).strip() for line in text.splitlines()])


def parse_feed_yaml(text: str) -> list[str]:
    """Parse YAML feed list content into links."""
    data = yaml.safe_load(text) or {}
    links: list[str] = []
    for source in data.get("sources", []) or []:
        if isinstance(source, str):
            links.append(source.strip())
        elif isinstance(source, dict) and source.get("url"):
            links.append(str(source["url"]).strip())
        else:
            logger.warning("Ignoring malformed source entry: %r", source)
    return _unique(links)


def read_feeds(path: str | Path) -> list[str]:
    """Read feed links from a text or YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If a YAML file is malformed.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        return parse_feed_yaml(text)
    return parse_feed_list(text)


def load_feed_links(settings: Settings | None = None) -> list[str]:
    """Return the configured feed links.

    ``FEED_LINKS`` from the environment wins over the feeds file when set.
    """
    settings = settings or get_settings()
    if settings.feed_links:
        logger.info("Using %d feed links from environment", len(settings.feed_links))
        return _unique([link.strip() for link in settings.feed_links])
    return read_feeds(settings.feeds_file)
