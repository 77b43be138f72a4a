"""Digest pipeline: fetch every source, normalize it, keep what is recent."""

import asyncio
import logging
from datetime import datetime, timezone

import httpx

from feeddigest.models.blog import Blog
from feeddigest.services.feeds import ParserError, parse_web_feed
from feeddigest.services.http_client import feed_headers, get_shared_client

logger = logging.getLogger(__name__)


async def fetch_feed(url: str, timeout: float | None = None) -> str:
    """Fetch feed content from URL.

    Args:
        url: The feed URL to fetch.
        timeout: Request timeout in seconds. Defaults to the client's timeout.

    Returns:
        Feed content as string.

    Raises:
        httpx.HTTPError: On network or HTTP errors.
    """
    client = get_shared_client()
    kwargs = {} if timeout is None else {"timeout": timeout}
    response = await client.get(
        url,
        follow_redirects=True,
        headers=feed_headers(),
        **kwargs,
    )
    response.raise_for_status()
    return response.text


async def fetch_blog(url: str) -> Blog | None:
    """Fetch and normalize a single feed.

    Returns None on error (logged, not raised) so one bad source never takes
    down the whole digest.
    """
    try:
        xml = await fetch_feed(url)
    except httpx.HTTPError as e:
        logger.warning("Error fetching %s: %s", url, e)
        return None

    try:
        blog = parse_web_feed(xml)
    except ParserError as e:
        logger.warning("Error parsing %s: %s", url, e)
        return None

    logger.info("Parsed %d posts from %s", len(blog.posts), url)
    return blog


async def download_blogs(
    links: list[str],
    days: int,
    now: datetime | None = None,
) -> list[Blog]:
    """Fetch all feeds concurrently and keep posts from the last ``days`` days.

    Blogs left with no recent posts are dropped. Output follows ``links``
    order.
    """
    now = now or datetime.now(timezone.utc)
    links = [link for link in links if link]

    results = await asyncio.gather(
        *[fetch_blog(link) for link in links],
        return_exceptions=True,
    )

    blogs: list[Blog] = []
    for link, result in zip(links, results):
        if isinstance(result, BaseException):
            logger.error("Unexpected error processing %s: %s", link, result)
            continue
        if result is None:
            continue
        recent = result.recent(days, now)
        if recent is not None:
            blogs.append(recent)

    logger.info("%d of %d feeds have posts from the last %d days", len(blogs), len(links), days)
    return blogs
