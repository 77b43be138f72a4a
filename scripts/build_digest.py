"""Build the feed digest from the command line.

Usage:
    python -m scripts.build_digest                      # Print HTML to stdout
    python -m scripts.build_digest --days 3 -o out.html # Last 3 days, to a file
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from feeddigest.config import get_settings
from feeddigest.services.digest import download_blogs
from feeddigest.services.http_client import close_shared_client
from feeddigest.services.render import render_digest
from feeddigest.services.sources import load_feed_links
from feeddigest.services.timing import log_elapsed

logger = logging.getLogger("scripts.build_digest")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Build an HTML digest of recent feed posts.")
    parser.add_argument(
        "--days",
        type=int,
        default=settings.days,
        help=f"Only include posts from the last N days (default: {settings.days})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write HTML to this file instead of stdout",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        links = load_feed_links(settings)
    except FileNotFoundError as e:
        logger.error("Feed list not found: %s", e)
        return 1

    try:
        with log_elapsed("download_blogs"):
            blogs = await download_blogs(links, args.days)
    finally:
        await close_shared_client()

    if not blogs:
        logger.error("No feed had posts from the last %d days", args.days)
        return 1

    with log_elapsed("render_digest"):
        page = render_digest(blogs, datetime.now(timezone.utc).date())

    if args.output:
        args.output.write_text(page, encoding="utf-8")
        logger.info("Wrote digest of %d blogs to %s", len(blogs), args.output)
    else:
        sys.stdout.write(page)

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
