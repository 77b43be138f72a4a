"""Digest endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from feeddigest.config import get_settings
from feeddigest.models.blog import Blog
from feeddigest.services.digest import download_blogs
from feeddigest.services.render import render_digest
from feeddigest.services.sources import load_feed_links

router = APIRouter(tags=["digest"])


async def _recent_blogs(days: int | None) -> list[Blog]:
    settings = get_settings()
    try:
        links = load_feed_links(settings)
    except FileNotFoundError:
        raise HTTPException(status_code=503, detail="Feed list not found") from None
    return await download_blogs(links, days if days is not None else settings.days)


@router.get("/blogs", response_model=list[Blog])
async def list_blogs(
    days: int | None = Query(
        default=None,
        ge=0,
        le=365,
        description="Only include posts from the last N days",
    ),
):
    """Fetch every configured feed and return the recent posts per blog."""
    return await _recent_blogs(days)


@router.get("/html", response_class=HTMLResponse)
async def digest_html(
    days: int | None = Query(default=None, ge=0, le=365),
):
    """Render the digest as an HTML page."""
    blogs = await _recent_blogs(days)
    return HTMLResponse(content=render_digest(blogs, datetime.now(timezone.utc).date()))
