"""
Feed Digest API

Thin FastAPI backend serving a digest of recent posts from Atom/RSS feeds.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from feeddigest.config import get_settings
from feeddigest.routers import digest
from feeddigest.services.http_client import close_shared_client

logger = logging.getLogger(__name__)

settings = get_settings()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    yield
    await close_shared_client()


app = FastAPI(
    title="Feed Digest API",
    description="Digest of recent posts aggregated from Atom and RSS feeds",
    version=VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(digest.router, prefix="/api/digest")


@app.get("/api/digest/health")
async def health_check() -> JSONResponse:
    """Health check verifying a feed source is configured and readable."""
    s = get_settings()
    config_status = "ok" if s.feed_links or Path(s.feeds_file).is_file() else "fail"
    if config_status != "ok":
        logger.warning("Health check degraded: no feed links and no feeds file at %s", s.feeds_file)
    result = {
        "status": "ok" if config_status == "ok" else "degraded",
        "service": "feed-digest",
        "version": VERSION,
        "checks": {"config": config_status},
    }
    return JSONResponse(content=result, status_code=200)
