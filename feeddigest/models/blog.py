"""Canonical feed data models.

Every supported feed dialect converges on these two types: a ``Blog`` holds
the posts of one feed, a ``Post`` is a single entry.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Post(BaseModel):
    """A single feed entry, dialect independent."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str
    description: str | None = None
    published_at: datetime

    @field_validator("published_at")
    @classmethod
    def _normalize_to_utc(cls, value: datetime) -> datetime:
        """Reject naive datetimes and store every instant in UTC."""
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("published_at must be timezone-aware")
        return value.astimezone(timezone.utc)


class Blog(BaseModel):
    """A converted feed with at least one post, in source document order."""

    title: str
    posts: list[Post] = Field(..., min_length=1)

    @computed_field
    @property
    def last_build_date(self) -> datetime:
        """Most recent ``published_at`` across all posts."""
        return max(post.published_at for post in self.posts)

    def recent(self, days: int, now: datetime) -> "Blog | None":
        """Return a copy keeping only posts within ``days`` of ``now``.

        Returns None when no post is recent enough.
        """
        posts = [p for p in self.posts if within_days(p.published_at, days, now)]
        if not posts:
            return None
        return Blog(title=self.title, posts=posts)


def within_days(when: datetime, days: int, now: datetime) -> bool:
    """True if ``when`` is at most ``days`` whole days before ``now``.

    Dates in the future always count as recent.
    """
    return (now - when).days <= days
