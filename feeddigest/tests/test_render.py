"""Tests for HTML digest rendering."""

from datetime import date, datetime, timezone

from feeddigest.models.blog import Blog, Post
from feeddigest.services.render import render_blog, render_digest


def _blog(title: str, *posts: tuple[str, str]) -> Blog:
    return Blog(
        title=title,
        posts=[
            Post(
                title=post_title,
                link=link,
                published_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            )
            for post_title, link in posts
        ],
    )


def test_render_blog_lists_posts_in_order() -> None:
    html = render_blog(_blog("Example", ("One", "https://a"), ("Two", "https://b")))
    assert html == (
        '<h2>Example</h2><ul><li><a href="https://a">One</a></li>'
        '<li><a href="https://b">Two</a></li></ul>'
    )


def test_render_blog_escapes_text_and_urls() -> None:
    html = render_blog(_blog("A & B", ("<script>", 'https://x/?a=1&b="2"')))
    assert "<h2>A &amp; B</h2>" in html
    assert "&lt;script&gt;" in html
    assert 'href="https://x/?a=1&amp;b=&quot;2&quot;"' in html


def test_render_digest_page() -> None:
    page = render_digest(
        [_blog("First", ("One", "https://a")), _blog("Second", ("Two", "https://b"))],
        date(2024, 1, 2),
    )
    assert page.startswith("<!DOCTYPE html>")
    assert "<h1>Feed Digest - 2024-01-02</h1>" in page
    assert page.index("<h2>First</h2>") < page.index("<h2>Second</h2>")
    assert page.rstrip().endswith("</html>")


def test_render_digest_without_blogs() -> None:
    page = render_digest([], date(2024, 1, 2))
    assert "<h2>" not in page
