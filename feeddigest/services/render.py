"""HTML digest rendering."""

import html
from collections.abc import Iterable
from datetime import date

from feeddigest.models.blog import Blog

_PAGE_HEAD = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1, shrink-to-fit=no" />
    <title>Feed Digest</title>
    <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bootstrap@4.3.1/dist/css/bootstrap.min.css">
  </head>
  <body>
    <nav class="navbar navbar-expand-lg navbar-dark bg-dark text-light">
      <a class="navbar-brand">Feed Digest</a>
    </nav>
    <div class="container">
      <div class="text-left mt-5">
"""

_PAGE_TAIL = """      </div>
    </div>
  </body>
</html>
"""


def render_blog(blog: Blog) -> str:
    """Render one blog as a heading followed by a list of post links."""
    items = "".join(
        f'<li><a href="{html.escape(post.link, quote=True)}">{html.escape(post.title)}</a></li>'
        for post in blog.posts
    )
    return f"<h2>{html.escape(blog.title)}</h2><ul>{items}</ul>"


def render_digest(blogs: Iterable[Blog], today: date) -> str:
    """Render the full digest page for ``blogs``."""
    body = f"<h1>Feed Digest - {today.isoformat()}</h1>"
    body += "".join(render_blog(blog) for blog in blogs)
    return _PAGE_HEAD + body + "\n" + _PAGE_TAIL
