"""Render the list of post links shown by navigation placeholders."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .content import Post
from .markup import NAV_CLASS


class NavigationMode(str, Enum):
    """Page kind the navigation is rendered for."""

    POST = "post"
    INDEX = "index"


POSTS_SUBDIR = "posts"


def render_navigation(posts: Iterable[Post], mode: NavigationMode) -> str:
    """Build the navigation fragment for ``posts`` in their given order.

    Post pages link to every post, drafts included, relative to the posts
    directory. The index links into the posts directory and skips drafts.
    """
    if mode is NavigationMode.POST:
        opening = f'<navigation class="{NAV_CLASS}"><ul>'
        prefix = "./"
    else:
        opening = '<navigation><ul class="nav">'
        prefix = f"{POSTS_SUBDIR}/"

    parts = [opening]
    for post in posts:
        if mode is NavigationMode.INDEX and not post.is_listed:
            continue
        parts.append(f'<li><a href="{prefix}{post.filename}">{post.title}</a></li>')
    parts.append("</ul></navigation>")
    return "".join(parts)
