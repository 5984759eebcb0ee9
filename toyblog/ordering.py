"""Date ordering for post collections."""

from __future__ import annotations

from typing import Iterable

from .content import Post


def sort_posts(posts: Iterable[Post], *, descending: bool = True) -> list[Post]:
    """Return posts ordered by date, newest first unless ``descending`` is false.

    Posts sharing a date keep their input order in both directions.
    """
    return sorted(posts, key=lambda post: post.date, reverse=descending)
