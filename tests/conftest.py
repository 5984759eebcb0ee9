from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from toyblog.content import Post, parse_html

PostFactory = Callable[..., Post]


@pytest.fixture
def make_post() -> PostFactory:
    """Build a `Post` without going through a source file."""

    def _make(
        filename: str,
        title: str | None = None,
        date: datetime | None = None,
        *,
        body: str = "<p>Body</p>",
        head: str | None = None,
        draft: bool = False,
        starred: bool = False,
    ) -> Post:
        container = parse_html(f"<toyb-post>{body}</toyb-post>").find("toyb-post")
        return Post(
            filename=filename,
            title=title if title is not None else filename.removesuffix(".html").title(),
            date=date or datetime(2024, 1, 1, tzinfo=timezone.utc),
            body=container,
            head_fragment=head,
            is_draft=draft,
            is_starred=starred,
        )

    return _make
