"""Typed representation of a post extracted from an author-supplied HTML file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bs4 import Tag


@dataclass(frozen=True, slots=True)
class Post:
    """One article ingested from a single source file.

    ``body`` is the post container element after the title, date, and head
    sub-tags were detached. Renderers only read it.
    """

    filename: str
    title: str
    date: datetime
    body: Tag
    head_fragment: str | None = None
    is_draft: bool = False
    is_starred: bool = False

    @property
    def body_markup(self) -> str:
        return self.body.decode_contents()

    @property
    def is_listed(self) -> bool:
        """Whether the post appears in index navigation."""
        return not self.is_draft
