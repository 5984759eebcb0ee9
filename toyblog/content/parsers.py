"""Parse author-supplied HTML files into `Post` records."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from bs4 import BeautifulSoup, Tag
from dateutil import parser as date_parser

from ..markup import DATE_TAG, DRAFT_TAG, HEAD_TAG, POST_TAG, STAR_TAG, TITLE_TAG
from .models import Post

HTML_PARSER = "html.parser"


class PostError(ValueError):
    """Raised when a post source file is missing required markup."""

    def __init__(self, message: str, *, filename: str | None = None) -> None:
        super().__init__(message)
        self.filename = filename


class MissingTitleError(PostError):
    """Raised when a post has no title tag or an empty one."""


class InvalidDateError(PostError):
    """Raised when a post date tag is absent or cannot be parsed."""


def parse_html(markup: str | bytes) -> BeautifulSoup:
    """Parse HTML into a mutable document tree; bytes have their encoding detected."""
    return BeautifulSoup(markup, HTML_PARSER)


def load_html_document(path: str | Path) -> BeautifulSoup:
    return parse_html(Path(path).read_bytes())


def is_post_document(document: BeautifulSoup) -> bool:
    return document.find(POST_TAG) is not None


def extract_post(document: BeautifulSoup, filename: str, *, strict: bool = False) -> Post | None:
    """Build a `Post` from a parsed document, or return ``None`` when it holds no post.

    The title, date, and head sub-tags are detached from the container so the
    remaining body can be rendered as-is. Draft and star markers stay in place.
    With ``strict`` enabled, whitespace-only titles are rejected as well.
    """
    container = document.find(POST_TAG)
    if not isinstance(container, Tag):
        return None

    title_tag = container.find(TITLE_TAG)
    title = title_tag.decode_contents() if isinstance(title_tag, Tag) else ""
    if title == "" or (strict and not title.strip()):
        raise MissingTitleError(
            f"Post with input file {filename} must have a non-empty <{TITLE_TAG}> tag",
            filename=filename,
        )

    date_tag = container.find(DATE_TAG)
    if not isinstance(date_tag, Tag):
        raise InvalidDateError(
            f"Post with input file {filename} must have a valid <{DATE_TAG}> tag",
            filename=filename,
        )
    date = _parse_date(date_tag.get_text(), filename)

    head_tag = container.find(HEAD_TAG)
    head_fragment = head_tag.decode_contents() if isinstance(head_tag, Tag) else None

    title_tag.extract()
    date_tag.extract()
    if isinstance(head_tag, Tag):
        head_tag.extract()

    return Post(
        filename=filename,
        title=title,
        date=date,
        body=container,
        head_fragment=head_fragment,
        is_draft=container.find(DRAFT_TAG) is not None,
        is_starred=container.find(STAR_TAG) is not None,
    )


def _parse_date(text: str, filename: str) -> datetime:
    try:
        value = date_parser.parse(text)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(
            f"Post with input file {filename} must have a valid <{DATE_TAG}> tag",
            filename=filename,
        ) from exc
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
