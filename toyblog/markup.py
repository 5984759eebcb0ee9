"""Custom tag vocabulary recognized in post sources and templates."""

from __future__ import annotations

from enum import Enum

DOCTYPE = "<!DOCTYPE html>"

# Sub-tags valid only inside the post container.
POST_TAG = "toyb-post"
TITLE_TAG = "toyb-title"
DATE_TAG = "toyb-date"
HEAD_TAG = "toyb-head"
DRAFT_TAG = "toyb-draft"
STAR_TAG = "toyb-star"

# Placeholders valid in templates.
ARTICLE_TAG = "toyb-article"
NAV_TAG = "toyb-nav"

ARTICLE_CLASS = "toyb-article"
NAV_CLASS = "toyb-nav"


class PlaceholderKind(str, Enum):
    """Meaning of a template tag during rewriting."""

    NAV = "nav"
    TITLE = "title"
    TITLE_PLACEHOLDER = "title-placeholder"
    DATE_PLACEHOLDER = "date-placeholder"
    ARTICLE = "article"
    HEAD = "head"
    OTHER = "other"


_KINDS_BY_TAG: dict[str, PlaceholderKind] = {
    NAV_TAG: PlaceholderKind.NAV,
    "title": PlaceholderKind.TITLE,
    TITLE_TAG: PlaceholderKind.TITLE_PLACEHOLDER,
    DATE_TAG: PlaceholderKind.DATE_PLACEHOLDER,
    ARTICLE_TAG: PlaceholderKind.ARTICLE,
    "head": PlaceholderKind.HEAD,
}


def classify(tag_name: str | None) -> PlaceholderKind:
    """Resolve a tag name to the placeholder kind it stands for."""
    if not tag_name:
        return PlaceholderKind.OTHER
    return _KINDS_BY_TAG.get(tag_name.lower(), PlaceholderKind.OTHER)
