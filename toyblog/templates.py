"""Load and validate the post and index layout templates."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup

from .content import load_html_document
from .markup import ARTICLE_TAG, NAV_TAG

logger = logging.getLogger(__name__)


class TemplateError(ValueError):
    """Raised when a template is structurally unusable."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def validate_post_template(document: BeautifulSoup, *, path: Path | None = None) -> None:
    """Require exactly one empty article placeholder in a post template."""
    source = f" ({path})" if path else ""
    articles = document.find_all(ARTICLE_TAG)
    if len(articles) != 1:
        raise TemplateError(
            f"Post template must have exactly one <{ARTICLE_TAG}> tag{source}; found {len(articles)}.",
            path=path,
        )
    if articles[0].contents:
        raise TemplateError(
            f"Post template <{ARTICLE_TAG}> tag must have no content{source}.",
            path=path,
        )


def load_post_template(path: str | Path) -> BeautifulSoup:
    template_path = Path(path)
    document = _read_template(template_path)
    validate_post_template(document, path=template_path)
    return document


def load_index_template(path: str | Path) -> BeautifulSoup:
    template_path = Path(path)
    document = _read_template(template_path)
    if document.find(NAV_TAG) is None:
        logger.warning("Index template %s has no <%s> tag; no post links will be rendered.", template_path, NAV_TAG)
    return document


def _read_template(path: Path) -> BeautifulSoup:
    try:
        return load_html_document(path)
    except FileNotFoundError as exc:
        raise TemplateError(f"Template not found: {path}", path=path) from exc
