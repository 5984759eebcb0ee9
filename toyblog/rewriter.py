"""Placeholder substitution over parsed template trees.

The rewriter walks a document depth-first in pre-order. Each element is
classified once by tag name; a recognized placeholder is handed to the rule
registered for its kind, everything else is descended into. Replacement
markup is inserted in place of the placeholder and is never visited, so the
walk always terminates.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Mapping

from bs4 import BeautifulSoup, Tag

from .content import Post, parse_html
from .markup import ARTICLE_CLASS, PlaceholderKind, classify

logger = logging.getLogger(__name__)

Rule = Callable[[Tag], None]

DATE_FORMAT = "%a %b %d %Y"


def format_post_date(value: datetime) -> str:
    """Format a post date as e.g. ``Mon Jan 01 2024``."""
    return value.strftime(DATE_FORMAT)


def replace_with_markup(element: Tag, markup: str) -> None:
    """Swap ``element`` and its subtree for the nodes parsed from ``markup``."""
    fragment = parse_html(markup)
    for node in list(fragment.contents):
        element.insert_before(node)
    element.decompose()


def append_markup(element: Tag, markup: str) -> None:
    fragment = parse_html(markup)
    for node in list(fragment.contents):
        element.append(node)


class TreeRewriter:
    """Base visitor; subclasses supply the rules for the kinds they handle."""

    def __init__(self) -> None:
        self._rules: Mapping[PlaceholderKind, Rule] = self.build_rules()

    def build_rules(self) -> Mapping[PlaceholderKind, Rule]:
        return {}

    @property
    def handled_kinds(self) -> frozenset[PlaceholderKind]:
        return frozenset(self._rules)

    def rewrite(self, document: BeautifulSoup) -> BeautifulSoup:
        """Rewrite ``document`` in place and return it."""
        self.visit(document)
        return document

    def visit(self, element: Tag) -> None:
        rule = self._rules.get(classify(element.name))
        if rule is None:
            self.visit_children(element)
        else:
            rule(element)

    def visit_children(self, element: Tag) -> None:
        # Snapshot: rules detach and insert siblings while we iterate.
        for child in list(element.children):
            if isinstance(child, Tag):
                self.visit(child)


class IndexRewriter(TreeRewriter):
    """Fills navigation placeholders on the index page."""

    def __init__(self, navigation: str) -> None:
        self._navigation = navigation
        super().__init__()

    def build_rules(self) -> Mapping[PlaceholderKind, Rule]:
        return {PlaceholderKind.NAV: self._replace_navigation}

    def _replace_navigation(self, element: Tag) -> None:
        replace_with_markup(element, self._navigation)


class PostRewriter(TreeRewriter):
    """Fills a post template clone with one post's title, date, body, and head additions."""

    def __init__(self, post: Post, navigation: str) -> None:
        self._post = post
        self._navigation = navigation
        self._title_text = parse_html(post.title).get_text()
        self._date_text = format_post_date(post.date)
        self._article = f'<article class="{ARTICLE_CLASS}">{post.body_markup}</article>'
        super().__init__()

    def build_rules(self) -> Mapping[PlaceholderKind, Rule]:
        return {
            PlaceholderKind.NAV: self._replace_navigation,
            PlaceholderKind.TITLE: self._write_document_title,
            PlaceholderKind.TITLE_PLACEHOLDER: self._replace_title,
            PlaceholderKind.DATE_PLACEHOLDER: self._replace_date,
            PlaceholderKind.ARTICLE: self._replace_article,
            PlaceholderKind.HEAD: self._merge_head,
        }

    def _replace_navigation(self, element: Tag) -> None:
        replace_with_markup(element, self._navigation)

    def _write_document_title(self, element: Tag) -> None:
        element.string = self._title_text

    def _replace_title(self, element: Tag) -> None:
        replace_with_markup(element, self._post.title)

    def _replace_date(self, element: Tag) -> None:
        replace_with_markup(element, self._date_text)

    def _replace_article(self, element: Tag) -> None:
        replace_with_markup(element, self._article)

    def _merge_head(self, element: Tag) -> None:
        # Template placeholders inside <head> resolve before the post additions land.
        self.visit_children(element)
        if self._post.head_fragment:
            logger.debug("Appending head content from %s", self._post.filename)
            append_markup(element, self._post.head_fragment)
