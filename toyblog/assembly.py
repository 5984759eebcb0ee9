"""Produce final page strings from templates and posts."""

from __future__ import annotations

import copy
from typing import Sequence

from bs4 import BeautifulSoup, Doctype

from .content import Post
from .markup import DOCTYPE
from .navigation import NavigationMode, render_navigation
from .rewriter import IndexRewriter, PostRewriter


def serialize_document(document: BeautifulSoup) -> str:
    """Serialize a tree behind a single literal doctype declaration."""
    body = "".join(str(node) for node in document.contents if not isinstance(node, Doctype))
    return DOCTYPE + body.lstrip()


def render_post_page(post: Post, posts: Sequence[Post], template: BeautifulSoup) -> str:
    """Render ``post`` into an independent copy of the post template.

    ``posts`` is the full ordered collection used for the page navigation.
    """
    document = copy.copy(template)
    navigation = render_navigation(posts, NavigationMode.POST)
    PostRewriter(post, navigation).rewrite(document)
    return serialize_document(document)


def render_index_page(posts: Sequence[Post], template: BeautifulSoup) -> str:
    document = copy.copy(template)
    navigation = render_navigation(posts, NavigationMode.INDEX)
    IndexRewriter(navigation).rewrite(document)
    return serialize_document(document)
