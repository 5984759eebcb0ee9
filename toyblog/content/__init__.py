"""Utilities for extracting posts from source HTML."""

from .models import Post
from .parsers import (
    InvalidDateError,
    MissingTitleError,
    PostError,
    extract_post,
    is_post_document,
    load_html_document,
    parse_html,
)

__all__ = [
    "InvalidDateError",
    "MissingTitleError",
    "Post",
    "PostError",
    "extract_post",
    "is_post_document",
    "load_html_document",
    "parse_html",
]
