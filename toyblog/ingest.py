"""Gather posts and passthrough entries from the posts source directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .content import Post, PostError, extract_post, load_html_document

logger = logging.getLogger(__name__)

POST_SUFFIX = ".html"


class DuplicateFilenameError(PostError):
    """Raised in strict mode when two entries map to the same output file."""


@dataclass(slots=True)
class PassthroughEntry:
    """A file or directory copied verbatim into the output posts area."""

    source: Path
    name: str

    @property
    def is_dir(self) -> bool:
        return self.source.is_dir()


@dataclass(slots=True)
class IngestResult:
    """Everything found in the posts directory, in directory-listing order."""

    posts: list[Post] = field(default_factory=list)
    passthrough: list[PassthroughEntry] = field(default_factory=list)

    @property
    def draft_count(self) -> int:
        return sum(1 for post in self.posts if post.is_draft)


def load_posts(posts_dir: Path, *, strict: bool = False) -> IngestResult:
    """Read every top-level entry of ``posts_dir``.

    HTML files holding a post container become posts. All other files, HTML
    files without a container, and subdirectories are kept for verbatim
    copying. Any invalid post aborts the whole load.
    """
    if not posts_dir.is_dir():
        raise FileNotFoundError(posts_dir)

    result = IngestResult()
    for path in sorted(posts_dir.iterdir()):
        if path.is_file() and path.suffix == POST_SUFFIX:
            post = extract_post(load_html_document(path), path.name, strict=strict)
            if post is not None:
                logger.debug("Loaded post %s (%s)", path.name, post.date.isoformat())
                result.posts.append(post)
                continue
        if path.is_file() or path.is_dir():
            result.passthrough.append(PassthroughEntry(source=path, name=path.name))

    if strict:
        _ensure_unique_names(result)
    return result


def _ensure_unique_names(result: IngestResult) -> None:
    # Case-insensitive filesystems fold names that differ only by case.
    seen: dict[str, str] = {}
    names = [post.filename for post in result.posts]
    names.extend(entry.name for entry in result.passthrough)
    for name in names:
        key = name.casefold()
        if key in seen:
            raise DuplicateFilenameError(
                f"Input files {seen[key]} and {name} would be written to the same output file",
                filename=name,
            )
        seen[key] = name
