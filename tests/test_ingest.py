from __future__ import annotations

from pathlib import Path

import pytest

from toyblog.content import InvalidDateError, MissingTitleError
from toyblog.ingest import DuplicateFilenameError, load_posts


def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")


def _post(title: str, date: str, extra: str = "") -> str:
    return (
        "<html><body><toyb-post>"
        f"<toyb-title>{title}</toyb-title><toyb-date>{date}</toyb-date>{extra}<p>{title} body</p>"
        "</toyb-post></body></html>"
    )


def test_splits_posts_from_passthrough_entries(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    _write(posts_dir / "first.html", _post("First", "2024-01-01"))
    _write(posts_dir / "about.html", "<html><body><p>Not a post</p></body></html>")
    _write(posts_dir / "notes.txt", "plain text")
    _write(posts_dir / "images" / "nested.html", _post("Nested", "2024-01-05"))

    result = load_posts(posts_dir)

    assert [post.filename for post in result.posts] == ["first.html"]
    assert [entry.name for entry in result.passthrough] == ["about.html", "images", "notes.txt"]
    assert result.passthrough[1].is_dir


def test_counts_drafts(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    _write(posts_dir / "a.html", _post("A", "2024-01-01"))
    _write(posts_dir / "b.html", _post("B", "2024-01-02", "<toyb-draft></toyb-draft>"))

    result = load_posts(posts_dir)

    assert result.draft_count == 1


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_posts(tmp_path / "missing")


def test_invalid_post_aborts_load(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    _write(posts_dir / "good.html", _post("Good", "2024-01-01"))
    _write(posts_dir / "bad.html", _post("Bad", "sometime soon"))

    with pytest.raises(InvalidDateError) as excinfo:
        load_posts(posts_dir)

    assert "bad.html" in str(excinfo.value)


def test_untitled_post_aborts_load(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    _write(posts_dir / "untitled.html", _post("", "2024-01-01"))

    with pytest.raises(MissingTitleError):
        load_posts(posts_dir)


def test_strict_mode_rejects_case_insensitive_collisions(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    _write(posts_dir / "Notes.txt", "upper")
    _write(posts_dir / "notes.txt", "lower")
    if len(list(posts_dir.iterdir())) < 2:
        pytest.skip("filesystem is case-insensitive")

    assert len(load_posts(posts_dir).passthrough) == 2
    with pytest.raises(DuplicateFilenameError):
        load_posts(posts_dir, strict=True)


def test_legacy_encoded_html_without_post_is_passthrough(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    (posts_dir / "legacy.html").write_bytes("<html><body><p>café</p></body></html>".encode("latin-1"))

    result = load_posts(posts_dir)

    assert result.posts == []
    assert [entry.name for entry in result.passthrough] == ["legacy.html"]


def test_legacy_encoded_post_is_decoded(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    (posts_dir / "legacy.html").write_bytes(_post("Café", "2024-01-01").encode("latin-1"))

    result = load_posts(posts_dir)

    assert [post.filename for post in result.posts] == ["legacy.html"]
