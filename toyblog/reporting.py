"""Build reporting helpers for toyblog."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, Field

from .content import Post


class PostStats(BaseModel):
    total: int
    listed: int
    drafts: int
    starred: int


class BuildReport(BaseModel):
    generated_at: datetime
    duration_seconds: float
    output_dir: Path
    descending: bool
    posts: PostStats
    pages: list[str] = Field(default_factory=list)
    copied: list[str] = Field(default_factory=list)


def build_post_stats(posts: Iterable[Post]) -> PostStats:
    total = listed = drafts = starred = 0
    for post in posts:
        total += 1
        if post.is_draft:
            drafts += 1
        else:
            listed += 1
        if post.is_starred:
            starred += 1
    return PostStats(total=total, listed=listed, drafts=drafts, starred=starred)


def assemble_report(
    *,
    duration_seconds: float,
    output_dir: Path,
    descending: bool,
    posts: PostStats,
    pages: Iterable[Path],
    copied: Iterable[Path],
) -> BuildReport:
    def _relative(path: Path) -> str:
        try:
            return path.relative_to(output_dir).as_posix()
        except ValueError:
            return path.as_posix()

    return BuildReport(
        generated_at=datetime.now(timezone.utc),
        duration_seconds=duration_seconds,
        output_dir=output_dir,
        descending=descending,
        posts=posts,
        pages=[_relative(path) for path in pages],
        copied=[_relative(path) for path in copied],
    )


def write_report(report: BuildReport, target: Path) -> Path:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(report.model_dump(mode="json"), handle, ensure_ascii=False, indent=2)
    return target
