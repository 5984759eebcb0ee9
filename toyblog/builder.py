"""Two-phase site build: gather every input, then write every output."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from bs4 import BeautifulSoup

from .assembly import render_index_page, render_post_page
from .config import Config, ensure_separate_output
from .content import Post
from .ingest import PassthroughEntry, load_posts
from .ordering import sort_posts
from .reporting import BuildReport, assemble_report, build_post_stats, write_report
from .staging import copy_passthrough, reset_directory, write_page
from .templates import load_index_template, load_post_template

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SiteInputs:
    """Validated inputs ready for rendering."""

    post_template: BeautifulSoup
    index_template: BeautifulSoup
    posts: list[Post]
    passthrough: list[PassthroughEntry] = field(default_factory=list)


@dataclass(slots=True)
class BuildResult:
    """Paths written by a build and the matching report."""

    index_path: Path
    post_pages: list[Path]
    copied: list[Path]
    report: BuildReport
    report_path: Path | None = None


def gather_inputs(config: Config, *, check_output: bool = True) -> SiteInputs:
    """Load templates and every post, failing before anything is written.

    ``check_output`` rejects a posts source that overlaps the output tree;
    dry runs that never write can skip it.
    """
    if check_output:
        ensure_separate_output(config)
    post_template = load_post_template(config.post_template)
    index_template = load_index_template(config.index_template)
    ingested = load_posts(config.posts_dir, strict=config.strict)
    posts = sort_posts(ingested.posts, descending=config.descending)
    logger.info(
        "Loaded %d post(s) (%d draft(s)) and %d other entr(ies) from %s",
        len(posts),
        ingested.draft_count,
        len(ingested.passthrough),
        config.posts_dir,
    )
    return SiteInputs(
        post_template=post_template,
        index_template=index_template,
        posts=posts,
        passthrough=ingested.passthrough,
    )


def write_site(config: Config, inputs: SiteInputs) -> BuildResult:
    """Render and write pages from fully gathered inputs."""
    start = time.perf_counter()
    if config.clean:
        logger.info("Cleaning output directory %s", config.output_dir)
        reset_directory(config.output_dir)

    posts_root = config.posts_output_dir
    copied = copy_passthrough(inputs.passthrough, posts_root)

    post_pages: list[Path] = []
    for post in inputs.posts:
        destination = write_page(
            posts_root / post.filename,
            render_post_page(post, inputs.posts, inputs.post_template),
        )
        logger.info("Generated post %s for title %s", destination, post.title)
        post_pages.append(destination)

    index_path = write_page(
        config.index_output_path,
        render_index_page(inputs.posts, inputs.index_template),
    )
    logger.info("Generated index %s", index_path)

    report = assemble_report(
        duration_seconds=time.perf_counter() - start,
        output_dir=config.output_dir,
        descending=config.descending,
        posts=build_post_stats(inputs.posts),
        pages=[*post_pages, index_path],
        copied=copied,
    )
    report_path = write_report(report, config.report_path) if config.report_path else None

    return BuildResult(
        index_path=index_path,
        post_pages=post_pages,
        copied=copied,
        report=report,
        report_path=report_path,
    )


def build_site(config: Config) -> BuildResult:
    return write_site(config, gather_inputs(config))
