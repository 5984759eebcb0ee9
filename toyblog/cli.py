"""CLI entrypoints for toyblog."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .builder import BuildResult, SiteInputs, gather_inputs, write_site
from .config import Config, ConfigError, load_config
from .content import PostError
from .rewriter import format_post_date
from .templates import TemplateError

console = Console()
app = typer.Typer(help="toyblog static site generator.")

_OPTION_NAMES = {
    "index_template": "--index-template",
    "post_template": "--post-template",
    "posts_dir": "--posts",
    "output_dir": "--output",
}

ConfigPathOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Optional YAML configuration file (or directory holding toyblog.yml)."),
]
IndexTemplateOption = Annotated[
    Path | None,
    typer.Option("--index-template", help="The template file to use for the index page."),
]
PostTemplateOption = Annotated[
    Path | None,
    typer.Option("--post-template", help="The template file to use for posts."),
]
PostsOption = Annotated[
    Path | None,
    typer.Option("--posts", help="Directory containing posts."),
]
StrictOption = Annotated[
    bool | None,
    typer.Option(
        "--strict/--no-strict",
        help="Reject whitespace-only titles and case-insensitive output filename collisions.",
    ),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log every copied and generated file."),
]


@app.command()
def build(  # noqa: PLR0913
    index_template: IndexTemplateOption = None,
    post_template: PostTemplateOption = None,
    posts: PostsOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Directory to put generated HTML files and other output."),
    ] = None,
    clean: Annotated[
        bool | None,
        typer.Option("--clean/--no-clean", help="Clear the output directory before generating files."),
    ] = None,
    descending: Annotated[
        bool | None,
        typer.Option("--descending/--ascending", help="Order links by post date, newest first by default."),
    ] = None,
    strict: StrictOption = None,
    report: Annotated[
        Path | None,
        typer.Option("--report", help="Write a JSON build report to this path."),
    ] = None,
    config_path: ConfigPathOption = None,
    verbose: VerboseFlag = False,
) -> None:
    """Generate post pages and the index page."""
    _configure_logging(verbose)
    config = _load(
        config_path,
        index_template=index_template,
        post_template=post_template,
        posts_dir=posts,
        output_dir=output,
        clean=clean,
        descending=descending,
        strict=strict,
        report_path=report,
    )

    inputs = _gather(config)
    result: BuildResult = write_site(config, inputs)
    _print_build_summary(config, result)


@app.command()
def check(
    index_template: IndexTemplateOption = None,
    post_template: PostTemplateOption = None,
    posts: PostsOption = None,
    descending: Annotated[
        bool | None,
        typer.Option("--descending/--ascending", help="Order the listing newest first by default."),
    ] = None,
    strict: StrictOption = None,
    config_path: ConfigPathOption = None,
    verbose: VerboseFlag = False,
) -> None:
    """Validate templates and posts without writing any output."""
    _configure_logging(verbose)
    config = _load(
        config_path,
        index_template=index_template,
        post_template=post_template,
        posts_dir=posts,
        # Output is never touched by a check.
        output_dir=Path("."),
        descending=descending,
        strict=strict,
    )

    inputs = _gather(config, check_output=False)
    _print_check_summary(inputs)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(config_path: Path | None, **overrides: Any) -> Config:
    try:
        return load_config(config_path, **overrides)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {config_path}") from exc
    except ValidationError as exc:
        missing = [
            _OPTION_NAMES.get(str(error["loc"][0]), str(error["loc"][0]))
            for error in exc.errors()
            if error["type"] == "missing" and error["loc"]
        ]
        if missing:
            raise typer.BadParameter(f"Missing required option(s): {', '.join(missing)}") from exc
        raise typer.BadParameter(str(exc)) from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _gather(config: Config, *, check_output: bool = True) -> SiteInputs:
    try:
        return gather_inputs(config, check_output=check_output)
    except ConfigError as error:
        console.print(f"[bold red]Configuration error[/]: {escape(str(error))}")
        raise typer.Exit(code=1) from error
    except TemplateError as error:
        console.print(f"[bold red]Template error[/]: {escape(str(error))}")
        raise typer.Exit(code=1) from error
    except PostError as error:
        console.print(f"[bold red]Invalid post[/]: {escape(str(error))}")
        raise typer.Exit(code=1) from error
    except FileNotFoundError as error:
        console.print(f"[bold red]Posts directory not found[/]: {_display_path(config.posts_dir)}")
        raise typer.Exit(code=1) from error


def _print_build_summary(config: Config, result: BuildResult) -> None:
    stats = result.report.posts
    console.print(
        "[bold green]Posts[/]: "
        f"{stats.total} "
        f"(listed {stats.listed}, drafts {stats.drafts}, starred {stats.starred})"
    )
    if result.post_pages:
        console.print(
            "[bold green]Pages[/]: "
            f"rendered {len(result.post_pages)} post page(s) in "
            f"{_display_path(config.posts_output_dir)}"
        )
    console.print(f"[bold green]Index[/]: rendered {_display_path(result.index_path)}")
    if result.copied:
        console.print(
            "[bold green]Copied[/]: "
            f"{len(result.copied)} file(s)/directory(ies) into {_display_path(config.posts_output_dir)}"
        )
    if result.report_path:
        console.print(f"[bold blue]Report[/]: {_display_path(result.report_path)}")
    console.print("[bold green]Done![/]")


def _print_check_summary(inputs: SiteInputs) -> None:
    console.print(f"[bold green]Check passed[/]: {len(inputs.posts)} post(s) ready to render.")
    for post in inputs.posts:
        flags = []
        if post.is_draft:
            flags.append("draft")
        if post.is_starred:
            flags.append("starred")
        suffix = f" ({', '.join(flags)})" if flags else ""
        console.print(
            f"- {escape(post.filename)} :: {format_post_date(post.date)} :: {escape(post.title)}{suffix}"
        )
    if inputs.passthrough:
        console.print(f"[bold blue]Passthrough[/]: {len(inputs.passthrough)} entr(ies) copied verbatim.")


def _display_path(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()
