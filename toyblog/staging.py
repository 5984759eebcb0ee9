"""Filesystem helpers for writing the generated site."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

from .ingest import PassthroughEntry

logger = logging.getLogger(__name__)


def reset_directory(path: Path) -> None:
    """Remove a directory and recreate it empty."""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)


def copy_passthrough(entries: Iterable[PassthroughEntry], destination_root: Path) -> list[Path]:
    """Copy files and directories byte-for-byte under ``destination_root``."""
    destination_root.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for entry in entries:
        destination = destination_root / entry.name
        if entry.source.resolve() == destination.resolve():
            logger.warning("Skipping %s; it is already at its output location.", entry.source)
            continue
        if entry.is_dir:
            _copytree(entry.source, destination)
            logger.info("Copied directory %s to %s", entry.source, destination)
        else:
            shutil.copy2(entry.source, destination)
            logger.info("Copied file %s to %s", entry.source, destination)
        copied.append(destination)
    return copied


def write_page(path: Path, html_text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_text, encoding="utf-8")
    return path


def _copytree(source: Path, destination: Path) -> None:
    if destination.exists():
        shutil.rmtree(destination)
    shutil.copytree(source, destination)
