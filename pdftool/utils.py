"""Utility helpers shared by the pdftool modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

import click

PathLike = Union[str, Path]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "pdftool"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``pdftool`` namespace."""

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a stream handler to the ``pdftool`` logger and set its level."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger


def ensure_path(path: PathLike) -> Path:
    """Return an absolute :class:`~pathlib.Path` for *path*, expanding ``~``."""

    return Path(path).expanduser().resolve(strict=False)


def is_pdf_path(path: PathLike) -> bool:
    """Return ``True`` when *path* has a ``.pdf`` extension, in any case."""

    return Path(path).suffix.lower() == ".pdf"


def collect_pdf_paths(
    paths: Iterable[PathLike],
    existing: Iterable[PathLike] = (),
) -> List[Path]:
    """Keep the PDF entries of *paths* that are not already listed.

    Order of first appearance is preserved. Entries of *existing* are never
    returned again, which lets callers append to a list they already hold.
    """

    seen = {ensure_path(path) for path in existing}
    collected: List[Path] = []
    for path in paths:
        if not is_pdf_path(path):
            continue
        resolved = ensure_path(path)
        if resolved in seen:
            continue
        seen.add(resolved)
        collected.append(resolved)
    return collected


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500.0 B")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


def open_path(path: PathLike) -> int:
    """Open *path* with the desktop's default application.

    Directories open in the file manager. Returns the launcher's exit code.
    """

    return click.launch(str(path))


__all__ = [
    "PathLike",
    "get_logger",
    "configure_logging",
    "ensure_path",
    "is_pdf_path",
    "collect_pdf_paths",
    "format_file_size",
    "open_path",
]
