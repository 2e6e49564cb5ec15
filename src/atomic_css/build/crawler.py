"""Recursively yield the contents of source files under one or more directories."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Iterator

__all__ = ["DEFAULT_MATCH", "ls", "iter_paths"]

logger = logging.getLogger(__name__)

DEFAULT_MATCH = re.compile(r"(\.tsx|\.ts|\.jsx|\.js|\.html)$")


def iter_paths(
    directories: Iterable[str | Path],
    match: re.Pattern[str] = DEFAULT_MATCH,
    ignore: re.Pattern[str] | None = None,
) -> Iterator[str]:
    """Yield the path of every matching file, skipping ignored paths.

    An ignored directory is not descended into.
    """
    for directory in directories:
        with os.scandir(directory) as entries:
            for entry in sorted(entries, key=lambda e: e.name):
                pathname = os.path.join(directory, entry.name)
                if ignore is not None and ignore.search(pathname):
                    continue
                if entry.is_dir():
                    yield from iter_paths([pathname], match, ignore)
                elif entry.is_file() and match.search(pathname):
                    yield pathname


def ls(
    directories: Iterable[str | Path],
    match: re.Pattern[str] = DEFAULT_MATCH,
    ignore: re.Pattern[str] | None = None,
) -> Iterator[str]:
    """Yield the *contents* of every matching file under *directories*.

    Lazy and single-use, like any generator.
    """
    for pathname in iter_paths(directories, match, ignore):
        logger.debug("Scanning %s", pathname)
        yield Path(pathname).read_text(encoding="utf-8", errors="replace")
