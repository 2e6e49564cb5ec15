"""Polling file watcher.

Tracks modification times of individual files and of every file below a
set of directories. Each :meth:`PollingWatcher.poll` reports the paths that
were added, modified or removed since the previous poll.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Callable, Iterable

__all__ = ["PollingWatcher"]

logger = logging.getLogger(__name__)


def _mtime(path: str) -> int | None:
    try:
        return os.stat(path).st_mtime_ns
    except FileNotFoundError:
        return None


class PollingWatcher:
    """Watch files and directory trees by polling ``stat``."""

    def __init__(
        self,
        files: Iterable[str | Path] = (),
        directories: Iterable[str | Path] = (),
    ) -> None:
        self._files: list[str] = []
        self._directories = [str(d) for d in directories]
        self._snapshot: dict[str, int | None] = {}
        self.add_files(files)
        self._snapshot = self._scan()

    @property
    def files(self) -> list[str]:
        return list(self._files)

    def add_files(self, paths: Iterable[str | Path]) -> None:
        """Start watching *paths*; files already watched are ignored."""
        for path in paths:
            path = str(path)
            if path in self._files:
                continue
            self._files.append(path)
            self._snapshot[path] = _mtime(path)

    def _scan(self) -> dict[str, int | None]:
        snapshot = {path: _mtime(path) for path in self._files}
        for directory in self._directories:
            for root, _dirs, names in os.walk(directory):
                for name in names:
                    # Editor backup files
                    if name.endswith("~"):
                        continue
                    path = os.path.join(root, name)
                    snapshot[path] = _mtime(path)
        return snapshot

    def poll(self) -> list[str]:
        """Return every path whose state changed since the last poll."""
        current = self._scan()
        changed = [
            path
            for path in current.keys() | self._snapshot.keys()
            if current.get(path) != self._snapshot.get(path)
        ]
        self._snapshot = current
        return sorted(changed)

    def run(
        self,
        callback: Callable[[str], None],
        interval: float = 0.5,
        max_polls: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Poll forever (or *max_polls* times), invoking *callback* per change."""
        polls = 0
        while max_polls is None or polls < max_polls:
            sleep(interval)
            polls += 1
            for path in self.poll():
                callback(path)
