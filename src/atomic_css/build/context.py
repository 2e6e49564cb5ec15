"""Build orchestration: wire config, rules, and both builders together.

A :class:`BuildContext` is one full build. A change to the root CSS file or
any file it imports requires a new context, since authored utilities may
have been added, changed or removed. A change to a scanned source only
needs an incremental :meth:`BuildContext.update_sources`.
"""

from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from atomic_css.build.crawler import DEFAULT_MATCH, ls
from atomic_css.build.watcher import PollingWatcher
from atomic_css.config import Config, compile_config
from atomic_css.layer import UtilitiesLayerBuilder, make_utilities_layer_builder
from atomic_css.parser import AtomicCSSError, TokenReader
from atomic_css.processor import CSSBuilder, make_css_builder
from atomic_css.rules import RuleTable, config_to_rules

__all__ = [
    "BuildContext",
    "BuildOptions",
    "BuildSession",
    "default_base_layer",
    "stringify_css",
    "watch",
    "write_css",
    "write_output",
]

logger = logging.getLogger(__name__)

PREFLIGHT_PATH = Path(__file__).parent.parent / "preflight.css"


def default_base_layer() -> str:
    """The packaged preflight stylesheet, with comments and whitespace compacted."""
    return "".join(TokenReader(PREFLIGHT_PATH.read_text(encoding="utf-8")))


@dataclass(frozen=True)
class BuildOptions:
    """Settings for one build.

    Attributes:
        css_file: The root stylesheet.
        source_directories: Directories scanned for class names.
        outfile: Where :func:`write_css` writes the result.
        match: Paths to scan (searched, not anchored).
        ignore: Paths to skip; ignored directories are not descended into.
        config: Design-token overrides passed to :func:`compile_config`.
        base_layer: Text for ``@layer base;``; ``None`` uses the preflight.
        poll_interval: Seconds between polls in watch mode.
    """

    css_file: str
    source_directories: tuple[str, ...] = (".",)
    outfile: str | None = None
    match: re.Pattern[str] = DEFAULT_MATCH
    ignore: re.Pattern[str] | None = None
    config: Mapping[str, Any] | None = None
    base_layer: str | None = None
    poll_interval: float = 0.5


def _same_path(a: str, b: str) -> bool:
    return os.path.abspath(a) == os.path.abspath(b)


class BuildContext:
    """One full build: compiled config, rule table, and both builders."""

    def __init__(self, options: BuildOptions) -> None:
        self.options = options
        self.config: Config = compile_config(options.config)
        self.rules: RuleTable = config_to_rules(self.config)
        base_layer = (
            options.base_layer if options.base_layer is not None else default_base_layer()
        )
        # The CSS pass must run first: authored utilities extend the table.
        self.css_builder: CSSBuilder = make_css_builder(
            options.css_file, base_layer, self.rules
        )
        self.utility_builder: UtilitiesLayerBuilder = make_utilities_layer_builder(
            self.rules, self.config.breakpoint
        )
        self.utility_builder.update(
            ls(options.source_directories, options.match, options.ignore)
        )

    def rebuild(self) -> BuildContext:
        """Return a fresh context; this one is untouched if the rebuild fails."""
        try:
            return BuildContext(self.options)
        except (AtomicCSSError, OSError):
            logger.exception("Rebuild of %s failed", self.options.css_file)
            raise

    def is_css_dependency(self, path: str) -> bool:
        return any(_same_path(path, f) for f in self.css_builder.filenames)

    def is_source(self, path: str) -> bool:
        ignore = self.options.ignore
        if ignore is not None and ignore.search(path):
            return False
        return bool(self.options.match.search(path))

    def update_sources(self, paths: Iterable[str]) -> int:
        """Scan changed source files; return the count of newly matched classes."""
        contents = []
        for path in paths:
            try:
                contents.append(Path(path).read_text(encoding="utf-8", errors="replace"))
            except FileNotFoundError:
                logger.debug("Skipping removed file %s", path)
        return self.utility_builder.update(contents)

    def to_string(self) -> str:
        return self.css_builder.to_string() + self.utility_builder.to_string()

    def __str__(self) -> str:
        return self.to_string()


def write_output(path: str | Path, css: str) -> None:
    """Write *css* to *path*, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(css, encoding="utf-8")


def stringify_css(options: BuildOptions) -> str:
    """Build and return the final CSS."""
    return BuildContext(options).to_string()


def write_css(options: BuildOptions) -> BuildContext:
    """Build and write the final CSS to ``options.outfile``."""
    if not options.outfile:
        raise ValueError("write_css requires BuildOptions.outfile")
    context = BuildContext(options)
    write_output(options.outfile, context.to_string())
    return context


@dataclass
class BuildSession:
    """Keeps the current build and its output file in sync with changes.

    A failed full rebuild leaves the previous context, and therefore the
    previously written file, in place.
    """

    options: BuildOptions
    context: BuildContext = field(init=False)
    last_error: Exception | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.options.outfile:
            raise ValueError("BuildSession requires BuildOptions.outfile")
        self.context = BuildContext(self.options)
        self.write()

    def write(self) -> None:
        write_output(self.options.outfile, self.context.to_string())  # type: ignore[arg-type]

    def handle_change(self, path: str) -> bool:
        """React to a changed file; return ``True`` if the output was rewritten."""
        if self.options.outfile and _same_path(path, self.options.outfile):
            return False

        start = time.monotonic()
        if self.context.is_css_dependency(path):
            logger.info("CSS changed: %s", path)
            try:
                self.context = self.context.rebuild()
            except (AtomicCSSError, OSError) as exc:
                self.last_error = exc
                return False
        elif self.context.is_source(path):
            logger.info("Source changed: %s", path)
            self.context.update_sources([path])
        else:
            return False

        self.last_error = None
        self.write()
        logger.info("Rebuilt in %.1fms", (time.monotonic() - start) * 1000)
        return True


def watch(options: BuildOptions, max_polls: int | None = None) -> BuildSession:
    """Write the CSS, then rewrite it whenever a dependency or source changes."""
    session = BuildSession(options)
    watcher = PollingWatcher(
        files=session.context.css_builder.filenames,
        directories=options.source_directories,
    )

    def on_change(path: str) -> None:
        if session.handle_change(path):
            # A rebuild may have pulled new files into the import graph.
            watcher.add_files(session.context.css_builder.filenames)

    logger.info("Waiting for changes...")
    try:
        watcher.run(on_change, interval=options.poll_interval, max_polls=max_polls)
    except KeyboardInterrupt:
        logger.info("Stopped watching")
    return session
