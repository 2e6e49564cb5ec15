from atomic_css.build.context import (
    BuildContext,
    BuildOptions,
    BuildSession,
    default_base_layer,
    stringify_css,
    watch,
    write_css,
    write_output,
)
from atomic_css.build.crawler import DEFAULT_MATCH, iter_paths, ls
from atomic_css.build.watcher import PollingWatcher

__all__ = [
    "BuildContext",
    "BuildOptions",
    "BuildSession",
    "DEFAULT_MATCH",
    "PollingWatcher",
    "default_base_layer",
    "iter_paths",
    "ls",
    "stringify_css",
    "watch",
    "write_css",
    "write_output",
]
