"""CLI command: atomic-css build -- write the generated stylesheet."""

from __future__ import annotations

import re
import sys

import click

from atomic_css.build import DEFAULT_MATCH, BuildOptions, stringify_css, watch, write_css
from atomic_css.config import load_config_file
from atomic_css.parser import AtomicCSSError


def _compile_pattern(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> re.Pattern[str] | None:
    if value is None:
        return None
    try:
        return re.compile(value)
    except re.error as exc:
        raise click.BadParameter(f"invalid regular expression: {exc}") from exc


@click.command()
@click.argument("css_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-s",
    "--source",
    "sources",
    multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory to scan for class names (repeatable, default: .)",
)
@click.option("-o", "--outfile", type=click.Path(dir_okay=False), help="Output file (default: stdout)")
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), help="JSON design-token overrides")
@click.option("--match", callback=_compile_pattern, help="Regex of source paths to scan")
@click.option("--ignore", callback=_compile_pattern, help="Regex of paths to skip")
@click.option("--watch/--no-watch", "watch_mode", default=False, help="Rebuild on changes")
@click.option("--interval", default=0.5, type=float, help="Polling interval in seconds for --watch")
def build(
    css_file: str,
    sources: tuple[str, ...],
    outfile: str | None,
    config_file: str | None,
    match: re.Pattern[str] | None,
    ignore: re.Pattern[str] | None,
    watch_mode: bool,
    interval: float,
) -> None:
    """Process CSS_FILE and append the utilities used in the scanned sources."""
    if watch_mode and not outfile:
        raise click.UsageError("--watch requires --outfile")

    try:
        config = load_config_file(config_file) if config_file else None
    except ValueError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    options = BuildOptions(
        css_file=css_file,
        source_directories=sources or (".",),
        outfile=outfile,
        match=match or DEFAULT_MATCH,
        ignore=ignore,
        config=config,
        poll_interval=interval,
    )

    try:
        if watch_mode:
            click.echo(f"Watching for changes, writing {outfile}")
            watch(options)
        elif outfile:
            write_css(options)
            click.echo(f"Wrote {outfile}")
        else:
            click.echo(stringify_css(options))
    except (AtomicCSSError, OSError) as exc:
        click.echo(f"Build error: {exc}", err=True)
        sys.exit(1)
