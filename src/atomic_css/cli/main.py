"""atomic-css CLI entry point: Click group with subcommands."""

import logging

import click

from atomic_css import __version__


@click.group()
@click.version_option(version=__version__, prog_name="atomic-css")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug).")
def cli(verbose: int) -> None:
    """atomic-css - generate a minimal utility-first stylesheet."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[atomic-css] %(levelname)s %(message)s")


# Import and register subcommands
from atomic_css.cli.build import build  # noqa: E402
from atomic_css.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(inspect)
