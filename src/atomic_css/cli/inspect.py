"""CLI command: atomic-css inspect -- show how class names resolve."""

from __future__ import annotations

import sys

import click

from atomic_css.config import compile_config, load_config_file
from atomic_css.layer import make_output_rule
from atomic_css.rules import config_to_rules


@click.command()
@click.argument("class_names", nargs=-1, required=True)
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), help="JSON design-token overrides")
def inspect(class_names: tuple[str, ...], config_file: str | None) -> None:
    """Print the selector, breakpoint, specificity and css of each class name.

    Exits with code 1 if any class name does not resolve.
    """
    config = compile_config(load_config_file(config_file) if config_file else None)
    rules = config_to_rules(config)

    missing = 0
    for class_name in class_names:
        rule = make_output_rule(class_name, rules, config.breakpoint)
        if rule is None:
            click.echo(f"{class_name}: no matching rule", err=True)
            missing += 1
            continue
        click.echo(class_name)
        click.echo(f"  selector:    {rule.selector}")
        if rule.breakpoint:
            click.echo(f"  breakpoint:  {rule.breakpoint} ({config.breakpoint[rule.breakpoint]})")
        click.echo(f"  specificity: {rule.specificity}")
        click.echo(f"  css:         {rule.css}")
        if rule.sibling:
            click.echo(f"  sibling:     {rule.sibling}")

    if missing:
        sys.exit(1)
