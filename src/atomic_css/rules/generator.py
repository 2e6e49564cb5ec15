"""Convert a compiled configuration into concrete rule definitions.

As a simplified example, the config ``{"color": {"white": "255 255 255"}}``
produces entries such as::

    text-white   ->  --tw-text-opacity: 1; color: rgb(255 255 255 / var(--tw-text-opacity));
    bg-white/50  ->  background-color: rgb(255 255 255 / 0.5);
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from atomic_css.config import Config
from atomic_css.rules.model import Rule, RuleTable
from atomic_css.rules.static import ANIMATIONS, ROTATIONS, STATIC_RULES, TIMINGS, TRANSFORM

__all__ = ["config_to_rules", "OPACITY_STEPS", "SPACE_SUFFIX"]

logger = logging.getLogger(__name__)

OPACITY_STEPS: tuple[int, ...] = tuple(range(0, 101, 5))

SPACE_SUFFIX = " > :not([hidden]) ~ :not([hidden])"

_RGB_RE = re.compile(r"rgb\([^)]+\)")

PropFunc = Callable[[str], str]


def _format_opacity(step: int) -> str:
    """``20`` -> ``"0.2"``, ``100`` -> ``"1"``."""
    return f"{step / 100:g}"


def _is_rgb(value: str) -> bool:
    # Compiled hex colors are "r g b"; keywords like currentColor have no space.
    return " " in value


def _color_literal(value: str) -> str:
    return f"rgb({value})" if _is_rgb(value) else value


def _prop(name: str) -> PropFunc:
    return lambda color: f"{name}: {color};"


def _gen_colors(
    rules: RuleTable,
    colors: dict[str, str],
    prefix: str,
    prop: str | PropFunc,
    specificity: int = 0,
) -> None:
    """Generate ``<prefix>-<color>`` rules plus their opacity variants.

    For every color this writes the base rule and ``<prefix>-<color>/N``
    for each 5% step. The ``<prefix>-opacity-N`` companions only set the
    ``--tw-<prefix>-opacity`` property consumed by the base rules.
    """
    prop_fn = _prop(prop) if isinstance(prop, str) else prop
    var = f"--tw-{prefix}-opacity"

    for name, value in colors.items():
        color = f"rgb({value} / var({var}))" if _is_rgb(value) else value
        rules.add(f"{prefix}-{name}", f"{var}: 1; {prop_fn(color)}", specificity)
        if not _is_rgb(value):
            continue
        for step in OPACITY_STEPS:
            rules.add(
                f"{prefix}-{name}/{step}",
                prop_fn(f"rgb({value} / {_format_opacity(step)})"),
                specificity + 1,
            )

    for step in OPACITY_STEPS:
        rules.add(
            f"{prefix}-opacity-{step}",
            f"{var}: {_format_opacity(step)};",
            specificity + 2,
        )


def _gen_static(rules: RuleTable) -> None:
    for name, css, specificity in STATIC_RULES:
        rules.add(name, css, specificity)

    for deg in ROTATIONS:
        rules.add(f"rotate-{deg}", f"--tw-rotate: {deg}deg;{TRANSFORM};")

    for ms in TIMINGS:
        rules.add(f"duration-{ms}", f"transition-duration: {ms}ms;", 1)
        rules.add(f"delay-{ms}", f"transition-delay: {ms}ms;", 1)

    for step in OPACITY_STEPS:
        rules.add(f"opacity-{step}", f"opacity: {_format_opacity(step)};")

    for i in range(1, 13):
        rules.add(f"grid-cols-{i}", f"grid-template-columns: repeat({i}, minmax(0, 1fr));")
        rules.add(f"grid-rows-{i}", f"grid-template-rows: repeat({i}, minmax(0, 1fr));")
        rules.add(f"col-start-{i}", f"grid-column-start: {i};")
        rules.add(f"row-start-{i}", f"grid-row-start: {i};")
        rules.add(f"col-end-{i}", f"grid-column-end: {i};")
        rules.add(f"row-end-{i}", f"grid-row-end: {i};")
        rules.add(f"col-span-{i}", f"grid-column: span {i} / span {i};")
        rules.add(f"row-span-{i}", f"grid-row: span {i} / span {i};")

    for name, (css, keyframes) in ANIMATIONS.items():
        rules.set(f"animate-{name}", Rule(css=css, specificity=1, sibling=keyframes))


def _gen_palette(rules: RuleTable, colors: dict[str, str]) -> None:
    _gen_colors(rules, colors, "outline", "outline-color")
    _gen_colors(rules, colors, "text", "color")
    _gen_colors(rules, colors, "decoration", "text-decoration-color")
    _gen_colors(rules, colors, "bg", "background-color")
    _gen_colors(rules, colors, "border", "border-color")
    _gen_colors(rules, colors, "accent", "accent-color", 2)
    _gen_colors(rules, colors, "border-l", "border-left-color", 2)
    _gen_colors(rules, colors, "border-r", "border-right-color", 2)
    _gen_colors(rules, colors, "border-t", "border-top-color", 2)
    _gen_colors(rules, colors, "border-b", "border-bottom-color", 2)
    _gen_colors(
        rules,
        colors,
        "border-x",
        lambda c: f"border-left-color: {c}; border-right-color: {c};",
        1,
    )
    _gen_colors(
        rules,
        colors,
        "border-y",
        lambda c: f"border-top-color: {c}; border-bottom-color: {c};",
        1,
    )
    _gen_colors(
        rules,
        colors,
        "shadow",
        lambda c: f"--tw-shadow-color: {c}; --tw-shadow: var(--tw-shadow-colored);",
        1,
    )

    # Gradient color stops: from < via < to.
    _gen_colors(
        rules,
        colors,
        "from",
        lambda c: (
            f"--tw-gradient-from: {c} var(--tw-gradient-from-position);"
            f"--tw-gradient-to: {c} var(--tw-gradient-to-position);"
            "--tw-gradient-stops: var(--tw-gradient-from), var(--tw-gradient-to);"
        ),
    )
    _gen_colors(
        rules,
        colors,
        "via",
        lambda c: (
            f"--tw-gradient-to: {c} var(--tw-gradient-to-position);"
            "--tw-gradient-stops: var(--tw-gradient-from),"
            f"{c} var(--tw-gradient-via-position), var(--tw-gradient-to);"
        ),
        1,
    )
    _gen_colors(
        rules,
        colors,
        "to",
        lambda c: f"--tw-gradient-to: {c} var(--tw-gradient-to-position);",
        2,
    )


def _gen_typography(rules: RuleTable, config: Config) -> None:
    for name, (size, line_height) in config.font_size.items():
        rules.add(f"text-{name}", f"font-size: {size};line-height: {line_height};")
    for name, family in config.font_family.items():
        rules.add(f"font-{name}", f"font-family: {family};")
    for name, weight in config.font_weight.items():
        rules.add(f"font-{name}", f"font-weight: {weight};")


def _gen_sizing(rules: RuleTable, sizes: dict[str, str]) -> None:
    for k, v in sizes.items():
        rules.add(f"w-{k}", f"width: {v};", 1)
        rules.add(f"min-w-{k}", f"min-width: {v};", 1)
        rules.add(f"max-w-{k}", f"max-width: {v};", 1)
        rules.add(f"h-{k}", f"height: {v};", 1)
        rules.add(f"min-h-{k}", f"min-height: {v};", 1)
        rules.add(f"max-h-{k}", f"max-height: {v};", 1)
        rules.add(f"size-{k}", f"width: {v}; height: {v};")

    rules.add("w-screen", "width: 100vw;", 1)
    rules.add("min-w-screen", "min-width: 100vw;", 1)
    rules.add("max-w-screen", "max-width: 100vw;", 1)
    rules.add("h-screen", "height: 100vh;", 1)
    rules.add("min-h-screen", "min-height: 100vh;", 1)
    rules.add("max-h-screen", "max-height: 100vh;", 1)
    rules.add("size-screen", "width: 100vw; height: 100vh;")

    for k, v in sizes.items():
        for sign in ("", "-"):
            n = f"{sign}{v}"
            rules.add(f"{sign}inset-{k}", f"inset: {n};")
            rules.add(f"{sign}inset-x-{k}", f"left: {n}; right: {n};", 1)
            rules.add(f"{sign}inset-y-{k}", f"top: {n}; bottom: {n};", 1)
            rules.add(f"{sign}top-{k}", f"top: {n};", 2)
            rules.add(f"{sign}left-{k}", f"left: {n};", 2)
            rules.add(f"{sign}right-{k}", f"right: {n};", 2)
            rules.add(f"{sign}bottom-{k}", f"bottom: {n};", 2)


def _key_suffix(key: str) -> str:
    return "" if key == "DEFAULT" else f"-{key}"


def _gen_borders(rules: RuleTable, config: Config) -> None:
    for key, v in config.border_width.items():
        k = _key_suffix(key)
        rules.add(f"border{k}", f"border-width: {v};")
        rules.add(f"border-x{k}", f"border-left-width: {v};border-right-width: {v};", 2)
        rules.add(f"border-y{k}", f"border-top-width: {v};border-bottom-width: {v};", 2)
        rules.add(f"border-t{k}", f"border-top-width: {v};", 4)
        rules.add(f"border-r{k}", f"border-right-width: {v};", 4)
        rules.add(f"border-b{k}", f"border-bottom-width: {v};", 4)
        rules.add(f"border-l{k}", f"border-left-width: {v};", 4)

    for key, v in config.border_radius.items():
        k = _key_suffix(key)
        rules.add(f"rounded{k}", f"border-radius: {v};")
        rules.add(f"rounded-t{k}", f"border-top-left-radius: {v};border-top-right-radius: {v};", 1)
        rules.add(f"rounded-r{k}", f"border-top-right-radius: {v};border-bottom-right-radius: {v};", 1)
        rules.add(f"rounded-b{k}", f"border-bottom-left-radius: {v};border-bottom-right-radius: {v};", 1)
        rules.add(f"rounded-l{k}", f"border-top-left-radius: {v};border-bottom-left-radius: {v};", 1)
        rules.add(f"rounded-tl{k}", f"border-top-left-radius: {v};", 2)
        rules.add(f"rounded-tr{k}", f"border-top-right-radius: {v};", 2)
        rules.add(f"rounded-br{k}", f"border-bottom-right-radius: {v};", 2)
        rules.add(f"rounded-bl{k}", f"border-bottom-left-radius: {v};", 2)


_SPACE_PROPERTIES: dict[str, str] = {
    "p": "padding",
    "m": "margin",
    "-m": "margin",
}


def _gen_spacing(rules: RuleTable, spacing: dict[str, str]) -> None:
    for k, value in spacing.items():
        for prefix, prop in _SPACE_PROPERTIES.items():
            v = f"-{value}" if prefix.startswith("-") else value
            rules.add(f"{prefix}-{k}", f"{prop}: {v};")
            rules.add(f"{prefix}x-{k}", f"{prop}-left: {v};{prop}-right: {v};", 1)
            rules.add(f"{prefix}y-{k}", f"{prop}-top: {v};{prop}-bottom: {v};", 1)
            rules.add(f"{prefix}t-{k}", f"{prop}-top: {v};", 2)
            rules.add(f"{prefix}r-{k}", f"{prop}-right: {v};", 2)
            rules.add(f"{prefix}b-{k}", f"{prop}-bottom: {v};", 2)
            rules.add(f"{prefix}l-{k}", f"{prop}-left: {v};", 2)

        # gap has no physical sides, only the column and row axes.
        rules.add(f"gap-{k}", f"gap: {value};")
        rules.add(f"gap-x-{k}", f"column-gap: {value};", 1)
        rules.add(f"gap-y-{k}", f"row-gap: {value};", 1)

    for k, v in spacing.items():
        rules.add(
            f"space-y-{k}",
            "--tw-space-y-reverse: 0;"
            f"margin-top: calc({v} * calc(1 - var(--tw-space-y-reverse)));"
            f"margin-bottom: calc({v} * var(--tw-space-y-reverse));",
            suffix=SPACE_SUFFIX,
        )
        rules.add(
            f"space-x-{k}",
            "--tw-space-x-reverse: 0;"
            f"margin-right: calc({v} * calc(1 - var(--tw-space-x-reverse)));"
            f"margin-left: calc({v} * var(--tw-space-x-reverse));",
            suffix=SPACE_SUFFIX,
        )


def _gen_shadows(rules: RuleTable, shadows: dict[str, str]) -> None:
    for k, v in shadows.items():
        colored = _RGB_RE.sub("var(--tw-shadow-color)", v)
        name = f"shadow-{k}" if k else "shadow"
        css = (
            "--tw-shadow-y: 1;"
            "--tw-shadow-x: -1;"
            f"--tw-shadow: {v};"
            f"--tw-shadow-colored: {colored};"
            "box-shadow:"
            "var(--tw-ring-offset-shadow, 0 0 #0000),"
            "var(--tw-ring-shadow, 0 0 #0000), var(--tw-shadow);"
        )
        rules.add(name, css, 1 if k == "none" else 0)


def config_to_rules(config: Config) -> RuleTable:
    """Generate the rule lookup table from the compiled *config*."""
    rules = RuleTable()

    _gen_static(rules)
    _gen_palette(rules, config.color)
    _gen_typography(rules, config)
    _gen_sizing(rules, config.size)

    for cursor in config.cursor:
        rules.add(f"cursor-{cursor}", f"cursor: {cursor};")

    _gen_borders(rules, config)

    for k, v in config.column.items():
        rules.add(f"columns-{k}", f"columns: {v};")

    _gen_spacing(rules, config.spacing)
    _gen_shadows(rules, config.shadow)

    logger.debug("Generated %d utility rules", len(rules))
    return rules
