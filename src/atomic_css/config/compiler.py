"""Configuration compiler: merges user overrides onto the built-in tokens.

The compiled :class:`Config` is in the form the rule generator wants:

    colors       "#16a34a"  ->  "22 163 74"
    breakpoints  "768px"    ->  "@media (min-width: 768px)"
    size         spacing scale plus the size-only keywords
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from atomic_css.config import defaults

__all__ = [
    "Category",
    "CategoryKind",
    "CATEGORIES",
    "Config",
    "compile_config",
    "hex_to_rgb",
    "load_config_file",
]

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class CategoryKind(Enum):
    """How user values for a category combine with the defaults."""

    LIST = "list"  # defaults followed by user values
    MAP = "map"  # shallow merge, user values win


@dataclass(frozen=True)
class Category:
    """One design-token category.

    Attributes:
        name: The :class:`Config` field holding the compiled values.
        alias: The camelCase key accepted in user overrides.
        kind: Whether the category is list- or map-valued.
        default: The built-in values.
    """

    name: str
    alias: str
    kind: CategoryKind
    default: Any


CATEGORIES: tuple[Category, ...] = (
    Category("color", "color", CategoryKind.MAP, defaults.COLOR),
    Category("font_family", "fontFamily", CategoryKind.MAP, defaults.FONT_FAMILY),
    Category("font_size", "fontSize", CategoryKind.MAP, defaults.FONT_SIZE),
    Category("font_weight", "fontWeight", CategoryKind.MAP, defaults.FONT_WEIGHT),
    Category("breakpoint", "breakpoint", CategoryKind.MAP, defaults.BREAKPOINT),
    Category("border_radius", "borderRadius", CategoryKind.MAP, defaults.BORDER_RADIUS),
    Category("border_width", "borderWidth", CategoryKind.MAP, defaults.BORDER_WIDTH),
    Category("size", "size", CategoryKind.MAP, defaults.SIZE),
    Category("spacing", "spacing", CategoryKind.MAP, defaults.SPACING),
    Category("shadow", "shadow", CategoryKind.MAP, defaults.SHADOW),
    Category("column", "column", CategoryKind.MAP, defaults.COLUMN),
    Category("cursor", "cursor", CategoryKind.LIST, defaults.CURSOR),
)


@dataclass(frozen=True)
class Config:
    """The compiled design-token configuration."""

    color: dict[str, str] = field(default_factory=dict)
    font_family: dict[str, str] = field(default_factory=dict)
    font_size: dict[str, tuple[str, str]] = field(default_factory=dict)
    font_weight: dict[str, str] = field(default_factory=dict)
    breakpoint: dict[str, str] = field(default_factory=dict)
    border_radius: dict[str, str] = field(default_factory=dict)
    border_width: dict[str, str] = field(default_factory=dict)
    size: dict[str, str] = field(default_factory=dict)
    spacing: dict[str, str] = field(default_factory=dict)
    shadow: dict[str, str] = field(default_factory=dict)
    column: dict[str, str] = field(default_factory=dict)
    cursor: tuple[str, ...] = ()


def hex_to_rgb(color: str) -> str:
    """Convert a hex color to its space-separated rgb numbers.

    ``#ff0002`` becomes ``"255 0 2"`` and ``#f21`` becomes ``"255 34 17"``.
    Anything that is not a 3 or 6 digit hex color is returned unchanged.
    """
    if not _HEX_RE.match(color):
        return color
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"{r} {g} {b}"


def _to_media_query(value: str) -> str:
    if value.startswith("@media"):
        return value
    return f"@media (min-width: {value})"


def _user_values(user_config: Mapping[str, Any], category: Category) -> Any:
    if category.name in user_config:
        return user_config[category.name]
    return user_config.get(category.alias)


def compile_config(user_config: Mapping[str, Any] | None = None) -> Config:
    """Return the full configuration with *user_config* merged onto the defaults.

    Keys in *user_config* may use either the field names of :class:`Config`
    or the camelCase aliases (``fontSize``, ``borderRadius``...). Keys that
    name no known category are dropped.
    """
    user_config = user_config or {}

    known = {c.name for c in CATEGORIES} | {c.alias for c in CATEGORIES}
    for key in user_config:
        if key not in known:
            logger.warning("Ignoring unknown configuration key %r", key)

    merged: dict[str, Any] = {}
    for category in CATEGORIES:
        values = _user_values(user_config, category)
        if category.kind is CategoryKind.LIST:
            merged[category.name] = tuple(category.default) + tuple(values or ())
        else:
            merged[category.name] = {**category.default, **(values or {})}

    merged["color"] = {k: hex_to_rgb(v) for k, v in merged["color"].items()}
    merged["breakpoint"] = {
        k: _to_media_query(v) for k, v in merged["breakpoint"].items()
    }
    # JSON overrides arrive as lists.
    merged["font_size"] = {k: tuple(v) for k, v in merged["font_size"].items()}
    merged["size"] = {**merged["spacing"], **merged["size"]}

    return Config(**merged)


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON file of configuration overrides."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a JSON object")
    return data
