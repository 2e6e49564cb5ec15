"""Convert rules, breakpoints and scanned class names into the utilities layer."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Mapping

from atomic_css.rules import RuleTable

__all__ = [
    "OutputRule",
    "UtilitiesLayerBuilder",
    "extract_candidates",
    "make_output_rule",
    "make_utilities_layer_builder",
    "merge_duplicate_rules",
    "stringify_utilities",
]

_CLASS_NAME_RE = re.compile(r"[a-z\-][a-z:\-/0-9.]+")
_SELECTOR_ESCAPE_RE = re.compile(r"[:/.]")


@dataclass(frozen=True)
class OutputRule:
    """A rule which will be written out as CSS.

    Attributes:
        selector: The final selector, e.g. ``.hover\\:bg-red-600:hover``.
        breakpoint: The breakpoint name (``"md"``) or ``""``.
        specificity: Used to sort rules before stringifying.
        css: Declarations without braces.
        sibling: An at-rule written alongside, such as ``@keyframes``.
        position: The rule's insertion index in the rule table; breaks
            specificity ties so output never depends on scan order.
    """

    selector: str
    breakpoint: str
    specificity: int
    css: str
    sibling: str | None = None
    position: int = 0


def extract_candidates(sources: Iterable[str]) -> Iterator[str]:
    """Yield every class-name-shaped substring of every source."""
    for source in sources:
        for match in _CLASS_NAME_RE.finditer(source):
            yield match.group(0)


def escape_class_name(class_name: str) -> str:
    return _SELECTOR_ESCAPE_RE.sub(lambda m: "\\" + m.group(0), class_name)


def make_output_rule(
    class_name: str, rules: RuleTable, breakpoints: Mapping[str, str]
) -> OutputRule | None:
    """Resolve *class_name* into an :class:`OutputRule`.

    Returns ``None`` when the base name (the part after the last ``:``) has
    no rule.
    """
    *modifiers, name = class_name.split(":")
    rule = rules.get(name)
    if rule is None:
        return None

    selector = "." + escape_class_name(class_name)
    breakpoint = ""
    for modifier in modifiers:
        if modifier in breakpoints:
            breakpoint = modifier
        elif modifier == "dark":
            selector = f".dark {selector}"
        else:
            selector = f"{selector}:{modifier}"
    if rule.suffix:
        selector += rule.suffix

    return OutputRule(
        selector=selector,
        breakpoint=breakpoint,
        specificity=rule.specificity,
        css=rule.css,
        sibling=rule.sibling,
        position=rules.position(name),
    )


def merge_duplicate_rules(output_rules: Iterable[OutputRule]) -> list[OutputRule]:
    """Combine rules that differ only by selector.

    ``text-white`` and ``hover:text-white`` share breakpoint, specificity and
    css, so they become one rule with selector
    ``.text-white,.hover\\:text-white:hover``. Selectors are sorted and
    distinct siblings concatenated in sorted order, so the result does not
    depend on the order of *output_rules*.
    """
    groups: dict[tuple[str, int, str], list[OutputRule]] = {}
    for rule in output_rules:
        key = (rule.breakpoint, rule.specificity, rule.css)
        groups.setdefault(key, []).append(rule)

    merged = []
    for group in groups.values():
        selectors = sorted({r.selector for r in group})
        siblings = sorted({r.sibling for r in group if r.sibling})
        merged.append(
            replace(
                group[0],
                selector=",".join(selectors),
                sibling="".join(siblings) or None,
                position=min(r.position for r in group),
            )
        )
    return merged


def stringify_utilities(
    output_rules: Iterable[OutputRule], breakpoints: Mapping[str, str]
) -> str:
    """Serialize output rules into ``@layer utilities{...}``."""
    # Siblings (generally @keyframes) are written once.
    siblings: set[str] = set()
    buckets: dict[str, list[str]] = {}
    # The unprefixed bucket comes first, then breakpoints in configured order.
    order = [""] + list(breakpoints)
    rank = {name: i for i, name in enumerate(order)}
    merged = sorted(
        merge_duplicate_rules(output_rules),
        key=lambda r: (r.specificity, r.position, rank[r.breakpoint]),
    )

    for rule in merged:
        bucket = buckets.setdefault(rule.breakpoint, [])
        bucket.append(f"{rule.selector}{{{rule.css}}}")
        if rule.sibling and rule.sibling not in siblings:
            bucket.append(rule.sibling)
            siblings.add(rule.sibling)

    css = []
    for breakpoint in order:
        bucket = buckets.get(breakpoint)
        if not bucket:
            continue
        body = "\n".join(bucket)
        css.append(f"{breakpoints[breakpoint]} {{{body}}}" if breakpoint else body)
    return "@layer utilities{" + "\n".join(css) + "}"


class UtilitiesLayerBuilder:
    """Accumulates output rules from scanned sources.

    :meth:`update` is additive: each distinct candidate is resolved at most
    once for the lifetime of the builder, whether or not it matched a rule.
    """

    def __init__(self, rules: RuleTable, breakpoints: Mapping[str, str]) -> None:
        self.rules = rules
        self.breakpoints = dict(breakpoints)
        self._output_rules: list[OutputRule] = []
        self._seen: set[str] = set()

    @property
    def output_rules(self) -> list[OutputRule]:
        return list(self._output_rules)

    def update(self, sources: Iterable[str]) -> int:
        """Scan *sources* (file contents, not names); return the count of new rules."""
        added = 0
        for class_name in extract_candidates(sources):
            if class_name in self._seen:
                continue
            self._seen.add(class_name)
            rule = make_output_rule(class_name, self.rules, self.breakpoints)
            if rule is not None:
                self._output_rules.append(rule)
                added += 1
        return added

    def to_string(self) -> str:
        return stringify_utilities(self._output_rules, self.breakpoints)

    def __str__(self) -> str:
        return self.to_string()


def make_utilities_layer_builder(
    rules: RuleTable, breakpoints: Mapping[str, str]
) -> UtilitiesLayerBuilder:
    """Create a builder that converts class names into ``@layer utilities`` CSS."""
    return UtilitiesLayerBuilder(rules, breakpoints)
