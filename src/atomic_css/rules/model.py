"""Rule model: Rule dataclass and the RuleTable lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Rule:
    """A utility rule definition.

    Attributes:
        css: Raw declarations without braces, e.g. ``"color: red;"``.
        specificity: Output ordering; rules are written from low to high.
        suffix: Appended to the final selector. ``space-x-*`` rules use
            ``" > :not([hidden]) ~ :not([hidden])"``.
        sibling: A standalone at-rule written next to the rule wherever it
            is used, e.g. the ``@keyframes`` of an animation.
    """

    css: str
    specificity: int = 0
    suffix: str | None = None
    sibling: str | None = None


class RuleTable:
    """Map of rule name (no leading ``.``) to :class:`Rule`.

    Created by :func:`~atomic_css.rules.generator.config_to_rules` and later
    extended by the CSS processor when it reads ``@layer utilities`` blocks.
    """

    def __init__(self, rules: dict[str, Rule] | None = None) -> None:
        self._rules: dict[str, Rule] = {}
        self._positions: dict[str, int] = {}
        for name, rule in (rules or {}).items():
            self.set(name, rule)

    def get(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def set(self, name: str, rule: Rule) -> None:
        if name.startswith("."):
            raise ValueError(f"Rule names must not start with '.': {name!r}")
        if name not in self._rules:
            self._positions[name] = len(self._positions)
        self._rules[name] = rule

    def position(self, name: str) -> int:
        """Insertion index of *name*; overwriting a rule keeps its position."""
        return self._positions[name]

    def add(
        self,
        name: str,
        css: str,
        specificity: int = 0,
        *,
        suffix: str | None = None,
        sibling: str | None = None,
    ) -> None:
        """Shorthand for ``set(name, Rule(...))``."""
        self.set(name, Rule(css, specificity, suffix, sibling))

    def names(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)
