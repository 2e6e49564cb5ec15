"""Tests for rule generation from the compiled configuration."""

import pytest

from atomic_css.config import compile_config
from atomic_css.rules import Rule, RuleTable, config_to_rules
from atomic_css.rules.generator import OPACITY_STEPS, SPACE_SUFFIX


@pytest.fixture(scope="module")
def rules() -> RuleTable:
    return config_to_rules(compile_config())


# ---------------------------------------------------------------------------
# RuleTable
# ---------------------------------------------------------------------------


class TestRuleTable:
    def test_get_missing(self):
        assert RuleTable().get("nope") is None

    def test_set_and_overwrite(self):
        table = RuleTable()
        table.set("neon", Rule(css="color: pink;"))
        table.set("neon", Rule(css="color: lime;", specificity=3))
        assert table.get("neon") == Rule(css="color: lime;", specificity=3)
        assert len(table) == 1
        assert "neon" in table

    def test_position_survives_overwrite(self):
        table = RuleTable({"a": Rule(css="x: 1;"), "b": Rule(css="y: 2;")})
        table.set("a", Rule(css="x: 3;"))
        table.set("c", Rule(css="z: 4;"))
        assert [table.position(n) for n in ("a", "b", "c")] == [0, 1, 2]

    def test_rejects_leading_dot(self):
        with pytest.raises(ValueError):
            RuleTable().set(".neon", Rule(css="color: pink;"))

    def test_rule_is_frozen(self):
        rule = Rule(css="color: red;")
        with pytest.raises(AttributeError):
            rule.css = "color: blue;"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestColors:
    def test_base_color_rule(self, rules):
        rule = rules.get("text-green-600")
        assert rule.css == (
            "--tw-text-opacity: 1; color: rgb(22 163 74 / var(--tw-text-opacity));"
        )
        assert rule.specificity == 0

    def test_opacity_variant(self, rules):
        rule = rules.get("bg-green-600/20")
        assert "rgb(22 163 74 / 0.2)" in rule.css
        assert rule.css == "background-color: rgb(22 163 74 / 0.2);"
        assert rule.specificity == 1

    @pytest.mark.parametrize("step", OPACITY_STEPS)
    def test_every_five_percent(self, rules, step):
        assert rules.get(f"border-red-500/{step}") is not None

    def test_no_odd_steps(self, rules):
        assert rules.get("bg-red-500/33") is None

    def test_opacity_companion(self, rules):
        rule = rules.get("bg-opacity-50")
        assert rule.css == "--tw-bg-opacity: 0.5;"
        assert rule.specificity == 2
        assert rules.get("text-opacity-100").css == "--tw-text-opacity: 1;"

    def test_keyword_colors(self, rules):
        assert rules.get("text-current").css == "--tw-text-opacity: 1; color: currentColor;"
        assert rules.get("text-current/50") is None

    def test_directional_border_colors(self, rules):
        assert "border-top-color: rgb(239 68 68" in rules.get("border-t-red-500").css
        x = rules.get("border-x-red-500").css
        assert "border-left-color" in x and "border-right-color" in x

    def test_accent_and_shadow_colors(self, rules):
        assert rules.get("accent-blue-500").specificity == 2
        assert "--tw-shadow-color: rgb(59 130 246 / 0.5);" in rules.get("shadow-blue-500/50").css

    def test_gradient_stops(self, rules):
        assert "--tw-gradient-from: rgb(22 163 74" in rules.get("from-green-600").css
        assert "--tw-gradient-to: rgb(22 163 74 / 0.2)" in rules.get("to-green-600/20").css
        assert rules.get("from-green-600").specificity < rules.get("via-green-600").specificity
        assert rules.get("via-green-600").specificity < rules.get("to-green-600").specificity

    def test_user_color(self):
        table = config_to_rules(compile_config({"color": {"brand": "#ff0000"}}))
        assert table.get("bg-brand/50").css == "background-color: rgb(255 0 0 / 0.5);"


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------


class TestSpacing:
    def test_padding(self, rules):
        assert rules.get("p-4").css == "padding: 1rem;"
        assert rules.get("px-4").css == "padding-left: 1rem;padding-right: 1rem;"
        assert rules.get("pt-4").css == "padding-top: 1rem;"

    def test_directional_outranks_shorthand(self, rules):
        assert rules.get("p-4").specificity < rules.get("px-4").specificity
        assert rules.get("px-4").specificity < rules.get("pl-4").specificity

    def test_negative_margin(self, rules):
        assert rules.get("-m-4").css == "margin: -1rem;"
        assert rules.get("-mx-4").css == "margin-left: -1rem;margin-right: -1rem;"
        assert rules.get("-mt-px").css == "margin-top: -1px;"

    def test_fractional_keys(self, rules):
        assert rules.get("m-0.5").css == "margin: 0.125rem;"

    def test_gap(self, rules):
        assert rules.get("gap-4").css == "gap: 1rem;"
        assert rules.get("gap-x-2").css == "column-gap: 0.5rem;"
        assert rules.get("gap-y-2").css == "row-gap: 0.5rem;"

    def test_space_between_has_suffix(self, rules):
        rule = rules.get("space-x-4")
        assert rule.suffix == SPACE_SUFFIX
        assert "margin-right: calc(1rem * calc(1 - var(--tw-space-x-reverse)));" in rule.css
        assert rules.get("space-y-2").suffix == SPACE_SUFFIX
        assert rules.get("p-4").suffix is None


# ---------------------------------------------------------------------------
# Sizes, borders, radius
# ---------------------------------------------------------------------------


class TestSizes:
    def test_size_from_spacing_and_size(self, rules):
        assert rules.get("w-4").css == "width: 1rem;"
        assert rules.get("w-1/2").css == "width: 50%;"
        assert rules.get("max-w-prose").css == "max-width: 65ch;"
        assert rules.get("size-8").css == "width: 2rem; height: 2rem;"

    def test_screen_variants(self, rules):
        assert rules.get("w-screen").css == "width: 100vw;"
        assert rules.get("min-h-screen").css == "min-height: 100vh;"
        assert rules.get("size-screen").css == "width: 100vw; height: 100vh;"

    def test_inset(self, rules):
        assert rules.get("inset-0").css == "inset: 0px;"
        assert rules.get("-top-4").css == "top: -1rem;"
        assert rules.get("top-4").specificity > rules.get("inset-4").specificity


class TestBorders:
    def test_default_width(self, rules):
        assert rules.get("border").css == "border-width: 1px;"
        assert rules.get("border-2").css == "border-width: 2px;"

    def test_top_border_sorts_after_width(self, rules):
        assert rules.get("border-t-2").specificity > rules.get("border-x-2").specificity
        assert rules.get("border-x-2").specificity > rules.get("border-2").specificity

    def test_radius(self, rules):
        assert rules.get("rounded").css == "border-radius: 0.25rem;"
        assert rules.get("rounded-lg").css == "border-radius: 0.5rem;"
        assert rules.get("rounded-tl-lg").specificity > rules.get("rounded-t-lg").specificity

    def test_columns(self, rules):
        assert rules.get("columns-3").css == "columns: 3;"
        assert rules.get("columns-xs").css == "columns: 20rem;"


# ---------------------------------------------------------------------------
# Static utilities and animations
# ---------------------------------------------------------------------------


class TestStatic:
    def test_display(self, rules):
        assert rules.get("flex").css == "display: flex;"
        assert rules.get("hidden").specificity > rules.get("flex").specificity

    def test_typography(self, rules):
        assert rules.get("font-bold").css == "font-weight: 700;"
        assert rules.get("text-sm").css == "font-size: 0.875rem;line-height: 1.25rem;"
        assert rules.get("font-mono").css.startswith("font-family: ui-monospace")

    def test_opacity(self, rules):
        assert rules.get("opacity-0").css == "opacity: 0;"
        assert rules.get("opacity-50").css == "opacity: 0.5;"
        assert rules.get("opacity-100").css == "opacity: 1;"

    def test_grid(self, rules):
        assert rules.get("grid-cols-3").css == "grid-template-columns: repeat(3, minmax(0, 1fr));"
        assert rules.get("col-span-12").css == "grid-column: span 12 / span 12;"

    def test_cursor(self, rules):
        assert rules.get("cursor-pointer").css == "cursor: pointer;"

    def test_shadow(self, rules):
        assert "box-shadow:" in rules.get("shadow").css
        assert rules.get("shadow-none").specificity == 1
        assert "var(--tw-shadow-color)" in rules.get("shadow-md").css

    def test_transition_and_timing(self, rules):
        assert rules.get("duration-150").css == "transition-duration: 150ms;"
        assert rules.get("transition-opacity").css.startswith("transition-property: opacity;")

    def test_rotate(self, rules):
        assert rules.get("rotate-45").css.startswith("--tw-rotate: 45deg;transform:")


class TestAnimations:
    @pytest.mark.parametrize("name", ["spin", "ping", "pulse", "bounce"])
    def test_has_keyframes_sibling(self, rules, name):
        rule = rules.get(f"animate-{name}")
        assert rule.sibling.startswith(f"@keyframes {name} ")
        assert f"animation: {name} " in rule.css

    def test_animate_none_has_no_sibling(self, rules):
        assert rules.get("animate-none").sibling is None


# ---------------------------------------------------------------------------
# General properties
# ---------------------------------------------------------------------------


class TestGeneration:
    def test_deterministic(self):
        a = config_to_rules(compile_config())
        b = config_to_rules(compile_config())
        assert a.names() == b.names()
        assert all(a.get(n) == b.get(n) for n in a)

    def test_no_leading_dots(self, rules):
        assert not any(name.startswith(".") for name in rules)

    def test_specificities_non_negative(self, rules):
        assert all(rules.get(name).specificity >= 0 for name in rules)
