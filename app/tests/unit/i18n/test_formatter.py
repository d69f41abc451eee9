"""Tests for translation_store.i18n.formatter module."""

import pytest

from translation_store.i18n import TranslationTypeError, Value
from translation_store.i18n.formatter import format_template, render_argument


@pytest.mark.unit
class TestFormatTemplate:
    """Tests for format_template()."""

    def test_single_placeholder(self):
        """A single placeholder is replaced."""
        assert format_template("Hello {username}", {"username": "Alice"}) == (
            "Hello Alice"
        )

    def test_repeated_placeholder(self):
        """Every occurrence of a placeholder is replaced."""
        assert format_template("{a}-{a}", {"a": "x"}) == "x-x"

    def test_missing_argument_left_literal(self):
        """Unknown placeholders stay in the output."""
        assert format_template("Hi {name}, {unknown}!", {"name": "Bo"}) == (
            "Hi Bo, {unknown}!"
        )

    def test_no_args_returns_template(self):
        """None or empty args return the template unchanged."""
        assert format_template("Hi {name}", None) == "Hi {name}"
        assert format_template("Hi {name}", {}) == "Hi {name}"

    def test_unpaired_braces_pass_through(self):
        """Lone braces are copied literally."""
        assert format_template("a { b } c {d", {"d": "x"}) == "a { b } c {d"
        assert format_template("}{name}{", {"name": "N"}) == "}N{"

    def test_double_braces(self):
        """Only the inner pair forms a placeholder."""
        assert format_template("{{name}}", {"name": "N"}) == "{N}"

    def test_identifier_may_contain_any_non_brace_character(self):
        """Placeholder names are not limited to word characters."""
        assert format_template("{user.name} {a b}", {"user.name": "U", "a b": "S"}) == (
            "U S"
        )

    def test_substituted_text_is_not_rescanned(self):
        """Braces inside argument values are inserted literally."""
        assert format_template("{a} {b}", {"a": "{b}", "b": "B"}) == "{b} B"

    def test_scalar_rendering(self):
        """Numbers, booleans and null render canonically."""
        template = "{i} {f} {whole} {t} {fl} {n}"
        args = {"i": 42, "f": 2.5, "whole": 3.0, "t": True, "fl": False, "n": None}
        assert format_template(template, args) == "42 2.5 3 true false "

    def test_value_arguments(self):
        """Value instances are accepted as arguments."""
        assert format_template("{x}", {"x": Value.string("v")}) == "v"

    def test_composite_argument_raises(self):
        """Arrays and objects cannot be substituted."""
        with pytest.raises(TranslationTypeError):
            format_template("{items}", {"items": ["a", "b"]})
        with pytest.raises(TranslationTypeError):
            format_template("{obj}", {"obj": {"a": 1}})

    def test_unused_composite_argument_ignored(self):
        """Composite arguments only fail when actually substituted."""
        assert format_template("plain", {"obj": {"a": 1}}) == "plain"


@pytest.mark.unit
class TestRenderArgument:
    """Tests for render_argument()."""

    def test_large_and_small_floats(self):
        """Very large and very small floats use the shortest round-trip form."""
        assert render_argument("x", Value.number(0.1)) == "0.1"
        assert render_argument("x", Value.number(-1.25)) == "-1.25"
        assert render_argument("x", Value.number(1e21)) == "1e+21"
        assert render_argument("x", Value.number(1.5e300)) == "1.5e+300"
        assert render_argument("x", Value.number(-1e16)) == "-1e+16"
        assert render_argument("x", Value.number(1e-7)) == "1e-07"

    def test_integral_floats_below_limit(self):
        """Integral floats under 1e16 drop the trailing .0."""
        assert render_argument("x", Value.number(3.0)) == "3"
        assert render_argument("x", Value.number(-0.0)) == "0"
        assert render_argument("x", Value.number(1e15)) == "1000000000000000"

    def test_negative_integer(self):
        """Integers render in decimal."""
        assert render_argument("x", Value.number(-7)) == "-7"
