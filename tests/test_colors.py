"""Tests for the color model."""

import pytest

import shieldgen
from shieldgen.colors import (
    DEFAULT_LABEL,
    DEFAULT_VALUE,
    Hex,
    InvalidColor,
    NamedColor,
    color_from_version,
    color_name,
    concrete,
    is_default,
    parse_color,
)


class TestParseColor:
    @pytest.mark.parametrize("name,expected", [
        ("green", NamedColor.GREEN),
        ("Blue", NamedColor.BLUE),
        ("RED", NamedColor.RED),
        ("grey", NamedColor.GREY),
        ("gray", NamedColor.GREY),
        ("black", NamedColor.BLACK),
    ])
    def test_named_colors(self, name, expected):
        assert parse_color(name) is expected

    @pytest.mark.parametrize("text", ["fff", "FFF", "8A2BE2", "00ff00", "a1B2c3"])
    def test_hex_round_trips_through_css(self, text):
        color = parse_color(text)
        assert isinstance(color, Hex)
        assert color.to_css() == "#" + text.lower()

    def test_hex_is_case_insensitive(self):
        assert parse_color("8A2BE2") == Hex("8a2be2")

    @pytest.mark.parametrize("text", [
        "", "f", "ff", "ffff", "fffff", "fffffff", "ggg", "#fff", "12345g",
        "bluish", " red", "magenta",
    ])
    def test_invalid_colors_rejected(self, text):
        with pytest.raises(InvalidColor):
            parse_color(text)

    def test_invalid_color_is_value_error(self):
        with pytest.raises(ValueError):
            parse_color("nope")


class TestHex:
    def test_rejects_bad_payload(self):
        with pytest.raises(InvalidColor):
            Hex("xyz")

    def test_normalizes_to_lowercase(self):
        assert Hex("ABC").value == "abc"


class TestCss:
    def test_named_css(self):
        assert NamedColor.GREEN.to_css() == "#3C1"
        assert NamedColor.RED.to_css() == "#E43"
        assert NamedColor.BLACK.to_css() == "#2A2A2A"

    def test_sentinel_has_no_css(self):
        with pytest.raises(ValueError):
            DEFAULT_VALUE.to_css()

    def test_concrete_resolves_sentinels(self):
        assert concrete(DEFAULT_VALUE) is NamedColor.BLUE
        assert concrete(DEFAULT_LABEL) == Hex("555")

    def test_concrete_passes_through(self):
        assert concrete(NamedColor.PINK) is NamedColor.PINK
        assert concrete(Hex("123")) == Hex("123")


class TestSentinels:
    def test_is_default(self):
        assert is_default(DEFAULT_LABEL)
        assert is_default(DEFAULT_VALUE)
        assert not is_default(NamedColor.BLUE)

    def test_explicit_color_equal_to_fallback_is_not_default(self):
        assert not is_default(parse_color("08c"))
        assert not is_default(parse_color("blue"))

    def test_roles_are_distinct(self):
        assert DEFAULT_LABEL != DEFAULT_VALUE


class TestColorName:
    def test_named(self):
        assert color_name(NamedColor.GREY) == "grey"

    def test_hex_and_sentinel_have_no_name(self):
        assert color_name(Hex("fff")) is None
        assert color_name(DEFAULT_VALUE) is None

    def test_exported(self):
        assert shieldgen.color_name is color_name


class TestColorFromVersion:
    def test_stable(self):
        assert color_from_version("2.0.0") is NamedColor.BLUE

    def test_zero_major(self):
        assert color_from_version("0.9.0") is NamedColor.ORANGE
        assert color_from_version("v0.1") is NamedColor.ORANGE

    @pytest.mark.parametrize("version", [
        "1.0.0-beta.1", "2.0.0-alpha", "3.0.0-rc.1", "1.0.0.dev3", "5.0.0-canary.2",
    ])
    def test_prerelease(self, version):
        assert color_from_version(version) is NamedColor.CYAN

    def test_prerelease_beats_zero_major(self):
        assert color_from_version("0.1.0-beta") is NamedColor.CYAN

    def test_not_a_version(self):
        assert color_from_version("latest") is NamedColor.BLUE
