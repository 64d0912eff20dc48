"""Badge colors.

A color is one of three things:

- a sentinel (``DEFAULT_LABEL`` / ``DEFAULT_VALUE``) meaning "the caller did
  not choose a color", resolved later by whoever built the badge;
- one of the named preset colors (``NamedColor``);
- an arbitrary 3 or 6 digit hex value (``Hex``).

Preset hex values follow the badgen color presets.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Union

_HEX_DIGITS = frozenset(string.hexdigits)

# Substrings that mark a pre-release version
_PRERELEASE_MARKERS = ("alpha", "beta", "canary", "rc", "dev")


class InvalidColor(ValueError):
    """Raised when a string is neither a color name nor a valid hex value."""


class ColorRole(Enum):
    LABEL = "label"
    VALUE = "value"


class NamedColor(Enum):
    GREEN = "3C1"
    BLUE = "08C"
    RED = "E43"
    YELLOW = "DB1"
    ORANGE = "F73"
    PURPLE = "94E"
    PINK = "E5B"
    GREY = "999"
    CYAN = "1BC"
    BLACK = "2A2A2A"

    @property
    def hex(self) -> str:
        return self.value

    def to_css(self) -> str:
        return f"#{self.value}"


@dataclass(frozen=True)
class Hex:
    """A validated hex color, stored lowercase without the leading ``#``."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) not in (3, 6) or not set(self.value) <= _HEX_DIGITS:
            raise InvalidColor(f"Invalid hex color: {self.value!r}")
        object.__setattr__(self, "value", self.value.lower())

    @property
    def hex(self) -> str:
        return self.value

    def to_css(self) -> str:
        return f"#{self.value}"


@dataclass(frozen=True)
class Sentinel:
    """Placeholder for a color the caller left unset."""

    role: ColorRole

    @property
    def hex(self) -> str:
        raise ValueError(f"Unresolved {self.role.value} color has no hex value")

    def to_css(self) -> str:
        raise ValueError(f"Unresolved {self.role.value} color cannot be rendered")


Color = Union[Sentinel, NamedColor, Hex]

DEFAULT_LABEL = Sentinel(ColorRole.LABEL)
DEFAULT_VALUE = Sentinel(ColorRole.VALUE)

# What each sentinel becomes when nobody supplied a better default
_SENTINEL_FALLBACK: dict[ColorRole, Color] = {
    ColorRole.LABEL: Hex("555"),
    ColorRole.VALUE: NamedColor.BLUE,
}

_NAMES: dict[str, NamedColor] = {c.name.lower(): c for c in NamedColor}
_NAMES["gray"] = NamedColor.GREY


def parse_color(text: str) -> Color:
    """Parse a color name (case-insensitive) or a bare 3/6 digit hex value.

    Raises:
        InvalidColor: for anything else, including a leading ``#``.
    """
    lowered = text.lower()
    named = _NAMES.get(lowered)
    if named is not None:
        return named
    return Hex(lowered)


def is_default(color: Color) -> bool:
    """True when ``color`` is one of the "not specified" sentinels."""
    return isinstance(color, Sentinel)


def concrete(color: Color) -> Color:
    """Replace a sentinel with its fallback color; other colors pass through."""
    if isinstance(color, Sentinel):
        return _SENTINEL_FALLBACK[color.role]
    return color


def color_name(color: Color) -> str | None:
    """Lowercase preset name, or None for hex values and sentinels."""
    if isinstance(color, NamedColor):
        return color.name.lower()
    return None


def color_from_version(version: str) -> Color:
    """Pick a color for a version string.

    Cyan for pre-releases, orange for 0.x versions, blue otherwise. This is a
    substring heuristic, not a semver parser.
    """
    if any(marker in version for marker in _PRERELEASE_MARKERS):
        return NamedColor.CYAN
    if version.startswith(("0.", "v0.")):
        return NamedColor.ORANGE
    return NamedColor.BLUE
