"""The Badge value object and its enumerations.

A Badge is built once per request, handed to a renderer and discarded. It is
frozen; constructors in ``shieldgen.resolver`` return new instances instead of
mutating one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from shieldgen.colors import DEFAULT_LABEL, DEFAULT_VALUE, Color, Hex

DEFAULT_CACHE_SECONDS = 86400
MIN_CACHE_SECONDS = 300
MAX_CACHE_SECONDS = DEFAULT_CACHE_SECONDS * 7
MAX_RADIUS = 12
MIN_SCALE = 0.1
MAX_SCALE = 8.0
UNKNOWN = "unknown"


class BadgeStyle(Enum):
    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    PLASTIC = "plastic"
    FOR_THE_BADGE = "for-the-badge"

    @classmethod
    def parse(cls, text: str) -> BadgeStyle | None:
        """Match a style name, with or without dashes. None if unknown."""
        wanted = text.lower().replace("-", "")
        for style in cls:
            if style.value.replace("-", "") == wanted:
                return style
        return None

    @property
    def default_radius(self) -> int:
        return 3 if self is BadgeStyle.FLAT else 0


class BadgeFormat(Enum):
    SVG = "svg"
    JSON = "json"

    @classmethod
    def parse(cls, text: str) -> BadgeFormat | None:
        try:
            return cls(text.lower())
        except ValueError:
            return None


class DlPeriod(Enum):
    """Download-count period and the suffix appended to the count."""

    WEEKLY = "/week"
    MONTHLY = "/month"
    YEARLY = "/year"
    TOTAL = ""


def clamp(value, low, high):
    return max(low, min(high, value))


@dataclass(frozen=True)
class Badge:
    """Everything needed to render one badge.

    ``radius`` left as None takes the style's default. Out-of-range numbers
    are clamped and a blank value becomes ``"unknown"``.
    """

    value: str = UNKNOWN
    label: str | None = None
    label_color: Color = DEFAULT_LABEL
    value_color: Color = DEFAULT_VALUE
    icon: str | None = None
    icon_color: Color = field(default_factory=lambda: Hex("fff"))
    style: BadgeStyle = BadgeStyle.FLAT
    radius: int | None = None
    scale: float = 1.0
    cache_seconds: int = DEFAULT_CACHE_SECONDS
    format: BadgeFormat = BadgeFormat.SVG

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            object.__setattr__(self, "value", UNKNOWN)
        radius = self.style.default_radius if self.radius is None else self.radius
        object.__setattr__(self, "radius", clamp(radius, 0, MAX_RADIUS))
        object.__setattr__(self, "scale", clamp(self.scale, MIN_SCALE, MAX_SCALE))
        object.__setattr__(
            self,
            "cache_seconds",
            clamp(self.cache_seconds, MIN_CACHE_SECONDS, MAX_CACHE_SECONDS),
        )

    @property
    def title(self) -> str:
        """Accessible title: 'label: value', or just the value without a label."""
        label = (self.label or "").strip()
        value = self.value.strip()
        return f"{label}: {value}" if label else value
