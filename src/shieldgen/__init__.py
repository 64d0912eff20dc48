"""shieldgen: deterministic shields-style badge rendering."""

from shieldgen.badge import Badge, BadgeFormat, BadgeStyle, DlPeriod
from shieldgen.colors import Color, InvalidColor, NamedColor, color_name, parse_color
from shieldgen.fixed import FixedBadgeError, fixed_badge, static_badge
from shieldgen.formatting import to_ver_label
from shieldgen.render import RenderedBadge, render
from shieldgen.resolver import (
    PROVIDER_KINDS,
    ProviderData,
    ProviderDefaults,
    error_badge,
    from_options,
    from_provider,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    "PROVIDER_KINDS",
    "Badge",
    "BadgeFormat",
    "BadgeStyle",
    "Color",
    "DlPeriod",
    "FixedBadgeError",
    "InvalidColor",
    "NamedColor",
    "ProviderData",
    "ProviderDefaults",
    "RenderedBadge",
    "color_name",
    "error_badge",
    "fixed_badge",
    "from_options",
    "from_provider",
    "parse_color",
    "render",
    "resolve",
    "static_badge",
    "to_ver_label",
]
