"""Build Badges from request options and provider data.

Options are the request's query parameters as a flat ``str -> str`` mapping.
Providers (the per-registry fetchers) contribute *defaults*: a label, a value
and a color. The caller's options win wherever they were given explicitly:

- a provider label applies only when there is no ``label`` option;
- a provider color applies only when the value color is still the
  ``DEFAULT_VALUE`` sentinel, i.e. no color option was given (or it failed to
  parse).

Malformed options never fail a request; they fall back to the field default.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from http import HTTPStatus

from shieldgen.badge import (
    DEFAULT_CACHE_SECONDS,
    UNKNOWN,
    Badge,
    BadgeFormat,
    BadgeStyle,
    DlPeriod,
)
from shieldgen.colors import (
    DEFAULT_LABEL,
    DEFAULT_VALUE,
    Color,
    Hex,
    InvalidColor,
    NamedColor,
    color_from_version,
    concrete,
    is_default,
    parse_color,
)
from shieldgen.formatting import (
    millify,
    millify_iec,
    relative_date,
    render_stars,
    to_min_ver,
)

logger = logging.getLogger(__name__)

Options = Mapping[str, str]

LABEL_COLOR_KEYS = ("lcolor", "labelColor")
VALUE_COLOR_KEYS = ("rcolor", "color", "valueColor")
ICON_KEYS = ("icon", "logo")
ICON_COLOR_KEYS = ("iconColor", "logoColor")
CACHE_KEYS = ("cache", "cacheSeconds")

OPTION_KEYS: frozenset[str] = frozenset(
    ("label", "value", "style", "radius", "scale", "format")
    + LABEL_COLOR_KEYS
    + VALUE_COLOR_KEYS
    + ICON_KEYS
    + ICON_COLOR_KEYS
    + CACHE_KEYS
)


def first_option(options: Options, keys: tuple[str, ...]) -> str | None:
    """Value of the first key in ``keys`` present in ``options``."""
    for key in keys:
        if key in options:
            return options[key]
    return None


def _color_option(options: Options, keys: tuple[str, ...], default: Color) -> Color:
    raw = first_option(options, keys)
    if raw is None:
        return default
    try:
        return parse_color(raw)
    except InvalidColor:
        logger.debug("Ignoring invalid color %s=%r", keys[0], raw)
        return default


def _int_option(options: Options, keys: tuple[str, ...]) -> int | None:
    raw = first_option(options, keys)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.debug("Ignoring non-integer %s=%r", keys[0], raw)
        return None


def _float_option(options: Options, key: str) -> float | None:
    raw = options.get(key)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        logger.debug("Ignoring non-numeric %s=%r", key, raw)
        return None
    return value


def from_options(options: Options) -> Badge:
    """Parse request options into a Badge with no provider data applied."""
    style = BadgeStyle.FLAT
    if "style" in options:
        parsed_style = BadgeStyle.parse(options["style"])
        if parsed_style is None:
            logger.debug("Unknown style %r, using flat", options["style"])
        style = parsed_style or BadgeStyle.FLAT

    badge_format = BadgeFormat.SVG
    if "format" in options:
        parsed = BadgeFormat.parse(options["format"])
        if parsed is None:
            logger.debug("Unknown format %r, using svg", options["format"])
        badge_format = parsed or BadgeFormat.SVG

    scale = _float_option(options, "scale")
    cache = _int_option(options, CACHE_KEYS)

    return Badge(
        label=options.get("label"),
        label_color=_color_option(options, LABEL_COLOR_KEYS, DEFAULT_LABEL),
        value=options.get("value", UNKNOWN),
        value_color=_color_option(options, VALUE_COLOR_KEYS, DEFAULT_VALUE),
        icon=first_option(options, ICON_KEYS),
        icon_color=_color_option(options, ICON_COLOR_KEYS, Hex("fff")),
        style=style,
        radius=_int_option(options, ("radius",)),
        scale=1.0 if scale is None else scale,
        cache_seconds=DEFAULT_CACHE_SECONDS if cache is None else cache,
        format=badge_format,
    )


@dataclass(frozen=True)
class ProviderDefaults:
    """What a provider contributes to a badge.

    ``value`` replaces the option value when set. ``label`` and ``color``
    only fill in what the caller left unspecified.
    """

    label: str | None = None
    value: str | None = None
    color: Color = DEFAULT_VALUE


def resolve(options: Options, defaults: ProviderDefaults | None = None) -> Badge:
    """Merge options with provider defaults into a render-ready Badge.

    The value color never comes back as a sentinel. The label color may,
    since the layout treats an unspecified label color specially.
    """
    badge = from_options(options)
    if defaults is None:
        defaults = ProviderDefaults()

    label = badge.label if badge.label is not None else defaults.label
    value = defaults.value if defaults.value is not None else badge.value
    value_color = defaults.color if is_default(badge.value_color) else badge.value_color

    return replace(badge, label=label, value=value, value_color=concrete(value_color))


def from_options_with(
    options: Options, label: str, value: str, color: Color = DEFAULT_VALUE
) -> Badge:
    """Generic provider badge: default label and color, provider value."""
    return resolve(options, ProviderDefaults(label=label, value=value, color=color))


def version_text(version: str) -> str:
    """Normalize a version for display: 'v' prefix, or 'unknown' when blank."""
    version = version.strip()
    if version in ("", UNKNOWN):
        return UNKNOWN
    if version.startswith("v"):
        return version
    return f"v{version}"


def for_version(options: Options, label: str, version: str) -> Badge:
    text = version_text(version)
    return from_options_with(options, label, text, color_from_version(text))


def for_min_ver(options: Options, label: str, version: str) -> Badge:
    return from_options_with(options, label, to_min_ver(version), NamedColor.BLUE)


def for_license(options: Options, license: str) -> Badge:
    return from_options_with(options, "license", license, NamedColor.BLUE)


def for_dl(options: Options, period: DlPeriod, count: int) -> Badge:
    """Download count, e.g. '1.2M/month', green by default."""
    return from_options_with(
        options, "downloads", f"{millify(count)}{period.value}", NamedColor.GREEN
    )


def for_count(options: Options, label: str, count: int) -> Badge:
    return from_options_with(options, label, millify(count), NamedColor.BLUE)


def for_size(options: Options, label: str, size: int) -> Badge:
    return from_options_with(options, label, millify_iec(size), NamedColor.BLUE)


def for_date(
    options: Options, label: str, when: datetime, now: datetime | None = None
) -> Badge:
    """Freshness badge such as 'last commit: this week'."""
    text, color = relative_date(when, now)
    return from_options_with(options, label, text, color)


def for_rating(options: Options, label: str, score: float, max_score: float = 5.0) -> Badge:
    return from_options_with(options, label, render_stars(score, max_score))


def status_text(status: int) -> str:
    """'404 Not Found' style text for an HTTP status code."""
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return str(status)


def error_badge(
    options: Options | None = None,
    status: int | None = None,
    reason: str | None = None,
) -> Badge:
    """Badge shown when provider data could not be obtained.

    Options may change how it looks (style, scale, format, cache) but not
    what it says.
    """
    if status is not None:
        value = status_text(status)
    else:
        value = reason or UNKNOWN
    logger.warning("Rendering error badge: %s", value)
    badge = from_options(options or {})
    return replace(
        badge,
        label="error",
        label_color=DEFAULT_LABEL,
        value=value,
        value_color=NamedColor.RED,
        icon=None,
    )


PROVIDER_KINDS = (
    "version",
    "license",
    "downloads",
    "count",
    "size",
    "min_version",
    "date",
    "rating",
    "raw",
)


@dataclass(frozen=True)
class ProviderData:
    """Fields extracted by a provider client, plus which constructor to use.

    ``kind`` is one of ``PROVIDER_KINDS``. ``value`` holds a string for
    version/license/min_version/raw, an int for downloads/count/size, a
    datetime for date and a float for rating.
    """

    kind: str
    value: object = None
    label: str | None = None
    color: Color = DEFAULT_VALUE
    period: DlPeriod = DlPeriod.TOTAL
    max_score: float = 5.0


def from_provider(options: Options, data: ProviderData) -> Badge:
    """Route provider data to the matching constructor.

    Raises:
        ValueError: if ``data.kind`` is not a known kind.
    """
    label = data.label or ""
    kind = data.kind
    if kind == "version":
        return for_version(options, label, str(data.value or ""))
    if kind == "license":
        return for_license(options, str(data.value or UNKNOWN))
    if kind == "downloads":
        return for_dl(options, data.period, int(data.value or 0))
    if kind == "count":
        return for_count(options, label, int(data.value or 0))
    if kind == "size":
        return for_size(options, label, int(data.value or 0))
    if kind == "min_version":
        return for_min_ver(options, label, str(data.value or UNKNOWN))
    if kind == "date":
        if not isinstance(data.value, datetime):
            raise ValueError(f"date provider needs a datetime, got {data.value!r}")
        return for_date(options, label, data.value)
    if kind == "rating":
        return for_rating(options, label, float(data.value or 0), data.max_score)
    if kind == "raw":
        return from_options_with(options, label, str(data.value or UNKNOWN), data.color)
    raise ValueError(f"Unknown provider kind {kind!r}; expected one of {', '.join(PROVIDER_KINDS)}")
