"""Static badges whose content comes from the URL path.

Path grammar: ``label-message-color``, ``message-color`` or ``message``.

- ``_`` and ``%20`` become spaces;
- ``__`` is a literal underscore;
- ``--`` is a literal dash.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shieldgen.badge import Badge
from shieldgen.colors import DEFAULT_VALUE, Color, InvalidColor, parse_color
from shieldgen.resolver import Options, ProviderDefaults, resolve

logger = logging.getLogger(__name__)

# Placeholders that survive the space and dash handling
_UNDERSCORE = "\ue000"
_DASH = "\ue001"

FORMAT_SUFFIXES = (".svg", ".json")


class FixedBadgeError(ValueError):
    """The path does not split into one, two or three segments."""

    def __init__(self, path: str, segments: int):
        super().__init__(f"Invalid badge path {path!r}: expected 1-3 segments, got {segments}")
        self.path = path
        self.segments = segments


@dataclass(frozen=True)
class FixedParts:
    label: str
    value: str
    color: Color


def _restore(segment: str) -> str:
    return segment.replace(_UNDERSCORE, "_").replace(_DASH, "-")


def _color_or_default(text: str) -> Color:
    try:
        return parse_color(text)
    except InvalidColor:
        return DEFAULT_VALUE


def _value_color(options: Options, path_color: Color) -> Color:
    """A ``color`` option replaces the path color, even when it does not parse."""
    if "color" in options:
        return _color_or_default(options["color"])
    return path_color


def parse_fixed_path(path: str) -> FixedParts:
    """Split a static badge path into label, value and color.

    Raises:
        FixedBadgeError: if the path has more than three segments.
    """
    protected = path.replace("__", _UNDERSCORE).replace("--", _DASH)
    protected = protected.replace("_", " ").replace("%20", " ")
    parts = protected.split("-")

    if len(parts) == 1:
        label, value, color = "", parts[0], DEFAULT_VALUE
    elif len(parts) == 2:
        label, value, color = "", parts[0], _color_or_default(parts[1])
    elif len(parts) == 3:
        label, value, color = parts[0], parts[1], _color_or_default(parts[2])
    else:
        logger.info("Rejected badge path %r (%d segments)", path, len(parts))
        raise FixedBadgeError(path, len(parts))

    return FixedParts(label=_restore(label), value=_restore(value), color=color)


def fixed_badge(path: str, options: Options) -> Badge:
    """Badge for a ``label-message-color`` path.

    ``label``, ``value`` and color options replace the matching path segment.
    """
    parts = parse_fixed_path(path)
    return resolve(
        options,
        ProviderDefaults(
            label=parts.label or None,
            value=options.get("value", parts.value),
            color=_value_color(options, parts.color),
        ),
    )


def static_badge(label: str, value: str, color: str, options: Options) -> Badge:
    """Badge for the three-part ``/badge/{label}/{value}/{color}`` form."""
    return resolve(
        options,
        ProviderDefaults(
            label=label,
            value=options.get("value", value),
            color=_value_color(options, _color_or_default(color)),
        ),
    )


def split_format_suffix(path: str, options: Options) -> tuple[str, dict[str, str]]:
    """Strip a ``.svg``/``.json`` suffix from ``path`` into the ``format`` option.

    Returns the bare path and a copy of the options.
    """
    merged = dict(options)
    for suffix in FORMAT_SUFFIXES:
        if path.endswith(suffix):
            merged["format"] = suffix[1:]
            return path[: -len(suffix)], merged
    return path, merged
