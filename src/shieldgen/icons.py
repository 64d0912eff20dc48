"""Icon glyph catalog.

Maps an icon name to the ``d`` attribute of a single 24x24 SVG path. The
bundled catalog is read-only; ``load_icons`` builds a new catalog with extra
entries from a JSON file, to be created once at startup and passed to the
renderer.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

_BUILTIN_ICONS: dict[str, str] = {
    "bolt": "M7 2v11h3v9l7-12h-4l4-8z",
    "check": "M9 16.2 4.8 12l-1.4 1.4L9 19 21 7l-1.4-1.4z",
    "circle": "M12 2a10 10 0 1 0 0 20 10 10 0 1 0 0-20z",
    "close": (
        "M19 6.41 17.59 5 12 10.59 6.41 5 5 6.41 10.59 12 5 17.59 6.41 19 "
        "12 13.41 17.59 19 19 17.59 13.41 12z"
    ),
    "code": (
        "M9.4 16.6 4.8 12l4.6-4.6L8 6l-6 6 6 6 1.4-1.4zm5.2 0 4.6-4.6-4.6-4.6"
        "L16 6l6 6-6 6-1.4-1.4z"
    ),
    "download": "M19 9h-4V3H9v6H5l7 7 7-7zM5 18v2h14v-2H5z",
    "heart": (
        "M12 21.35l-1.45-1.32C5.4 15.36 2 12.28 2 8.5 2 5.42 4.42 3 7.5 3"
        "c1.74 0 3.41.81 4.5 2.09C13.09 3.81 14.76 3 16.5 3 19.58 3 22 5.42 "
        "22 8.5c0 3.78-3.4 6.86-8.55 11.54L12 21.35z"
    ),
    "plus": "M19 13h-6v6h-2v-6H5v-2h6V5h2v6h6v2z",
    "square": "M3 3h18v18H3z",
    "star": (
        "M12 17.27 18.18 21l-1.64-7.03L22 9.24l-7.19-.61L12 2 9.19 8.63 "
        "2 9.24l5.46 4.73L5.82 21z"
    ),
}

ICONS: Mapping[str, str] = MappingProxyType(_BUILTIN_ICONS)

_ICON_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" role="img" viewBox="0 0 24 24" '
    'fill="{color}"><path d="{path}" /></svg>'
)


def icon_candidates(name: str) -> list[str]:
    """Catalog keys to try for ``name``, in order."""
    lowered = name.lower()
    squashed = lowered
    for ch in ("-", "!", "_", " "):
        squashed = squashed.replace(ch, "")
    spelled = lowered.replace(".", "dot").replace("+", "plus")
    return [lowered, squashed, spelled]


def lookup_icon(name: str | None, catalog: Mapping[str, str] | None = None) -> str | None:
    """Return the path data for ``name``, or None if no variant is known."""
    if not name:
        return None
    icons = ICONS if catalog is None else catalog
    for key in icon_candidates(name):
        path = icons.get(key)
        if path is not None:
            return path
    return None


def icon_data_uri(
    name: str | None, css_color: str, catalog: Mapping[str, str] | None = None
) -> str | None:
    """Build a base64 ``data:`` URI of the icon filled with ``css_color``."""
    path = lookup_icon(name, catalog)
    if path is None:
        return None
    svg = _ICON_SVG.format(color=css_color, path=path)
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def load_icons(path: Path) -> Mapping[str, str]:
    """Return the bundled catalog merged with the ``{name: path}`` JSON at ``path``.

    Names from the file are lowercased. Non-string entries are skipped.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Icon file must contain a JSON object: {path}")
    merged = dict(_BUILTIN_ICONS)
    for name, glyph in data.items():
        if isinstance(name, str) and isinstance(glyph, str):
            merged[name.lower()] = glyph
    return MappingProxyType(merged)
