"""MCP server for shieldgen.

Exposes badge rendering as MCP tools so an assistant can produce README
badges mid-conversation.
Run via: python3 -m shieldgen.mcp_server
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mcp.server.fastmcp import FastMCP

from shieldgen.badge import BadgeFormat
from shieldgen.cli import load_catalog
from shieldgen.config import apply_defaults
from shieldgen.fixed import FixedBadgeError, fixed_badge, split_format_suffix
from shieldgen.render import badge_to_dict, render
from shieldgen.resolver import resolve
from shieldgen.widths import text_width

mcp = FastMCP(name="shieldgen")

# Icon catalog for every tool call; main() loads the configured file into it
_icons: Mapping[str, str] | None = None


def _rendered(badge) -> dict[str, Any]:
    rendered = render(badge, _icons)
    result: dict[str, Any] = {
        "title": badge.title,
        "content_type": rendered.content_type,
        "cache_control": rendered.cache_control,
        "badge": badge_to_dict(badge),
    }
    if badge.format is BadgeFormat.SVG:
        result["svg"] = rendered.body.decode("utf-8")
    return result


@mcp.tool()
def render_badge(options: dict[str, str] | None = None) -> dict[str, Any]:
    """Render a badge from query-style options.

    options: keys such as label, value, color, labelColor, icon, iconColor,
             style, radius, scale, cache, format.
    """
    badge = resolve(apply_defaults(options or {}))
    return _rendered(badge)


@mcp.tool()
def render_fixed_badge(path: str, options: dict[str, str] | None = None) -> dict[str, Any]:
    """Render a static badge from a label-message-color path.

    path: e.g. 'build-passing-green', 'just%20the%20message-8A2BE2'.
          '_' is a space, '__' an underscore, '--' a dash.
    """
    path, merged = split_format_suffix(path, apply_defaults(options or {}))
    try:
        badge = fixed_badge(path, merged)
    except FixedBadgeError as exc:
        return {"error": str(exc)}
    return _rendered(badge)


@mcp.tool()
def measure_text(text: str) -> dict[str, Any]:
    """Measure the width of text as a badge would (font size 110 units)."""
    width = text_width(text)
    return {"text": text, "width": width, "pixels": round(width / 10, 1)}


def main() -> None:
    global _icons
    _icons = load_catalog()
    mcp.run()


if __name__ == "__main__":
    main()
