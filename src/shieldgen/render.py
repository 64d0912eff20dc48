"""SVG and JSON output for a resolved Badge.

The SVG sets ``textLength`` on every text run to the measured width, so a
client without Verdana still stretches the text to the same box and the
badge has the same size everywhere.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from html import escape

from shieldgen.badge import Badge, BadgeFormat, BadgeStyle
from shieldgen.colors import concrete
from shieldgen.icons import icon_data_uri
from shieldgen.layout import FONT_SIZE, ICON_SIZE, SHADOW_DX, SHADOW_DY, compute_layout
from shieldgen.resolver import Options, error_badge

SVG_CONTENT_TYPE = "image/svg+xml"
JSON_CONTENT_TYPE = "application/json"

_FONT_FAMILY = "Verdana,Geneva,DejaVu Sans,sans-serif"


@dataclass(frozen=True)
class RenderedBadge:
    body: bytes
    content_type: str
    cache_control: str


def cache_control(badge: Badge) -> str:
    seconds = badge.cache_seconds
    return f"public, max-age={seconds}, s-maxage=300, stale-while-revalidate={seconds}"


def _num(value: float) -> str:
    """Compact number for SVG attributes: 55.0 -> '55', 36.66666 -> '36.667'."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _text_runs(text: str, x: float, y: float, length: float) -> str:
    body = escape(text)
    tl = _num(length)
    return (
        f'<text textLength="{tl}" x="{_num(x + SHADOW_DX)}" y="{_num(y + SHADOW_DY)}" '
        f'fill="#000" opacity="0.25">{body}</text>'
        f'<text textLength="{tl}" x="{_num(x)}" y="{_num(y)}">{body}</text>'
    )


def render_svg(badge: Badge, icons: Mapping[str, str] | None = None) -> str:
    """Render ``badge`` as an SVG document string."""
    icon_uri = icon_data_uri(badge.icon, concrete(badge.icon_color).to_css(), icons)
    layout = compute_layout(badge, has_icon=icon_uri is not None)
    w, h = _num(layout.width), _num(layout.height)
    title = escape(badge.title)

    gradient = ""
    overlay = ""
    if badge.style is BadgeStyle.FLAT:
        gradient = (
            '<linearGradient id="s" x2="0" y2="100%">'
            '<stop offset="0" stop-opacity=".1" stop-color="#eee"/>'
            '<stop offset="1" stop-opacity=".1"/>'
            "</linearGradient>"
        )
        overlay = f'<rect x="0" y="0" width="{w}" height="{h}" fill="url(#s)"/>'

    label_box = ""
    if layout.has_text or layout.has_icon:
        label_box = (
            f'<rect x="0" y="0" width="{w}" height="{h}" '
            f'fill="{concrete(badge.label_color).to_css()}"/>'
        )
    value_box = (
        f'<rect x="{_num(layout.value_box_x)}" y="0" width="{_num(layout.value_width)}" '
        f'height="{h}" fill="{concrete(badge.value_color).to_css()}" rx="0"/>'
    )

    image = ""
    if icon_uri is not None:
        size = _num(ICON_SIZE)
        image = (
            f'<image x="{_num(layout.icon_x)}" y="{_num(layout.icon_y)}" '
            f'width="{size}" height="{size}" href="{icon_uri}"/>'
        )

    texts = ""
    if layout.has_text:
        texts += _text_runs(
            layout.label_text, layout.label_x, layout.baseline, layout.label_text_width
        )
    texts += _text_runs(
        layout.value_text, layout.value_x, layout.baseline, layout.value_text_width
    )

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {w} {h}" '
        f'width="{_num(layout.device_width)}" height="{_num(layout.device_height)}" '
        f'role="img" aria-label="{title}">'
        f"<title>{title}</title>"
        f"{gradient}"
        f'<mask id="r"><rect width="{w}" height="{h}" rx="{_num(layout.radius)}" fill="#fff"/></mask>'
        f'<g mask="url(#r)">{label_box}{value_box}{overlay}</g>'
        f"{image}"
        f'<g fill="#fff" font-family="{_FONT_FAMILY}" font-size="{_num(FONT_SIZE)}" '
        f'text-anchor="start" dominant-baseline="middle" text-rendering="geometricPrecision">'
        f"{texts}</g>"
        "</svg>"
    )


def badge_to_dict(badge: Badge) -> dict:
    """JSON-ready view of ``badge`` with colors as CSS strings."""
    return {
        "label": badge.label,
        "labelColor": concrete(badge.label_color).to_css(),
        "value": badge.value,
        "color": concrete(badge.value_color).to_css(),
        "icon": badge.icon,
        "iconColor": concrete(badge.icon_color).to_css(),
        "style": badge.style.value,
        "radius": badge.radius,
        "scale": badge.scale,
        "cacheSeconds": badge.cache_seconds,
        "format": badge.format.value,
    }


def render_json(badge: Badge) -> str:
    return json.dumps(badge_to_dict(badge), ensure_ascii=False)


def render(badge: Badge, icons: Mapping[str, str] | None = None) -> RenderedBadge:
    """Serialize ``badge`` in its own format, with response metadata."""
    if badge.format is BadgeFormat.JSON:
        body, content_type = render_json(badge), JSON_CONTENT_TYPE
    else:
        body, content_type = render_svg(badge, icons), SVG_CONTENT_TYPE
    return RenderedBadge(
        body=body.encode("utf-8"),
        content_type=content_type,
        cache_control=cache_control(badge),
    )


def render_error(
    options: Options | None = None,
    status: int | None = None,
    reason: str | None = None,
) -> RenderedBadge:
    """Render the error badge used when a provider fails."""
    return render(error_badge(options, status=status, reason=reason))
