"""Badge geometry.

All geometry is computed in a virtual space where the font size is 110 units
and the badge is ``110 * 1.75`` units tall; the SVG ``viewBox`` uses these
units and the ``width``/``height`` attributes scale it to the device size.

A badge is either two-tone (label box on the left, value box on the right) or
monochrome (a single box holding the value, optionally with an icon).
"""

from __future__ import annotations

from dataclasses import dataclass

from shieldgen.badge import Badge
from shieldgen.colors import Color, is_default
from shieldgen.widths import text_width

FONT_SIZE = 110.0
HEIGHT = FONT_SIZE * 1.75
DEVICE_HEIGHT = 20.0

PADDING = FONT_SIZE * 0.5
GAP = PADDING / 1.5
ICON_SIZE = FONT_SIZE * 1.2

# Offset of the shadow copy drawn under every text run
SHADOW_DX = FONT_SIZE * 0.1 / 2.0
SHADOW_DY = FONT_SIZE * 0.1


@dataclass(frozen=True)
class Layout:
    label_text: str
    value_text: str
    label_text_width: float
    value_text_width: float
    has_text: bool
    has_icon: bool
    monochrome: bool
    label_x: float
    label_width: float
    value_x: float
    value_width: float
    width: float
    height: float
    baseline: float
    radius: float
    device_width: float
    device_height: float

    @property
    def icon_x(self) -> float:
        return PADDING

    @property
    def icon_y(self) -> float:
        return (self.height - ICON_SIZE) / 2.0

    @property
    def value_box_x(self) -> float:
        return self.width - self.value_width


def is_monochrome(
    label_text: str, value_text: str, has_icon: bool, label_color: Color
) -> bool:
    """Whether the badge renders as a single box.

    True for a bare value, for an icon with no label and no label color, and
    when both texts are empty.
    """
    has_text = bool(label_text)
    return (
        (not has_text and not has_icon)
        or (has_icon and not has_text and is_default(label_color))
        or (not label_text and not value_text)
    )


def compute_layout(badge: Badge, has_icon: bool) -> Layout:
    """Lay out ``badge``. ``has_icon`` is whether its icon resolved to a glyph."""
    label_text = (badge.label or "").strip()
    value_text = badge.value.strip()
    has_text = bool(label_text)
    mono = is_monochrome(label_text, value_text, has_icon, badge.label_color)

    ltw = text_width(label_text)
    rtw = text_width(value_text)
    iw = ICON_SIZE if has_icon else 0.0
    content_x = PADDING + iw + GAP if has_icon else PADDING

    if mono:
        lx, lw = 0.0, 0.0
        rx = content_x
        rw = rx - GAP + PADDING if not value_text else rx + rtw + GAP
    else:
        lx = content_x
        lw = lx + ltw + GAP if has_text else lx
        rx = lw + GAP
        rw = rx + rtw + PADDING - lw

    width = lw + rw
    device_height = DEVICE_HEIGHT * badge.scale
    return Layout(
        label_text=label_text,
        value_text=value_text,
        label_text_width=ltw,
        value_text_width=rtw,
        has_text=has_text,
        has_icon=has_icon,
        monochrome=mono,
        label_x=lx,
        label_width=lw,
        value_x=rx,
        value_width=rw,
        width=width,
        height=HEIGHT,
        baseline=HEIGHT * 0.56,
        radius=(FONT_SIZE / 12.0) * badge.radius,
        device_width=width * device_height / HEIGHT,
        device_height=device_height,
    )
