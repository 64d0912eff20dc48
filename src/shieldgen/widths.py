"""Text width measurement for badge labels.

Badges carry an explicit ``textLength`` on every text run, so the width of a
string must be known without a font engine. ``WIDTHS`` holds the advance width
of each Latin-1 code point in Verdana at a font size of 110 units. Anything
outside the table is measured as ``@``.

The values are Verdana per-mille advances scaled by 0.11 and rounded to two
decimals. Another metric table of the same shape can replace ``WIDTHS``
without touching the callers.
"""

from __future__ import annotations

# Indexed by code point
WIDTHS: tuple[float, ...] = (
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 0-7
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 8-15
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 16-23
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 24-31
    38.72, 43.34, 50.49, 89.98, 69.96, 118.36, 79.97, 29.59,  # 32-39
    49.94, 49.94, 69.96, 89.98, 40.04, 49.94, 40.04, 49.94,  # 40-47
    69.96, 69.96, 69.96, 69.96, 69.96, 69.96, 69.96, 69.96,  # 48-55
    69.96, 69.96, 49.94, 49.94, 89.98, 89.98, 89.98, 59.95,  # 56-63
    110.0, 75.24, 75.46, 76.78, 84.81, 69.52, 63.25, 85.25,  # 64-71
    82.61, 46.31, 50.05, 76.23, 61.27, 92.73, 82.28, 86.57,  # 72-79
    66.33, 86.57, 76.45, 75.24, 67.76, 80.52, 75.24, 108.79,  # 80-87
    75.35, 67.65, 75.35, 49.94, 49.94, 49.94, 89.98, 69.96,  # 88-95
    69.96, 66.11, 68.53, 57.31, 68.53, 65.56, 38.72, 68.53,  # 96-103
    69.63, 30.14, 37.84, 65.12, 30.14, 107.03, 69.63, 66.77,  # 104-111
    68.53, 68.53, 46.97, 57.31, 43.34, 69.63, 65.12, 89.98,  # 112-119
    65.12, 65.12, 57.75, 69.85, 49.94, 69.85, 89.98, 0.0,  # 120-127
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 128-135
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 136-143
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 144-151
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 152-159
    38.72, 43.34, 69.96, 69.96, 69.96, 69.96, 49.94, 69.96,  # 160-167
    69.96, 110.0, 59.95, 70.95, 89.98, 49.94, 110.0, 69.96,  # 168-175
    59.62, 89.98, 59.62, 59.62, 69.96, 70.4, 69.96, 40.04,  # 176-183
    69.96, 59.62, 59.95, 70.95, 110.0, 110.0, 110.0, 59.95,  # 184-191
    75.24, 75.24, 75.24, 75.24, 75.24, 75.24, 108.24, 76.78,  # 192-199
    69.52, 69.52, 69.52, 69.52, 46.31, 46.31, 46.31, 46.31,  # 200-207
    85.25, 82.28, 86.57, 86.57, 86.57, 86.57, 86.57, 89.98,  # 208-215
    86.57, 80.52, 80.52, 80.52, 80.52, 67.65, 66.55, 68.2,  # 216-223
    66.11, 66.11, 66.11, 66.11, 66.11, 66.11, 105.05, 57.31,  # 224-231
    65.56, 65.56, 65.56, 65.56, 30.14, 30.14, 30.14, 30.14,  # 232-239
    67.32, 69.63, 66.77, 66.77, 66.77, 66.77, 66.77, 89.98,  # 240-247
    66.77, 69.63, 69.63, 69.63, 69.63, 65.12, 68.53, 65.12,  # 248-255
)

FALLBACK_WIDTH: float = WIDTHS[ord("@")]


def text_width(text: str) -> float:
    """Sum of the advance widths of every character in ``text``."""
    total = 0.0
    for ch in text:
        index = ord(ch)
        total += WIDTHS[index] if index < len(WIDTHS) else FALLBACK_WIDTH
    return total
