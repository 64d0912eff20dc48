"""Human-readable value formatting for badge text."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from shieldgen.colors import Color, NamedColor

_SI_UNITS = ("", "K", "M", "B", "T")
_IEC_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


def _scaled(n: float, base: float, units: tuple[str, ...]) -> tuple[str, str]:
    """Divide ``n`` by ``base`` until it drops below it; one decimal, no trailing .0."""
    i = 0
    while n >= base and i < len(units) - 1:
        n /= base
        i += 1
    label = f"{n:.1f}"
    if label.endswith(".0"):
        label = label[:-2]
    return label, units[i]


def millify(n: int) -> str:
    """Decimal magnitude suffix: 999 -> '999', 1500 -> '1.5K', 1234567 -> '1.2M'."""
    label, unit = _scaled(float(n), 1_000.0, _SI_UNITS)
    return f"{label}{unit}"


def millify_iec(n: int) -> str:
    """Binary magnitude suffix: 1024 -> '1 KiB', 1536 -> '1.5 KiB', 500 -> '500 B'."""
    label, unit = _scaled(float(n), 1_024.0, _IEC_UNITS)
    return f"{label} {unit}"


def to_min_ver(version: str) -> str:
    """Display form of a version constraint: '>=3.8' -> '≥3.8'."""
    return version.replace(">=", "≥").replace("<=", "≤")


def to_ver_label(versions: list[str]) -> str:
    """Collapse a list of versions: one as-is, two joined with '|', more as a range."""
    if not versions:
        return "unknown"
    if len(versions) == 1:
        return versions[0]
    if len(versions) == 2:
        return f"{versions[0]} | {versions[1]}"
    return f"{versions[0]} – {versions[-1]}"


def render_stars(score: float, max_score: float = 5.0) -> str:
    """Five-slot star rating, e.g. 3.5 of 5 -> '★★★½☆'."""
    if max_score <= 0 or not math.isfinite(score):
        return "☆" * 5
    stars = min(max(score / (max_score / 5.0), 0.0), 5.0)
    whole = int(stars)
    line = "★" * whole
    if stars - math.floor(stars) >= 0.5:
        line += "½"
    if len(line) < 5:
        line += "☆" * (5 - len(line))
    return line


def relative_date(when: datetime, now: datetime | None = None) -> tuple[str, Color]:
    """Describe how long ago ``when`` was, with a freshness color.

    Naive datetimes are treated as UTC.
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    days = int((now - when).total_seconds() / 86400)

    if days in (0, 1):
        return ("today" if days == 0 else "yesterday"), NamedColor.GREEN
    if 2 <= days <= 6:
        return "this week", NamedColor.YELLOW
    if 7 <= days <= 29:
        return "this month", NamedColor.YELLOW
    if 30 <= days <= 365:
        return "this year", NamedColor.ORANGE
    return "long ago", NamedColor.GREY
