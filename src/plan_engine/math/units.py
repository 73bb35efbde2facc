"""Unit conversions between canonical numbers and display strings.

Canonical units: pace in seconds per km, durations in seconds, distances
in meters. All functions are pure.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (413 for 412.5).

    Python's ``round`` uses banker's rounding, which would shift zone bounds
    by one second for thresholds such as 330 s/km x 1.25.
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ParsedPace:
    """Result of parsing an "M:SS" pace string.

    ``parsed`` is False when the input was malformed and ``seconds`` was
    defaulted to 0.
    """

    seconds: int
    parsed: bool


def sec_per_km_to_display(sec: float) -> str:
    """Convert seconds per km to "M:SS". e.g. 330 -> '5:30'."""
    mins, secs = divmod(round_half_up(sec), 60)
    return f"{mins}:{secs:02d}"


def parse_pace(display: str) -> ParsedPace:
    """Parse an "M:SS" string into seconds per km without ever raising."""
    parts = display.split(":")
    if len(parts) != 2:
        return ParsedPace(seconds=0, parsed=False)
    try:
        mins = int(parts[0].strip())
        secs = int(parts[1].strip())
    except ValueError:
        return ParsedPace(seconds=0, parsed=False)
    return ParsedPace(seconds=mins * 60 + secs, parsed=True)


def display_to_sec_per_km(display: str) -> int:
    """Convert "M:SS" to seconds per km; malformed input gives 0."""
    return parse_pace(display).seconds


def seconds_to_display(sec: int) -> str:
    """Convert seconds to '45s', '10min' or '4min 30s'."""
    if sec < 60:
        return f"{sec}s"
    mins, remainder = divmod(sec, 60)
    if remainder == 0:
        return f"{mins}min"
    return f"{mins}min {remainder}s"


def meters_to_display(meters: int) -> str:
    """Convert meters to '400m' or '1.5km'."""
    if meters >= 1000:
        return f"{meters / 1000:.1f}km"
    return f"{meters}m"


def format_pace_range(low: float | None, high: float | None) -> str:
    """Format a pace range. low = faster (lower s/km), high = slower."""
    if low is None and high is None:
        return "--"
    if low is not None and high is not None:
        return f"{sec_per_km_to_display(low)}-{sec_per_km_to_display(high)}/km"
    return f"{sec_per_km_to_display(low if low is not None else high)}/km"


def format_hr_range(low: int | None, high: int | None) -> str:
    """Format a heart rate range. e.g. 124, 140 -> '124-140 bpm'."""
    if low is None and high is None:
        return "--"
    if low is not None and high is not None:
        return f"{low}-{high} bpm"
    return f"{low if low is not None else high} bpm"
