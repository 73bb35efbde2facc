"""Heart rate and pace zone calculations.

Zone model: five zones anchored on a single threshold value. Pace zones
run the opposite way to HR zones: Zone 1 (Recovery) is the *slowest* pace,
i.e. the highest s/km, while it is the *lowest* heart rate.
"""

from __future__ import annotations

from dataclasses import dataclass

from plan_engine.math.units import round_half_up
from plan_engine.models.enums import (
    HR_ZONE_MULTIPLIERS,
    PACE_ZONE_MULTIPLIERS,
    ZONE_NAMES,
    ZoneType,
)


@dataclass(frozen=True)
class Zone:
    """A single HR or pace zone with lower and upper bounds."""

    zone: ZoneType
    name: str
    low: int
    high: int


def _zones_from(threshold: float, multipliers: dict[ZoneType, tuple[float, float]]) -> list[Zone]:
    return [
        Zone(
            zone=zone_type,
            name=ZONE_NAMES[zone_type],
            low=round_half_up(threshold * low_pct),
            high=round_half_up(threshold * high_pct),
        )
        for zone_type, (low_pct, high_pct) in multipliers.items()
    ]


def calculate_pace_zones(threshold_pace_s_per_km: float) -> list[Zone]:
    """Calculate pace zones from threshold pace.

    Args:
        threshold_pace_s_per_km: Threshold pace in seconds per km.

    Returns:
        Five zones, Recovery first. Within a zone ``low`` is the faster
        bound (fewer s/km). No validation: a non-positive threshold gives
        degenerate bounds.
    """
    return _zones_from(threshold_pace_s_per_km, PACE_ZONE_MULTIPLIERS)


def calculate_hr_zones(threshold_hr_bpm: float) -> list[Zone]:
    """Calculate heart rate zones from threshold heart rate.

    Args:
        threshold_hr_bpm: Threshold heart rate in bpm.

    Returns:
        Five zones, Recovery (lowest bpm) first.
    """
    return _zones_from(threshold_hr_bpm, HR_ZONE_MULTIPLIERS)


def find_zone(zones: list[Zone], target_zone: ZoneType) -> Zone | None:
    """Find a specific zone in a list returned by the calculators."""
    for zone in zones:
        if zone.zone == target_zone:
            return zone
    return None
