"""Pace and HR target bands for workout steps.

Every band is a pair of multipliers applied to the athlete's threshold and
rounded to whole seconds (pace) or beats (HR). The multipliers are
session-specific and deliberately not snapped to the zone table: an easy
run works at 1.15-1.25x threshold pace while Zone 2 spans 1.10-1.25x.
"""

from __future__ import annotations

from dataclasses import dataclass

from plan_engine.math.units import round_half_up


@dataclass(frozen=True)
class PaceHRTargets:
    """Pace and HR target bounds for a single workout step.

    Pace values are in seconds per km. Lower = faster.
    HR values are in bpm.
    """

    pace_target_low: int | None = None
    pace_target_high: int | None = None
    hr_target_low: int | None = None
    hr_target_high: int | None = None


NO_TARGET = PaceHRTargets()

# (low, high) multipliers of threshold pace
EASY_PACE = (1.15, 1.25)
LONG_RUN_PACE = (1.10, 1.25)
TRANSITION_PACE = (1.10, 1.20)
TEMPO_PACE = (0.98, 1.05)
INTERVAL_PACE = (0.85, 0.92)
RACE_SIM_EASY_START_PACE = (1.05, 1.15)
RACE_SIM_RACE_PACE = (0.95, 1.05)
RACE_SIM_PUSH_FINISH_PACE = (0.88, 0.95)

# (low, high) multipliers of threshold HR
WARMUP_HR = (0.65, 0.75)
AEROBIC_HR = (0.75, 0.85)
TEMPO_HR = (0.88, 0.95)
INTERVAL_HR = (0.92, 1.02)


def pace_band(threshold_pace: float, multipliers: tuple[float, float]) -> tuple[int, int]:
    """Pace bounds in s/km for a (low, high) multiplier pair."""
    low_pct, high_pct = multipliers
    return round_half_up(threshold_pace * low_pct), round_half_up(threshold_pace * high_pct)


def hr_band(threshold_hr: float, multipliers: tuple[float, float]) -> tuple[int, int]:
    """HR bounds in bpm for a (low, high) multiplier pair."""
    low_pct, high_pct = multipliers
    return round_half_up(threshold_hr * low_pct), round_half_up(threshold_hr * high_pct)


def assign_targets(
    threshold_pace: float,
    threshold_hr: float,
    pace: tuple[float, float] | None = None,
    hr: tuple[float, float] | None = None,
) -> PaceHRTargets:
    """Build targets for a step from optional pace and HR multiplier pairs.

    Args:
        threshold_pace: Threshold pace in s/km.
        threshold_hr: Threshold heart rate in bpm.
        pace: Pace multipliers, or None for no pace target.
        hr: HR multipliers, or None for no HR target.

    Returns:
        PaceHRTargets with the requested bounds populated.
    """
    pace_low = pace_high = hr_low = hr_high = None
    if pace is not None:
        pace_low, pace_high = pace_band(threshold_pace, pace)
    if hr is not None:
        hr_low, hr_high = hr_band(threshold_hr, hr)
    return PaceHRTargets(
        pace_target_low=pace_low,
        pace_target_high=pace_high,
        hr_target_low=hr_low,
        hr_target_high=hr_high,
    )
