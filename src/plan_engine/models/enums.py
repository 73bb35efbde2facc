"""Enumerations and training constants for the plan engine.

String-valued enums carry the persisted vocabulary verbatim, so ``.value``
can be written straight into a stored record or an export document.
"""

from enum import Enum, IntEnum


class SessionType(str, Enum):
    """Session types. RECOVERY and STRENGTH are never generated."""

    EASY = "easy"
    INTERVAL = "interval"
    TEMPO = "tempo"
    LONG = "long"
    RECOVERY = "recovery"
    RACE_SIM = "race_sim"
    STRENGTH = "strength"


class StepType(str, Enum):
    """Workout step types."""

    WARMUP = "warmup"
    WORK = "work"
    RECOVER = "recover"
    COOLDOWN = "cooldown"


class DurationType(str, Enum):
    """How a step's duration is measured: seconds for TIME, meters for DISTANCE."""

    TIME = "time"
    DISTANCE = "distance"


class PrimaryTarget(str, Enum):
    """Which target dimension the athlete should follow for a session."""

    PACE = "pace"
    HR = "hr"


class ExportType(str, Enum):
    JSON = "json"
    FIT = "fit"


class ExportRange(str, Enum):
    WEEK = "week"
    MONTH = "month"


class ZoneType(IntEnum):
    """Five intensity zones, Recovery (1) to VO2max (5)."""

    ZONE_1 = 1
    ZONE_2 = 2
    ZONE_3 = 3
    ZONE_4 = 4
    ZONE_5 = 5


# Canonical weekly order, Monday first.
DAY_KEYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
WEEKEND_DAYS = frozenset({"sat", "sun"})

DAY_LABELS = {
    "mon": "Monday",
    "tue": "Tuesday",
    "wed": "Wednesday",
    "thu": "Thursday",
    "fri": "Friday",
    "sat": "Saturday",
    "sun": "Sunday",
}

# ---------------------------------------------------------------------------
# Zone multipliers (fraction of threshold)
# ---------------------------------------------------------------------------
# Pace zones: a slower zone has a *higher* s/km multiplier.
ZONE_NAMES = {
    ZoneType.ZONE_1: "Recovery",
    ZoneType.ZONE_2: "Easy",
    ZoneType.ZONE_3: "Tempo",
    ZoneType.ZONE_4: "Threshold",
    ZoneType.ZONE_5: "VO2max",
}

PACE_ZONE_MULTIPLIERS = {
    ZoneType.ZONE_1: (1.25, 1.40),
    ZoneType.ZONE_2: (1.10, 1.25),
    ZoneType.ZONE_3: (0.98, 1.10),
    ZoneType.ZONE_4: (0.92, 0.98),
    ZoneType.ZONE_5: (0.82, 0.92),
}

HR_ZONE_MULTIPLIERS = {
    ZoneType.ZONE_1: (0.65, 0.75),
    ZoneType.ZONE_2: (0.75, 0.85),
    ZoneType.ZONE_3: (0.85, 0.92),
    ZoneType.ZONE_4: (0.92, 1.00),
    ZoneType.ZONE_5: (1.00, 1.08),
}

# ---------------------------------------------------------------------------
# Athlete defaults
# ---------------------------------------------------------------------------
DEFAULT_THRESHOLD_PACE_S_PER_KM = 330  # 5:30/km
DEFAULT_THRESHOLD_HR_BPM = 165

# Budgets used when a day has no (or a zero) minute budget.
DEFAULT_LONG_RUN_MIN = 90
DEFAULT_QUALITY_MIN = 45
DEFAULT_EASY_MIN = 30

# ---------------------------------------------------------------------------
# Weekly structure
# ---------------------------------------------------------------------------
QUALITY_DAY_MIN_MINUTES = 45
MAX_QUALITY_DAYS = 2

# Every 4th week (week index 3, 7, 11, ...) is a recovery week.
RECOVERY_WEEK_CYCLE = 4
RECOVERY_LONG_RUN_FACTOR = 0.6
RECOVERY_QUALITY_FACTOR = 0.7
RECOVERY_EASY_FACTOR = 0.6
EASY_RUN_FACTOR = 0.8

# Phase cut-offs for the quality-session rotation.
EARLY_PHASE_END = 0.3
MID_PHASE_END = 0.7

# Long-run notes switch to late tempo segments past this phase.
LONG_RUN_TEMPO_PHASE = 0.5

# ---------------------------------------------------------------------------
# Session structure (seconds)
# ---------------------------------------------------------------------------
STRUCTURED_WARMUP_S = 600
STRUCTURED_COOLDOWN_S = 300
LONG_RUN_COOLDOWN_S = 600
EASY_WARMUP_CAP_S = 300
EASY_WARMUP_FRACTION = 0.15

TEMPO_MAIN_FRACTION = 0.7

INTERVAL_WORK_S = 120
INTERVAL_REP_DIVISOR_S = 240
INTERVAL_MIN_REPS = 3
INTERVAL_MAX_REPS = 8
INTERVAL_MIN_RECOVERY_S = 30

RACE_SIM_SPLITS = (0.4, 0.4, 0.2)

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
EXPORT_FORMAT_TAG = "spartan-trainer-v1"
EXPORT_WINDOW_DAYS = {
    ExportRange.WEEK: 7,
    ExportRange.MONTH: 30,
}
