"""riskbrief — All default threshold values and configuration constants.

All tuneable values live here. Never hard-code magic numbers in source files.
Import constants from this module; override via EngineConfig at runtime.
"""

from typing import Dict

# ── Severity and incident-type weights ─────────────────────────────────────────
# Per-incident severity weight (FBI UCR-style severity index)
SEVERITY_WEIGHTS: Dict[str, float] = {
    "fatal": 1.0,
    "serious": 0.7,
    "moderate": 0.4,
    "minor": 0.2,
    "unknown": 0.5,
}

# Per-incident type weight
TYPE_WEIGHTS: Dict[str, float] = {
    "kidnapping": 1.0,
    "terrorism": 1.0,
    "attack": 0.9,
    "cult_clash": 0.8,
    "robbery": 0.7,
    "unrest": 0.6,
    "accident": 0.5,
    "other_incident": 0.5,
}

# Weight applied to any severity or type string not listed above
UNKNOWN_CATEGORY_WEIGHT: float = 0.5

# ── Composite score weights (must sum to 1.0) ─────────────────────────────────
SCORE_WEIGHT_VOLUME: float = 0.30
SCORE_WEIGHT_SEVERITY: float = 0.25
SCORE_WEIGHT_TYPE: float = 0.20
SCORE_WEIGHT_RECENCY: float = 0.15
SCORE_WEIGHT_CONCENTRATION: float = 0.10

# ── Score components ───────────────────────────────────────────────────────────
# Zone-weighted incident total at which the volume component saturates
VOLUME_SATURATION: float = 5.0

# Exponential decay constant for recency weighting, in days
RECENCY_DECAY_DAYS: float = 7.0

# Recency weight for an incident whose date cannot be parsed
UNPARSABLE_DATE_RECENCY: float = 0.5

# Recency weight for an incident dated in the future
FUTURE_DATE_RECENCY: float = 1.0

# Score reported when no geographically relevant incidents exist
EMPTY_RISK_SCORE: float = 1.5

# ── Level and confidence thresholds ────────────────────────────────────────────
# Inclusive upper bounds: a score equal to a threshold belongs to the lower level
LEVEL_LOW_MAX: float = 2.5
LEVEL_MODERATE_MAX: float = 4.5
LEVEL_ELEVATED_MAX: float = 6.5

# Relevant-incident counts required for high / medium confidence
CONFIDENCE_HIGH_MIN_COUNT: int = 3
CONFIDENCE_MEDIUM_MIN_COUNT: int = 1

# ── Dynamic risk adjustment ────────────────────────────────────────────────────
# Incidents at most this many days old count as "recent"
DYNAMIC_RECENT_DAYS: int = 7

# An incident at most this many days old counts as "very recent"
DYNAMIC_VERY_RECENT_DAYS: int = 2

# Silence longer than this many days marks an improving trend on high-risk areas
DYNAMIC_CALM_DAYS: int = 14

# Recent-incident counts for the fatal, high-severity and very-recent rules
DYNAMIC_FATAL_MIN_RECENT: int = 3
DYNAMIC_SEVERE_MIN_RECENT: int = 2
DYNAMIC_VERY_RECENT_MIN_RECENT: int = 1

# Static level assumed by the CLI when none is given
DEFAULT_STATIC_RISK: str = "moderate"

# ── Risk-level lookback windows ────────────────────────────────────────────────
# Chronic conflict zones need longer windows for trend analysis
RISK_TIME_WINDOW_DAYS: Dict[str, int] = {
    "EXTREME": 30,
    "VERY HIGH": 21,
    "HIGH": 14,
    "MODERATE": 7,
    "LOW": 7,
}
DEFAULT_TIME_WINDOW_DAYS: int = 7

# ── Logging ────────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "INFO"
