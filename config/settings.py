"""riskbrief — EngineConfig and environment-based configuration loading.

All runtime configuration flows through EngineConfig. Environment overrides
are read once when a config object is built.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_STATIC_RISK,
    SCORE_WEIGHT_CONCENTRATION,
    SCORE_WEIGHT_RECENCY,
    SCORE_WEIGHT_SEVERITY,
    SCORE_WEIGHT_TYPE,
    SCORE_WEIGHT_VOLUME,
)

# Load .env file if present; silently skip if missing
load_dotenv()


@dataclass(frozen=True)
class ScoreWeights:
    """Weights for the five composite risk score components."""

    volume: float = SCORE_WEIGHT_VOLUME
    severity: float = SCORE_WEIGHT_SEVERITY
    incident_type: float = SCORE_WEIGHT_TYPE
    recency: float = SCORE_WEIGHT_RECENCY
    concentration: float = SCORE_WEIGHT_CONCENTRATION

    def __post_init__(self) -> None:
        total = (
            self.volume + self.severity + self.incident_type + self.recency + self.concentration
        )
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"ScoreWeights must sum to 1.0, got {total:.4f}")


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class EngineConfig:
    """Single configuration object for an assessment run.

    Carries the score weights, the dynamic adjustment window, and logging
    settings. The engine itself holds no state; the config only parameterizes
    each call.
    """

    # ── Scoring ────────────────────────────────────────────────────────────────
    score_weights: ScoreWeights = field(default_factory=ScoreWeights)

    # ── Dynamic adjustment ─────────────────────────────────────────────────────
    # None means "derive the window from the static risk level"
    window_days: Optional[int] = field(
        default_factory=lambda: _env_optional_int("RISKBRIEF_WINDOW_DAYS")
    )
    default_static_risk: str = field(
        default_factory=lambda: os.getenv("RISKBRIEF_DEFAULT_STATIC_RISK", DEFAULT_STATIC_RISK)
    )

    # ── Logging ────────────────────────────────────────────────────────────────
    log_level: str = field(
        default_factory=lambda: os.getenv("RISKBRIEF_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    )

    def __post_init__(self) -> None:
        if self.window_days is not None and self.window_days < 0:
            raise ValueError(f"window_days must be non-negative, got {self.window_days}")
