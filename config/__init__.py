"""riskbrief configuration package."""

from config.defaults import (
    DEFAULT_LOG_LEVEL,
    EMPTY_RISK_SCORE,
    RECENCY_DECAY_DAYS,
    SEVERITY_WEIGHTS,
    TYPE_WEIGHTS,
    VOLUME_SATURATION,
)
from config.settings import EngineConfig, ScoreWeights

__all__ = [
    "EngineConfig",
    "ScoreWeights",
    "SEVERITY_WEIGHTS",
    "TYPE_WEIGHTS",
    "VOLUME_SATURATION",
    "RECENCY_DECAY_DAYS",
    "EMPTY_RISK_SCORE",
    "DEFAULT_LOG_LEVEL",
]
