"""riskbrief — incident relevance, composite risk scoring and dynamic risk adjustment.

Public API surface:
    - classify_incidents / classify_route_incidents: attach relevance zones
    - compute_risk_score: 1–10 composite score for zoned incidents
    - compute_dynamic_risk: static level re-evaluated against recent incidents
    - assess_area / assess_route: all of the above in one call
"""

__version__ = "1.0.0"
__author__ = "riskbrief Contributors"

from config.settings import EngineConfig, ScoreWeights
from riskbrief.engine import (
    assess_area,
    assess_route,
    classify_incidents,
    classify_route_incidents,
    compute_dynamic_risk,
    compute_risk_score,
)
from riskbrief.models import (
    ClassifiedIncident,
    DynamicRiskResult,
    RelevanceZone,
    RiskAssessment,
    RiskScoreResult,
    RouteZone,
)

__all__ = [
    "__version__",
    "EngineConfig",
    "ScoreWeights",
    "assess_area",
    "assess_route",
    "classify_incidents",
    "classify_route_incidents",
    "compute_risk_score",
    "compute_dynamic_risk",
    "ClassifiedIncident",
    "RelevanceZone",
    "RouteZone",
    "RiskScoreResult",
    "DynamicRiskResult",
    "RiskAssessment",
]
