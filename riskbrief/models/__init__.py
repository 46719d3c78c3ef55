"""riskbrief data models package.

All engine inputs and outputs are typed dataclasses.
Never return raw Dict from analysis code — always use the typed models.
"""

from riskbrief.models.incidents import (
    ClassifiedIncident,
    IncidentType,
    Relevance,
    Severity,
)
from riskbrief.models.risk import (
    DynamicRiskResult,
    RiskAssessment,
    RiskBreakdown,
    RiskScoreResult,
    ScoreConfidence,
    ScoreLevel,
    StaticLevel,
    Trend,
)
from riskbrief.models.zones import (
    ROUTE_ZONE_CONFIGS,
    ZONE_CONFIGS,
    RelevanceZone,
    RouteZone,
    ZoneConfig,
)

__all__ = [
    # incidents
    "ClassifiedIncident",
    "IncidentType",
    "Relevance",
    "Severity",
    # zones
    "RelevanceZone",
    "RouteZone",
    "ZoneConfig",
    "ZONE_CONFIGS",
    "ROUTE_ZONE_CONFIGS",
    # risk
    "RiskScoreResult",
    "RiskBreakdown",
    "DynamicRiskResult",
    "RiskAssessment",
    "ScoreLevel",
    "ScoreConfidence",
    "StaticLevel",
    "Trend",
]
