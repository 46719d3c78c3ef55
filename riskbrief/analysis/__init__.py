"""riskbrief analysis package.

Pure analytical functions only — no I/O, no network calls, no side effects.
All functions operate on typed models from riskbrief.models.
"""

from riskbrief.analysis.dynamic_risk import compute_dynamic_risk
from riskbrief.analysis.relevance import classify_incidents, classify_zone
from riskbrief.analysis.risk_scorer import (
    compute_risk_score,
    group_incidents_by_route_zone,
    group_incidents_by_zone,
    recency_weight,
    score_level,
)
from riskbrief.analysis.route_relevance import (
    classify_route_incidents,
    classify_route_zone,
    resolve_incident_state,
)
from riskbrief.analysis.time_windows import time_window_for_risk

__all__ = [
    "classify_zone",
    "classify_incidents",
    "classify_route_zone",
    "classify_route_incidents",
    "resolve_incident_state",
    "compute_risk_score",
    "group_incidents_by_zone",
    "group_incidents_by_route_zone",
    "recency_weight",
    "score_level",
    "compute_dynamic_risk",
    "time_window_for_risk",
]
