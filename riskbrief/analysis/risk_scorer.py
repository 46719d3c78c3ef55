"""Composite risk scoring for riskbrief.

Collapses a set of zoned incidents into a 1–10 score using a five-component
weighted model: proximity-weighted volume, mean severity, mean incident type
weight, exponential recency decay and immediate-zone concentration.
Pure functions — no I/O.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from config.defaults import (
    CONFIDENCE_HIGH_MIN_COUNT,
    CONFIDENCE_MEDIUM_MIN_COUNT,
    EMPTY_RISK_SCORE,
    FUTURE_DATE_RECENCY,
    LEVEL_ELEVATED_MAX,
    LEVEL_LOW_MAX,
    LEVEL_MODERATE_MAX,
    RECENCY_DECAY_DAYS,
    SEVERITY_WEIGHTS,
    TYPE_WEIGHTS,
    UNKNOWN_CATEGORY_WEIGHT,
    UNPARSABLE_DATE_RECENCY,
    VOLUME_SATURATION,
)
from config.settings import ScoreWeights
from riskbrief.models.incidents import ClassifiedIncident, Severity
from riskbrief.models.risk import RiskBreakdown, RiskScoreResult, ScoreConfidence, ScoreLevel
from riskbrief.models.zones import RelevanceZone, RouteZone
from riskbrief.utils.date_utils import (
    days_between,
    is_epoch,
    parse_incident_date,
    round_half_up,
    utc_now,
)

logger = logging.getLogger(__name__)

METHODOLOGY_EMPTY = "No incidents in immediate vicinity"
METHODOLOGY_WEIGHTED = "Multi-criteria weighted analysis (proximity, severity, recency)"

MODE_AREA = "area"
MODE_ROUTE = "route"

# Breakdown bucket → zone, per mode. Only the first three buckets are scored.
_AREA_BUCKETS = {
    "immediate": RelevanceZone.IMMEDIATE,
    "nearby": RelevanceZone.NEARBY,
    "regional": RelevanceZone.SAME_REGION,
    "state": RelevanceZone.SAME_STATE,
    "distant": RelevanceZone.DISTANT,
}
_ROUTE_BUCKETS = {
    "immediate": RouteZone.ON_ROUTE,
    "nearby": RouteZone.ROUTE_STATE,
    "regional": None,
    "state": None,
    "distant": RouteZone.OFF_ROUTE,
}


def severity_weight(severity: Optional[str]) -> float:
    """Weight of a severity value; unknown values weigh 0.5."""
    return SEVERITY_WEIGHTS.get(severity or "", UNKNOWN_CATEGORY_WEIGHT)


def type_weight(incident_type: Optional[str]) -> float:
    """Weight of an incident type; unknown types weigh 0.5."""
    return TYPE_WEIGHTS.get(incident_type or "", UNKNOWN_CATEGORY_WEIGHT)


def recency_weight(raw_date: Optional[str], now: Optional[datetime] = None) -> float:
    """Exponential recency weight exp(-days_ago / 7) for one incident date.

    Args:
        raw_date: Compact incident date string.
        now: Reference time; defaults to the current UTC time.

    Returns:
        Weight in [0, 1]. Unparsable dates weigh 0.5; future dates weigh 1.0.
    """
    parsed = parse_incident_date(raw_date)
    if is_epoch(parsed):
        return UNPARSABLE_DATE_RECENCY
    days_ago = days_between(parsed, now or utc_now())
    if days_ago < 0:
        return FUTURE_DATE_RECENCY
    return math.exp(-days_ago / RECENCY_DECAY_DAYS)


def score_level(score: float) -> str:
    """Bucket a 1–10 score into low / moderate / elevated / high (upper bounds inclusive)."""
    if score <= LEVEL_LOW_MAX:
        return ScoreLevel.LOW
    if score <= LEVEL_MODERATE_MAX:
        return ScoreLevel.MODERATE
    if score <= LEVEL_ELEVATED_MAX:
        return ScoreLevel.ELEVATED
    return ScoreLevel.HIGH


def score_confidence(relevant_count: int) -> str:
    if relevant_count >= CONFIDENCE_HIGH_MIN_COUNT:
        return ScoreConfidence.HIGH
    if relevant_count >= CONFIDENCE_MEDIUM_MIN_COUNT:
        return ScoreConfidence.MEDIUM
    return ScoreConfidence.LOW


def dominant_incident_type(incidents: Sequence[ClassifiedIncident]) -> str:
    """Most frequent incident type; ties go to the type encountered first."""
    if not incidents:
        return "none"
    counts = Counter(i.incident_type or "unknown" for i in incidents)
    # Counter preserves insertion order, and max() keeps the first maximum
    return max(counts, key=lambda t: counts[t])


def _partition(
    incidents: Sequence[ClassifiedIncident], mode: str
) -> Dict[str, List[ClassifiedIncident]]:
    if mode == MODE_AREA:
        bucket_zones = _AREA_BUCKETS
    elif mode == MODE_ROUTE:
        bucket_zones = _ROUTE_BUCKETS
    else:
        raise ValueError(f"mode must be '{MODE_AREA}' or '{MODE_ROUTE}', got {mode!r}")

    buckets: Dict[str, List[ClassifiedIncident]] = {name: [] for name in bucket_zones}
    zone_to_bucket = {zone: name for name, zone in bucket_zones.items() if zone is not None}
    for incident in incidents:
        bucket = zone_to_bucket.get(incident.zone)
        if bucket is not None:
            buckets[bucket].append(incident)
    return buckets


def compute_risk_score(
    incidents: Sequence[ClassifiedIncident],
    weights: Optional[ScoreWeights] = None,
    now: Optional[datetime] = None,
    mode: str = MODE_AREA,
) -> RiskScoreResult:
    """Compute the composite 1–10 risk score for zoned incidents.

    Only incidents in the three closest area zones (immediate, nearby,
    same_region) — or on_route and route_state in route mode — are scored.
    Wider zones are counted in the breakdown only. Incidents without a
    relevance tag are ignored.

    Args:
        incidents: Incidents with relevance attached by a classifier.
        weights: Component weights; defaults to 0.30/0.25/0.20/0.15/0.10.
        now: Reference time for recency; defaults to the current UTC time.
        mode: "area" or "route".

    Returns:
        RiskScoreResult. With no relevant incidents the score is 1.5 (low).

    Raises:
        TypeError: If incidents is None.
        ValueError: If mode is not "area" or "route".
    """
    if incidents is None:
        raise TypeError("incidents must be a sequence of ClassifiedIncident, got None")
    weights = weights or ScoreWeights()
    now = now or utc_now()

    buckets = _partition(incidents, mode)
    immediate = buckets["immediate"]
    relevant = immediate + buckets["nearby"] + buckets["regional"]

    if not relevant:
        logger.debug(
            "Risk score: no relevant incidents among %d (mode=%s) — short-circuit %.1f",
            len(incidents), mode, EMPTY_RISK_SCORE,
        )
        return RiskScoreResult(
            score=EMPTY_RISK_SCORE,
            level=ScoreLevel.LOW,
            confidence=ScoreConfidence.HIGH if incidents else ScoreConfidence.LOW,
            methodology=METHODOLOGY_EMPTY,
            breakdown=RiskBreakdown(
                state_count=len(buckets["state"]),
                distant_count=len(buckets["distant"]),
            ),
        )

    n = len(relevant)
    weighted_count = sum(i.relevance.score for i in relevant)

    components = {
        "volume": min(weighted_count / VOLUME_SATURATION, 1.0),
        "severity": sum(severity_weight(i.severity) for i in relevant) / n,
        "incident_type": sum(type_weight(i.incident_type) for i in relevant) / n,
        "recency": sum(recency_weight(i.date, now) for i in relevant) / n,
        "concentration": len(immediate) / n,
    }
    composite = (
        components["volume"] * weights.volume
        + components["severity"] * weights.severity
        + components["incident_type"] * weights.incident_type
        + components["recency"] * weights.recency
        + components["concentration"] * weights.concentration
    )
    score = min(max(round_half_up(1 + composite * 9, 1), 1.0), 10.0)

    breakdown = RiskBreakdown(
        immediate_count=len(immediate),
        nearby_count=len(buckets["nearby"]),
        regional_count=len(buckets["regional"]),
        state_count=len(buckets["state"]),
        distant_count=len(buckets["distant"]),
        weighted_total=round_half_up(weighted_count, 1),
        dominant_type=dominant_incident_type(relevant),
        has_fatalities=any(i.severity == Severity.FATAL for i in relevant),
    )
    result = RiskScoreResult(
        score=score,
        level=score_level(score),
        confidence=score_confidence(n),
        methodology=METHODOLOGY_WEIGHTED,
        breakdown=breakdown,
        components={name: round_half_up(value, 4) for name, value in components.items()},
    )
    logger.debug(
        "Risk score: %.1f (%s) from %d relevant incidents (mode=%s, weighted=%.1f)",
        result.score, result.level, n, mode, breakdown.weighted_total,
    )
    return result


def _newest_first(incidents: List[ClassifiedIncident]) -> List[ClassifiedIncident]:
    return sorted(incidents, key=lambda i: parse_incident_date(i.date), reverse=True)


def group_incidents_by_zone(
    incidents: Sequence[ClassifiedIncident],
) -> Dict[str, List[ClassifiedIncident]]:
    """Group area-mode incidents for display, newest first within each group.

    Distant and untagged incidents are left out.

    Returns:
        Dict with keys immediate, nearby, regional and state_wide.
    """
    groups: Dict[str, List[ClassifiedIncident]] = {
        "immediate": [],
        "nearby": [],
        "regional": [],
        "state_wide": [],
    }
    zone_to_group = {
        RelevanceZone.IMMEDIATE: "immediate",
        RelevanceZone.NEARBY: "nearby",
        RelevanceZone.SAME_REGION: "regional",
        RelevanceZone.SAME_STATE: "state_wide",
    }
    for incident in incidents:
        group = zone_to_group.get(incident.zone)
        if group is not None:
            groups[group].append(incident)
    return {name: _newest_first(members) for name, members in groups.items()}


def group_incidents_by_route_zone(
    incidents: Sequence[ClassifiedIncident],
) -> Dict[str, List[ClassifiedIncident]]:
    """Group route-mode incidents for display, newest first within each group.

    Returns:
        Dict with keys on_route, route_state and off_route.
    """
    groups: Dict[str, List[ClassifiedIncident]] = {zone.value: [] for zone in RouteZone}
    for incident in incidents:
        if isinstance(incident.zone, RouteZone):
            groups[incident.zone.value].append(incident)
    return {name: _newest_first(members) for name, members in groups.items()}
