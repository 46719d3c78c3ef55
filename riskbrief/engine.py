"""riskbrief assessment engine.

Runs the full assessment for one query: relevance classification, composite
risk scoring, display grouping and dynamic risk adjustment. The engine holds
no state between calls; every input is passed in and the result is a fresh
RiskAssessment.

Usage:
    from riskbrief.engine import assess_area

    assessment = assess_area("lekki", "lagos", incidents, static_level="moderate")
    print(assessment.risk_score.score, assessment.dynamic_risk.adjusted_risk)
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import List, Optional, Sequence

from config.settings import EngineConfig
from riskbrief.analysis.dynamic_risk import compute_dynamic_risk
from riskbrief.analysis.relevance import classify_incidents
from riskbrief.analysis.risk_scorer import (
    MODE_AREA,
    MODE_ROUTE,
    compute_risk_score,
    group_incidents_by_route_zone,
    group_incidents_by_zone,
)
from riskbrief.analysis.route_relevance import classify_route_incidents
from riskbrief.analysis.time_windows import time_window_for_risk
from riskbrief.models.incidents import ClassifiedIncident
from riskbrief.models.risk import RiskAssessment
from riskbrief.registry.zone_registry import ZoneRegistry
from riskbrief.utils.date_utils import is_epoch, parse_incident_date, utc_now
from riskbrief.utils.location_utils import normalize_location
from riskbrief.utils.logging_utils import QueryContextAdapter, get_query_logger

__all__ = [
    "assess_area",
    "assess_route",
    "make_query_id",
    "classify_incidents",
    "classify_route_incidents",
    "compute_risk_score",
    "compute_dynamic_risk",
]


def make_query_id(mode: str, *parts: str) -> str:
    """Build a stable, readable identifier for an assessment query.

    Args:
        mode: "area" or "route".
        *parts: Query components (state and anchor, or route states).

    Returns:
        Identifier such as ``area:lagos:lekki`` or ``route:lagos>oyo``.
    """
    slugs = [re.sub(r"-+", "-", normalize_location(p)).strip("-") or "unknown" for p in parts]
    if mode == MODE_ROUTE:
        return f"{mode}:{'>'.join(slugs)}"
    return ":".join([mode] + slugs)


def _resolve_window(static_level: str, config: EngineConfig) -> int:
    if config.window_days is not None:
        return config.window_days
    return time_window_for_risk(static_level)


def _data_warnings(incidents: Sequence[ClassifiedIncident]) -> List[str]:
    warnings: List[str] = []
    undated = sum(1 for i in incidents if is_epoch(parse_incident_date(i.date)))
    if undated:
        warnings.append(f"{undated} incident(s) have an unparsable date")
    unlocated = sum(1 for i in incidents if not normalize_location(i.location_extracted))
    if unlocated:
        warnings.append(f"{unlocated} incident(s) have no extracted location")
    return warnings


def _primary(incidents: Sequence[ClassifiedIncident]) -> List[ClassifiedIncident]:
    """Incidents in zones that count toward the primary tally."""
    return [i for i in incidents if i.zone is not None and i.zone.config.include_in_primary_count]


def assess_area(
    anchor: str,
    anchor_state: str,
    incidents: Sequence[ClassifiedIncident],
    static_level: Optional[str] = None,
    config: Optional[EngineConfig] = None,
    now: Optional[datetime] = None,
    registry: Optional[ZoneRegistry] = None,
) -> RiskAssessment:
    """Assess risk around a single area.

    Args:
        anchor: Area or city the user searched for.
        anchor_state: State of the anchor.
        incidents: Classified incidents from the upstream LLM service.
        static_level: Baseline risk level; defaults to config.default_static_risk.
        config: Engine configuration; built from the environment if omitted.
        now: Reference time shared by scoring and adjustment.
        registry: Reference data; defaults to the bundled registry.

    Returns:
        RiskAssessment in area mode.

    Raises:
        TypeError: If incidents is None.
        ValueError: If the configured window is negative.
    """
    config = config or EngineConfig()
    now = now or utc_now()
    static_level = static_level or config.default_static_risk
    query_id = make_query_id(MODE_AREA, anchor_state, anchor)
    qlog = get_query_logger("engine", query_id)

    zoned = classify_incidents(anchor, anchor_state, incidents, registry=registry)
    return _finish(query_id, MODE_AREA, zoned, static_level, config, now, qlog)


def assess_route(
    route_states: Sequence[str],
    incidents: Sequence[ClassifiedIncident],
    static_level: Optional[str] = None,
    config: Optional[EngineConfig] = None,
    now: Optional[datetime] = None,
    registry: Optional[ZoneRegistry] = None,
) -> RiskAssessment:
    """Assess risk along a route through an ordered sequence of states.

    Args:
        route_states: States traversed by the route, in travel order.
        incidents: Classified incidents from the upstream LLM service.
        static_level: Baseline risk level; defaults to config.default_static_risk.
        config: Engine configuration; built from the environment if omitted.
        now: Reference time shared by scoring and adjustment.
        registry: Reference data; defaults to the bundled registry.

    Returns:
        RiskAssessment in route mode.

    Raises:
        TypeError: If incidents is None.
        ValueError: If route_states is empty or the configured window is negative.
    """
    config = config or EngineConfig()
    now = now or utc_now()
    static_level = static_level or config.default_static_risk
    query_id = make_query_id(MODE_ROUTE, *route_states)
    qlog = get_query_logger("engine", query_id)

    zoned = classify_route_incidents(route_states, incidents, registry=registry)
    return _finish(query_id, MODE_ROUTE, zoned, static_level, config, now, qlog)


def _finish(
    query_id: str,
    mode: str,
    zoned: List[ClassifiedIncident],
    static_level: str,
    config: EngineConfig,
    now: datetime,
    qlog: QueryContextAdapter,
) -> RiskAssessment:
    window_days = _resolve_window(static_level, config)
    qlog.info("Assessing %d incidents (static=%s, window=%dd)", len(zoned), static_level, window_days)

    risk_score = compute_risk_score(zoned, weights=config.score_weights, now=now, mode=mode)
    dynamic_risk = compute_dynamic_risk(static_level, _primary(zoned), window_days, now=now)
    if mode == MODE_ROUTE:
        groups = group_incidents_by_route_zone(zoned)
    else:
        groups = group_incidents_by_zone(zoned)

    warnings = _data_warnings(zoned)
    for warning in warnings:
        qlog.warning(warning)

    qlog.info(
        "Score %.1f (%s, confidence=%s); dynamic %s -> %s (%s)",
        risk_score.score,
        risk_score.level,
        risk_score.confidence,
        dynamic_risk.static_risk,
        dynamic_risk.adjusted_risk,
        dynamic_risk.trend,
    )
    return RiskAssessment(
        query_id=query_id,
        mode=mode,
        incidents=zoned,
        groups=groups,
        risk_score=risk_score,
        dynamic_risk=dynamic_risk,
        warnings=warnings,
    )
