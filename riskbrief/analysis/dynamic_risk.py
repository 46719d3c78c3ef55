"""Dynamic risk adjustment for riskbrief.

Re-evaluates a static (baseline) risk level against the incidents observed in
a recent time window. Escalation only: the level can rise on a burst of
recent, severe incidents, and a long quiet period on a high-risk area only
marks the trend as improving without lowering the level.
Pure functions — no I/O.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from config.defaults import (
    DYNAMIC_CALM_DAYS,
    DYNAMIC_FATAL_MIN_RECENT,
    DYNAMIC_RECENT_DAYS,
    DYNAMIC_SEVERE_MIN_RECENT,
    DYNAMIC_VERY_RECENT_DAYS,
    DYNAMIC_VERY_RECENT_MIN_RECENT,
)
from riskbrief.models.incidents import ClassifiedIncident, Severity
from riskbrief.models.risk import DynamicRiskResult, StaticLevel, Trend
from riskbrief.utils.date_utils import (
    days_between,
    is_epoch,
    parse_incident_date,
    round_half_up,
    utc_now,
)

logger = logging.getLogger(__name__)

# Escalation transitions per rule; static levels not listed stay unchanged
_FATAL_BURST: Dict[str, str] = {
    StaticLevel.LOW: StaticLevel.HIGH,
    StaticLevel.MODERATE: StaticLevel.HIGH,
    StaticLevel.HIGH: StaticLevel.VERY_HIGH,
}
_SEVERE_BURST: Dict[str, str] = {
    StaticLevel.LOW: StaticLevel.MODERATE,
    StaticLevel.MODERATE: StaticLevel.HIGH,
}
_VERY_RECENT: Dict[str, str] = {
    StaticLevel.LOW: StaticLevel.MODERATE,
}
_CALM_ELIGIBLE = (StaticLevel.HIGH, StaticLevel.VERY_HIGH)


def _normalize_level(level: str) -> str:
    return " ".join(level.lower().split())


def _match_casing(label: str, static_level: str) -> str:
    """Upper-case an escalated label when the caller supplied an upper-case level."""
    return label.upper() if static_level.isupper() else label


def _incidents_in_window(
    incidents: Sequence[ClassifiedIncident], window_days: int, now: datetime
) -> List[Tuple[float, ClassifiedIncident]]:
    """(days_ago, incident) pairs within [now - window_days, now], newest first."""
    in_window: List[Tuple[float, ClassifiedIncident]] = []
    for incident in incidents:
        parsed = parse_incident_date(incident.date)
        if is_epoch(parsed):
            continue
        days_ago = days_between(parsed, now)
        if 0 <= days_ago <= window_days:
            in_window.append((days_ago, incident))
    in_window.sort(key=lambda pair: pair[0])
    return in_window


def _summary(count: int, window_days: int, fatal: int, serious: int, days_since_last: int) -> str:
    return (
        f"Risk assessment based on {count} incident(s) in past {window_days} days "
        f"({fatal} fatal, {serious} serious). "
        f"Most recent: {days_since_last} days ago."
    )


def compute_dynamic_risk(
    static_level: str,
    incidents: Sequence[ClassifiedIncident],
    window_days: int,
    now: Optional[datetime] = None,
) -> DynamicRiskResult:
    """Adjust a static risk level using incidents from the last window_days.

    Rules, first matching condition wins (no fall-through):
        1. ≥3 incidents in the past 7 days and any fatal in the window:
           low/moderate → high, high → very high.
        2. ≥2 incidents in the past 7 days and any fatal or serious:
           low → moderate, moderate → high.
        3. ≥1 incident in the past 7 days and the latest ≤2 days old:
           low → moderate.
        4. Latest incident >14 days old on a high / very high area:
           level unchanged, trend improving.
    A matching rule with no transition for the static level leaves the level
    unchanged with a stable trend.

    Args:
        static_level: Baseline level (low, moderate, high, very high, extreme),
            any casing. An upper-case input gets upper-case escalations.
        incidents: Incidents to consider (typically the zoned incidents).
        window_days: Look-back window in days.
        now: Reference time; defaults to the current UTC time.

    Returns:
        DynamicRiskResult with a populated reasoning string.

    Raises:
        TypeError: If incidents is None.
        ValueError: If window_days is negative.
    """
    if incidents is None:
        raise TypeError("incidents must be a sequence of ClassifiedIncident, got None")
    if window_days < 0:
        raise ValueError(f"window_days must be non-negative, got {window_days}")
    now = now or utc_now()

    in_window = _incidents_in_window(incidents, window_days, now)
    if not in_window:
        logger.debug("Dynamic risk: no incidents in %d-day window — static %s kept", window_days, static_level)
        return DynamicRiskResult(
            static_risk=static_level,
            adjusted_risk=static_level,
            days_since_last_incident=None,
            trend=Trend.STABLE,
            reasoning=(
                f"No recent incidents in the past {window_days} days. "
                "Risk level remains at static baseline."
            ),
            incident_count=0,
            window_days=window_days,
        )

    days_since_last = in_window[0][0]
    days_since_last_int = int(round_half_up(days_since_last))
    recent = sum(1 for days_ago, _ in in_window if days_ago <= DYNAMIC_RECENT_DAYS)
    fatal = sum(1 for _, i in in_window if i.severity == Severity.FATAL)
    serious = sum(1 for _, i in in_window if i.severity == Severity.SERIOUS)
    high_severity = fatal + serious

    level = _normalize_level(static_level)
    adjusted: Optional[str] = None
    trend = Trend.STABLE
    lead = ""

    if recent >= DYNAMIC_FATAL_MIN_RECENT and fatal > 0:
        adjusted = _FATAL_BURST.get(level)
        if adjusted is not None:
            lead = (
                f"Multiple recent incidents ({recent} in past {DYNAMIC_RECENT_DAYS} days) "
                "including fatalities. Risk elevated."
            )
    elif recent >= DYNAMIC_SEVERE_MIN_RECENT and high_severity > 0:
        adjusted = _SEVERE_BURST.get(level)
        if adjusted is not None:
            lead = (
                f"Recent incidents ({recent} in past {DYNAMIC_RECENT_DAYS} days) "
                "with serious incidents. Risk elevated."
            )
    elif recent >= DYNAMIC_VERY_RECENT_MIN_RECENT and days_since_last <= DYNAMIC_VERY_RECENT_DAYS:
        adjusted = _VERY_RECENT.get(level)
        if adjusted is not None:
            lead = f"Very recent incident ({days_since_last_int} days ago). Risk temporarily elevated."
    elif days_since_last > DYNAMIC_CALM_DAYS:
        if level in _CALM_ELIGIBLE:
            trend = Trend.IMPROVING
            lead = (
                f"No incidents in past {DYNAMIC_CALM_DAYS} days. Risk may be stabilizing, "
                "but static level remains due to historical patterns."
            )

    if adjusted is not None:
        trend = Trend.WORSENING
        adjusted_risk = _match_casing(adjusted, static_level)
    else:
        adjusted_risk = static_level

    summary = _summary(len(in_window), window_days, fatal, serious, days_since_last_int)
    reasoning = f"{lead} {summary}" if lead else summary

    logger.debug(
        "Dynamic risk: %s -> %s (%s), %d in window, %d recent, last %.2f days ago",
        static_level, adjusted_risk, trend, len(in_window), recent, days_since_last,
    )
    return DynamicRiskResult(
        static_risk=static_level,
        adjusted_risk=adjusted_risk,
        days_since_last_incident=days_since_last_int,
        trend=trend,
        reasoning=reasoning,
        incident_count=len(in_window),
        window_days=window_days,
    )
