"""Risk result models for riskbrief.

RiskScoreResult summarizes zoned incidents as a 1–10 composite score;
DynamicRiskResult compares a static baseline with the recent-incident signal;
RiskAssessment bundles both with the zoned incidents for the briefing
generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from riskbrief.models.incidents import ClassifiedIncident


class ScoreLevel:
    """Discrete levels of the composite risk score."""

    LOW = "low"
    MODERATE = "moderate"
    ELEVATED = "elevated"
    HIGH = "high"


class ScoreConfidence:
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class StaticLevel:
    """Static (baseline) risk levels understood by the dynamic adjuster."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very high"
    EXTREME = "extreme"


class Trend:
    IMPROVING = "improving"
    STABLE = "stable"
    WORSENING = "worsening"


@dataclass(frozen=True)
class RiskBreakdown:
    """Per-zone counts and headline facts behind a risk score."""

    immediate_count: int = 0
    nearby_count: int = 0
    regional_count: int = 0
    state_count: int = 0
    distant_count: int = 0
    weighted_total: float = 0.0
    dominant_type: str = "none"
    has_fatalities: bool = False


@dataclass(frozen=True)
class RiskScoreResult:
    """Composite risk score for a query (1.0–10.0)."""

    score: float
    level: str            # ScoreLevel value
    confidence: str       # ScoreConfidence value
    methodology: str
    breakdown: RiskBreakdown
    components: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class DynamicRiskResult:
    """Static risk level re-evaluated against a recent-incident window."""

    static_risk: str
    adjusted_risk: str
    days_since_last_incident: Optional[int]
    trend: str            # Trend value
    reasoning: str
    incident_count: int = 0
    window_days: int = 0


@dataclass
class RiskAssessment:
    """Everything the briefing generator needs for one area or route query."""

    query_id: str
    mode: str                                   # "area" or "route"
    incidents: List[ClassifiedIncident]         # with relevance attached
    groups: Dict[str, List[ClassifiedIncident]]
    risk_score: RiskScoreResult
    dynamic_risk: DynamicRiskResult
    warnings: List[str] = field(default_factory=list)
