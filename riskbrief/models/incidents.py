"""Incident data models for riskbrief.

ClassifiedIncident records are produced upstream by the LLM classification
service and are owned by the caller. They are frozen: classification returns
new records with relevance attached instead of mutating the input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from riskbrief.models.zones import AnyZone, parse_zone

logger = logging.getLogger(__name__)


class IncidentType:
    """Incident type values emitted by the classification service."""

    KIDNAPPING = "kidnapping"
    ROBBERY = "robbery"
    ATTACK = "attack"
    TERRORISM = "terrorism"
    CULT_CLASH = "cult_clash"
    ACCIDENT = "accident"
    UNREST = "unrest"
    OTHER = "other_incident"


class Severity:
    """Severity values emitted by the classification service."""

    FATAL = "fatal"
    SERIOUS = "serious"
    MODERATE = "moderate"
    MINOR = "minor"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Relevance:
    """Relevance tag attached to an incident by a classifier."""

    zone: AnyZone
    score: float
    label: str

    @classmethod
    def for_zone(cls, zone: AnyZone) -> "Relevance":
        cfg = zone.config
        return cls(zone=zone, score=cfg.score, label=cfg.label)


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _relevance_from_dict(raw: Any) -> Optional[Relevance]:
    if not isinstance(raw, dict) or not raw.get("zone"):
        return None
    try:
        zone = parse_zone(raw["zone"])
    except ValueError:
        logger.debug("Dropping relevance with unknown zone %r", raw["zone"])
        return None
    return Relevance(
        zone=zone,
        score=_as_float(raw.get("score"), zone.config.score),
        label=raw.get("label") or zone.config.label,
    )


@dataclass(frozen=True)
class ClassifiedIncident:
    """A single news incident after LLM classification."""

    headline: str
    notification: str
    incident_type: str
    severity: str
    location_extracted: Optional[str]
    confidence: float
    date: str   # YYYYMMDD or YYYYMMDDHHMMSS
    url: str
    relevance: Optional[Relevance] = None

    @property
    def zone(self) -> Optional[AnyZone]:
        return self.relevance.zone if self.relevance else None

    def with_relevance(self, zone: AnyZone) -> "ClassifiedIncident":
        """Return a copy of this incident tagged with the given zone."""
        return replace(self, relevance=Relevance.for_zone(zone))

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ClassifiedIncident":
        """Build an incident from the classification service's JSON shape.

        Never raises on malformed values: missing optional fields take neutral
        defaults, a non-numeric confidence becomes 0.0, and a relevance block
        naming an unknown zone is dropped so the incident is re-classified.
        """
        return cls(
            headline=raw.get("headline", ""),
            notification=raw.get("notification", ""),
            incident_type=raw.get("incident_type", IncidentType.OTHER),
            severity=raw.get("severity", Severity.UNKNOWN),
            location_extracted=raw.get("location_extracted") or None,
            confidence=_as_float(raw.get("confidence"), 0.0),
            date=str(raw.get("date") or ""),
            url=raw.get("url", ""),
            relevance=_relevance_from_dict(raw.get("relevance")),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "headline": self.headline,
            "notification": self.notification,
            "incident_type": self.incident_type,
            "severity": self.severity,
            "location_extracted": self.location_extracted,
            "confidence": self.confidence,
            "date": self.date,
            "url": self.url,
        }
        if self.relevance is not None:
            data["relevance"] = {
                "zone": self.relevance.zone.value,
                "score": self.relevance.score,
                "label": self.relevance.label,
            }
        return data
