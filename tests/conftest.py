"""Shared pytest fixtures for riskbrief tests.

Conventions:
- Fixture data lives in tests/fixtures/ as static JSON files
- Every time-dependent test uses the fixed reference time NOW
- Incidents are built with the make_incident factory so tests only state
  the fields they care about
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List

import pytest

from riskbrief.models.incidents import ClassifiedIncident
from riskbrief.utils.date_utils import format_incident_date

_FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Fixed reference time shared by all time-dependent tests
NOW = datetime(2024, 1, 15, 12, 0, 0)


def days_ago(days: float) -> str:
    """Compact incident date string for NOW minus the given number of days."""
    return format_incident_date(NOW - timedelta(days=days))


def build_incident(**overrides: Any) -> ClassifiedIncident:
    """Build a ClassifiedIncident with neutral defaults."""
    fields: Dict[str, Any] = {
        "headline": "Incident reported",
        "notification": "An incident was reported.",
        "incident_type": "robbery",
        "severity": "serious",
        "location_extracted": "Lekki",
        "confidence": 0.8,
        "date": days_ago(1),
        "url": "https://news.example.ng/incident",
    }
    fields.update(overrides)
    return ClassifiedIncident(**fields)


# ── Reference time ───────────────────────────────────────────────────────────────

@pytest.fixture
def now() -> datetime:
    """Fixed reference time: 2024-01-15 12:00:00 (naive UTC)."""
    return NOW


@pytest.fixture
def ago():
    """Factory fixture: ago(2.5) -> compact date string 2.5 days before NOW."""
    return days_ago


# ── Incident factories ───────────────────────────────────────────────────────────

@pytest.fixture
def make_incident():
    """Factory fixture: make_incident(severity="fatal", date=days_ago(2), ...)."""
    return build_incident


@pytest.fixture
def make_zoned_incident():
    """Factory fixture returning an incident already tagged with a zone."""

    def _make(zone, **overrides: Any) -> ClassifiedIncident:
        return build_incident(**overrides).with_relevance(zone)

    return _make


# ── Raw fixture data loaders ─────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def incidents_raw() -> Dict[str, Any]:
    """Raw classification-service payload: 7 incidents around Lekki, Lagos.

    Relative to NOW, in area mode (anchor lekki, state lagos):
        immediate   — Lekki Phase 1 (fatal kidnapping, 1.5 days), Lekki (fatal attack, ~3.1 days)
        nearby      — Ajah (serious robbery, 2.5 days)
        same_region — Obalende (moderate unrest, 10.5 days)
        same_state  — Ikeja (minor accident), no location (unparsable date)
        distant     — Kano (serious cult clash)
    """
    with open(_FIXTURES_DIR / "sample_incidents.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def incidents_path() -> Path:
    """Path to the sample incidents JSON file."""
    return _FIXTURES_DIR / "sample_incidents.json"


@pytest.fixture
def sample_incidents(incidents_raw) -> List[ClassifiedIncident]:
    """ClassifiedIncident list parsed from the fixture payload."""
    return [ClassifiedIncident.from_dict(raw) for raw in incidents_raw["incidents"]]
