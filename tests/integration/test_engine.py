"""Integration tests for the riskbrief assessment engine.

These tests run the fixture incident set through classification, scoring,
grouping and dynamic adjustment together, with a fixed reference time:

- Area mode: Lekki, Lagos (see the incidents_raw fixture for zone layout)
- Route mode: Lagos -> Ogun -> Oyo
- Idempotence and input immutability
- Environment-driven configuration
"""

from __future__ import annotations

import pytest

from config.settings import EngineConfig
from riskbrief import assess_area, assess_route
from riskbrief.engine import make_query_id
from riskbrief.models.zones import RelevanceZone, RouteZone


@pytest.fixture
def derived_window_config() -> EngineConfig:
    """Config with the window derived from the static level."""
    return EngineConfig(window_days=None, default_static_risk="moderate")


# ── Area mode ────────────────────────────────────────────────────────────────────

class TestAssessArea:
    def test_zones_assigned(self, sample_incidents, derived_window_config, now):
        """Every fixture incident must land in its expected zone."""
        assessment = assess_area("lekki", "lagos", sample_incidents, config=derived_window_config, now=now)

        assert [i.zone for i in assessment.incidents] == [
            RelevanceZone.IMMEDIATE,
            RelevanceZone.NEARBY,
            RelevanceZone.IMMEDIATE,
            RelevanceZone.SAME_REGION,
            RelevanceZone.SAME_STATE,
            RelevanceZone.DISTANT,
            RelevanceZone.SAME_STATE,
        ]

    def test_risk_score(self, sample_incidents, derived_window_config, now):
        """The fixture set must score 7.1 (high) with a full breakdown."""
        assessment = assess_area("lekki", "lagos", sample_incidents, config=derived_window_config, now=now)
        score = assessment.risk_score

        assert score.score == 7.1
        assert score.level == "high"
        assert score.confidence == "high"
        assert score.breakdown.immediate_count == 2
        assert score.breakdown.nearby_count == 1
        assert score.breakdown.regional_count == 1
        assert score.breakdown.state_count == 2
        assert score.breakdown.distant_count == 1
        assert score.breakdown.weighted_total == 3.1
        assert score.breakdown.dominant_type == "kidnapping"
        assert score.breakdown.has_fatalities is True

    def test_dynamic_risk_uses_derived_window(self, sample_incidents, derived_window_config, now):
        """Moderate must use a 7-day window and escalate on the fatal burst."""
        assessment = assess_area(
            "lekki", "lagos", sample_incidents, static_level="moderate", config=derived_window_config, now=now
        )
        dynamic = assessment.dynamic_risk

        assert dynamic.window_days == 7
        assert dynamic.incident_count == 3
        assert dynamic.adjusted_risk == "high"
        assert dynamic.trend == "worsening"
        assert dynamic.days_since_last_incident == 2

    def test_explicit_window(self, sample_incidents, now):
        """A configured window must override the level-derived one."""
        config = EngineConfig(window_days=30)
        assessment = assess_area("lekki", "lagos", sample_incidents, static_level="moderate", config=config, now=now)
        assert assessment.dynamic_risk.window_days == 30
        assert assessment.dynamic_risk.incident_count == 4

    def test_groups_newest_first(self, sample_incidents, derived_window_config, now):
        """Display groups must be ordered newest first."""
        assessment = assess_area("lekki", "lagos", sample_incidents, config=derived_window_config, now=now)

        immediate = [i.location_extracted for i in assessment.groups["immediate"]]
        assert immediate == ["Lekki Phase 1", "Lekki"]
        assert [i.location_extracted for i in assessment.groups["state_wide"]] == ["Ikeja", None]

    def test_data_warnings(self, sample_incidents, derived_window_config, now):
        """Unparsable dates and missing locations must be reported, not raised."""
        assessment = assess_area("lekki", "lagos", sample_incidents, config=derived_window_config, now=now)
        assert "1 incident(s) have an unparsable date" in assessment.warnings
        assert "1 incident(s) have no extracted location" in assessment.warnings

    def test_query_id(self, sample_incidents, derived_window_config, now):
        """The query id must identify the mode, state and anchor."""
        assessment = assess_area("Lekki", "Lagos", sample_incidents, config=derived_window_config, now=now)
        assert assessment.query_id == "area:lagos:lekki"
        assert assessment.mode == "area"

    def test_idempotent(self, sample_incidents, derived_window_config, now):
        """Repeated assessment with a fixed now must give identical results."""
        first = assess_area("lekki", "lagos", sample_incidents, config=derived_window_config, now=now)
        second = assess_area("lekki", "lagos", sample_incidents, config=derived_window_config, now=now)
        assert first == second

    def test_input_untouched(self, sample_incidents, derived_window_config, now):
        """Caller-owned incidents must not gain relevance tags."""
        assess_area("lekki", "lagos", sample_incidents, config=derived_window_config, now=now)
        assert all(i.relevance is None for i in sample_incidents)

    def test_no_incidents(self, derived_window_config, now):
        """An empty input must produce the low baseline."""
        assessment = assess_area("lekki", "lagos", [], config=derived_window_config, now=now)
        assert assessment.risk_score.score == 1.5
        assert assessment.dynamic_risk.adjusted_risk == "moderate"
        assert assessment.warnings == []

    def test_none_incidents_raises(self, derived_window_config, now):
        """None incidents must propagate as TypeError."""
        with pytest.raises(TypeError):
            assess_area("lekki", "lagos", None, config=derived_window_config, now=now)

    def test_static_level_from_environment(self, sample_incidents, monkeypatch, now):
        """The default static level must come from the environment."""
        monkeypatch.setenv("RISKBRIEF_DEFAULT_STATIC_RISK", "high")
        monkeypatch.delenv("RISKBRIEF_WINDOW_DAYS", raising=False)

        assessment = assess_area("lekki", "lagos", sample_incidents, now=now)

        assert assessment.dynamic_risk.static_risk == "high"
        assert assessment.dynamic_risk.window_days == 14
        assert assessment.dynamic_risk.adjusted_risk == "very high"


# ── Route mode ───────────────────────────────────────────────────────────────────

class TestAssessRoute:
    def test_route_assessment(self, make_incident, ago, derived_window_config, now):
        """Route incidents must be zoned, scored and grouped in route mode."""
        incidents = [
            make_incident(location_extracted="Ibadan", severity="fatal", incident_type="attack", date=ago(1)),
            make_incident(location_extracted="Sagamu interchange, Ogun", severity="serious", date=ago(2)),
            make_incident(location_extracted="Abeokuta", severity="minor", date=ago(3)),
            make_incident(location_extracted="Kano", severity="fatal", date=ago(1)),
        ]

        assessment = assess_route(
            ["Lagos", "Ogun", "Oyo"], incidents, static_level="low", config=derived_window_config, now=now
        )

        assert assessment.mode == "route"
        assert assessment.query_id == "route:lagos>ogun>oyo"
        assert [i.zone for i in assessment.incidents] == [
            RouteZone.ON_ROUTE, RouteZone.ON_ROUTE, RouteZone.ROUTE_STATE, RouteZone.OFF_ROUTE,
        ]
        assert assessment.risk_score.breakdown.immediate_count == 2
        assert assessment.risk_score.breakdown.nearby_count == 1
        assert assessment.risk_score.breakdown.distant_count == 1
        assert len(assessment.groups["on_route"]) == 2
        # Off-route fatality must not drive the adjustment: 3 on-route/route-state, 1 fatal
        assert assessment.dynamic_risk.incident_count == 3
        assert assessment.dynamic_risk.adjusted_risk == "high"

    def test_empty_route_raises(self, make_incident, derived_window_config, now):
        """An empty route must raise ValueError."""
        with pytest.raises(ValueError):
            assess_route([], [make_incident()], config=derived_window_config, now=now)


class TestMakeQueryId:
    def test_area(self):
        """Area ids must join mode, state and anchor."""
        assert make_query_id("area", "FCT Abuja", "Wuse 2") == "area:fct-abuja:wuse-2"

    def test_route(self):
        """Route ids must chain states with '>'."""
        assert make_query_id("route", "Lagos", "Oyo") == "route:lagos>oyo"
