"""Unit tests for riskbrief.analysis.route_relevance (route mode)."""

from __future__ import annotations

import pytest

from riskbrief.analysis.route_relevance import (
    classify_route_incidents,
    classify_route_zone,
    resolve_incident_state,
)
from riskbrief.models.zones import RouteZone

LAGOS_TO_IBADAN = ["Lagos", "Ogun", "Oyo"]


# ── classify_route_zone ──────────────────────────────────────────────────────────

class TestClassifyRouteZone:
    def test_anchor_in_traversed_state_is_on_route(self):
        """A curated anchor in a traversed state must be ON_ROUTE."""
        assert classify_route_zone(LAGOS_TO_IBADAN, "Ibadan") == RouteZone.ON_ROUTE

    def test_ring_area_in_traversed_state_is_on_route(self):
        """An immediate-ring area of a traversed state's anchor must be ON_ROUTE."""
        assert classify_route_zone(["Lagos State", "Ogun"], "Ikeja") == RouteZone.ON_ROUTE

    def test_road_corridor_term_is_on_route(self):
        """A location naming a corridor of the route must be ON_ROUTE."""
        zone = classify_route_zone(LAGOS_TO_IBADAN, "Sagamu interchange, Ogun")
        assert zone == RouteZone.ON_ROUTE

    def test_road_keyword_with_state_is_route_state(self):
        """A generic road word plus a state name must not count as the corridor."""
        zone = classify_route_zone(LAGOS_TO_IBADAN, "Expressway junction, Ogun State")
        assert zone == RouteZone.ROUTE_STATE

    def test_other_area_in_traversed_state_is_route_state(self):
        """A known area of a traversed state away from anchors must be ROUTE_STATE."""
        assert classify_route_zone(LAGOS_TO_IBADAN, "Abeokuta") == RouteZone.ROUTE_STATE

    def test_untraversed_state_is_off_route(self):
        """An incident in a state the route does not cross must be OFF_ROUTE."""
        assert classify_route_zone(LAGOS_TO_IBADAN, "Kano") == RouteZone.OFF_ROUTE

    def test_exclusivity_beats_text_similarity(self):
        """A curated anchor of an untraversed state must still be OFF_ROUTE."""
        assert classify_route_zone(["FCT", "Kaduna"], "Lekki") == RouteZone.OFF_ROUTE
        assert classify_route_zone(["Lagos", "Ogun"], "Kaduna") == RouteZone.OFF_ROUTE

    @pytest.mark.parametrize("location", [None, "", "!!!"])
    def test_missing_location_is_route_state(self, location):
        """Missing locations must stay in the tally at route-state level."""
        assert classify_route_zone(LAGOS_TO_IBADAN, location) == RouteZone.ROUTE_STATE

    def test_explicit_state_overrides_lookup(self):
        """A known incident state must be used instead of resolving the text."""
        assert classify_route_zone(["Lagos"], "Ikeja", incident_state="Kano") == RouteZone.OFF_ROUTE
        assert classify_route_zone(["Lagos"], "Oko Oba", incident_state="Lagos") == RouteZone.ROUTE_STATE

    @pytest.mark.parametrize("route", [[], ["", "  "]])
    def test_empty_route_raises(self, route):
        """A route with no usable states is a contract violation."""
        with pytest.raises(ValueError):
            classify_route_zone(route, "Ibadan")


# ── resolve_incident_state ───────────────────────────────────────────────────────

class TestResolveIncidentState:
    def test_area_lookup(self):
        """Known areas must resolve through the area hierarchy."""
        assert resolve_incident_state("Ibadan", ["lagos", "oyo"]) == "oyo"

    def test_state_named_in_text(self):
        """A traversed state named in the text must be picked up."""
        assert resolve_incident_state("Sagamu interchange, Ogun", ["lagos", "ogun"]) == "ogun"

    def test_adjacency_membership(self):
        """Areas only known through adjacency rings must resolve to their state."""
        assert resolve_incident_state("Lekki Phase 1", ["lagos"]) == "lagos"

    def test_unknown_is_none(self):
        """Unplaceable locations must resolve to None."""
        assert resolve_incident_state("Nowhere", ["lagos"]) is None
        assert resolve_incident_state(None, ["lagos"]) is None


# ── classify_route_incidents ─────────────────────────────────────────────────────

class TestClassifyRouteIncidents:
    def test_tags_incidents_in_order(self, make_incident):
        """Each incident must get a route relevance tag, order preserved."""
        incidents = [
            make_incident(location_extracted="Ibadan"),
            make_incident(location_extracted="Abeokuta"),
            make_incident(location_extracted="Kano"),
        ]

        zoned = classify_route_incidents(LAGOS_TO_IBADAN, incidents)

        assert [i.zone for i in zoned] == [RouteZone.ON_ROUTE, RouteZone.ROUTE_STATE, RouteZone.OFF_ROUTE]
        assert zoned[0].relevance.label == "On this route"
        assert zoned[1].relevance.score == 0.5
        assert incidents[0].relevance is None

    def test_none_raises_type_error(self):
        """None incidents is a contract violation."""
        with pytest.raises(TypeError):
            classify_route_incidents(LAGOS_TO_IBADAN, None)

    def test_empty_route_raises(self, make_incident):
        """An empty route must raise even with valid incidents."""
        with pytest.raises(ValueError):
            classify_route_incidents([], [make_incident()])
