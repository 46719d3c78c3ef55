"""Unit tests for riskbrief.analysis.relevance (area mode).

Covers:
- classify_zone: each of the five zones, decision order, missing locations
- anchor alias resolution ("VI" -> victoria-island)
- classify_incidents: immutability, order preservation, relevance tags
- injected registry
"""

from __future__ import annotations

import pytest

from riskbrief.analysis.relevance import classify_incidents, classify_zone
from riskbrief.models.zones import ZONE_CONFIGS, RelevanceZone
from riskbrief.registry.zone_registry import ZoneRegistry


# ── classify_zone ────────────────────────────────────────────────────────────────

class TestClassifyZone:
    @pytest.mark.parametrize(
        "location,expected",
        [
            ("Lekki Phase 1", RelevanceZone.IMMEDIATE),
            ("Chevron", RelevanceZone.IMMEDIATE),
            ("Ajah", RelevanceZone.NEARBY),
            ("Ikoyi", RelevanceZone.NEARBY),
            ("Obalende", RelevanceZone.SAME_REGION),
            ("Ikeja", RelevanceZone.SAME_STATE),
            ("Kano", RelevanceZone.DISTANT),
        ],
    )
    def test_lekki_zones(self, location, expected):
        """Incidents around Lekki must land in the curated rings."""
        assert classify_zone("lekki", location, "lagos") == expected

    def test_anchor_match_beats_rings(self):
        """A location matching the anchor itself must be IMMEDIATE."""
        assert classify_zone("ikeja", "Ikeja GRA", "Lagos") == RelevanceZone.IMMEDIATE

    @pytest.mark.parametrize("location", [None, "", "   ", "!!!"])
    def test_missing_location_is_same_state(self, location):
        """Missing locations must count at state level rather than be dropped."""
        assert classify_zone("lekki", location, "lagos") == RelevanceZone.SAME_STATE

    def test_state_name_in_text_is_same_state(self):
        """A location naming the anchor's state must be SAME_STATE."""
        assert classify_zone("ikeja", "Somewhere in Lagos State", "lagos") == RelevanceZone.SAME_STATE

    def test_state_display_name_variants(self):
        """FCT variants must all resolve to the same state."""
        assert classify_zone("wuse", "Lugbe", "FCT Abuja") == RelevanceZone.SAME_STATE
        assert classify_zone("wuse", "Garki", "fct") == RelevanceZone.NEARBY

    def test_anchor_without_rings_falls_back_to_state(self):
        """An anchor with no curated rings must still classify by state."""
        assert classify_zone("epe", "Ikorodu", "lagos") == RelevanceZone.SAME_STATE
        assert classify_zone("epe", "Kano", "lagos") == RelevanceZone.DISTANT

    def test_anchor_alias_resolves_rings(self):
        """An anchor typed as an alias must use the canonical area's rings."""
        assert classify_zone("VI", "Oniru", "Lagos") == RelevanceZone.IMMEDIATE
        assert classify_zone("VI", "Obalende", "Lagos") == RelevanceZone.NEARBY

    def test_zone_ordering_is_monotonic(self):
        """Closer zones must carry strictly higher scores and ranks."""
        zones = list(RelevanceZone)
        scores = [ZONE_CONFIGS[z].score for z in zones]
        ranks = [z.rank for z in zones]
        assert scores == sorted(scores, reverse=True)
        assert len(set(scores)) == len(scores)
        assert ranks == [4, 3, 2, 1, 0]


# ── classify_incidents ───────────────────────────────────────────────────────────

class TestClassifyIncidents:
    def test_returns_new_tagged_records(self, make_incident):
        """Input incidents must stay untouched; output carries relevance."""
        incidents = [make_incident(location_extracted="Ajah"), make_incident(location_extracted="Kano")]

        zoned = classify_incidents("lekki", "lagos", incidents)

        assert [i.relevance for i in incidents] == [None, None]
        assert [i.zone for i in zoned] == [RelevanceZone.NEARBY, RelevanceZone.DISTANT]
        assert zoned[0].relevance.score == 0.7
        assert zoned[0].relevance.label == "Nearby (~15km)"

    def test_preserves_order_and_fields(self, make_incident):
        """Output must keep input order and all other incident fields."""
        incidents = [make_incident(headline=f"h{i}") for i in range(5)]
        zoned = classify_incidents("lekki", "lagos", incidents)
        assert [i.headline for i in zoned] == ["h0", "h1", "h2", "h3", "h4"]

    def test_none_raises_type_error(self):
        """None is a contract violation, not malformed data."""
        with pytest.raises(TypeError):
            classify_incidents("lekki", "lagos", None)

    def test_empty_list(self):
        """An empty input must return an empty list."""
        assert classify_incidents("lekki", "lagos", []) == []

    def test_injected_registry(self, make_incident):
        """A caller-supplied registry must replace the bundled tables."""
        registry = ZoneRegistry(
            adjacency={"teststate": {"alpha": {"immediate": [], "nearby": ["bravo"], "same_region": []}}},
            area_lookup=lambda area: None,
        )
        zoned = classify_incidents(
            "alpha", "teststate", [make_incident(location_extracted="Bravo")], registry=registry
        )
        assert zoned[0].zone == RelevanceZone.NEARBY
