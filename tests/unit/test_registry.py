"""Unit tests for riskbrief.registry.

Covers:
- zone adjacency identifier invariant
- area → state hierarchy and canonical state ids
- location aliases and query terms
- road corridors for state pairs and routes
- ZoneRegistry lookups
"""

from __future__ import annotations

from riskbrief.registry.adjacency import RING_NAMES, ZONE_ADJACENCY
from riskbrief.registry.aliases import (
    lga_for_location,
    location_aliases,
    location_query_terms,
    resolve_alias,
)
from riskbrief.registry.areas import (
    AREA_TO_STATE,
    canonical_state,
    get_area_hierarchy,
    state_display_name,
)
from riskbrief.registry.roads import road_for_state_pair, road_terms_for_route, roads_for_route
from riskbrief.registry.zone_registry import ZoneRegistry, default_registry, invalid_identifiers


# ── Adjacency data ───────────────────────────────────────────────────────────────

class TestZoneAdjacency:
    def test_bundled_identifiers_are_lowercase_hyphenated(self):
        """Every state, anchor and ring entry must be a normalized identifier."""
        assert invalid_identifiers(ZONE_ADJACENCY) == []

    def test_invalid_identifiers_reported(self):
        """Identifiers with spaces or capitals must be reported."""
        bad = {"lagos": {"Lekki": {"immediate": ["lekki phase 1"], "nearby": [], "same_region": []}}}
        assert invalid_identifiers(bad) == ["lagos/Lekki", "lagos/Lekki/immediate/lekki phase 1"]

    def test_every_anchor_has_all_rings(self):
        """Each anchor must define immediate, nearby and same_region rings."""
        for state, anchors in ZONE_ADJACENCY.items():
            for anchor, rings in anchors.items():
                assert set(RING_NAMES) <= set(rings), f"{state}/{anchor}"

    def test_state_keys_are_canonical(self):
        """Adjacency must be keyed by canonical state ids."""
        for state in ZONE_ADJACENCY:
            assert canonical_state(state) == state


# ── Area hierarchy ───────────────────────────────────────────────────────────────

class TestAreaHierarchy:
    def test_direct_lookup(self):
        """A known area must return its state and sub-zone."""
        hierarchy = get_area_hierarchy("Victoria Island")
        assert hierarchy.state == "Lagos"
        assert hierarchy.zone == "Lagos Island"

    def test_no_dash_fallback(self):
        """Hyphenation differences must not defeat the lookup."""
        assert get_area_hierarchy("life-camp") == AREA_TO_STATE["lifecamp"]

    def test_unknown_area(self):
        """Unknown or empty areas must return None."""
        assert get_area_hierarchy("atlantis") is None
        assert get_area_hierarchy(None) is None

    def test_canonical_state_variants(self):
        """FCT and '<name> State' spellings must collapse to one id."""
        assert canonical_state("FCT Abuja") == "fct"
        assert canonical_state("Abuja") == "fct"
        assert canonical_state("Federal Capital Territory") == "fct"
        assert canonical_state("Kaduna State") == "kaduna"
        assert canonical_state("Cross River") == "cross-river"

    def test_state_display_name(self):
        """Display names must round-trip from canonical ids."""
        assert state_display_name("fct") == "FCT Abuja"
        assert state_display_name("akwa-ibom") == "Akwa Ibom"
        assert state_display_name("atlantis") == "atlantis"


# ── Aliases ──────────────────────────────────────────────────────────────────────

class TestAliases:
    def test_resolve_alias(self):
        """Aliases, primaries and variations must map to the canonical id."""
        assert resolve_alias("VI") == "victoria-island"
        assert resolve_alias("Port Harcourt") == "port-harcourt"
        assert resolve_alias("sango ota") == "ota"
        assert resolve_alias("lekki") == "lekki"
        assert resolve_alias("atlantis") is None

    def test_query_terms_deduplicated(self):
        """Query terms must list primary, aliases and variations once each."""
        terms = location_query_terms("lekki")
        assert terms[0] == "lekki"
        assert "lekki peninsula" in terms
        assert len(terms) == len(set(terms))

    def test_unknown_location_query_terms(self):
        """Unknown locations must return themselves as the only term."""
        assert location_query_terms("Atlantis") == ["Atlantis"]

    def test_lga_and_aliases(self):
        """LGA and alias list must come from the alias table."""
        assert lga_for_location("victoria-island") == "Eti-Osa"
        assert lga_for_location("atlantis") is None
        assert location_aliases("ikoyi") == ["ikoyi", "ikoyi lagos", "ikoyi island"]


# ── Roads ────────────────────────────────────────────────────────────────────────

class TestRoads:
    def test_state_pair_is_order_independent(self):
        """Either state order must find the same corridor."""
        assert road_for_state_pair("Lagos", "Ogun") == road_for_state_pair("ogun", "lagos")
        assert road_for_state_pair("Lagos", "Ogun").road_id == "lagos-ibadan"

    def test_fct_variants_find_road(self):
        """FCT spelled as 'Abuja' must still find its corridors."""
        assert road_for_state_pair("Abuja", "Kaduna").road_id == "abuja-kaduna"

    def test_unknown_pair(self):
        """A pair without a curated corridor must return None."""
        assert road_for_state_pair("lagos", "kano") is None

    def test_roads_for_route_consecutive_pairs(self):
        """Routes must use consecutive state pairs only."""
        roads = roads_for_route(["lagos", "ogun", "oyo", "kwara"])
        assert [r.road_id for r in roads] == ["lagos-ibadan", "lagos-ibadan-2", "ibadan-ilorin"]

    def test_road_terms_deduplicated(self):
        """Shared road names across segments must appear once."""
        terms = road_terms_for_route(["lagos", "ogun", "oyo"])
        assert terms.count("Lagos - Ibadan Expressway") == 1
        assert "Sagamu interchange" in terms
        assert "Ibadan toll gate" in terms

    def test_single_state_route_has_no_roads(self):
        """A one-state route has no corridor."""
        assert roads_for_route(["lagos"]) == []


# ── ZoneRegistry ─────────────────────────────────────────────────────────────────

class TestZoneRegistry:
    def test_rings_for_known_anchor(self):
        """Rings must be found by state name and anchor in any casing."""
        rings = default_registry().rings_for("Lagos", "Lekki")
        assert "ajah" in rings["nearby"]

    def test_rings_for_unknown(self):
        """Unknown anchors or states must return None."""
        registry = default_registry()
        assert registry.rings_for("lagos", "atlantis") is None
        assert registry.rings_for("atlantis", "lekki") is None

    def test_state_for_area_is_canonical(self):
        """state_for_area must return canonical ids, not display names."""
        assert default_registry().state_for_area("Wuse") == "fct"
        assert default_registry().state_for_area("Atlantis") is None

    def test_custom_area_lookup(self):
        """An injected area lookup must be used by state_for_area."""
        from riskbrief.registry.areas import AreaHierarchy

        registry = ZoneRegistry(area_lookup=lambda area: AreaHierarchy(state="Kano State"))
        assert registry.state_for_area("anything") == "kano"
