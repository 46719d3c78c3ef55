"""ZoneRegistry — read-only bundle of the curated geographic reference data.

The registry is built once at import and never mutated, so it can be shared
across threads. Classifiers take a registry argument so tests (or a caller
with a different dataset) can inject their own tables.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Sequence

from riskbrief.registry.adjacency import RING_NAMES, ZONE_ADJACENCY, ZoneRings
from riskbrief.registry.aliases import resolve_alias
from riskbrief.registry.areas import AreaHierarchy, canonical_state, get_area_hierarchy
from riskbrief.registry.roads import road_terms_for_route
from riskbrief.utils.location_utils import normalize_location

_IDENTIFIER = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@dataclass(frozen=True)
class ZoneRegistry:
    """Zone adjacency rings plus the area → state lookup collaborator."""

    adjacency: Mapping[str, Mapping[str, ZoneRings]] = field(
        default_factory=lambda: ZONE_ADJACENCY
    )
    area_lookup: Callable[[str], Optional[AreaHierarchy]] = get_area_hierarchy
    road_terms: Callable[[Sequence[str]], List[str]] = road_terms_for_route

    def anchors_in_state(self, state: str) -> Mapping[str, ZoneRings]:
        """All anchors with curated rings in a state (empty if none)."""
        return self.adjacency.get(canonical_state(state), {})

    def rings_for(self, state: str, anchor: str) -> Optional[ZoneRings]:
        """Adjacency rings for an anchor, resolving aliases ("vi") on a miss.

        Args:
            state: State name or id of the anchor.
            anchor: Search anchor area.

        Returns:
            Dict with immediate / nearby / same_region lists, or None.
        """
        state_zones = self.anchors_in_state(state)
        if not state_zones:
            return None
        anchor_norm = normalize_location(anchor)
        rings = state_zones.get(anchor_norm)
        if rings is None:
            canonical = resolve_alias(anchor_norm)
            if canonical is not None:
                rings = state_zones.get(canonical)
        return rings

    def state_for_area(self, area: Optional[str]) -> Optional[str]:
        """Canonical state id owning an area, or None if unknown."""
        hierarchy = self.area_lookup(area) if area else None
        return canonical_state(hierarchy.state) if hierarchy else None


def invalid_identifiers(adjacency: Mapping[str, Mapping[str, ZoneRings]]) -> List[str]:
    """List every state, anchor or ring entry that is not lowercase-hyphenated.

    An empty result means the dataset satisfies the identifier invariant.
    """
    bad: List[str] = []
    for state, anchors in adjacency.items():
        if not _IDENTIFIER.match(state):
            bad.append(state)
        for anchor, rings in anchors.items():
            if not _IDENTIFIER.match(anchor):
                bad.append(f"{state}/{anchor}")
            for ring in RING_NAMES:
                bad.extend(
                    f"{state}/{anchor}/{ring}/{area}"
                    for area in rings.get(ring, [])
                    if not _IDENTIFIER.match(area)
                )
    return bad


DEFAULT_REGISTRY = ZoneRegistry()


def default_registry() -> ZoneRegistry:
    """The process-wide registry built from the bundled tables."""
    return DEFAULT_REGISTRY
