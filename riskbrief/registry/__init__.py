"""riskbrief reference data package.

Hand-curated, read-only geographic tables: zone adjacency rings, the area →
state hierarchy, location aliases, and inter-state road corridors.
"""

from riskbrief.registry.adjacency import ZONE_ADJACENCY
from riskbrief.registry.aliases import (
    lga_for_location,
    location_aliases,
    location_query_terms,
    resolve_alias,
)
from riskbrief.registry.areas import (
    AREA_TO_STATE,
    AreaHierarchy,
    canonical_state,
    get_area_hierarchy,
    state_display_name,
)
from riskbrief.registry.roads import RoadInfo, road_for_state_pair, roads_for_route
from riskbrief.registry.zone_registry import (
    DEFAULT_REGISTRY,
    ZoneRegistry,
    default_registry,
    invalid_identifiers,
)

__all__ = [
    "ZONE_ADJACENCY",
    "AREA_TO_STATE",
    "AreaHierarchy",
    "canonical_state",
    "get_area_hierarchy",
    "state_display_name",
    "resolve_alias",
    "location_query_terms",
    "location_aliases",
    "lga_for_location",
    "RoadInfo",
    "road_for_state_pair",
    "roads_for_route",
    "ZoneRegistry",
    "DEFAULT_REGISTRY",
    "default_registry",
    "invalid_identifiers",
]
