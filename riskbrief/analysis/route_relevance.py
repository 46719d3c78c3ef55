"""Route-mode relevance classification for riskbrief.

A route is a corridor through an ordered sequence of states. An incident is
ON_ROUTE when it lies in a traversed state and names a curated area close to
one of that state's anchors (or one of the route's road corridors),
ROUTE_STATE when it is merely somewhere in a traversed state, and OFF_ROUTE
otherwise. There is no distance decay.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from riskbrief.models.incidents import ClassifiedIncident
from riskbrief.models.zones import RouteZone
from riskbrief.registry.areas import canonical_state, state_display_name
from riskbrief.registry.zone_registry import ZoneRegistry, default_registry
from riskbrief.utils.location_utils import (
    contains_term,
    locations_match,
    matches_any,
    normalize_location,
    significant_tokens,
)

logger = logging.getLogger(__name__)

# Rings close enough to a route anchor to count as "on the route"
_ON_ROUTE_RINGS = ("immediate", "nearby")
_ALL_RINGS = ("immediate", "nearby", "same_region")


def _route_state_ids(route_states: Sequence[str]) -> List[str]:
    if route_states is None or not list(route_states):
        raise ValueError("route_states must contain at least one state")
    ids: List[str] = []
    for state in route_states:
        state_id = canonical_state(state)
        if state_id and state_id not in ids:
            ids.append(state_id)
    if not ids:
        raise ValueError(f"route_states contains no usable state names: {list(route_states)!r}")
    return ids


def _mentions_state(location_norm: str, state_id: str) -> bool:
    """True if a normalized location names a state, by id, display name or word."""
    names = {state_id, normalize_location(state_display_name(state_id))}
    if any(name and name in location_norm for name in names):
        return True
    return any(token in location_norm for token in significant_tokens(state_id))


def _near_state_anchor(
    location: str, state_id: str, registry: ZoneRegistry, rings: Iterable[str]
) -> bool:
    """True if location matches an anchor of the state or one of its rings."""
    rings = tuple(rings)
    for anchor, anchor_rings in registry.anchors_in_state(state_id).items():
        if locations_match(anchor, location):
            return True
        for ring in rings:
            if matches_any(location, anchor_rings.get(ring, [])):
                return True
    return False


def resolve_incident_state(
    incident_location: Optional[str],
    route_state_ids: Sequence[str],
    registry: Optional[ZoneRegistry] = None,
) -> Optional[str]:
    """Work out which state an incident location belongs to.

    Resolution order: the area → state lookup, then a traversed state named in
    the location text, then membership in a traversed state's adjacency rings.

    Args:
        incident_location: Free-text incident location.
        route_state_ids: Canonical ids of the traversed states.
        registry: Reference data; defaults to the bundled registry.

    Returns:
        Canonical state id, or None if the location cannot be placed.
    """
    if not incident_location:
        return None
    registry = registry or default_registry()

    state_id = registry.state_for_area(incident_location)
    if state_id is not None:
        return state_id

    location_norm = normalize_location(incident_location)
    for route_state in route_state_ids:
        if _mentions_state(location_norm, route_state):
            return route_state

    for route_state in route_state_ids:
        if _near_state_anchor(incident_location, route_state, registry, _ALL_RINGS):
            return route_state
    return None


def classify_route_zone(
    route_states: Sequence[str],
    incident_location: Optional[str],
    incident_state: Optional[str] = None,
    registry: Optional[ZoneRegistry] = None,
) -> RouteZone:
    """Determine the route relevance zone of one incident.

    An incident whose state is not traversed by the route is always OFF_ROUTE,
    however closely its text resembles a route anchor.

    Corridor road terms match only exactly or as a substring of the location.
    Sharing a single word with a road name, or pairing a generic road keyword
    ("junction", "toll") with a state name, is not enough for ON_ROUTE; such
    incidents stay ROUTE_STATE.

    Args:
        route_states: Ordered sequence of states the route passes through.
        incident_location: Free-text incident location.
        incident_state: Owning state if already known; resolved from the
            location otherwise.
        registry: Reference data; defaults to the bundled registry.

    Returns:
        The RouteZone for the incident.

    Raises:
        ValueError: If route_states is empty.
    """
    route_ids = _route_state_ids(route_states)
    registry = registry or default_registry()

    has_location = bool(normalize_location(incident_location))
    if not has_location and not incident_state:
        # Unknown location: keep it in the tally rather than dropping it
        return RouteZone.ROUTE_STATE

    if incident_state:
        state_id = canonical_state(incident_state)
    else:
        state_id = resolve_incident_state(incident_location, route_ids, registry)

    if state_id is None or state_id not in route_ids:
        return RouteZone.OFF_ROUTE

    if has_location:
        if _near_state_anchor(incident_location, state_id, registry, _ON_ROUTE_RINGS):
            return RouteZone.ON_ROUTE
        if any(contains_term(incident_location, term) for term in registry.road_terms(route_ids)):
            return RouteZone.ON_ROUTE

    return RouteZone.ROUTE_STATE


def classify_route_incidents(
    route_states: Sequence[str],
    incidents: Sequence[ClassifiedIncident],
    registry: Optional[ZoneRegistry] = None,
) -> List[ClassifiedIncident]:
    """Attach a route-mode relevance tag to every incident.

    Args:
        route_states: Ordered sequence of states the route passes through.
        incidents: Classified incidents from the upstream LLM service.
        registry: Reference data; defaults to the bundled registry.

    Returns:
        New list of incidents with relevance attached, input order preserved.

    Raises:
        TypeError: If incidents is None.
        ValueError: If route_states is empty.
    """
    if incidents is None:
        raise TypeError("incidents must be a sequence of ClassifiedIncident, got None")
    route_ids = _route_state_ids(route_states)
    registry = registry or default_registry()

    zoned = [
        incident.with_relevance(
            classify_route_zone(route_ids, incident.location_extracted, registry=registry)
        )
        for incident in incidents
    ]
    logger.debug(
        "Route relevance: states=%s incidents=%d on_route=%d",
        "->".join(route_ids),
        len(zoned),
        sum(1 for i in zoned if i.zone == RouteZone.ON_ROUTE),
    )
    return zoned
