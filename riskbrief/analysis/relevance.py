"""Area-mode relevance classification for riskbrief.

Assigns each incident one of five ordered zones relative to the user's search
anchor, using the curated adjacency rings instead of coordinate distance.
Zones are tested from most to least specific; the first match wins.
Pure functions — no I/O.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from riskbrief.models.incidents import ClassifiedIncident
from riskbrief.models.zones import RelevanceZone
from riskbrief.registry.areas import canonical_state, state_display_name
from riskbrief.registry.zone_registry import ZoneRegistry, default_registry
from riskbrief.utils.location_utils import locations_match, matches_any, normalize_location

logger = logging.getLogger(__name__)

_RING_ZONES = (
    ("immediate", RelevanceZone.IMMEDIATE),
    ("nearby", RelevanceZone.NEARBY),
    ("same_region", RelevanceZone.SAME_REGION),
)


def classify_zone(
    anchor: str,
    incident_location: Optional[str],
    anchor_state: str,
    registry: Optional[ZoneRegistry] = None,
) -> RelevanceZone:
    """Determine the relevance zone of one incident location.

    Order of tests:
        1. No location → SAME_STATE (the incident still counts, at low weight).
        2. Location matches the anchor itself → IMMEDIATE.
        3. Location matches the anchor's immediate, nearby, then same_region ring.
        4. Location's owning state is the anchor's state, or the location text
           names that state → SAME_STATE.
        5. Otherwise → DISTANT.

    Args:
        anchor: Area or city the user searched for.
        incident_location: Free-text location extracted from the incident.
        anchor_state: State of the anchor (name or id).
        registry: Reference data; defaults to the bundled registry.

    Returns:
        The RelevanceZone for the incident.
    """
    if not incident_location or not normalize_location(incident_location):
        return RelevanceZone.SAME_STATE

    registry = registry or default_registry()

    if locations_match(anchor, incident_location):
        return RelevanceZone.IMMEDIATE

    rings = registry.rings_for(anchor_state, anchor)
    if rings:
        for ring_name, zone in _RING_ZONES:
            if matches_any(incident_location, rings.get(ring_name, [])):
                return zone

    if _in_anchor_state(incident_location, anchor_state, registry):
        return RelevanceZone.SAME_STATE

    return RelevanceZone.DISTANT


def _in_anchor_state(incident_location: str, anchor_state: str, registry: ZoneRegistry) -> bool:
    anchor_state_id = canonical_state(anchor_state)
    if not anchor_state_id:
        return False

    incident_state = registry.state_for_area(incident_location)
    if incident_state is not None and incident_state == anchor_state_id:
        return True

    incident_norm = normalize_location(incident_location)
    state_names = {
        normalize_location(anchor_state),
        anchor_state_id,
        normalize_location(state_display_name(anchor_state_id)),
    }
    return any(name and name in incident_norm for name in state_names)


def classify_incidents(
    anchor: str,
    anchor_state: str,
    incidents: Sequence[ClassifiedIncident],
    registry: Optional[ZoneRegistry] = None,
) -> List[ClassifiedIncident]:
    """Attach an area-mode relevance tag to every incident.

    The input sequence and its records are left untouched; new records are
    returned in the same order.

    Args:
        anchor: Area or city the user searched for.
        anchor_state: State of the anchor.
        incidents: Classified incidents from the upstream LLM service.
        registry: Reference data; defaults to the bundled registry.

    Returns:
        New list of incidents with relevance attached.

    Raises:
        TypeError: If incidents is None.
    """
    if incidents is None:
        raise TypeError("incidents must be a sequence of ClassifiedIncident, got None")

    registry = registry or default_registry()
    zoned = [
        incident.with_relevance(
            classify_zone(anchor, incident.location_extracted, anchor_state, registry)
        )
        for incident in incidents
    ]
    logger.debug(
        "Area relevance: anchor=%s state=%s incidents=%d immediate=%d",
        anchor,
        anchor_state,
        len(zoned),
        sum(1 for i in zoned if i.zone == RelevanceZone.IMMEDIATE),
    )
    return zoned
