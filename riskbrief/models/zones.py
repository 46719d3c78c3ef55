"""Relevance zone models for riskbrief.

Area mode uses five concentric zones around a search anchor; route mode uses
three corridor zones. Each zone is bound to a fixed ZoneConfig: the score fed
into risk scoring, a display label, and whether the zone counts toward the
primary incident tally.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class RelevanceZone(str, Enum):
    """Area-mode relevance zones, most specific first."""

    IMMEDIATE = "immediate"
    NEARBY = "nearby"
    SAME_REGION = "same_region"
    SAME_STATE = "same_state"
    DISTANT = "distant"

    @property
    def rank(self) -> int:
        """Specificity rank: higher outranks lower (immediate = 4, distant = 0)."""
        return _AREA_RANKS[self]

    @property
    def config(self) -> "ZoneConfig":
        return ZONE_CONFIGS[self]


class RouteZone(str, Enum):
    """Route-mode relevance zones, most specific first."""

    ON_ROUTE = "on_route"
    ROUTE_STATE = "route_state"
    OFF_ROUTE = "off_route"

    @property
    def rank(self) -> int:
        return _ROUTE_RANKS[self]

    @property
    def config(self) -> "ZoneConfig":
        return ROUTE_ZONE_CONFIGS[self]


AnyZone = Union[RelevanceZone, RouteZone]


@dataclass(frozen=True)
class ZoneConfig:
    """Static scoring and display attributes of a relevance zone."""

    score: float
    label: str
    include_in_primary_count: bool


ZONE_CONFIGS: Dict[RelevanceZone, ZoneConfig] = {
    RelevanceZone.IMMEDIATE: ZoneConfig(1.0, "In this area", True),
    RelevanceZone.NEARBY: ZoneConfig(0.7, "Nearby (~15km)", True),
    RelevanceZone.SAME_REGION: ZoneConfig(0.4, "Same region (~30km)", True),
    RelevanceZone.SAME_STATE: ZoneConfig(0.15, "Elsewhere in state", False),
    RelevanceZone.DISTANT: ZoneConfig(0.0, "Far from your location", False),
}

ROUTE_ZONE_CONFIGS: Dict[RouteZone, ZoneConfig] = {
    RouteZone.ON_ROUTE: ZoneConfig(1.0, "On this route", True),
    RouteZone.ROUTE_STATE: ZoneConfig(0.5, "In route state", True),
    RouteZone.OFF_ROUTE: ZoneConfig(0.1, "Elsewhere (not on route)", False),
}

_AREA_RANKS: Dict[RelevanceZone, int] = {
    zone: len(RelevanceZone) - 1 - i for i, zone in enumerate(RelevanceZone)
}
_ROUTE_RANKS: Dict[RouteZone, int] = {
    zone: len(RouteZone) - 1 - i for i, zone in enumerate(RouteZone)
}


def parse_zone(value: str) -> AnyZone:
    """Resolve a zone string from either mode.

    Raises:
        ValueError: If the string names no known zone.
    """
    for enum_cls in (RelevanceZone, RouteZone):
        try:
            return enum_cls(value)
        except ValueError:
            continue
    raise ValueError(f"Unknown relevance zone: {value!r}")
