"""Inter-state road corridors.

STATE_PAIR_TO_ROAD is keyed by two canonical state ids joined with "_" in
sorted order. A route's roads are the corridors between each consecutive pair
of traversed states.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from riskbrief.registry.areas import canonical_state


@dataclass(frozen=True)
class RoadInfo:
    road_id: str
    name: str
    query_terms: Tuple[str, ...] = ()


def _road(road_id: str, name: str, *terms: str) -> RoadInfo:
    return RoadInfo(road_id=road_id, name=name, query_terms=terms)


STATE_PAIR_TO_ROAD: Dict[str, RoadInfo] = {
    # Lagos corridor
    "lagos_ogun": _road(
        "lagos-ibadan", "Lagos - Ibadan Expressway",
        "Lagos Ibadan expressway", "Shagamu", "Sagamu interchange", "Ibafo",
    ),
    "ogun_oyo": _road(
        "lagos-ibadan-2", "Lagos - Ibadan Expressway", "Lagos Ibadan expressway", "Ibadan toll gate"
    ),
    "kwara_oyo": _road(
        "ibadan-ilorin", "Ibadan - Ilorin Road", "Ibadan Ilorin road", "Oyo Ogbomoso road", "Ogbomoso"
    ),
    "kogi_kwara": _road(
        "ilorin-lokoja", "Ilorin - Lokoja Highway", "Ilorin Lokoja highway", "Jebba", "Kabba road"
    ),
    "fct_kogi": _road(
        "lokoja-abuja", "Lokoja - Abuja Highway",
        "Lokoja Abuja highway", "Lokoja Abuja road", "Koton Karfe",
    ),
    "fct_kaduna": _road(
        "abuja-kaduna", "Abuja - Kaduna Highway",
        "Abuja Kaduna highway", "Abuja Kaduna expressway", "Rijana", "Katari",
    ),
    "kaduna_kano": _road(
        "kaduna-kano", "Kaduna - Kano Road", "Kaduna Kano road", "Kaduna Zaria road", "Zaria Kano"
    ),
    # Lagos - Benin
    "lagos_ondo": _road(
        "lagos-ore", "Lagos - Ore - Benin Expressway",
        "Lagos Benin expressway", "Ore road", "Sagamu Benin", "Ijebu Ode road",
    ),
    "edo_ondo": _road(
        "ore-benin", "Ore - Benin Expressway", "Ore Benin road", "Lagos Benin expressway", "Okada"
    ),
    "ogun_ondo": _road("sagamu-ore", "Sagamu - Ore Road", "Sagamu Ore", "Sagamu Benin", "Ijebu Ode"),
    # Benin - Onitsha - Enugu
    "anambra_edo": _road(
        "benin-onitsha", "Benin - Asaba - Onitsha Road",
        "Benin Onitsha", "Benin Asaba road", "Asaba Onitsha", "Niger bridge",
    ),
    "delta_edo": _road("benin-asaba", "Benin - Asaba Expressway", "Benin Asaba expressway", "Benin Asaba road"),
    "anambra_delta": _road(
        "asaba-onitsha", "Asaba - Onitsha (Niger Bridge)", "Asaba Onitsha", "Niger bridge", "Onitsha bridge"
    ),
    "anambra_enugu": _road(
        "onitsha-enugu", "Onitsha - Enugu Expressway",
        "Onitsha Enugu expressway", "Onitsha Enugu road", "Awka road",
    ),
    # South-east and south-south
    "enugu_rivers": _road(
        "enugu-ph", "Enugu - Port Harcourt Expressway", "Enugu Port Harcourt expressway", "Enugu PH road"
    ),
    "abia_enugu": _road("enugu-aba", "Enugu - Aba Road", "Enugu Aba road", "Enugu Abia"),
    "abia_rivers": _road("aba-ph", "Aba - Port Harcourt Expressway", "Aba Port Harcourt expressway", "Aba PH road"),
    "imo_rivers": _road("owerri-ph", "Owerri - Port Harcourt Road", "Owerri Port Harcourt road", "Owerri PH"),
    "abia_imo": _road("aba-owerri", "Aba - Owerri Road", "Aba Owerri road", "Aba Owerri expressway"),
    # North-central
    "kaduna_niger": _road("kaduna-minna", "Kaduna - Minna Road", "Kaduna Minna road"),
    "fct_niger": _road("abuja-minna", "Abuja - Minna Road", "Abuja Minna road", "Suleja Minna"),
    "fct_nasarawa": _road("abuja-lafia", "Abuja - Lafia Road", "Abuja Lafia road", "Keffi road"),
    "benue_nasarawa": _road("lafia-makurdi", "Lafia - Makurdi Road", "Lafia Makurdi road"),
    "kaduna_plateau": _road("kaduna-jos", "Kaduna - Jos Road", "Kaduna Jos road", "Kafanchan Jos"),
    "bauchi_plateau": _road("jos-bauchi", "Jos - Bauchi Road", "Jos Bauchi road"),
    # Calabar
    "akwa-ibom_cross-river": _road("uyo-calabar", "Uyo - Calabar Road", "Uyo Calabar road"),
    "akwa-ibom_rivers": _road("ph-uyo", "Port Harcourt - Uyo Road", "Port Harcourt Uyo road", "PH Uyo"),
}


def road_for_state_pair(state1: str, state2: str) -> Optional[RoadInfo]:
    """The corridor connecting two states, in either order."""
    key = "_".join(sorted((canonical_state(state1), canonical_state(state2))))
    return STATE_PAIR_TO_ROAD.get(key)


def roads_for_route(state_ids: Sequence[str]) -> List[RoadInfo]:
    """Corridors between consecutive route states, deduplicated by road id."""
    roads: List[RoadInfo] = []
    seen = set()
    for first, second in zip(state_ids, state_ids[1:]):
        road = road_for_state_pair(first, second)
        if road is not None and road.road_id not in seen:
            roads.append(road)
            seen.add(road.road_id)
    return roads


def road_terms_for_route(state_ids: Sequence[str]) -> List[str]:
    """Road names followed by their query terms, without duplicates."""
    terms: List[str] = []
    for road in roads_for_route(state_ids):
        for term in (road.name, *road.query_terms):
            if term not in terms:
                terms.append(term)
    return terms
