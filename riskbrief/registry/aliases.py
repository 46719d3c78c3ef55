"""Location aliases and naming variations.

Maps a canonical area id to the other names it is reported under (including
its Local Government Area). Used to resolve search anchors typed as an alias
and to expand an area into news query terms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from riskbrief.utils.location_utils import normalize_location


@dataclass(frozen=True)
class LocationAliases:
    primary: str
    aliases: Tuple[str, ...]
    lga: Optional[str] = None
    variations: Tuple[str, ...] = ()


def _aliases(primary, aliases, lga=None, variations=()):
    return LocationAliases(primary, tuple(aliases), lga, tuple(variations))


LOCATION_ALIASES: Dict[str, LocationAliases] = {
    # Lagos
    "lekki": _aliases(
        "lekki",
        ["lekki peninsula", "lekki phase 1", "lekki phase 2", "lekki toll gate", "lekki-ajah", "lekki ajah"],
        "Eti-Osa",
        ["lekki", "lekki peninsula"],
    ),
    "victoria-island": _aliases(
        "victoria island", ["vi", "v.i", "victoria-island", "v.i lagos"], "Eti-Osa", ["victoria island", "vi"]
    ),
    "ikoyi": _aliases("ikoyi", ["ikoyi lagos", "ikoyi island"], "Lagos Island", ["ikoyi"]),
    "ajah": _aliases("ajah", ["ajah lagos", "ajah lekki"], "Eti-Osa", ["ajah"]),
    "ikeja": _aliases(
        "ikeja", ["ikeja lagos", "ikeja airport", "murtala muhammed airport"], "Ikeja", ["ikeja"]
    ),
    "yaba": _aliases("yaba", ["yaba lagos", "yaba mainland"], "Lagos Mainland", ["yaba"]),
    "surulere": _aliases("surulere", ["surulere lagos", "surulere mainland"], "Surulere", ["surulere"]),
    "ikorodu": _aliases("ikorodu", ["ikorodu lagos", "ikorodu town"], "Ikorodu", ["ikorodu"]),
    "badagry": _aliases("badagry", ["badagry lagos", "badagry town"], "Badagry", ["badagry"]),
    "apapa": _aliases("apapa", ["apapa lagos", "apapa port", "apapa wharf"], "Apapa", ["apapa"]),
    "festac": _aliases(
        "festac", ["festac town", "festac lagos", "festac amuwo"], "Amuwo-Odofin", ["festac", "festac town"]
    ),
    "mushin": _aliases("mushin", ["mushin lagos", "mushin town"], "Mushin", ["mushin"]),
    "oshodi": _aliases("oshodi", ["oshodi lagos", "oshodi isolo"], "Oshodi-Isolo", ["oshodi"]),
    # FCT Abuja
    "abuja": _aliases(
        "abuja", ["fct", "federal capital territory", "abuja city", "fct abuja"], "Abuja Municipal", ["abuja", "fct"]
    ),
    "wuse": _aliases("wuse", ["wuse zone", "wuse 2", "wuse abuja"], "Abuja Municipal", ["wuse"]),
    "garki": _aliases("garki", ["garki abuja", "garki area"], "Abuja Municipal", ["garki"]),
    "maitama": _aliases("maitama", ["maitama abuja", "maitama district"], "Abuja Municipal", ["maitama"]),
    "gwarinpa": _aliases("gwarinpa", ["gwarinpa abuja", "gwarinpa estate", "gwarimpa"], "Bwari", ["gwarinpa"]),
    "kubwa": _aliases("kubwa", ["kubwa abuja", "kubwa town"], "Bwari", ["kubwa"]),
    "nyanya": _aliases("nyanya", ["nyanya abuja", "nyanya karu"], "Abuja Municipal", ["nyanya"]),
    # Other states
    "kaduna": _aliases("kaduna", ["kaduna state", "kaduna city", "kaduna town"], "Kaduna North", ["kaduna"]),
    "zaria": _aliases("zaria", ["zaria kaduna", "zaria city", "zaria town"], "Zaria", ["zaria"]),
    "kano": _aliases("kano", ["kano state", "kano city", "kano town"], "Kano Municipal", ["kano"]),
    "port-harcourt": _aliases(
        "port harcourt",
        ["ph", "p-h", "port-harcourt", "port harcourt city", "ph city"],
        "Port Harcourt",
        ["port harcourt", "ph", "port-harcourt"],
    ),
    "ibadan": _aliases("ibadan", ["ibadan oyo", "ibadan city", "ibadan town"], "Ibadan North", ["ibadan"]),
    "enugu": _aliases("enugu", ["enugu state", "enugu city", "enugu town"], "Enugu North", ["enugu"]),
    "nsukka": _aliases("nsukka", ["nsukka enugu", "nsukka town", "unn nsukka"], "Nsukka", ["nsukka"]),
    "benin": _aliases("benin", ["benin city", "benin edo", "benin town"], "Oredo", ["benin", "benin city"]),
    "onitsha": _aliases("onitsha", ["onitsha anambra", "onitsha city", "onitsha town"], "Onitsha North", ["onitsha"]),
    "abeokuta": _aliases("abeokuta", ["abeokuta ogun", "abeokuta capital", "abeokuta town"], "Abeokuta North", ["abeokuta"]),
    "ota": _aliases("ota", ["ota ogun", "sango ota", "sango-ota"], "Ado-Odo/Ota", ["ota", "sango ota"]),
}


def resolve_alias(location_id: Optional[str]) -> Optional[str]:
    """Return the canonical area id that location_id names, if any.

    Matches the alias key, its primary name, any alias, or any variation,
    all compared after normalization.
    """
    normalized = normalize_location(location_id)
    if not normalized:
        return None
    if normalized in LOCATION_ALIASES:
        return normalized
    for key, entry in LOCATION_ALIASES.items():
        names = (entry.primary,) + entry.aliases + entry.variations
        if any(normalize_location(name) == normalized for name in names):
            return key
    return None


def location_query_terms(location_id: str) -> List[str]:
    """All search terms for a location: primary, aliases, then variations.

    Unknown locations return themselves unchanged.
    """
    entry = LOCATION_ALIASES.get(normalize_location(location_id))
    if entry is None:
        return [location_id]
    terms: List[str] = []
    for term in (entry.primary,) + entry.aliases + entry.variations:
        if term not in terms:
            terms.append(term)
    return terms


def lga_for_location(location_id: str) -> Optional[str]:
    """Local Government Area of a location, if known."""
    entry = LOCATION_ALIASES.get(normalize_location(location_id))
    return entry.lga if entry else None


def location_aliases(location_id: str) -> List[str]:
    """Primary name followed by aliases; the input itself if unknown."""
    entry = LOCATION_ALIASES.get(normalize_location(location_id))
    if entry is None:
        return [location_id]
    return [entry.primary, *entry.aliases]
