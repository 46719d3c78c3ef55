"""Area → state hierarchy and state naming for riskbrief.

Pure lookup tables — no I/O. Area keys are normalized identifiers; state
values are display names, compared through canonical_state().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from riskbrief.utils.location_utils import normalize_location


@dataclass(frozen=True)
class AreaHierarchy:
    """Owning state (display name) and optional sub-zone of an area."""

    state: str
    zone: Optional[str] = None


def _area(state: str, zone: Optional[str] = None) -> AreaHierarchy:
    return AreaHierarchy(state=state, zone=zone)


AREA_TO_STATE: Dict[str, AreaHierarchy] = {
    # Lagos - Island
    "lekki": _area("Lagos", "Lagos Island"),
    "victoria-island": _area("Lagos", "Lagos Island"),
    "vi": _area("Lagos", "Lagos Island"),
    "ikoyi": _area("Lagos", "Lagos Island"),
    "lagos-island": _area("Lagos", "Lagos Island"),
    "ajah": _area("Lagos", "Lekki-Ajah"),
    "sangotedo": _area("Lagos", "Lekki-Ajah"),
    # Lagos - Mainland
    "ikeja": _area("Lagos", "Lagos Mainland"),
    "yaba": _area("Lagos", "Lagos Mainland"),
    "surulere": _area("Lagos", "Lagos Mainland"),
    "maryland": _area("Lagos", "Lagos Mainland"),
    "ojodu": _area("Lagos", "Lagos Mainland"),
    "berger": _area("Lagos", "Lagos Mainland"),
    "ogba": _area("Lagos", "Lagos Mainland"),
    "gbagada": _area("Lagos", "Lagos Mainland"),
    "anthony": _area("Lagos", "Lagos Mainland"),
    "lagos-mainland": _area("Lagos", "Lagos Mainland"),
    # Lagos - other areas
    "mushin": _area("Lagos", "Mushin-Oshodi"),
    "oshodi": _area("Lagos", "Mushin-Oshodi"),
    "isolo": _area("Lagos", "Mushin-Oshodi"),
    "ikorodu": _area("Lagos", "Ikorodu"),
    "epe": _area("Lagos", "Epe"),
    "badagry": _area("Lagos", "Badagry"),
    "apapa": _area("Lagos", "Apapa"),
    "festac": _area("Lagos", "Festac-Amuwo"),
    "amuwo-odofin": _area("Lagos", "Festac-Amuwo"),
    "agege": _area("Lagos", "Agege-Ifako"),
    "ifako": _area("Lagos", "Agege-Ifako"),
    "alimosho": _area("Lagos", "Alimosho"),
    "egbeda": _area("Lagos", "Alimosho"),
    "idimu": _area("Lagos", "Alimosho"),
    # FCT Abuja
    "abuja": _area("FCT Abuja"),
    "wuse": _area("FCT Abuja", "Abuja Central"),
    "wuse-2": _area("FCT Abuja", "Abuja Central"),
    "garki": _area("FCT Abuja", "Abuja Central"),
    "maitama": _area("FCT Abuja", "Abuja Central"),
    "asokoro": _area("FCT Abuja", "Abuja Central"),
    "central-area": _area("FCT Abuja", "Abuja Central"),
    "gwarinpa": _area("FCT Abuja", "Abuja North"),
    "jabi": _area("FCT Abuja", "Abuja North"),
    "utako": _area("FCT Abuja", "Abuja North"),
    "wuye": _area("FCT Abuja", "Abuja North"),
    "lifecamp": _area("FCT Abuja", "Abuja North"),
    "kubwa": _area("FCT Abuja", "Kubwa"),
    "bwari": _area("FCT Abuja", "Bwari"),
    "nyanya": _area("FCT Abuja", "Nyanya-Karu"),
    "karu": _area("FCT Abuja", "Nyanya-Karu"),
    "lugbe": _area("FCT Abuja", "Lugbe"),
    # Kaduna
    "kaduna": _area("Kaduna"),
    "kaduna-north": _area("Kaduna", "Kaduna City"),
    "kaduna-south": _area("Kaduna", "Kaduna City"),
    "zaria": _area("Kaduna", "Zaria"),
    "kafanchan": _area("Kaduna", "Kafanchan"),
    # Kano
    "kano": _area("Kano"),
    "kano-municipal": _area("Kano", "Kano City"),
    # Rivers
    "port-harcourt": _area("Rivers"),
    "ph": _area("Rivers"),
    "rivers": _area("Rivers"),
    "obio-akpor": _area("Rivers", "Port Harcourt"),
    "trans-amadi": _area("Rivers", "Port Harcourt"),
    "gra-ph": _area("Rivers", "Port Harcourt"),
    # Oyo
    "ibadan": _area("Oyo"),
    "ibadan-north": _area("Oyo", "Ibadan"),
    "ibadan-south": _area("Oyo", "Ibadan"),
    "bodija": _area("Oyo", "Ibadan"),
    "challenge": _area("Oyo", "Ibadan"),
    "oyo": _area("Oyo"),
    # Edo
    "benin": _area("Edo"),
    "benin-city": _area("Edo"),
    "edo": _area("Edo"),
    "gra-benin": _area("Edo", "Benin City"),
    # Delta
    "warri": _area("Delta"),
    "asaba": _area("Delta"),
    "delta": _area("Delta"),
    "effurun": _area("Delta", "Warri"),
    # Enugu
    "enugu": _area("Enugu"),
    "nsukka": _area("Enugu", "Nsukka"),
    "independence-layout": _area("Enugu", "Enugu"),
    "gra-enugu": _area("Enugu", "Enugu"),
    # Anambra
    "onitsha": _area("Anambra"),
    "awka": _area("Anambra"),
    "nnewi": _area("Anambra", "Nnewi"),
    # Ogun
    "abeokuta": _area("Ogun"),
    "ota": _area("Ogun", "Ota-Sango"),
    "sango-ota": _area("Ogun", "Ota-Sango"),
    "ijebu-ode": _area("Ogun", "Ijebu"),
    # Ondo
    "akure": _area("Ondo"),
    "ondo": _area("Ondo"),
    # Single-city states
    "ilorin": _area("Kwara"),
    "lokoja": _area("Kogi"),
    "jos": _area("Plateau"),
    "jos-north": _area("Plateau", "Jos"),
    "jos-south": _area("Plateau", "Jos"),
    "maiduguri": _area("Borno"),
    "minna": _area("Niger"),
    "lafia": _area("Nasarawa"),
    "makurdi": _area("Benue"),
    "calabar": _area("Cross River"),
    "uyo": _area("Akwa Ibom"),
    "owerri": _area("Imo"),
    "aba": _area("Abia"),
    "umuahia": _area("Abia"),
    "yenagoa": _area("Bayelsa"),
    "ado-ekiti": _area("Ekiti"),
    "osogbo": _area("Osun"),
    "ife": _area("Osun", "Ile-Ife"),
    "ile-ife": _area("Osun", "Ile-Ife"),
}

STATE_DISPLAY_NAMES: Dict[str, str] = {
    "lagos": "Lagos",
    "fct": "FCT Abuja",
    "kaduna": "Kaduna",
    "kano": "Kano",
    "rivers": "Rivers",
    "oyo": "Oyo",
    "edo": "Edo",
    "delta": "Delta",
    "enugu": "Enugu",
    "anambra": "Anambra",
    "ogun": "Ogun",
    "ondo": "Ondo",
    "kwara": "Kwara",
    "kogi": "Kogi",
    "plateau": "Plateau",
    "borno": "Borno",
    "niger": "Niger",
    "nasarawa": "Nasarawa",
    "benue": "Benue",
    "cross-river": "Cross River",
    "akwa-ibom": "Akwa Ibom",
    "imo": "Imo",
    "abia": "Abia",
    "bayelsa": "Bayelsa",
    "ekiti": "Ekiti",
    "osun": "Osun",
    "zamfara": "Zamfara",
    "katsina": "Katsina",
    "sokoto": "Sokoto",
    "kebbi": "Kebbi",
    "jigawa": "Jigawa",
    "bauchi": "Bauchi",
    "gombe": "Gombe",
    "yobe": "Yobe",
    "adamawa": "Adamawa",
    "taraba": "Taraba",
    "ebonyi": "Ebonyi",
}

# Alternative spellings that name the same state
_STATE_ALIASES: Dict[str, str] = {
    "fct-abuja": "fct",
    "abuja": "fct",
    "federal-capital-territory": "fct",
    "lagos-state": "lagos",
}


def canonical_state(state: Optional[str]) -> str:
    """Map a state name or id to its canonical id ("FCT Abuja" -> "fct").

    Unknown names are returned normalized, so comparisons stay consistent.
    """
    norm = normalize_location(state)
    if norm.endswith("-state") and norm[: -len("-state")] in STATE_DISPLAY_NAMES:
        norm = norm[: -len("-state")]
    return _STATE_ALIASES.get(norm, norm)


def get_area_hierarchy(location_id: Optional[str]) -> Optional[AreaHierarchy]:
    """Look up the owning state of an area identifier.

    Tries the normalized id directly, then compares with hyphens removed
    ("lifecamp" vs "life-camp").

    Args:
        location_id: Area id or free-text area name.

    Returns:
        AreaHierarchy, or None if the area is unknown.
    """
    normalized = normalize_location(location_id)
    if not normalized:
        return None

    direct = AREA_TO_STATE.get(normalized)
    if direct is not None:
        return direct

    no_dashes = normalized.replace("-", "")
    for key, value in AREA_TO_STATE.items():
        if key.replace("-", "") == no_dashes:
            return value
    return None


def state_display_name(state_id: str) -> str:
    """Human-readable state name, or the input unchanged if unknown."""
    return STATE_DISPLAY_NAMES.get(canonical_state(state_id), state_id)
