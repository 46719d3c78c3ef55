"""Hand-curated zone adjacency rings per state.

ZONE_ADJACENCY[state_id][anchor] holds three rings of area identifiers known
to be geographically close to the anchor: immediate, nearby (~15km) and
same_region (~30km). Every identifier is lowercase and hyphen-delimited.
State keys are canonical state ids (see registry.areas.canonical_state).
"""

from __future__ import annotations

from typing import Dict, List

ZoneRings = Dict[str, List[str]]

RING_NAMES = ("immediate", "nearby", "same_region")

_LAGOS: Dict[str, ZoneRings] = {
    "lekki": {
        "immediate": ["lekki", "lekki-phase-1", "lekki-phase-2", "chevron", "ikate", "marwa", "jakande"],
        "nearby": ["ajah", "victoria-island", "vi", "ikoyi", "sangotedo", "abraham-adesanya", "oniru"],
        "same_region": ["lagos-island", "eko-atlantic", "banana-island", "obalende"],
    },
    "victoria-island": {
        "immediate": ["victoria-island", "vi", "oniru", "eko-atlantic", "bar-beach"],
        "nearby": ["lekki", "ikoyi", "lagos-island", "obalende"],
        "same_region": ["ajah", "banana-island", "apapa"],
    },
    "ikoyi": {
        "immediate": ["ikoyi", "banana-island", "parkview"],
        "nearby": ["victoria-island", "vi", "obalende", "lagos-island"],
        "same_region": ["lekki", "apapa", "yaba"],
    },
    "ikeja": {
        "immediate": ["ikeja", "ikeja-gra", "alausa", "oregun", "opebi", "adeniyi-jones", "awolowo-way"],
        "nearby": ["maryland", "ojodu", "ogba", "agidingbi", "magodo", "omole"],
        "same_region": ["yaba", "surulere", "gbagada", "anthony", "berger"],
    },
    "yaba": {
        "immediate": ["yaba", "akoka", "unilag", "iwaya", "onike"],
        "nearby": ["surulere", "ebute-metta", "oyingbo", "gbagada", "anthony"],
        "same_region": ["ikeja", "maryland", "lagos-island", "apapa"],
    },
    "surulere": {
        "immediate": ["surulere", "aguda", "iponri", "ojuelegba", "lawanson"],
        "nearby": ["yaba", "mushin", "oshodi", "ikate"],
        "same_region": ["ikeja", "apapa", "festac"],
    },
    "ikorodu": {
        "immediate": ["ikorodu", "ikorodu-town", "igbogbo", "ijede", "imota"],
        "nearby": ["agric", "owutu", "agbowa"],
        "same_region": ["gbagada", "ojota", "ketu", "mile-12"],
    },
    "badagry": {
        "immediate": ["badagry", "badagry-town", "ajara"],
        "nearby": ["ojo", "satellite-town"],
        "same_region": ["festac", "alaba", "apapa"],
    },
    "festac": {
        "immediate": ["festac", "festac-town", "amuwo-odofin"],
        "nearby": ["apapa", "ojo", "satellite-town", "alaba"],
        "same_region": ["surulere", "iganmu", "orile"],
    },
    "apapa": {
        "immediate": ["apapa", "apapa-wharf", "tin-can", "kirikiri"],
        "nearby": ["festac", "iganmu", "orile", "ijora"],
        "same_region": ["surulere", "yaba", "lagos-island"],
    },
}

_FCT: Dict[str, ZoneRings] = {
    "wuse": {
        "immediate": ["wuse", "wuse-2", "wuse-zone-3", "wuse-zone-4", "wuse-zone-5"],
        "nearby": ["garki", "maitama", "utako", "jabi", "gudu"],
        "same_region": ["asokoro", "gwarinpa", "central-area"],
    },
    "maitama": {
        "immediate": ["maitama", "maitama-district"],
        "nearby": ["wuse", "asokoro", "garki", "jabi"],
        "same_region": ["gwarinpa", "utako", "central-area"],
    },
    "gwarinpa": {
        "immediate": ["gwarinpa", "gwarimpa", "life-camp", "kado"],
        "nearby": ["jabi", "utako", "wuye", "mabushi"],
        "same_region": ["wuse", "maitama", "kubwa"],
    },
    "garki": {
        "immediate": ["garki", "garki-area-1", "garki-area-2", "garki-area-3"],
        "nearby": ["wuse", "asokoro", "central-area", "gudu"],
        "same_region": ["maitama", "jabi", "lugbe"],
    },
    "kubwa": {
        "immediate": ["kubwa", "kubwa-fha", "byazhin", "gwarinpa-estate"],
        "nearby": ["bwari", "dutse", "dei-dei"],
        "same_region": ["gwarinpa", "jabi", "wuse"],
    },
    "lugbe": {
        "immediate": ["lugbe", "lugbe-fha", "airport-road"],
        "nearby": ["idu", "jabi", "garki", "kuje"],
        "same_region": ["wuse", "asokoro", "nyanya"],
    },
    "nyanya": {
        "immediate": ["nyanya", "karu", "jikwoyi", "orozo"],
        "nearby": ["mararaba", "kurudu", "asokoro-extension"],
        "same_region": ["lugbe", "garki", "kuje"],
    },
}

_ENUGU: Dict[str, ZoneRings] = {
    "enugu": {
        "immediate": ["enugu", "enugu-city", "independence-layout", "gra-enugu", "new-haven", "ogui"],
        "nearby": ["trans-ekulu", "abakpa", "emene", "uwani"],
        "same_region": ["agbani", "9th-mile", "udi"],
    },
    "nsukka": {
        "immediate": ["nsukka", "nsukka-town", "unn", "university-of-nigeria"],
        "nearby": ["obukpa", "edem", "ibagwa"],
        "same_region": ["enugu-ezike", "obollo-afor"],
    },
}

_RIVERS: Dict[str, ZoneRings] = {
    "port-harcourt": {
        "immediate": ["port-harcourt", "ph", "gra-ph", "d-line", "old-gra", "new-gra"],
        "nearby": ["trans-amadi", "rumuokoro", "eliozu", "rumuola", "peter-odili"],
        "same_region": ["obio-akpor", "oyigbo", "eleme"],
    },
}

_KADUNA: Dict[str, ZoneRings] = {
    "kaduna": {
        "immediate": ["kaduna", "kaduna-town", "barnawa", "sabon-tasha", "malali"],
        "nearby": ["kakuri", "narayi", "ungwan-rimi", "tudun-wada"],
        "same_region": ["rigasa", "mando", "kaduna-south"],
    },
    "zaria": {
        "immediate": ["zaria", "zaria-city", "abu", "samaru"],
        "nearby": ["sabon-gari-zaria", "tudun-jukun", "kwarbai"],
        "same_region": ["soba", "giwa"],
    },
}

_KANO: Dict[str, ZoneRings] = {
    "kano": {
        "immediate": ["kano", "kano-city", "nasarawa-gra", "bompai", "sabon-gari-kano"],
        "nearby": ["fagge", "tarauni", "ungogo", "gwale"],
        "same_region": ["wudil", "dawakin", "kumbotso"],
    },
}

_OYO: Dict[str, ZoneRings] = {
    "ibadan": {
        "immediate": ["ibadan", "ibadan-city", "bodija", "uc-ibadan", "dugbe", "challenge"],
        "nearby": ["ring-road", "iwo-road", "ojoo", "agodi", "jericho"],
        "same_region": ["oluyole", "egbeda", "moniya"],
    },
}

ZONE_ADJACENCY: Dict[str, Dict[str, ZoneRings]] = {
    "lagos": _LAGOS,
    "fct": _FCT,
    "enugu": _ENUGU,
    "rivers": _RIVERS,
    "kaduna": _KADUNA,
    "kano": _KANO,
    "oyo": _OYO,
}
