"""Location string normalization and fuzzy matching for riskbrief.

Incident locations are free text extracted by an upstream LLM and rarely line
up with curated area identifiers ("Lekki Phase 1 area" vs "lekki"). Matching
is a fixed three-tier rule (exact, substring, shared significant token) with
no edit-distance or phonetic component, so results stay reproducible.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9-]")

# Tokens this short are too generic to establish a match ("the", "rd", "gra")
SIGNIFICANT_TOKEN_MIN_LENGTH: int = 4


def normalize_location(location: Optional[str]) -> str:
    """Normalize a location string to a hyphen-delimited lowercase identifier.

    Args:
        location: Free-text location, area id, or state name.

    Returns:
        Normalized string containing only [a-z0-9-]; empty for None.
    """
    if not location:
        return ""
    lowered = _WHITESPACE.sub("-", location.lower().strip())
    return _DISALLOWED.sub("", lowered)


def significant_tokens(normalized: str) -> List[str]:
    """Split a normalized location on hyphens, keeping tokens longer than 3 chars."""
    return [t for t in normalized.split("-") if len(t) >= SIGNIFICANT_TOKEN_MIN_LENGTH]


def locations_match(loc1: Optional[str], loc2: Optional[str]) -> bool:
    """Decide whether two location strings refer to the same place.

    Tiers, in order:
        1. Equal after normalization.
        2. Either normalized string contains the other.
        3. Any significant token (length > 3) appears in both.

    An empty normalized string never matches.

    Args:
        loc1: First location string.
        loc2: Second location string.

    Returns:
        True if the locations match under any tier.
    """
    norm1 = normalize_location(loc1)
    norm2 = normalize_location(loc2)
    if not norm1 or not norm2:
        return False

    if norm1 == norm2:
        return True

    if norm1 in norm2 or norm2 in norm1:
        return True

    tokens2 = set(significant_tokens(norm2))
    return any(token in tokens2 for token in significant_tokens(norm1))


def matches_any(location: Optional[str], candidates: Iterable[str]) -> bool:
    """True if location matches at least one candidate via locations_match()."""
    return any(locations_match(location, candidate) for candidate in candidates)


def contains_term(location: Optional[str], term: str, min_length: int = 3) -> bool:
    """Exact or substring match only, for multi-word terms such as road names.

    Strings shorter than min_length after normalization never match.
    """
    location_norm = normalize_location(location)
    term_norm = normalize_location(term)
    if len(location_norm) < min_length or len(term_norm) < min_length:
        return False
    return term_norm in location_norm or location_norm in term_norm
