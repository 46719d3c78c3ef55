"""riskbrief utilities package.

All utilities are stateless pure functions with no external calls or side effects.
"""

from riskbrief.utils.date_utils import (
    EPOCH,
    days_between,
    format_incident_date,
    is_epoch,
    parse_incident_date,
    parse_reference_time,
    round_half_up,
    utc_now,
)
from riskbrief.utils.location_utils import (
    contains_term,
    locations_match,
    matches_any,
    normalize_location,
    significant_tokens,
)

__all__ = [
    "EPOCH",
    "parse_incident_date",
    "parse_reference_time",
    "format_incident_date",
    "is_epoch",
    "days_between",
    "round_half_up",
    "utc_now",
    "normalize_location",
    "significant_tokens",
    "locations_match",
    "matches_any",
    "contains_term",
]
