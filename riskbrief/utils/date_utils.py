"""Date utilities for riskbrief.

Incident dates arrive in the compact formats YYYYMMDD or YYYYMMDDHHMMSS.
Always route them through parse_incident_date() before comparing them.
Malformed values never raise: they map to the EPOCH sentinel so they sort
oldest and are easy to recognize.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateutil_parser

# Sentinel returned for any date string that cannot be parsed
EPOCH = datetime(1970, 1, 1)

_SECONDS_PER_DAY = 86400.0

_COMPACT_DATETIME = re.compile(r"^\d{14}")
_COMPACT_DATE = re.compile(r"^\d{8}")


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (incident dates carry no zone)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_incident_date(raw_date: Optional[str]) -> datetime:
    """Parse a compact incident date string.

    YYYYMMDDHHMMSS keeps its time of day; YYYYMMDD resolves to midnight.
    Anything else (too short, non-numeric, impossible calendar values)
    returns EPOCH.

    Args:
        raw_date: Date string from a classified incident.

    Returns:
        Naive datetime, or EPOCH on parse failure.
    """
    if not raw_date:
        return EPOCH
    raw_date = raw_date.strip()

    try:
        if _COMPACT_DATETIME.match(raw_date):
            return datetime.strptime(raw_date[:14], "%Y%m%d%H%M%S")
        if _COMPACT_DATE.match(raw_date):
            return datetime.strptime(raw_date[:8], "%Y%m%d")
    except ValueError:
        return EPOCH
    return EPOCH


def is_epoch(value: datetime) -> bool:
    """True if value is the unparsable-date sentinel."""
    return value == EPOCH


def days_between(earlier: datetime, later: datetime) -> float:
    """Fractional number of days from earlier to later (negative if reversed)."""
    return (later - earlier).total_seconds() / _SECONDS_PER_DAY


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves away from zero for positives (2.5 -> 3, 0.25 -> 0.3).

    Python's round() uses banker's rounding; scores and day counts shown to
    users must not flip between even and odd neighbours.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def parse_reference_time(value: Optional[str]) -> Optional[datetime]:
    """Parse a user-supplied "now" (ISO 8601, compact, or free-form).

    Timezone-aware values are converted to naive UTC.

    Args:
        value: Date/time string, or None.

    Returns:
        Naive datetime, or None when value is empty.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if not value:
        return None
    value = value.strip()
    if _COMPACT_DATE.match(value) and value.isdigit():
        parsed = parse_incident_date(value)
        if is_epoch(parsed):
            raise ValueError(f"Unparsable reference time: {value!r}")
        return parsed
    try:
        parsed = dateutil_parser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Unparsable reference time: {value!r}") from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_incident_date(value: datetime) -> str:
    """Format a datetime in the compact YYYYMMDDHHMMSS incident format."""
    return value.strftime("%Y%m%d%H%M%S")
