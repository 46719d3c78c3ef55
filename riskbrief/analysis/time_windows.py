"""Risk-level based look-back windows.

Chronic conflict zones need longer windows for meaningful trend analysis, so
the dynamic-adjustment window grows with the static risk level.
"""

from __future__ import annotations

from typing import Optional

from config.defaults import DEFAULT_TIME_WINDOW_DAYS, RISK_TIME_WINDOW_DAYS


def time_window_for_risk(risk_level: Optional[str]) -> int:
    """Look-back window in days for a static risk level (7 for unknown levels)."""
    key = " ".join((risk_level or "").upper().split())
    return RISK_TIME_WINDOW_DAYS.get(key, DEFAULT_TIME_WINDOW_DAYS)
