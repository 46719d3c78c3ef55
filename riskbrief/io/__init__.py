"""riskbrief I/O package.

File read/write operations only — no business logic in this layer.
"""

from riskbrief.io.persistence import load_incidents, load_json, save_json, to_json

__all__ = [
    "save_json",
    "load_json",
    "load_incidents",
    "to_json",
]
