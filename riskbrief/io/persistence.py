"""JSON persistence utilities for riskbrief.

Provides atomic file writes (write-to-temp-then-rename), safe JSON loading,
and reading incident files produced by the classification service.
The engine never calls this module; it is used by the CLI and callers only.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
import tempfile
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from riskbrief.models.incidents import ClassifiedIncident

logger = logging.getLogger(__name__)


class _DataclassEncoder(json.JSONEncoder):
    """JSON encoder that handles dataclasses, enums, datetimes and Path objects.

    Incidents are written in the same shape load_incidents reads, so an
    assessment's output can be fed back in.
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, ClassifiedIncident):
            return obj.to_dict()
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            # Shallow, so nested incidents come back through default()
            return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


def to_json(data: Any, indent: int = 2) -> str:
    """Serialize data (including result dataclasses) to a JSON string."""
    return json.dumps(data, indent=indent, ensure_ascii=False, cls=_DataclassEncoder)


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Atomically write data to a JSON file.

    Uses a write-to-temp-then-rename strategy to prevent partial writes.
    Creates parent directories if they do not exist.

    Args:
        data: Data to serialize. Supports dicts, lists, dataclasses, enums and Path objects.
        path: Output file path.
        indent: JSON indentation level (default: 2).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        serialized = to_json(data, indent=indent)
    except (TypeError, ValueError) as exc:
        logger.error("JSON serialization failed for %s: %s", path, exc)
        raise

    # Atomic write: temp file in the same directory, then rename
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp.write(serialized)
        tmp_path = tmp.name

    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        os.unlink(tmp_path)
        logger.error("Atomic rename failed for %s: %s", path, exc)
        raise

    logger.debug("Saved JSON to %s (%d bytes)", path, len(serialized))


def load_json(path: str | Path) -> Optional[Any]:
    """Load and parse a JSON file.

    Returns None if the file does not exist or cannot be parsed.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed Python object, or None on error.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("JSON file not found: %s", path)
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to load JSON from %s: %s", path, exc)
        return None


def load_incidents(path: str | Path) -> Optional[List[ClassifiedIncident]]:
    """Load classified incidents from a JSON file.

    Accepts either a bare list of incident objects or an object with an
    ``incidents`` list. Entries that are not JSON objects are skipped.

    Args:
        path: Path to the incidents file.

    Returns:
        List of ClassifiedIncident, or None if the file is missing or malformed.
    """
    raw = load_json(path)
    if isinstance(raw, dict):
        raw = raw.get("incidents")
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("Incidents file %s does not contain an incident list", path)
        return None

    incidents = [ClassifiedIncident.from_dict(item) for item in raw if isinstance(item, dict)]
    skipped = len(raw) - len(incidents)
    if skipped:
        logger.warning("Skipped %d non-object entries in %s", skipped, path)
    logger.debug("Loaded %d incidents from %s", len(incidents), path)
    return incidents
