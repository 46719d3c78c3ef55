"""Logging setup for riskbrief.

Every module logs through ``logging.getLogger(__name__)``, so all records land
under the ``riskbrief`` namespace configured by config/logging.yaml. The engine
wraps its logger in a QueryContextAdapter so each line names the area or
route being assessed.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional

import yaml

PACKAGE_LOGGER = "riskbrief"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "logging.yaml"


def _read_config(config_path: Path) -> Optional[Dict[str, Any]]:
    if not config_path.is_file():
        return None
    with config_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or None


def configure_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Apply the YAML logging configuration, with optional overrides.

    Args:
        config_path: Alternative dictConfig YAML; config/logging.yaml by default.
        log_level: Level forced onto the configured riskbrief loggers.
        log_file: Extra file that receives every riskbrief record.
    """
    cfg = _read_config(Path(config_path) if config_path else DEFAULT_CONFIG_PATH)
    if cfg is None:
        logging.basicConfig(
            level=(log_level or "INFO").upper(),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            filename=log_file,
        )
        return

    loggers = cfg.setdefault("loggers", {})
    loggers.setdefault(PACKAGE_LOGGER, {"propagate": True})
    if log_file:
        cfg.setdefault("handlers", {})["file"] = {
            "class": "logging.FileHandler",
            "formatter": "standard",
            "filename": log_file,
            "encoding": "utf-8",
        }
    for logger_cfg in loggers.values():
        if log_level:
            logger_cfg["level"] = log_level.upper()
        if log_file:
            logger_cfg.setdefault("handlers", []).append("file")

    logging.config.dictConfig(cfg)


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` inside the riskbrief namespace."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class QueryContextAdapter(logging.LoggerAdapter):
    """Prefixes messages with ``[query_id]`` and stamps it on each record.

    The ``query_id`` record attribute lets handlers or filters select the
    lines of a single assessment, e.g. ``area:lagos:lekki``.
    """

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return f"[{self.extra['query_id']}] {msg}", kwargs


def get_query_logger(name: str, query_id: str) -> QueryContextAdapter:
    return QueryContextAdapter(get_logger(name), {"query_id": query_id})
