#!/usr/bin/env python3
"""riskbrief CLI — assess an area or route from a file of classified incidents.

Usage:
    python scripts/run_assessment.py --incidents incidents.json --anchor lekki --state lagos
    python scripts/run_assessment.py --incidents incidents.json --route lagos ogun oyo --static-risk high
    python scripts/run_assessment.py --incidents incidents.json --anchor wuse --state fct \\
        --now 2024-01-15T12:00:00 --output outputs/wuse.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path for consistent import resolution
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.defaults import DEFAULT_LOG_LEVEL  # noqa: E402
from config.settings import EngineConfig  # noqa: E402
from riskbrief.engine import assess_area, assess_route  # noqa: E402
from riskbrief.io.persistence import load_incidents, save_json, to_json  # noqa: E402
from riskbrief.utils.date_utils import parse_reference_time  # noqa: E402
from riskbrief.utils.logging_utils import configure_logging, get_logger  # noqa: E402


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argparse argument parser for a single assessment."""
    parser = argparse.ArgumentParser(
        prog="run_assessment",
        description="riskbrief — incident relevance and risk scoring for an area or route",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # ── Input ───────────────────────────────────────────────────────────────────
    parser.add_argument(
        "--incidents",
        type=str,
        required=True,
        help="JSON file of classified incidents (list, or object with an 'incidents' list)",
    )

    # ── Query ───────────────────────────────────────────────────────────────────
    parser.add_argument("--anchor", type=str, default=None, help="Area searched for (area mode)")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--state", type=str, help="State of the anchor (area mode)")
    target.add_argument(
        "--route",
        type=str,
        nargs="+",
        metavar="STATE",
        help="States traversed by the route, in travel order (route mode)",
    )

    # ── Dynamic adjustment ──────────────────────────────────────────────────────
    parser.add_argument(
        "--static-risk",
        type=str,
        default=None,
        help="Static baseline risk level (low, moderate, high, very high, extreme)",
    )
    parser.add_argument(
        "--window-days",
        type=int,
        default=None,
        help="Look-back window in days (derived from the static level if omitted)",
    )
    parser.add_argument(
        "--now",
        type=str,
        default=None,
        help="Reference time for recency and windows (ISO 8601 or YYYYMMDD[HHMMSS])",
    )

    # ── Output and logging ──────────────────────────────────────────────────────
    parser.add_argument(
        "--output", type=str, default=None, help="Write the assessment JSON here instead of stdout"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity level",
    )
    return parser


def args_to_config(args: argparse.Namespace) -> EngineConfig:
    """Convert parsed CLI arguments to an EngineConfig instance.

    Values not given on the command line fall back to the environment.
    """
    overrides = {"log_level": args.log_level}
    if args.window_days is not None:
        overrides["window_days"] = args.window_days
    return EngineConfig(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint — parse arguments, load incidents, run the assessment.

    Returns:
        Process exit code (0 on success).
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.state and not args.anchor:
        parser.error("--anchor is required with --state")

    configure_logging(log_level=args.log_level)
    logger = get_logger("cli")

    try:
        config = args_to_config(args)
        now = parse_reference_time(args.now)
    except ValueError as exc:
        logger.error("Invalid arguments: %s", exc)
        return 2

    incidents = load_incidents(args.incidents)
    if incidents is None:
        logger.error("Could not read incidents from %s", args.incidents)
        return 1

    try:
        if args.route:
            assessment = assess_route(
                args.route, incidents, static_level=args.static_risk, config=config, now=now
            )
        else:
            assessment = assess_area(
                args.anchor, args.state, incidents, static_level=args.static_risk, config=config, now=now
            )
    except (TypeError, ValueError) as exc:
        logger.error("Assessment failed: %s", exc)
        return 1

    if args.output:
        save_json(assessment, args.output)
        logger.info("Assessment %s written to %s", assessment.query_id, args.output)
    else:
        print(to_json(assessment))
    return 0


if __name__ == "__main__":
    sys.exit(main())
