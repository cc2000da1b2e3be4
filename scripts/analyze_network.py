#!/usr/bin/env python
"""CLI for running follow-network metrics on a follow data file."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from socnet.data import read_follow_pairs
from socnet.exceptions import SocNetError
from socnet.graph import UNREACHABLE, NetworkAnalytics, NetworkModel
from socnet.logging_utils import setup_logging

logger = logging.getLogger("analyze_network")

DEFAULT_OUTPUT = Path("network_summary.json")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze a follow network")
    parser.add_argument(
        "input",
        type=Path,
        help="Whitespace-separated file of 'follower followee' name pairs.",
    )
    parser.add_argument(
        "--distance",
        nargs=2,
        action="append",
        default=[],
        metavar=("FROM", "TO"),
        help="Shortest follow distance between two users (repeatable).",
    )
    parser.add_argument(
        "--path",
        nargs=2,
        action="append",
        default=[],
        metavar=("FROM", "TO"),
        help="Shortest follow chain between two users (repeatable).",
    )
    parser.add_argument(
        "--centrality",
        action="append",
        default=[],
        metavar="USER",
        help="Mean distance from USER to everyone else (repeatable).",
    )
    parser.add_argument(
        "--reachable",
        action="append",
        default=[],
        metavar="USER",
        help="Users reachable from USER (repeatable).",
    )
    parser.add_argument(
        "--reachable-only",
        action="store_true",
        default=None,
        help="Ignore unreachable users when computing centrality.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="Where to write JSON summary.",
    )
    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Print JSON summary to stdout instead of writing to a file.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress console logging (the log file is still written).",
    )
    return parser.parse_args(argv)


def _serialize_distance(value: int) -> Optional[int]:
    return None if value == UNREACHABLE else value


def run_metrics(analytics: NetworkAnalytics, args: argparse.Namespace) -> Dict[str, Any]:
    summary = analytics.summary()
    queries: Dict[str, Any] = {
        "distance": [],
        "path": [],
        "centrality": {},
        "reachable": {},
    }

    for user1, user2 in args.distance:
        queries["distance"].append({
            "from": user1,
            "to": user2,
            "distance": _serialize_distance(analytics.distance(user1, user2)),
        })
    for user1, user2 in args.path:
        queries["path"].append({"from": user1, "to": user2, "path": analytics.path(user1, user2)})
    for user in args.centrality:
        queries["centrality"][user] = analytics.centrality(user, reachable_only=args.reachable_only)
    for user in args.reachable:
        queries["reachable"][user] = analytics.reachable(user)

    return {"metrics": summary, "queries": queries}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(quiet=args.quiet)

    try:
        model = NetworkModel.from_pairs(read_follow_pairs(args.input))
        result = run_metrics(NetworkAnalytics(model), args)
    except (OSError, RuntimeError, SocNetError) as exc:
        logger.error(f"Analysis failed: {exc}")
        return 1

    payload = json.dumps(result, indent=2)
    if args.summary_only:
        print(payload)
    else:
        args.output.write_text(payload)
        logger.info(f"Wrote summary to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
