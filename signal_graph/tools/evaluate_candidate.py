#!/usr/bin/env python3
"""
Evaluate one candidate from the command line.

Prints the evaluation (score, tier, feedback, graph) as JSON, or a short text
summary, and optionally writes the CSV / JSON report exports.

Usage:
  signal-graph --candidate Candidate_001 --flags ssn_mismatch,alias_mismatch
  signal-graph --profile 1 --csv --report --export-dir out/
  signal-graph --list-signals
  signal-graph --compare-profiles
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from signal_graph.analysis_engine import (
    SIGNAL_REGISTRY,
    SelectionSet,
    evaluate,
    load_profile,
    profile_scores,
)
from signal_graph.config import get_settings
from signal_graph.core.exceptions import InvalidCandidateId, ProfileNotFound
from signal_graph.exports import write_csv, write_report
from signal_graph.signal_logging import configure_logging, get_logger

logger = get_logger(__name__)


def _split_flags(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signal-graph",
        description="Score a candidate's risk signals and export the result.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--profile", type=int, help="Load synthetic profile 0, 1 or 2")
    source.add_argument("--flags", help="Comma-separated signal ids")
    parser.add_argument("--candidate", help="Candidate id (default: SIGNAL_GRAPH_DEFAULT_CANDIDATE)")
    parser.add_argument("--format", choices=("json", "text"), default="json", help="Output format")
    parser.add_argument("--csv", action="store_true", help="Write <candidate>_profile.csv")
    parser.add_argument("--report", action="store_true", help="Write <candidate>_report.json")
    parser.add_argument("--export-dir", type=Path, help="Export directory (default: SIGNAL_GRAPH_EXPORT_DIR)")
    parser.add_argument("--list-signals", action="store_true", help="Print the signal catalog and exit")
    parser.add_argument("--compare-profiles", action="store_true", help="Print synthetic profile scores and exit")
    return parser


def _selection_from_args(args: argparse.Namespace) -> SelectionSet:
    if args.profile is not None:
        selection = load_profile(args.profile)
        if args.candidate:
            selection.candidate_id = args.candidate.strip()
    else:
        candidate = args.candidate if args.candidate is not None else get_settings().default_candidate_id
        selection = SelectionSet.of(candidate.strip(), _split_flags(args.flags))
    if not selection.candidate_id:
        raise InvalidCandidateId(args.candidate)
    return selection


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(get_settings())

    if args.list_signals:
        for signal in SIGNAL_REGISTRY:
            print(f"{signal.id:<24} {signal.weight:>3}  {signal.label}")
        return 0
    if args.compare_profiles:
        print(json.dumps(profile_scores(), indent=2))
        return 0

    try:
        selection = _selection_from_args(args)
    except (ProfileNotFound, InvalidCandidateId) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = evaluate(selection)
    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    else:
        flags = ", ".join(result.flags) or "(none)"
        print(f"Candidate: {result.candidate_id}")
        print(f"Signals:   {flags}")
        print(f"Score:     {result.score} - {result.feedback}")

    if args.csv:
        path = write_csv(selection, args.export_dir)
        print(f"CSV written: {path}", file=sys.stderr)
    if args.report:
        path = write_report(result, args.export_dir)
        print(f"Report written: {path}", file=sys.stderr)

    logger.debug(
        "cli_evaluation_done",
        candidate_id=result.candidate_id,
        score=result.score,
        tier=result.tier.value,
        csv=args.csv,
        report=args.report,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
