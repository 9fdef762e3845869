"""
CausePilot CLI

Command-line interface for running the causation test on a saved form.

Usage:
    causepilot evaluate form.json
    causepilot evaluate form.json --rubric packs/wind_rubric.yaml --json
    causepilot indicators
    causepilot tactics
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .catalog import DEFAULT_CATALOG
from .engine import calculate_causation
from .exceptions import CausePilotError
from .models import CausationFormData, IndicatorCatalog
from .packs import load_rubric_pack
from .tactics import tactics_by_type


def _load_catalog(rubric: Optional[str]) -> IndicatorCatalog:
    if not rubric:
        return DEFAULT_CATALOG
    return load_rubric_pack(rubric)


def _print_result(result, catalog: IndicatorCatalog) -> None:
    scoring = result.scoring
    print("BUT-FOR CAUSATION TEST")
    print("=" * 70)
    print(f"Rubric:   {catalog.id} v{catalog.version}")
    print(f"Decision: {result.decision.value.upper()}")
    print(
        f"Scores:   wind {scoring.wind_evidence_score}  "
        f"alternative {scoring.alternative_cause_score}  net {scoring.net_score} "
        f"(threshold {catalog.decision_threshold})"
    )
    print()
    print(result.but_for_statement)
    print(result.decision_statement)
    print()

    print("Minimum evidence:", "MET" if result.minimum_evidence_met else "NOT MET")
    for line in result.minimum_evidence_details:
        print(f"  {line}")
    print()

    print(f"{'Indicator':<52} {'State':>8} {'Weight':>7} {'Applied':>8}")
    print("-" * 78)
    for row in result.indicator_breakdown:
        sign = "+" if row.is_positive else "-"
        print(
            f"{row.label[:52]:<52} {row.state.value:>8} "
            f"{sign}{row.weight:>6} {row.applied_weight:>8}"
        )
    print()

    if result.evidence_gaps:
        print("Evidence gaps:")
        for gap in result.evidence_gaps:
            print(f"  - {gap}")
        print()

    if result.what_would_change:
        print("What would change:")
        for line in result.what_would_change:
            print(f"  - {line}")
        print()

    if result.baseline_susceptibility:
        print(result.baseline_susceptibility)
    if result.counter_arguments_summary:
        print(result.counter_arguments_summary)


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Evaluate a causation form stored as JSON."""
    try:
        catalog = _load_catalog(args.rubric)
        with open(Path(args.form), "r", encoding="utf-8") as f:
            data = json.load(f)
        form = CausationFormData.from_dict(data)
    except CausePilotError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: cannot read form {args.form}: {e}", file=sys.stderr)
        return 2

    result = calculate_causation(form, catalog=catalog)

    if args.json:
        print(json.dumps(result.to_dict(camel_case=args.camel), indent=2, ensure_ascii=False))
    else:
        _print_result(result, catalog)
    return 0


def cmd_indicators(args: argparse.Namespace) -> int:
    """List the indicator catalog."""
    try:
        catalog = _load_catalog(args.rubric)
    except CausePilotError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    minimum = set(catalog.minimum_evidence_indicators)
    print(f"{'ID':<32} {'Category':<14} {'Weight':>7}  Min")
    print("-" * 60)
    for indicator in catalog:
        sign = "+" if indicator.is_positive else "-"
        flag = "*" if indicator.id in minimum else ""
        print(
            f"{indicator.id:<32} {indicator.category.value:<14} "
            f"{sign}{indicator.weight:>6}  {flag}"
        )
    print()
    print(f"Decision threshold: {catalog.decision_threshold}")
    return 0


def cmd_tactics(args: argparse.Namespace) -> int:
    """List carrier blame tactics by type."""
    for tactic_type, tactics in tactics_by_type().items():
        print(tactic_type.display_label.upper())
        for tactic in tactics:
            critical = len(tactic.critical_items)
            print(
                f"  {tactic.id:<24} {tactic.label} "
                f"({len(tactic.evidence_needed)} evidence items, {critical} critical)"
            )
        print()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="CausePilot But-For Causation CLI",
        prog="causepilot",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG shows per-evaluation scoring)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate a causation form JSON file")
    eval_parser.add_argument("form", help="Path to form JSON (camelCase or snake_case keys)")
    eval_parser.add_argument("--rubric", help="Rubric pack (YAML/JSON) to use instead of the built-in")
    eval_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    eval_parser.add_argument("--camel", action="store_true", help="camelCase keys in JSON output")
    eval_parser.set_defaults(func=cmd_evaluate)

    ind_parser = subparsers.add_parser("indicators", help="List the indicator catalog")
    ind_parser.add_argument("--rubric", help="Rubric pack (YAML/JSON) to list")
    ind_parser.set_defaults(func=cmd_indicators)

    tac_parser = subparsers.add_parser("tactics", help="List carrier blame tactics")
    tac_parser.set_defaults(func=cmd_tactics)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
