"""Command-line interface for the slot roster engine."""

import argparse
import logging
import sys
from typing import Optional

from slotroster.domain.errors import SchedulingError
from slotroster.domain.models import Day
from slotroster.domain.policies import DefaultStaffingPolicy
from slotroster.output.pdf_generator import PDFGenerator
from slotroster.output.text_report import TextReportGenerator
from slotroster.scheduling.engine import SchedulingEngine

# Hand placements made before auto-fill in the demo, so the output shows
# auto-fill working around existing assignments.
DEMO_PLACEMENTS = [
    ("Sukyung", Day.MONDAY, 1),
    ("Sukyung", Day.MONDAY, 2),
    ("Junhyuk", Day.WEDNESDAY, 4),
    ("Kihwan", Day.SATURDAY, 1),
    ("Kihwan", Day.SATURDAY, 2),
    ("Kihwan", Day.SATURDAY, 3),
]


def run_demo(
    seed: Optional[int] = None,
    contiguity_mode: bool = True,
    output_path: Optional[str] = None,
    report_path: Optional[str] = None,
) -> int:
    """Run a demo: seed roster, a few manual placements, then auto-fill."""
    engine = SchedulingEngine.create_default(seed=seed, contiguity_mode=contiguity_mode)

    for worker_name, day, slot_id in DEMO_PLACEMENTS:
        engine.assign(worker_name, day, slot_id)

    result = engine.auto_fill()
    print(f"Auto-fill placed {result.added_count} workers")
    if result.is_fully_staffed:
        print("  All weekday slots reached their targets")
    else:
        print(f"  {len(result.shortfalls)} weekday cells left short:")
        for shortfall in result.shortfalls[:5]:
            print(f"    - {shortfall.day.label} slot {shortfall.slot_id}: "
                  f"{shortfall.assigned}/{shortfall.required}")
        if len(result.shortfalls) > 5:
            print(f"    ... and {len(result.shortfalls) - 5} more")

    report = TextReportGenerator()
    if report_path:
        report.generate(engine, report_path)
        print(f"\nReport written to {report_path}")
    else:
        print()
        print(report.generate_to_string(engine))

    audit = engine.audit()
    if audit.is_valid:
        print("Audit: PASSED")
    else:
        print(f"Audit: FAILED ({len(audit.violations)} violations)")
        for violation in audit.violations[:5]:
            print(f"    - {violation}")

    if output_path:
        print(f"\nGenerating PDF: {output_path}")
        PDFGenerator().generate(engine, output_path)
        print("  PDF created successfully!")

    return 0


def run_check_pattern(slot_ids: list[int]) -> int:
    """Report whether a set of weekday slot ids forms an allowed pattern."""
    policy = DefaultStaffingPolicy()
    ordered = sorted(slot_ids)
    if len(set(ordered)) != len(ordered):
        print(f"{ordered}: invalid (repeated slot)")
        return 1
    if policy.is_valid_weekday_pattern(ordered):
        print(f"{ordered}: valid ({len(ordered) * policy.slot_hours()}h)")
        return 0
    print(f"{ordered}: invalid")
    return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="slotroster - Weekly two-hour slot rostering",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo                       Auto-fill the seed roster and print the week
  %(prog)s demo --seed 42             Reproducible auto-fill
  %(prog)s demo --no-contiguity       Only the weekday 6h cap applies
  %(prog)s demo --output week.pdf     Also write a printable PDF

  %(prog)s check-pattern 1 2 4        Is {1,2,4} an allowed weekday pattern?
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine operations",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    demo_parser = subparsers.add_parser("demo", help="Run demo auto-fill on the seed roster")
    demo_parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for auto-fill scoring (default: unseeded)",
    )
    demo_parser.add_argument(
        "--no-contiguity",
        action="store_true",
        help="Disable the weekday contiguity pattern rule",
    )
    demo_parser.add_argument(
        "--output", "-o",
        type=str,
        help="Output PDF file path",
    )
    demo_parser.add_argument(
        "--report", "-r",
        type=str,
        help="Write the text report to this file instead of stdout",
    )

    pattern_parser = subparsers.add_parser(
        "check-pattern",
        help="Check a weekday slot set against the contiguity pattern",
    )
    pattern_parser.add_argument(
        "slot_ids",
        type=int,
        nargs="+",
        help="Slot ids held on one weekday",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "demo":
            return run_demo(
                seed=args.seed,
                contiguity_mode=not args.no_contiguity,
                output_path=args.output,
                report_path=args.report,
            )
        elif args.command == "check-pattern":
            return run_check_pattern(args.slot_ids)
        else:
            parser.print_help()
            return 1
    except SchedulingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
