"""Command-line interface for the rosterboard availability tool."""

import argparse
import logging
import sys
from datetime import date, datetime, time, timedelta
from typing import Optional

from rosterboard.availability.aggregator import (
    month_window,
    summarize_workers,
    week_start,
)
from rosterboard.availability.ranking import group_by_region, rank_workers
from rosterboard.board.status_board import BoardConfig, build_board
from rosterboard.domain.models import (
    Assignment,
    RankingFilters,
    ScheduleBlock,
    SeasonalAvailability,
    UnavailabilityRange,
    Worker,
)
from rosterboard.output.pdf_generator import BoardPDFGenerator
from rosterboard.output.text_report import TextReportGenerator
from rosterboard.snapshot import Snapshot, SnapshotError, load_snapshot
from rosterboard.validation.validator import RecordValidator

logger = logging.getLogger(__name__)


def create_sample_snapshot(count: int = 10, reference: Optional[date] = None) -> Snapshot:
    """Create a sample snapshot for demos.

    Args:
        count: Number of staff workers to create.
        reference: Date the sample leave is placed around. Defaults to today.
    """
    reference = reference or date.today()
    start = week_start(reference)

    names = [
        "Alice", "Bob", "Carol", "David", "Eve", "Frank", "Grace", "Henry",
        "Ivy", "Jack", "Kate", "Leo", "Mia", "Noah", "Olivia", "Paul",
    ]
    regions = ["NSW", "VIC", "QLD", None]

    workers = []
    schedules = []
    unavailability = []
    seasonal = []
    assignments = []

    for i in range(count):
        name = names[i % len(names)]
        if i >= len(names):
            name = f"{name} {i // len(names) + 1}"
        worker = Worker(id=f"W{i + 1:03d}", name=name, region=regions[i % len(regions)])
        workers.append(worker)

        # Weekdays for most, every fifth worker has no schedule at all
        if i % 5 != 4:
            for dow in range(1, 6):
                schedules.append(ScheduleBlock(worker.id, dow, time(7, 0), time(15, 30)))

        if i % 4 == 1:
            unavailability.append(
                UnavailabilityRange(worker.id, start + timedelta(days=3), start + timedelta(days=3),
                                    reason="Public holiday")
            )
        elif i % 7 == 3:
            unavailability.append(
                UnavailabilityRange(worker.id, start, start + timedelta(days=20), reason="Annual leave")
            )
        elif i % 6 == 2:
            seasonal.append(
                SeasonalAvailability(worker.id, start + timedelta(days=4), start + timedelta(days=12),
                                     season_name="School holidays")
            )

        for day in range(1, 6, 2):
            appointment_start = datetime.combine(start + timedelta(days=day), time(8, 0))
            assignments.append(
                Assignment(
                    id=f"APT-{worker.id}-{day}",
                    start=appointment_start,
                    end=appointment_start + timedelta(hours=2 + i % 6),
                    worker_ids=(worker.id,),
                )
            )

    workers.append(Worker(id="S001", name="Coastal Electrical", region="NSW", is_subcontractor=True))
    workers.append(Worker(id="S002", name="Ace Plumbing", is_subcontractor=True))

    return Snapshot(
        workers=tuple(workers),
        schedules=tuple(schedules),
        unavailability=tuple(unavailability),
        seasonal=tuple(seasonal),
        assignments=tuple(assignments),
    )


def _report_validation(snapshot: Snapshot) -> None:
    result = RecordValidator().validate(
        snapshot.workers, snapshot.schedules, snapshot.unavailability, snapshot.seasonal
    )
    for error in result.errors:
        logger.warning("%s", error)
    for warning in result.warnings:
        logger.warning("%s", warning)


def _filters(args: argparse.Namespace) -> Optional[RankingFilters]:
    regions = frozenset(args.region or ())
    worker_ids = frozenset(args.worker or ())
    if not regions and not worker_ids:
        return None
    return RankingFilters(regions=regions, worker_ids=worker_ids)


def run_summary(
    snapshot: Snapshot,
    reference: date,
    period: str = "week",
    filters: Optional[RankingFilters] = None,
    by_region: bool = False,
) -> None:
    """Print ranked worker availability for the week or month of reference."""
    if period == "month":
        start, length = month_window(reference)
    else:
        start, length = week_start(reference), 7

    _report_validation(snapshot)

    staff = summarize_workers(
        snapshot.staff, start, length,
        snapshot.schedules, snapshot.unavailability, snapshot.seasonal,
    )
    subcontractors = summarize_workers(
        snapshot.subcontractors, start, length,
        snapshot.schedules, snapshot.unavailability, snapshot.seasonal,
    )
    ranked = rank_workers(staff, subcontractors, filters)

    generator = TextReportGenerator()
    if by_region:
        for region, summaries in group_by_region(ranked).items():
            print(f"\n[{region}]")
            print(generator.summaries_to_string(summaries, start))
    else:
        print(generator.summaries_to_string(ranked, start))


def run_board(
    snapshot: Snapshot,
    reference: date,
    config: BoardConfig,
    filters: Optional[RankingFilters] = None,
    pdf_path: Optional[str] = None,
) -> None:
    """Print every page of the status board and optionally export a PDF."""
    _report_validation(snapshot)

    board = build_board(
        snapshot.workers,
        snapshot.schedules,
        snapshot.unavailability,
        reference,
        seasonal=snapshot.seasonal,
        assignments=snapshot.assignments,
        config=config,
        filters=filters,
    )

    generator = TextReportGenerator()
    for page in range(len(board.pages)):
        print(generator.board_to_string(board, page))

    if pdf_path:
        print(f"Generating PDF: {pdf_path}")
        BoardPDFGenerator().generate(board, pdf_path)
        print("  PDF created successfully!")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="rosterboard - Worker Availability Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo                               Show the sample week summary
  %(prog)s demo --board                       Show the sample status board
  %(prog)s summary -i data.json               Rank workers for this week
  %(prog)s summary -i data.json --month       Rank workers for this month
  %(prog)s board -i data.json -o board.pdf    Build the board and export a PDF
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--date", "-d",
            type=_parse_date,
            default=None,
            help="Reference date YYYY-MM-DD (default: today)",
        )
        sub.add_argument("--region", "-r", action="append", help="Only show this region (repeatable)")
        sub.add_argument("--worker", "-w", action="append", help="Only show this worker ID (repeatable)")

    demo_parser = subparsers.add_parser("demo", help="Run with generated sample records")
    demo_parser.add_argument(
        "--count", "-c",
        type=int,
        default=10,
        help="Number of workers to generate (default: 10)",
    )
    demo_parser.add_argument("--board", action="store_true", help="Show the status board")
    add_common(demo_parser)

    summary_parser = subparsers.add_parser("summary", help="Rank workers for a week or month")
    summary_parser.add_argument("--input", "-i", required=True, help="Snapshot JSON file")
    summary_parser.add_argument("--month", action="store_true", help="Summarize the whole month")
    summary_parser.add_argument("--by-region", action="store_true", help="Group output by region")
    add_common(summary_parser)

    board_parser = subparsers.add_parser("board", help="Build the rotating status board")
    board_parser.add_argument("--input", "-i", required=True, help="Snapshot JSON file")
    board_parser.add_argument("--output", "-o", type=str, help="Output PDF file path")
    board_parser.add_argument(
        "--days",
        type=int,
        default=60,
        help="Days in the board window (default: 60)",
    )
    board_parser.add_argument(
        "--page-days",
        type=int,
        default=30,
        help="Days per board page (default: 30)",
    )
    board_parser.add_argument(
        "--show-all",
        action="store_true",
        help="Keep workers with no available day in the window",
    )
    add_common(board_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    reference = args.date or date.today()
    filters = _filters(args)

    if args.command == "demo":
        snapshot = create_sample_snapshot(args.count, reference)
        if args.board:
            run_board(snapshot, reference, BoardConfig(), filters)
        else:
            run_summary(snapshot, reference, filters=filters)
        return 0

    try:
        snapshot = load_snapshot(args.input)
    except (OSError, SnapshotError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "summary":
        run_summary(
            snapshot,
            reference,
            period="month" if args.month else "week",
            filters=filters,
            by_region=args.by_region,
        )
        return 0
    elif args.command == "board":
        config = BoardConfig(
            window_days=args.days,
            page_days=args.page_days,
            hide_without_availability=not args.show_all,
        )
        run_board(snapshot, reference, config, filters, args.output)
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
