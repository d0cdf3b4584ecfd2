"""Read-only status board over a rolling availability window.

The board shows every worker's day-by-day availability and load across a
60-day window starting at a reference date, split into 30-day pages that a
display rotates through on a fixed timer. Workers are grouped by region;
workers on extended leave are listed separately.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from rosterboard.availability.aggregator import period_dates, summarize_period
from rosterboard.availability.load import (
    GradientPosition,
    assigned_hours_by_day,
    assigned_hours_ratio,
    color_for_ratio,
)
from rosterboard.availability.ranking import (
    group_by_region,
    rank_workers,
    split_extended_leave,
)
from rosterboard.domain.models import (
    Assignment,
    RankingFilters,
    ScheduleBlock,
    UnavailabilityRange,
    Worker,
    WorkerDayVerdict,
    WorkerPeriodSummary,
)
from rosterboard.domain.policies import (
    CapacityPolicy,
    DefaultCapacityPolicy,
    DefaultLeavePolicy,
    LeavePolicy,
)

logger = logging.getLogger(__name__)


@dataclass
class BoardConfig:
    """Configuration for the status board.

    Attributes:
        window_days: Total days shown across all pages.
        page_days: Days shown per page.
        rotate_seconds: Seconds each page stays on screen.
        hide_without_availability: Drop workers with no available day in
            the window (extended-leave workers are listed regardless).
        unknown_region: Group label for workers without a region.
    """

    window_days: int = 60
    page_days: int = 30
    rotate_seconds: int = 30
    hide_without_availability: bool = True
    unknown_region: str = "Unknown"

    @property
    def page_count(self) -> int:
        if self.page_days <= 0:
            return 1
        return max(1, -(-self.window_days // self.page_days))


@dataclass(frozen=True)
class BoardCell:
    """One worker on one board day.

    Attributes:
        verdict: Availability verdict for the day (None for workers
            without schedule data).
        assigned_hours: Appointment hours on the day.
        capacity_hours: Standard capacity for the day.
        load: Gradient position of assigned / capacity.
    """

    date: date
    verdict: Optional[WorkerDayVerdict]
    assigned_hours: float
    capacity_hours: float
    load: GradientPosition

    @property
    def is_available(self) -> bool:
        if self.verdict is None:
            return True
        return self.verdict.is_available


@dataclass(frozen=True)
class BoardRow:
    """A worker's summary and cells across the board window."""

    summary: WorkerPeriodSummary
    cells: tuple[BoardCell, ...]

    @property
    def worker(self) -> Worker:
        return self.summary.worker

    def cells_for(self, days: Iterable[date]) -> tuple[BoardCell, ...]:
        wanted = set(days)
        return tuple(c for c in self.cells if c.date in wanted)


@dataclass(frozen=True)
class Board:
    """Computed board, ready for rendering.

    Attributes:
        start: First date of the window.
        days: All dates in the window.
        pages: Dates of each page, in display order.
        groups: Region label -> rows, regions sorted, rows ranked.
        extended_leave: Rows of workers on extended leave.
    """

    start: date
    days: tuple[date, ...]
    pages: tuple[tuple[date, ...], ...]
    groups: dict[str, tuple[BoardRow, ...]] = field(default_factory=dict)
    extended_leave: tuple[BoardRow, ...] = ()

    @property
    def rows(self) -> tuple[BoardRow, ...]:
        """All grouped rows in display order."""
        return tuple(row for rows in self.groups.values() for row in rows)


def paginate(days: tuple[date, ...], page_days: int) -> tuple[tuple[date, ...], ...]:
    """Split a window into consecutive pages."""
    if page_days <= 0 or not days:
        return (days,)
    return tuple(days[i : i + page_days] for i in range(0, len(days), page_days))


def page_for_elapsed(elapsed_seconds: float, page_count: int, rotate_seconds: float) -> int:
    """Get the page index shown after a given time on screen.

    Pages advance every rotate_seconds and wrap around.
    """
    if page_count <= 1 or rotate_seconds <= 0:
        return 0
    return int(max(0.0, elapsed_seconds) // rotate_seconds) % page_count


def _build_row(
    summary: WorkerPeriodSummary,
    days: tuple[date, ...],
    hours_by_day: dict[date, float],
    capacity_policy: CapacityPolicy,
) -> BoardRow:
    worker = summary.worker
    cells = []
    for d in days:
        verdict = summary.day(d)
        block = verdict.block if verdict is not None else None
        assigned = hours_by_day.get(d, 0.0)
        capacity = capacity_policy.capacity_hours(worker, block)
        cells.append(
            BoardCell(
                date=d,
                verdict=verdict,
                assigned_hours=assigned,
                capacity_hours=capacity,
                load=color_for_ratio(assigned_hours_ratio(assigned, capacity)),
            )
        )
    return BoardRow(summary=summary, cells=tuple(cells))


def build_board(
    workers: Iterable[Worker],
    schedules: Iterable[ScheduleBlock],
    unavailability: Iterable[UnavailabilityRange],
    start: date,
    seasonal: Iterable[UnavailabilityRange] = (),
    assignments: Iterable[Assignment] = (),
    config: Optional[BoardConfig] = None,
    filters: Optional[RankingFilters] = None,
    capacity_policy: Optional[CapacityPolicy] = None,
    leave_policy: Optional[LeavePolicy] = None,
) -> Board:
    """Build the status board for a window starting at start.

    Args:
        workers: All workers, staff and subcontractors.
        schedules: Weekly schedule rows.
        unavailability: Leave ranges.
        start: First date of the window (usually today).
        seasonal: Seasonal restriction ranges.
        assignments: Appointments contributing to daily load.
        config: Board configuration.
        filters: Optional region and worker-id selections.
        capacity_policy: Policy for daily capacity.
        leave_policy: Policy deciding extended leave.

    Returns:
        Board with grouped rows and pages.
    """
    config = config or BoardConfig()
    capacity_policy = capacity_policy or DefaultCapacityPolicy()
    leave_policy = leave_policy or DefaultLeavePolicy()

    workers = tuple(workers)
    schedules = tuple(schedules)
    unavailability = tuple(unavailability)
    seasonal = tuple(seasonal)
    assignments = tuple(assignments)

    days = tuple(period_dates(start, config.window_days))

    internal = []
    external = []
    for worker in workers:
        summary = summarize_period(
            worker, start, config.window_days, schedules, unavailability, seasonal
        )
        if worker.has_schedule_data:
            internal.append(summary)
        else:
            external.append(summary)

    ranked = rank_workers(internal, external, filters)
    remaining, on_leave = split_extended_leave(ranked, leave_policy)

    if config.hide_without_availability:
        visible = tuple(
            s for s in remaining if not s.worker.has_schedule_data or s.available_days > 0
        )
    else:
        visible = remaining

    logger.debug(
        "Board %s (+%d days): %d shown, %d on leave, %d hidden",
        start,
        config.window_days,
        len(visible),
        len(on_leave),
        len(remaining) - len(visible),
    )

    def to_row(summary: WorkerPeriodSummary) -> BoardRow:
        return _build_row(
            summary,
            days,
            assigned_hours_by_day(assignments, summary.worker.id),
            capacity_policy,
        )

    groups = {
        region: tuple(to_row(s) for s in summaries)
        for region, summaries in group_by_region(visible, config.unknown_region).items()
    }

    return Board(
        start=start,
        days=days,
        pages=paginate(days, config.page_days),
        groups=groups,
        extended_leave=tuple(to_row(s) for s in on_leave),
    )
