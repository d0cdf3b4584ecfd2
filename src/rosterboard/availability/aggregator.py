"""Period aggregation of day verdicts into worker-level availability.

This module rolls per-day verdicts over a window (a week, a month, or a
rolling 30/60-day board window) into one status per worker:
- No scheduled day in the window: unavailable, "No schedule set"
- Every scheduled day hit by leave: unavailable, with the first reason
- Some scheduled days hit: partial, "Available a/s days (reason)"
- Otherwise: available

The reference date is always passed in; nothing here reads the clock.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from rosterboard.availability.classifier import resolve_day
from rosterboard.availability.schedule_index import ScheduleIndex
from rosterboard.availability.unavailability import ranges_for_worker
from rosterboard.domain.models import (
    SUNDAY,
    AvailabilityStatus,
    DayStatus,
    ScheduleBlock,
    UnavailabilityRange,
    Worker,
    WorkerDayVerdict,
    WorkerPeriodSummary,
    day_of_week,
)

logger = logging.getLogger(__name__)

NO_SCHEDULE_REASON = "No schedule set"
UNAVAILABLE_ALL_PERIOD_REASON = "Unavailable all week"


def week_start(reference: date, first_weekday: int = SUNDAY) -> date:
    """Get the first date of the week containing reference.

    Args:
        reference: Any date in the week.
        first_weekday: Day-of-week index the week starts on (0 = Sunday).
    """
    offset = (day_of_week(reference) - first_weekday) % 7
    return reference - timedelta(days=offset)


def period_dates(start: date, length_days: int) -> list[date]:
    """List the contiguous dates of a window."""
    return [start + timedelta(days=i) for i in range(max(0, length_days))]


def month_window(reference: date) -> tuple[date, int]:
    """Get (first date, length in days) of the month containing reference."""
    days_in_month = calendar.monthrange(reference.year, reference.month)[1]
    return reference.replace(day=1), days_in_month


def rolling_window(reference: date, days: int = 30) -> tuple[date, int]:
    """Get (first date, length in days) of a window starting at reference."""
    return reference, days


def classify_period(
    verdicts: Sequence[WorkerDayVerdict],
) -> tuple[AvailabilityStatus, Optional[str]]:
    """Reduce day verdicts to a worker-level status and reason.

    Args:
        verdicts: Day verdicts for a window, in date order.

    Returns:
        Tuple of (status, reason).
    """
    scheduled_days = sum(1 for v in verdicts if v.is_scheduled)
    available_days = sum(1 for v in verdicts if v.is_available)
    unavailable_days = sum(1 for v in verdicts if v.status == DayStatus.NOT_AVAILABLE)
    first_reason = next(
        (v.reason for v in verdicts if v.status == DayStatus.NOT_AVAILABLE and v.reason),
        None,
    )

    if scheduled_days == 0:
        return AvailabilityStatus.UNAVAILABLE, NO_SCHEDULE_REASON

    if unavailable_days == scheduled_days:
        return AvailabilityStatus.UNAVAILABLE, first_reason or UNAVAILABLE_ALL_PERIOD_REASON

    if unavailable_days > 0:
        reason = f"Available {available_days}/{scheduled_days} days"
        if first_reason:
            reason += f" ({first_reason})"
        return AvailabilityStatus.PARTIAL, reason

    return AvailabilityStatus.AVAILABLE, None


def summarize_period(
    worker: Worker,
    period_start: date,
    period_length_days: int,
    schedules: Iterable[ScheduleBlock],
    unavailability: Iterable[UnavailabilityRange],
    seasonal: Iterable[UnavailabilityRange] = (),
) -> WorkerPeriodSummary:
    """Summarize a worker's availability over a contiguous window.

    Schedule and range rows may belong to several workers; only rows for
    this worker are used. Workers without schedule data are reported as
    available with no day detail.

    Args:
        worker: The worker to summarize.
        period_start: First date of the window.
        period_length_days: Number of days in the window (7 for a week).
        schedules: Weekly schedule rows.
        unavailability: Leave ranges.
        seasonal: Seasonal restriction ranges.

    Returns:
        WorkerPeriodSummary for the window.
    """
    if not worker.has_schedule_data:
        return WorkerPeriodSummary(worker=worker, status=AvailabilityStatus.AVAILABLE)

    index = ScheduleIndex.build(schedules, worker_id=worker.id)
    ranges = ranges_for_worker(unavailability, worker.id) + ranges_for_worker(
        seasonal, worker.id
    )

    verdicts = tuple(
        resolve_day(worker, d, index, ranges)
        for d in period_dates(period_start, period_length_days)
    )
    status, reason = classify_period(verdicts)

    blocked = [v.date for v in verdicts if v.status == DayStatus.NOT_AVAILABLE]
    leave_ranges = tuple(r for r in ranges if any(r.covers(d) for d in blocked))

    logger.debug(
        "Worker %s %s..%s: %s (%s)",
        worker.id,
        period_start,
        period_start + timedelta(days=max(0, period_length_days - 1)),
        status.value,
        reason,
    )

    return WorkerPeriodSummary(
        worker=worker,
        status=status,
        reason=reason,
        days=verdicts,
        leave_ranges=leave_ranges,
    )


def summarize_workers(
    workers: Iterable[Worker],
    period_start: date,
    period_length_days: int,
    schedules: Iterable[ScheduleBlock],
    unavailability: Iterable[UnavailabilityRange],
    seasonal: Iterable[UnavailabilityRange] = (),
) -> tuple[WorkerPeriodSummary, ...]:
    """Summarize every worker of a roster over the same window."""
    # Materialize once; the inputs are scanned per worker.
    schedules = tuple(schedules)
    unavailability = tuple(unavailability)
    seasonal = tuple(seasonal)

    return tuple(
        summarize_period(
            worker, period_start, period_length_days, schedules, unavailability, seasonal
        )
        for worker in workers
    )
