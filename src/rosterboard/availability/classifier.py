"""Single-day availability classification."""

from datetime import date
from typing import Iterable

from rosterboard.availability.schedule_index import ScheduleIndex
from rosterboard.availability.unavailability import ranges_for_worker, resolve_unavailability
from rosterboard.domain.models import UnavailabilityRange, Worker, WorkerDayVerdict


def resolve_day(
    worker: Worker,
    d: date,
    schedule_index: ScheduleIndex,
    unavailability_ranges: Iterable[UnavailabilityRange],
) -> WorkerDayVerdict:
    """Classify one worker on one calendar date.

    A day without an active schedule block is not scheduled, whatever
    ranges cover it. A scheduled day covered by any range is not available
    and carries that range's reason. Everything else is available.

    Args:
        worker: The worker being classified.
        d: The calendar date.
        schedule_index: Index of the worker's active schedule blocks.
        unavailability_ranges: Leave and seasonal ranges. Ranges of other
            workers are ignored.

    Returns:
        WorkerDayVerdict for the date.
    """
    block = schedule_index.block_for(d)
    if block is None:
        return WorkerDayVerdict(date=d, is_scheduled=False, is_available=False)

    hit = resolve_unavailability(d, ranges_for_worker(unavailability_ranges, worker.id))
    if hit.is_unavailable:
        return WorkerDayVerdict(
            date=d,
            is_scheduled=True,
            is_available=False,
            reason=hit.reason,
            block=block,
            is_partial_day=hit.is_partial_day,
        )

    return WorkerDayVerdict(date=d, is_scheduled=True, is_available=True, block=block)
