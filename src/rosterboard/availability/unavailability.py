"""Resolution of leave and seasonal ranges against a calendar date.

Overlapping ranges are combined as a union: any range covering the date
marks it unavailable, and the first non-empty reason encountered is the
one surfaced. Ranges carry no priority over one another.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from rosterboard.domain.models import UnavailabilityRange


@dataclass(frozen=True)
class UnavailabilityHit:
    """Outcome of resolving one date against a set of ranges.

    Attributes:
        is_unavailable: At least one range covers the date.
        reason: First non-empty reason among covering ranges.
        is_partial_day: Every covering range has a time-of-day window.
            Tracked only; a partial-day hit still excludes the whole day.
        ranges: The covering ranges, in input order.
    """

    is_unavailable: bool
    reason: Optional[str] = None
    is_partial_day: bool = False
    ranges: tuple[UnavailabilityRange, ...] = ()


NO_HIT = UnavailabilityHit(is_unavailable=False)


def resolve_unavailability(
    d: date,
    ranges: Iterable[UnavailabilityRange],
) -> UnavailabilityHit:
    """Determine whether a date falls within any unavailability range.

    Args:
        d: The calendar date to check.
        ranges: Leave and seasonal ranges for a single worker.

    Returns:
        UnavailabilityHit describing the union of covering ranges.
    """
    hits = tuple(r for r in ranges if r.covers(d))
    if not hits:
        return NO_HIT

    reason = next((r.label for r in hits if r.label), None)
    return UnavailabilityHit(
        is_unavailable=True,
        reason=reason,
        is_partial_day=all(not r.is_full_day for r in hits),
        ranges=hits,
    )


def ranges_for_worker(
    ranges: Iterable[UnavailabilityRange],
    worker_id: str,
) -> tuple[UnavailabilityRange, ...]:
    """Select the ranges belonging to one worker, preserving order."""
    return tuple(r for r in ranges if r.worker_id == worker_id)
