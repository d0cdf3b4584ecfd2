"""Day-of-week lookup over a worker's recurring schedule blocks."""

from datetime import date
from typing import Iterable, Optional

from rosterboard.domain.models import DAYS_PER_WEEK, ScheduleBlock, day_of_week


class ScheduleIndex:
    """Seven-slot lookup of active schedule blocks by day of week.

    Only active blocks are indexed. When several active blocks exist for
    the same day, the last one in input order is kept.

    Example:
        >>> index = ScheduleIndex.build(blocks, worker_id="W1")
        >>> index.block_for(date(2024, 1, 15))
    """

    def __init__(self, slots: tuple[Optional[ScheduleBlock], ...]):
        if len(slots) != DAYS_PER_WEEK:
            raise ValueError(f"Expected {DAYS_PER_WEEK} slots, got {len(slots)}")
        self._slots = slots

    @classmethod
    def build(
        cls,
        blocks: Iterable[ScheduleBlock],
        worker_id: Optional[str] = None,
    ) -> "ScheduleIndex":
        """Build an index from schedule rows.

        Args:
            blocks: Schedule rows, possibly for several workers.
            worker_id: If given, only rows for this worker are indexed.
        """
        slots: list[Optional[ScheduleBlock]] = [None] * DAYS_PER_WEEK
        for block in blocks:
            if not block.is_active:
                continue
            if worker_id is not None and block.worker_id != worker_id:
                continue
            if 0 <= block.day_of_week < DAYS_PER_WEEK:
                slots[block.day_of_week] = block
        return cls(tuple(slots))

    def __getitem__(self, dow: int) -> Optional[ScheduleBlock]:
        return self._slots[dow]

    def block_for(self, d: date) -> Optional[ScheduleBlock]:
        """Get the active block covering a date's day of week."""
        return self._slots[day_of_week(d)]

    @property
    def scheduled_weekdays(self) -> frozenset[int]:
        """Day-of-week indexes that have an active block."""
        return frozenset(i for i, b in enumerate(self._slots) if b is not None)

    @property
    def is_empty(self) -> bool:
        return all(b is None for b in self._slots)
