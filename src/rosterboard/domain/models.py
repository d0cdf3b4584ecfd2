"""Core domain models for worker availability.

This module contains the data structures consumed and produced by the
availability engine:
- Input records (workers, weekly schedule blocks, leave and seasonal ranges,
  appointment assignments)
- Computed, ephemeral results (day verdicts and period summaries)
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Optional

# Day-of-week numbering used by schedule records: 0 = Sunday ... 6 = Saturday.
SUNDAY = 0
MONDAY = 1
SATURDAY = 6
DAYS_PER_WEEK = 7

DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


def day_of_week(d: date) -> int:
    """Day-of-week index of a date, with Sunday as 0."""
    return (d.weekday() + 1) % DAYS_PER_WEEK


class AvailabilityStatus(Enum):
    """Worker-level availability over a period.

    Members are totally ordered: AVAILABLE < PARTIAL < UNAVAILABLE.
    """

    AVAILABLE = "available"
    PARTIAL = "partial"
    UNAVAILABLE = "unavailable"

    @property
    def rank(self) -> int:
        """Sort precedence of this status (lower sorts first)."""
        return _STATUS_RANKS[self]

    def __lt__(self, other: "AvailabilityStatus") -> bool:
        if not isinstance(other, AvailabilityStatus):
            return NotImplemented
        return self.rank < other.rank


_STATUS_RANKS = {
    AvailabilityStatus.AVAILABLE: 0,
    AvailabilityStatus.PARTIAL: 1,
    AvailabilityStatus.UNAVAILABLE: 2,
}


class DayStatus(Enum):
    """Availability outcome for one worker on one calendar date."""

    AVAILABLE = "available"
    NOT_AVAILABLE = "not-available"
    NOT_SCHEDULED = "not-scheduled"


@dataclass(frozen=True)
class Worker:
    """A worker whose availability can be computed.

    Attributes:
        id: Unique identifier for the worker.
        name: Display name (may be empty).
        region: Region/state tag used for board grouping and filtering.
        is_subcontractor: True for external labor.
        employment_type: Optional employment metadata (e.g. "full_time").
        standard_work_hours: Standard daily hours, used as load capacity
            when no schedule block covers a day.
        schedule_data: Whether detailed schedule records exist for this
            worker. Defaults to True for staff and False for subcontractors.
    """

    id: str
    name: str = ""
    region: Optional[str] = None
    is_subcontractor: bool = False
    employment_type: Optional[str] = None
    standard_work_hours: Optional[float] = None
    schedule_data: Optional[bool] = None

    @property
    def has_schedule_data(self) -> bool:
        """Whether the period aggregator should classify this worker's days."""
        if self.schedule_data is not None:
            return self.schedule_data
        return not self.is_subcontractor

    @property
    def sort_name(self) -> str:
        """Name used for ordering; missing names sort as empty strings."""
        return self.name or ""


@dataclass(frozen=True)
class ScheduleBlock:
    """A recurring weekly window during which a worker is on duty.

    Attributes:
        worker_id: ID of the worker.
        day_of_week: Day index, 0 = Sunday ... 6 = Saturday.
        start_time: Start of the duty window.
        end_time: End of the duty window.
        is_active: Inactive blocks are ignored by the schedule index.
    """

    worker_id: str
    day_of_week: int
    start_time: time
    end_time: time
    is_active: bool = True

    @property
    def hours(self) -> float:
        """Length of the duty window in hours."""
        start = self.start_time.hour * 60 + self.start_time.minute
        end = self.end_time.hour * 60 + self.end_time.minute
        return max(0, end - start) / 60.0

    def __repr__(self) -> str:
        return (
            f"ScheduleBlock({self.worker_id}, {DAY_NAMES[self.day_of_week % 7][:3]} "
            f"{self.start_time.strftime('%H:%M')}-{self.end_time.strftime('%H:%M')})"
        )


@dataclass(frozen=True)
class UnavailabilityRange:
    """A date-bounded exception (leave) that overrides nominal scheduling.

    Attributes:
        worker_id: ID of the worker.
        start_date: First unavailable date.
        end_date: Last unavailable date (inclusive).
        start_time: Optional start of a partial-day window.
        end_time: Optional end of a partial-day window.
        reason: Optional human-readable reason.
    """

    worker_id: str
    start_date: date
    end_date: date
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    reason: Optional[str] = None

    @property
    def is_full_day(self) -> bool:
        """True when the range blocks every covered date entirely."""
        return self.start_time is None and self.end_time is None

    @property
    def span_days(self) -> int:
        """Number of calendar days covered by the range."""
        return (self.end_date - self.start_date).days + 1

    @property
    def label(self) -> Optional[str]:
        """Reason surfaced when this range hits a date."""
        return self.reason

    def covers(self, d: date) -> bool:
        """Check if a date falls within the range (both ends inclusive)."""
        return self.start_date <= d <= self.end_date

    def overlaps(self, start: date, end: date) -> bool:
        """Check if the range intersects the window [start, end]."""
        return self.start_date <= end and start <= self.end_date


@dataclass(frozen=True)
class SeasonalAvailability(UnavailabilityRange):
    """A recurring seasonal restriction.

    Same interval shape as UnavailabilityRange; the season name stands in
    for the reason when none is given.
    """

    season_name: Optional[str] = None

    @property
    def label(self) -> Optional[str]:
        return self.reason or self.season_name


@dataclass(frozen=True)
class Assignment:
    """An appointment assigned to one or more workers.

    Attributes:
        id: Appointment identifier.
        start: Start of the appointment.
        end: End of the appointment.
        worker_ids: Workers assigned to the appointment.
    """

    id: str
    start: datetime
    end: datetime
    worker_ids: tuple[str, ...] = ()

    @property
    def hours(self) -> float:
        """Appointment duration in hours."""
        return max(timedelta(0), self.end - self.start).total_seconds() / 3600.0

    @property
    def work_date(self) -> date:
        """Calendar date the appointment counts toward."""
        return self.start.date()


@dataclass(frozen=True)
class WorkerDayVerdict:
    """Computed availability of a worker on a single date.

    Attributes:
        date: The calendar date.
        is_scheduled: A schedule block covers this day of the week.
        is_available: Scheduled and not hit by any unavailability range.
        reason: Reason of the unavailability hit, if any.
        block: The schedule block covering the day, if any.
        is_partial_day: The hit came only from partial-day ranges.
    """

    date: date
    is_scheduled: bool
    is_available: bool
    reason: Optional[str] = None
    block: Optional[ScheduleBlock] = None
    is_partial_day: bool = False

    @property
    def status(self) -> DayStatus:
        if not self.is_scheduled:
            return DayStatus.NOT_SCHEDULED
        if self.is_available:
            return DayStatus.AVAILABLE
        return DayStatus.NOT_AVAILABLE


@dataclass(frozen=True)
class WorkerPeriodSummary:
    """Rolled-up availability of a worker across a multi-day window.

    Attributes:
        worker: The worker summarized.
        status: Worker-level status for the window.
        reason: Human-readable explanation (None when fully available).
        days: Per-day verdicts, empty for workers without schedule data.
        leave_ranges: Distinct ranges that hit a scheduled day in the window.
    """

    worker: Worker
    status: AvailabilityStatus
    reason: Optional[str] = None
    days: tuple[WorkerDayVerdict, ...] = ()
    leave_ranges: tuple[UnavailabilityRange, ...] = ()

    @property
    def scheduled_days(self) -> int:
        return sum(1 for d in self.days if d.is_scheduled)

    @property
    def available_days(self) -> int:
        return sum(1 for d in self.days if d.is_available)

    @property
    def unavailable_days(self) -> int:
        return sum(1 for d in self.days if d.status == DayStatus.NOT_AVAILABLE)

    def day(self, d: date) -> Optional[WorkerDayVerdict]:
        """Get the verdict for a specific date, if in the window."""
        for verdict in self.days:
            if verdict.date == d:
                return verdict
        return None


@dataclass(frozen=True)
class RankingFilters:
    """Optional filters applied before ranking.

    Empty selections pass every worker through.

    Attributes:
        regions: Region/state tags to keep.
        worker_ids: Worker IDs to keep.
    """

    regions: frozenset[str] = frozenset()
    worker_ids: frozenset[str] = frozenset()

    def matches(self, worker: Worker) -> bool:
        """Check if a worker passes both selections."""
        if self.regions and (worker.region or "") not in self.regions:
            return False
        if self.worker_ids and worker.id not in self.worker_ids:
            return False
        return True
