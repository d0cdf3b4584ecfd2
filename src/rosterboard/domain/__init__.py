"""Domain models and business rules for worker availability."""

from rosterboard.domain.models import (
    Assignment,
    AvailabilityStatus,
    DayStatus,
    RankingFilters,
    ScheduleBlock,
    SeasonalAvailability,
    UnavailabilityRange,
    Worker,
    WorkerDayVerdict,
    WorkerPeriodSummary,
    day_of_week,
)
from rosterboard.domain.policies import (
    CapacityPolicy,
    DefaultCapacityPolicy,
    DefaultLeavePolicy,
    LeavePolicy,
)

__all__ = [
    # Models
    "Assignment",
    "AvailabilityStatus",
    "DayStatus",
    "RankingFilters",
    "ScheduleBlock",
    "SeasonalAvailability",
    "UnavailabilityRange",
    "Worker",
    "WorkerDayVerdict",
    "WorkerPeriodSummary",
    "day_of_week",
    # Policies
    "CapacityPolicy",
    "DefaultCapacityPolicy",
    "DefaultLeavePolicy",
    "LeavePolicy",
]
