"""Policy definitions for availability rules.

This module contains configurable policies that define business rules
for load capacity and extended leave. Policies are kept separate from
the availability engine to allow independent testing and easy modification.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from rosterboard.domain.models import ScheduleBlock, UnavailabilityRange, Worker


class CapacityPolicy(ABC):
    """Abstract base class for daily load capacity policies."""

    @abstractmethod
    def capacity_hours(self, worker: Worker, block: Optional[ScheduleBlock]) -> float:
        """Get the standard capacity of a worker for one day.

        Args:
            worker: The worker whose load is measured.
            block: Schedule block covering the day, if any.

        Returns:
            Capacity in hours (0 means no capacity).
        """
        pass


class LeavePolicy(ABC):
    """Abstract base class for extended leave rules."""

    @abstractmethod
    def is_extended_leave(self, leave: UnavailabilityRange) -> bool:
        """Check if a range is long enough to list the worker as on leave."""
        pass


@dataclass
class DefaultCapacityPolicy(CapacityPolicy):
    """Default capacity policy implementation.

    Capacity comes from the schedule block covering the day. Without a
    block, the worker's standard work hours are used, then default_hours.
    """

    default_hours: float = 8.0

    def capacity_hours(self, worker: Worker, block: Optional[ScheduleBlock]) -> float:
        if block is not None and block.hours > 0:
            return block.hours
        if worker.standard_work_hours:
            return worker.standard_work_hours
        return self.default_hours


@dataclass
class DefaultLeavePolicy(LeavePolicy):
    """Default leave policy implementation.

    A single range spanning more than a week counts as extended leave.
    """

    extended_leave_days: int = 7

    def is_extended_leave(self, leave: UnavailabilityRange) -> bool:
        # Span of end - start, not the inclusive day count.
        return leave.span_days - 1 > self.extended_leave_days
