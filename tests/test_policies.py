"""Tests for capacity and leave policies."""

from datetime import date, time

from rosterboard.domain.models import ScheduleBlock, UnavailabilityRange, Worker
from rosterboard.domain.policies import DefaultCapacityPolicy, DefaultLeavePolicy


class TestDefaultCapacityPolicy:
    """Tests for DefaultCapacityPolicy."""

    def test_block_hours(self):
        policy = DefaultCapacityPolicy()
        block = ScheduleBlock("W1", 1, time(9), time(17))
        assert policy.capacity_hours(Worker("W1"), block) == 8.0

    def test_standard_hours_without_block(self):
        policy = DefaultCapacityPolicy()
        assert policy.capacity_hours(Worker("W1", standard_work_hours=7.5), None) == 7.5

    def test_default_hours(self):
        assert DefaultCapacityPolicy().capacity_hours(Worker("W1"), None) == 8.0
        assert DefaultCapacityPolicy(default_hours=6).capacity_hours(Worker("W1"), None) == 6


class TestDefaultLeavePolicy:
    """Tests for DefaultLeavePolicy."""

    def test_one_week_is_not_extended(self):
        leave = UnavailabilityRange("W1", date(2024, 1, 1), date(2024, 1, 8))
        assert not DefaultLeavePolicy().is_extended_leave(leave)

    def test_more_than_a_week_is_extended(self):
        leave = UnavailabilityRange("W1", date(2024, 1, 1), date(2024, 1, 9))
        assert DefaultLeavePolicy().is_extended_leave(leave)

    def test_custom_threshold(self):
        leave = UnavailabilityRange("W1", date(2024, 1, 1), date(2024, 1, 4))
        assert DefaultLeavePolicy(extended_leave_days=2).is_extended_leave(leave)
