"""Tests for assigned-hours load and gradient colors."""

from datetime import datetime

import pytest

from rosterboard.availability.load import (
    AVAILABLE_COLOR,
    BOOKED_COLOR,
    PARTIAL_COLOR,
    assigned_hours_by_day,
    assigned_hours_ratio,
    color_for_ratio,
)
from rosterboard.domain.models import Assignment


class TestColorForRatio:
    """Tests for color_for_ratio."""

    @pytest.mark.parametrize(
        "ratio,expected",
        [(0.0, AVAILABLE_COLOR), (0.5, PARTIAL_COLOR), (1.0, BOOKED_COLOR)],
    )
    def test_stops(self, ratio, expected):
        """Each stop maps exactly to its color."""
        result = color_for_ratio(ratio)
        assert result.position == ratio
        assert result.color == pytest.approx(expected)

    def test_interpolates_first_segment(self):
        assert color_for_ratio(0.25).color == pytest.approx((0.675, 0.7, 0.3))

    def test_interpolates_second_segment(self):
        assert color_for_ratio(0.75).color == pytest.approx((0.9, 0.5, 0.25))

    def test_clamps_above_one(self):
        result = color_for_ratio(1.7)
        assert result.position == 1.0
        assert result.color == pytest.approx(BOOKED_COLOR)

    def test_clamps_below_zero(self):
        result = color_for_ratio(-0.3)
        assert result.position == 0.0
        assert result.color == pytest.approx(AVAILABLE_COLOR)

    def test_percent_and_hex(self):
        result = color_for_ratio(0.5)
        assert result.percent == 50
        assert result.hex.startswith("#")
        assert len(result.hex) == 7


class TestAssignedHours:
    """Tests for load ratio inputs."""

    def test_ratio(self):
        assert assigned_hours_ratio(4, 8) == 0.5

    def test_ratio_clamped(self):
        assert assigned_hours_ratio(10, 8) == 1.0

    def test_zero_capacity(self):
        """Work on a day without capacity counts as fully booked."""
        assert assigned_hours_ratio(2, 0) == 1.0
        assert assigned_hours_ratio(0, 0) == 0.0

    def test_hours_by_day(self):
        assignments = [
            Assignment("A1", datetime(2024, 1, 15, 9), datetime(2024, 1, 15, 11), ("W1",)),
            Assignment("A2", datetime(2024, 1, 15, 13), datetime(2024, 1, 15, 14, 30), ("W1", "W2")),
            Assignment("A3", datetime(2024, 1, 16, 8), datetime(2024, 1, 16, 12), ("W2",)),
        ]
        assert assigned_hours_by_day(assignments, "W1") == {datetime(2024, 1, 15).date(): 3.5}
        w2 = assigned_hours_by_day(assignments, "W2")
        assert w2[datetime(2024, 1, 15).date()] == 1.5
        assert w2[datetime(2024, 1, 16).date()] == 4.0

    def test_no_assignments(self):
        assert assigned_hours_by_day([], "W1") == {}
