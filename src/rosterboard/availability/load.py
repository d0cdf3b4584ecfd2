"""Assigned-hours load and its color encoding.

Load is independent of availability status: a day can be available and
still be heavily booked. The ratio of assigned hours to capacity is mapped
onto a three-stop gradient for dashboards.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from rosterboard.domain.models import Assignment

RGB = tuple[float, float, float]

# Gradient stops (RGB tuples, 0-1 scale)
AVAILABLE_COLOR: RGB = (0.4, 0.7, 0.4)  # Green
PARTIAL_COLOR: RGB = (0.95, 0.7, 0.2)  # Amber
BOOKED_COLOR: RGB = (0.85, 0.3, 0.3)  # Red

GRADIENT_STOPS: tuple[tuple[float, RGB], ...] = (
    (0.0, AVAILABLE_COLOR),
    (0.5, PARTIAL_COLOR),
    (1.0, BOOKED_COLOR),
)


@dataclass(frozen=True)
class GradientPosition:
    """A point on the load gradient.

    Attributes:
        position: Clamped ratio in [0, 1].
        color: Interpolated RGB color at that position.
    """

    position: float
    color: RGB

    @property
    def percent(self) -> int:
        return round(self.position * 100)

    @property
    def hex(self) -> str:
        return "#" + "".join(f"{round(c * 255):02x}" for c in self.color)


def _clamp(value: float) -> float:
    if value != value:  # NaN
        return 0.0
    return min(1.0, max(0.0, value))


def color_for_ratio(assigned_hours_ratio: float) -> GradientPosition:
    """Map an assigned-hours ratio onto the load gradient.

    Args:
        assigned_hours_ratio: Assigned hours divided by capacity. Values
            outside [0, 1] are clamped.

    Returns:
        GradientPosition with linear interpolation between stops.
    """
    position = _clamp(assigned_hours_ratio)

    for (lo, lo_color), (hi, hi_color) in zip(GRADIENT_STOPS, GRADIENT_STOPS[1:]):
        if position <= hi:
            t = (position - lo) / (hi - lo)
            color = tuple(a + (b - a) * t for a, b in zip(lo_color, hi_color))
            return GradientPosition(position=position, color=color)

    return GradientPosition(position=position, color=GRADIENT_STOPS[-1][1])


def assigned_hours_ratio(assigned_hours: float, capacity_hours: float) -> float:
    """Compute the clamped load ratio for a day.

    Any assigned work on a day without capacity counts as fully booked.
    """
    if capacity_hours <= 0:
        return 1.0 if assigned_hours > 0 else 0.0
    return _clamp(assigned_hours / capacity_hours)


def assigned_hours_by_day(
    assignments: Iterable[Assignment],
    worker_id: str,
) -> dict[date, float]:
    """Sum the appointment hours of one worker per calendar date.

    Each appointment counts toward the date it starts on.
    """
    totals: dict[date, float] = defaultdict(float)
    for assignment in assignments:
        if worker_id in assignment.worker_ids:
            totals[assignment.work_date] += assignment.hours
    return dict(totals)
