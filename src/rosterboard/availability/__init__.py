"""Availability engine: day classification, period roll-up, load and ranking."""

from rosterboard.availability.aggregator import (
    NO_SCHEDULE_REASON,
    UNAVAILABLE_ALL_PERIOD_REASON,
    classify_period,
    month_window,
    period_dates,
    rolling_window,
    summarize_period,
    summarize_workers,
    week_start,
)
from rosterboard.availability.classifier import resolve_day
from rosterboard.availability.load import (
    GradientPosition,
    assigned_hours_by_day,
    assigned_hours_ratio,
    color_for_ratio,
)
from rosterboard.availability.ranking import (
    group_by_region,
    rank_workers,
    split_extended_leave,
)
from rosterboard.availability.schedule_index import ScheduleIndex
from rosterboard.availability.unavailability import (
    UnavailabilityHit,
    resolve_unavailability,
)

__all__ = [
    # Day level
    "ScheduleIndex",
    "UnavailabilityHit",
    "resolve_unavailability",
    "resolve_day",
    # Period level
    "NO_SCHEDULE_REASON",
    "UNAVAILABLE_ALL_PERIOD_REASON",
    "classify_period",
    "summarize_period",
    "summarize_workers",
    "week_start",
    "period_dates",
    "month_window",
    "rolling_window",
    # Load
    "GradientPosition",
    "assigned_hours_by_day",
    "assigned_hours_ratio",
    "color_for_ratio",
    # Ranking
    "rank_workers",
    "group_by_region",
    "split_extended_leave",
]
