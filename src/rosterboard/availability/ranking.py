"""Ranking and grouping of worker summaries for scheduling and display.

Internal workers are ordered by status (available, partial, unavailable)
and then by name. Subcontractors follow, ordered by name only. All
functions return new tuples and leave their inputs untouched.
"""

import unicodedata
from collections import defaultdict
from typing import Iterable, Optional

from rosterboard.domain.models import (
    AvailabilityStatus,
    RankingFilters,
    WorkerPeriodSummary,
)
from rosterboard.domain.policies import DefaultLeavePolicy, LeavePolicy


def collation_key(name: Optional[str]) -> tuple[str, str]:
    """Sort key approximating locale-aware name comparison.

    Accents and case are ignored first; the raw name breaks remaining ties
    so the order stays total.
    """
    name = name or ""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name


def status_key(summary: WorkerPeriodSummary) -> tuple:
    """Sort key for internal workers: status precedence, then name."""
    return summary.status.rank, collation_key(summary.worker.sort_name)


def name_key(summary: WorkerPeriodSummary) -> tuple:
    return collation_key(summary.worker.sort_name)


def filter_summaries(
    summaries: Iterable[WorkerPeriodSummary],
    filters: Optional[RankingFilters] = None,
) -> tuple[WorkerPeriodSummary, ...]:
    """Keep summaries whose worker matches the filters."""
    if filters is None:
        return tuple(summaries)
    return tuple(s for s in summaries if filters.matches(s.worker))


def rank_workers(
    worker_summaries: Iterable[WorkerPeriodSummary],
    subcontractor_summaries: Iterable[WorkerPeriodSummary] = (),
    filters: Optional[RankingFilters] = None,
) -> tuple[WorkerPeriodSummary, ...]:
    """Order workers for scheduling decisions.

    Args:
        worker_summaries: Summaries of internal workers.
        subcontractor_summaries: Summaries of subcontractors. They are
            always treated as available, whatever their summary says.
        filters: Optional region and worker-id selections.

    Returns:
        Internal workers sorted by status then name, followed by
        subcontractors sorted by name.
    """
    internal = sorted(filter_summaries(worker_summaries, filters), key=status_key)
    external = sorted(
        (
            s if s.status == AvailabilityStatus.AVAILABLE
            else WorkerPeriodSummary(worker=s.worker, status=AvailabilityStatus.AVAILABLE)
            for s in filter_summaries(subcontractor_summaries, filters)
        ),
        key=name_key,
    )
    return tuple(internal) + tuple(external)


def group_by_region(
    ranked: Iterable[WorkerPeriodSummary],
    unknown_label: str = "Unknown",
) -> dict[str, tuple[WorkerPeriodSummary, ...]]:
    """Group an already-ranked sequence by region, preserving inner order.

    Region keys are sorted by name with the unknown bucket last.
    """
    groups: dict[str, list[WorkerPeriodSummary]] = defaultdict(list)
    for summary in ranked:
        groups[summary.worker.region or unknown_label].append(summary)

    keys = sorted(groups, key=lambda k: (k == unknown_label, collation_key(k)))
    return {k: tuple(groups[k]) for k in keys}


def is_on_extended_leave(
    summary: WorkerPeriodSummary,
    policy: Optional[LeavePolicy] = None,
) -> bool:
    """Check if a worker is unavailable because of a long leave range."""
    policy = policy or DefaultLeavePolicy()
    if summary.status != AvailabilityStatus.UNAVAILABLE:
        return False
    return any(policy.is_extended_leave(r) for r in summary.leave_ranges)


def split_extended_leave(
    ranked: Iterable[WorkerPeriodSummary],
    policy: Optional[LeavePolicy] = None,
) -> tuple[tuple[WorkerPeriodSummary, ...], tuple[WorkerPeriodSummary, ...]]:
    """Separate workers on extended leave from the rest.

    Returns:
        Tuple of (remaining, on_leave), both in input order.
    """
    policy = policy or DefaultLeavePolicy()
    remaining = []
    on_leave = []
    for summary in ranked:
        if is_on_extended_leave(summary, policy):
            on_leave.append(summary)
        else:
            remaining.append(summary)
    return tuple(remaining), tuple(on_leave)
