"""Tests for ranking, filtering and grouping of worker summaries."""

from datetime import date, time, timedelta

import pytest

from rosterboard.availability.aggregator import summarize_period
from rosterboard.availability.ranking import (
    collation_key,
    group_by_region,
    is_on_extended_leave,
    rank_workers,
    split_extended_leave,
)
from rosterboard.domain.models import (
    AvailabilityStatus,
    RankingFilters,
    ScheduleBlock,
    UnavailabilityRange,
    Worker,
    WorkerPeriodSummary,
)
from rosterboard.domain.policies import DefaultLeavePolicy


def summary(name, status, region=None, worker_id=None, subcontractor=False):
    """Helper to create a summary without computing days."""
    worker = Worker(
        id=worker_id or f"id-{name}",
        name=name,
        region=region,
        is_subcontractor=subcontractor,
    )
    return WorkerPeriodSummary(worker=worker, status=status)


A = AvailabilityStatus.AVAILABLE
P = AvailabilityStatus.PARTIAL
U = AvailabilityStatus.UNAVAILABLE


class TestStatusOrder:
    """Tests for the status total order."""

    def test_ranks(self):
        assert [s.rank for s in (A, P, U)] == [0, 1, 2]

    def test_comparison(self):
        assert A < P < U
        assert sorted([U, A, P]) == [A, P, U]


class TestRankWorkers:
    """Tests for rank_workers."""

    def test_partial_tie_break_and_subcontractor_last(self):
        """Two partial staff sort by name; the subcontractor follows."""
        ranked = rank_workers(
            [summary("Zara", P), summary("Adam", P)],
            [summary("Bob", A, subcontractor=True)],
        )
        assert [s.worker.name for s in ranked] == ["Adam", "Zara", "Bob"]

    def test_status_bands_then_names(self):
        staff = [
            summary("Mia", U),
            summary("Leo", A),
            summary("Eve", P),
            summary("Ben", U),
            summary("Ivy", A),
            summary("Ann", P),
        ]
        ranked = rank_workers(staff)

        ranks = [s.status.rank for s in ranked]
        assert ranks == sorted(ranks)
        for status in (A, P, U):
            names = [s.worker.name for s in ranked if s.status == status]
            assert names == sorted(names)

    def test_subcontractors_sorted_by_name(self):
        ranked = rank_workers([], [summary("Zed", A), summary("Ace", A), summary("Max", A)])
        assert [s.worker.name for s in ranked] == ["Ace", "Max", "Zed"]

    def test_subcontractors_forced_available(self):
        ranked = rank_workers([], [summary("Ace", U, subcontractor=True)])
        assert ranked[0].status == A

    def test_missing_name_sorts_first(self):
        ranked = rank_workers([summary("Bea", A), summary("", A, worker_id="W0")])
        assert ranked[0].worker.id == "W0"

    def test_accent_and_case_insensitive(self):
        ranked = rank_workers([summary("Eva", A), summary("Émile", A), summary("adam", A)])
        assert [s.worker.name for s in ranked] == ["adam", "Émile", "Eva"]

    def test_inputs_not_mutated(self):
        staff = [summary("Zara", U), summary("Adam", A)]
        subs = [summary("Zed", A), summary("Ace", A)]
        staff_before = list(staff)
        subs_before = list(subs)

        ranked = rank_workers(staff, subs)

        assert staff == staff_before
        assert subs == subs_before
        assert isinstance(ranked, tuple)


class TestFilters:
    """Tests for RankingFilters."""

    @pytest.fixture
    def staff(self):
        return [
            summary("Adam", A, region="NSW", worker_id="W1"),
            summary("Zara", A, region="VIC", worker_id="W2"),
            summary("Mia", P, worker_id="W3"),
        ]

    def test_empty_filters_pass_through(self, staff):
        assert len(rank_workers(staff, filters=RankingFilters())) == 3

    def test_region_filter(self, staff):
        ranked = rank_workers(staff, filters=RankingFilters(regions=frozenset({"VIC"})))
        assert [s.worker.id for s in ranked] == ["W2"]

    def test_worker_filter(self, staff):
        ranked = rank_workers(staff, filters=RankingFilters(worker_ids=frozenset({"W1", "W3"})))
        assert [s.worker.id for s in ranked] == ["W1", "W3"]

    def test_filters_apply_to_subcontractors(self, staff):
        subs = [summary("Bob", A, region="QLD", worker_id="S1")]
        ranked = rank_workers(staff, subs, RankingFilters(regions=frozenset({"NSW"})))
        assert [s.worker.id for s in ranked] == ["W1"]


class TestGroupByRegion:
    """Tests for group_by_region."""

    def test_groups_preserve_order(self):
        ranked = rank_workers(
            [
                summary("Adam", A, region="VIC"),
                summary("Zara", A, region="NSW"),
                summary("Mia", P, region="VIC"),
                summary("Ned", U),
            ],
            [summary("Bob", A, region="VIC")],
        )
        groups = group_by_region(ranked)

        assert list(groups) == ["NSW", "VIC", "Unknown"]
        assert [s.worker.name for s in groups["VIC"]] == ["Adam", "Mia", "Bob"]
        assert [s.worker.name for s in groups["Unknown"]] == ["Ned"]

    def test_custom_unknown_label(self):
        groups = group_by_region([summary("Ned", A)], unknown_label="No state")
        assert list(groups) == ["No state"]


class TestExtendedLeave:
    """Tests for splitting out workers on extended leave."""

    @pytest.fixture
    def blocks(self):
        rows = []
        for worker_id in ("W1", "W2", "W3"):
            rows.extend(ScheduleBlock(worker_id, dow, time(9), time(17)) for dow in range(1, 6))
        return rows

    def test_split(self, blocks):
        monday = date(2024, 1, 15)
        ranges = [
            # Two weeks of leave covering the whole window
            UnavailabilityRange("W1", monday - timedelta(days=3), monday + timedelta(days=10),
                                reason="Long service leave"),
            # Exactly a week: not extended
            UnavailabilityRange("W2", monday, monday + timedelta(days=6), reason="Annual leave"),
        ]
        summaries = [
            summarize_period(Worker(wid, wid), monday, 7, blocks, ranges)
            for wid in ("W1", "W2", "W3", "W4")
        ]
        remaining, on_leave = split_extended_leave(rank_workers(summaries))

        assert [s.worker.id for s in on_leave] == ["W1"]
        assert {s.worker.id for s in remaining} == {"W2", "W3", "W4"}

    def test_partial_status_is_not_extended_leave(self, blocks):
        monday = date(2024, 1, 15)
        ranges = [UnavailabilityRange("W1", monday + timedelta(days=3), monday + timedelta(days=30))]
        s = summarize_period(Worker("W1", "W1"), monday, 7, blocks, ranges)
        assert s.status == P
        assert not is_on_extended_leave(s)

    def test_policy_threshold(self, blocks):
        monday = date(2024, 1, 15)
        ranges = [UnavailabilityRange("W2", monday, monday + timedelta(days=6))]
        s = summarize_period(Worker("W2", "W2"), monday, 7, blocks, ranges)
        assert not is_on_extended_leave(s)
        assert is_on_extended_leave(s, DefaultLeavePolicy(extended_leave_days=5))


class TestCollationKey:
    def test_none_is_empty(self):
        assert collation_key(None) == ("", "")
