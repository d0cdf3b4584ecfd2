"""Tests for the rotating status board."""

from datetime import date, datetime, time, timedelta

import pytest

from rosterboard.board.status_board import (
    BoardConfig,
    build_board,
    page_for_elapsed,
    paginate,
)
from rosterboard.domain.models import (
    Assignment,
    AvailabilityStatus,
    RankingFilters,
    ScheduleBlock,
    UnavailabilityRange,
    Worker,
)


@pytest.fixture
def start():
    return date(2024, 1, 15)  # Monday


@pytest.fixture
def workers():
    return [
        Worker("W1", "Adam", region="NSW"),
        Worker("W2", "Zara", region="VIC"),
        Worker("W3", "Ned"),
        Worker("S1", "Bob's Electrical", region="NSW", is_subcontractor=True),
    ]


@pytest.fixture
def schedules():
    rows = []
    for worker_id in ("W1", "W2"):
        rows.extend(ScheduleBlock(worker_id, dow, time(9), time(17)) for dow in range(1, 6))
    return rows


@pytest.fixture
def unavailability(start):
    return [
        UnavailabilityRange("W2", start - timedelta(days=5), start + timedelta(days=100),
                            reason="Long service leave"),
    ]


@pytest.fixture
def assignments(start):
    return [
        Assignment("A1", datetime(2024, 1, 15, 9), datetime(2024, 1, 15, 13), ("W1",)),
    ]


class TestPagination:
    """Tests for pages and rotation."""

    def test_paginate_sixty_days(self, start):
        days = tuple(start + timedelta(days=i) for i in range(60))
        pages = paginate(days, 30)
        assert len(pages) == 2
        assert pages[0][0] == start
        assert pages[1][0] == start + timedelta(days=30)
        assert all(len(p) == 30 for p in pages)

    def test_paginate_uneven(self, start):
        days = tuple(start + timedelta(days=i) for i in range(45))
        assert [len(p) for p in paginate(days, 30)] == [30, 15]

    @pytest.mark.parametrize(
        "elapsed,expected",
        [(0, 0), (29.9, 0), (30, 1), (59, 1), (60, 0), (75, 0), (95, 1)],
    )
    def test_page_for_elapsed(self, elapsed, expected):
        assert page_for_elapsed(elapsed, 2, 30) == expected

    def test_single_page_never_rotates(self):
        assert page_for_elapsed(1000, 1, 30) == 0

    def test_config_page_count(self):
        assert BoardConfig().page_count == 2
        assert BoardConfig(window_days=45, page_days=30).page_count == 2
        assert BoardConfig(window_days=30, page_days=30).page_count == 1


class TestBuildBoard:
    """Tests for build_board."""

    def test_window_and_pages(self, workers, schedules, unavailability, start):
        board = build_board(workers, schedules, unavailability, start)
        assert len(board.days) == 60
        assert board.days[0] == start
        assert len(board.pages) == 2

    def test_grouping_and_leave_split(self, workers, schedules, unavailability, start):
        """Leave goes to its own bucket; workers without availability are hidden."""
        board = build_board(workers, schedules, unavailability, start)

        assert list(board.groups) == ["NSW"]
        assert [r.worker.id for r in board.groups["NSW"]] == ["W1", "S1"]
        assert [r.worker.id for r in board.extended_leave] == ["W2"]
        assert board.extended_leave[0].summary.status == AvailabilityStatus.UNAVAILABLE

    def test_show_workers_without_availability(self, workers, schedules, unavailability, start):
        config = BoardConfig(hide_without_availability=False)
        board = build_board(workers, schedules, unavailability, start, config=config)
        assert list(board.groups) == ["NSW", "Unknown"]
        assert [r.worker.id for r in board.groups["Unknown"]] == ["W3"]

    def test_cells_carry_load(self, workers, schedules, unavailability, assignments, start):
        board = build_board(
            workers, schedules, unavailability, start, assignments=assignments
        )
        adam = board.groups["NSW"][0]
        assert len(adam.cells) == 60

        first = adam.cells[0]
        assert first.verdict.is_available
        assert first.assigned_hours == 4.0
        assert first.capacity_hours == 8.0
        assert first.load.position == 0.5

        sunday = adam.cells[6]
        assert not sunday.verdict.is_scheduled
        assert sunday.load.position == 0.0

    def test_subcontractor_cells(self, workers, schedules, unavailability, start):
        board = build_board(workers, schedules, unavailability, start)
        sub = board.groups["NSW"][1]
        assert sub.summary.status == AvailabilityStatus.AVAILABLE
        assert all(c.verdict is None and c.is_available for c in sub.cells)

    def test_filters(self, workers, schedules, unavailability, start):
        board = build_board(
            workers, schedules, unavailability, start,
            filters=RankingFilters(worker_ids=frozenset({"S1"})),
        )
        assert [r.worker.id for r in board.rows] == ["S1"]
        assert board.extended_leave == ()

    def test_cells_for_page(self, workers, schedules, unavailability, start):
        board = build_board(workers, schedules, unavailability, start)
        row = board.groups["NSW"][0]
        second_page = row.cells_for(board.pages[1])
        assert len(second_page) == 30
        assert second_page[0].date == start + timedelta(days=30)

    def test_inputs_untouched(self, workers, schedules, unavailability, start):
        before = (list(workers), list(schedules), list(unavailability))
        build_board(workers, schedules, unavailability, start)
        assert (workers, schedules, unavailability) == before
