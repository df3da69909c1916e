"""Tests for the month grid and per-day rollups."""

from datetime import date, datetime, timedelta, timezone

import pytest

from calendar_view import (
    build_month_days,
    focus_minutes_for_day,
    month_matrix,
    sessions_for_day,
    shift_month,
    tasks_for_day,
)
from models import PomodoroSession, Task


@pytest.mark.parametrize("year", [2023, 2024, 2025, 2026])
@pytest.mark.parametrize("month", range(1, 13))
def test_grid_is_whole_weeks_with_sunday_first_leading_blanks(year, month) -> None:
    cells = month_matrix(year, month)
    assert len(cells) % 7 == 0
    first = date(year, month, 1)
    leading = (first.weekday() + 1) % 7
    assert cells[:leading] == [None] * leading
    assert cells[leading] == first


def test_known_months() -> None:
    # 2025-03-01 is a Saturday
    march = month_matrix(2025, 3)
    assert march[:6] == [None] * 6
    assert len(march) == 42
    assert march[6 + 30] == date(2025, 3, 31)

    # 2025-06-01 is a Sunday: no leading blanks
    june = month_matrix(2025, 6)
    assert june[0] == date(2025, 6, 1)
    assert len(june) == 35

    # February 2026 starts on Sunday and fills exactly four weeks
    assert len(month_matrix(2026, 2)) == 28
    assert None not in month_matrix(2026, 2)

    leap = [d for d in month_matrix(2024, 2) if d is not None]
    assert leap[-1] == date(2024, 2, 29)


def test_build_month_days_attributes_tasks_and_minutes(tasks, sessions) -> None:
    cells = build_month_days(2025, 3, tasks, sessions)
    days = {c.day: c for c in cells if c is not None}

    assert len(days) == 31
    fifteenth = days[date(2025, 3, 15)]
    assert fifteenth.day_number == 15
    assert [t.id for t in fifteenth.tasks] == ["t1", "t2"]
    assert fifteenth.minutes_focus == 75
    assert days[date(2025, 3, 3)].minutes_focus == 30
    assert days[date(2025, 3, 20)].minutes_focus == 45
    assert days[date(2025, 3, 1)].tasks == []
    assert days[date(2025, 3, 1)].minutes_focus == 0


def test_late_night_session_and_task_share_a_cell() -> None:
    task = Task(id="t", due_date=date(2025, 3, 15))
    session = PomodoroSession(id="s", started_at=datetime(2025, 3, 15, 23, 59), duration_minutes=20)
    cells = build_month_days(2025, 3, [task], [session])
    cell = next(c for c in cells if c is not None and c.day == date(2025, 3, 15))
    assert cell.tasks == [task]
    assert cell.minutes_focus == 20


@pytest.mark.parametrize(
    "tz",
    [timezone.utc, timezone(timedelta(hours=5)), timezone(timedelta(hours=-8))],
)
def test_aware_session_uses_its_own_local_date(tz) -> None:
    task = Task(id="t", due_date=date(2025, 3, 15))
    session = PomodoroSession(
        id="s", started_at=datetime(2025, 3, 15, 23, 59, tzinfo=tz), duration_minutes=25
    )
    assert session.day == date(2025, 3, 15)
    cells = build_month_days(2025, 3, [task], [session])
    days = {c.day: c for c in cells if c is not None}
    assert days[date(2025, 3, 15)].tasks == [task]
    assert days[date(2025, 3, 15)].minutes_focus == 25
    assert days[date(2025, 3, 16)].minutes_focus == 0
    assert focus_minutes_for_day([session], date(2025, 3, 15)) == 25


def test_aware_session_from_iso_string_keeps_written_date() -> None:
    session = PomodoroSession.model_validate(
        {"id": "s", "started_at": "2025-03-15T23:30:00+05:00", "duration_minutes": 10}
    )
    assert session.day == date(2025, 3, 15)
    assert sessions_for_day([session], date(2025, 3, 15)) == [session]


def test_blank_cells_are_none_and_line_up_with_matrix(tasks, sessions) -> None:
    cells = build_month_days(2025, 3, tasks, sessions)
    matrix = month_matrix(2025, 3)
    assert len(cells) == len(matrix)
    for cell, d in zip(cells, matrix):
        assert (cell is None) == (d is None)


def test_out_of_month_records_are_filtered_not_removed(tasks, sessions) -> None:
    cells = build_month_days(2025, 4, tasks, sessions)
    days = [c for c in cells if c is not None]
    assert [t.id for c in days for t in c.tasks] == ["t3"]
    assert sum(c.minutes_focus for c in days) == 0
    assert len(tasks) == 4


def test_empty_inputs_give_zero_aggregates() -> None:
    cells = build_month_days(2025, 3, [], [])
    assert all(c.tasks == [] and c.minutes_focus == 0 for c in cells if c is not None)


def test_selected_day_detail(tasks, sessions) -> None:
    day = date(2025, 3, 15)
    assert [t.id for t in tasks_for_day(tasks, day)] == ["t1", "t2"]
    assert [s.id for s in sessions_for_day(sessions, day)] == ["s1", "s2"]
    assert focus_minutes_for_day(sessions, day) == 75
    assert focus_minutes_for_day(sessions, date(2025, 3, 16)) == 0


@pytest.mark.parametrize(
    "start, delta, expected",
    [
        ((2025, 1), -1, (2024, 12)),
        ((2025, 12), 1, (2026, 1)),
        ((2025, 5), 0, (2025, 5)),
        ((2025, 5), 14, (2026, 7)),
    ],
)
def test_shift_month(start, delta, expected) -> None:
    assert shift_month(*start, delta) == expected
