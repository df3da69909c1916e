from __future__ import annotations
import calendar
from datetime import date
from typing import Dict, List, Optional, Tuple
from models import DayInfo, PomodoroSession, Task


def _sunday_index(d: date) -> int:
    # 0=Sun ... 6=Sat
    return (d.weekday() + 1) % 7


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_matrix(year: int, month: int) -> List[Optional[date]]:
    """
    Cells of a Sunday-first month grid, None for the blanks before day 1 and
    after the last day. Length is always a multiple of 7.
    """
    first = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]

    cells: List[Optional[date]] = [None] * _sunday_index(first)
    cells.extend(date(year, month, d) for d in range(1, days_in_month + 1))
    while len(cells) % 7 != 0:
        cells.append(None)
    return cells


def build_month_days(
    year: int,
    month: int,
    tasks: List[Task],
    sessions: List[PomodoroSession],
) -> List[Optional[DayInfo]]:
    matrix = month_matrix(year, month)
    by_day: Dict[date, DayInfo] = {
        d: DayInfo(day=d, day_number=d.day) for d in matrix if d is not None
    }

    for t in tasks:
        if t.due_date is None:
            continue
        info = by_day.get(t.due_date)
        if info is not None:
            info.tasks.append(t)

    for s in sessions:
        info = by_day.get(s.day)
        if info is not None:
            info.minutes_focus += s.duration_minutes

    return [by_day[d] if d is not None else None for d in matrix]


def tasks_for_day(tasks: List[Task], day: date) -> List[Task]:
    return [t for t in tasks if t.due_date == day]


def sessions_for_day(sessions: List[PomodoroSession], day: date) -> List[PomodoroSession]:
    return [s for s in sessions if s.day == day]


def focus_minutes_for_day(sessions: List[PomodoroSession], day: date) -> int:
    return sum(s.duration_minutes for s in sessions_for_day(sessions, day))
