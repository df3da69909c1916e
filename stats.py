from __future__ import annotations
import math
from datetime import date, timedelta
from typing import Dict, List, Optional
import pandas as pd
from models import (
    Course,
    CourseAverage,
    CourseGrade,
    FocusSummary,
    PomodoroSession,
    Task,
)


UNKNOWN_COURSE = "Unknown course"


def minutes_on(sessions: List[PomodoroSession], day: date) -> int:
    return sum(s.duration_minutes for s in sessions if s.day == day)


def focus_streak(sessions: List[PomodoroSession], today: date) -> int:
    active_days = {s.day for s in sessions}
    streak = 0
    cursor = today
    while cursor in active_days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def focus_summary(
    sessions: List[PomodoroSession],
    tasks: List[Task],
    today: date,
) -> FocusSummary:
    return FocusSummary(
        total_pomodoros=len(sessions),
        total_minutes_focus=sum(s.duration_minutes for s in sessions),
        minutes_linked_to_tasks=sum(s.duration_minutes for s in sessions if s.task_id),
        tasks_completed=sum(1 for t in tasks if t.completed),
        streak_days=focus_streak(sessions, today),
    )


def daily_focus(
    sessions: List[PomodoroSession],
    today: date,
    period_days: int = 7,
) -> pd.Series:
    """
    Focus minutes per day over the trailing window ending today, oldest first.
    Days without sessions are 0.
    """
    index = pd.date_range(end=pd.Timestamp(today), periods=period_days, freq="D")
    series = pd.Series(0, index=index, dtype="int64")
    if not sessions:
        return series

    frame = pd.DataFrame(
        {
            "day": [pd.Timestamp(s.day) for s in sessions],
            "minutes": [s.duration_minutes for s in sessions],
        }
    )
    totals = frame.groupby("day")["minutes"].sum()
    return totals.reindex(index, fill_value=0).astype("int64")


def period_trend(
    sessions: List[PomodoroSession],
    today: date,
    period_days: int = 7,
) -> Optional[int]:
    """
    Percent change of the last period_days versus the period before it.
    None when the previous period has no focus time.
    """
    current_start = today - timedelta(days=period_days - 1)
    previous_start = current_start - timedelta(days=period_days)

    current = 0
    previous = 0
    for s in sessions:
        if current_start <= s.day <= today:
            current += s.duration_minutes
        elif previous_start <= s.day < current_start:
            previous += s.duration_minutes

    if previous <= 0:
        return None
    return math.floor((current - previous) / previous * 100 + 0.5)


def course_averages(
    grades: List[CourseGrade],
    courses: List[Course],
    descending: bool = True,
) -> List[CourseAverage]:
    names = {c.id: c.name for c in courses}
    totals: Dict[str, float] = {}
    counts: Dict[str, int] = {}
    for g in grades:
        totals[g.course_id] = totals.get(g.course_id, 0.0) + g.grade
        counts[g.course_id] = counts.get(g.course_id, 0) + 1

    result = [
        CourseAverage(
            course_id=cid,
            course_name=names.get(cid, UNKNOWN_COURSE),
            average=totals[cid] / counts[cid],
            count=counts[cid],
        )
        for cid in totals
    ]
    result.sort(key=lambda x: x.average, reverse=descending)
    return result


def general_average(grades: List[CourseGrade]) -> Optional[float]:
    if not grades:
        return None
    return sum(g.grade for g in grades) / len(grades)


def best_course(averages: List[CourseAverage]) -> Optional[CourseAverage]:
    if not averages:
        return None
    return max(averages, key=lambda x: x.average)


def weakest_course(averages: List[CourseAverage]) -> Optional[CourseAverage]:
    # a single course is never flagged as the one to reinforce
    if len(averages) < 2:
        return None
    return min(averages, key=lambda x: x.average)


def grade_status(grade: float) -> str:
    if grade >= 10:
        return "Excellent"
    if grade >= 8:
        return "Very good"
    if grade >= 6:
        return "Passed"
    if grade >= 4:
        return "At risk"
    return "Failed"
