from __future__ import annotations
from typing import List
import pandas as pd
from models import Course, CourseGrade, PomodoroSession, Task
from planner import effective_priority, parse_tags
from stats import UNKNOWN_COURSE


TASK_COLUMNS = ["Title", "Course", "Due date", "Priority", "Tags", "Completed"]
SESSION_COLUMNS = ["Started at", "Date", "Minutes", "Task"]
GRADE_COLUMNS = ["Course", "Grade", "Exam type", "Exam date"]


def _course_names(courses: List[Course]) -> dict:
    return {c.id: c.name for c in courses}


def _to_csv(rows: List[dict], columns: List[str]) -> bytes:
    df = pd.DataFrame(rows, columns=columns)
    return df.to_csv(index=False).encode("utf-8")


def tasks_to_csv(tasks: List[Task], courses: List[Course]) -> bytes:
    names = _course_names(courses)
    rows = [
        {
            "Title": t.title,
            "Course": names.get(t.course_id, "") if t.course_id else "",
            "Due date": t.due_date.isoformat() if t.due_date else "",
            "Priority": effective_priority(t).value,
            "Tags": ", ".join(parse_tags(t.tags)),
            "Completed": "yes" if t.completed else "no",
        }
        for t in tasks
    ]
    return _to_csv(rows, TASK_COLUMNS)


def sessions_to_csv(sessions: List[PomodoroSession], tasks: List[Task]) -> bytes:
    titles = {t.id: t.title for t in tasks}
    rows = [
        {
            "Started at": s.started_at.isoformat(),
            "Date": s.day.isoformat(),
            "Minutes": s.duration_minutes,
            "Task": titles.get(s.task_id, "") if s.task_id else "",
        }
        for s in sorted(sessions, key=lambda x: x.started_at)
    ]
    return _to_csv(rows, SESSION_COLUMNS)


def grades_to_csv(grades: List[CourseGrade], courses: List[Course]) -> bytes:
    names = _course_names(courses)
    rows = [
        {
            "Course": names.get(g.course_id, UNKNOWN_COURSE),
            "Grade": g.grade,
            "Exam type": g.exam_type or "",
            "Exam date": g.exam_date.isoformat() if g.exam_date else "",
        }
        for g in sorted(grades, key=lambda x: x.exam_date.isoformat() if x.exam_date else "", reverse=True)
    ]
    return _to_csv(rows, GRADE_COLUMNS)
