from __future__ import annotations
import math
from datetime import date
from typing import Dict, List, Tuple
from models import (
    ExamPlan,
    ExamPlanProjection,
    PomodoroSession,
    Priority,
    Task,
    Urgency,
)


def _days_left(today: date, deadline: date) -> int:
    return max(1, (deadline - today).days)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _urgency(is_past: bool, days_remaining: int) -> Urgency:
    if is_past:
        return Urgency.PAST
    if days_remaining <= 2:
        return Urgency.RED
    if days_remaining <= 7:
        return Urgency.YELLOW
    return Urgency.GREEN


def _minutes_by_course(
    tasks: List[Task],
    sessions: List[PomodoroSession],
) -> Dict[str, int]:
    task_course = {t.id: t.course_id for t in tasks if t.course_id}
    minutes: Dict[str, int] = {}
    for s in sessions:
        course_id = task_course.get(s.task_id) if s.task_id else None
        if course_id is None:
            continue
        minutes[course_id] = minutes.get(course_id, 0) + s.duration_minutes
    return minutes


def project_exam_plan(
    plan: ExamPlan,
    actual_minutes: int,
    today: date,
) -> ExamPlanProjection:
    total_minutes = plan.study_hours * 60
    is_past = plan.exam_date < today
    days_remaining = _days_left(today, plan.exam_date)

    remaining = max(0, total_minutes - actual_minutes)
    suggested = 0 if is_past else math.ceil(remaining / days_remaining)
    if total_minutes > 0:
        progress = min(100, _round_half_up(actual_minutes / total_minutes * 100))
    else:
        progress = 0

    return ExamPlanProjection(
        **plan.model_dump(),
        actual_minutes=actual_minutes,
        total_minutes=total_minutes,
        days_remaining=days_remaining,
        suggested_min_per_day=suggested,
        progress_pct=progress,
        urgency=_urgency(is_past, days_remaining),
        is_past=is_past,
    )


def build_exam_projections(
    plans: List[ExamPlan],
    tasks: List[Task],
    sessions: List[PomodoroSession],
    today: date,
) -> List[ExamPlanProjection]:
    """
    Study pace and urgency for every exam plan.

    A session counts toward a plan when its task belongs to the plan's
    course. Upcoming exams come first, past ones last, each group by date.
    """
    minutes = _minutes_by_course(tasks, sessions)
    projections = [
        project_exam_plan(
            p,
            minutes.get(p.course_id, 0) if p.course_id else 0,
            today,
        )
        for p in plans
    ]
    projections.sort(key=lambda x: (x.is_past, x.exam_date))
    return projections


def task_status(task: Task, today: date) -> Tuple[str, str]:
    """
    Label and tone for a task's due state: (label, tone).
    """
    if task.due_date is None:
        return "No date", "none"
    if task.completed:
        return "Completed", "ok"
    if task.due_date < today:
        return "Overdue", "danger"
    if task.due_date == today:
        return "Today", "warn"
    return "Upcoming", "ok"


def effective_priority(task: Task) -> Priority:
    return task.priority or Priority.MEDIUM


def filter_tasks(
    tasks: List[Task],
    status: str = "all",
    course_id: str | None = None,
    priority: Priority | None = None,
) -> List[Task]:
    out: List[Task] = []
    for t in tasks:
        if status == "pending" and t.completed:
            continue
        if status == "completed" and not t.completed:
            continue
        if course_id is not None and t.course_id != course_id:
            continue
        if priority is not None and effective_priority(t) != priority:
            continue
        out.append(t)
    return out


def parse_tags(tags: str | None) -> List[str]:
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


def tasks_with_tag(tasks: List[Task], tag: str) -> List[Task]:
    wanted = tag.strip().lower()
    return [t for t in tasks if wanted in {x.lower() for x in parse_tags(t.tags)}]
