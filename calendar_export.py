from __future__ import annotations
from datetime import timedelta
from typing import List
from icalendar import Calendar, Event as IcsEvent
from models import Course, ExamPlan, Task
from planner import effective_priority


def _all_day_event(uid: str, summary: str, day, description: str) -> IcsEvent:
    event = IcsEvent()
    event.add("uid", f"{uid}@taskademic")
    event.add("summary", summary)
    event.add("dtstart", day)
    event.add("dtend", day + timedelta(days=1))
    if description:
        event.add("description", description)
    return event


def plan_to_ics(
    tasks: List[Task],
    exam_plans: List[ExamPlan],
    courses: List[Course] | None = None,
) -> bytes:
    """
    All-day events for every dated task and every exam.
    Tasks without a due date are left out.
    """
    cal = Calendar()
    cal.add("PRODID", "-//Taskademic//Local//")
    cal.add("version", "2.0")
    cal.add("X-WR-CALNAME", "Taskademic")

    course_names = {c.id: c.name for c in courses or []}

    for task in sorted(
        (t for t in tasks if t.due_date is not None),
        key=lambda x: (x.due_date, x.title.lower()),
    ):
        parts = [f"Priority: {effective_priority(task).value}"]
        if task.course_id in course_names:
            parts.append(f"Course: {course_names[task.course_id]}")
        if task.completed:
            parts.append("Completed")
        prefix = "[x] " if task.completed else ""
        cal.add_component(_all_day_event(
            f"task-{task.id}",
            f"{prefix}{task.title or 'Untitled task'}",
            task.due_date,
            " | ".join(parts) + ".",
        ))

    for plan in sorted(exam_plans, key=lambda x: x.exam_date):
        description = f"Target: {plan.study_hours:g} study hours"
        if plan.course_id in course_names:
            description += f" | Course: {course_names[plan.course_id]}"
        cal.add_component(_all_day_event(
            f"exam-{plan.id}",
            f"Exam: {plan.name}",
            plan.exam_date,
            description + ".",
        ))

    return cal.to_ical()
