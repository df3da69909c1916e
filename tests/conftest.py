"""Shared pytest setup: project root on sys.path and sample records."""

import os
import sys
from datetime import date, datetime

import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from models import Course, ExamPlan, PomodoroSession, Priority, Task  # noqa: E402


@pytest.fixture
def today() -> date:
    return date(2025, 5, 1)


@pytest.fixture
def courses() -> list[Course]:
    return [
        Course(id="c-math", name="Math", color="#ff0000"),
        Course(id="c-bio", name="Biology", color="#00ff00"),
    ]


@pytest.fixture
def tasks() -> list[Task]:
    return [
        Task(id="t1", title="Algebra sheet", course_id="c-math",
             due_date=date(2025, 3, 15), priority=Priority.HIGH),
        Task(id="t2", title="Cell reading", course_id="c-bio",
             due_date=date(2025, 3, 15), completed=True),
        Task(id="t3", title="Lab report", course_id="c-bio",
             due_date=date(2025, 4, 2)),
        Task(id="t4", title="Loose ends"),
    ]


@pytest.fixture
def sessions() -> list[PomodoroSession]:
    return [
        PomodoroSession(id="s1", task_id="t1",
                        started_at=datetime(2025, 3, 15, 23, 59), duration_minutes=25),
        PomodoroSession(id="s2", task_id="t1",
                        started_at=datetime(2025, 3, 15, 9, 0), duration_minutes=50),
        PomodoroSession(id="s3", task_id="t3",
                        started_at=datetime(2025, 3, 3, 10, 0), duration_minutes=30),
        PomodoroSession(id="s4", task_id=None,
                        started_at=datetime(2025, 3, 20, 8, 0), duration_minutes=45),
    ]


@pytest.fixture
def make_plan():
    def _make(exam_date: date, study_hours: float = 10, course_id: str | None = "c-math",
              plan_id: str = "p1") -> ExamPlan:
        return ExamPlan(id=plan_id, course_id=course_id, name=f"Exam {plan_id}",
                        exam_date=exam_date, study_hours=study_hours)
    return _make


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    target = tmp_path / "data"
    target.mkdir(parents=True)
    monkeypatch.setenv("TASKADEMIC_DATA_DIR", str(target))
    return target
