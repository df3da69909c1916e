from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Optional


class Plan(str, Enum):
    FREE = "free"
    PREMIUM = "premium"


class PremiumFeature(str, Enum):
    SUBTASKS = "subtasks"
    TAGS = "tags"
    PRIORITIES = "priorities"
    PERFORMANCE_CHARTS = "performance_charts"
    ADVANCED_FILTERS = "advanced_filters"
    EXPORT = "export"
    POMODORO_LINK = "pomodoro_link"


class LimitedResource(str, Enum):
    COURSES = "courses"
    ACTIVE_TASKS = "active_tasks"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProjectRole(str, Enum):
    OWNER = "owner"
    MEMBER = "member"


class ProjectTaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Urgency(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    PAST = "past"


class Course(BaseModel):
    id: str
    name: str
    color: Optional[str] = None


class Task(BaseModel):
    id: str
    title: str = ""
    course_id: Optional[str] = None
    due_date: Optional[date] = None
    completed: bool = False
    priority: Optional[Priority] = None
    tags: Optional[str] = None


class PomodoroSession(BaseModel):
    id: str
    task_id: Optional[str] = None
    started_at: datetime
    duration_minutes: int = Field(ge=0, default=0)

    @property
    def day(self) -> date:
        # date slice of the start timestamp, no timezone conversion
        return self.started_at.date()


class ExamPlan(BaseModel):
    id: str
    course_id: Optional[str] = None
    name: str
    exam_date: date
    study_hours: float = Field(ge=0)


class CourseGrade(BaseModel):
    id: str
    course_id: str
    grade: float
    exam_type: Optional[str] = None
    exam_date: Optional[date] = None


class DayInfo(BaseModel):
    day: date
    day_number: int
    tasks: List[Task] = Field(default_factory=list)
    minutes_focus: int = 0


class ExamPlanProjection(ExamPlan):
    actual_minutes: int
    total_minutes: float
    days_remaining: int
    suggested_min_per_day: int
    progress_pct: int
    urgency: Urgency
    is_past: bool


class PomodoroSettings(BaseModel):
    focus_minutes: int = Field(ge=1, le=120, default=25)
    break_minutes: int = Field(ge=1, le=60, default=5)
    selected_task_id: str = ""


class Project(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    color: str = "#80499d"
    owner_id: str


class ProjectMember(BaseModel):
    id: str
    project_id: str
    user_id: str
    role: ProjectRole = ProjectRole.MEMBER


class ProjectTask(BaseModel):
    id: str
    project_id: str
    title: str
    status: ProjectTaskStatus = ProjectTaskStatus.TODO
    assigned_to: Optional[str] = None
    due_date: Optional[date] = None
    created_by: str


class ProjectSummary(BaseModel):
    project: Project
    member_count: int
    task_count: int
    done_count: int
    progress_pct: int


class AppState(BaseModel):
    plan: Plan = Plan.FREE
    courses: List[Course] = Field(default_factory=list)
    tasks: List[Task] = Field(default_factory=list)
    sessions: List[PomodoroSession] = Field(default_factory=list)
    exam_plans: List[ExamPlan] = Field(default_factory=list)
    grades: List[CourseGrade] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    project_members: List[ProjectMember] = Field(default_factory=list)
    project_tasks: List[ProjectTask] = Field(default_factory=list)
    pomodoro: PomodoroSettings = Field(default_factory=PomodoroSettings)
    profile: str = "default"


class CourseAverage(BaseModel):
    course_id: str
    course_name: str
    average: float
    count: int


class FocusSummary(BaseModel):
    total_pomodoros: int = 0
    total_minutes_focus: int = 0
    minutes_linked_to_tasks: int = 0
    tasks_completed: int = 0
    streak_days: int = 0
