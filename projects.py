from __future__ import annotations
import math
from typing import Dict, List
from models import (
    Project,
    ProjectMember,
    ProjectRole,
    ProjectSummary,
    ProjectTask,
    ProjectTaskStatus,
)


STATUS_LABELS = {
    ProjectTaskStatus.TODO: "To do",
    ProjectTaskStatus.IN_PROGRESS: "In progress",
    ProjectTaskStatus.DONE: "Done",
}


def project_progress(done_count: int, task_count: int) -> int:
    if task_count <= 0:
        return 0
    return math.floor(done_count / task_count * 100 + 0.5)


def group_by_status(tasks: List[ProjectTask]) -> Dict[ProjectTaskStatus, List[ProjectTask]]:
    """
    Board columns in display order; every status is present, possibly empty.
    """
    columns: Dict[ProjectTaskStatus, List[ProjectTask]] = {s: [] for s in ProjectTaskStatus}
    for t in tasks:
        columns[t.status].append(t)
    return columns


def summarize_projects(
    projects: List[Project],
    members: List[ProjectMember],
    tasks: List[ProjectTask],
) -> List[ProjectSummary]:
    member_counts: Dict[str, int] = {}
    for m in members:
        member_counts[m.project_id] = member_counts.get(m.project_id, 0) + 1
    task_counts: Dict[str, int] = {}
    done_counts: Dict[str, int] = {}
    for t in tasks:
        task_counts[t.project_id] = task_counts.get(t.project_id, 0) + 1
        if t.status == ProjectTaskStatus.DONE:
            done_counts[t.project_id] = done_counts.get(t.project_id, 0) + 1

    out = []
    for p in projects:
        total = task_counts.get(p.id, 0)
        done = done_counts.get(p.id, 0)
        out.append(ProjectSummary(
            project=p,
            member_count=member_counts.get(p.id, 0),
            task_count=total,
            done_count=done,
            progress_pct=project_progress(done, total),
        ))
    return out


def is_owner(project: Project, user_id: str) -> bool:
    return project.owner_id == user_id


def can_delete_task(project: Project, task: ProjectTask, user_id: str) -> bool:
    # owners moderate every task, members only their own
    return is_owner(project, user_id) or task.created_by == user_id


def can_remove_member(project: Project, member: ProjectMember, user_id: str) -> bool:
    return is_owner(project, user_id) and member.role != ProjectRole.OWNER
