from __future__ import annotations
import math
from types import MappingProxyType
from typing import Mapping, Tuple
from models import AppState, LimitedResource, Plan, PremiumFeature


PLAN_LIMITS: Mapping[LimitedResource, Mapping[Plan, float]] = MappingProxyType({
    LimitedResource.COURSES: MappingProxyType({Plan.FREE: 5, Plan.PREMIUM: math.inf}),
    LimitedResource.ACTIVE_TASKS: MappingProxyType({Plan.FREE: 20, Plan.PREMIUM: math.inf}),
})

PREMIUM_FEATURES = frozenset(PremiumFeature)

FEATURE_LABELS: Mapping[PremiumFeature, Tuple[str, str]] = MappingProxyType({
    PremiumFeature.SUBTASKS: (
        "Subtasks",
        "Split your tasks into smaller steps with checklists.",
    ),
    PremiumFeature.TAGS: (
        "Tags",
        "Organize your tasks with custom tags.",
    ),
    PremiumFeature.PRIORITIES: (
        "Priorities",
        "Give your tasks a high, medium or low priority.",
    ),
    PremiumFeature.PERFORMANCE_CHARTS: (
        "Performance charts",
        "Get detailed analytics of your academic progress.",
    ),
    PremiumFeature.ADVANCED_FILTERS: (
        "Advanced filters",
        "Filter tasks by priority, course and custom order.",
    ),
    PremiumFeature.EXPORT: (
        "Data export",
        "Download your grades, tasks and sessions as CSV.",
    ),
    PremiumFeature.POMODORO_LINK: (
        "Linked Pomodoro",
        "Link Pomodoro sessions to specific tasks for traceability.",
    ),
})

_RESOURCE_NOUNS = {
    LimitedResource.COURSES: "courses",
    LimitedResource.ACTIVE_TASKS: "active tasks",
}


def get_limit(plan: Plan, resource: LimitedResource) -> float:
    return PLAN_LIMITS[resource][plan]


def can_access(plan: Plan, feature: PremiumFeature) -> bool:
    if plan == Plan.PREMIUM:
        return True
    return feature not in PREMIUM_FEATURES


def is_within_limit(plan: Plan, resource: LimitedResource, current_count: int) -> bool:
    """
    Pre-insert check: may one more item be added on top of current_count?
    """
    return current_count < get_limit(plan, resource)


def get_limit_message(resource: LimitedResource) -> str:
    limit = PLAN_LIMITS[resource][Plan.FREE]
    noun = _RESOURCE_NOUNS[resource]
    return f"The free plan is limited to {limit} {noun}. Upgrade to Premium to create more."


def count_usage(state: AppState, resource: LimitedResource) -> int:
    if resource == LimitedResource.COURSES:
        return len(state.courses)
    return sum(1 for t in state.tasks if not t.completed)
