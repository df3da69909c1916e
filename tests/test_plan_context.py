"""Tests for the plan context wrapper."""

import logging

import pytest

from models import AppState, LimitedResource, Plan, PremiumFeature
from plan_context import FeatureLockedError, LimitReachedError, PlanContext


def test_defaults_to_free() -> None:
    ctx = PlanContext()
    assert ctx.plan == Plan.FREE
    assert ctx.is_premium is False


def test_for_state_uses_stored_plan() -> None:
    assert PlanContext.for_state(AppState(plan=Plan.PREMIUM)).is_premium is True
    assert PlanContext.for_state(None).plan == Plan.FREE


def test_bound_checks_delegate_to_evaluator() -> None:
    free = PlanContext(Plan.FREE)
    premium = PlanContext(Plan.PREMIUM)
    assert free.can_access(PremiumFeature.SUBTASKS) is False
    assert premium.can_access(PremiumFeature.SUBTASKS) is True
    assert free.is_within_limit(LimitedResource.COURSES, 4) is True
    assert free.is_within_limit(LimitedResource.COURSES, 5) is False
    assert premium.is_within_limit(LimitedResource.COURSES, 5) is True


def test_require_raises_with_feature_label(caplog) -> None:
    ctx = PlanContext(Plan.FREE)
    with caplog.at_level(logging.INFO, logger="plan_context"):
        with pytest.raises(FeatureLockedError) as exc:
            ctx.require(PremiumFeature.EXPORT)
    assert exc.value.feature == PremiumFeature.EXPORT
    assert "Data export" in str(exc.value)
    assert isinstance(exc.value, PermissionError)
    assert "export" in caplog.text


def test_require_passes_for_premium() -> None:
    PlanContext(Plan.PREMIUM).require(PremiumFeature.EXPORT)


def test_check_can_add() -> None:
    ctx = PlanContext(Plan.FREE)
    ctx.check_can_add(LimitedResource.ACTIVE_TASKS, 19)
    with pytest.raises(LimitReachedError) as exc:
        ctx.check_can_add(LimitedResource.ACTIVE_TASKS, 20)
    assert exc.value.resource == LimitedResource.ACTIVE_TASKS
    assert "20 active tasks" in str(exc.value)
    PlanContext(Plan.PREMIUM).check_can_add(LimitedResource.ACTIVE_TASKS, 20)


def test_upgrade_scenario_through_profile_store(data_dir) -> None:
    from models import Course
    from plans import count_usage
    from profiles import load_profile, save_profile, set_plan

    state = AppState(courses=[Course(id=str(i), name=f"Course {i}") for i in range(5)])
    save_profile("student", state)

    ctx = PlanContext.for_state(load_profile("student"))
    used = count_usage(state, LimitedResource.COURSES)
    assert used == 5
    with pytest.raises(LimitReachedError):
        ctx.check_can_add(LimitedResource.COURSES, used)
    with pytest.raises(FeatureLockedError):
        ctx.require(PremiumFeature.EXPORT)

    upgraded = PlanContext.for_state(set_plan("student", Plan.PREMIUM))
    upgraded.check_can_add(LimitedResource.COURSES, used)
    upgraded.require(PremiumFeature.EXPORT)
