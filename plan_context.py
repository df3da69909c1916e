from __future__ import annotations
import logging
from models import AppState, LimitedResource, Plan, PremiumFeature
from plans import FEATURE_LABELS, can_access, get_limit_message, is_within_limit


logger = logging.getLogger(__name__)


class FeatureLockedError(PermissionError):
    def __init__(self, feature: PremiumFeature) -> None:
        title, description = FEATURE_LABELS[feature]
        super().__init__(f"{title} is a Premium feature. {description}")
        self.feature = feature


class LimitReachedError(PermissionError):
    def __init__(self, resource: LimitedResource) -> None:
        super().__init__(get_limit_message(resource))
        self.resource = resource


class PlanContext:
    """
    The current user's plan tier with the evaluator bound to it.
    """

    def __init__(self, plan: Plan = Plan.FREE) -> None:
        self.plan = plan

    @classmethod
    def for_state(cls, state: AppState | None) -> "PlanContext":
        if state is None:
            return cls(Plan.FREE)
        return cls(state.plan)

    @property
    def is_premium(self) -> bool:
        return self.plan == Plan.PREMIUM

    def can_access(self, feature: PremiumFeature) -> bool:
        return can_access(self.plan, feature)

    def is_within_limit(self, resource: LimitedResource, current_count: int) -> bool:
        return is_within_limit(self.plan, resource, current_count)

    def require(self, feature: PremiumFeature) -> None:
        if not self.can_access(feature):
            logger.info("Feature %s denied on %s plan", feature.value, self.plan.value)
            raise FeatureLockedError(feature)

    def check_can_add(self, resource: LimitedResource, current_count: int) -> None:
        # current_count may be stale if fetched before the latest insert
        if not self.is_within_limit(resource, current_count):
            logger.info(
                "Limit reached for %s on %s plan (count=%d)",
                resource.value, self.plan.value, current_count,
            )
            raise LimitReachedError(resource)

    def __repr__(self) -> str:
        return f"PlanContext(plan={self.plan.value!r})"
