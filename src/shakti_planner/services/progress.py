"""Daily progress arithmetic."""

from collections.abc import Sequence

from shakti_planner.domain.goals import GoalResult
from shakti_planner.domain.meals import MealResult
from shakti_planner.domain.progress import ProgressSnapshot, ProgressStatus

ON_TRACK_LOW = 0.90
ON_TRACK_HIGH = 1.10


def calculate_progress(
    goal: GoalResult | None, meal_log: Sequence[MealResult]
) -> ProgressSnapshot:
    """Derive progress against the active goal from the meal log."""
    daily_total = sum(meal.estimated_calories for meal in meal_log)
    target = goal.daily_calorie_target if goal else 0
    ratio = daily_total / target if target > 0 else 0.0
    return ProgressSnapshot(
        daily_total=daily_total,
        target=target,
        progress_ratio=ratio,
        remaining=max(0, target - daily_total),
        status=classify(ratio),
    )


def classify(ratio: float) -> ProgressStatus:
    """Classify a progress ratio."""
    if ratio > ON_TRACK_HIGH:
        return ProgressStatus.OVER
    if ratio >= ON_TRACK_LOW:
        return ProgressStatus.ON_TRACK
    return ProgressStatus.UNDER
