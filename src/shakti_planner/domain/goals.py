"""Domain models for weight goals."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class GoalDirection(StrEnum):
    """Direction of the requested weight change."""

    GAIN = "gain"
    LOSE = "lose"
    MAINTAIN = "maintain"

    @classmethod
    def infer(cls, current_weight: float, target_weight: float) -> "GoalDirection":
        """Derive the direction from the two weights."""
        if target_weight < current_weight:
            return cls.LOSE
        if target_weight > current_weight:
            return cls.GAIN
        return cls.MAINTAIN


@dataclass(frozen=True)
class GoalRequest:
    """A weight-change intent submitted by the user."""

    current_weight: float
    target_weight: float
    direction: GoalDirection
    goal_label: str

    @property
    def weight_difference(self) -> float:
        """Absolute difference between current and target weight in kg."""
        return abs(self.target_weight - self.current_weight)


@dataclass(frozen=True)
class GoalResult:
    """Nutrition plan derived for a goal."""

    daily_calorie_target: int | float
    activity_suggestion: str


@dataclass(frozen=True)
class GoalRecord:
    """Stored goal with its plan."""

    id: UUID
    user_id: UUID
    request: GoalRequest
    result: GoalResult
    created_at: datetime
