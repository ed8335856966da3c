"""Models for structured tool call payloads returned by the LLM."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shakti_planner.domain.goals import GoalResult
from shakti_planner.domain.meals import MealResult


def _require_finite(value: int | float, field_name: str) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{field_name} must be a finite number")


class GoalPlanPayload(BaseModel):
    """Arguments of the plan_nutrition tool call."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    daily_calorie_target: int | float = Field(alias="dailyCalorieTarget")
    burn_suggestion: str = Field(alias="burnSuggestion")

    @field_validator("daily_calorie_target")
    @classmethod
    def _positive_target(cls, value: int | float) -> int | float:
        _require_finite(value, "dailyCalorieTarget")
        if value <= 0:
            raise ValueError("dailyCalorieTarget must be positive")
        return value

    def to_result(self) -> GoalResult:
        """Convert the payload into a goal result."""
        return GoalResult(
            daily_calorie_target=self.daily_calorie_target,
            activity_suggestion=self.burn_suggestion,
        )


class MealParsePayload(BaseModel):
    """Arguments of the parse_meal tool call."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    food_item: str = Field(alias="foodItem")
    estimated_calories: int | float = Field(alias="estimatedCalories")
    completion_suggestion: str = Field(alias="completionSuggestion")

    @field_validator("food_item")
    @classmethod
    def _non_blank_label(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("foodItem must not be blank")
        return value

    @field_validator("estimated_calories")
    @classmethod
    def _non_negative_calories(cls, value: int | float) -> int | float:
        _require_finite(value, "estimatedCalories")
        if value < 0:
            raise ValueError("estimatedCalories must not be negative")
        return value

    def to_result(self) -> MealResult:
        """Convert the payload into a meal result."""
        return MealResult(
            normalized_label=self.food_item,
            estimated_calories=self.estimated_calories,
            suggestion=self.completion_suggestion,
        )
