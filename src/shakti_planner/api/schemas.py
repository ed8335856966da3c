"""Request and response bodies for the HTTP API."""

from datetime import date, datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shakti_planner.domain.goals import GoalDirection, GoalRecord, GoalRequest
from shakti_planner.domain.meals import MealLogEntry, MealRequest, MealResult
from shakti_planner.domain.progress import ProgressSnapshot, ProgressStatus
from shakti_planner.services.tracker import Dashboard


class CamelModel(BaseModel):
    """Base model using camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class PlanGoalBody(CamelModel):
    """Body of a goal planning request."""

    goal: str
    current_weight: float = Field(gt=0)
    target_weight: float = Field(gt=0)
    direction: GoalDirection | None = None

    def to_request(self) -> GoalRequest:
        """Build the domain request, inferring the direction when omitted."""
        direction = self.direction or GoalDirection.infer(
            self.current_weight, self.target_weight
        )
        return GoalRequest(
            current_weight=self.current_weight,
            target_weight=self.target_weight,
            direction=direction,
            goal_label=self.goal,
        )


class PlanGoalResponse(CamelModel):
    daily_calorie_target: int | float
    burn_suggestion: str


def _strip_description(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("meal description must not be empty")
    return stripped


MealDescription = Annotated[str, AfterValidator(_strip_description)]


class ParseMealBody(CamelModel):
    """Body of a meal parsing request."""

    meal_description: MealDescription
    current_calories: float = Field(ge=0)
    target_calories: float = Field(ge=0)

    def to_request(self) -> MealRequest:
        """Build the domain request."""
        return MealRequest(
            description=self.meal_description,
            current_calories=self.current_calories,
            target_calories=self.target_calories,
        )


class ParseMealResponse(CamelModel):
    food_item: str
    estimated_calories: int | float
    completion_suggestion: str

    @classmethod
    def from_result(cls, result: MealResult) -> "ParseMealResponse":
        return cls(
            food_item=result.normalized_label,
            estimated_calories=result.estimated_calories,
            completion_suggestion=result.suggestion,
        )


class LogMealBody(CamelModel):
    """Body of a tracked meal log request."""

    meal_description: MealDescription


class GoalOut(CamelModel):
    id: UUID
    goal: str
    current_weight: float
    target_weight: float
    direction: GoalDirection
    daily_calorie_target: int | float
    burn_suggestion: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: GoalRecord) -> "GoalOut":
        return cls(
            id=record.id,
            goal=record.request.goal_label,
            current_weight=record.request.current_weight,
            target_weight=record.request.target_weight,
            direction=record.request.direction,
            daily_calorie_target=record.result.daily_calorie_target,
            burn_suggestion=record.result.activity_suggestion,
            created_at=record.created_at,
        )


class GoalListOut(CamelModel):
    goals: list[GoalOut]


class MealLogOut(CamelModel):
    id: UUID
    meal_description: str
    food_item: str
    estimated_calories: int | float
    completion_suggestion: str
    logged_at: datetime

    @classmethod
    def from_entry(cls, entry: MealLogEntry) -> "MealLogOut":
        return cls(
            id=entry.id,
            meal_description=entry.description,
            food_item=entry.result.normalized_label,
            estimated_calories=entry.result.estimated_calories,
            completion_suggestion=entry.result.suggestion,
            logged_at=entry.logged_at,
        )


class MealHistoryOut(CamelModel):
    meals: list[MealLogOut]


class ProgressOut(CamelModel):
    daily_total: int | float
    target: int | float
    progress_ratio: float
    remaining: int | float
    status: ProgressStatus

    @classmethod
    def from_snapshot(cls, snapshot: ProgressSnapshot) -> "ProgressOut":
        return cls(
            daily_total=snapshot.daily_total,
            target=snapshot.target,
            progress_ratio=snapshot.progress_ratio,
            remaining=snapshot.remaining,
            status=snapshot.status,
        )


class LoggedMealOut(CamelModel):
    meal: MealLogOut
    progress: ProgressOut


class DashboardOut(CamelModel):
    day: date
    goal: GoalOut | None
    meals: list[MealLogOut]
    progress: ProgressOut
    latest_suggestion: str | None

    @classmethod
    def from_dashboard(cls, dashboard: Dashboard) -> "DashboardOut":
        return cls(
            day=dashboard.day,
            goal=GoalOut.from_record(dashboard.goal) if dashboard.goal else None,
            meals=[MealLogOut.from_entry(entry) for entry in dashboard.meals],
            progress=ProgressOut.from_snapshot(dashboard.progress),
            latest_suggestion=dashboard.latest_suggestion,
        )
