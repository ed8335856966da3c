"""Goal and meal log tracking on top of the extraction services."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from shakti_planner.domain.goals import GoalRecord, GoalRequest, GoalResult
from shakti_planner.domain.meals import MealLogEntry, MealRequest, MealResult
from shakti_planner.domain.progress import ProgressSnapshot
from shakti_planner.services.goals import GoalPlanningService
from shakti_planner.services.meals import MealParsingService
from shakti_planner.services.progress import calculate_progress

logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for goals."""

    def insert_goal(
        self,
        user_id: UUID,
        request: GoalRequest,
        result: GoalResult,
        created_at: datetime,
    ) -> UUID:
        """Store a goal and return its id."""

    def get_goal(self, goal_id: UUID) -> GoalRecord | None:
        """Return a goal by id."""

    def delete_goal(self, goal_id: UUID) -> None:
        """Delete a goal."""

    def list_goals(self, user_id: UUID) -> list[GoalRecord]:
        """Return the user's goals, latest first."""


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def insert_meal_log(
        self,
        user_id: UUID,
        request: MealRequest,
        result: MealResult,
        logged_at: datetime,
    ) -> UUID:
        """Store a meal log entry and return its id."""

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogEntry]:
        """Return meal logs in [start, end), oldest first."""

    def delete_meal_logs(self, user_id: UUID, start: datetime, end: datetime) -> None:
        """Delete meal logs in [start, end)."""


@dataclass(frozen=True)
class Dashboard:
    """Everything needed to render one day of progress."""

    day: date
    goal: GoalRecord | None
    meals: list[MealLogEntry]
    progress: ProgressSnapshot
    latest_suggestion: str | None


@dataclass
class TrackerService:
    """Keeps goals and the daily meal log, recomputing progress on demand."""

    goal_planning_service: GoalPlanningService
    meal_parsing_service: MealParsingService
    goal_repository: GoalRepository
    meal_log_repository: MealLogRepository
    timezone_name: str = "Asia/Kolkata"
    reset_meal_log_on_goal_change: bool = True

    async def set_goal(self, user_id: UUID, request: GoalRequest) -> GoalRecord:
        """Plan a goal, store it and start a fresh meal log for today."""
        result = await self.goal_planning_service.plan(request)
        created_at = datetime.now(tz=UTC)
        if self.reset_meal_log_on_goal_change:
            self._clear_day(user_id, self.today())
        goal_id = self.goal_repository.insert_goal(
            user_id, request, result, created_at
        )
        return GoalRecord(
            id=goal_id,
            user_id=user_id,
            request=request,
            result=result,
            created_at=created_at,
        )

    def delete_goal(self, user_id: UUID, goal_id: UUID) -> bool:
        """Delete a goal owned by the user. Returns false when not found.

        Today's meal log is cleared only when the active goal is deleted.
        """
        goal = self.goal_repository.get_goal(goal_id)
        if goal is None or goal.user_id != user_id:
            return False
        active = self.active_goal(user_id)
        was_active = active is not None and active.id == goal.id
        self.goal_repository.delete_goal(goal_id)
        if was_active and self.reset_meal_log_on_goal_change:
            self._clear_day(user_id, self.today())
        return True

    def list_goals(self, user_id: UUID) -> list[GoalRecord]:
        """Return goals latest first."""
        return self.goal_repository.list_goals(user_id)

    def active_goal(self, user_id: UUID) -> GoalRecord | None:
        """Return the most recent goal, if any."""
        goals = self.goal_repository.list_goals(user_id)
        return goals[0] if goals else None

    async def log_meal(
        self, user_id: UUID, description: str
    ) -> tuple[MealLogEntry, ProgressSnapshot]:
        """Parse a meal against today's running total and append it to the log."""
        goal = self.active_goal(user_id)
        goal_result = goal.result if goal else None
        todays_meals = self.meals_for_day(user_id, self.today())
        current = sum(entry.result.estimated_calories for entry in todays_meals)
        target = goal_result.daily_calorie_target if goal_result else 0
        request = MealRequest(
            description=description,
            current_calories=current,
            target_calories=target,
        )
        result = await self.meal_parsing_service.parse(request)
        logged_at = datetime.now(tz=UTC)
        entry_id = self.meal_log_repository.insert_meal_log(
            user_id, request, result, logged_at
        )
        entry = MealLogEntry(
            id=entry_id,
            user_id=user_id,
            description=description,
            result=result,
            logged_at=logged_at,
        )
        meal_log = [meal.result for meal in todays_meals] + [result]
        return entry, calculate_progress(goal_result, meal_log)

    def dashboard(self, user_id: UUID, day: date | None = None) -> Dashboard:
        """Return the goal, meal log and progress for a day."""
        resolved_day = day or self.today()
        goal = self.active_goal(user_id)
        meals = self.meals_for_day(user_id, resolved_day)
        progress = calculate_progress(
            goal.result if goal else None, [meal.result for meal in meals]
        )
        return Dashboard(
            day=resolved_day,
            goal=goal,
            meals=meals,
            progress=progress,
            latest_suggestion=meals[-1].result.suggestion if meals else None,
        )

    def meals_for_day(self, user_id: UUID, day: date) -> list[MealLogEntry]:
        """Return the meal log for one local day."""
        start, end = self._bounds(day, day)
        return self.meal_log_repository.list_meal_logs(user_id, start, end)

    def history(self, user_id: UUID, start: date, end: date) -> list[MealLogEntry]:
        """Return meal logs for an inclusive range of local days."""
        range_start, range_end = self._bounds(start, end)
        return self.meal_log_repository.list_meal_logs(user_id, range_start, range_end)

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def _clear_day(self, user_id: UUID, day: date) -> None:
        start, end = self._bounds(day, day)
        self.meal_log_repository.delete_meal_logs(user_id, start, end)
        logger.info(
            "Cleared meal log after goal change",
            extra={"user_id": str(user_id), "day": day.isoformat()},
        )

    def _bounds(self, first: date, last: date) -> tuple[datetime, datetime]:
        tz = ZoneInfo(self.timezone_name)
        start = datetime(first.year, first.month, first.day, tzinfo=tz)
        end = datetime(last.year, last.month, last.day, tzinfo=tz) + timedelta(days=1)
        return start.astimezone(UTC), end.astimezone(UTC)
