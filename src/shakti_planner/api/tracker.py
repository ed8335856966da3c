"""User-scoped goal, meal log and dashboard endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from shakti_planner.api.schemas import (
    DashboardOut,
    GoalListOut,
    GoalOut,
    LogMealBody,
    LoggedMealOut,
    MealHistoryOut,
    MealLogOut,
    PlanGoalBody,
    ProgressOut,
)

if TYPE_CHECKING:
    from shakti_planner.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}", tags=["tracker"])


@router.post("/goals", status_code=status.HTTP_201_CREATED)
async def create_goal(user_id: UUID, body: PlanGoalBody, request: Request) -> GoalOut:
    """Plan and store a new goal. Today's meal log starts over."""
    container: AppContainer = request.app.state.container
    record = await container.tracker_service.set_goal(user_id, body.to_request())
    return GoalOut.from_record(record)


@router.get("/goals")
async def list_goals(user_id: UUID, request: Request) -> GoalListOut:
    """Return the user's goals, latest first."""
    container: AppContainer = request.app.state.container
    goals = container.tracker_service.list_goals(user_id)
    return GoalListOut(goals=[GoalOut.from_record(goal) for goal in goals])


@router.delete("/goals/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(user_id: UUID, goal_id: UUID, request: Request) -> None:
    """Delete a goal."""
    container: AppContainer = request.app.state.container
    if not container.tracker_service.delete_goal(user_id, goal_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found"
        )


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def log_meal(user_id: UUID, body: LogMealBody, request: Request) -> LoggedMealOut:
    """Parse a meal against today's running total and log it."""
    container: AppContainer = request.app.state.container
    entry, progress = await container.tracker_service.log_meal(
        user_id, body.meal_description
    )
    return LoggedMealOut(
        meal=MealLogOut.from_entry(entry),
        progress=ProgressOut.from_snapshot(progress),
    )


@router.get("/meals")
async def meal_history(
    user_id: UUID, start: date, end: date, request: Request
) -> MealHistoryOut:
    """Return logged meals for an inclusive date range."""
    if end < start:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end must not be before start",
        )
    container: AppContainer = request.app.state.container
    meals = container.tracker_service.history(user_id, start, end)
    return MealHistoryOut(meals=[MealLogOut.from_entry(entry) for entry in meals])


@router.get("/dashboard")
async def dashboard(
    user_id: UUID, request: Request, day: date | None = None
) -> DashboardOut:
    """Return the active goal, the day's meals and progress."""
    container: AppContainer = request.app.state.container
    return DashboardOut.from_dashboard(
        container.tracker_service.dashboard(user_id, day)
    )
