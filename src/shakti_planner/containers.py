"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from shakti_planner.adapters.openai_completion_client import OpenAICompletionClient
from shakti_planner.adapters.supabase_goal_repository import SupabaseGoalRepository
from shakti_planner.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from shakti_planner.config import Settings
from shakti_planner.services.goals import GoalPlanningService
from shakti_planner.services.meals import MealParsingService
from shakti_planner.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    goal_planning_service: GoalPlanningService
    meal_parsing_service: MealParsingService
    tracker_service: TrackerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    completion_client = OpenAICompletionClient.create(
        api_key=resolved_settings.completion_api_key,
        base_url=resolved_settings.completion_base_url,
        model=resolved_settings.completion_model,
        timeout_seconds=resolved_settings.completion_timeout_seconds,
    )
    goal_planning_service = GoalPlanningService(completion_client)
    meal_parsing_service = MealParsingService(completion_client)
    tracker_service = TrackerService(
        goal_planning_service=goal_planning_service,
        meal_parsing_service=meal_parsing_service,
        goal_repository=SupabaseGoalRepository(supabase_client),
        meal_log_repository=SupabaseMealLogRepository(supabase_client),
        timezone_name=resolved_settings.timezone,
        reset_meal_log_on_goal_change=resolved_settings.reset_meal_log_on_goal_change,
    )

    async def close_resources() -> None:
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        goal_planning_service=goal_planning_service,
        meal_parsing_service=meal_parsing_service,
        tracker_service=tracker_service,
        close_resources=close_resources,
    )
