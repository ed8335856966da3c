"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from shakti_planner.config import Settings
from shakti_planner.containers import AppContainer
from shakti_planner.domain.goals import GoalRecord, GoalRequest, GoalResult
from shakti_planner.domain.meals import MealLogEntry, MealRequest, MealResult
from shakti_planner.services.completions import (
    CompletionClient,
    RawCompletion,
    ToolSchema,
)
from shakti_planner.services.goals import GoalPlanningService
from shakti_planner.services.meals import MealParsingService
from shakti_planner.services.prompts import PromptPair
from shakti_planner.services.tracker import (
    GoalRepository,
    MealLogRepository,
    TrackerService,
)

SUPABASE_TEST_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJlLXBsYWNlaG9sZGVy"
)


def tool_completion(name: str, arguments: dict[str, object] | str) -> RawCompletion:
    """Build a chat completion body carrying one tool call."""
    raw_arguments = arguments if isinstance(arguments, str) else json.dumps(arguments)
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "google/gemini-2.5-flash",
        "choices": [
            {
                "index": 0,
                "finish_reason": "tool_calls",
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call-1",
                            "type": "function",
                            "function": {"name": name, "arguments": raw_arguments},
                        }
                    ],
                },
            }
        ],
    }


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client answering with canned tool calls."""

    arguments: dict[str, dict[str, object] | str] = field(
        default_factory=lambda: {
            "plan_nutrition": {
                "dailyCalorieTarget": 1700,
                "burnSuggestion": "Walk 30 minutes every morning and try yoga.",
            },
            "parse_meal": {
                "foodItem": "2 Rotis with Dal",
                "estimatedCalories": 350,
                "completionSuggestion": "Add a bowl of curd to round out lunch",
            },
        }
    )
    error: Exception | None = None
    calls: list[tuple[PromptPair, ToolSchema]] = field(default_factory=list)

    async def complete(self, prompt: PromptPair, tool: ToolSchema) -> RawCompletion:
        self.calls.append((prompt, tool))
        if self.error is not None:
            raise self.error
        return tool_completion(tool.name, self.arguments[tool.name])


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal repository for tests."""

    goals: dict[UUID, GoalRecord] = field(default_factory=dict)

    def insert_goal(
        self,
        user_id: UUID,
        request: GoalRequest,
        result: GoalResult,
        created_at: datetime,
    ) -> UUID:
        goal_id = uuid4()
        self.goals[goal_id] = GoalRecord(
            id=goal_id,
            user_id=user_id,
            request=request,
            result=result,
            created_at=created_at,
        )
        return goal_id

    def get_goal(self, goal_id: UUID) -> GoalRecord | None:
        return self.goals.get(goal_id)

    def delete_goal(self, goal_id: UUID) -> None:
        self.goals.pop(goal_id, None)

    def list_goals(self, user_id: UUID) -> list[GoalRecord]:
        owned = [goal for goal in self.goals.values() if goal.user_id == user_id]
        return sorted(owned, key=lambda goal: goal.created_at, reverse=True)


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """In-memory meal log repository for tests."""

    entries: list[MealLogEntry] = field(default_factory=list)
    requests: list[MealRequest] = field(default_factory=list)

    def insert_meal_log(
        self,
        user_id: UUID,
        request: MealRequest,
        result: MealResult,
        logged_at: datetime,
    ) -> UUID:
        entry_id = uuid4()
        self.requests.append(request)
        self.entries.append(
            MealLogEntry(
                id=entry_id,
                user_id=user_id,
                description=request.description,
                result=result,
                logged_at=logged_at,
            )
        )
        return entry_id

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogEntry]:
        matches = [
            entry
            for entry in self.entries
            if entry.user_id == user_id and start <= entry.logged_at < end
        ]
        return sorted(matches, key=lambda entry: entry.logged_at)

    def delete_meal_logs(self, user_id: UUID, start: datetime, end: datetime) -> None:
        self.entries = [
            entry
            for entry in self.entries
            if not (entry.user_id == user_id and start <= entry.logged_at < end)
        ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=SUPABASE_TEST_KEY,
        completion_api_key="completion-key",
    )


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def meal_log_repository() -> InMemoryMealLogRepository:
    return InMemoryMealLogRepository()


@pytest.fixture
def tracker_service(
    completion_client: FakeCompletionClient,
    goal_repository: InMemoryGoalRepository,
    meal_log_repository: InMemoryMealLogRepository,
) -> TrackerService:
    return TrackerService(
        goal_planning_service=GoalPlanningService(completion_client),
        meal_parsing_service=MealParsingService(completion_client),
        goal_repository=goal_repository,
        meal_log_repository=meal_log_repository,
        timezone_name="Asia/Kolkata",
    )


@pytest.fixture
def container(settings: Settings, tracker_service: TrackerService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        goal_planning_service=tracker_service.goal_planning_service,
        meal_parsing_service=tracker_service.meal_parsing_service,
        tracker_service=tracker_service,
        close_resources=close_resources,
    )
