"""Supabase repository for goals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from shakti_planner.adapters.supabase_rows import row_number
from shakti_planner.domain.goals import (
    GoalDirection,
    GoalRecord,
    GoalRequest,
    GoalResult,
)
from shakti_planner.services.tracker import GoalRepository

_GOAL_COLUMNS = (
    "id, user_id, goal, current_weight, target_weight, direction, "
    "daily_calorie_target, burn_suggestion, created_at"
)


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals."""

    client: Client

    def insert_goal(
        self,
        user_id: UUID,
        request: GoalRequest,
        result: GoalResult,
        created_at: datetime,
    ) -> UUID:
        """Create a goal row and return its id."""
        response = (
            self.client.table("goals")
            .insert(
                {
                    "user_id": str(user_id),
                    "goal": request.goal_label,
                    "current_weight": request.current_weight,
                    "target_weight": request.target_weight,
                    "direction": request.direction.value,
                    "daily_calorie_target": result.daily_calorie_target,
                    "burn_suggestion": result.activity_suggestion,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create goal")
        return UUID(response.data[0]["id"])

    def get_goal(self, goal_id: UUID) -> GoalRecord | None:
        """Return a goal by id."""
        response = (
            self.client.table("goals")
            .select(_GOAL_COLUMNS)
            .eq("id", str(goal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def delete_goal(self, goal_id: UUID) -> None:
        """Delete a goal row."""
        self.client.table("goals").delete().eq("id", str(goal_id)).execute()

    def list_goals(self, user_id: UUID) -> list[GoalRecord]:
        """Return the user's goals, latest first."""
        response = (
            self.client.table("goals")
            .select(_GOAL_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_goal(row) for row in response.data or []]


def _parse_goal(row: dict[str, object]) -> GoalRecord:
    return GoalRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        request=GoalRequest(
            current_weight=row_number("goals", row, "current_weight"),
            target_weight=row_number("goals", row, "target_weight"),
            direction=GoalDirection(str(row["direction"])),
            goal_label=str(row.get("goal") or ""),
        ),
        result=GoalResult(
            daily_calorie_target=row_number("goals", row, "daily_calorie_target"),
            activity_suggestion=str(row.get("burn_suggestion") or ""),
        ),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
