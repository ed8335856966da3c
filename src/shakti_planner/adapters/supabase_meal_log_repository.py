"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from shakti_planner.adapters.supabase_rows import row_number
from shakti_planner.domain.meals import MealLogEntry, MealRequest, MealResult
from shakti_planner.services.tracker import MealLogRepository

_MEAL_LOG_COLUMNS = (
    "id, user_id, meal_description, food_item, estimated_calories, "
    "completion_suggestion, logged_at"
)


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def insert_meal_log(
        self,
        user_id: UUID,
        request: MealRequest,
        result: MealResult,
        logged_at: datetime,
    ) -> UUID:
        """Create a meal log row and return its id."""
        response = (
            self.client.table("meal_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "meal_description": request.description,
                    "calories_before": request.current_calories,
                    "target_calories": request.target_calories,
                    "food_item": result.normalized_label,
                    "estimated_calories": result.estimated_calories,
                    "completion_suggestion": result.suggestion,
                    "logged_at": logged_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return UUID(response.data[0]["id"])

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogEntry]:
        """Return meal logs within [start, end), oldest first."""
        response = (
            self.client.table("meal_logs")
            .select(_MEAL_LOG_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete_meal_logs(self, user_id: UUID, start: datetime, end: datetime) -> None:
        """Delete meal logs within [start, end)."""
        (
            self.client.table("meal_logs")
            .delete()
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .execute()
        )


def _parse_entry(row: dict[str, object]) -> MealLogEntry:
    return MealLogEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        description=str(row.get("meal_description") or ""),
        result=MealResult(
            normalized_label=str(row.get("food_item") or ""),
            estimated_calories=row_number("meal_logs", row, "estimated_calories"),
            suggestion=str(row.get("completion_suggestion") or ""),
        ),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
    )
