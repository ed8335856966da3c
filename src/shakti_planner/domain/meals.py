"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MealRequest:
    """One free-text meal entry."""

    description: str
    current_calories: int | float
    target_calories: int | float


@dataclass(frozen=True)
class MealResult:
    """Facts extracted from a meal description."""

    normalized_label: str
    estimated_calories: int | float
    suggestion: str


@dataclass(frozen=True)
class MealLogEntry:
    """Stored meal log row."""

    id: UUID
    user_id: UUID
    description: str
    result: MealResult
    logged_at: datetime
