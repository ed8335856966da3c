"""Domain models for daily progress."""

from dataclasses import dataclass
from enum import StrEnum


class ProgressStatus(StrEnum):
    """Classification of consumption against the daily target."""

    ON_TRACK = "on-track"
    OVER = "over"
    UNDER = "under"


@dataclass(frozen=True)
class ProgressSnapshot:
    """Display state derived from the active goal and meal log."""

    daily_total: int | float
    target: int | float
    progress_ratio: float
    remaining: int | float
    status: ProgressStatus
