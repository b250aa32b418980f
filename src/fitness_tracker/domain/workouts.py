"""Domain models for workout templates and completed sessions."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

DEFAULT_WORKOUT_COLOR = "#7B68EE"


@dataclass(frozen=True)
class Workout:
    """A workout template with its exercises and weekly schedule."""

    id: UUID
    user_id: UUID
    name: str
    exercises: list[dict[str, object]] = field(default_factory=list)
    scheduled_days: list[int] = field(default_factory=list)
    color: str = DEFAULT_WORKOUT_COLOR
    created_at: datetime | None = None


@dataclass(frozen=True)
class WorkoutLog:
    """A completed workout.

    ``workout_name`` is kept alongside ``workout_id`` so the log stays readable
    after the workout itself is deleted.
    """

    id: UUID
    user_id: UUID
    workout_id: UUID | None
    workout_name: str
    completed_at: datetime
    duration: int = 0
    exercise_logs: list[dict[str, object]] = field(default_factory=list)
    notes: str | None = None
