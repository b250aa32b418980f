"""Supabase repository for workouts and workout logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import (
    parse_optional_uuid,
    parse_timestamp,
    to_row,
)
from fitness_tracker.domain.workouts import DEFAULT_WORKOUT_COLOR, Workout, WorkoutLog
from fitness_tracker.services.backup import WorkoutRepository


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workouts and their logs."""

    client: Client

    def list_workouts(self, user_id: UUID) -> list[Workout]:
        """Return all workouts for a user."""
        response = (
            self.client.table("workouts")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at")
            .execute()
        )
        return [_parse_workout(row) for row in response.data or []]

    def create_workout(self, user_id: UUID, payload: dict[str, object]) -> Workout:
        """Create a workout and return it."""
        response = (
            self.client.table("workouts").insert(to_row(user_id, payload)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout")
        return _parse_workout(response.data[0])

    def list_workout_logs(self, user_id: UUID) -> list[WorkoutLog]:
        """Return all workout logs for a user."""
        response = (
            self.client.table("workout_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("completed_at")
            .execute()
        )
        return [_parse_workout_log(row) for row in response.data or []]

    def create_workout_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WorkoutLog:
        """Create a workout log and return it."""
        response = (
            self.client.table("workout_logs").insert(to_row(user_id, payload)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout log")
        return _parse_workout_log(response.data[0])


def _parse_workout(row: dict[str, object]) -> Workout:
    return Workout(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        exercises=list(row.get("exercises") or []),
        scheduled_days=[int(day) for day in row.get("scheduled_days") or []],
        color=str(row.get("color") or DEFAULT_WORKOUT_COLOR),
        created_at=parse_timestamp(row.get("created_at")),
    )


def _parse_workout_log(row: dict[str, object]) -> WorkoutLog:
    return WorkoutLog(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        workout_id=parse_optional_uuid(row.get("workout_id")),
        workout_name=str(row.get("workout_name", "")),
        completed_at=datetime.fromisoformat(str(row["completed_at"])),
        duration=int(row.get("duration") or 0),
        exercise_logs=list(row.get("exercise_logs") or []),
        notes=row.get("notes"),
    )
