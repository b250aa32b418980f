"""Supabase repositories for user profiles and goals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import to_row
from fitness_tracker.domain.models import (
    DEFAULT_AVATAR,
    DEFAULT_UNITS,
    UserGoals,
    UserProfile,
)
from fitness_tracker.services.backup import GoalsRepository, ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile fields on the users table."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if the user exists."""
        response = (
            self.client.table("users")
            .select("id, name, avatar, units")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Overwrite profile fields and return the profile."""
        response = (
            self.client.table("users").update(payload).eq("id", str(user_id)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile")
        return _parse_profile(response.data[0])


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for the one-per-user goals row."""

    client: Client

    def get_goals(self, user_id: UUID) -> UserGoals | None:
        """Return the user's goals, if set."""
        response = (
            self.client.table("user_goals")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goals(response.data[0])

    def upsert_goals(self, user_id: UUID, payload: dict[str, object]) -> UserGoals:
        """Create or update the user's goals and return them."""
        response = (
            self.client.table("user_goals")
            .upsert(to_row(user_id, payload), on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to upsert goals")
        return _parse_goals(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        user_id=UUID(row["id"]),
        name=str(row.get("name", "")),
        avatar=str(row.get("avatar") or DEFAULT_AVATAR),
        units=str(row.get("units") or DEFAULT_UNITS),
    )


def _parse_goals(row: dict[str, object]) -> UserGoals:
    return UserGoals(
        user_id=UUID(row["user_id"]),
        daily_calories=int(row.get("daily_calories", 2200)),
        daily_protein=int(row.get("daily_protein", 150)),
        daily_carbs=int(row.get("daily_carbs", 250)),
        daily_fats=int(row.get("daily_fats", 70)),
        weekly_workouts=int(row.get("weekly_workouts", 4)),
        target_weight=float(row.get("target_weight", 160.0)),
    )
