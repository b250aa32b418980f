"""Domain models for users, goals and auth sessions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

DEFAULT_AVATAR = "earth"
DEFAULT_UNITS = "imperial"


@dataclass(frozen=True)
class UserProfile:
    """Profile fields stored on the user row."""

    user_id: UUID
    name: str
    avatar: str = DEFAULT_AVATAR
    units: str = DEFAULT_UNITS


@dataclass(frozen=True)
class UserGoals:
    """Daily nutrition and weekly training targets for a user."""

    user_id: UUID
    daily_calories: int = 2200
    daily_protein: int = 150
    daily_carbs: int = 250
    daily_fats: int = 70
    weekly_workouts: int = 4
    target_weight: float = 160.0


@dataclass(frozen=True)
class AuthSession:
    """Bearer session issued to a signed-in user."""

    id: UUID
    user_id: UUID
    expires_at: datetime
