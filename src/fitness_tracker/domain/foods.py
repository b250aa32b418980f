"""Domain models for foods, the daily food log and body weight."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


@dataclass(frozen=True)
class Food:
    """A food with per-serving nutrition.

    Saved foods make up the personal food database; unsaved ones exist only
    because a food entry points at them.
    """

    id: UUID
    user_id: UUID
    name: str
    serving_size: str
    calories: int
    protein: float
    carbs: float
    fats: float
    fiber: float = 0.0
    is_saved: bool = True
    created_at: datetime | None = None


@dataclass(frozen=True)
class FoodEntry:
    """Servings of a food eaten in one meal slot on a calendar day."""

    id: UUID
    user_id: UUID
    food_id: UUID
    meal_type: MealType
    servings: float
    date: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class WeightEntry:
    """A body weight measurement."""

    id: UUID
    user_id: UUID
    weight: float
    date: str
    created_at: datetime | None = None
