"""Supabase repositories for foods, food entries and weight entries."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import parse_timestamp, to_row
from fitness_tracker.domain.foods import Food, FoodEntry, WeightEntry
from fitness_tracker.services.backup import FoodRepository, WeightRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for foods and the daily food log."""

    client: Client

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return all foods for a user."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at")
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> Food:
        """Create a food and return it."""
        response = self.client.table("foods").insert(to_row(user_id, payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_food(response.data[0])

    def list_food_entries(self, user_id: UUID) -> list[FoodEntry]:
        """Return all food entries for a user."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date")
            .execute()
        )
        return [_parse_food_entry(row) for row in response.data or []]

    def create_food_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Create a food entry and return it."""
        response = (
            self.client.table("food_entries").insert(to_row(user_id, payload)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_food_entry(response.data[0])


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight entries."""

    client: Client

    def list_weight_entries(self, user_id: UUID) -> list[WeightEntry]:
        """Return all weight entries for a user."""
        response = (
            self.client.table("weight_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date")
            .execute()
        )
        return [_parse_weight_entry(row) for row in response.data or []]

    def create_weight_entry(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightEntry:
        """Create a weight entry and return it."""
        response = (
            self.client.table("weight_entries")
            .insert(to_row(user_id, payload))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight entry")
        return _parse_weight_entry(response.data[0])


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    return Food(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        serving_size=str(row.get("serving_size", "")),
        calories=int(row.get("calories", 0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fats=float(row.get("fats", 0.0)),
        fiber=float(row.get("fiber") or 0.0),
        is_saved=bool(row.get("is_saved", True)),
        created_at=parse_timestamp(row.get("created_at")),
    )


def _parse_food_entry(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        food_id=UUID(row["food_id"]),
        meal_type=row["meal_type"],
        servings=float(row.get("servings") or 1.0),
        date=str(row.get("date", "")),
        created_at=parse_timestamp(row.get("created_at")),
    )


def _parse_weight_entry(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        weight=float(row.get("weight", 0.0)),
        date=str(row.get("date", "")),
        created_at=parse_timestamp(row.get("created_at")),
    )
