"""Supabase repository for meal-prep recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.adapters.supabase_rows import parse_timestamp, to_row
from fitness_tracker.domain.meals import Meal
from fitness_tracker.services.backup import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return all meals for a user."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at")
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal and return it."""
        response = self.client.table("meals").insert(to_row(user_id, payload)).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        ingredients=list(row.get("ingredients") or []),
        total_servings=int(row.get("total_servings") or 1),
        created_at=parse_timestamp(row.get("created_at")),
    )
