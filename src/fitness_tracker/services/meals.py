"""Meal-prep recipes with their nutrition."""

from dataclasses import dataclass
from uuid import UUID

from fitness_tracker.domain.meals import MealSummary
from fitness_tracker.services.backup import MealRepository


@dataclass
class MealService:
    """Lists a user's meals with batch and per-serving nutrition."""

    repository: MealRepository

    def list_meal_summaries(self, user_id: UUID) -> list[MealSummary]:
        return [
            MealSummary(
                meal=meal,
                totals=meal.nutrition_totals(),
                per_serving=meal.nutrition_per_serving(),
            )
            for meal in self.repository.list_meals(user_id)
        ]
