"""Domain models for meal-prep recipes."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

_NUTRIENTS = ("calories", "protein", "carbs", "fats", "fiber")


@dataclass(frozen=True)
class MealNutrition:
    """Nutrition totals for a whole batch or a single serving."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class Meal:
    """A recipe made of ingredients and split into servings."""

    id: UUID
    user_id: UUID
    name: str
    ingredients: list[dict[str, object]] = field(default_factory=list)
    total_servings: int = 1
    created_at: datetime | None = None

    def nutrition_totals(self) -> MealNutrition:
        """Return nutrition for the whole batch."""
        return meal_totals(self.ingredients)

    def nutrition_per_serving(self) -> MealNutrition:
        """Return nutrition for one serving of the batch."""
        return per_serving(self.nutrition_totals(), self.total_servings)


def meal_totals(ingredients: Iterable[Mapping[str, object]]) -> MealNutrition:
    """Sum ingredient nutrition; missing values count as zero."""
    totals = dict.fromkeys(_NUTRIENTS, 0.0)
    for ingredient in ingredients:
        for nutrient in _NUTRIENTS:
            totals[nutrient] += float(ingredient.get(nutrient) or 0.0)
    return MealNutrition(**totals)


def per_serving(totals: MealNutrition, servings: float) -> MealNutrition:
    """Divide batch totals by the serving count.

    A non-positive serving count leaves the totals unchanged.
    """
    if servings <= 0:
        return totals
    return MealNutrition(
        calories=totals.calories / servings,
        protein=totals.protein / servings,
        carbs=totals.carbs / servings,
        fats=totals.fats / servings,
        fiber=totals.fiber / servings,
    )


@dataclass(frozen=True)
class MealSummary:
    """A meal together with its computed nutrition."""

    meal: Meal
    totals: MealNutrition
    per_serving: MealNutrition
