"""Meal listing endpoint."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from fitness_tracker.api.auth import require_user

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer
    from fitness_tracker.domain.meals import MealSummary

router = APIRouter(prefix="/api/meals", tags=["meals"])
logger = logging.getLogger(__name__)


@router.get("")
async def list_meals(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's meals with total and per-serving nutrition."""
    container: AppContainer = request.app.state.container
    try:
        summaries = container.meal_service.list_meal_summaries(user_id)
    except Exception as exc:
        logger.exception("Listing meals failed", extra={"user_id": user_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get meals",
        ) from exc
    return {"meals": [_meal_payload(summary) for summary in summaries]}


def _meal_payload(summary: MealSummary) -> dict[str, object]:
    meal = summary.meal
    return {
        "id": str(meal.id),
        "name": meal.name,
        "ingredients": meal.ingredients,
        "totalServings": meal.total_servings,
        "createdAt": meal.created_at.isoformat() if meal.created_at else None,
        "nutrition": asdict(summary.totals),
        "nutritionPerServing": asdict(summary.per_serving),
    }
