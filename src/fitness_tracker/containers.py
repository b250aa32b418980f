"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_auth_session_repository import (
    SupabaseAuthSessionRepository,
)
from fitness_tracker.adapters.supabase_food_repository import (
    SupabaseFoodRepository,
    SupabaseWeightRepository,
)
from fitness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseGoalsRepository,
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.auth import AuthService
from fitness_tracker.services.backup import BackupService
from fitness_tracker.services.meals import MealService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    backup_service: BackupService
    meal_service: MealService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_service = AuthService(SupabaseAuthSessionRepository(supabase_client))
    meal_repository = SupabaseMealRepository(supabase_client)
    backup_service = BackupService(
        profile_repository=SupabaseProfileRepository(supabase_client),
        goals_repository=SupabaseGoalsRepository(supabase_client),
        workout_repository=SupabaseWorkoutRepository(supabase_client),
        food_repository=SupabaseFoodRepository(supabase_client),
        weight_repository=SupabaseWeightRepository(supabase_client),
        meal_repository=meal_repository,
        default_workout_color=resolved_settings.default_workout_color,
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        backup_service=backup_service,
        meal_service=MealService(meal_repository),
    )
