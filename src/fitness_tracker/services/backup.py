"""Backup export and import for a user's fitness and nutrition data."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.backup import (
    BACKUP_VERSION,
    BackupDocument,
    BackupFood,
    BackupFoodEntry,
    BackupFoodSnapshot,
    BackupGoals,
    BackupMeal,
    BackupProfile,
    BackupWeightEntry,
    BackupWorkout,
    BackupWorkoutLog,
    ImportCounts,
    parse_backup,
)
from fitness_tracker.domain.foods import Food, FoodEntry, WeightEntry
from fitness_tracker.domain.meals import Meal
from fitness_tracker.domain.models import UserGoals, UserProfile
from fitness_tracker.domain.workouts import DEFAULT_WORKOUT_COLOR, Workout, WorkoutLog

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if the user exists."""

    def update_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Overwrite profile fields and return the profile."""


class GoalsRepository(Protocol):
    """Persistence interface for user goals."""

    def get_goals(self, user_id: UUID) -> UserGoals | None:
        """Return the user's goals, if set."""

    def upsert_goals(self, user_id: UUID, payload: dict[str, object]) -> UserGoals:
        """Create or update the user's goals and return them."""


class WorkoutRepository(Protocol):
    """Persistence interface for workouts and workout logs."""

    def list_workouts(self, user_id: UUID) -> list[Workout]:
        """Return all workouts for a user."""

    def create_workout(self, user_id: UUID, payload: dict[str, object]) -> Workout:
        """Create a workout and return it."""

    def list_workout_logs(self, user_id: UUID) -> list[WorkoutLog]:
        """Return all workout logs for a user."""

    def create_workout_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WorkoutLog:
        """Create a workout log and return it."""


class FoodRepository(Protocol):
    """Persistence interface for foods and food entries."""

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return all foods for a user."""

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> Food:
        """Create a food and return it."""

    def list_food_entries(self, user_id: UUID) -> list[FoodEntry]:
        """Return all food entries for a user."""

    def create_food_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Create a food entry and return it."""


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def list_weight_entries(self, user_id: UUID) -> list[WeightEntry]:
        """Return all weight entries for a user."""

    def create_weight_entry(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightEntry:
        """Create a weight entry and return it."""


class MealRepository(Protocol):
    """Persistence interface for meal-prep recipes."""

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return all meals for a user."""

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal and return it."""


@dataclass
class BackupService:
    """Builds snapshots of a user's data and merges snapshots back in.

    Imports are additive. Workouts, foods and meals are matched against live
    records by natural key and skipped when already present; workout logs and
    weight entries are history and always inserted. Export ids are only used
    to resolve references inside one snapshot and never become live ids.
    """

    profile_repository: ProfileRepository
    goals_repository: GoalsRepository
    workout_repository: WorkoutRepository
    food_repository: FoodRepository
    weight_repository: WeightRepository
    meal_repository: MealRepository
    default_workout_color: str = DEFAULT_WORKOUT_COLOR

    def export_backup(self, user_id: UUID) -> BackupDocument:
        """Return a complete snapshot of the user's data."""
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            raise LookupError(f"User not found: {user_id}")
        goals = self.goals_repository.get_goals(user_id)
        workouts = self.workout_repository.list_workouts(user_id)
        workout_logs = self.workout_repository.list_workout_logs(user_id)
        foods = self.food_repository.list_foods(user_id)
        food_entries = self.food_repository.list_food_entries(user_id)
        weight_entries = self.weight_repository.list_weight_entries(user_id)
        meals = self.meal_repository.list_meals(user_id)

        foods_by_id = {food.id: food for food in foods}
        return BackupDocument(
            version=BACKUP_VERSION,
            exported_at=datetime.now(tz=UTC),
            profile=BackupProfile(
                name=profile.name, avatar=profile.avatar, units=profile.units
            ),
            goals=_export_goals(goals) if goals else None,
            workouts=[_export_workout(workout) for workout in workouts],
            workout_logs=[_export_workout_log(log) for log in workout_logs],
            foods=[_export_food(food) for food in foods],
            food_entries=[
                _export_food_entry(entry, foods_by_id.get(entry.food_id))
                for entry in food_entries
            ],
            weight_entries=[
                BackupWeightEntry(
                    weight=entry.weight, date=entry.date, created_at=entry.created_at
                )
                for entry in weight_entries
            ],
            meals=[_export_meal(meal) for meal in meals],
        )

    def import_backup(self, user_id: UUID, payload: object) -> ImportCounts:
        """Merge a snapshot into the user's live data.

        Raises ``InvalidBackupError`` before any write when the payload is not
        a snapshot. Repository errors propagate as-is and leave earlier writes
        in place.
        """
        backup = parse_backup(payload)
        _logger.info(
            "Backup import started: user_id=%s version=%s", user_id, backup.version
        )
        counts = ImportCounts()

        if backup.profile:
            self.profile_repository.update_profile(user_id, backup.profile.model_dump())
        if backup.goals:
            self.goals_repository.upsert_goals(
                user_id, backup.goals.model_dump(exclude_none=True)
            )

        # Snapshot of live state before this import's inserts; de-duplication
        # for foods and workouts compares against this only.
        existing_foods = self.food_repository.list_foods(user_id)
        existing_workouts = self.workout_repository.list_workouts(user_id)

        food_ids = self._import_foods(user_id, backup.foods, existing_foods, counts)
        workout_ids = self._import_workouts(
            user_id, backup.workouts, existing_workouts, counts
        )
        self._import_workout_logs(user_id, backup.workout_logs, workout_ids, counts)
        self._import_food_entries(
            user_id, backup.food_entries, food_ids, existing_foods, counts
        )
        self._import_weight_entries(user_id, backup.weight_entries, counts)
        self._import_meals(user_id, backup.meals, counts)

        _logger.info(
            "Backup import finished: user_id=%s imported=%s",
            user_id,
            counts.model_dump(by_alias=True),
        )
        return counts

    def _import_foods(
        self,
        user_id: UUID,
        foods: list[BackupFood],
        existing_foods: list[Food],
        counts: ImportCounts,
    ) -> dict[str, UUID]:
        food_ids: dict[str, UUID] = {}
        for food in foods:
            match = next(
                (
                    existing
                    for existing in existing_foods
                    if existing.name == food.name
                    and existing.serving_size == food.serving_size
                    and existing.calories == food.calories
                ),
                None,
            )
            if match is None:
                match = self.food_repository.create_food(
                    user_id,
                    {
                        "name": food.name,
                        "serving_size": food.serving_size,
                        "calories": food.calories,
                        "protein": food.protein,
                        "carbs": food.carbs,
                        "fats": food.fats,
                        "fiber": food.fiber or 0.0,
                        "is_saved": True if food.is_saved is None else food.is_saved,
                    },
                )
                counts.foods += 1
            if food.export_id:
                food_ids[food.export_id] = match.id
        return food_ids

    def _import_workouts(
        self,
        user_id: UUID,
        workouts: list[BackupWorkout],
        existing_workouts: list[Workout],
        counts: ImportCounts,
    ) -> dict[str, UUID]:
        workout_ids: dict[str, UUID] = {}
        for workout in workouts:
            match = next(
                (w for w in existing_workouts if w.name == workout.name), None
            )
            if match is None:
                match = self.workout_repository.create_workout(
                    user_id,
                    {
                        "name": workout.name,
                        "exercises": workout.exercises,
                        "scheduled_days": workout.scheduled_days,
                        "color": workout.color or self.default_workout_color,
                    },
                )
                counts.workouts += 1
            if workout.export_id:
                workout_ids[workout.export_id] = match.id
        return workout_ids

    def _import_workout_logs(
        self,
        user_id: UUID,
        logs: list[BackupWorkoutLog],
        workout_ids: dict[str, UUID],
        counts: ImportCounts,
    ) -> None:
        for log in logs:
            workout_id = None
            if log.workout_export_id:
                workout_id = workout_ids.get(log.workout_export_id)
            self.workout_repository.create_workout_log(
                user_id,
                {
                    "workout_id": workout_id,
                    "workout_name": log.workout_name,
                    "completed_at": log.completed_at,
                    "duration": log.duration or 0,
                    "exercise_logs": log.exercise_logs,
                    "notes": log.notes,
                },
            )
            counts.workout_logs += 1

    def _import_food_entries(
        self,
        user_id: UUID,
        entries: list[BackupFoodEntry],
        food_ids: dict[str, UUID],
        existing_foods: list[Food],
        counts: ImportCounts,
    ) -> None:
        for entry in entries:
            food_id = None
            if entry.food_export_id:
                food_id = food_ids.get(entry.food_export_id)
            if food_id is None and entry.food_snapshot:
                food_id = self._resolve_snapshot_food(
                    user_id, entry.food_snapshot, existing_foods
                )
            if food_id is None:
                _logger.debug(
                    "Skipping food entry with unresolved food: user_id=%s date=%s",
                    user_id,
                    entry.date,
                )
                continue
            self.food_repository.create_food_entry(
                user_id,
                {
                    "food_id": food_id,
                    "meal_type": entry.meal_type,
                    "servings": entry.servings or 1,
                    "date": entry.date,
                },
            )
            counts.food_entries += 1

    def _resolve_snapshot_food(
        self,
        user_id: UUID,
        snapshot: BackupFoodSnapshot,
        existing_foods: list[Food],
    ) -> UUID:
        """Match a food snapshot by name and serving size, else create it unsaved."""
        for food in existing_foods:
            if (
                food.name == snapshot.name
                and food.serving_size == snapshot.serving_size
            ):
                return food.id
        created = self.food_repository.create_food(
            user_id,
            {
                "name": snapshot.name,
                "serving_size": snapshot.serving_size,
                "calories": snapshot.calories,
                "protein": snapshot.protein,
                "carbs": snapshot.carbs,
                "fats": snapshot.fats,
                "fiber": snapshot.fiber or 0.0,
                "is_saved": False,
            },
        )
        return created.id

    def _import_weight_entries(
        self, user_id: UUID, entries: list[BackupWeightEntry], counts: ImportCounts
    ) -> None:
        for entry in entries:
            self.weight_repository.create_weight_entry(
                user_id, {"weight": entry.weight, "date": entry.date}
            )
            counts.weight_entries += 1

    def _import_meals(
        self, user_id: UUID, meals: list[BackupMeal], counts: ImportCounts
    ) -> None:
        for meal in meals:
            # Re-read per meal so a name inserted earlier in this import matches.
            live_meals = self.meal_repository.list_meals(user_id)
            if any(existing.name == meal.name for existing in live_meals):
                continue
            self.meal_repository.create_meal(
                user_id,
                {
                    "name": meal.name,
                    "ingredients": meal.ingredients,
                    "total_servings": meal.total_servings or 1,
                },
            )
            counts.meals += 1


def _export_goals(goals: UserGoals) -> BackupGoals:
    return BackupGoals(
        daily_calories=goals.daily_calories,
        daily_protein=goals.daily_protein,
        daily_carbs=goals.daily_carbs,
        daily_fats=goals.daily_fats,
        weekly_workouts=goals.weekly_workouts,
        target_weight=goals.target_weight,
    )


def _export_workout(workout: Workout) -> BackupWorkout:
    return BackupWorkout(
        export_id=str(workout.id),
        name=workout.name,
        exercises=workout.exercises,
        scheduled_days=workout.scheduled_days,
        color=workout.color,
        created_at=workout.created_at,
    )


def _export_workout_log(log: WorkoutLog) -> BackupWorkoutLog:
    return BackupWorkoutLog(
        workout_export_id=str(log.workout_id) if log.workout_id else None,
        workout_name=log.workout_name,
        completed_at=log.completed_at,
        duration=log.duration,
        exercise_logs=log.exercise_logs,
        notes=log.notes,
    )


def _export_food(food: Food) -> BackupFood:
    return BackupFood(
        export_id=str(food.id),
        name=food.name,
        serving_size=food.serving_size,
        calories=food.calories,
        protein=food.protein,
        carbs=food.carbs,
        fats=food.fats,
        fiber=food.fiber,
        is_saved=food.is_saved,
        created_at=food.created_at,
    )


def _export_food_entry(entry: FoodEntry, food: Food | None) -> BackupFoodEntry:
    """Export an entry with a nutrition snapshot of its food, when it still exists."""
    snapshot = None
    if food is not None:
        snapshot = BackupFoodSnapshot(
            name=food.name,
            serving_size=food.serving_size,
            calories=food.calories,
            protein=food.protein,
            carbs=food.carbs,
            fats=food.fats,
            fiber=food.fiber,
        )
    return BackupFoodEntry(
        food_export_id=str(entry.food_id),
        meal_type=entry.meal_type,
        servings=entry.servings,
        date=entry.date,
        food_snapshot=snapshot,
    )


def _export_meal(meal: Meal) -> BackupMeal:
    return BackupMeal(
        export_id=str(meal.id),
        name=meal.name,
        ingredients=meal.ingredients,
        total_servings=meal.total_servings,
        created_at=meal.created_at,
    )
