"""Models for the backup snapshot document and import results."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from fitness_tracker.domain.foods import MealType

BACKUP_VERSION = 2

# Export writes datetimes; import never reads these and keeps any string as given.
Timestamp = datetime | str | None


class InvalidBackupError(ValueError):
    """Raised when a payload is not a recognized backup snapshot."""


class BackupModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BackupProfile(BackupModel):
    """Profile section of a snapshot."""

    name: str
    avatar: str
    units: Literal["metric", "imperial"]


class BackupGoals(BackupModel):
    """Goals section of a snapshot; absent fields are left untouched."""

    daily_calories: int | None = None
    daily_protein: int | None = None
    daily_carbs: int | None = None
    daily_fats: int | None = None
    weekly_workouts: int | None = None
    target_weight: float | None = None


class BackupWorkout(BackupModel):
    """Exported workout template."""

    export_id: str | None = None
    name: str
    exercises: list[dict[str, Any]] = Field(default_factory=list)
    scheduled_days: list[int] = Field(default_factory=list)
    color: str | None = None
    created_at: Timestamp = None

    @field_validator("exercises", "scheduled_days", mode="before")
    @classmethod
    def empty_if_none(cls, value: object) -> object:
        return [] if value is None else value


class BackupWorkoutLog(BackupModel):
    """Exported completed workout."""

    workout_export_id: str | None = None
    workout_name: str
    completed_at: datetime
    duration: int | None = None
    exercise_logs: list[dict[str, Any]] = Field(default_factory=list)
    notes: str | None = None

    @field_validator("exercise_logs", mode="before")
    @classmethod
    def empty_if_none(cls, value: object) -> object:
        return [] if value is None else value


class BackupFood(BackupModel):
    """Exported food."""

    export_id: str | None = None
    name: str
    serving_size: str
    calories: int
    protein: float
    carbs: float
    fats: float
    fiber: float | None = None
    is_saved: bool | None = None
    created_at: Timestamp = None


class BackupFoodSnapshot(BackupModel):
    """Nutrition of the food an entry pointed at, captured at export time."""

    name: str
    serving_size: str
    calories: int
    protein: float
    carbs: float
    fats: float
    fiber: float | None = None


class BackupFoodEntry(BackupModel):
    """Exported food log entry."""

    food_export_id: str | None = None
    meal_type: MealType
    servings: float | None = None
    date: str
    food_snapshot: BackupFoodSnapshot | None = None


class BackupWeightEntry(BackupModel):
    """Exported weight measurement."""

    weight: float
    date: str
    created_at: Timestamp = None


class BackupMeal(BackupModel):
    """Exported meal-prep recipe."""

    export_id: str | None = None
    name: str
    ingredients: list[dict[str, Any]] = Field(default_factory=list)
    total_servings: int | None = None
    created_at: Timestamp = None

    @field_validator("ingredients", mode="before")
    @classmethod
    def empty_if_none(cls, value: object) -> object:
        return [] if value is None else value


class BackupDocument(BackupModel):
    """A point-in-time copy of everything a user owns."""

    version: Any
    exported_at: Timestamp = None
    profile: BackupProfile | None = None
    goals: BackupGoals | None = None
    workouts: list[BackupWorkout] = Field(default_factory=list)
    workout_logs: list[BackupWorkoutLog] = Field(default_factory=list)
    foods: list[BackupFood] = Field(default_factory=list)
    food_entries: list[BackupFoodEntry] = Field(default_factory=list)
    weight_entries: list[BackupWeightEntry] = Field(default_factory=list)
    meals: list[BackupMeal] = Field(default_factory=list)

    @field_validator(
        "workouts",
        "workout_logs",
        "foods",
        "food_entries",
        "weight_entries",
        "meals",
        mode="before",
    )
    @classmethod
    def empty_if_none(cls, value: object) -> object:
        return [] if value is None else value


class ImportCounts(BackupModel):
    """Number of records inserted per category by one import."""

    workouts: int = 0
    workout_logs: int = 0
    foods: int = 0
    food_entries: int = 0
    weight_entries: int = 0
    meals: int = 0


def parse_backup(payload: object) -> BackupDocument:
    """Validate a raw snapshot mapping.

    Only the presence of a truthy ``version`` is checked, not its value.
    """
    if not isinstance(payload, Mapping) or not payload.get("version"):
        raise InvalidBackupError("Backup is missing a version marker")
    try:
        return BackupDocument.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidBackupError("Backup does not match snapshot format") from exc
