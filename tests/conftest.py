"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.foods import Food, FoodEntry, WeightEntry
from fitness_tracker.domain.meals import Meal
from fitness_tracker.domain.models import AuthSession, UserGoals, UserProfile
from fitness_tracker.domain.workouts import Workout, WorkoutLog
from fitness_tracker.services.auth import AuthService, AuthSessionRepository
from fitness_tracker.services.backup import (
    BackupService,
    FoodRepository,
    GoalsRepository,
    MealRepository,
    ProfileRepository,
    WeightRepository,
    WorkoutRepository,
)
from fitness_tracker.services.meals import MealService


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def update_profile(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        current = self.profiles.get(user_id)
        if current is None:
            current = UserProfile(user_id=user_id, name="User")
        updated = replace(current, **payload)
        self.profiles[user_id] = updated
        return updated


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """In-memory goals repository for tests."""

    goals: dict[UUID, UserGoals] = field(default_factory=dict)

    def get_goals(self, user_id: UUID) -> UserGoals | None:
        return self.goals.get(user_id)

    def upsert_goals(self, user_id: UUID, payload: dict[str, object]) -> UserGoals:
        current = self.goals.get(user_id) or UserGoals(user_id=user_id)
        updated = replace(current, **payload)
        self.goals[user_id] = updated
        return updated


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    workouts: list[Workout] = field(default_factory=list)
    logs: list[WorkoutLog] = field(default_factory=list)

    def list_workouts(self, user_id: UUID) -> list[Workout]:
        return [workout for workout in self.workouts if workout.user_id == user_id]

    def create_workout(self, user_id: UUID, payload: dict[str, object]) -> Workout:
        workout = Workout(
            id=uuid4(), user_id=user_id, created_at=datetime.now(tz=UTC), **payload
        )
        self.workouts.append(workout)
        return workout

    def list_workout_logs(self, user_id: UUID) -> list[WorkoutLog]:
        return [log for log in self.logs if log.user_id == user_id]

    def create_workout_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WorkoutLog:
        log = WorkoutLog(id=uuid4(), user_id=user_id, **payload)
        self.logs.append(log)
        return log


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: list[Food] = field(default_factory=list)
    entries: list[FoodEntry] = field(default_factory=list)

    def list_foods(self, user_id: UUID) -> list[Food]:
        return [food for food in self.foods if food.user_id == user_id]

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> Food:
        food = Food(
            id=uuid4(), user_id=user_id, created_at=datetime.now(tz=UTC), **payload
        )
        self.foods.append(food)
        return food

    def list_food_entries(self, user_id: UUID) -> list[FoodEntry]:
        return [entry for entry in self.entries if entry.user_id == user_id]

    def create_food_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        entry = FoodEntry(
            id=uuid4(), user_id=user_id, created_at=datetime.now(tz=UTC), **payload
        )
        self.entries.append(entry)
        return entry


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight repository for tests."""

    entries: list[WeightEntry] = field(default_factory=list)

    def list_weight_entries(self, user_id: UUID) -> list[WeightEntry]:
        return [entry for entry in self.entries if entry.user_id == user_id]

    def create_weight_entry(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightEntry:
        entry = WeightEntry(
            id=uuid4(), user_id=user_id, created_at=datetime.now(tz=UTC), **payload
        )
        self.entries.append(entry)
        return entry


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: list[Meal] = field(default_factory=list)

    def list_meals(self, user_id: UUID) -> list[Meal]:
        return [meal for meal in self.meals if meal.user_id == user_id]

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        meal = Meal(
            id=uuid4(), user_id=user_id, created_at=datetime.now(tz=UTC), **payload
        )
        self.meals.append(meal)
        return meal


@dataclass
class InMemoryAuthSessionRepository(AuthSessionRepository):
    """In-memory auth session repository for tests."""

    sessions: dict[UUID, AuthSession] = field(default_factory=dict)

    def get_session(self, session_id: UUID) -> AuthSession | None:
        return self.sessions.get(session_id)

    def create_session(self, user_id: UUID, ttl: timedelta) -> AuthSession:
        session = AuthSession(
            id=uuid4(), user_id=user_id, expires_at=datetime.now(tz=UTC) + ttl
        )
        self.sessions[session.id] = session
        return session


@dataclass
class RecordingRepository:
    """Wraps a repository and records every method call made through it."""

    inner: object
    calls: list[str] = field(default_factory=list)

    def __getattr__(self, name: str):  # type: ignore[no-untyped-def]
        attribute = getattr(self.inner, name)
        if not callable(attribute):
            return attribute

        def record(*args, **kwargs):  # type: ignore[no-untyped-def]
            self.calls.append(name)
            return attribute(*args, **kwargs)

        return record


@dataclass
class InMemoryStore:
    """All backup repositories for one test."""

    profiles: InMemoryProfileRepository = field(
        default_factory=InMemoryProfileRepository
    )
    goals: InMemoryGoalsRepository = field(default_factory=InMemoryGoalsRepository)
    workouts: InMemoryWorkoutRepository = field(
        default_factory=InMemoryWorkoutRepository
    )
    foods: InMemoryFoodRepository = field(default_factory=InMemoryFoodRepository)
    weights: InMemoryWeightRepository = field(default_factory=InMemoryWeightRepository)
    meals: InMemoryMealRepository = field(default_factory=InMemoryMealRepository)

    def backup_service(self) -> BackupService:
        return BackupService(
            profile_repository=self.profiles,
            goals_repository=self.goals,
            workout_repository=self.workouts,
            food_repository=self.foods,
            weight_repository=self.weights,
            meal_repository=self.meals,
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def user_id(store: InMemoryStore) -> UUID:
    created = uuid4()
    store.profiles.profiles[created] = UserProfile(user_id=created, name="Alex")
    return created


@pytest.fixture
def session_repository() -> InMemoryAuthSessionRepository:
    return InMemoryAuthSessionRepository()


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryStore,
    session_repository: InMemoryAuthSessionRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        auth_service=AuthService(session_repository),
        backup_service=store.backup_service(),
        meal_service=MealService(store.meals),
    )


@pytest.fixture
def auth_headers(
    user_id: UUID, session_repository: InMemoryAuthSessionRepository
) -> dict[str, str]:
    session = session_repository.create_session(user_id, ttl=timedelta(days=30))
    return {"Authorization": f"Bearer {session.id}"}
