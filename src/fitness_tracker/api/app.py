"""FastAPI application factory."""

from fastapi import FastAPI

from fitness_tracker.api.backup import router as backup_router
from fitness_tracker.api.meals import router as meals_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI()
    app.state.container = container

    app.include_router(backup_router)
    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
