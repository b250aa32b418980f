"""Backup export and import endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from fitness_tracker.api.auth import require_user
from fitness_tracker.domain.backup import InvalidBackupError

if TYPE_CHECKING:
    from fitness_tracker.containers import AppContainer

router = APIRouter(prefix="/api/backup", tags=["backup"])
logger = logging.getLogger(__name__)


@router.get("/export")
async def export_backup(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return a snapshot of the caller's data."""
    container: AppContainer = request.app.state.container
    try:
        backup = container.backup_service.export_backup(user_id)
    except Exception as exc:
        logger.exception("Backup export failed", extra={"user_id": user_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to export backup",
        ) from exc
    return {"success": True, "backup": backup.model_dump(by_alias=True, mode="json")}


@router.post("/import")
async def import_backup(
    request: Request,
    payload: Any = Body(...),
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Merge a snapshot into the caller's data and report what was added."""
    container: AppContainer = request.app.state.container
    try:
        counts = container.backup_service.import_backup(user_id, _backup_of(payload))
    except InvalidBackupError as exc:
        logger.warning("Rejected backup import: %s", exc, extra={"user_id": user_id})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid backup format"
        ) from exc
    except Exception as exc:
        logger.exception("Backup import failed", extra={"user_id": user_id})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to import backup",
        ) from exc
    return {
        "success": True,
        "message": "Backup imported successfully",
        "imported": counts.model_dump(by_alias=True),
    }


def _backup_of(payload: Any) -> object:
    if not isinstance(payload, dict):
        return None
    return payload.get("backup")
