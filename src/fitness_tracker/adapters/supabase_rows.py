"""Conversions between Supabase rows and domain values."""

from datetime import datetime
from uuid import UUID


def to_row(user_id: UUID, payload: dict[str, object]) -> dict[str, object]:
    """Build an insert row owned by ``user_id`` with JSON-safe values."""
    row: dict[str, object] = {"user_id": str(user_id)}
    for key, value in payload.items():
        if isinstance(value, UUID):
            row[key] = str(value)
        elif isinstance(value, datetime):
            row[key] = value.isoformat()
        else:
            row[key] = value
    return row


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, if set."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def parse_optional_uuid(raw: object) -> UUID | None:
    """Parse a nullable uuid column; empty strings count as unset."""
    if isinstance(raw, str) and raw:
        return UUID(raw)
    return None
