"""Permit audit trail. Entries are only ever appended; nothing here updates or deletes."""
from __future__ import annotations

import enum
from datetime import date, datetime
from typing import Any

from sqlalchemy.orm import Session

from app.models.audit_log import AuditLog
from app.models.user import User

CATEGORY_PERMIT_VERIFIED = "permit_verified"
CATEGORY_PERMIT_REJECTED = "permit_rejected"
CATEGORY_PERMIT_REEVALUATED = "permit_reevaluated"
CATEGORIES = (CATEGORY_PERMIT_VERIFIED, CATEGORY_PERMIT_REJECTED, CATEGORY_PERMIT_REEVALUATED)


def _jsonable(value: Any) -> Any:
    # Enum first: PermitStatus is also a str
    if isinstance(value, enum.Enum):
        return value.value
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_jsonable(v) for v in value]
    return str(value)


def create_log(
    db: Session,
    category: str,
    title: str,
    message: str,
    *,
    boarding_house_id: int | None = None,
    actor: User | None = None,
    meta: dict[str, Any] | None = None,
) -> AuditLog:
    """Stage one entry on the session without committing.

    The caller's commit writes it together with the status change it describes,
    and a rollback discards both.
    """
    if category not in CATEGORIES:
        raise ValueError(f"Unknown audit category: {category}")
    entry = AuditLog(
        category=category,
        title=title[:255],
        message=message,
        boarding_house_id=boarding_house_id,
        actor_user_id=actor.id if actor else None,
        actor_email=actor.email if actor else None,
        meta=_jsonable(meta) if meta else None,
    )
    db.add(entry)
    return entry


def history_for_boarding_house(db: Session, boarding_house_id: int) -> list[AuditLog]:
    """Oldest first, so the list reads as a timeline."""
    return (
        db.query(AuditLog)
        .filter(AuditLog.boarding_house_id == boarding_house_id)
        .order_by(AuditLog.created_at, AuditLog.id)
        .all()
    )
