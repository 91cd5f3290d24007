"""Compliance workflow results, audit history and admin dashboard schemas."""
from datetime import datetime
from typing import Any
from pydantic import BaseModel
from app.models.boarding_house import PermitStatus


class ComplianceResult(BaseModel):
    """State after verify/reject, so callers can reconcile without reloading."""
    boarding_house_id: int
    permit_status: PermitStatus
    is_active: bool


class ReevaluationResult(BaseModel):
    checked: int
    changed_ids: list[int]


class AuditLogEntry(BaseModel):
    id: int
    boarding_house_id: int | None = None
    category: str
    title: str
    message: str
    meta: dict[str, Any] | None = None
    actor_email: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class AdminStats(BaseModel):
    total_boarding_houses: int
    active: int
    pending_verification: int
    valid_permits: int
    near_expiry_permits: int
    expired_permits: int
    pinned_locations: int
    total_capacity: int
    total_occupied: int
    total_available: int
