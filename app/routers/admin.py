"""Permit verification and the admin dashboard."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import require_admin
from app.exceptions import NotFound, StorageError
from app.models.boarding_house import BoardingHouse, PermitStatus
from app.models.user import User
from app.schemas.compliance import AdminStats, AuditLogEntry, ComplianceResult, ReevaluationResult
from app.services import compliance
from app.services.audit_log import history_for_boarding_house
from app.services.boarding_houses import load_boarding_house, occupancy_summary

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/boarding-houses/{boarding_house_id}/verify", response_model=ComplianceResult)
def verify_permit(
    boarding_house_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Evaluate the permit against today's date, activate when valid and pinned, notify the owner."""
    try:
        return compliance.verify(db, boarding_house_id, actor=current_user)
    except NotFound:
        raise HTTPException(status_code=404, detail="Boarding house not found")
    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to update boarding house")


@router.post("/boarding-houses/{boarding_house_id}/reject", response_model=ComplianceResult)
def reject_permit(
    boarding_house_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    try:
        return compliance.reject(db, boarding_house_id, actor=current_user)
    except NotFound:
        raise HTTPException(status_code=404, detail="Boarding house not found")
    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to update boarding house")


@router.get("/boarding-houses/{boarding_house_id}/audit-log", response_model=list[AuditLogEntry])
def audit_log(
    boarding_house_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Permit decisions recorded for one boarding house, oldest first."""
    try:
        load_boarding_house(db, boarding_house_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Boarding house not found")
    return [AuditLogEntry.model_validate(e) for e in history_for_boarding_house(db, boarding_house_id)]


@router.post("/permits/reevaluate", response_model=ReevaluationResult)
def reevaluate_permits(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Manually run the daily permit re-evaluation."""
    try:
        checked, changed = compliance.reevaluate_permits(db, actor=current_user)
    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to update boarding house")
    return ReevaluationResult(checked=checked, changed_ids=changed)


@router.get("/stats", response_model=AdminStats)
def dashboard_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    houses = db.query(BoardingHouse).all()
    by_status = {s: 0 for s in PermitStatus}
    for h in houses:
        by_status[PermitStatus(h.permit_status)] += 1
    occupancy = occupancy_summary(room for h in houses for room in h.rooms)
    return AdminStats(
        total_boarding_houses=len(houses),
        active=sum(1 for h in houses if h.is_active),
        pending_verification=by_status[PermitStatus.pending],
        valid_permits=by_status[PermitStatus.valid],
        near_expiry_permits=by_status[PermitStatus.near_expiry],
        expired_permits=by_status[PermitStatus.expired],
        pinned_locations=sum(1 for h in houses if h.is_pinned),
        total_capacity=occupancy["total"],
        total_occupied=occupancy["occupied"],
        total_available=occupancy["available"],
    )
