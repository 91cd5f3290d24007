"""Compliance workflow: apply permit decisions to a boarding house and notify its owner.

Each entry point is a self-contained read-modify-write on one row. There is no version
check, so two concurrent verifies on the same house are last-writer-wins.
"""
import logging
from datetime import date
from typing import Callable

from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import SessionLocal
from app.exceptions import StorageError
from app.models.boarding_house import BoardingHouse, PermitStatus
from app.models.notification import NotificationType
from app.models.user import User
from app.schemas.compliance import ComplianceResult
from app.services import notifications
from app.services.audit_log import (
    create_log,
    CATEGORY_PERMIT_VERIFIED,
    CATEGORY_PERMIT_REJECTED,
    CATEGORY_PERMIT_REEVALUATED,
)
from app.services.boarding_houses import load_boarding_house, save_boarding_house
from app.services.permits import can_activate, evaluate_permit_status

log = logging.getLogger("uvicorn.error")

Clock = Callable[[], date]
Notifier = Callable[..., object]

TITLE_APPROVED = "Boarding House Approved!"
TITLE_EXPIRED = "Permit Expired - Action Required"
TITLE_REVIEWED = "Boarding House Reviewed"
TITLE_REJECTED = "Boarding House Registration Rejected"

# Statuses the scheduled re-evaluation may move. Pending awaits an admin; expired never re-opens on its own.
REEVALUATED_STATUSES = (PermitStatus.valid, PermitStatus.near_expiry)


def review_notice(name: str, status: PermitStatus, activated: bool, pinned: bool) -> tuple[NotificationType, str, str]:
    """(type, title, message) for the owner after a verify."""
    if activated:
        return (
            NotificationType.approval,
            TITLE_APPROVED,
            f'Your boarding house "{name}" has been approved and is now active. '
            "You can now manage rooms and occupants.",
        )
    if status == PermitStatus.expired:
        return (
            NotificationType.warning,
            TITLE_EXPIRED,
            f'Your boarding house "{name}" permit has expired. '
            "Please renew your permit to activate your listing.",
        )
    message = f'Your boarding house "{name}" has been reviewed. Permit status: {status.value}.'
    if not pinned:
        message += " Please add a location to activate your listing."
    return NotificationType.info, TITLE_REVIEWED, message


def rejection_notice(name: str) -> tuple[NotificationType, str, str]:
    return (
        NotificationType.warning,
        TITLE_REJECTED,
        f'Your boarding house "{name}" registration has been rejected. '
        "Please review your permit information and resubmit with valid documentation.",
    )


def _notify_owner(
    db: Session,
    house: BoardingHouse,
    notice: tuple[NotificationType, str, str],
    notify: Notifier,
) -> None:
    """Best-effort: the status change is already committed, so a failure here is only logged."""
    ntype, title, message = notice
    try:
        notify(db, house.owner_id, title, message, ntype, house.id)
    except Exception:
        log.warning(
            "Notification for boarding house %s (owner %s) failed; status update kept",
            house.id,
            house.owner_id,
            exc_info=True,
        )


def _today(today: date | None, clock: Clock) -> date:
    return today if today is not None else clock()


def verify(
    db: Session,
    boarding_house_id: int,
    *,
    today: date | None = None,
    clock: Clock = date.today,
    actor: User | None = None,
    notify: Notifier = notifications.emit,
    category: str = CATEGORY_PERMIT_VERIFIED,
) -> ComplianceResult:
    """Re-derive permit status and activation from the permit dates and location pin.

    Raises NotFound if the house does not exist (nothing is notified) and StorageError
    if the update could not be saved (nothing is applied or notified).
    """
    house = load_boarding_house(db, boarding_house_id)
    on = _today(today, clock)
    window = get_settings().permit_near_expiry_days

    old_status = house.permit_status
    new_status = evaluate_permit_status(house.permit_issue_date, house.permit_expiry_date, on, window_days=window)
    should_activate = can_activate(new_status, house.latitude, house.longitude)

    create_log(
        db,
        category,
        f"Permit {new_status.value}",
        f'Permit {house.permit_number} for "{house.name}" evaluated on {on.isoformat()}: '
        f"{getattr(old_status, 'value', old_status)} -> {new_status.value}, active={should_activate}.",
        boarding_house_id=house.id,
        actor=actor,
        meta={
            "boarding_house_name": house.name,
            "old_status": old_status,
            "new_status": new_status,
            "is_active": should_activate,
            "permit_expiry_date": house.permit_expiry_date,
            "evaluated_on": on,
        },
    )
    save_boarding_house(db, house, permit_status=new_status, is_active=should_activate)
    log.info("Boarding house %s verified: status=%s active=%s", house.id, new_status.value, should_activate)

    _notify_owner(db, house, review_notice(house.name, new_status, should_activate, house.is_pinned), notify)
    return ComplianceResult(boarding_house_id=house.id, permit_status=new_status, is_active=should_activate)


def reject(
    db: Session,
    boarding_house_id: int,
    *,
    actor: User | None = None,
    notify: Notifier = notifications.emit,
) -> ComplianceResult:
    """Administrative override: expired and inactive regardless of the permit dates."""
    house = load_boarding_house(db, boarding_house_id)
    old_status = house.permit_status

    create_log(
        db,
        CATEGORY_PERMIT_REJECTED,
        "Registration rejected",
        f'Registration of "{house.name}" (permit {house.permit_number}) rejected by admin.',
        boarding_house_id=house.id,
        actor=actor,
        meta={
            "boarding_house_name": house.name,
            "old_status": old_status,
            "new_status": PermitStatus.expired,
            "is_active": False,
        },
    )
    save_boarding_house(db, house, permit_status=PermitStatus.expired, is_active=False)
    log.info("Boarding house %s rejected", house.id)

    _notify_owner(db, house, rejection_notice(house.name), notify)
    return ComplianceResult(boarding_house_id=house.id, permit_status=PermitStatus.expired, is_active=False)


def reevaluate_permits(
    db: Session,
    *,
    today: date | None = None,
    clock: Clock = date.today,
    actor: User | None = None,
    notify: Notifier = notifications.emit,
) -> tuple[int, list[int]]:
    """Re-run verify on valid/near-expiry houses whose date-derived status has moved.

    Returns (number checked, ids that changed). Houses whose status is unchanged are
    left alone, so owners are not notified again. A house whose update fails is
    logged and skipped; the rest are still processed.
    """
    on = _today(today, clock)
    window = get_settings().permit_near_expiry_days
    houses = db.query(BoardingHouse).filter(BoardingHouse.permit_status.in_(REEVALUATED_STATUSES)).all()
    changed = []
    for house in houses:
        status = evaluate_permit_status(house.permit_issue_date, house.permit_expiry_date, on, window_days=window)
        if status == house.permit_status:
            continue
        try:
            verify(db, house.id, today=on, actor=actor, notify=notify, category=CATEGORY_PERMIT_REEVALUATED)
        except StorageError:
            # Rolled back; the next run retries this house
            log.warning("Permit re-evaluation skipped boarding house %s: update failed", house.id)
            continue
        changed.append(house.id)
    if changed:
        log.info("Permit re-evaluation: %d of %d boarding house(s) changed status", len(changed), len(houses))
    return len(houses), changed


def run_permit_reevaluation_job() -> None:
    """Scheduler entry point: one session per run."""
    db: Session = SessionLocal()
    try:
        reevaluate_permits(db)
    finally:
        db.close()
