"""Boarding house storage: load/save used by the compliance workflow, plus registration."""
import logging
from datetime import date
from typing import Any, Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import NotFound, StorageError
from app.models.boarding_house import BoardingHouse, PermitStatus, Room
from app.models.user import User
from app.schemas.boarding_house import BoardingHouseCreate
from app.services.permits import validate_permit_dates

log = logging.getLogger("uvicorn.error")


def load_boarding_house(db: Session, boarding_house_id: int) -> BoardingHouse:
    house = db.query(BoardingHouse).filter(BoardingHouse.id == boarding_house_id).first()
    if not house:
        raise NotFound(boarding_house_id)
    return house


def save_boarding_house(db: Session, house: BoardingHouse, **changes: Any) -> BoardingHouse:
    """Apply changes and commit everything pending on the session (single-row update).

    On failure the session is rolled back, so the row and any pending audit entry are
    left as they were, and StorageError is raised.
    """
    for field, value in changes.items():
        setattr(house, field, value)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("Failed to save boarding house %s", house.id)
        raise StorageError(f"Failed to update boarding house {house.id}") from e
    db.refresh(house)
    return house


def compose_address(house_number: str | None, street: str, barangay: str, landmarks: str | None) -> str:
    address = f"{(house_number or '').strip()} {street.strip()}".strip()
    address = f"{address}, {barangay}"
    if landmarks and landmarks.strip():
        address += f" ({landmarks.strip()})"
    return address


def register_boarding_house(db: Session, owner: User, data: BoardingHouseCreate, today: date) -> BoardingHouse:
    """Create a new listing. Always pending and inactive until an admin verifies it."""
    validate_permit_dates(data.permit_issue_date, data.permit_expiry_date, today)
    house = BoardingHouse(
        owner_id=owner.id,
        name=data.name.strip(),
        barangay=data.barangay,
        address=data.address or compose_address(data.house_number, data.street or "", data.barangay, data.landmarks),
        contact_number=data.contact_number.strip(),
        permit_number=data.permit_number.strip(),
        permit_issue_date=data.permit_issue_date,
        permit_expiry_date=data.permit_expiry_date,
        permit_document=data.permit_document,
        latitude=data.latitude,
        longitude=data.longitude,
        price_min=data.price_min,
        price_max=data.price_max,
        gender_accommodation=data.gender_accommodation,
        permit_status=PermitStatus.pending,
        is_active=False,
    )
    db.add(house)
    db.flush()
    if data.total_rooms and data.beds_per_room:
        for i in range(1, data.total_rooms + 1):
            db.add(Room(boarding_house_id=house.id, name=f"Room {i}", capacity=data.beds_per_room))
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("Failed to register boarding house for owner %s", owner.id)
        raise StorageError("Failed to create boarding house") from e
    db.refresh(house)
    log.info("Boarding house %s registered by owner %s (pending)", house.id, owner.id)
    return house


def occupancy_summary(rooms: Iterable[Room]) -> dict[str, int]:
    total = occupied = 0
    for room in rooms:
        total += room.capacity
        occupied += len(room.occupants)
    return {"total": total, "occupied": occupied, "available": total - occupied}
