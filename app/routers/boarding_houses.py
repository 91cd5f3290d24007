"""Boarding house registration and listings."""
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_user, get_visible_boarding_house, require_owner
from app.exceptions import InvalidPermitDate, StorageError
from app.models.boarding_house import BoardingHouse, PermitStatus
from app.models.user import User, UserRole
from app.schemas.boarding_house import BoardingHouseCreate, BoardingHouseResponse, BoardingHouseUpdate, OccupancySummary
from app.services.boarding_houses import occupancy_summary, register_boarding_house, save_boarding_house
from app.services.permits import activation_blocker

router = APIRouter(prefix="/boarding-houses", tags=["boarding-houses"])


def to_response(house: BoardingHouse) -> BoardingHouseResponse:
    resp = BoardingHouseResponse.model_validate(house)
    if not house.is_active:
        resp.activation_blocker = activation_blocker(house.permit_status, house.latitude, house.longitude)
    return resp


@router.post("", response_model=BoardingHouseResponse, status_code=201)
def register(
    data: BoardingHouseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_owner),
):
    if db.query(BoardingHouse).filter(BoardingHouse.permit_number == data.permit_number.strip()).first():
        raise HTTPException(status_code=400, detail="Permit number is already registered")
    try:
        house = register_boarding_house(db, current_user, data, date.today())
    except InvalidPermitDate as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to create boarding house")
    return to_response(house)


@router.get("", response_model=list[BoardingHouseResponse])
def list_boarding_houses(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    barangay: str | None = Query(None),
    permit_status: PermitStatus | None = Query(None),
    search: str | None = Query(None, description="Matches name or permit number"),
):
    """Owners see their own listings; admins see all."""
    q = db.query(BoardingHouse)
    if current_user.role != UserRole.admin:
        q = q.filter(BoardingHouse.owner_id == current_user.id)
    if barangay and barangay != "All Barangays":
        q = q.filter(BoardingHouse.barangay == barangay)
    if permit_status:
        q = q.filter(BoardingHouse.permit_status == permit_status)
    if search and search.strip():
        term = f"%{search.strip()}%"
        q = q.filter(or_(BoardingHouse.name.ilike(term), BoardingHouse.permit_number.ilike(term)))
    return [to_response(h) for h in q.order_by(BoardingHouse.id).all()]


@router.get("/{boarding_house_id}", response_model=BoardingHouseResponse)
def get_boarding_house(
    boarding_house_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return to_response(get_visible_boarding_house(boarding_house_id, db, current_user))


@router.put("/{boarding_house_id}", response_model=BoardingHouseResponse)
def update_boarding_house(
    boarding_house_id: int,
    data: BoardingHouseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_owner),
):
    """Owner edits of descriptive fields and the map pin. Does not re-run permit evaluation."""
    house = get_visible_boarding_house(boarding_house_id, db, current_user)
    changes = data.model_dump(exclude_unset=True)
    lat = changes.get("latitude", house.latitude)
    lng = changes.get("longitude", house.longitude)
    if house.is_active and (lat is None or lng is None):
        # An active listing must stay pinned
        changes["is_active"] = False
    price_min = changes.get("price_min", house.price_min)
    price_max = changes.get("price_max", house.price_max)
    if price_min is not None and price_max is not None and float(price_min) > float(price_max):
        raise HTTPException(status_code=400, detail="price_min cannot be greater than price_max")
    try:
        house = save_boarding_house(db, house, **changes)
    except StorageError:
        raise HTTPException(status_code=500, detail="Failed to update boarding house")
    return to_response(house)


@router.delete("/{boarding_house_id}")
def delete_boarding_house(
    boarding_house_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    house = get_visible_boarding_house(boarding_house_id, db, current_user)
    db.delete(house)
    db.commit()
    return {"status": "ok", "message": f"Boarding house {boarding_house_id} deleted."}


@router.get("/{boarding_house_id}/occupancy", response_model=OccupancySummary)
def get_occupancy(
    boarding_house_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    house = get_visible_boarding_house(boarding_house_id, db, current_user)
    return OccupancySummary(**occupancy_summary(house.rooms))
