"""Rooms and occupants of a boarding house.

Editing rooms or occupants never re-runs permit evaluation or activation.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_user, get_visible_boarding_house, require_active_for_owner
from app.models.boarding_house import Occupant, Room
from app.models.user import User
from app.schemas.room import OccupantCreate, OccupantResponse, OccupantUpdate, RoomCreate, RoomResponse

router = APIRouter(tags=["rooms"])


def _get_room(room_id: int, db: Session, current_user: User) -> Room:
    room = db.query(Room).filter(Room.id == room_id).first()
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    # Ownership check goes through the parent house
    get_visible_boarding_house(room.boarding_house_id, db, current_user)
    return room


def _get_occupant(occupant_id: int, db: Session, current_user: User) -> Occupant:
    occupant = db.query(Occupant).filter(Occupant.id == occupant_id).first()
    if not occupant:
        raise HTTPException(status_code=404, detail="Occupant not found")
    _get_room(occupant.room_id, db, current_user)
    return occupant


@router.get("/boarding-houses/{boarding_house_id}/rooms", response_model=list[RoomResponse])
def list_rooms(
    boarding_house_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    house = get_visible_boarding_house(boarding_house_id, db, current_user)
    return [RoomResponse.model_validate(r) for r in house.rooms]


@router.post("/boarding-houses/{boarding_house_id}/rooms", response_model=RoomResponse, status_code=201)
def create_room(
    boarding_house_id: int,
    data: RoomCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    house = get_visible_boarding_house(boarding_house_id, db, current_user)
    require_active_for_owner(house, current_user)
    room = Room(boarding_house_id=house.id, name=data.name.strip(), capacity=data.capacity)
    db.add(room)
    db.commit()
    db.refresh(room)
    return RoomResponse.model_validate(room)


@router.delete("/rooms/{room_id}")
def delete_room(
    room_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    room = _get_room(room_id, db, current_user)
    require_active_for_owner(room.boarding_house, current_user)
    db.delete(room)
    db.commit()
    return {"status": "ok", "message": f"Room {room_id} deleted."}


@router.get("/rooms/{room_id}/occupants", response_model=list[OccupantResponse])
def list_occupants(
    room_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    room = _get_room(room_id, db, current_user)
    return [OccupantResponse.model_validate(o) for o in room.occupants]


@router.post("/rooms/{room_id}/occupants", response_model=OccupantResponse, status_code=201)
def add_occupant(
    room_id: int,
    data: OccupantCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    room = _get_room(room_id, db, current_user)
    require_active_for_owner(room.boarding_house, current_user)
    if len(room.occupants) >= room.capacity:
        raise HTTPException(status_code=400, detail=f"{room.name} is full ({room.capacity} bed(s)).")
    occupant = Occupant(
        room_id=room.id,
        name=data.name.strip(),
        contact_number=data.contact_number.strip(),
        move_in_date=data.move_in_date,
    )
    db.add(occupant)
    db.commit()
    db.refresh(occupant)
    return OccupantResponse.model_validate(occupant)


@router.put("/occupants/{occupant_id}", response_model=OccupantResponse)
def update_occupant(
    occupant_id: int,
    data: OccupantUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    occupant = _get_occupant(occupant_id, db, current_user)
    require_active_for_owner(occupant.room.boarding_house, current_user)
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(occupant, field, value.strip() if isinstance(value, str) else value)
    db.commit()
    db.refresh(occupant)
    return OccupantResponse.model_validate(occupant)


@router.delete("/occupants/{occupant_id}")
def delete_occupant(
    occupant_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    occupant = _get_occupant(occupant_id, db, current_user)
    require_active_for_owner(occupant.room.boarding_house, current_user)
    db.delete(occupant)
    db.commit()
    return {"status": "ok", "message": f"Occupant {occupant_id} removed."}
