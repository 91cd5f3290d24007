"""Room and occupant schemas."""
from datetime import date
from pydantic import BaseModel, Field


class RoomCreate(BaseModel):
    name: str = Field(min_length=1)
    capacity: int = Field(ge=1, le=50)


class OccupantCreate(BaseModel):
    name: str = Field(min_length=1)
    contact_number: str = Field(min_length=1)
    move_in_date: date


class OccupantUpdate(BaseModel):
    name: str | None = None
    contact_number: str | None = None
    move_in_date: date | None = None


class OccupantResponse(BaseModel):
    id: int
    room_id: int
    name: str
    contact_number: str
    move_in_date: date

    class Config:
        from_attributes = True


class RoomResponse(BaseModel):
    id: int
    boarding_house_id: int
    name: str
    capacity: int
    occupants: list[OccupantResponse] = []

    class Config:
        from_attributes = True
