"""Boarding house registration and listing schemas."""
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator, model_validator
from app.constants import MIDSALIP_BARANGAYS
from app.models.boarding_house import GenderAccommodation, PermitStatus
from app.services.permits import parse_calendar_date


def _check_barangay(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if v not in MIDSALIP_BARANGAYS:
        raise ValueError(f"Unknown barangay: {v}")
    return v


def _check_pin(lat: float | None, lng: float | None) -> None:
    if lat is not None and not -90 <= lat <= 90:
        raise ValueError("latitude must be between -90 and 90")
    if lng is not None and not -180 <= lng <= 180:
        raise ValueError("longitude must be between -180 and 180")


def _check_prices(price_min: float | None, price_max: float | None) -> None:
    if price_min is not None and price_max is not None and price_min > price_max:
        raise ValueError("price_min cannot be greater than price_max")


class BoardingHouseCreate(BaseModel):
    """Owner registration form. Status fields are not accepted; new listings start pending."""
    name: str = Field(min_length=1)
    barangay: str
    street: str | None = None
    house_number: str | None = None
    landmarks: str | None = None
    address: str | None = None  # full address; composed from street/house_number/landmarks when omitted
    contact_number: str = Field(min_length=1)
    permit_number: str = Field(min_length=1)
    permit_issue_date: date
    permit_expiry_date: date
    permit_document: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    price_min: float | None = Field(default=None, ge=0)
    price_max: float | None = Field(default=None, ge=0)
    gender_accommodation: GenderAccommodation | None = None
    total_rooms: int | None = Field(default=None, ge=1, le=200)
    beds_per_room: int | None = Field(default=None, ge=1, le=50)

    @field_validator("permit_issue_date", "permit_expiry_date", mode="before")
    @classmethod
    def calendar_date(cls, v, info):
        return parse_calendar_date(v, info.field_name)

    @field_validator("barangay")
    @classmethod
    def known_barangay(cls, v: str) -> str:
        return _check_barangay(v)

    @model_validator(mode="after")
    def consistent(self):
        if not (self.address or (self.street or "").strip()):
            raise ValueError("street or address required")
        _check_pin(self.latitude, self.longitude)
        _check_prices(self.price_min, self.price_max)
        return self


class BoardingHouseUpdate(BaseModel):
    """Owner edits. All optional; permit dates and status are changed only through re-registration and admin review."""
    name: str | None = None
    barangay: str | None = None
    address: str | None = None
    contact_number: str | None = None
    permit_document: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    price_min: float | None = Field(default=None, ge=0)
    price_max: float | None = Field(default=None, ge=0)
    gender_accommodation: GenderAccommodation | None = None

    @field_validator("name", "barangay", "address", "contact_number")
    @classmethod
    def not_cleared(cls, v: str | None, info) -> str:
        # Omit a field to leave it unchanged; these columns cannot be emptied
        if v is None or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        return v.strip()

    @field_validator("barangay")
    @classmethod
    def known_barangay(cls, v: str | None) -> str | None:
        return _check_barangay(v)

    @model_validator(mode="after")
    def consistent(self):
        _check_pin(self.latitude, self.longitude)
        _check_prices(self.price_min, self.price_max)
        return self


class BoardingHouseResponse(BaseModel):
    id: int
    owner_id: int
    name: str
    barangay: str
    address: str
    contact_number: str
    permit_number: str
    permit_issue_date: date
    permit_expiry_date: date
    permit_document: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    price_min: float | None = None
    price_max: float | None = None
    gender_accommodation: GenderAccommodation | None = None
    permit_status: PermitStatus
    is_active: bool
    activation_blocker: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class OccupancySummary(BaseModel):
    total: int
    occupied: int
    available: int
