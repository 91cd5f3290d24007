"""Boarding houses, their rooms, and room occupants."""
from sqlalchemy import Column, Integer, String, Text, Boolean, Date, Float, Numeric, ForeignKey, Enum as SQLEnum, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
import enum


class PermitStatus(str, enum.Enum):
    pending = "pending"
    valid = "valid"
    near_expiry = "near-expiry"
    expired = "expired"


class GenderAccommodation(str, enum.Enum):
    male = "male"
    female = "female"
    mixed = "mixed"


class BoardingHouse(Base):
    __tablename__ = "boarding_houses"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    barangay = Column(String(255), nullable=False, index=True)
    address = Column(Text, nullable=False)
    contact_number = Column(String(20), nullable=False)

    permit_number = Column(String(255), unique=True, nullable=False)
    permit_issue_date = Column(Date, nullable=False)
    permit_expiry_date = Column(Date, nullable=False)
    permit_document = Column(String(500), nullable=True)  # uploaded file name

    # Both null = not pinned on the map
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    price_min = Column(Numeric(10, 2), nullable=True)
    price_max = Column(Numeric(10, 2), nullable=True)
    gender_accommodation = Column(SQLEnum(GenderAccommodation), nullable=True)

    # Written only by app.services.compliance
    permit_status = Column(
        SQLEnum(PermitStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PermitStatus.pending,
        index=True,
    )
    is_active = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    owner = relationship("User", backref="boarding_houses")
    rooms = relationship("Room", back_populates="boarding_house", cascade="all, delete-orphan", order_by="Room.id")

    @property
    def is_pinned(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class Room(Base):
    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True, index=True)
    boarding_house_id = Column(Integer, ForeignKey("boarding_houses.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    capacity = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    boarding_house = relationship("BoardingHouse", back_populates="rooms")
    occupants = relationship("Occupant", back_populates="room", cascade="all, delete-orphan", order_by="Occupant.id")


class Occupant(Base):
    __tablename__ = "occupants"

    id = Column(Integer, primary_key=True, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    contact_number = Column(String(20), nullable=False)
    move_in_date = Column(Date, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    room = relationship("Room", back_populates="occupants")
