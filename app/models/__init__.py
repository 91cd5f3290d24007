"""
All SQLAlchemy models. Schema is the source of truth for new DBs.
Base.metadata.create_all() creates every table; no migration scripts needed for fresh installs.
"""
from app.models.user import User, UserRole
from app.models.boarding_house import BoardingHouse, Room, Occupant, PermitStatus, GenderAccommodation
from app.models.notification import Notification, NotificationType
from app.models.audit_log import AuditLog

__all__ = [
    "User",
    "UserRole",
    "BoardingHouse",
    "Room",
    "Occupant",
    "PermitStatus",
    "GenderAccommodation",
    "Notification",
    "NotificationType",
    "AuditLog",
]
