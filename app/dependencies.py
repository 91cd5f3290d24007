"""Shared dependencies: DB session, current user, role checks.

The session is the bearer token, decoded on every request into the current User.
"""
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.database import get_db
from app.exceptions import NotFound
from app.models.boarding_house import BoardingHouse
from app.models.user import User, UserRole
from app.services.auth import user_id_from_token
from app.services.boarding_houses import load_boarding_house

security = HTTPBearer(auto_error=False)


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    if not credentials:
        raise HTTPException(status_code=401, detail="Not authenticated")
    user_id = user_id_from_token(credentials.credentials or "")
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.admin:
        raise HTTPException(status_code=403, detail="Admin role required")
    return current_user


def require_owner(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.owner:
        raise HTTPException(status_code=403, detail="Owner role required")
    return current_user


def get_visible_boarding_house(
    boarding_house_id: int,
    db: Session,
    current_user: User,
) -> BoardingHouse:
    """Admins see every house; owners only their own (others look missing)."""
    try:
        house = load_boarding_house(db, boarding_house_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Boarding house not found")
    if current_user.role != UserRole.admin and house.owner_id != current_user.id:
        raise HTTPException(status_code=404, detail="Boarding house not found")
    return house


def require_active_for_owner(house: BoardingHouse, current_user: User) -> None:
    """Room and occupant management is unlocked for owners only once the listing is active."""
    if current_user.role == UserRole.owner and not house.is_active:
        raise HTTPException(
            status_code=403,
            detail="Boarding house is not active. Rooms and occupants can be managed after the permit is verified and the location is pinned.",
        )
