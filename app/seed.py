"""Seed the municipal admin account from settings."""
import logging
from sqlalchemy.orm import Session
from app.config import get_settings
from app.models.user import User, UserRole
from app.services.auth import get_password_hash

log = logging.getLogger("uvicorn.error")


def seed_admin(db: Session) -> User | None:
    settings = get_settings()
    email = (settings.admin_email or "").strip().lower()
    if not email:
        return None
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        return existing
    admin = User(
        email=email,
        name=settings.admin_name,
        hashed_password=get_password_hash(settings.admin_password),
        role=UserRole.admin,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    log.info("Seeded admin account %s", email)
    return admin
