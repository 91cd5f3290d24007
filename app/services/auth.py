"""Portal accounts: bcrypt password hashes and bearer JWTs.

A token carries the user id in "sub"; the role is re-read from the database on
every request so a demoted account loses access without waiting for expiry.
"""
from datetime import datetime, timedelta, timezone
import bcrypt
import jwt
from sqlalchemy.orm import Session
from app.config import get_settings
from app.models.user import User, UserRole

# bcrypt ignores everything past 72 bytes
_BCRYPT_MAX_BYTES = 72


def get_password_hash(password: str) -> str:
    raw = password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(raw, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8")[:_BCRYPT_MAX_BYTES], hashed.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


def is_government_email(email: str) -> bool:
    """Addresses on the municipal domain belong to admins and cannot sign up as owners."""
    domain = get_settings().admin_email_domain.strip().lower()
    if not domain:
        return False
    return email.strip().lower().rsplit("@", 1)[-1] == domain


def authenticate(db: Session, email: str, password: str) -> User | None:
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if user is None or not verify_password(password, user.hashed_password):
        return None
    return user


def create_access_token(user: User) -> str:
    settings = get_settings()
    issued = datetime.now(timezone.utc)
    claims = {
        "sub": str(user.id),  # PyJWT requires a string subject
        "email": user.email,
        "role": UserRole(user.role).value,
        "iat": issued,
        "exp": issued + timedelta(minutes=settings.jwt_access_token_expire_minutes),
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def user_id_from_token(token: str) -> int | None:
    """The account id a token was issued for, or None if it is expired, forged or malformed."""
    settings = get_settings()
    try:
        claims = jwt.decode(token.strip(), settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        return int(claims["sub"])
    except (jwt.PyJWTError, KeyError, TypeError, ValueError):
        return None
