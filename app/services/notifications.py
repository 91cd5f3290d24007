"""Owner notifications: in-app store plus an optional email copy (Mailgun)."""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.exceptions import NotificationError
from app.models.notification import Notification, NotificationType
from app.models.user import User

log = logging.getLogger("uvicorn.error")

MAILGUN_US_BASE = "https://api.mailgun.net"

_TITLE_LEN = 255


def emit(
    db: Session,
    user_id: int,
    title: str,
    message: str,
    type: NotificationType,
    related_id: int | None = None,
) -> Notification:
    """Store one unread notification for user_id and commit it.

    Raises NotificationError if it could not be stored. The email copy is sent
    after the commit and never raises.
    """
    entry = Notification(
        user_id=user_id,
        title=title[:_TITLE_LEN],
        message=message,
        type=NotificationType(type),
        is_read=False,
        related_id=related_id,
    )
    try:
        db.add(entry)
        db.commit()
        db.refresh(entry)
    except SQLAlchemyError as e:
        db.rollback()
        raise NotificationError(f"Could not store notification for user {user_id}: {e}") from e

    user = db.query(User).filter(User.id == user_id).first()
    if user and user.email:
        send_email(user.email, f"[TagaMidsalip] {entry.title}", entry.message)
    return entry


def list_for_user(db: Session, user_id: int) -> list[Notification]:
    """Newest first."""
    return (
        db.query(Notification)
        .filter(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .all()
    )


def count_unread(db: Session, user_id: int) -> int:
    return (
        db.query(Notification)
        .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
        .count()
    )


def mark_read(db: Session, notification_id: int) -> Notification | None:
    entry = db.query(Notification).filter(Notification.id == notification_id).first()
    if not entry:
        return None
    entry.is_read = True
    db.commit()
    db.refresh(entry)
    return entry


def mark_all_read(db: Session, user_id: int) -> int:
    updated = (
        db.query(Notification)
        .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
        .update({Notification.is_read: True}, synchronize_session=False)
    )
    db.commit()
    return updated


def send_email(to_email: str, subject: str, text_content: str) -> bool:
    """Send a plain-text email via Mailgun. Returns False when unconfigured or on any failure."""
    settings = get_settings()
    if not settings.mailgun_configured:
        return False
    try:
        import httpx

        base = (settings.mailgun_base_url or MAILGUN_US_BASE).strip().rstrip("/")
        domain = settings.mailgun_domain.lower()
        from_addr = settings.mailgun_from_email
        from_domain = from_addr.split("@")[-1].lower() if "@" in from_addr else ""
        if from_domain != domain:
            # Mailgun only delivers when the sender matches the sending domain
            from_addr = f"noreply@{domain}"
        data = {
            "from": f"{settings.mailgun_from_name} <{from_addr}>",
            "to": to_email,
            "subject": subject,
            "text": text_content or "",
        }
        with httpx.Client(timeout=10.0) as client:
            r = client.post(f"{base}/v3/{domain}/messages", auth=("api", settings.mailgun_api_key), data=data)
        if 200 <= r.status_code < 300:
            return True
        log.warning("Mailgun send failed: status=%s to=%s body=%s", r.status_code, to_email, r.text[:500])
        return False
    except Exception as e:
        log.warning("Mailgun send failed: to=%s error=%s: %s", to_email, type(e).__name__, e)
        return False
