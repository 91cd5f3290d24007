"""Owner notifications: list, unread badge count, mark read."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_user
from app.models.notification import Notification
from app.models.user import User
from app.schemas.notification import NotificationResponse, UnreadCount
from app.services import notifications

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return [NotificationResponse.model_validate(n) for n in notifications.list_for_user(db, current_user.id)]


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return UnreadCount(count=notifications.count_unread(db, current_user.id))


@router.put("/read-all")
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    updated = notifications.mark_all_read(db, current_user.id)
    return {"status": "ok", "updated": updated}


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    entry = db.query(Notification).filter(Notification.id == notification_id).first()
    if not entry or entry.user_id != current_user.id:
        raise HTTPException(status_code=404, detail="Notification not found")
    return NotificationResponse.model_validate(notifications.mark_read(db, notification_id))
