"""Notification schemas."""
from datetime import datetime
from pydantic import BaseModel
from app.models.notification import NotificationType


class NotificationResponse(BaseModel):
    id: int
    user_id: int
    title: str
    message: str
    type: NotificationType
    is_read: bool
    related_id: int | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class UnreadCount(BaseModel):
    count: int
