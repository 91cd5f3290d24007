"""Append-only audit log of permit status changes.
No updates or deletes - every record is permanent."""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from app.database import Base


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)

    # ON DELETE SET NULL so deleting a boarding house does not fail; meta keeps its name
    boarding_house_id = Column(Integer, ForeignKey("boarding_houses.id", ondelete="SET NULL"), nullable=True, index=True)

    # category: permit_verified | permit_rejected | permit_reevaluated
    category = Column(String(32), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)

    # Optional structured data (old_status, new_status, is_active, ...)
    meta = Column(JSON, nullable=True)

    actor_user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    actor_email = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
