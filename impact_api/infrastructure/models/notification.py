"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, JSON, String, Text

from impact_api.infrastructure.database import Base
from impact_api.utils import storage_now


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_read_created", "recipient_id", "read_at", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    recipient_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(50), nullable=False)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    action_url = Column(String(500), nullable=True)
    sender = Column(JSON, nullable=True)
    payload = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(
        DateTime(), nullable=False, default=storage_now, index=True
    )
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
