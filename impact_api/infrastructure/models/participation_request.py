"""SQLAlchemy model for participation requests."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from impact_api.infrastructure.database import Base
from impact_api.utils import storage_now


class ParticipationRequestModel(Base):
    """Database representation of a request to join an event."""

    __tablename__ = "participation_request"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_participation_request_event_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(
        Integer, ForeignKey("event.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    event_creator_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending")
    message = Column(String(500), nullable=True)
    rejection_reason = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=storage_now)
    updated_at = Column(DateTime, nullable=True, onupdate=storage_now)


__all__ = ["ParticipationRequestModel"]
