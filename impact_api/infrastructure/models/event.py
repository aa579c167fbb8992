"""SQLAlchemy models for events and their participants."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table

from impact_api.infrastructure.database import Base

event_participant_table = Table(
    "event_participant",
    Base.metadata,
    Column("event_id", Integer, ForeignKey("event.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True),
)


class EventModel(Base):
    """Database representation of a volunteering event."""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    organization_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    date = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    max_participants = Column(Integer, nullable=False)
    points_offered = Column(Integer, nullable=False, default=0)


__all__ = ["EventModel", "event_participant_table"]
