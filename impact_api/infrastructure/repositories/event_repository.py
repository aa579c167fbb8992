"""Persistence helpers for event entities."""

from __future__ import annotations

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from impact_api.domain.entities import Event
from impact_api.infrastructure.models import EventModel, event_participant_table
from impact_api.utils import from_storage_datetime, to_storage_datetime


class EventRepository:
    """Read events and create them for seeding and tests."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, event_id: int) -> Event | None:
        model = self.session.get(EventModel, event_id, populate_existing=True)
        return self._to_entity(model) if model else None

    def create(self, event: Event) -> Event:
        model = EventModel(
            title=event.title,
            organization_id=event.organization_id,
            date=to_storage_datetime(event.date),
            status=event.status,
            max_participants=event.max_participants,
            points_offered=event.points_offered,
        )
        self.session.add(model)
        self.session.flush()
        for user_id in event.participant_ids:
            self.session.execute(
                insert(event_participant_table).values(event_id=model.id, user_id=user_id)
            )
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def participant_ids(self, event_id: int) -> list[int]:
        rows = self.session.scalars(
            select(event_participant_table.c.user_id)
            .where(event_participant_table.c.event_id == event_id)
            .order_by(event_participant_table.c.user_id)
        )
        return list(rows)

    def _to_entity(self, model: EventModel) -> Event:
        return Event(
            id=model.id,
            title=model.title,
            organization_id=model.organization_id,
            date=from_storage_datetime(model.date),
            status=model.status,
            max_participants=model.max_participants,
            points_offered=model.points_offered or 0,
            participant_ids=self.participant_ids(model.id),
        )


__all__ = ["EventRepository"]
