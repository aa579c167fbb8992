"""Persistence helpers for participation requests."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from impact_api.domain.entities import (
    PARTICIPATION_STATUS_ACCEPTED,
    PARTICIPATION_STATUS_PENDING,
    PARTICIPATION_STATUS_REJECTED,
    ParticipationRequest,
)
from impact_api.domain.errors import InvalidParticipationRequestError
from impact_api.infrastructure.models import (
    EventModel,
    ParticipationRequestModel,
    event_participant_table,
)
from impact_api.utils import from_storage_datetime, storage_now, to_storage_datetime


class ParticipationRequestRepository:
    """Provide storage operations for :class:`ParticipationRequest` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, request_id: int) -> ParticipationRequest | None:
        model = self.session.get(ParticipationRequestModel, request_id, populate_existing=True)
        return self._to_entity(model) if model else None

    def get_by_event_and_user(self, event_id: int, user_id: int) -> ParticipationRequest | None:
        model = self.session.scalar(
            select(ParticipationRequestModel).where(
                ParticipationRequestModel.event_id == event_id,
                ParticipationRequestModel.user_id == user_id,
            )
        )
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        event_creator_id: int | None = None,
        user_id: int | None = None,
        event_id: int | None = None,
        status: str | None = None,
    ) -> Sequence[ParticipationRequest]:
        query = select(ParticipationRequestModel)
        if event_creator_id is not None:
            query = query.where(ParticipationRequestModel.event_creator_id == event_creator_id)
        if user_id is not None:
            query = query.where(ParticipationRequestModel.user_id == user_id)
        if event_id is not None:
            query = query.where(ParticipationRequestModel.event_id == event_id)
        if status is not None:
            query = query.where(ParticipationRequestModel.status == status)
        query = query.order_by(
            ParticipationRequestModel.created_at.desc(), ParticipationRequestModel.id.desc()
        )
        return [self._to_entity(model) for model in self.session.scalars(query).all()]

    def count_by_status(self, *, event_creator_id: int) -> dict[str, int]:
        rows = self.session.execute(
            select(ParticipationRequestModel.status, func.count())
            .where(ParticipationRequestModel.event_creator_id == event_creator_id)
            .group_by(ParticipationRequestModel.status)
        ).all()
        return {status: int(count) for status, count in rows}

    def create(self, request: ParticipationRequest) -> ParticipationRequest:
        """Insert ``request``; a second row for the same event and user is refused."""

        model = ParticipationRequestModel(
            event_id=request.event_id,
            user_id=request.user_id,
            event_creator_id=request.event_creator_id,
            status=request.status,
            message=request.message,
            rejection_reason=request.rejection_reason,
            created_at=to_storage_datetime(request.created_at) or storage_now(),
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise InvalidParticipationRequestError(
                "You already have a participation request for this event"
            ) from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def reopen(self, request_id: int, *, message: str | None) -> ParticipationRequest:
        """Move a rejected request back to ``pending`` with a new message."""

        self.session.execute(
            update(ParticipationRequestModel)
            .where(
                ParticipationRequestModel.id == request_id,
                ParticipationRequestModel.status == PARTICIPATION_STATUS_REJECTED,
            )
            .values(
                status=PARTICIPATION_STATUS_PENDING,
                message=message,
                rejection_reason=None,
                updated_at=storage_now(),
            )
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        return self.get(request_id)

    def accept_pending(self, request: ParticipationRequest) -> bool:
        """Accept ``request`` and register the volunteer as participant.

        Both writes share one transaction. Returns ``False`` without touching
        anything when the request is no longer pending. Capacity is counted
        again inside that transaction; a full event rolls the decision back
        and raises :class:`InvalidParticipationRequestError`.
        """

        if not self._transition_from_pending(request.id, PARTICIPATION_STATUS_ACCEPTED):
            self.session.rollback()
            return False
        already_joined = self.session.scalar(
            select(func.count())
            .select_from(event_participant_table)
            .where(
                event_participant_table.c.event_id == request.event_id,
                event_participant_table.c.user_id == request.user_id,
            )
        )
        if not already_joined:
            if self._event_is_full(request.event_id):
                self.session.rollback()
                raise InvalidParticipationRequestError("Event is full")
            self.session.execute(
                insert(event_participant_table).values(
                    event_id=request.event_id, user_id=request.user_id
                )
            )
        self.session.commit()
        return True

    def reject_pending(self, request: ParticipationRequest, *, reason: str | None) -> bool:
        """Reject ``request`` storing ``reason``; ``False`` if already decided."""

        changed = self._transition_from_pending(
            request.id, PARTICIPATION_STATUS_REJECTED, rejection_reason=reason
        )
        if not changed:
            self.session.rollback()
            return False
        self.session.commit()
        return True

    def delete_pending(self, request_id: int) -> bool:
        model = self.session.get(ParticipationRequestModel, request_id)
        if model is None or model.status != PARTICIPATION_STATUS_PENDING:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def _event_is_full(self, event_id: int) -> bool:
        capacity = self.session.scalar(
            select(EventModel.max_participants).where(EventModel.id == event_id)
        )
        joined = self.session.scalar(
            select(func.count())
            .select_from(event_participant_table)
            .where(event_participant_table.c.event_id == event_id)
        )
        return capacity is not None and joined >= capacity

    def _transition_from_pending(self, request_id: int | None, status: str, **values) -> bool:
        result = self.session.execute(
            update(ParticipationRequestModel)
            .where(
                ParticipationRequestModel.id == request_id,
                ParticipationRequestModel.status == PARTICIPATION_STATUS_PENDING,
            )
            .values(
                status=status,
                updated_at=storage_now(),
                **values,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    @staticmethod
    def _to_entity(model: ParticipationRequestModel) -> ParticipationRequest:
        return ParticipationRequest(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            event_creator_id=model.event_creator_id,
            status=model.status,
            message=model.message,
            rejection_reason=model.rejection_reason,
            created_at=from_storage_datetime(model.created_at),
            updated_at=from_storage_datetime(model.updated_at),
        )


__all__ = ["ParticipationRequestRepository"]
