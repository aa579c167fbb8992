"""Use case for asking to join an event."""

from sqlalchemy.orm import Session

from impact_api.application.use_cases.notifications import notify_ngo_participation_request
from impact_api.domain.entities import (
    EVENT_STATUS_APPROVED,
    PARTICIPATION_STATUS_PENDING,
    PARTICIPATION_STATUS_REJECTED,
    ParticipationRequest,
)
from impact_api.domain.errors import EventNotFoundError, InvalidParticipationRequestError
from impact_api.infrastructure.repositories import (
    EventRepository,
    ParticipationRequestRepository,
    UserRepository,
)
from impact_api.utils import utc_now

from .validators import normalize_request_text


def create_participation_request(
    session: Session,
    *,
    event_id: int,
    user_id: int,
    message: str | None = None,
) -> ParticipationRequest:
    """Register a pending request from ``user_id`` to join ``event_id``.

    A previously rejected request for the same event is reopened instead of
    duplicated. The event creator is notified either way.
    """

    message = normalize_request_text(message, field="Message")

    event = EventRepository(session).get(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    if event.status != EVENT_STATUS_APPROVED:
        raise InvalidParticipationRequestError("Event is not available for participation")
    if event.date <= utc_now():
        raise InvalidParticipationRequestError("Event has already started or ended")
    if event.organization_id == user_id:
        raise InvalidParticipationRequestError(
            "Event creators cannot request participation in their own events"
        )
    if event.has_participant(user_id):
        raise InvalidParticipationRequestError("You are already participating in this event")
    if event.is_full():
        raise InvalidParticipationRequestError("Event is full")

    repository = ParticipationRequestRepository(session)
    existing = repository.get_by_event_and_user(event_id, user_id)
    if existing is not None:
        if existing.status == PARTICIPATION_STATUS_PENDING:
            raise InvalidParticipationRequestError(
                "You already have a pending participation request for this event"
            )
        if existing.status != PARTICIPATION_STATUS_REJECTED:
            raise InvalidParticipationRequestError(
                "You already have a participation request for this event"
            )
        request = repository.reopen(existing.id, message=message)
    else:
        request = repository.create(
            ParticipationRequest(
                id=None,
                event_id=event_id,
                user_id=user_id,
                event_creator_id=event.organization_id,
                status=PARTICIPATION_STATUS_PENDING,
                message=message,
                rejection_reason=None,
                created_at=None,
                updated_at=None,
            )
        )

    volunteer = UserRepository(session).get(user_id)
    if volunteer is not None:
        notify_ngo_participation_request(
            session, event=event, volunteer=volunteer, request_id=request.id
        )
    return request
