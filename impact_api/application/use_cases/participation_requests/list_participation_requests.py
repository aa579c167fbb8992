"""Use cases for browsing participation requests."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from impact_api.domain.entities import (
    PARTICIPATION_STATUS_ACCEPTED,
    PARTICIPATION_STATUS_PENDING,
    PARTICIPATION_STATUS_REJECTED,
    ParticipationRequest,
)
from impact_api.domain.errors import EventNotFoundError, ParticipationRequestForbiddenError
from impact_api.infrastructure.repositories import (
    EventRepository,
    ParticipationRequestRepository,
)


def list_requests_for_creator(
    session: Session, *, event_creator_id: int, status: str | None = PARTICIPATION_STATUS_PENDING
) -> Sequence[ParticipationRequest]:
    """Requests addressed to the events of ``event_creator_id``."""

    return ParticipationRequestRepository(session).list(
        event_creator_id=event_creator_id, status=status
    )


def list_requests_by_user(
    session: Session, *, user_id: int, status: str | None = None
) -> Sequence[ParticipationRequest]:
    """Requests made by ``user_id``."""

    return ParticipationRequestRepository(session).list(user_id=user_id, status=status)


def list_requests_for_event(
    session: Session, *, event_id: int, requested_by: int, status: str | None = None
) -> Sequence[ParticipationRequest]:
    """Requests for one event; only its creator may look at them."""

    event = EventRepository(session).get(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    if event.organization_id != requested_by:
        raise ParticipationRequestForbiddenError(
            "You are not authorized to view these participation requests"
        )
    return ParticipationRequestRepository(session).list(event_id=event_id, status=status)


def get_participation_request_stats(session: Session, *, event_creator_id: int) -> dict[str, int]:
    counts = ParticipationRequestRepository(session).count_by_status(
        event_creator_id=event_creator_id
    )
    stats = {
        PARTICIPATION_STATUS_PENDING: counts.get(PARTICIPATION_STATUS_PENDING, 0),
        PARTICIPATION_STATUS_ACCEPTED: counts.get(PARTICIPATION_STATUS_ACCEPTED, 0),
        PARTICIPATION_STATUS_REJECTED: counts.get(PARTICIPATION_STATUS_REJECTED, 0),
    }
    stats["total"] = sum(stats.values())
    return stats
