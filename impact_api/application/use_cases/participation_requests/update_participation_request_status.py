"""Use case for accepting or rejecting a participation request."""

import logging

from sqlalchemy.orm import Session

from impact_api.application.use_cases.notifications import (
    notify_volunteer_participation_accepted,
    notify_volunteer_participation_rejected,
)
from impact_api.domain.entities import (
    PARTICIPATION_DECISIONS,
    PARTICIPATION_STATUS_ACCEPTED,
    ParticipationRequest,
)
from impact_api.domain.errors import (
    EventNotFoundError,
    InvalidParticipationRequestError,
    ParticipationRequestAlreadyProcessedError,
    ParticipationRequestForbiddenError,
    ParticipationRequestNotFoundError,
)
from impact_api.infrastructure.email import send_participation_decision_email
from impact_api.infrastructure.repositories import (
    EventRepository,
    ParticipationRequestRepository,
    UserRepository,
)

from .validators import normalize_request_text

logger = logging.getLogger(__name__)


def update_participation_request_status(
    session: Session,
    *,
    request_id: int,
    status: str,
    event_creator_id: int,
    rejection_reason: str | None = None,
) -> ParticipationRequest:
    """Move a pending request to ``accepted`` or ``rejected``.

    The transition happens at most once: the status column is only updated
    while it still reads ``pending``, so a duplicate or concurrent decision
    raises :class:`ParticipationRequestAlreadyProcessedError` and produces no
    side effects. A successful decision emits exactly one notification to the
    volunteer.
    """

    if status not in PARTICIPATION_DECISIONS:
        raise InvalidParticipationRequestError("Invalid status value")

    repository = ParticipationRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise ParticipationRequestNotFoundError(request_id)
    if request.event_creator_id != event_creator_id:
        raise ParticipationRequestForbiddenError(
            "You are not authorized to update this participation request"
        )
    if not request.is_pending():
        raise ParticipationRequestAlreadyProcessedError(request_id, request.status)

    event = EventRepository(session).get(request.event_id)
    if event is None:
        raise EventNotFoundError(request.event_id)

    accepted = status == PARTICIPATION_STATUS_ACCEPTED
    reason = None
    if accepted:
        if event.has_participant(request.user_id):
            raise InvalidParticipationRequestError("User is already a participant")
        if event.is_full():
            raise InvalidParticipationRequestError("Event is full")
        changed = repository.accept_pending(request)
    else:
        reason = normalize_request_text(rejection_reason, field="Rejection reason")
        changed = repository.reject_pending(request, reason=reason)

    if not changed:
        current = repository.get(request_id)
        raise ParticipationRequestAlreadyProcessedError(
            request_id, current.status if current else request.status
        )

    decided_by = UserRepository(session).get(event_creator_id)
    if accepted:
        notify_volunteer_participation_accepted(
            session,
            volunteer_id=request.user_id,
            event=event,
            request_id=request.id,
            decided_by=decided_by,
        )
    else:
        notify_volunteer_participation_rejected(
            session,
            volunteer_id=request.user_id,
            event=event,
            request_id=request.id,
            reason=reason,
            decided_by=decided_by,
        )

    volunteer = UserRepository(session).get(request.user_id)
    if volunteer is not None and not send_participation_decision_email(
        volunteer.email,
        volunteer_name=volunteer.name,
        event_title=event.title,
        accepted=accepted,
        reason=reason,
        event_date=event.date,
    ):
        logger.info("Decision email for request %s was not sent", request_id)

    return repository.get(request_id)
