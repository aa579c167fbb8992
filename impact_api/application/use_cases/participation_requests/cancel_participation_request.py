"""Use case for withdrawing a pending participation request."""

from sqlalchemy.orm import Session

from impact_api.domain.errors import (
    InvalidParticipationRequestError,
    ParticipationRequestForbiddenError,
    ParticipationRequestNotFoundError,
)
from impact_api.infrastructure.repositories import ParticipationRequestRepository


def cancel_participation_request(session: Session, *, request_id: int, user_id: int) -> None:
    """Delete the pending request ``request_id`` made by ``user_id``."""

    repository = ParticipationRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise ParticipationRequestNotFoundError(request_id)
    if request.user_id != user_id:
        raise ParticipationRequestForbiddenError(
            "You are not authorized to cancel this participation request"
        )
    if not request.is_pending() or not repository.delete_pending(request_id):
        raise InvalidParticipationRequestError("This participation request cannot be cancelled")
