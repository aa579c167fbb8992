"""Domain errors raised by the application use cases.

Every error derives from ``ValueError`` (or ``PermissionError`` for
authorization failures) so callers that only care about "the request was
invalid" can keep catching the builtin types.
"""

from __future__ import annotations


class NotFoundError(ValueError):
    """The referenced resource does not exist for the caller."""


class ConflictError(ValueError):
    """The resource is in a state that does not allow the operation."""


class NotificationNotFoundError(NotFoundError):
    """Notification missing or owned by another recipient."""

    def __init__(self, notification_id: int) -> None:
        super().__init__("Notification not found")
        self.notification_id = notification_id


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: int) -> None:
        super().__init__("Event not found")
        self.event_id = event_id


class ParticipationRequestNotFoundError(NotFoundError):
    def __init__(self, request_id: int) -> None:
        super().__init__("Participation request not found")
        self.request_id = request_id


class InvalidParticipationRequestError(ValueError):
    """The participation request violates a business rule."""


class ParticipationRequestAlreadyProcessedError(ConflictError):
    """Accept/reject was attempted on a request that is no longer pending."""

    def __init__(self, request_id: int, status: str) -> None:
        super().__init__("This participation request has already been processed")
        self.request_id = request_id
        self.status = status


class ParticipationRequestForbiddenError(PermissionError):
    """The caller is not allowed to act on the participation request."""


__all__ = [
    "ConflictError",
    "EventNotFoundError",
    "InvalidParticipationRequestError",
    "NotFoundError",
    "NotificationNotFoundError",
    "ParticipationRequestAlreadyProcessedError",
    "ParticipationRequestForbiddenError",
    "ParticipationRequestNotFoundError",
]
