"""Common validation helpers for participation request use cases."""

from impact_api.domain.entities import MAX_REQUEST_TEXT_LENGTH
from impact_api.domain.errors import InvalidParticipationRequestError


def normalize_request_text(value: str | None, *, field: str) -> str | None:
    """Return ``value`` stripped, ``None`` when blank.

    Raises :class:`InvalidParticipationRequestError` when the text exceeds
    ``MAX_REQUEST_TEXT_LENGTH`` characters.
    """

    if value is None:
        return None
    normalized = value.strip()
    if not normalized:
        return None
    if len(normalized) > MAX_REQUEST_TEXT_LENGTH:
        raise InvalidParticipationRequestError(
            f"{field} cannot exceed {MAX_REQUEST_TEXT_LENGTH} characters"
        )
    return normalized
