"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from impact_api.domain.errors import ConflictError, NotFoundError


def http_error_for(exc: Exception) -> HTTPException:
    """Translate a domain error raised by a use case into an HTTP error."""

    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PermissionError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(exc))
