"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .award_points import award_points
from .create_user import create_user

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "award_points",
    "create_user",
]
