"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_VOLUNTEER = "volunteer"
ROLE_NGO = "ngo"
ROLE_ADMIN = "admin"
ROLE_CORPORATE = "corporate"

USER_ROLES = (ROLE_VOLUNTEER, ROLE_NGO, ROLE_ADMIN, ROLE_CORPORATE)


@dataclass
class User:
    """Core attributes describing a platform account."""

    id: int | None
    name: str
    email: str
    password: str
    role: str
    profile_picture: str | None
    points: int
    is_active: bool
    created_at: datetime | None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role matches ``alias``."""

        return self.role.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)


__all__ = [
    "ROLE_ADMIN",
    "ROLE_CORPORATE",
    "ROLE_NGO",
    "ROLE_VOLUNTEER",
    "USER_ROLES",
    "User",
]
