"""Use case for creating users."""

from sqlalchemy.orm import Session

from impact_api.domain.entities import USER_ROLES, User
from impact_api.infrastructure.repositories import UserRepository
from impact_api.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: str,
    profile_picture: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    role_alias = role.strip().lower()
    if role_alias not in USER_ROLES:
        raise ValueError("Role not allowed")

    user = User(
        id=None,
        name=name,
        email=email,
        password=get_password_hash(password),
        role=role_alias,
        profile_picture=profile_picture,
        points=0,
        is_active=True,
        created_at=None,
    )
    return repository.create(user)
