"""Use case for crediting volunteer points."""

from sqlalchemy.orm import Session

from impact_api.application.use_cases.notifications import notify_volunteer_points_awarded
from impact_api.domain.entities import User
from impact_api.infrastructure.repositories import UserRepository


def award_points(
    session: Session,
    *,
    user_id: int,
    points: int,
    event_id: int | None,
    event_title: str,
) -> User:
    """Add ``points`` to the user's balance and tell them about it."""

    if points <= 0:
        raise ValueError("Points must be a positive number")

    user = UserRepository(session).add_points(user_id, points)
    notify_volunteer_points_awarded(
        session,
        volunteer_id=user_id,
        event_id=event_id,
        event_title=event_title,
        points=points,
    )
    return user
