"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from impact_api.domain.entities import User
from impact_api.infrastructure.models import UserModel


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self.session.scalar(
            select(UserModel).where(UserModel.email == email.strip().lower())
        )
        return self._to_entity(model) if model else None

    def list_active_by_role(self, role: str) -> Sequence[User]:
        query = (
            select(UserModel)
            .where(UserModel.role == role, UserModel.is_active.is_(True))
            .order_by(UserModel.id)
        )
        return [self._to_entity(model) for model in self.session.scalars(query).all()]

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def add_points(self, user_id: int, points: int) -> User:
        """Atomically increment the points balance of ``user_id``."""

        result = self.session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(points=UserModel.points + points)
            .execution_options(synchronize_session=False)
        )
        if not result.rowcount:
            self.session.rollback()
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.commit()
        model = self.session.get(UserModel, user_id, populate_existing=True)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email.strip().lower()
        model.password = user.password
        model.role = user.role
        model.profile_picture = user.profile_picture
        model.points = user.points
        model.is_active = user.is_active

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            role=model.role,
            profile_picture=model.profile_picture,
            points=model.points or 0,
            is_active=bool(model.is_active),
            created_at=model.created_at,
        )


__all__ = ["UserRepository"]
