"""Shared fixtures: a fresh SQLite database per test plus user/event factories."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from impact_api.domain.entities import (
    EVENT_STATUS_APPROVED,
    ROLE_NGO,
    ROLE_VOLUNTEER,
    Event,
    User,
)
from impact_api.infrastructure import database
from impact_api.infrastructure.repositories import EventRepository, UserRepository
from impact_api.infrastructure.security import (
    create_access_token,
    get_password_hash,
    password_signature,
)

TEST_PASSWORD = "Secret123"
_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)


@pytest.fixture(autouse=True)
def setup_database() -> Iterator[None]:
    """Recreate every table before each test."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    yield
    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def session() -> Iterator[Session]:
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session: Session) -> Callable[..., User]:
    counter = {"value": 0}

    def factory(
        name: str | None = None,
        *,
        role: str = ROLE_VOLUNTEER,
        email: str | None = None,
        is_active: bool = True,
        profile_picture: str | None = None,
    ) -> User:
        counter["value"] += 1
        index = counter["value"]
        return UserRepository(session).create(
            User(
                id=None,
                name=name or f"User {index}",
                email=email or f"user{index}@example.com",
                password=_PASSWORD_HASH,
                role=role,
                profile_picture=profile_picture,
                points=0,
                is_active=is_active,
                created_at=None,
            )
        )

    return factory


@pytest.fixture()
def make_event(session: Session) -> Callable[..., Event]:
    def factory(
        organization: User,
        *,
        title: str = "Beach Cleanup",
        status: str = EVENT_STATUS_APPROVED,
        date: datetime | None = None,
        max_participants: int = 10,
        participant_ids: list[int] | None = None,
    ) -> Event:
        return EventRepository(session).create(
            Event(
                id=None,
                title=title,
                organization_id=organization.id,
                date=date or datetime.now(timezone.utc) + timedelta(days=7),
                status=status,
                max_participants=max_participants,
                participant_ids=list(participant_ids or []),
            )
        )

    return factory


@pytest.fixture()
def ngo(make_user) -> User:
    return make_user("Green Earth", role=ROLE_NGO, email="ngo@example.com")


@pytest.fixture()
def volunteer(make_user) -> User:
    return make_user("Vera Volunteer", email="vera@example.com")


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    def build(user: User) -> dict[str, str]:
        token = create_access_token(
            {
                "sub": user.email,
                "role": user.role,
                "pwd_sig": password_signature(user.password, user.is_active),
            }
        )
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture()
def client() -> Iterator[TestClient]:
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def user_password() -> str:
    """Plain-text password of every user built by ``make_user``."""

    return TEST_PASSWORD
