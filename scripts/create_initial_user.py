"""Utility script to create an initial user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from impact_api.application.use_cases.users import create_user
from impact_api.domain.entities import ROLE_ADMIN, USER_ROLES
from impact_api.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the Impact API application.",
    )
    parser.add_argument("--name", default="Administrator", help="Display name of the user")
    parser.add_argument("--email", default="admin@example.com", help="Login email address")
    parser.add_argument(
        "--role",
        default=ROLE_ADMIN,
        choices=USER_ROLES,
        help=f"Role assigned to the user (default: {ROLE_ADMIN})",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="User password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role=args.role,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
