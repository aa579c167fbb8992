"""Delete notifications older than the configured retention window.

Meant to run periodically, e.g. from cron::

    python -m scripts.purge_notifications --days 30
"""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from impact_api.application.use_cases.notifications import purge_expired_notifications
from impact_api.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Purge expired notifications.")
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Retention window in days (default: NOTIFICATION_RETENTION_DAYS)",
    )
    return parser.parse_args()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    args = parse_args()

    initialize_database()

    session = SessionLocal()
    try:
        removed = purge_expired_notifications(session, retention_days=args.days)
    except ValueError as exc:
        raise SystemExit(f"Invalid retention window: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not purge notifications: {exc}") from exc
    finally:
        session.close()

    print(f"Removed {removed} notification(s)")


if __name__ == "__main__":
    main()
