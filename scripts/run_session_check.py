"""Utility script to run the notification session check for one user."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import check_and_generate_notifications
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the session check."""

    parser = argparse.ArgumentParser(
        description="Generate the pending notifications of a campus user.",
    )
    parser.add_argument("--uid", required=True, help="Identifier (USN or email) of the user")
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Evaluate as if the current time were this ISO timestamp (default: now)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print debug logging while evaluating the rules.",
    )
    return parser.parse_args()


def main() -> None:
    """Run the rules for the requested user and print what was generated."""

    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    initialize_database()

    session = SessionLocal()
    try:
        generated = check_and_generate_notifications(session, args.uid, now=args.now)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not read or store notifications: {exc}") from exc
    finally:
        session.close()

    if not generated:
        print(f"No new notifications for {args.uid}.")
        return

    print(f"{len(generated)} new notification(s) for {args.uid}:")
    for notification in generated:
        print(f"  [{notification.type}] {notification.title}: {notification.message}")


if __name__ == "__main__":
    main()
