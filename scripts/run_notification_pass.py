"""Run the notification or reminder pass once from the command line.

Suitable for an external cron when the in-process scheduler is disabled.
"""

from __future__ import annotations

import argparse
import json
import logging

from app.application.use_cases.notifications import (
    NotificationRunError,
    generate_all_notifications,
)
from app.application.use_cases.reminders import process_due_reminders
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        description="Run the inactivity notification pass or the reminder pass once.",
    )
    parser.add_argument(
        "pass_name",
        choices=("notifications", "reminders"),
        help="Which pass to execute",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    initialize_database()

    session = SessionLocal()
    try:
        if args.pass_name == "notifications":
            result = generate_all_notifications(session).to_dict()
        else:
            result = process_due_reminders(session).to_dict()
    except NotificationRunError as exc:
        raise SystemExit(f"Notification pass failed: {exc}") from exc
    finally:
        session.close()

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
