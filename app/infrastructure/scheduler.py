"""Background scheduler running the notification and reminder passes.

Two independent jobs share one APScheduler instance:

- the daily inactivity pass (cron trigger at the configured hour), and
- the reminder pass (interval trigger, every few minutes).

Both jobs use ``max_instances=1`` so a slow pass is never overlapped by the
next tick of the same cadence.
"""

from __future__ import annotations

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from app.application.use_cases.notifications import (
    NotificationRunError,
    NotificationRunSummary,
    generate_all_notifications,
)
from app.application.use_cases.reminders import ReminderRunSummary, process_due_reminders
from app.config import get_settings
from app.infrastructure.database import session_scope
from app.utils import get_app_timezone

logger = logging.getLogger(__name__)

DAILY_NOTIFICATIONS_JOB_ID = "generate_daily_notifications"
REMINDERS_JOB_ID = "process_due_reminders"

_scheduler: BackgroundScheduler | None = None


def run_daily_notifications() -> NotificationRunSummary | None:
    """Job wrapper for the full notification pass.

    Failures are logged and swallowed here; the next tick is the retry.
    """

    try:
        with session_scope() as session:
            summary = generate_all_notifications(session)
    except NotificationRunError:
        logger.exception("Scheduled notification pass failed")
        return None
    logger.info("Scheduled notification pass results: %s", summary.to_dict())
    return summary


def run_due_reminders() -> ReminderRunSummary:
    with session_scope() as session:
        return process_due_reminders(session)


def build_scheduler() -> BackgroundScheduler:
    """Return a scheduler with both cadence jobs registered but not started."""

    settings = get_settings()
    scheduler = BackgroundScheduler(timezone=get_app_timezone())
    scheduler.add_job(
        run_daily_notifications,
        trigger="cron",
        hour=settings.daily_notification_hour,
        minute=settings.daily_notification_minute,
        id=DAILY_NOTIFICATIONS_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.add_job(
        run_due_reminders,
        trigger="interval",
        minutes=settings.reminder_interval_minutes,
        id=REMINDERS_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    return scheduler


def start_scheduler() -> BackgroundScheduler | None:
    """Start the shared scheduler once; later calls are no-ops."""

    global _scheduler

    if not get_settings().scheduler_enabled:
        logger.info("Notification scheduler disabled via settings (SCHEDULER_ENABLED=false)")
        return None

    if _scheduler is not None:
        logger.info("Notification scheduler already running, skipping initialization")
        return _scheduler

    _scheduler = build_scheduler()
    _scheduler.start()
    settings = get_settings()
    logger.info(
        "Notification scheduler started: daily pass at %02d:%02d, reminders every %s minutes",
        settings.daily_notification_hour,
        settings.daily_notification_minute,
        settings.reminder_interval_minutes,
    )
    return _scheduler


def shutdown_scheduler() -> None:
    global _scheduler

    if _scheduler is None:
        return
    _scheduler.shutdown(wait=False)
    _scheduler = None
    logger.info("Notification scheduler stopped")


__all__ = [
    "DAILY_NOTIFICATIONS_JOB_ID",
    "REMINDERS_JOB_ID",
    "build_scheduler",
    "run_daily_notifications",
    "run_due_reminders",
    "shutdown_scheduler",
    "start_scheduler",
]
