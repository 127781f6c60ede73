"""Notification engine: inactivity scans, retention sweep and inbox helpers."""

from .cleanup import CleanupResult, cleanup_old_notifications
from .emitter import (
    build_inactivity_notification,
    build_reminder_notification,
    emit_inactivity_notification,
    inactivity_kind,
    stage_reminder_notification,
)
from .generate import (
    NotificationRunError,
    NotificationRunSummary,
    generate_all_notifications,
)
from .inactivity import (
    InactivityCounts,
    ScanOutcome,
    find_inactive_chats,
    generate_inactivity_notifications,
    notification_exists_today,
    scan_inactive_chats,
)
from .inbox import (
    NotificationStats,
    create_notification,
    delete_notification,
    get_notification_stats,
    list_all_notifications,
    list_user_notifications,
    mark_notification_read,
)

__all__ = [
    "CleanupResult",
    "cleanup_old_notifications",
    "build_inactivity_notification",
    "build_reminder_notification",
    "emit_inactivity_notification",
    "inactivity_kind",
    "stage_reminder_notification",
    "NotificationRunError",
    "NotificationRunSummary",
    "generate_all_notifications",
    "InactivityCounts",
    "ScanOutcome",
    "find_inactive_chats",
    "generate_inactivity_notifications",
    "notification_exists_today",
    "scan_inactive_chats",
    "NotificationStats",
    "create_notification",
    "delete_notification",
    "get_notification_stats",
    "list_all_notifications",
    "list_user_notifications",
    "mark_notification_read",
]
