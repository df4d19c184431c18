"""Public helpers for generating and managing user notifications."""

from .inbox import (
    clear_user_notifications,
    count_unread_notifications,
    list_user_notifications,
    mark_all_notifications_as_read,
    mark_notifications_as_read,
)
from .session_check import (
    NotificationsUpdatedNotifier,
    check_and_generate_notifications,
    rule_policy_from_settings,
)

__all__ = [
    "NotificationsUpdatedNotifier",
    "check_and_generate_notifications",
    "clear_user_notifications",
    "count_unread_notifications",
    "list_user_notifications",
    "mark_all_notifications_as_read",
    "mark_notifications_as_read",
    "rule_policy_from_settings",
]
