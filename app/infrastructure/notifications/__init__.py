"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    NOTIFICATIONS_UPDATED_EVENT,
    NotificationPublisher,
    dispatch_notifications_updated,
    notification_publisher,
    serialize_notification,
)

__all__ = [
    "NotificationConnectionManager",
    "notification_manager",
    "NOTIFICATIONS_UPDATED_EVENT",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notifications_updated",
    "serialize_notification",
]
