"""Utility helpers to push notification updates to websocket subscribers."""

from __future__ import annotations

import asyncio
from typing import Any, Sequence

from anyio import from_thread

from app.domain.entities import Notification

from .manager import NotificationConnectionManager, notification_manager

NOTIFICATIONS_UPDATED_EVENT = "notifications.updated"


class NotificationPublisher:
    """Serialize notification updates and schedule their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch_updated(
        self,
        user_id: str,
        notifications: Sequence[Notification],
        *,
        unread_count: int,
    ) -> None:
        """Tell every open connection of ``user_id`` that its inbox changed."""

        if not user_id or not self._manager.has_connections(user_id):
            return

        message = {
            "type": NOTIFICATIONS_UPDATED_EVENT,
            "data": {
                "unread_count": unread_count,
                "notifications": [self._serialize(item) for item in notifications],
            },
        }
        self._schedule_send(user_id, message)

    def _schedule_send(self, user_id: str, message: dict[str, Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Sync FastAPI routes run in an anyio worker thread.
            from_thread.run(self._manager.send_to_user, user_id, message)
        else:
            loop.create_task(self._manager.send_to_user(user_id, message))

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "user_id": notification.user_id,
            "type": notification.type,
            "title": notification.title,
            "message": notification.message,
            "href": notification.href,
            "created_at": notification.created_at.isoformat()
            if notification.created_at
            else None,
            "is_read": notification.is_read,
        }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notifications_updated(
    user_id: str, notifications: Sequence[Notification], *, unread_count: int
) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch_updated(
        user_id, notifications, unread_count=unread_count
    )


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return NotificationPublisher._serialize(notification)


__all__ = [
    "NOTIFICATIONS_UPDATED_EVENT",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notifications_updated",
    "serialize_notification",
]
