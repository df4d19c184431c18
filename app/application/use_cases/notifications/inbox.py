"""Use cases for reading and acknowledging a user's notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def list_user_notifications(
    session: Session,
    user_id: str,
    *,
    limit: int | None = 50,
    unread_only: bool = False,
) -> Sequence[Notification]:
    """Return the notifications of ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(
        user_id, limit=limit, unread_only=unread_only
    )


def count_unread_notifications(session: Session, user_id: str) -> int:
    """Return the number shown on the unread badge."""

    return NotificationRepository(session).count_unread(user_id)


def mark_notifications_as_read(
    session: Session, user_id: str, notification_ids: Iterable[str]
) -> int:
    """Flag the given notifications of ``user_id`` as read."""

    return NotificationRepository(session).mark_as_read(notification_ids, user_id=user_id)


def mark_all_notifications_as_read(session: Session, user_id: str) -> int:
    """Flag every unread notification of ``user_id`` as read, as opening the inbox does."""

    updated = NotificationRepository(session).mark_all_as_read(user_id)
    logger.debug("Marked %d notification(s) as read for %s", updated, user_id)
    return updated


def clear_user_notifications(session: Session, user_id: str) -> int:
    """Delete every notification of ``user_id`` and return how many were removed."""

    deleted = NotificationRepository(session).delete_for_user(user_id)
    logger.info("Cleared %d notification(s) for %s", deleted, user_id)
    return deleted


__all__ = [
    "clear_user_notifications",
    "count_unread_notifications",
    "list_user_notifications",
    "mark_all_notifications_as_read",
    "mark_notifications_as_read",
]
