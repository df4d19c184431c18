"""Domain entity representing an in-app notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_APPROVAL = "approval"
NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE = "assignment_deadline"
NOTIFICATION_TYPE_FEE_DUE = "fee_due"
NOTIFICATION_TYPE_LOW_ATTENDANCE = "low_attendance"

NOTIFICATION_TYPES: frozenset[str] = frozenset(
    {
        NOTIFICATION_TYPE_APPROVAL,
        NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE,
        NOTIFICATION_TYPE_FEE_DUE,
        NOTIFICATION_TYPE_LOW_ATTENDANCE,
    }
)


def build_notification_id(user_id: str, notification_type: str, related_id: str) -> str:
    """Return the identity key shared by every derivation of the same notification."""

    return f"{user_id}-{notification_type}-{related_id}"


@dataclass
class Notification:
    """Information message delivered to a specific campus user.

    ``id`` is deterministic (see :func:`build_notification_id`), so deriving the
    same notification twice yields the same key and the second copy is dropped.
    """

    id: str
    user_id: str
    type: str
    title: str
    message: str
    href: str | None
    created_at: datetime
    is_read: bool = False


__all__ = [
    "NOTIFICATION_TYPE_APPROVAL",
    "NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE",
    "NOTIFICATION_TYPE_FEE_DUE",
    "NOTIFICATION_TYPE_LOW_ATTENDANCE",
    "NOTIFICATION_TYPES",
    "Notification",
    "build_notification_id",
]
