"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[str] = Field(..., min_length=1, description="Notification identifiers")

    def unique_ids(self) -> list[str]:
        """Return the list of identifiers without duplicates preserving order."""

        unique: list[str] = []
        seen: set[str] = set()
        for notification_id in self.ids:
            if notification_id in seen:
                continue
            seen.add(notification_id)
            unique.append(notification_id)
        return unique


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: str
    title: str
    message: str
    href: str | None = None
    created_at: datetime
    is_read: bool = False


class NotificationCountRead(BaseModel):
    unread_count: int


class NotificationBulkResult(BaseModel):
    """Number of notifications touched by a bulk operation."""

    affected: int


__all__ = [
    "NotificationBulkResult",
    "NotificationCountRead",
    "NotificationMarkReadRequest",
    "NotificationRead",
]
