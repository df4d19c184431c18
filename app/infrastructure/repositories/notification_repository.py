"""Persistence helpers for notification entities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.models import NotificationModel
from app.utils import campus_now, from_storage, to_storage

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Provide append, read-state and bulk delete operations for notifications."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: int | None = 50,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def count_unread(self, user_id: str) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .count()
        )

    def append_many(self, notifications: Iterable[Notification]) -> list[Notification]:
        """Insert ``notifications`` whose identity key is not stored yet.

        Returns the notifications that were actually written. Keys that already
        exist, including ones written concurrently by another session, are
        skipped.
        """

        candidates: dict[str, Notification] = {}
        for notification in notifications:
            candidates.setdefault(notification.id, notification)
        if not candidates:
            return []

        existing = {
            row.id
            for row in self.session.query(NotificationModel.id)
            .filter(NotificationModel.id.in_(list(candidates)))
            .all()
        }
        pending = [item for key, item in candidates.items() if key not in existing]
        if not pending:
            return []

        for notification in pending:
            self.session.add(self._to_model(notification))
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.info(
                "Concurrent notification insert detected; retrying %d rows one by one",
                len(pending),
            )
            return self._append_one_by_one(pending)
        return pending

    def mark_as_read(self, notification_ids: Iterable[str], *, user_id: str) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, user_id: str) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def delete_for_user(self, user_id: str) -> int:
        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    def _append_one_by_one(self, notifications: Sequence[Notification]) -> list[Notification]:
        stored: list[Notification] = []
        for notification in notifications:
            self.session.add(self._to_model(notification))
            try:
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                logger.debug("Notification %s already stored, skipping", notification.id)
                continue
            stored.append(notification)
        return stored

    @staticmethod
    def _to_model(notification: Notification) -> NotificationModel:
        return NotificationModel(
            id=notification.id,
            user_id=notification.user_id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            href=notification.href,
            created_at=to_storage(notification.created_at or campus_now()),
            is_read=bool(notification.is_read),
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            title=model.title,
            message=model.message,
            href=model.href,
            created_at=from_storage(model.created_at),
            is_read=bool(model.is_read),
        )


__all__ = ["NotificationRepository"]
