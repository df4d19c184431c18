"""Persistence layer for portal user profiles."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import CampusUser, NotificationPreferences
from app.infrastructure.models import CampusUserModel

logger = logging.getLogger(__name__)

_PREFERENCE_KEYS = frozenset(item.name for item in fields(NotificationPreferences))


class CampusUserRepository:
    """Provide read and upsert operations for :class:`CampusUser` profiles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, uid: str) -> CampusUser | None:
        model = self.session.get(CampusUserModel, uid)
        return self._to_entity(model) if model else None

    def upsert(self, user: CampusUser) -> CampusUser:
        model = self.session.get(CampusUserModel, user.uid)
        if model is None:
            model = CampusUserModel(uid=user.uid)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: CampusUserModel, user: CampusUser) -> None:
        model.role = user.role
        model.display_name = user.display_name
        model.email = user.email
        model.is_approved = user.is_approved
        model.rejection_reason = user.rejection_reason
        model.branch = user.branch
        model.semester = user.semester
        model.notification_preferences = user.notification_preferences.as_dict()

    @staticmethod
    def _to_entity(model: CampusUserModel) -> CampusUser:
        return CampusUser(
            uid=model.uid,
            role=model.role,
            is_approved=bool(model.is_approved),
            display_name=model.display_name,
            email=model.email,
            rejection_reason=model.rejection_reason,
            branch=model.branch,
            semester=model.semester,
            notification_preferences=coerce_preferences(
                model.notification_preferences, owner=model.uid
            ),
        )


def coerce_preferences(raw: Any, *, owner: str | None = None) -> NotificationPreferences:
    """Build preferences from stored JSON, keeping defaults for anything unusable."""

    if raw is None:
        return NotificationPreferences()
    if not isinstance(raw, Mapping):
        logger.warning("Ignoring malformed notification preferences for %s", owner)
        return NotificationPreferences()

    values = {
        key: value
        for key, value in raw.items()
        if key in _PREFERENCE_KEYS and isinstance(value, bool)
    }
    return NotificationPreferences(**values)


__all__ = ["CampusUserRepository", "coerce_preferences"]
