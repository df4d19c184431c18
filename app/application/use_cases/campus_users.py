"""Use cases for registering portal users and their notification settings."""

from __future__ import annotations

from typing import Mapping

from sqlalchemy.orm import Session

from app.domain.entities import USER_ROLES, CampusUser, NotificationPreferences
from app.infrastructure.repositories import CampusUserRepository


def upsert_campus_user(
    session: Session,
    *,
    uid: str,
    role: str,
    is_approved: bool = False,
    display_name: str | None = None,
    email: str | None = None,
    rejection_reason: str | None = None,
    branch: str | None = None,
    semester: str | None = None,
    notification_preferences: Mapping[str, bool] | None = None,
) -> CampusUser:
    """Create the profile identified by ``uid`` or replace the stored one."""

    normalized_uid = (uid or "").strip()
    if not normalized_uid:
        raise ValueError("The user identifier cannot be empty")
    normalized_role = (role or "").strip().lower()
    if normalized_role not in USER_ROLES:
        raise ValueError(f"Unsupported role '{role}'")

    repository = CampusUserRepository(session)
    if notification_preferences is None:
        existing = repository.get(normalized_uid)
        preferences = (
            existing.notification_preferences if existing else NotificationPreferences()
        )
    else:
        preferences = NotificationPreferences(**dict(notification_preferences))

    user = CampusUser(
        uid=normalized_uid,
        role=normalized_role,
        is_approved=is_approved,
        display_name=display_name,
        email=email,
        rejection_reason=(rejection_reason or "").strip() or None,
        branch=branch,
        semester=semester,
        notification_preferences=preferences,
    )
    return repository.upsert(user)


def get_campus_user(session: Session, uid: str) -> CampusUser:
    """Return the requested profile or raise an error if it does not exist."""

    user = CampusUserRepository(session).get(uid)
    if user is None:
        raise ValueError("Campus user not found")
    return user


def update_notification_preferences(
    session: Session, uid: str, changes: Mapping[str, bool]
) -> CampusUser:
    """Apply the provided per-type switches and keep the others untouched."""

    user = get_campus_user(session, uid)
    merged = {**user.notification_preferences.as_dict(), **dict(changes)}
    user.notification_preferences = NotificationPreferences(**merged)
    return CampusUserRepository(session).upsert(user)


__all__ = ["get_campus_user", "update_notification_preferences", "upsert_campus_user"]
