"""Use case that derives and stores notifications when a user session is checked."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol, Sequence

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Notification
from app.domain.notification_rules import RulePolicy, RuleSnapshot, evaluate
from app.infrastructure.notifications import dispatch_notifications_updated
from app.infrastructure.repositories import (
    AssignmentRepository,
    AttendanceRepository,
    CampusUserRepository,
    FeeRecordRepository,
    NotificationRepository,
)
from app.utils import as_campus_time, campus_now

logger = logging.getLogger(__name__)


class NotificationsUpdatedNotifier(Protocol):
    def __call__(
        self, user_id: str, notifications: Sequence[Notification], *, unread_count: int
    ) -> None: ...


def rule_policy_from_settings() -> RulePolicy:
    """Return the rule thresholds configured for this deployment."""

    settings = get_settings()
    return RulePolicy(
        deadline_warning_days=settings.deadline_warning_days,
        low_attendance_threshold=settings.low_attendance_threshold,
    )


def check_and_generate_notifications(
    session: Session,
    user_id: str,
    *,
    now: datetime | None = None,
    notifier: NotificationsUpdatedNotifier = dispatch_notifications_updated,
) -> list[Notification]:
    """Run every notification rule for ``user_id`` and store what is new.

    ``notifier`` is called once, after the write, and only when at least one
    notification was stored.
    """

    user = CampusUserRepository(session).get(user_id)
    if user is None:
        logger.debug("Skipping notification check for unknown user %s", user_id)
        return []

    notification_repository = NotificationRepository(session)
    existing_log = notification_repository.list_for_user(user_id, limit=None)
    snapshot = RuleSnapshot(
        assignments=AssignmentRepository(session).list(),
        fees=FeeRecordRepository(session).list(),
        attendance=AttendanceRepository(session).list(),
    )
    current_time = as_campus_time(now) if now is not None else campus_now()

    candidates = evaluate(
        user, existing_log, snapshot, current_time, rule_policy_from_settings()
    )
    if not candidates:
        logger.debug("No new notifications for %s", user_id)
        return []

    stored = notification_repository.append_many(candidates)
    if stored:
        logger.info("Generated %d notification(s) for %s", len(stored), user_id)
        notifier(
            user_id,
            stored,
            unread_count=notification_repository.count_unread(user_id),
        )
    return stored


__all__ = [
    "NotificationsUpdatedNotifier",
    "check_and_generate_notifications",
    "rule_policy_from_settings",
]
