"""Rules that derive in-app notifications from a student's records.

The engine is a pure function: it receives the user, the current notification
log and a snapshot of the related records, and returns only the notifications
that are not in the log yet. Persisting the result and signalling observers is
left to the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from app.domain.entities import (
    NOTIFICATION_TYPE_APPROVAL,
    NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE,
    NOTIFICATION_TYPE_FEE_DUE,
    NOTIFICATION_TYPE_LOW_ATTENDANCE,
    Assignment,
    AttendanceRecord,
    CampusUser,
    FeeRecord,
    Notification,
    build_notification_id,
)

STUDENT_DASHBOARD_HREF = "/student"
ASSIGNMENTS_HREF = "/student/assignments"
FEE_DETAILS_HREF = "/student/fee-details"
ATTENDANCE_HREF = "/student/attendance"

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class RulePolicy:
    """Thresholds applied by the rules."""

    deadline_warning_days: int = 3
    low_attendance_threshold: float = 75.0


DEFAULT_POLICY = RulePolicy()


@dataclass(frozen=True)
class RuleSnapshot:
    """Flat record collections the rules filter by user, branch and semester."""

    assignments: Sequence[Assignment] = field(default_factory=tuple)
    fees: Sequence[FeeRecord] = field(default_factory=tuple)
    attendance: Sequence[AttendanceRecord] = field(default_factory=tuple)


Rule = Callable[[CampusUser, RuleSnapshot, datetime, RulePolicy], Iterable[Notification]]


def evaluate(
    user: CampusUser,
    existing_log: Iterable[Notification],
    snapshot: RuleSnapshot,
    now: datetime,
    policy: RulePolicy = DEFAULT_POLICY,
) -> list[Notification]:
    """Return the notifications for ``user`` that ``existing_log`` does not hold yet.

    Every rule runs on every call. A candidate whose identity key is already in
    the log, or was produced earlier in the same pass, is dropped.
    """

    if not user.uid:
        return []

    known_ids = {notification.id for notification in existing_log}
    generated: list[Notification] = []
    for rule in RULES:
        for candidate in rule(user, snapshot, now, policy):
            if candidate.id in known_ids:
                continue
            known_ids.add(candidate.id)
            generated.append(candidate)
    return generated


def days_until(due: datetime, now: datetime) -> int:
    """Whole days from ``now`` to ``due``, truncated toward zero."""

    due, now = _align_timezones(due, now)
    return int((due - now) / _ONE_DAY)


def check_approval_status(
    user: CampusUser, snapshot: RuleSnapshot, now: datetime, policy: RulePolicy
) -> Iterator[Notification]:
    if not user.notification_preferences.allows(NOTIFICATION_TYPE_APPROVAL):
        return

    reason = (user.rejection_reason or "").strip()
    if not user.is_approved and reason:
        yield _create_notification(
            user,
            NOTIFICATION_TYPE_APPROVAL,
            "rejection",
            title="Registration Rejected",
            message=f"Your registration was rejected. Reason: {reason}",
            href=STUDENT_DASHBOARD_HREF,
            now=now,
        )
    elif user.is_approved and user.is_student():
        # Keyed without any approval date, so a later re-approval is not announced.
        yield _create_notification(
            user,
            NOTIFICATION_TYPE_APPROVAL,
            "approved",
            title="Registration Approved!",
            message="Your account has been approved. You now have full access.",
            href=STUDENT_DASHBOARD_HREF,
            now=now,
        )


def check_assignment_deadlines(
    user: CampusUser, snapshot: RuleSnapshot, now: datetime, policy: RulePolicy
) -> Iterator[Notification]:
    if not _student_allows(user, NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE):
        return
    if not user.branch or not user.semester:
        return

    for assignment in snapshot.assignments:
        if assignment.branch != user.branch or assignment.semester != user.semester:
            continue
        if assignment.due_date is None or not assignment.id:
            continue
        remaining = days_until(assignment.due_date, now)
        if 0 <= remaining <= policy.deadline_warning_days:
            yield _create_notification(
                user,
                NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE,
                assignment.id,
                title=f"Assignment Due Soon: {assignment.title}",
                message=f"This assignment is due in {remaining + 1} day(s).",
                href=ASSIGNMENTS_HREF,
                now=now,
            )


def check_fee_due_dates(
    user: CampusUser, snapshot: RuleSnapshot, now: datetime, policy: RulePolicy
) -> Iterator[Notification]:
    if not _student_allows(user, NOTIFICATION_TYPE_FEE_DUE):
        return

    for fee in snapshot.fees:
        if fee.student_uid != user.uid or fee.is_paid():
            continue
        if fee.due_date is None or not fee.id:
            continue

        amount = format_number(fee.amount)
        due, current = _align_timezones(fee.due_date, now)
        if current > due:
            yield _create_notification(
                user,
                NOTIFICATION_TYPE_FEE_DUE,
                f"overdue-{fee.id}",
                title=f"Fee Overdue: {fee.description}",
                message=(
                    f"Your fee of ₹{amount} was due on {due.date().isoformat()}. "
                    "Please pay it as soon as possible."
                ),
                href=FEE_DETAILS_HREF,
                now=now,
            )
            continue

        remaining = days_until(due, current)
        if 0 <= remaining <= policy.deadline_warning_days:
            yield _create_notification(
                user,
                NOTIFICATION_TYPE_FEE_DUE,
                fee.id,
                title=f"Fee Reminder: {fee.description}",
                message=f"Your fee of ₹{amount} is due in {remaining + 1} day(s).",
                href=FEE_DETAILS_HREF,
                now=now,
            )


def check_low_attendance(
    user: CampusUser, snapshot: RuleSnapshot, now: datetime, policy: RulePolicy
) -> Iterator[Notification]:
    if not _student_allows(user, NOTIFICATION_TYPE_LOW_ATTENDANCE):
        return

    records = [record for record in snapshot.attendance if record.student_uid == user.uid]
    if not records:
        return

    present = sum(1 for record in records if record.is_present())
    percentage = present / len(records) * 100
    threshold = policy.low_attendance_threshold
    if percentage < threshold:
        # Singleton per user: a further decline is not announced again.
        yield _create_notification(
            user,
            NOTIFICATION_TYPE_LOW_ATTENDANCE,
            "overall-attendance-warning",
            title="Low Attendance Warning",
            message=(
                f"Your overall attendance is {percentage:.1f}%, which is below "
                f"the required {format_number(threshold)}%."
            ),
            href=ATTENDANCE_HREF,
            now=now,
        )


RULES: tuple[Rule, ...] = (
    check_approval_status,
    check_assignment_deadlines,
    check_fee_due_dates,
    check_low_attendance,
)


def format_number(value: float) -> str:
    """Render ``value`` without a trailing ``.0`` for whole amounts."""

    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.2f}"


def _student_allows(user: CampusUser, notification_type: str) -> bool:
    return user.is_student() and user.notification_preferences.allows(notification_type)


def _align_timezones(first: datetime, second: datetime) -> tuple[datetime, datetime]:
    if first.tzinfo is None and second.tzinfo is not None:
        first = first.replace(tzinfo=second.tzinfo)
    elif second.tzinfo is None and first.tzinfo is not None:
        second = second.replace(tzinfo=first.tzinfo)
    return first, second


def _create_notification(
    user: CampusUser,
    notification_type: str,
    related_id: str,
    *,
    title: str,
    message: str,
    href: str | None,
    now: datetime,
) -> Notification:
    return Notification(
        id=build_notification_id(user.uid, notification_type, related_id),
        user_id=user.uid,
        type=notification_type,
        title=title,
        message=message,
        href=href,
        created_at=now,
        is_read=False,
    )


__all__ = [
    "DEFAULT_POLICY",
    "RULES",
    "RulePolicy",
    "RuleSnapshot",
    "check_approval_status",
    "check_assignment_deadlines",
    "check_fee_due_dates",
    "check_low_attendance",
    "days_until",
    "evaluate",
    "format_number",
]
