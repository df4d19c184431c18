"""Tests for the SQLAlchemy-backed store collaborators."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from app.domain.entities import AttendanceRecord, CampusUser, Notification, NotificationPreferences
from app.infrastructure.models import (
    AttendanceRecordModel,
    CampusUserModel,
    FeeRecordModel,
)
from app.infrastructure.repositories import (
    AttendanceRepository,
    CampusUserRepository,
    FeeRecordRepository,
    NotificationRepository,
    coerce_preferences,
)

CREATED_AT = datetime(2025, 3, 10, 12, 30, 15, 123456, tzinfo=timezone.utc)


def _notification(user_id="u1", related="approved", **overrides) -> Notification:
    values = {
        "id": f"{user_id}-approval-{related}",
        "user_id": user_id,
        "type": "approval",
        "title": "Registration Approved!",
        "message": "Your account has been approved. You now have full access.",
        "href": "/student",
        "created_at": CREATED_AT,
        "is_read": False,
    }
    values.update(overrides)
    return Notification(**values)


def test_round_trip_preserves_every_field(session) -> None:
    repository = NotificationRepository(session)
    original = _notification(href=None, is_read=True)

    repository.append_many([original])
    loaded = repository.get(original.id)

    assert loaded == original


def test_append_many_skips_identities_already_stored(session) -> None:
    repository = NotificationRepository(session)
    repository.append_many([_notification()])

    stored = repository.append_many(
        [_notification(title="changed"), _notification(related="rejection")]
    )

    assert [item.id for item in stored] == ["u1-approval-rejection"]
    assert repository.get("u1-approval-approved").title == "Registration Approved!"


def test_append_many_ignores_duplicates_within_the_batch(session) -> None:
    repository = NotificationRepository(session)

    stored = repository.append_many([_notification(), _notification()])

    assert len(stored) == 1
    assert len(repository.list_for_user("u1")) == 1


def test_list_for_user_orders_newest_first_and_filters_unread(session) -> None:
    repository = NotificationRepository(session)
    repository.append_many(
        [
            _notification(related="old", created_at=CREATED_AT - timedelta(days=1)),
            _notification(related="new", is_read=True),
            _notification(user_id="u2"),
        ]
    )

    assert [n.id for n in repository.list_for_user("u1")] == [
        "u1-approval-new",
        "u1-approval-old",
    ]
    assert [n.id for n in repository.list_for_user("u1", unread_only=True)] == [
        "u1-approval-old"
    ]
    assert repository.count_unread("u1") == 1


def test_mark_as_read_only_touches_the_owner(session) -> None:
    repository = NotificationRepository(session)
    repository.append_many([_notification(), _notification(user_id="u2")])

    updated = repository.mark_as_read(["u1-approval-approved", "u2-approval-approved"], user_id="u1")

    assert updated == 1
    assert repository.get("u1-approval-approved").is_read is True
    assert repository.get("u2-approval-approved").is_read is False


def test_mark_all_as_read_counts_only_unread_of_the_owner(session) -> None:
    repository = NotificationRepository(session)
    repository.append_many(
        [
            _notification(),
            _notification(related="rejection", is_read=True),
            _notification(user_id="u2"),
        ]
    )

    assert repository.mark_all_as_read("u1") == 1
    assert repository.count_unread("u1") == 0
    assert repository.count_unread("u2") == 1


def test_delete_for_user_clears_only_that_user(session) -> None:
    repository = NotificationRepository(session)
    repository.append_many(
        [_notification(), _notification(related="rejection"), _notification(user_id="u2")]
    )

    assert repository.delete_for_user("u1") == 2
    assert repository.list_for_user("u1") == []
    assert len(repository.list_for_user("u2")) == 1


def test_campus_user_round_trip(session) -> None:
    repository = CampusUserRepository(session)
    user = CampusUser(
        uid="1AP21CS001",
        role="student",
        is_approved=True,
        display_name="Asha",
        branch="CSE",
        semester="3rd Sem",
        notification_preferences=NotificationPreferences(fee_due=False),
    )

    repository.upsert(user)

    assert repository.get("1AP21CS001") == user


def test_malformed_preferences_fall_back_to_defaults(session) -> None:
    session.add(
        CampusUserModel(
            uid="u9",
            role="student",
            is_approved=True,
            notification_preferences=["not", "a", "mapping"],
        )
    )
    session.commit()

    user = CampusUserRepository(session).get("u9")

    assert user.notification_preferences == NotificationPreferences()


def test_coerce_preferences_keeps_only_known_boolean_flags() -> None:
    preferences = coerce_preferences(
        {"fee_due": False, "approval": "no", "news": False, "low_attendance": False}
    )

    assert preferences == NotificationPreferences(fee_due=False, low_attendance=False)


def test_malformed_fee_and_attendance_rows_are_left_out(session) -> None:
    session.add_all(
        [
            FeeRecordModel(
                id="ok",
                student_uid="u1",
                description="Tuition",
                amount=100,
                due_date=datetime(2025, 3, 12),
                status="pending",
            ),
            FeeRecordModel(
                id="bad-status",
                student_uid="u1",
                description="Bus",
                amount=100,
                due_date=datetime(2025, 3, 12),
                status="waived?",
            ),
            FeeRecordModel(
                id="no-due-date",
                student_uid="u1",
                description="Lab",
                amount=100,
                due_date=None,
                status="pending",
            ),
            AttendanceRecordModel(id="a1", student_uid="u1", status="present"),
            AttendanceRecordModel(id="a2", student_uid="u1", status="late"),
        ]
    )
    session.commit()

    assert [fee.id for fee in FeeRecordRepository(session).list()] == ["ok"]
    assert [record.id for record in AttendanceRepository(session).list()] == ["a1"]


def test_attendance_marks_keep_their_day_and_are_overwritten(session) -> None:
    repository = AttendanceRepository(session)
    mark = AttendanceRecord(
        id="u1-2025-03-03-1",
        student_uid="u1",
        status="absent",
        date=date(2025, 3, 3),
        period=1,
        subject="Maths",
    )

    repository.save_many([mark])
    repository.save_many(
        [
            AttendanceRecord(
                id=mark.id,
                student_uid="u1",
                status="present",
                date=date(2025, 3, 3),
                period=1,
                subject="Maths",
            )
        ]
    )

    (stored,) = repository.list()
    assert stored.date == date(2025, 3, 3)
    assert stored.is_present()
