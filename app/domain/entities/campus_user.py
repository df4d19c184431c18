"""Domain entities describing a portal user and their notification settings."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

ROLE_STUDENT = "student"
ROLE_FACULTY = "faculty"
ROLE_ADMIN = "admin"
ROLE_ALUMNI = "alumni"
ROLE_PENDING = "pending"

USER_ROLES: frozenset[str] = frozenset(
    {ROLE_STUDENT, ROLE_FACULTY, ROLE_ADMIN, ROLE_ALUMNI, ROLE_PENDING}
)


@dataclass(frozen=True)
class NotificationPreferences:
    """Per-type switches for system notifications. Every type is on by default."""

    approval: bool = True
    assignment_deadline: bool = True
    fee_due: bool = True
    low_attendance: bool = True

    def allows(self, notification_type: str) -> bool:
        """Return ``True`` unless ``notification_type`` was explicitly disabled."""

        return bool(getattr(self, notification_type, True))

    def as_dict(self) -> dict[str, bool]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass
class CampusUser:
    """Snapshot of the profile used to derive notifications for a user."""

    uid: str
    role: str
    is_approved: bool
    display_name: str | None = None
    email: str | None = None
    rejection_reason: str | None = None
    branch: str | None = None
    semester: str | None = None
    notification_preferences: NotificationPreferences = field(
        default_factory=NotificationPreferences
    )

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return (self.role or "").lower() == role.lower()

    def is_student(self) -> bool:
        return self.has_role(ROLE_STUDENT)


__all__ = [
    "ROLE_STUDENT",
    "ROLE_FACULTY",
    "ROLE_ADMIN",
    "ROLE_ALUMNI",
    "ROLE_PENDING",
    "USER_ROLES",
    "CampusUser",
    "NotificationPreferences",
]
