"""Domain entities exposed by the application."""

from .assignment import Assignment
from .attendance_record import (
    ATTENDANCE_ABSENT,
    ATTENDANCE_PRESENT,
    ATTENDANCE_STATUSES,
    AttendanceRecord,
)
from .campus_user import (
    ROLE_ADMIN,
    ROLE_ALUMNI,
    ROLE_FACULTY,
    ROLE_PENDING,
    ROLE_STUDENT,
    USER_ROLES,
    CampusUser,
    NotificationPreferences,
)
from .fee_record import (
    FEE_STATUS_OVERDUE,
    FEE_STATUS_PAID,
    FEE_STATUS_PENDING,
    FEE_STATUSES,
    FeeRecord,
)
from .notification import (
    NOTIFICATION_TYPE_APPROVAL,
    NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE,
    NOTIFICATION_TYPE_FEE_DUE,
    NOTIFICATION_TYPE_LOW_ATTENDANCE,
    NOTIFICATION_TYPES,
    Notification,
    build_notification_id,
)

__all__ = [
    "Assignment",
    "ATTENDANCE_ABSENT",
    "ATTENDANCE_PRESENT",
    "ATTENDANCE_STATUSES",
    "AttendanceRecord",
    "ROLE_ADMIN",
    "ROLE_ALUMNI",
    "ROLE_FACULTY",
    "ROLE_PENDING",
    "ROLE_STUDENT",
    "USER_ROLES",
    "CampusUser",
    "NotificationPreferences",
    "FEE_STATUS_OVERDUE",
    "FEE_STATUS_PAID",
    "FEE_STATUS_PENDING",
    "FEE_STATUSES",
    "FeeRecord",
    "NOTIFICATION_TYPE_APPROVAL",
    "NOTIFICATION_TYPE_ASSIGNMENT_DEADLINE",
    "NOTIFICATION_TYPE_FEE_DUE",
    "NOTIFICATION_TYPE_LOW_ATTENDANCE",
    "NOTIFICATION_TYPES",
    "Notification",
    "build_notification_id",
]
