"""Repository implementations for infrastructure layer."""

from .assignment_repository import AssignmentRepository
from .attendance_repository import AttendanceRepository
from .campus_user_repository import CampusUserRepository, coerce_preferences
from .fee_record_repository import FeeRecordRepository
from .notification_repository import NotificationRepository

__all__ = [
    "AssignmentRepository",
    "AttendanceRepository",
    "CampusUserRepository",
    "FeeRecordRepository",
    "NotificationRepository",
    "coerce_preferences",
]
