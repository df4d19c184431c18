"""ORM models used by the application infrastructure."""

from .assignment import AssignmentModel
from .attendance_record import AttendanceRecordModel
from .campus_user import CampusUserModel
from .fee_record import FeeRecordModel
from .notification import NotificationModel

__all__ = [
    "AssignmentModel",
    "AttendanceRecordModel",
    "CampusUserModel",
    "FeeRecordModel",
    "NotificationModel",
]
