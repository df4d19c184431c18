from .campus_user import (
    CampusUserRead,
    CampusUserUpsert,
    NotificationPreferencesSchema,
    NotificationPreferencesUpdate,
)
from .notification import (
    NotificationBulkResult,
    NotificationCountRead,
    NotificationMarkReadRequest,
    NotificationRead,
)
from .records import (
    AssignmentCreate,
    AssignmentRead,
    AttendanceCreate,
    AttendanceMarkItem,
    AttendanceRecordRead,
    FeeRecordCreate,
    FeeRecordRead,
    FeeStatusUpdate,
)

__all__ = [
    "AssignmentCreate",
    "AssignmentRead",
    "AttendanceCreate",
    "AttendanceMarkItem",
    "AttendanceRecordRead",
    "CampusUserRead",
    "CampusUserUpsert",
    "FeeRecordCreate",
    "FeeRecordRead",
    "FeeStatusUpdate",
    "NotificationBulkResult",
    "NotificationCountRead",
    "NotificationMarkReadRequest",
    "NotificationPreferencesSchema",
    "NotificationPreferencesUpdate",
    "NotificationRead",
]
