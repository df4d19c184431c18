"""Domain entity representing a single attendance mark."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

ATTENDANCE_PRESENT = "present"
ATTENDANCE_ABSENT = "absent"

ATTENDANCE_STATUSES: frozenset[str] = frozenset({ATTENDANCE_PRESENT, ATTENDANCE_ABSENT})


@dataclass
class AttendanceRecord:
    """Presence of one student in one period of one day."""

    id: str
    student_uid: str
    status: str
    date: date | None = None
    period: int | None = None
    subject: str | None = None
    marked_by: str | None = None

    def is_present(self) -> bool:
        return self.status == ATTENDANCE_PRESENT


__all__ = [
    "ATTENDANCE_PRESENT",
    "ATTENDANCE_ABSENT",
    "ATTENDANCE_STATUSES",
    "AttendanceRecord",
]
