"""Use case for marking attendance."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import Session

from app.domain.entities import ATTENDANCE_STATUSES, AttendanceRecord
from app.infrastructure.repositories import AttendanceRepository


@dataclass(frozen=True)
class AttendanceMark:
    student_uid: str
    status: str


def record_attendance(
    session: Session,
    *,
    day: date,
    period: int,
    subject: str,
    marks: Sequence[AttendanceMark],
    marked_by: str | None = None,
) -> list[AttendanceRecord]:
    """Store one mark per student for the given day and period."""

    records: list[AttendanceRecord] = []
    for mark in marks:
        if mark.status not in ATTENDANCE_STATUSES:
            raise ValueError(f"Unsupported attendance status '{mark.status}'")
        records.append(
            AttendanceRecord(
                id=f"{mark.student_uid}-{day.isoformat()}-{period}",
                student_uid=mark.student_uid,
                status=mark.status,
                date=day,
                period=period,
                subject=subject,
                marked_by=marked_by,
            )
        )
    if not records:
        return []
    return AttendanceRepository(session).save_many(records)


__all__ = ["AttendanceMark", "record_attendance"]
