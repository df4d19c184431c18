"""Persistence layer for attendance marks."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import ATTENDANCE_STATUSES, AttendanceRecord
from app.infrastructure.models import AttendanceRecordModel

logger = logging.getLogger(__name__)


class AttendanceRepository:
    """Provide read and upsert operations for attendance records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[AttendanceRecord]:
        query = self.session.query(AttendanceRecordModel).order_by(AttendanceRecordModel.id)
        records: list[AttendanceRecord] = []
        for model in query.all():
            if model.status not in ATTENDANCE_STATUSES:
                logger.warning("Skipping attendance record %s with status %r", model.id, model.status)
                continue
            records.append(self._to_entity(model))
        return records

    def save_many(self, records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
        """Insert or overwrite ``records``; re-marking a period replaces the old mark."""

        saved: list[AttendanceRecordModel] = []
        for record in records:
            model = self.session.get(AttendanceRecordModel, record.id)
            if model is None:
                model = AttendanceRecordModel(id=record.id)
            model.student_uid = record.student_uid
            model.status = record.status
            model.date = record.date
            model.period = record.period
            model.subject = record.subject
            model.marked_by = record.marked_by
            self.session.add(model)
            saved.append(model)
        self.session.commit()
        for model in saved:
            self.session.refresh(model)
        return [self._to_entity(model) for model in saved]

    @staticmethod
    def _to_entity(model: AttendanceRecordModel) -> AttendanceRecord:
        return AttendanceRecord(
            id=model.id,
            student_uid=model.student_uid,
            status=model.status,
            date=model.date,
            period=model.period,
            subject=model.subject,
            marked_by=model.marked_by,
        )


__all__ = ["AttendanceRepository"]
