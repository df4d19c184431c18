"""Persistence layer for student fee records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from sqlalchemy.orm import Session

from app.domain.entities import FEE_STATUS_PAID, FEE_STATUSES, FeeRecord
from app.infrastructure.models import FeeRecordModel
from app.utils import from_storage, to_storage

logger = logging.getLogger(__name__)


class FeeRecordRepository:
    """Provide CRUD operations for fee records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[FeeRecord]:
        """Return every usable fee record; malformed rows are left out."""

        query = self.session.query(FeeRecordModel).order_by(FeeRecordModel.id)
        records: list[FeeRecord] = []
        for model in query.all():
            if model.status not in FEE_STATUSES or model.due_date is None:
                logger.warning("Skipping malformed fee record %s", model.id)
                continue
            records.append(self._to_entity(model))
        return records

    def get(self, fee_id: str) -> FeeRecord | None:
        model = self.session.get(FeeRecordModel, fee_id)
        return self._to_entity(model) if model else None

    def create(self, fee: FeeRecord) -> FeeRecord:
        model = FeeRecordModel(id=fee.id)
        model.student_uid = fee.student_uid
        model.description = fee.description
        model.amount = fee.amount
        model.due_date = to_storage(fee.due_date)
        model.status = fee.status
        model.paid_on = fee.paid_on
        model.created_at = to_storage(fee.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(
        self, fee_id: str, *, status: str, paid_on: date | None = None
    ) -> FeeRecord:
        model = self.session.get(FeeRecordModel, fee_id)
        if model is None:
            msg = f"Fee record with id {fee_id} not found"
            raise ValueError(msg)
        model.status = status
        model.paid_on = paid_on if status == FEE_STATUS_PAID else None
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: FeeRecordModel) -> FeeRecord:
        return FeeRecord(
            id=model.id,
            student_uid=model.student_uid,
            description=model.description,
            amount=float(model.amount),
            due_date=from_storage(model.due_date),
            status=model.status,
            paid_on=model.paid_on,
            created_at=from_storage(model.created_at),
        )


__all__ = ["FeeRecordRepository"]
