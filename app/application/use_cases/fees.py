"""Use cases for managing student fee records."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from sqlalchemy.orm import Session

from app.domain.entities import FEE_STATUS_PAID, FEE_STATUS_PENDING, FEE_STATUSES, FeeRecord
from app.infrastructure.repositories import CampusUserRepository, FeeRecordRepository
from app.utils import as_campus_time, campus_now


def create_fee_record(
    session: Session,
    *,
    student_uid: str,
    description: str,
    amount: float,
    due_date: datetime,
    status: str = FEE_STATUS_PENDING,
    fee_id: str | None = None,
) -> FeeRecord:
    """Charge a fee to an existing student."""

    _ensure_status(status)
    if amount < 0:
        raise ValueError("The fee amount cannot be negative")
    if CampusUserRepository(session).get(student_uid) is None:
        raise ValueError(f"Student '{student_uid}' does not exist")

    repository = FeeRecordRepository(session)
    identifier = fee_id or uuid.uuid4().hex
    if repository.get(identifier) is not None:
        raise ValueError(f"Fee record '{identifier}' already exists")

    now = campus_now()
    entity = FeeRecord(
        id=identifier,
        student_uid=student_uid,
        description=description,
        amount=amount,
        due_date=as_campus_time(due_date),
        status=status,
        paid_on=now.date() if status == FEE_STATUS_PAID else None,
        created_at=now,
    )
    return repository.create(entity)


def update_fee_status(
    session: Session, fee_id: str, *, status: str, paid_on: date | None = None
) -> FeeRecord:
    """Change the status of a fee; paying it stamps ``paid_on``."""

    _ensure_status(status)
    if status == FEE_STATUS_PAID and paid_on is None:
        paid_on = campus_now().date()
    return FeeRecordRepository(session).update_status(fee_id, status=status, paid_on=paid_on)


def _ensure_status(status: str) -> None:
    if status not in FEE_STATUSES:
        raise ValueError(f"Unsupported fee status '{status}'")


__all__ = ["create_fee_record", "update_fee_status"]
