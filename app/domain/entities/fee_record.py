"""Domain entity representing a fee charged to a student."""

from dataclasses import dataclass
from datetime import date, datetime

FEE_STATUS_PENDING = "pending"
FEE_STATUS_PAID = "paid"
FEE_STATUS_OVERDUE = "overdue"

FEE_STATUSES: frozenset[str] = frozenset(
    {FEE_STATUS_PENDING, FEE_STATUS_PAID, FEE_STATUS_OVERDUE}
)


@dataclass
class FeeRecord:
    """Core attributes describing a fee owed by a student."""

    id: str
    student_uid: str
    description: str
    amount: float
    due_date: datetime
    status: str = FEE_STATUS_PENDING
    paid_on: date | None = None
    created_at: datetime | None = None

    def is_paid(self) -> bool:
        return self.status == FEE_STATUS_PAID


__all__ = [
    "FEE_STATUS_PENDING",
    "FEE_STATUS_PAID",
    "FEE_STATUS_OVERDUE",
    "FEE_STATUSES",
    "FeeRecord",
]
