"""SQLAlchemy model for student fee records."""

from sqlalchemy import Column, Date, DateTime, Float, String

from app.infrastructure.database import Base


class FeeRecordModel(Base):
    """Database representation of a fee owed by a student."""

    __tablename__ = "fee_record"

    id = Column(String(64), primary_key=True)
    student_uid = Column(String(120), nullable=False, index=True)
    description = Column(String(200), nullable=False)
    amount = Column(Float, nullable=False)
    due_date = Column(DateTime(), nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    paid_on = Column(Date, nullable=True)
    created_at = Column(DateTime(), nullable=True)


__all__ = ["FeeRecordModel"]
