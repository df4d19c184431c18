"""SQLAlchemy model for attendance marks."""

from sqlalchemy import Column, Date, Integer, String

from app.infrastructure.database import Base


class AttendanceRecordModel(Base):
    """Database representation of one attendance mark."""

    __tablename__ = "attendance_record"

    id = Column(String(160), primary_key=True)
    student_uid = Column(String(120), nullable=False, index=True)
    status = Column(String(20), nullable=False)
    date = Column(Date, nullable=True)
    period = Column(Integer, nullable=True)
    subject = Column(String(120), nullable=True)
    marked_by = Column(String(120), nullable=True)


__all__ = ["AttendanceRecordModel"]
