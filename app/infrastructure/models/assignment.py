"""SQLAlchemy model for assignments."""

from sqlalchemy import Column, DateTime, String, Text

from app.infrastructure.database import Base


class AssignmentModel(Base):
    """Database representation of a coursework assignment."""

    __tablename__ = "assignment"

    id = Column(String(64), primary_key=True)
    branch = Column(String(50), nullable=False, index=True)
    semester = Column(String(20), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime(), nullable=True)
    posted_by = Column(String(120), nullable=True)
    posted_at = Column(DateTime(), nullable=True)


__all__ = ["AssignmentModel"]
