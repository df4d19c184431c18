"""SQLAlchemy model for portal user profiles."""

from sqlalchemy import JSON, Boolean, Column, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class CampusUserModel(Base):
    """Database representation of a portal user profile."""

    __tablename__ = "campus_user"

    # USN for students, email for faculty and admins.
    uid = Column(String(120), primary_key=True)
    role = Column(String(20), nullable=False)
    display_name = Column(String(120), nullable=True)
    email = Column(String(120), nullable=True)
    is_approved = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    rejection_reason = Column(Text, nullable=True)
    branch = Column(String(50), nullable=True, index=True)
    semester = Column(String(20), nullable=True)
    notification_preferences = Column(JSON, nullable=True)


__all__ = ["CampusUserModel"]
