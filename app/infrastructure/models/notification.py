"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications.

    The primary key is the deterministic identity key, so a second insert of the
    same notification fails at the database level.
    """

    __tablename__ = "notification"

    id = Column(String(255), primary_key=True)
    user_id = Column(String(120), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    href = Column(String(255), nullable=True)
    created_at = Column(DateTime(), nullable=False)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )


__all__ = ["NotificationModel"]
