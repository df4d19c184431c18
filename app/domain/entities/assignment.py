"""Domain entity representing a coursework assignment."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Assignment:
    """Assignment posted for every student of a branch and semester."""

    id: str
    branch: str
    semester: str
    title: str
    description: str | None = None
    due_date: datetime | None = None
    posted_by: str | None = None
    posted_at: datetime | None = None


__all__ = ["Assignment"]
