"""Use cases for posting assignments."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Assignment
from app.infrastructure.repositories import AssignmentRepository
from app.utils import as_campus_time, campus_now


def create_assignment(
    session: Session,
    *,
    branch: str,
    semester: str,
    title: str,
    description: str | None = None,
    due_date: datetime | None = None,
    posted_by: str | None = None,
    assignment_id: str | None = None,
) -> Assignment:
    """Post a new assignment for a branch and semester."""

    if not branch or not semester:
        raise ValueError("Branch and semester are required")
    if not (title or "").strip():
        raise ValueError("The assignment title cannot be empty")

    repository = AssignmentRepository(session)
    identifier = assignment_id or uuid.uuid4().hex
    if repository.get(identifier) is not None:
        raise ValueError(f"Assignment '{identifier}' already exists")

    entity = Assignment(
        id=identifier,
        branch=branch,
        semester=semester,
        title=title.strip(),
        description=description,
        due_date=as_campus_time(due_date),
        posted_by=posted_by,
        posted_at=campus_now(),
    )
    return repository.create(entity)


__all__ = ["create_assignment"]
