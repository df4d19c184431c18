"""Persistence layer for assignments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Assignment
from app.infrastructure.models import AssignmentModel
from app.utils import from_storage, to_storage


class AssignmentRepository:
    """Provide CRUD operations for assignments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Assignment]:
        query = self.session.query(AssignmentModel).order_by(AssignmentModel.id)
        return [self._to_entity(model) for model in query.all()]

    def get(self, assignment_id: str) -> Assignment | None:
        model = self.session.get(AssignmentModel, assignment_id)
        return self._to_entity(model) if model else None

    def create(self, assignment: Assignment) -> Assignment:
        model = AssignmentModel(id=assignment.id)
        model.branch = assignment.branch
        model.semester = assignment.semester
        model.title = assignment.title
        model.description = assignment.description
        model.due_date = to_storage(assignment.due_date)
        model.posted_by = assignment.posted_by
        model.posted_at = to_storage(assignment.posted_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AssignmentModel) -> Assignment:
        return Assignment(
            id=model.id,
            branch=model.branch,
            semester=model.semester,
            title=model.title,
            description=model.description,
            due_date=from_storage(model.due_date),
            posted_by=model.posted_by,
            posted_at=from_storage(model.posted_at),
        )


__all__ = ["AssignmentRepository"]
