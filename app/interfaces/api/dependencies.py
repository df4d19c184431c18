"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.campus_users import get_campus_user
from app.domain.entities import CampusUser
from app.infrastructure.database import get_db


def get_existing_campus_user(uid: str, db: Session = Depends(get_db)) -> CampusUser:
    """Resolve the ``uid`` path parameter into a stored profile."""

    try:
        return get_campus_user(db, uid)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
