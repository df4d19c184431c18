"""Routes to register portal users and their notification preferences."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.campus_users import (
    update_notification_preferences as update_preferences_uc,
    upsert_campus_user as upsert_campus_user_uc,
)
from app.domain.entities import CampusUser
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_existing_campus_user
from app.interfaces.api.schemas import (
    CampusUserRead,
    CampusUserUpsert,
    NotificationPreferencesUpdate,
)

router = APIRouter(prefix="/campus-users", tags=["campus-users"])


def _to_read_model(user: CampusUser) -> CampusUserRead:
    return CampusUserRead.model_validate(user)


@router.put("/{uid}", response_model=CampusUserRead)
def upsert_campus_user(
    uid: str,
    user_in: CampusUserUpsert,
    db: Session = Depends(get_db),
) -> CampusUserRead:
    """Create or replace the profile stored under ``uid``."""

    preferences = (
        user_in.notification_preferences.model_dump()
        if user_in.notification_preferences is not None
        else None
    )
    try:
        user = upsert_campus_user_uc(
            db,
            uid=uid,
            role=user_in.role,
            is_approved=user_in.is_approved,
            display_name=user_in.display_name,
            email=user_in.email,
            rejection_reason=user_in.rejection_reason,
            branch=user_in.branch,
            semester=user_in.semester,
            notification_preferences=preferences,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(user)


@router.get("/{uid}", response_model=CampusUserRead)
def read_campus_user(user: CampusUser = Depends(get_existing_campus_user)) -> CampusUserRead:
    """Return the profile stored under ``uid``."""

    return _to_read_model(user)


@router.put("/{uid}/notification-preferences", response_model=CampusUserRead)
def update_notification_preferences(
    changes: NotificationPreferencesUpdate,
    user: CampusUser = Depends(get_existing_campus_user),
    db: Session = Depends(get_db),
) -> CampusUserRead:
    """Switch individual notification types on or off."""

    updated = update_preferences_uc(db, user.uid, changes.model_dump(exclude_none=True))
    return _to_read_model(updated)
