"""Endpoints and websocket handler for in-app notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    check_and_generate_notifications,
    clear_user_notifications,
    count_unread_notifications,
    list_user_notifications,
    mark_all_notifications_as_read,
    mark_notifications_as_read,
)
from app.domain.entities import CampusUser, Notification
from app.infrastructure.database import SessionLocal, get_db
from app.infrastructure.notifications import notification_manager, serialize_notification
from app.infrastructure.repositories import CampusUserRepository
from app.interfaces.api.dependencies import get_existing_campus_user
from app.interfaces.api.schemas import (
    NotificationBulkResult,
    NotificationCountRead,
    NotificationMarkReadRequest,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.post("/{uid}/check", response_model=list[NotificationRead])
def run_session_check(
    db: Session = Depends(get_db),
    user: CampusUser = Depends(get_existing_campus_user),
) -> list[NotificationRead]:
    """Evaluate the notification rules for the user and return what is new."""

    generated = check_and_generate_notifications(db, user.uid)
    return [_notification_to_schema(notification) for notification in generated]


@router.get("/{uid}", response_model=list[NotificationRead])
def list_notifications(
    uid: str,
    limit: int = Query(50, ge=1, le=500),
    unread_only: bool = False,
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the most recent notifications for the user, newest first."""

    notifications = list_user_notifications(db, uid, limit=limit, unread_only=unread_only)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/{uid}/unread-count", response_model=NotificationCountRead)
def read_unread_count(uid: str, db: Session = Depends(get_db)) -> NotificationCountRead:
    """Return the value of the unread badge."""

    return NotificationCountRead(unread_count=count_unread_notifications(db, uid))


@router.post("/{uid}/read", response_model=NotificationBulkResult)
def mark_as_read(
    uid: str,
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
) -> NotificationBulkResult:
    """Mark the given notifications of the user as read."""

    updated = mark_notifications_as_read(db, uid, payload.unique_ids())
    return NotificationBulkResult(affected=updated)


@router.post("/{uid}/read-all", response_model=NotificationBulkResult)
def mark_all_as_read(uid: str, db: Session = Depends(get_db)) -> NotificationBulkResult:
    """Mark every unread notification of the user as read."""

    return NotificationBulkResult(affected=mark_all_notifications_as_read(db, uid))


@router.delete("/{uid}", response_model=NotificationBulkResult)
def clear_notifications(uid: str, db: Session = Depends(get_db)) -> NotificationBulkResult:
    """Remove every notification of the user."""

    return NotificationBulkResult(affected=clear_user_notifications(db, uid))


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notification updates to a user."""

    uid = websocket.query_params.get("uid")
    if not uid:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        if CampusUserRepository(session).get(uid) is None:
            await websocket.close(code=1008)
            return
        pending_notifications = list_user_notifications(session, uid, unread_only=True)
    finally:
        session.close()

    await notification_manager.connect(uid, websocket)
    try:
        if pending_notifications:
            await websocket.send_json(
                {
                    "type": "init",
                    "data": [serialize_notification(n) for n in pending_notifications],
                }
            )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                logger.debug("Ignoring non-JSON websocket message from %s", uid)
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    ack_session = SessionLocal()
                    try:
                        mark_notifications_as_read(
                            ack_session, uid, [str(item) for item in ids]
                        )
                    finally:
                        ack_session.close()
                continue
    except WebSocketDisconnect:
        notification_manager.disconnect(uid, websocket)
    except Exception:
        notification_manager.disconnect(uid, websocket)
        raise
