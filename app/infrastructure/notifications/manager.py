"""Registry of the open inbox websockets of each campus user."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Keep the open websockets per user id; a user may have several tabs open."""

    def __init__(self) -> None:
        self._sockets: dict[str, list[WebSocket]] = {}

    async def connect(self, user_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        self._sockets.setdefault(user_id, []).append(websocket)
        logger.debug("Inbox socket opened for %s (%d open)", user_id, len(self._sockets[user_id]))

    def disconnect(self, user_id: str, websocket: WebSocket) -> None:
        sockets = self._sockets.get(user_id, [])
        if websocket in sockets:
            sockets.remove(websocket)
        if not sockets:
            self._sockets.pop(user_id, None)

    def has_connections(self, user_id: str) -> bool:
        return bool(self._sockets.get(user_id))

    async def send_to_user(self, user_id: str, message: dict[str, Any]) -> int:
        """Send ``message`` to every socket of ``user_id``; return how many received it.

        Sockets that fail mid-send are dropped from the registry.
        """

        delivered = 0
        dead: list[WebSocket] = []
        for websocket in list(self._sockets.get(user_id, [])):
            try:
                await websocket.send_json(message)
            except Exception:  # pragma: no cover - client vanished without a close frame
                logger.debug("Dropping dead inbox socket for %s", user_id, exc_info=True)
                dead.append(websocket)
            else:
                delivered += 1
        for websocket in dead:
            self.disconnect(user_id, websocket)
        return delivered


notification_manager = NotificationConnectionManager()


__all__ = ["NotificationConnectionManager", "notification_manager"]
