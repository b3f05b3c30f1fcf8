"""Realtime comment hub over WebSockets."""

from typing import Any

import logfire
from fastapi import WebSocket, WebSocketDisconnect

from board.domain.error import SideEffectError
from board.domain.service import CommentBroadcaster

RECEIVE_COMMENT_EVENT = "ReceiveComment"


class ConnectionManager:
    """Tracks connected hub clients."""

    def __init__(self) -> None:
        self.active_connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a WebSocket connection."""
        await websocket.accept()
        self.active_connections.append(websocket)
        logfire.info("Hub client connected", connections=len(self.active_connections))

    def disconnect(self, websocket: WebSocket) -> None:
        """Forget a WebSocket connection."""
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
        logfire.info(
            "Hub client disconnected", connections=len(self.active_connections)
        )

    async def broadcast(self, message: dict[str, Any]) -> int:
        """Send a JSON message to every client, dropping dead ones.

        Returns:
            Number of clients the message reached
        """
        delivered = 0
        disconnected = []
        for connection in list(self.active_connections):
            try:
                await connection.send_json(message)
                delivered += 1
            except (WebSocketDisconnect, RuntimeError, OSError):
                disconnected.append(connection)

        for connection in disconnected:
            self.disconnect(connection)
        return delivered


class WebSocketCommentBroadcaster(CommentBroadcaster):
    """Pushes ``ReceiveComment`` messages to hub clients."""

    def __init__(self, manager: ConnectionManager) -> None:
        self.manager = manager

    async def broadcast_comment(self, payload: dict[str, Any]) -> None:
        delivered = await self.manager.broadcast(
            {"event": RECEIVE_COMMENT_EVENT, "data": payload}
        )
        logfire.info(
            "Comment broadcast", comment_id=payload.get("id"), delivered=delivered
        )


class RecordingCommentBroadcaster(CommentBroadcaster):
    """Keeps broadcast payloads in memory. Set ``fail`` to simulate an outage."""

    def __init__(self) -> None:
        self.payloads: list[dict[str, Any]] = []
        self.fail = False

    async def broadcast_comment(self, payload: dict[str, Any]) -> None:
        if self.fail:
            raise SideEffectError("Recording broadcaster set to fail")
        self.payloads.append(payload)
