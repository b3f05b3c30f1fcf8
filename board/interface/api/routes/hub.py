"""Realtime comment hub."""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from board.adapter.realtime import ConnectionManager

router = APIRouter(tags=["realtime"])


@router.websocket("/hubs/comments")
async def comment_hub(websocket: WebSocket) -> None:
    """Stream ``ReceiveComment`` events for newly created comments.

    Messages sent by the client are read and ignored; they only keep the
    connection alive.
    """
    container = websocket.app.state.dishka_container
    manager = await container.get(ConnectionManager)
    await manager.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        manager.disconnect(websocket)
