"""Unit tests for the realtime comment hub."""

import pytest
from fastapi import WebSocketDisconnect

from board.adapter.realtime import (
    RECEIVE_COMMENT_EVENT,
    ConnectionManager,
    WebSocketCommentBroadcaster,
)


class FakeWebSocket:
    """Collects sent messages; optionally fails like a closed socket."""

    def __init__(self, broken: bool = False):
        self.broken = broken
        self.accepted = False
        self.sent = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, message):
        if self.broken:
            raise WebSocketDisconnect(code=1006)
        self.sent.append(message)


class TestConnectionManager:
    """Connection tracking and fan-out."""

    @pytest.mark.asyncio
    async def test_connect_accepts_and_registers(self):
        manager = ConnectionManager()
        socket = FakeWebSocket()

        await manager.connect(socket)

        assert socket.accepted
        assert manager.active_connections == [socket]

    @pytest.mark.asyncio
    async def test_broadcast_reaches_every_client(self):
        manager = ConnectionManager()
        sockets = [FakeWebSocket(), FakeWebSocket()]
        for socket in sockets:
            await manager.connect(socket)

        delivered = await manager.broadcast({"hello": "world"})

        assert delivered == 2
        assert all(s.sent == [{"hello": "world"}] for s in sockets)

    @pytest.mark.asyncio
    async def test_dead_clients_are_dropped(self):
        """A failing socket doesn't stop the others and is forgotten."""
        manager = ConnectionManager()
        alive, dead = FakeWebSocket(), FakeWebSocket(broken=True)
        await manager.connect(dead)
        await manager.connect(alive)

        delivered = await manager.broadcast({"n": 1})

        assert delivered == 1
        assert manager.active_connections == [alive]

    def test_disconnect_unknown_socket_is_noop(self):
        manager = ConnectionManager()

        manager.disconnect(FakeWebSocket())

        assert manager.active_connections == []


class TestWebSocketCommentBroadcaster:
    """Message envelope."""

    @pytest.mark.asyncio
    async def test_wraps_payload_in_receive_comment_event(self):
        manager = ConnectionManager()
        socket = FakeWebSocket()
        await manager.connect(socket)

        await WebSocketCommentBroadcaster(manager).broadcast_comment({"id": "c1"})

        assert socket.sent == [{"event": RECEIVE_COMMENT_EVENT, "data": {"id": "c1"}}]

    @pytest.mark.asyncio
    async def test_no_clients_is_fine(self):
        await WebSocketCommentBroadcaster(ConnectionManager()).broadcast_comment(
            {"id": "c1"}
        )
