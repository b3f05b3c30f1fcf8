"""Realtime infrastructure providers."""

from dishka import Scope, provide

from board.adapter.realtime import ConnectionManager, WebSocketCommentBroadcaster
from board.domain.service import CommentBroadcaster
from board.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider broadcasting over the WebSocket hub."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_connection_manager(self) -> ConnectionManager:
        """Provide the process-wide hub connection registry."""
        return ConnectionManager()

    @provide
    def get_broadcaster(self, manager: ConnectionManager) -> CommentBroadcaster:
        """Provide WebSocket broadcaster."""
        return WebSocketCommentBroadcaster(manager)
