"""Mock realtime providers for testing."""

from dishka import Scope, provide

from board.adapter.realtime import ConnectionManager, RecordingCommentBroadcaster
from board.domain.service import CommentBroadcaster
from board.util.di.infrastructure.realtime import RealtimeProvider


class MockRealtimeProvider(RealtimeProvider):
    """Records broadcasts; the hub endpoint still gets a connection manager."""

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_connection_manager(self) -> ConnectionManager:
        return ConnectionManager()

    @provide
    def get_recording_broadcaster(self) -> RecordingCommentBroadcaster:
        return RecordingCommentBroadcaster()

    @provide
    def get_broadcaster(
        self, broadcaster: RecordingCommentBroadcaster
    ) -> CommentBroadcaster:
        return broadcaster
