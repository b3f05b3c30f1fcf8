"""Realtime adapters."""

from .hub import (
    RECEIVE_COMMENT_EVENT,
    ConnectionManager,
    RecordingCommentBroadcaster,
    WebSocketCommentBroadcaster,
)

__all__ = [
    "RECEIVE_COMMENT_EVENT",
    "ConnectionManager",
    "RecordingCommentBroadcaster",
    "WebSocketCommentBroadcaster",
]
