"""Work queue adapters."""

from .publisher import (
    LoggingCommentEventPublisher,
    RabbitMQCommentEventPublisher,
    RecordingCommentEventPublisher,
)

__all__ = [
    "LoggingCommentEventPublisher",
    "RabbitMQCommentEventPublisher",
    "RecordingCommentEventPublisher",
]
