"""Work queue infrastructure providers."""

from dishka import Scope, provide

from board.adapter.queue import (
    LoggingCommentEventPublisher,
    RabbitMQCommentEventPublisher,
)
from board.config import QueueSettings
from board.domain.service import CommentEventPublisher
from board.util.di.base import ProviderBase


class QueueProvider(ProviderBase):
    """Queue component base."""

    __mock_component__ = "queue"


class ProdQueueProvider(QueueProvider):
    """Production queue provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_event_publisher(self, queue_settings: QueueSettings) -> CommentEventPublisher:
        """Provide the configured comment event publisher.

        Returns:
            RabbitMQ publisher, or a log-only publisher when QUEUE__BACKEND=log
        """
        if queue_settings.backend == "log":
            return LoggingCommentEventPublisher()
        return RabbitMQCommentEventPublisher(
            url=queue_settings.url,
            exchange=queue_settings.exchange,
            queue=queue_settings.queue,
            routing_key=queue_settings.routing_key,
        )
