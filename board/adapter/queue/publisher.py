"""Comment event publishers."""

import asyncio
import json

import logfire
import pika
from pika.exceptions import AMQPError

from board.domain.error import SideEffectError
from board.domain.service import CommentCreatedEvent, CommentEventPublisher

EVENT_NAME = "CommentCreated"


def _encode(event: CommentCreatedEvent) -> bytes:
    return json.dumps(
        {"event": EVENT_NAME, "payload": event.model_dump(mode="json")}
    ).encode("utf-8")


class RabbitMQCommentEventPublisher(CommentEventPublisher):
    """Publishes to a durable topic exchange through pika.

    pika's BlockingConnection is synchronous, so each publish runs on a
    worker thread with its own short-lived connection.
    """

    def __init__(self, url: str, exchange: str, queue: str, routing_key: str) -> None:
        self.url = url
        self.exchange = exchange
        self.queue = queue
        self.routing_key = routing_key

    def _publish_blocking(self, body: bytes) -> None:
        connection = pika.BlockingConnection(pika.URLParameters(self.url))
        try:
            channel = connection.channel()
            channel.exchange_declare(
                exchange=self.exchange, exchange_type="topic", durable=True
            )
            channel.queue_declare(queue=self.queue, durable=True)
            channel.queue_bind(
                queue=self.queue, exchange=self.exchange, routing_key=self.routing_key
            )
            channel.basic_publish(
                exchange=self.exchange,
                routing_key=self.routing_key,
                body=body,
                properties=pika.BasicProperties(
                    content_type="application/json",
                    delivery_mode=2,  # persistent
                ),
            )
        finally:
            if connection.is_open:
                connection.close()

    async def publish_comment_created(self, event: CommentCreatedEvent) -> None:
        with logfire.span(
            "rabbitmq.publish_comment_created",
            comment_id=str(event.comment_id),
            exchange=self.exchange,
            routing_key=self.routing_key,
        ):
            try:
                await asyncio.to_thread(self._publish_blocking, _encode(event))
            except (AMQPError, OSError) as e:
                raise SideEffectError(f"RabbitMQ publish failed: {e}") from e
            logfire.info("Comment event published", comment_id=str(event.comment_id))


class LoggingCommentEventPublisher(CommentEventPublisher):
    """Writes events to the log instead of a broker."""

    async def publish_comment_created(self, event: CommentCreatedEvent) -> None:
        logfire.info(
            "Comment event (log backend)",
            event_name=EVENT_NAME,
            payload=event.model_dump(mode="json"),
        )


class RecordingCommentEventPublisher(CommentEventPublisher):
    """Keeps published events in memory. Set ``fail`` to simulate an outage."""

    def __init__(self) -> None:
        self.events: list[CommentCreatedEvent] = []
        self.fail = False

    async def publish_comment_created(self, event: CommentCreatedEvent) -> None:
        if self.fail:
            raise SideEffectError("Recording publisher set to fail")
        self.events.append(event)
