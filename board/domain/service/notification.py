"""Ports for best-effort notifications about new comments."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from board.domain.value import CommentId, UserId


class CommentCreatedEvent(BaseModel):
    """Event published to the work queue after a comment is stored."""

    comment_id: CommentId
    user_id: UserId
    parent_comment_id: Optional[CommentId] = None
    created_at: datetime


class CommentBroadcaster(ABC):
    """Pushes newly created comments to connected realtime clients."""

    @abstractmethod
    async def broadcast_comment(self, payload: dict[str, Any]) -> None:
        """Send a serialized comment to every subscriber.

        Raises:
            SideEffectError: If the broadcast could not be delivered
        """
        pass


class CommentEventPublisher(ABC):
    """Publishes comment events for downstream consumers."""

    @abstractmethod
    async def publish_comment_created(self, event: CommentCreatedEvent) -> None:
        """Publish a CommentCreated event.

        Raises:
            SideEffectError: If the broker rejected or never saw the event
        """
        pass
