"""Comment entity.

Comments form a forest through ``parent_id``. Replies are never stored on
the entity; they are derived by the thread assembler at read time.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.model.user import User
from board.domain.value import CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    ``author`` is resolved by the repository on every read. A comment
    returned by the store without its author is a data-integrity error.
    """

    id: CommentId
    user_id: UserId
    text: str = Field(min_length=1)  # Sanitized HTML, longer than the raw input
    parent_id: Optional[CommentId] = None
    image_path: Optional[str] = Field(default=None, max_length=500)
    text_file_path: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    author: Optional[User] = None

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None
