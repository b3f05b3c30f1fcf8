"""User entity.

Users are created implicitly on their first comment and looked up by email
afterwards. They are never updated or deleted.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import Email, HomePage, UserId, UserName


class User(DomainModel):
    """Comment author."""

    id: UserId
    user_name: UserName
    email: Email
    home_page: Optional[HomePage] = None
    ip_address: str = Field(default="unknown", max_length=64)
    user_agent: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
