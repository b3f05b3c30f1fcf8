"""Strongly typed identifiers for board entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommentId = NewType("CommentId", UUID)
