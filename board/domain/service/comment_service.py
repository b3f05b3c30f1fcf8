"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from board.domain.error import ValidationError
from board.domain.model import Comment, User
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, PageRequest

from .base import Service
from .thread_assembler import CommentThreadPage, ThreadAssembler, resolved_author


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_assembler: ThreadAssembler,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            thread_assembler: Builds reply trees from the flat comment set
        """
        self.comment_repository = comment_repository
        self.thread_assembler = thread_assembler

    async def get_comment_threads(self, request: PageRequest) -> CommentThreadPage:
        """Load every comment and assemble the requested page of threads.

        The whole set is loaded once and assembled in memory so each page
        carries complete reply trees without per-comment queries.

        Args:
            request: Normalized paging and ordering

        Returns:
            One page of top-level threads

        Raises:
            StoreUnavailableError: If the store can't be reached
            IntegrityError: If a served comment has no resolved author
        """
        with logfire.span(
            "comment_service.get_comment_threads",
            page=request.page,
            page_size=request.page_size,
            sort_by=request.sort_by.value,
            ascending=request.ascending,
        ):
            comments = await self.comment_repository.find_all()
            logfire.info("Comments loaded", count=len(comments))
            return self.thread_assembler.assemble(comments, request)

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def create_comment(
        self,
        author: User,
        text: str,
        parent_id: CommentId | None = None,
        image_path: str | None = None,
        text_file_path: str | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Args:
            author: Resolved author
            text: Already sanitized body
            parent_id: Parent comment ID for replies (None for top-level)
            image_path: URL of an uploaded image
            text_file_path: URL of an uploaded text file

        Returns:
            The stored comment with its author

        Raises:
            ValidationError: If the parent comment doesn't exist
            IntegrityError: If the store returns the comment without its author
        """
        with logfire.span(
            "comment_service.create_comment",
            user_id=str(author.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id and not await self.get_comment_by_id(parent_id):
                raise ValidationError("Parent comment not found")

            comment = Comment(
                id=CommentId(uuid4()),
                user_id=author.id,
                text=text,
                parent_id=parent_id,
                image_path=image_path,
                text_file_path=text_file_path,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.comment_repository.create(comment)
            resolved_author(saved)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                user_id=str(author.id),
                is_reply=parent_id is not None,
            )
            return saved
