"""Get comments use case."""

import sys

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.comment.dto import (
    CommentPageResponse,
    FlatCommentPage,
)
from board.config import PaginationSettings
from board.domain.service import CommentPageCache, CommentService
from board.domain.value import PageRequest


class GetCommentsRequest(BaseModel):
    """Get comments request. Raw values; normalized by the use case."""

    page: int | None = None
    page_size: int | None = None
    sort_by: str | None = None
    ascending: bool | None = None


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading a page of comment threads through the cache."""

    def __init__(
        self,
        comment_service: CommentService,
        page_cache: CommentPageCache,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            page_cache: Cache policy for assembled pages
            pagination: Default and maximum page size
        """
        self.comment_service = comment_service
        self.page_cache = page_cache
        self.pagination = pagination

    async def execute(self, request: GetCommentsRequest) -> CommentPageResponse:
        """Execute get comments flow.

        Steps:
        1. Normalize paging input
        2. Serve the page from cache if present
        3. Otherwise load, assemble and map the threads, then cache them
           flattened, so thread depth never hits serializer recursion limits

        Reads never fail: any error while loading or assembling is logged
        and answered with an empty page that echoes the requested paging.

        Args:
            request: Raw paging and ordering input

        Returns:
            The requested page of threads
        """
        page_request = PageRequest.normalize(
            page=request.page,
            page_size=request.page_size,
            sort_by=request.sort_by,
            ascending=request.ascending,
            default_page_size=self.pagination.default_page_size,
            max_page_size=self.pagination.max_page_size,
        )

        with logfire.span(
            "get_comments",
            page=page_request.page,
            page_size=page_request.page_size,
            sort_by=page_request.sort_by.value,
            ascending=page_request.ascending,
        ):
            key = await self.page_cache.page_key(page_request)
            if key is not None:
                cached = await self.page_cache.get_page(key)
                if cached is not None:
                    try:
                        flat = FlatCommentPage.model_validate_json(cached)
                        response = flat.to_nested()
                        logfire.info("Comment page served from cache", key=key)
                        return response
                    except ValueError as e:
                        logfire.warn(
                            "Discarding unreadable cached page", key=key, error=str(e)
                        )

            try:
                threads = await self.comment_service.get_comment_threads(page_request)
                response = CommentPageResponse.from_domain(threads)
                payload = response.to_flat().model_dump_json(by_alias=True)
            except Exception as e:
                logfire.error(
                    "Failed to load comments, serving empty page",
                    error=str(e),
                    error_type=type(e).__name__,
                    _exc_info=sys.exc_info(),
                )
                return CommentPageResponse.empty(page_request)

            if key is not None:
                await self.page_cache.put_page(key, payload)
            return response
