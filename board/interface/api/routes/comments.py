"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, Response, status
from pydantic import Field, field_validator

from board.application.usecase.base import CamelModel
from board.application.usecase.comment import (
    CommentDto,
    CommentPageResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    PreviewCommentRequest,
    PreviewCommentResponse,
    PreviewCommentUseCase,
)
from board.domain.error import (
    CacheUnavailableError,
    IntegrityError,
    StoreUnavailableError,
    ValidationError,
)
from board.domain.value import Email, HomePage, UserName

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("", response_model=CommentPageResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int | None = Query(default=None),
    page_size: int | None = Query(default=None, alias="pageSize"),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    ascending: bool | None = Query(default=None),
) -> Response:
    """Get a page of comment threads.

    Out-of-range paging is clamped and unknown sort fields fall back to
    createdAt; this endpoint answers with an empty page rather than an
    error when the store is unavailable.

    Args:
        get_comments_use_case: Get comments use case from DI
        page: 1-based page number
        page_size: Threads per page, 1-100
        sort_by: createdAt, userName or email
        ascending: Sort direction, newest first by default

    Returns:
        Page of top-level comments with their reply trees, encoded by
        CommentPageResponse.to_json so deep threads serialize
    """
    response = await get_comments_use_case.execute(
        GetCommentsRequest(
            page=page, page_size=page_size, sort_by=sort_by, ascending=ascending
        )
    )
    return Response(content=response.to_json(), media_type="application/json")


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    user_name: UserName
    email: Email
    home_page: HomePage | None = None
    text: str = Field(min_length=1, max_length=10000)
    captcha_token: str | None = None
    parent_comment_id: UUID | None = None
    image_path: str | None = Field(default=None, max_length=500)
    text_file_path: str | None = Field(default=None, max_length=500)

    @field_validator("home_page", mode="before")
    @classmethod
    def blank_home_page_is_none(cls, v):
        # Forms submit an untouched optional field as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@router.post("", response_model=CommentDto, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    http_request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentDto:
    """Create a comment or a reply.

    Requires a CAPTCHA token that was validated via POST /captcha/validate.

    Args:
        request: Comment form data
        http_request: Raw request, for origin address and user agent
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 400 on validation failure, 503 when a backing
            service is down, 500 on a data integrity error
    """
    try:
        use_case_request = CreateCommentRequest(
            **request.model_dump(),
            origin_address=(
                http_request.client.host if http_request.client else "unknown"
            ),
            client_signature=http_request.headers.get("user-agent", ""),
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (StoreUnavailableError, CacheUnavailableError) as e:
        logfire.warn("Comment creation unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service temporarily unavailable",
        )
    except IntegrityError as e:
        logfire.error(
            "Comment creation hit a data integrity error",
            entity=e.entity,
            entity_id=e.entity_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Data integrity error",
        )


@router.post("/preview", response_model=PreviewCommentResponse)
async def preview_comment(
    request: PreviewCommentRequest,
    preview_comment_use_case: FromDishka[PreviewCommentUseCase],
) -> PreviewCommentResponse:
    """Render a comment body exactly as it would be stored."""
    return await preview_comment_use_case.execute(request)
