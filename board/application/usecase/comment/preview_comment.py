"""Preview comment use case."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.domain.service import HtmlSanitizer


class PreviewCommentRequest(BaseModel):
    """Preview comment request."""

    text: str = Field(max_length=10000)


class PreviewCommentResponse(BaseModel):
    """Sanitized HTML exactly as it would be stored."""

    html: str


class PreviewCommentUseCase(BaseUseCase):
    """Renders a comment body through the sanitizer without storing it."""

    def __init__(self, sanitizer: HtmlSanitizer) -> None:
        self.sanitizer = sanitizer

    async def execute(self, request: PreviewCommentRequest) -> PreviewCommentResponse:
        return PreviewCommentResponse(html=self.sanitizer.sanitize(request.text))
