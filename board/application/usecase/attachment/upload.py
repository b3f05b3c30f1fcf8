"""Attachment upload use cases."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import AttachmentService


class UploadRequest(BaseModel):
    """Uploaded file as received from the client."""

    filename: str | None = None
    content: bytes


class UploadResponse(BaseModel):
    """Public URL of the stored file."""

    url: str


class UploadImageUseCase(BaseUseCase):
    """Use case for attaching an image, shrunk to fit 320x240."""

    def __init__(self, attachment_service: AttachmentService) -> None:
        self.attachment_service = attachment_service

    @property
    def max_bytes(self) -> int:
        return self.attachment_service.max_image_bytes

    async def execute(self, request: UploadRequest) -> UploadResponse:
        """Store an image.

        Raises:
            ValidationError: If the file is not an acceptable image
        """
        url = await self.attachment_service.upload_image(
            request.filename, request.content
        )
        return UploadResponse(url=url)


class UploadTextFileUseCase(BaseUseCase):
    """Use case for attaching a plain-text file."""

    def __init__(self, attachment_service: AttachmentService) -> None:
        self.attachment_service = attachment_service

    @property
    def max_bytes(self) -> int:
        return self.attachment_service.max_text_bytes

    async def execute(self, request: UploadRequest) -> UploadResponse:
        """Store a text file.

        Raises:
            ValidationError: If the file is not an acceptable text file
        """
        url = await self.attachment_service.upload_text_file(
            request.filename, request.content
        )
        return UploadResponse(url=url)
