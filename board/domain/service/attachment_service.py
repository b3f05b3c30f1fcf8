"""Attachment domain service and its storage ports."""

from abc import ABC, abstractmethod
from pathlib import PurePath

import logfire

from board.domain.error import ValidationError

from .base import Service

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif"})
TEXT_EXTENSIONS = frozenset({".txt"})


class FileStorage(ABC):
    """Stores uploaded content and hands back a public URL."""

    @abstractmethod
    async def save(self, content: bytes, extension: str) -> str:
        """Store content under a fresh unique name.

        Args:
            content: File bytes
            extension: Lower-case extension including the dot

        Returns:
            Public URL of the stored file
        """
        pass


class ImageProcessor(ABC):
    """Image decoding and resizing."""

    @abstractmethod
    async def fit_within(
        self, content: bytes, extension: str, max_width: int, max_height: int
    ) -> bytes:
        """Shrink an image proportionally to fit the bounds.

        Images already within bounds come back re-encoded but unscaled.

        Raises:
            ValidationError: If the content is not a decodable image
        """
        pass


def _extension_of(filename: str | None) -> str:
    return PurePath(filename or "").suffix.lower()


class AttachmentService(Service):
    """Validates and stores comment attachments."""

    def __init__(
        self,
        storage: FileStorage,
        image_processor: ImageProcessor,
        max_image_bytes: int,
        max_text_bytes: int,
        max_image_width: int,
        max_image_height: int,
    ) -> None:
        self.storage = storage
        self.image_processor = image_processor
        self.max_image_bytes = max_image_bytes
        self.max_text_bytes = max_text_bytes
        self.max_image_width = max_image_width
        self.max_image_height = max_image_height

    async def upload_image(self, filename: str | None, content: bytes) -> str:
        """Validate, shrink and store an image.

        Args:
            filename: Client file name, only its extension is used
            content: Raw upload

        Returns:
            Public URL of the stored image

        Raises:
            ValidationError: Wrong extension, empty, too large or undecodable
        """
        extension = _extension_of(filename)
        with logfire.span(
            "attachment_service.upload_image", extension=extension, size=len(content)
        ):
            if extension not in IMAGE_EXTENSIONS:
                raise ValidationError("Only JPG, GIF and PNG images are allowed")
            self._check_size(content, self.max_image_bytes)

            resized = await self.image_processor.fit_within(
                content, extension, self.max_image_width, self.max_image_height
            )
            url = await self.storage.save(resized, extension)
            logfire.info("Image stored", url=url, size=len(resized))
            return url

    async def upload_text_file(self, filename: str | None, content: bytes) -> str:
        """Validate and store a plain-text attachment.

        Raises:
            ValidationError: Wrong extension, empty or too large
        """
        extension = _extension_of(filename)
        with logfire.span(
            "attachment_service.upload_text_file",
            extension=extension,
            size=len(content),
        ):
            if extension not in TEXT_EXTENSIONS:
                raise ValidationError("Only TXT files are allowed")
            self._check_size(content, self.max_text_bytes)

            url = await self.storage.save(content, extension)
            logfire.info("Text file stored", url=url, size=len(content))
            return url

    @staticmethod
    def _check_size(content: bytes, limit: int) -> None:
        if not content:
            raise ValidationError("File is empty")
        if len(content) > limit:
            raise ValidationError(f"File exceeds the {limit // 1024} KB limit")
