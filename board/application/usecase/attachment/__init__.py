"""Attachment use cases."""

from .upload import (
    UploadImageUseCase,
    UploadRequest,
    UploadResponse,
    UploadTextFileUseCase,
)

__all__ = [
    "UploadImageUseCase",
    "UploadRequest",
    "UploadResponse",
    "UploadTextFileUseCase",
]
