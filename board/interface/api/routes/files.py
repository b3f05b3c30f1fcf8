"""Attachment upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, HTTPException, UploadFile, status

from board.application.usecase.attachment import (
    UploadImageUseCase,
    UploadRequest,
    UploadResponse,
    UploadTextFileUseCase,
)
from board.domain.error import ValidationError

router = APIRouter(prefix="/file", tags=["files"], route_class=DishkaRoute)


async def read_bounded(file: UploadFile, max_bytes: int) -> bytes:
    """Read at most one byte past ``max_bytes``.

    An oversized upload still fails the size check downstream, but only
    ``max_bytes + 1`` bytes of it are ever held in memory. A declared size
    over the limit is rejected before reading.

    Raises:
        HTTPException: 400 if the declared size exceeds the limit
    """
    if file.size is not None and file.size > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File exceeds the {max_bytes // 1024} KB limit",
        )
    return await file.read(max_bytes + 1)


@router.post("/image", response_model=UploadResponse)
async def upload_image(
    upload_image_use_case: FromDishka[UploadImageUseCase],
    file: UploadFile = File(...),
) -> UploadResponse:
    """Upload a JPG, GIF or PNG image (max 5 MB).

    Larger images are scaled down to fit 320x240.
    """
    content = await read_bounded(file, upload_image_use_case.max_bytes)
    try:
        return await upload_image_use_case.execute(
            UploadRequest(filename=file.filename, content=content)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/text", response_model=UploadResponse)
async def upload_text_file(
    upload_text_file_use_case: FromDishka[UploadTextFileUseCase],
    file: UploadFile = File(...),
) -> UploadResponse:
    """Upload a TXT file (max 100 KB)."""
    content = await read_bounded(file, upload_text_file_use_case.max_bytes)
    try:
        return await upload_text_file_use_case.execute(
            UploadRequest(filename=file.filename, content=content)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
