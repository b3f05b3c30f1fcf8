"""Validate captcha use case."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.domain.service import CaptchaService


class ValidateCaptchaRequest(BaseModel):
    """Validate captcha request."""

    token: str = Field(min_length=1)
    code: str = Field(min_length=1, max_length=32)


class ValidateCaptchaResponse(BaseModel):
    """Validate captcha response."""

    valid: bool


class ValidateCaptchaUseCase(BaseUseCase):
    """Use case for checking a CAPTCHA answer.

    A correct answer marks the token as verified so it can be spent once
    on comment creation.
    """

    def __init__(self, captcha_service: CaptchaService) -> None:
        self.captcha_service = captcha_service

    async def execute(self, request: ValidateCaptchaRequest) -> ValidateCaptchaResponse:
        valid = await self.captcha_service.validate(request.token, request.code)
        return ValidateCaptchaResponse(valid=valid)
