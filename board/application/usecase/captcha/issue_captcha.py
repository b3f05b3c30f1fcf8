"""Issue captcha use case."""

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import CaptchaService


class IssueCaptchaResponse(BaseModel):
    """A fresh challenge: show ``image``, send ``token`` back on submit.

    ``image`` is a base64-encoded PNG of ``code``.
    """

    token: str
    code: str
    image: str


class IssueCaptchaUseCase(BaseUseCase):
    """Use case for issuing a CAPTCHA challenge."""

    def __init__(self, captcha_service: CaptchaService) -> None:
        self.captcha_service = captcha_service

    async def execute(self, request: None = None) -> IssueCaptchaResponse:
        challenge = await self.captcha_service.issue()
        return IssueCaptchaResponse(
            token=challenge.token, code=challenge.code, image=challenge.image
        )
