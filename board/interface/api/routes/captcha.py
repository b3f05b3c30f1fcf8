"""Captcha routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from board.application.usecase.captcha import (
    IssueCaptchaResponse,
    IssueCaptchaUseCase,
    ValidateCaptchaRequest,
    ValidateCaptchaResponse,
    ValidateCaptchaUseCase,
)
from board.domain.error import CacheUnavailableError

router = APIRouter(prefix="/captcha", tags=["captcha"], route_class=DishkaRoute)


@router.get("", response_model=IssueCaptchaResponse)
async def issue_captcha(
    issue_captcha_use_case: FromDishka[IssueCaptchaUseCase],
) -> IssueCaptchaResponse:
    """Issue a new CAPTCHA challenge."""
    try:
        return await issue_captcha_use_case.execute()
    except CacheUnavailableError as e:
        logfire.warn("Captcha store unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Captcha service temporarily unavailable",
        )


@router.post("/validate", response_model=ValidateCaptchaResponse)
async def validate_captcha(
    request: ValidateCaptchaRequest,
    validate_captcha_use_case: FromDishka[ValidateCaptchaUseCase],
) -> ValidateCaptchaResponse:
    """Check a CAPTCHA answer. A valid answer verifies the token for one comment."""
    try:
        return await validate_captcha_use_case.execute(request)
    except CacheUnavailableError as e:
        logfire.warn("Captcha store unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Captcha service temporarily unavailable",
        )
