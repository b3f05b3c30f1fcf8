"""Captcha use cases."""

from .issue_captcha import IssueCaptchaResponse, IssueCaptchaUseCase
from .validate_captcha import (
    ValidateCaptchaRequest,
    ValidateCaptchaResponse,
    ValidateCaptchaUseCase,
)

__all__ = [
    "IssueCaptchaResponse",
    "IssueCaptchaUseCase",
    "ValidateCaptchaRequest",
    "ValidateCaptchaResponse",
    "ValidateCaptchaUseCase",
]
