"""Unit tests for CaptchaService."""

import asyncio
import base64
import io

import pytest
from PIL import Image

from board.adapter.cache import InMemoryCacheBackend
from board.adapter.storage import PillowCaptchaRenderer
from board.domain.error import CacheUnavailableError
from board.domain.service import CaptchaService
from board.domain.service.captcha_service import CODE_ALPHABET
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIssue:
    """Tests for issuing challenges."""

    @pytest.mark.asyncio
    async def test_issue_returns_code_from_alphabet(self, unit_env):
        """Codes use the configured length and upper-case alphanumerics."""
        captcha_service = await unit_env.get(CaptchaService)

        challenge = await captcha_service.issue()

        assert len(challenge.code) == 6
        assert set(challenge.code) <= set(CODE_ALPHABET)
        assert challenge.token

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, unit_env):
        captcha_service = await unit_env.get(CaptchaService)

        first = await captcha_service.issue()
        second = await captcha_service.issue()

        assert first.token != second.token

    @pytest.mark.asyncio
    async def test_image_is_a_200x80_png(self, unit_env):
        """The challenge carries the code drawn as a base64 PNG."""
        captcha_service = await unit_env.get(CaptchaService)

        challenge = await captcha_service.issue()

        with Image.open(io.BytesIO(base64.b64decode(challenge.image))) as image:
            assert image.format == "PNG"
            assert image.size == (200, 80)
            # Something besides the white background was drawn
            assert len(image.getcolors(maxcolors=256 * 256) or []) != 1


class TestValidate:
    """Tests for checking answers."""

    @pytest.mark.asyncio
    async def test_correct_code_is_accepted_ignoring_case(self, unit_env):
        """Lower-case answers match."""
        captcha_service = await unit_env.get(CaptchaService)
        challenge = await captcha_service.issue()

        assert await captcha_service.validate(challenge.token, challenge.code.lower())

    @pytest.mark.asyncio
    async def test_wrong_code_keeps_challenge_for_retry(self, unit_env):
        """A miss doesn't consume the challenge."""
        captcha_service = await unit_env.get(CaptchaService)
        challenge = await captcha_service.issue()

        assert not await captcha_service.validate(challenge.token, "WRONG!")
        assert await captcha_service.validate(challenge.token, challenge.code)

    @pytest.mark.asyncio
    async def test_code_validates_once(self, unit_env):
        """A pending challenge is consumed by a correct answer."""
        captcha_service = await unit_env.get(CaptchaService)
        challenge = await captcha_service.issue()

        assert await captcha_service.validate(challenge.token, challenge.code)
        assert not await captcha_service.validate(challenge.token, challenge.code)

    @pytest.mark.asyncio
    async def test_unknown_token_is_rejected(self, unit_env):
        captcha_service = await unit_env.get(CaptchaService)

        assert not await captcha_service.validate("nope", "ABC123")

    @pytest.mark.asyncio
    async def test_expired_challenge_is_rejected(self):
        """Challenges expire after their TTL."""
        now = [0.0]
        captcha_service = CaptchaService(
            InMemoryCacheBackend(clock=lambda: now[0]),
            PillowCaptchaRenderer(),
            ttl_seconds=60,
        )
        challenge = await captcha_service.issue()

        now[0] = 61.0

        assert not await captcha_service.validate(challenge.token, challenge.code)

    @pytest.mark.asyncio
    async def test_outage_propagates(self, unit_env):
        """An unreachable store must not let a CAPTCHA pass."""
        captcha_service = await unit_env.get(CaptchaService)
        backend = await unit_env.get(InMemoryCacheBackend)
        challenge = await captcha_service.issue()
        backend.available = False

        with pytest.raises(CacheUnavailableError):
            await captcha_service.validate(challenge.token, challenge.code)


class TestRedeem:
    """Tests for spending verified tokens."""

    @pytest.mark.asyncio
    async def test_verified_token_redeems_once(self, unit_env):
        """A verified token can be spent a single time."""
        captcha_service = await unit_env.get(CaptchaService)
        challenge = await captcha_service.issue()
        await captcha_service.validate(challenge.token, challenge.code)

        assert await captcha_service.redeem(challenge.token)
        assert not await captcha_service.redeem(challenge.token)

    @pytest.mark.asyncio
    async def test_unverified_token_cannot_be_redeemed(self, unit_env):
        """Issuing alone doesn't verify a token."""
        captcha_service = await unit_env.get(CaptchaService)
        challenge = await captcha_service.issue()

        assert not await captcha_service.redeem(challenge.token)

    @pytest.mark.asyncio
    async def test_concurrent_redeems_spend_token_once(self, unit_env):
        """Two creates racing on one token can't both pass."""
        captcha_service = await unit_env.get(CaptchaService)
        challenge = await captcha_service.issue()
        await captcha_service.validate(challenge.token, challenge.code)

        results = await asyncio.gather(
            captcha_service.redeem(challenge.token),
            captcha_service.redeem(challenge.token),
        )

        assert sorted(results) == [False, True]
