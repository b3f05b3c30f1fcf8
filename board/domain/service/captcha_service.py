"""CAPTCHA challenge service.

Challenges live in the cache backend rather than process memory, so any
app instance can validate a code issued by another one.

Lifecycle of a token::

    issue()     -> captcha:pending:<token> = CODE
    validate()  -> pending removed, captcha:verified:<token> stored
    redeem()    -> verified popped atomically, comment may be created
"""

import base64
import secrets
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import uuid4

import logfire

from .base import Service
from .page_cache import CacheBackend

CODE_ALPHABET = string.ascii_uppercase + string.digits
PENDING_PREFIX = "captcha:pending:"
VERIFIED_PREFIX = "captcha:verified:"


class CaptchaRenderer(ABC):
    """Draws a challenge code as a picture."""

    @abstractmethod
    async def render(self, code: str) -> bytes:
        """Return the code rendered as PNG bytes."""
        pass


@dataclass(frozen=True)
class CaptchaChallenge:
    """Issued challenge: the client shows ``image`` and echoes ``token``.

    ``image`` is a base64-encoded PNG of ``code``.
    """

    token: str
    code: str
    image: str


class CaptchaService(Service):
    """Issues and checks single-use CAPTCHA codes.

    Backend failures propagate as CacheUnavailableError; unlike page
    caching, a CAPTCHA that can't be checked must not pass.
    """

    def __init__(
        self,
        backend: CacheBackend,
        renderer: CaptchaRenderer,
        code_length: int = 6,
        ttl_seconds: int = 300,
    ) -> None:
        """Initialize captcha service.

        Args:
            backend: Store for pending and verified challenges
            renderer: Draws the code shown to the user
            code_length: Number of characters in a code
            ttl_seconds: How long a challenge stays valid
        """
        self.backend = backend
        self.renderer = renderer
        self.code_length = code_length
        self.ttl_seconds = ttl_seconds

    def _generate_code(self) -> str:
        return "".join(secrets.choice(CODE_ALPHABET) for _ in range(self.code_length))

    async def issue(self) -> CaptchaChallenge:
        """Create and store a new challenge."""
        code = self._generate_code()
        png = await self.renderer.render(code)
        challenge = CaptchaChallenge(
            token=str(uuid4()),
            code=code,
            image=base64.b64encode(png).decode("ascii"),
        )
        await self.backend.set(
            PENDING_PREFIX + challenge.token, challenge.code, self.ttl_seconds
        )
        logfire.info("Captcha issued", token=challenge.token)
        return challenge

    async def validate(self, token: str, code: str) -> bool:
        """Check a code against its challenge, ignoring case.

        A match consumes the pending challenge and marks the token as
        verified. A mismatch leaves the challenge in place for a retry.

        Returns:
            True if the code matched
        """
        with logfire.span("captcha_service.validate", token=token):
            expected = await self.backend.get(PENDING_PREFIX + token)
            if expected is None or expected.upper() != code.strip().upper():
                logfire.info("Captcha rejected", token=token, known=expected is not None)
                return False

            await self.backend.remove(PENDING_PREFIX + token)
            await self.backend.set(VERIFIED_PREFIX + token, "1", self.ttl_seconds)
            logfire.info("Captcha verified", token=token)
            return True

    async def redeem(self, token: str) -> bool:
        """Spend a verified token. Each token can be redeemed once.

        Returns:
            True if the token was verified and not yet used
        """
        if await self.backend.pop(VERIFIED_PREFIX + token) is None:
            logfire.warn("Captcha token not verified", token=token)
            return False
        return True
