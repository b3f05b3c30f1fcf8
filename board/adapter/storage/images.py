"""Image processing with Pillow: attachment resizing and CAPTCHA drawing."""

import asyncio
import io
import secrets

from PIL import Image, ImageDraw, ImageFont

from board.domain.error import ValidationError
from board.domain.service import CaptchaRenderer, ImageProcessor

PIL_FORMATS = {
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
    ".gif": "GIF",
}
JPEG_QUALITY = 85

CAPTCHA_SIZE = (200, 80)
CAPTCHA_FONT_SIZE = 32
CAPTCHA_NOISE_LINES = 6


def scaled_size(
    width: int, height: int, max_width: int, max_height: int
) -> tuple[int, int]:
    """Proportional size that fits within the bounds.

    Sizes already within bounds are returned unchanged. Dimensions are
    truncated, never below 1 pixel.
    """
    if width <= max_width and height <= max_height:
        return width, height
    ratio = min(max_width / width, max_height / height)
    return max(1, int(width * ratio)), max(1, int(height * ratio))


class PillowImageProcessor(ImageProcessor):
    """Decodes, shrinks and re-encodes uploads in their declared format."""

    def _fit_blocking(
        self, content: bytes, extension: str, max_width: int, max_height: int
    ) -> bytes:
        image_format = PIL_FORMATS[extension]
        try:
            with Image.open(io.BytesIO(content)) as source:
                source.load()
                size = scaled_size(*source.size, max_width, max_height)
                image = (
                    source.resize(size, Image.Resampling.LANCZOS)
                    if size != source.size
                    else source.copy()
                )
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise ValidationError("File is not a valid image") from e

        save_kwargs = {}
        if image_format == "JPEG":
            if image.mode not in ("RGB", "L"):
                image = image.convert("RGB")
            save_kwargs["quality"] = JPEG_QUALITY

        output = io.BytesIO()
        image.save(output, format=image_format, **save_kwargs)
        return output.getvalue()

    async def fit_within(
        self, content: bytes, extension: str, max_width: int, max_height: int
    ) -> bytes:
        return await asyncio.to_thread(
            self._fit_blocking, content, extension, max_width, max_height
        )


class PillowCaptchaRenderer(CaptchaRenderer):
    """Draws the code in black on a white 200x80 PNG over a few grey lines."""

    def __init__(self, font_size: int = CAPTCHA_FONT_SIZE) -> None:
        self.font = ImageFont.load_default(size=font_size)

    def _render_blocking(self, code: str) -> bytes:
        width, height = CAPTCHA_SIZE
        image = Image.new("RGB", CAPTCHA_SIZE, "white")
        draw = ImageDraw.Draw(image)
        for _ in range(CAPTCHA_NOISE_LINES):
            start = (secrets.randbelow(width), secrets.randbelow(height))
            end = (secrets.randbelow(width), secrets.randbelow(height))
            draw.line([start, end], fill=(170, 170, 170), width=2)
        draw.text((10, 20), code, fill="black", font=self.font)

        output = io.BytesIO()
        image.save(output, format="PNG")
        return output.getvalue()

    async def render(self, code: str) -> bytes:
        return await asyncio.to_thread(self._render_blocking, code)
