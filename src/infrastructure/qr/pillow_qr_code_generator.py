from __future__ import annotations

import io
import logging

import qrcode
from PIL import Image, ImageDraw
from qrcode.exceptions import DataOverflowError

from domain.qr.qr_code_generator import DEFAULT_QR_SIZE, QRCodeGenerator
from domain.todo.exceptions.todo_exceptions import QRCodeGenerationError

logger = logging.getLogger(__name__)

# A QR code is about 25 modules wide at the payload sizes we produce.
_MODULES_PER_SIDE = 25
_FALLBACK_BORDER_PX = 10


class PillowQRCodeGenerator(QRCodeGenerator):
    """Renders QR codes with ``qrcode`` and rescales them with Pillow."""

    def generate_image(self, content: str, size: int = DEFAULT_QR_SIZE) -> Image.Image:
        if size <= 0:
            raise QRCodeGenerationError(f"QR code size must be positive, got {size}")
        png_bytes = self._render_png(content, size)
        try:
            image = self._decode(png_bytes)
        except (OSError, ValueError):
            logger.warning("Could not decode rendered QR code, using placeholder", exc_info=True)
            image = create_fallback_image(size)
        if image.size != (size, size):
            image = image.resize((size, size), Image.Resampling.NEAREST)
        return image

    def _render_png(self, content: str, size: int) -> bytes:
        qr = qrcode.QRCode(box_size=max(1, size // _MODULES_PER_SIDE))
        try:
            qr.add_data(content)
            qr.make(fit=True)
        except DataOverflowError as exc:
            raise QRCodeGenerationError(f"Content too long for a QR code ({len(content)} chars)") from exc
        except ValueError as exc:
            # Newer qrcode releases report overflow as an invalid version;
            # UnicodeEncodeError is a ValueError too.
            raise QRCodeGenerationError(f"Cannot encode content as a QR code: {exc}") from exc
        buffer = io.BytesIO()
        qr.make_image(fill_color="black", back_color="white").save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _decode(png_bytes: bytes) -> Image.Image:
        image = Image.open(io.BytesIO(png_bytes))
        image.load()
        return image.convert("RGB")


def create_fallback_image(size: int) -> Image.Image:
    """White square with a black border, shown when rendering failed."""
    image = Image.new("RGB", (size, size), "white")
    draw = ImageDraw.Draw(image)
    border = min(_FALLBACK_BORDER_PX, size)
    draw.rectangle((0, 0, size - 1, border - 1), fill="black")
    draw.rectangle((0, 0, border - 1, size - 1), fill="black")
    draw.rectangle((size - border, 0, size - 1, size - 1), fill="black")
    draw.rectangle((0, size - border, size - 1, size - 1), fill="black")
    return image
