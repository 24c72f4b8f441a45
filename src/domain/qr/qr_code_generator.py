from __future__ import annotations

from typing import Protocol

from PIL import Image

DEFAULT_QR_SIZE = 512


class QRCodeGenerator(Protocol):
    def generate_image(self, content: str, size: int = DEFAULT_QR_SIZE) -> Image.Image:
        """Encode ``content`` into a ``size`` x ``size`` image."""
        ...
