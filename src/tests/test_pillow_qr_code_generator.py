from __future__ import annotations

import pytest

from domain.todo.exceptions.todo_exceptions import QRCodeGenerationError
from infrastructure.qr.pillow_qr_code_generator import (
    PillowQRCodeGenerator,
    create_fallback_image,
)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class _BrokenRenderer(PillowQRCodeGenerator):
    def _render_png(self, content: str, size: int) -> bytes:
        return b"definitely not a png"


def test_generates_square_image_of_requested_size() -> None:
    image = PillowQRCodeGenerator().generate_image('{"title":"hello","desc":""}', 512)

    assert image.size == (512, 512)
    assert image.mode == "RGB"


@pytest.mark.parametrize("size", [64, 300, 1000])
def test_other_sizes_are_exact(size: int) -> None:
    image = PillowQRCodeGenerator().generate_image("hello", size)

    assert image.size == (size, size)


def test_quiet_zone_is_white_and_finder_pattern_is_black() -> None:
    # "hello" fits a version 1 code: 21 modules plus a 4 module border.
    image = PillowQRCodeGenerator().generate_image("hello", 512)

    assert image.getpixel((0, 0)) == WHITE
    assert image.getpixel((132, 132)) == BLACK


def test_decode_failure_falls_back_to_bordered_placeholder() -> None:
    image = _BrokenRenderer().generate_image("hello", 200)

    assert image.size == (200, 200)
    assert image.getpixel((0, 100)) == BLACK
    assert image.getpixel((100, 0)) == BLACK
    assert image.getpixel((199, 100)) == BLACK
    assert image.getpixel((100, 199)) == BLACK
    assert image.getpixel((100, 100)) == WHITE


def test_content_too_long_raises() -> None:
    with pytest.raises(QRCodeGenerationError):
        PillowQRCodeGenerator().generate_image("x" * 3000, 512)


@pytest.mark.parametrize("size", [0, -10])
def test_non_positive_size_raises(size: int) -> None:
    with pytest.raises(QRCodeGenerationError):
        PillowQRCodeGenerator().generate_image("hello", size)


def test_fallback_image_border_width() -> None:
    image = create_fallback_image(100)

    assert image.getpixel((9, 50)) == BLACK
    assert image.getpixel((10, 50)) == WHITE
    assert image.getpixel((90, 50)) == BLACK
    assert image.getpixel((89, 50)) == WHITE


def test_unencodable_title_raises_generation_error() -> None:
    with pytest.raises(QRCodeGenerationError):
        PillowQRCodeGenerator().generate_image('{"title":"a\ud800","desc":""}', 512)


def test_long_description_payload_raises_generation_error() -> None:
    content = '{"title":"Trip","desc":"' + "packing list " * 400 + '"}'

    with pytest.raises(QRCodeGenerationError):
        PillowQRCodeGenerator().generate_image(content, 512)
