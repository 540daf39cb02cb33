import pytest
from PIL import Image

from tspl2.commands.graphics import (
    bar,
    bitmap,
    box,
    circle,
    diagonal,
    ellipse,
    erase,
    pack_image,
    reverse,
)
from tspl2.exceptions import ValidationError
from tspl2.model.enums import BitmapMode


class TestShapes:
    def test_bar(self) -> None:
        assert bar(10, 20, 300, 4).encode() == b"BAR 10,20,300,4\r\n"

    def test_box_default_radius(self) -> None:
        assert box(0, 0, 100, 50, 2).text() == "BOX 0,0,100,50,2,0"

    def test_box_with_radius(self) -> None:
        assert box(0, 0, 100, 50, 2, 8).text() == "BOX 0,0,100,50,2,8"

    def test_circle(self) -> None:
        assert circle(50, 50, 100, 3).text() == "CIRCLE 50,50,100,3"

    def test_ellipse(self) -> None:
        assert ellipse(10, 10, 200, 100, 4).text() == "ELLIPSE 10,10,200,100,4"

    def test_diagonal(self) -> None:
        assert diagonal(0, 0, 100, 100, 2).text() == "DIAGONAL 0,0,100,100,2"

    def test_erase_and_reverse(self) -> None:
        assert erase(1, 2, 3, 4).text() == "ERASE 1,2,3,4"
        assert reverse(1, 2, 3, 4).text() == "REVERSE 1,2,3,4"


class TestBitmap:
    def test_payload_verbatim(self) -> None:
        cmd = bitmap(0, 0, 1, 2, BitmapMode.OVERWRITE, b"\x00\xff")
        assert cmd.encode() == b"BITMAP 0,0,1,2,0,\x00\xff\r\n"

    def test_mode_token(self) -> None:
        assert bitmap(5, 6, 1, 1, BitmapMode.XOR, b"\x0f").encode() == b"BITMAP 5,6,1,1,2,\x0f\r\n"

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x00\x00"])
    def test_data_length_must_match(self, data: bytes) -> None:
        with pytest.raises(ValidationError) as exc_info:
            bitmap(0, 0, 1, 2, BitmapMode.OVERWRITE, data)
        assert exc_info.value.field == "data"

    def test_zero_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            bitmap(0, 0, 0, 1, BitmapMode.OVERWRITE, b"")


class TestPackImage:
    def test_black_pixels_become_zero_bits(self) -> None:
        image = Image.new("L", (8, 2), color=255)
        image.putpixel((0, 0), 0)
        image.putpixel((7, 1), 0)
        width_bytes, height, data = pack_image(image, threshold=128)
        assert (width_bytes, height) == (1, 2)
        assert data == bytes([0b01111111, 0b11111110])

    def test_rows_are_padded_to_whole_bytes(self) -> None:
        image = Image.new("1", (10, 3), color=0)
        width_bytes, height, data = pack_image(image)
        assert (width_bytes, height) == (2, 3)
        assert len(data) == 6
        assert data[0] == 0x00

    def test_packed_image_feeds_bitmap(self) -> None:
        image = Image.new("RGB", (16, 4), color=(255, 255, 255))
        width_bytes, height, data = pack_image(image)
        cmd = bitmap(0, 0, width_bytes, height, BitmapMode.OVERWRITE, data)
        assert cmd.payload == b"\xff" * 8

    def test_threshold_range(self) -> None:
        with pytest.raises(ValidationError):
            pack_image(Image.new("L", (8, 1)), threshold=256)


def test_bitmap_mode_must_be_member() -> None:
    with pytest.raises(ValidationError) as exc_info:
        bitmap(0, 0, 1, 1, 0, b"\x00")  # type: ignore[arg-type]
    assert exc_info.value.field == "mode"
