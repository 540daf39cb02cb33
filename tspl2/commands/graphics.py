"""
Graphics commands for TSPL/TSPL2 printers.

Contains filled bars, boxes, circles, ellipses, diagonals, buffer erase and
reverse, and raw BITMAP images. All coordinates are in dots.

BITMAP data format:
    - 1 bit per dot, 8 horizontal dots per byte, most significant bit first
    - Each row padded to a whole number of bytes (width_bytes)
    - Bit value 1 = no dot (white), 0 = dot (black)
    - Rows top to bottom, exactly width_bytes * height bytes in total

Reference: TSPL/TSPL2 Programming Manual, "Label Formatting Commands"
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from PIL import Image

from tspl2.commands.base import Command
from tspl2.exceptions import ValidationError
from tspl2.model.enums import BitmapMode
from tspl2.validation import require_member, require_range

logger = logging.getLogger(__name__)

__all__ = [
    "bar",
    "box",
    "circle",
    "ellipse",
    "diagonal",
    "erase",
    "reverse",
    "bitmap",
    "pack_image",
]

# =============================================================================
# SHAPES
# =============================================================================


def bar(x: int, y: int, width: int, height: int) -> Command:
    """Draw a filled bar. Command: BAR x,y,width,height"""
    return Command("BAR", (x, y, width, height))


def box(
    x_start: int,
    y_start: int,
    x_end: int,
    y_end: int,
    thickness: int,
    radius: Optional[int] = None,
) -> Command:
    """
    Draw a rectangle.

    Command: BOX x,y,x_end,y_end,thickness,radius

    Args:
        radius: Corner radius in dots, 0 (square corners) when omitted.
    """
    return Command("BOX", (x_start, y_start, x_end, y_end, thickness, radius or 0))


def circle(x: int, y: int, diameter: int, thickness: int) -> Command:
    """Draw a circle. Command: CIRCLE x,y,diameter,thickness"""
    return Command("CIRCLE", (x, y, diameter, thickness))


def ellipse(x: int, y: int, width: int, height: int, thickness: int) -> Command:
    return Command("ELLIPSE", (x, y, width, height, thickness))


def diagonal(x_start: int, y_start: int, x_end: int, y_end: int, thickness: int) -> Command:
    return Command("DIAGONAL", (x_start, y_start, x_end, y_end, thickness))


def erase(x: int, y: int, width: int, height: int) -> Command:
    """Clear a region of the image buffer. Command: ERASE x,y,width,height"""
    return Command("ERASE", (x, y, width, height))


def reverse(x: int, y: int, width: int, height: int) -> Command:
    """Invert a region of the image buffer. Command: REVERSE x,y,width,height"""
    return Command("REVERSE", (x, y, width, height))


# =============================================================================
# BITMAP
# =============================================================================


def bitmap(
    x: int,
    y: int,
    width_bytes: int,
    height: int,
    mode: BitmapMode,
    data: bytes,
) -> Command:
    """
    Draw a raw bitmap.

    Command: BITMAP x,y,width,height,mode,<data>

    Args:
        x: X position in dots.
        y: Y position in dots.
        width_bytes: Row width in bytes (8 dots per byte).
        height: Number of rows in dots.
        mode: How the image combines with the buffer.
        data: Packed rows, written verbatim.

    Raises:
        ValidationError: If data length is not width_bytes * height.

    Example:
        >>> cmd = bitmap(0, 0, 1, 2, BitmapMode.OVERWRITE, b"\\x00\\xff")
        >>> cmd.encode()
        b'BITMAP 0,0,1,2,0,\\x00\\xff\\r\\n'
    """
    require_member("mode", mode, BitmapMode)
    require_range("bitmap width in bytes", width_bytes, 1, 0xFFFF)
    require_range("bitmap height", height, 1, 0xFFFF)
    expected = width_bytes * height
    if len(data) != expected:
        raise ValidationError(
            f"Bitmap data must be {expected} bytes ({width_bytes}x{height}), got {len(data)}",
            field="data",
        )
    return Command("BITMAP", (x, y, width_bytes, height, mode), payload=bytes(data))


def pack_image(image: Image.Image, threshold: Optional[int] = None) -> Tuple[int, int, bytes]:
    """
    Pack an already-loaded Pillow image into BITMAP rows.

    The image is converted to 1-bit mode. Pillow's 1-bit rows are already
    padded to whole bytes and store white as 1, which is the BITMAP layout.

    Args:
        image: Decoded image in any mode.
        threshold: Optional 0-255 gray level; darker pixels become dots.
            When None, Pillow's default Floyd-Steinberg dithering is used.

    Returns:
        (width_bytes, height, data) ready for :func:`bitmap`.
    """
    if threshold is None:
        mono = image.convert("1")
    else:
        require_range("threshold", threshold, 0, 255)
        mono = image.convert("L").point(lambda p: 255 if p >= threshold else 0, mode="1")

    width, height = mono.size
    width_bytes = (width + 7) // 8
    data = mono.tobytes()
    logger.debug(f"Packed {width}x{height} image into {len(data)} bitmap bytes")
    return width_bytes, height, data
