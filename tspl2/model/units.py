"""
Lengths and tape geometry.

A length is given in inches, millimeters or printer dots and converted to
dots only when a command is encoded, using the resolution of the session
that encodes it. Conversion runs in single precision (every operand and
intermediate result rounded to a 32-bit float) and truncates toward zero;
it never rounds to the nearest dot.

Display form is used by commands that accept physical units directly
(SIZE, GAP, BLINE, OFFSET, LIMITFEED):

    Imperial(2.5)  -> "2.5"
    Metric(30.0)   -> "30 mm"
    Dots(100)      -> "100 dot"
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Final, Optional, Union

from tspl2.exceptions import ValidationError

__all__ = [
    "MM_PER_INCH",
    "Length",
    "Imperial",
    "Metric",
    "Dots",
    "TapeGeometry",
    "to_dots",
    "format_number",
    "check_resolution",
    "single",
]

MM_PER_INCH: Final[float] = 25.4


def format_number(value: Union[int, float]) -> str:
    """Render a number without a trailing ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def single(value: float) -> float:
    """Round a number to the nearest IEEE 754 single-precision value."""
    return struct.unpack("f", struct.pack("f", value))[0]


def check_resolution(resolution: int) -> None:
    if resolution <= 0:
        raise ValidationError(
            f"Resolution must be a positive number of dots per inch, got {resolution}",
            field="resolution",
        )


class Length:
    """Base of the three length kinds. Instances are immutable."""

    __slots__ = ()

    def to_dots(self, resolution: int) -> int:
        raise NotImplementedError

    def display(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True)
class Imperial(Length):
    """Length in inches."""

    value: float

    def to_dots(self, resolution: int) -> int:
        check_resolution(resolution)
        return math.trunc(single(single(self.value) * single(resolution)))

    def display(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Metric(Length):
    """Length in millimeters."""

    value: float

    def to_dots(self, resolution: int) -> int:
        check_resolution(resolution)
        inches = single(single(self.value) / single(MM_PER_INCH))
        return math.trunc(single(inches * single(resolution)))

    def display(self) -> str:
        return f"{format_number(self.value)} mm"


@dataclass(frozen=True)
class Dots(Length):
    """Length already in device dots. May be negative (SHIFT)."""

    value: int

    def to_dots(self, resolution: int) -> int:
        check_resolution(resolution)
        return self.value

    def display(self) -> str:
        return f"{self.value} dot"


def to_dots(length: Length, resolution: int) -> int:
    """
    Convert a length to an integer dot count.

    Args:
        length: Imperial, Metric or Dots value.
        resolution: Printer resolution in dots per inch (> 0).

    Returns:
        Dot count, truncated toward zero.

    Raises:
        ValidationError: If resolution is not positive.

    Example:
        >>> to_dots(Metric(25.4), 300)
        300
        >>> to_dots(Metric(0.1), 300)
        1
    """
    return length.to_dots(resolution)


@dataclass(frozen=True)
class TapeGeometry:
    """
    Label stock declared when a session is opened.

    Only used to emit the initial SIZE and GAP commands; later drawing
    commands are not checked against it.
    """

    width: Length
    gap: Length
    height: Optional[Length] = None
    gap_offset: Optional[Length] = None
