"""
Setup and media commands for TSPL/TSPL2 printers.

Contains label geometry, sensor calibration, print speed/darkness,
orientation and character set selection.

SIZE, GAP, BLINE, OFFSET and LIMITFEED take physical lengths and write them
in display form (``30 mm``, ``2.5``, ``100 dot``); the printer converts
them itself. Every other positional argument is already in dots.

Reference: TSPL/TSPL2 Programming Manual, "Setup and System Commands"
"""

from typing import Optional, Tuple, Union

from tspl2.commands.base import Command, flag
from tspl2.exceptions import ValidationError
from tspl2.model.enums import CODEPAGE_FAMILIES, Codepage, Country
from tspl2.model.units import Length, format_number
from tspl2.validation import require_member, require_range

__all__ = [
    "size",
    "gap",
    "gap_detect",
    "bline_detect",
    "auto_detect",
    "bline",
    "offset",
    "limit_feed",
    "speed",
    "density",
    "direction",
    "reference",
    "shift",
    "country",
    "codepage",
]

# =============================================================================
# LABEL GEOMETRY
# =============================================================================


def size(width: Length, height: Optional[Length] = None) -> Command:
    """
    Define label width and height.

    Command: SIZE m[,n]

    Args:
        width: Label width.
        height: Label length. Required for firmware older than V8.13.

    Example:
        >>> size(Metric(30), Metric(20)).text()
        'SIZE 30 mm,20 mm'
    """
    if height is None:
        return Command("SIZE", (width.display(),))
    return Command("SIZE", (width.display(), height.display()))


def gap(distance: Length, offset_distance: Optional[Length] = None) -> Command:
    """
    Define the gap between two labels, with an optional gap offset.

    Command: GAP m[,n]
    """
    if offset_distance is None:
        return Command("GAP", (distance.display(),))
    return Command("GAP", (distance.display(), offset_distance.display()))


def bline(black_line_height: Length, extra_feed: Length) -> Command:
    """
    Set the black mark height and the extra feed length per form feed.

    Command: BLINE m,n

    Note:
        The printer expects both values in the same unit.
    """
    return Command("BLINE", (black_line_height.display(), extra_feed.display()))


def offset(distance: Length) -> Command:
    """
    Extra feed length after each label, used in peel-off and cutter modes.

    Command: OFFSET m
    """
    return Command("OFFSET", (distance.display(),))


def limit_feed(
    max_length: Length, minpaper_maxgap: Optional[Tuple[Length, Length]] = None
) -> Command:
    """
    Stop feeding (red LED flashes) when no gap is found within a length.

    Command: LIMITFEED n[,minpaper,maxgap]

    Args:
        max_length: Maximum length for sensor detection.
        minpaper_maxgap: Optional (minimum paper length, maximum gap length).
    """
    if minpaper_maxgap is None:
        return Command("LIMITFEED", (max_length.display(),))
    min_paper, max_gap = minpaper_maxgap
    return Command("LIMITFEED", (max_length.display(), min_paper.display(), max_gap.display()))


# =============================================================================
# SENSOR CALIBRATION
# =============================================================================


def _detect(opcode: str, calibration: Optional[Tuple[int, int]]) -> Command:
    if calibration is None:
        return Command(opcode)
    paper_length, gap_length = calibration
    return Command(opcode, (paper_length, gap_length))


def gap_detect(calibration: Optional[Tuple[int, int]] = None) -> Command:
    """
    Calibrate the gap sensor by feeding paper.

    Command: GAPDETECT [x,y]

    Args:
        calibration: Approximate (paper length, gap length) in dots. When
            None the printer determines both automatically.
    """
    return _detect("GAPDETECT", calibration)


def bline_detect(calibration: Optional[Tuple[int, int]] = None) -> Command:
    """Calibrate the black mark sensor. Command: BLINEDETECT [x,y]"""
    return _detect("BLINEDETECT", calibration)


def auto_detect(calibration: Optional[Tuple[int, int]] = None) -> Command:
    """Calibrate the gap/black mark sensor. Command: AUTODETECT [x,y]"""
    return _detect("AUTODETECT", calibration)


# =============================================================================
# PRINT QUALITY AND ORIENTATION
# =============================================================================


def speed(inches_per_second: Union[int, float, str]) -> Command:
    """
    Set print speed in inches per second.

    Command: SPEED n

    Note:
        The accepted speeds depend on the printer model and are not checked.
    """
    if isinstance(inches_per_second, str):
        value = inches_per_second.strip()
        if not value:
            raise ValidationError("Speed must not be empty", field="speed")
    else:
        value = format_number(inches_per_second)
    return Command("SPEED", (value,))


def density(level: int) -> Command:
    """
    Set printing darkness.

    Command: DENSITY n

    Args:
        level: Darkness 1-15 (printer default is 8).

    Raises:
        ValidationError: If level is outside 1-15.
    """
    require_range("density", level, 1, 15)
    return Command("DENSITY", (level,))


def direction(reversed_direction: bool, mirrored_image: bool = False) -> Command:
    """
    Set printout direction and mirror image. Stored in printer memory.

    Command: DIRECTION n[,m]
    """
    return Command("DIRECTION", (flag(reversed_direction), flag(mirrored_image)))


def reference(x: int, y: int) -> Command:
    """Set the label origin in dots. Command: REFERENCE x,y"""
    return Command("REFERENCE", (x, y))


def shift(y: int, x: Optional[int] = None) -> Command:
    """
    Move the label position in dots.

    Command: SHIFT [x,]y

    A positive value moves the label further from the printing direction,
    a negative value towards it.
    """
    if x is None:
        return Command("SHIFT", (y,))
    return Command("SHIFT", (x, y))


# =============================================================================
# CHARACTER SETS
# =============================================================================


def country(keyboard_country: Country) -> Command:
    """
    Select the KP-200 keypad country.

    Command: COUNTRY nnn

    Example:
        >>> country(Country.GERMAN).text()
        'COUNTRY 049'
    """
    require_member("country", keyboard_country, Country)
    return Command("COUNTRY", (keyboard_country,))


def codepage(page: Codepage) -> Command:
    """
    Select the code page of the international character set.

    Command: CODEPAGE n

    Args:
        page: Member of Codepage7Bit, Codepage8Bit, CodepageWindows or
            CodepageIso.
    """
    require_member("codepage", page, CODEPAGE_FAMILIES)
    return Command("CODEPAGE", (page,))
