"""
Linear barcode commands for TSPL/TSPL2 printers.

Contains BARCODE (1D symbologies), TLC39, RSS (GS1 DataBar and composites)
and CODABLOCK F. All positions and module sizes are in dots.

Reference: TSPL/TSPL2 Programming Manual, "Label Formatting Commands"
"""

from typing import List, Optional

from tspl2.commands.base import Argument, Command, Quoted
from tspl2.model.enums import Alignment, Barcode, HumanReadable, NarrowWide, Rotation, RssType
from tspl2.validation import require_member, require_one_of, require_present, require_range

__all__ = [
    "TLC39_DEFAULTS",
    "CODABLOCK_DEFAULTS",
    "barcode",
    "tlc39",
    "rss",
    "codablock",
]

# height, narrow, wide, cell width, cell height (dots)
TLC39_DEFAULTS = (40, 2, 4, 2, 4)
# row height, module width (dots)
CODABLOCK_DEFAULTS = (8, 8)

# =============================================================================
# BARCODE
# =============================================================================


def barcode(
    x: int,
    y: int,
    code_type: Barcode,
    height: int,
    human_readable: HumanReadable,
    rotation: Rotation,
    narrow_wide: NarrowWide,
    content: str,
    alignment: Optional[Alignment] = None,
) -> Command:
    """
    Print a 1D barcode.

    Command: BARCODE x,y,"type",height,readable,rotation,narrow,wide,[alignment,]"content"

    Args:
        x: X position in dots.
        y: Y position in dots.
        code_type: Barcode symbology (see Barcode enum).
        height: Bar height in dots.
        human_readable: Placement of the human readable line.
        rotation: Clockwise rotation.
        narrow_wide: Narrow/wide element widths.
        content: Barcode data. Must be valid for the symbology; the printer
            checks it, not this encoder.
        alignment: Optional alignment relative to x (firmware V6.73+).

    Example:
        >>> barcode(177, 0, Barcode.CODE_39, 177, HumanReadable.ALIGNS_TO_CENTER,
        ...         Rotation.NO_ROTATION, NarrowWide.N1W3, "0123456789AB",
        ...         Alignment.CENTER).text()
        'BARCODE 177,0,"39",177,2,0,1,3,2,"0123456789AB"'
    """
    require_member("code_type", code_type, Barcode)
    require_member("human_readable", human_readable, HumanReadable)
    require_member("rotation", rotation, Rotation)
    require_member("narrow_wide", narrow_wide, NarrowWide)
    if alignment is not None:
        require_member("alignment", alignment, Alignment)
    args: List[Argument] = [
        x,
        y,
        Quoted(code_type.token),
        height,
        human_readable,
        rotation,
        narrow_wide,
    ]
    if alignment is not None:
        args.append(alignment)
    args.append(Quoted(content))
    return Command("BARCODE", tuple(args))


# =============================================================================
# TLC39
# =============================================================================


def tlc39(
    x: int,
    y: int,
    rotation: Rotation,
    eci_number: str,
    serial_number: str,
    additional_data: str,
    height: Optional[int] = None,
    narrow: Optional[int] = None,
    wide: Optional[int] = None,
    cell_width: Optional[int] = None,
    cell_height: Optional[int] = None,
) -> Command:
    """
    Print a TLC39 (TCIF Linked Bar Code 3 of 9).

    Command: TLC39 x,y,rotation,height,narrow,wide,cellwidth,cellheight,"ECI,serial,data"

    Unset sizes fall back to 40, 2, 4, 2 and 4 dots.
    """
    require_member("rotation", rotation, Rotation)
    default_height, default_narrow, default_wide, default_cw, default_ch = TLC39_DEFAULTS
    content = f"{eci_number},{serial_number},{additional_data}"
    return Command(
        "TLC39",
        (
            x,
            y,
            rotation,
            default_height if height is None else height,
            default_narrow if narrow is None else narrow,
            default_wide if wide is None else wide,
            default_cw if cell_width is None else cell_width,
            default_ch if cell_height is None else cell_height,
            Quoted(content),
        ),
    )


# =============================================================================
# RSS
# =============================================================================


def rss(
    x: int,
    y: int,
    rss_type: RssType,
    rotation: Rotation,
    module_width: int,
    separator_height: int,
    content: str,
    segment_width: Optional[int] = None,
    linear_height: Optional[int] = None,
) -> Command:
    """
    Print a GS1 DataBar (RSS) or composite barcode.

    Command: RSS x,y,"type",rotation,pixMult,sepHt,[segWidth|linHeight,]"content"

    Args:
        module_width: Pixels per module in dots (1-10).
        separator_height: Separator row height, 1 or 2.
        segment_width: Segments per row (2-22). Required for RSSEXP only.
        linear_height: Height of the UCC/EAN-128 part (1-500). Required for
            UCC128CCA and UCC128CCC only.

    Raises:
        ValidationError: If a size is out of range or a required size for
            the chosen type is missing.
    """
    require_member("rss_type", rss_type, RssType)
    require_member("rotation", rotation, Rotation)
    require_range("rss module width", module_width, 1, 10)
    require_one_of("rss separator height", separator_height, (1, 2))

    args: List[Argument] = [x, y, Quoted(rss_type.token), rotation, module_width, separator_height]
    if rss_type.needs_segment_width:
        present = require_present("segment_width", segment_width, f"for {rss_type.token}")
        args.append(require_range("rss segment width", present, 2, 22))
    elif rss_type.needs_linear_height:
        present = require_present("linear_height", linear_height, f"for {rss_type.token}")
        args.append(require_range("rss linear height", present, 1, 500))
    args.append(Quoted(content))
    return Command("RSS", tuple(args))


# =============================================================================
# CODABLOCK
# =============================================================================


def codablock(
    x: int,
    y: int,
    rotation: Rotation,
    content: str,
    row_height: Optional[int] = None,
    module_width: Optional[int] = None,
) -> Command:
    """Print a CODABLOCK F barcode. Row height and module width default to 8 dots."""
    require_member("rotation", rotation, Rotation)
    default_row_height, default_module_width = CODABLOCK_DEFAULTS
    return Command(
        "CODABLOCK",
        (
            x,
            y,
            rotation,
            default_row_height if row_height is None else row_height,
            default_module_width if module_width is None else module_width,
            Quoted(content),
        ),
    )
