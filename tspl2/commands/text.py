"""
Text commands for TSPL/TSPL2 printers.

TEXT prints a single line at a position; BLOCK wraps a paragraph inside a
box. Both take a resident font, a clockwise rotation and integer
magnification factors.

Reference: TSPL/TSPL2 Programming Manual, "Label Formatting Commands"
"""

from typing import List, Optional

from tspl2.commands.base import Argument, Command, Quoted, flag
from tspl2.exceptions import ValidationError
from tspl2.model.enums import Alignment, Font, Rotation
from tspl2.validation import (
    MAX_BLOCK_CONTENT_BYTES,
    require_max,
    require_member,
    require_range,
)

__all__ = [
    "text",
    "block",
]


def _check_style(
    font: Font, rotation: Rotation, multiply_x: int, multiply_y: int, alignment: Optional[Alignment]
) -> None:
    require_member("font", font, Font)
    require_member("rotation", rotation, Rotation)
    if alignment is not None:
        require_member("alignment", alignment, Alignment)
    require_range("multiply_x", multiply_x, 1, 10)
    require_range("multiply_y", multiply_y, 1, 10)


def text(
    x: int,
    y: int,
    font: Font,
    rotation: Rotation,
    multiply_x: int,
    multiply_y: int,
    content: str,
    alignment: Optional[Alignment] = None,
) -> Command:
    """
    Print a line of text.

    Command: TEXT x,y,"font",rotation,x-multiplication,y-multiplication,[alignment,]"content"

    Args:
        x: X position in dots.
        y: Y position in dots.
        font: Resident font.
        rotation: Clockwise rotation.
        multiply_x: Horizontal magnification 1-10.
        multiply_y: Vertical magnification 1-10.
        content: Text to print.
        alignment: Optional alignment relative to x.

    Raises:
        ValidationError: If font, rotation or alignment is not a vocabulary
            member, or a magnification is outside 1-10.

    Example:
        >>> text(177, 171, Font.FONT_24X32, Rotation.NO_ROTATION, 1, 1,
        ...      "0123456789AB", Alignment.CENTER).text()
        'TEXT 177,171,"4",0,1,1,2,"0123456789AB"'
    """
    _check_style(font, rotation, multiply_x, multiply_y, alignment)
    args: List[Argument] = [x, y, Quoted(font.token), rotation, multiply_x, multiply_y]
    if alignment is not None:
        args.append(alignment)
    args.append(Quoted(content))
    return Command("TEXT", tuple(args))


def block(
    x: int,
    y: int,
    width: int,
    height: int,
    font: Font,
    rotation: Rotation,
    multiply_x: int,
    multiply_y: int,
    content: str,
    space: Optional[int] = None,
    alignment: Optional[Alignment] = None,
    fit: Optional[bool] = None,
    encoding: str = "utf-8",
) -> Command:
    """
    Print a paragraph wrapped inside a box.

    Command: BLOCK x,y,width,height,"font",rotation,x-mul,y-mul,[space,][align,][fit,]"content"

    Args:
        x, y, width, height: Box in dots.
        space: Extra line spacing in dots.
        fit: Shrink text to fit the box.
        encoding: Encoding the content will be written with; the content
            limit applies to the encoded bytes between the quotes, after
            each `"` has been escaped.

    Raises:
        ValidationError: If a vocabulary argument is not a member, a
            magnification is outside 1-10 or the content exceeds 4096 bytes.
    """
    _check_style(font, rotation, multiply_x, multiply_y, alignment)
    quoted = Quoted(content)
    try:
        content_bytes = len(quoted.escaped().encode(encoding))
    except UnicodeEncodeError as e:
        raise ValidationError(
            f"BLOCK content cannot be encoded as {encoding}", field="content"
        ) from e
    require_max("block content length", content_bytes, MAX_BLOCK_CONTENT_BYTES)

    args: List[Argument] = [
        x,
        y,
        width,
        height,
        Quoted(font.token),
        rotation,
        multiply_x,
        multiply_y,
    ]
    if space is not None:
        args.append(space)
    if alignment is not None:
        args.append(alignment)
    if fit is not None:
        args.append(flag(fit))
    args.append(quoted)
    return Command("BLOCK", tuple(args))
