"""
2D symbol commands for TSPL/TSPL2 printers.

Contains QRCODE, DMATRIX (ECC200 only), PDF417, MPDF417 (Micro PDF417) and
AZTEC. All positions and module sizes are in dots.

AZTEC is length-prefixed: its content goes on the wire as raw bytes after
the byte count, so it is not quoted and not escaped.

Reference: TSPL/TSPL2 Programming Manual, "Label Formatting Commands"
"""

from typing import List, Optional

from tspl2.commands.base import Argument, Command, Quoted, flag
from tspl2.model.enums import QrCodeJustification, Rotation
from tspl2.validation import qr_ecc_grade, require_member, require_range

__all__ = [
    "QR_MODE_AUTO",
    "MPDF417_DEFAULTS",
    "qrcode",
    "data_matrix",
    "pdf417",
    "mpdf417",
    "aztec",
]

QR_MODE_AUTO = "A"
# module width, module height (dots)
MPDF417_DEFAULTS = (1, 10)


def qrcode(
    x: int,
    y: int,
    ecc_level: int,
    cell_width: int,
    rotation: Rotation,
    content: str,
    justification: Optional[QrCodeJustification] = None,
) -> Command:
    """
    Print a QR code in automatic encoding mode.

    Command: QRCODE x,y,ECC,cellwidth,A,rotation,[justification,]"content"

    Args:
        ecc_level: Error correction level. 0-6 -> L, 7-14 -> M,
            15-24 -> Q, higher -> H.
        cell_width: Module size in dots (1-10).

    Raises:
        ValidationError: If cell_width is outside 1-10, ecc_level is
            negative, or rotation or justification is not a member.

    Example:
        >>> qrcode(106, 0, 35, 6, Rotation.NO_ROTATION, "0123456789AB").text()
        'QRCODE 106,0,H,6,A,0,"0123456789AB"'
    """
    grade = qr_ecc_grade(ecc_level)
    require_range("qr cell width", cell_width, 1, 10)
    require_member("rotation", rotation, Rotation)
    args: List[Argument] = [x, y, grade, cell_width, QR_MODE_AUTO, rotation]
    if justification is not None:
        require_member("justification", justification, QrCodeJustification)
        args.append(justification)
    args.append(Quoted(content))
    return Command("QRCODE", tuple(args))


def data_matrix(x: int, y: int, width: int, height: int, content: str) -> Command:
    """Print an ECC200 DataMatrix. Command: DMATRIX x,y,width,height,content"""
    return Command("DMATRIX", (x, y, width, height, Quoted(content)))


def pdf417(x: int, y: int, width: int, height: int, rotation: Rotation, content: str) -> Command:
    """Print a PDF417 symbol. Command: PDF417 x,y,width,height,rotation,content"""
    require_member("rotation", rotation, Rotation)
    return Command("PDF417", (x, y, width, height, rotation, Quoted(content)))


def mpdf417(
    x: int,
    y: int,
    rotation: Rotation,
    content: str,
    module_width: Optional[int] = None,
    module_height: Optional[int] = None,
    columns: Optional[int] = None,
) -> Command:
    """
    Print a Micro PDF417 symbol.

    Command: MPDF417 x,y,rotation,moduleWidth,moduleHeight,columns,"content"

    Args:
        module_width: Module width in dots, default 1.
        module_height: Module height in dots, default 10.
        columns: Data columns 1-4. None lets the printer choose (sent as 0).

    Raises:
        ValidationError: If columns is given outside 1-4.
    """
    require_member("rotation", rotation, Rotation)
    default_width, default_height = MPDF417_DEFAULTS
    column_count = 0 if columns is None else require_range("mpdf417 columns", columns, 1, 4)
    return Command(
        "MPDF417",
        (
            x,
            y,
            rotation,
            default_width if module_width is None else module_width,
            default_height if module_height is None else module_height,
            column_count,
            Quoted(content),
        ),
    )


def aztec(
    x: int,
    y: int,
    rotation: Rotation,
    size: int,
    error_control: int,
    content: bytes,
    flg: bool = False,
    menu: bool = False,
    symbols: int = 1,
    reversed_image: bool = False,
) -> Command:
    """
    Print an Aztec symbol.

    Command: AZTEC x,y,rotation,size,ecp,flg,menu,multi,rev,length,content

    Args:
        size: Module size in dots (1-20).
        error_control: Error control percentage (0-300).
        content: Already-encoded symbol data, written verbatim.
        flg: Treat the first character of content as an ECI/FLG escape.
        menu: Menu symbol.
        symbols: Number of symbols for structured append (1-26).
        reversed_image: Print white on black.

    Raises:
        ValidationError: If size, error_control or symbols is out of range.
    """
    require_member("rotation", rotation, Rotation)
    require_range("aztec size", size, 1, 20)
    require_range("aztec error control", error_control, 0, 300)
    require_range("aztec symbol count", symbols, 1, 26)
    return Command(
        "AZTEC",
        (
            x,
            y,
            rotation,
            size,
            error_control,
            flag(flg),
            flag(menu),
            symbols,
            flag(reversed_image),
            len(content),
        ),
        payload=bytes(content),
    )
