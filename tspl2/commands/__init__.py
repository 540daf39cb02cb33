"""
TSPL/TSPL2 command encoders.

Every encoder is a pure function: it validates its parameters, then returns
a :class:`Command` whose ``encode()`` gives the exact bytes for the printer.
Lengths must already be converted to dots, except for the setup commands
that take physical units directly (SIZE, GAP, BLINE, OFFSET, LIMITFEED).

Module Structure:
    commands/
    ├── __init__.py      # This file (public API exports)
    ├── base.py          # Command, Quoted, CRLF
    ├── setup.py         # Geometry, calibration, speed, density, code pages
    ├── control.py       # CLS, FEED, PRINT, SOUND, CUT, SELFTEST, DELAY...
    ├── text.py          # TEXT, BLOCK
    ├── barcode.py       # BARCODE, TLC39, RSS, CODABLOCK
    ├── matrix2d.py      # QRCODE, DMATRIX, PDF417, MPDF417, AZTEC
    └── graphics.py      # BAR, BOX, CIRCLE, ELLIPSE, DIAGONAL, ERASE, REVERSE, BITMAP

Usage:
    >>> from tspl2.commands import density, print_label
    >>> density(8).encode() + print_label(1).encode()
    b'DENSITY 8\\r\\nPRINT 1\\r\\n'
"""

from tspl2.commands.barcode import barcode, codablock, rss, tlc39
from tspl2.commands.base import CRLF, Command, Quoted
from tspl2.commands.control import (
    backfeed,
    backup,
    cls,
    cut,
    delay,
    display,
    eoj,
    feed,
    formfeed,
    home,
    initial_printer,
    menu,
    print_label,
    selftest,
    sound,
)
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
from tspl2.commands.matrix2d import aztec, data_matrix, mpdf417, pdf417, qrcode
from tspl2.commands.setup import (
    auto_detect,
    bline,
    bline_detect,
    codepage,
    country,
    density,
    direction,
    gap,
    gap_detect,
    limit_feed,
    offset,
    reference,
    shift,
    size,
    speed,
)
from tspl2.commands.text import block, text

__all__ = [
    # Wire form
    "CRLF",
    "Command",
    "Quoted",
    # Setup
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
    # Control
    "cls",
    "feed",
    "backup",
    "backfeed",
    "formfeed",
    "home",
    "print_label",
    "sound",
    "cut",
    "selftest",
    "eoj",
    "delay",
    "initial_printer",
    "display",
    "menu",
    # Text
    "text",
    "block",
    # Barcodes
    "barcode",
    "tlc39",
    "rss",
    "codablock",
    # 2D symbols
    "qrcode",
    "data_matrix",
    "pdf417",
    "mpdf417",
    "aztec",
    # Graphics
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
