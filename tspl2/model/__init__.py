"""Measurement and protocol vocabulary types."""

from tspl2.model.enums import (
    CODEPAGE_FAMILIES,
    Alignment,
    Barcode,
    BitmapMode,
    Codepage,
    Codepage7Bit,
    Codepage8Bit,
    CodepageIso,
    CodepageWindows,
    Country,
    Font,
    HumanReadable,
    NarrowWide,
    QrCodeJustification,
    Rotation,
    RssType,
    SelfTest,
    WireToken,
)
from tspl2.model.units import (
    MM_PER_INCH,
    Dots,
    Imperial,
    Length,
    Metric,
    TapeGeometry,
    check_resolution,
    format_number,
    to_dots,
)

__all__ = [
    "CODEPAGE_FAMILIES",
    "Alignment",
    "Barcode",
    "BitmapMode",
    "Codepage",
    "Codepage7Bit",
    "Codepage8Bit",
    "CodepageIso",
    "CodepageWindows",
    "Country",
    "Font",
    "HumanReadable",
    "NarrowWide",
    "QrCodeJustification",
    "Rotation",
    "RssType",
    "SelfTest",
    "WireToken",
    "MM_PER_INCH",
    "Dots",
    "Imperial",
    "Length",
    "Metric",
    "TapeGeometry",
    "check_resolution",
    "format_number",
    "to_dots",
]
