"""
model/enums.py

Protocol vocabularies of the TSPL/TSPL2 command language.

Every member's value is its exact wire token; ``member.token`` is what the
encoders write. Tokens are data: they are never derived from member names
(``Codepage8Bit.UNITED_STATES`` is ``437``, ``Country.GERMAN`` is ``049``).

See Also:
    - TSPL/TSPL2 Programming Manual
    - tspl2/commands (for the command encoders using these tokens)
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Union

__all__ = [
    "WireToken",
    "Barcode",
    "RssType",
    "Font",
    "HumanReadable",
    "Rotation",
    "Alignment",
    "NarrowWide",
    "BitmapMode",
    "QrCodeJustification",
    "SelfTest",
    "Country",
    "Codepage7Bit",
    "Codepage8Bit",
    "CodepageWindows",
    "CodepageIso",
    "Codepage",
    "CODEPAGE_FAMILIES",
]


class WireToken(Enum):
    """Base for vocabularies whose value is the wire token itself."""

    @property
    def token(self) -> str:
        return str(self.value)


# === BARCODES ===


class Barcode(WireToken):
    """Linear barcode symbologies accepted by BARCODE."""

    CODE_128 = "128"  # Code 128, automatic subset switching
    CODE_128M = "128M"  # Code 128, manual subset switching
    EAN_128 = "EAN128"
    EAN_128M = "EAN128M"
    INTERLEAVED_25 = "25"
    INTERLEAVED_25C = "25C"  # with check digit
    STANDARD_25 = "25S"
    INDUSTRIAL_25 = "25I"
    CODE_39 = "39"  # automatic standard / full ASCII
    CODE_39C = "39C"  # with check digit
    CODE_93 = "93"
    EAN_13 = "EAN13"
    EAN_13_PLUS_2 = "EAN13+2"
    EAN_13_PLUS_5 = "EAN13+5"
    EAN_8 = "EAN8"
    EAN_8_PLUS_2 = "EAN8+2"
    EAN_8_PLUS_5 = "EAN8+5"
    CODABAR = "CODA"
    POSTNET = "POST"
    UPC_A = "UPCA"
    UPC_A_PLUS_2 = "UPCA+2"
    UPC_A_PLUS_5 = "UPCA+5"
    UPC_E = "UPCE"
    UPC_E_PLUS_2 = "UPCE+2"
    UPC_E_PLUS_5 = "UPCE+5"
    MSI = "MSI"
    MSI_C = "MSIC"  # with check digit
    PLESSEY = "PLESSEY"
    CHINA_POST = "CPOST"
    ITF_14 = "ITF14"
    EAN_14 = "EAN14"
    CODE_11 = "11"
    TELEPEN = "TELEPEN"  # firmware V6.89EZ+
    TELEPEN_NUMBER = "TELEPENN"  # firmware V6.89EZ+
    PLANET = "PLANET"  # firmware V6.89EZ+
    CODE_49 = "CODE49"  # firmware V6.89EZ+
    DEUTSCHE_POST_IDENTCODE = "DPI"  # firmware V6.91EZ+
    DEUTSCHE_POST_LEITCODE = "DPL"  # firmware V6.91EZ+
    LOGMARS = "LOGMARS"  # Code 39 variant, firmware V6.88EZ+


class RssType(WireToken):
    """GS1 DataBar (RSS) and composite symbologies accepted by RSS."""

    RSS14 = "RSS14"
    RSS14_TRUNCATED = "RSS14T"
    RSS14_STACKED = "RSS14S"
    RSS14_STACKED_OMNIDIRECTIONAL = "RSS14SO"
    RSS_LIMITED = "RSSLIM"
    RSS_EXPANDED = "RSSEXP"
    UPC_A = "UPCA"
    UPC_E = "UPCE"
    EAN_13 = "EAN13"
    EAN_8 = "EAN8"
    UCC128_CCA = "UCC128CCA"  # UCC/EAN-128 & CC-A/B
    UCC128_CCC = "UCC128CCC"  # UCC/EAN-128 & CC-C

    @property
    def needs_segment_width(self) -> bool:
        return self is RssType.RSS_EXPANDED

    @property
    def needs_linear_height(self) -> bool:
        return self in (RssType.UCC128_CCA, RssType.UCC128_CCC)


class HumanReadable(WireToken):
    """Placement of the human readable line under a barcode."""

    NOT_READABLE = 0
    ALIGNS_TO_LEFT = 1
    ALIGNS_TO_CENTER = 2
    ALIGNS_TO_RIGHT = 3


class NarrowWide(WireToken):
    """Narrow and wide element widths in dots, written as one token pair."""

    N1W1 = "1,1"
    N1W2 = "1,2"
    N1W3 = "1,3"
    N2W5 = "2,5"
    N3W7 = "3,7"


# === TEXT ===


class Font(WireToken):
    """Resident fonts selectable by TEXT and BLOCK."""

    MONOTYPE = "0"  # CG Triumvirate Bold Condensed, stretchable
    FONT_8X12 = "1"
    FONT_12X20 = "2"
    FONT_16X24 = "3"
    FONT_24X32 = "4"
    FONT_32X48 = "5"
    FONT_14X19 = "6"  # OCR-B
    FONT_21X27 = "7"  # OCR-B
    FONT_14X25 = "8"  # OCR-A
    ROMAN = "ROMAN.TTF"  # CG Triumvirate Bold Condensed, fixed proportion
    EPL_1 = "1.EFT"
    EPL_2 = "2.EFT"
    EPL_3 = "3.EFT"
    EPL_4 = "4.EFT"
    EPL_5 = "5.EFT"
    ZPL_A = "A.FNT"
    ZPL_B = "B.FNT"
    ZPL_D = "D.FNT"
    ZPL_E8 = "E8.FNT"
    ZPL_F = "F.FNT"
    ZPL_G = "G.FNT"
    ZPL_H8 = "H8.FNT"
    ZPL_GS = "GS.FNT"


class Rotation(WireToken):
    """Clockwise rotation in degrees."""

    NO_ROTATION = 0
    ROTATION_90 = 90
    ROTATION_180 = 180
    ROTATION_270 = 270


class Alignment(WireToken):
    DEFAULT = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3


# === GRAPHICS / 2D ===


class BitmapMode(WireToken):
    """How BITMAP data combines with the image buffer."""

    OVERWRITE = 0
    OR = 1
    XOR = 2


class QrCodeJustification(WireToken):
    UPPER_LEFT = "J1"
    UPPER_CENTER = "J2"
    UPPER_RIGHT = "J3"
    CENTER_LEFT = "J4"
    CENTER = "J5"
    CENTER_RIGHT = "J6"
    BOTTOM_LEFT = "J7"
    BOTTOM_CENTER = "J8"
    BOTTOM_RIGHT = "J9"


# === DEVICE ===


class SelfTest(WireToken):
    """Self-test page selection. ALL sends SELFTEST without an argument."""

    ALL = ""  # whole printer information
    PATTERN = "PATTERN"  # print head heat line check
    ETHERNET = "ETHERNET"
    WLAN = "WLAN"
    RS232 = "RS232"
    SYSTEM = "SYSTEM"
    Z = "Z"  # emulated language settings
    BT = "BT"


class Country(WireToken):
    """
    Keyboard country for the KP-200 series keypad.

    The value is the international dialing code; the wire token is that code
    zero-padded to three digits.
    """

    USA = 1
    CANADIAN_FRENCH = 2
    SPANISH_LATIN_AMERICA = 3
    DUTCH = 31
    BELGIAN = 32
    FRENCH = 33
    SPANISH = 34
    HUNGARIAN = 36
    YUGOSLAVIAN = 38
    ITALIAN = 39
    SWITZERLAND = 41
    SLOVAK = 42
    UNITED_KINGDOM = 44
    DANISH = 45
    SWEDISH = 46
    NORWEGIAN = 47
    POLISH = 48
    GERMAN = 49
    BRAZIL = 55
    ENGLISH = 61
    PORTUGUESE = 351
    FINNISH = 358

    @property
    def token(self) -> str:
        return f"{self.value:03d}"


# === CODE PAGES ===


class Codepage7Bit(WireToken):
    USA = "USA"
    BRITISH = "BRI"
    GERMAN = "GER"
    FRENCH = "FRE"
    DANISH = "DAN"
    ITALIAN = "ITA"
    SPANISH = "SPA"
    SWEDISH = "SWE"
    SWISS = "SWI"


class Codepage8Bit(WireToken):
    UNITED_STATES = "437"
    GREEK = "737"
    MULTILINGUAL = "850"
    GREEK_1 = "851"
    SLAVIC = "852"
    CYRILLIC = "855"
    TURKISH = "857"
    PORTUGUESE = "860"
    ICELANDIC = "861"
    HEBREW = "862"
    CANADIAN_FRENCH = "863"
    ARABIC = "864"
    NORDIC = "865"
    RUSSIAN = "866"
    GREEK_2 = "869"


class CodepageWindows(WireToken):
    CENTRAL_EUROPE = "1250"
    CYRILLIC = "1251"
    LATIN_1 = "1252"
    GREEK = "1253"
    TURKISH = "1254"
    HEBREW = "1255"
    ARABIC = "1256"
    BALTIC = "1257"
    VIETNAM = "1258"
    JAPANESE = "932"
    CHINESE_SIMPLIFIED = "936"
    KOREAN = "949"
    CHINESE_TRADITIONAL = "950"
    UTF8 = "UTF-8"


class CodepageIso(WireToken):
    LATIN_1 = "8859-1"
    LATIN_2 = "8859-2"
    LATIN_3 = "8859-3"
    BALTIC = "8859-4"
    CYRILLIC = "8859-5"
    ARABIC = "8859-6"
    GREEK = "8859-7"
    HEBREW = "8859-8"
    TURKISH = "8859-9"
    LATIN_6 = "8859-10"
    LATIN_9 = "8859-15"


Codepage = Union[Codepage7Bit, Codepage8Bit, CodepageWindows, CodepageIso]

CODEPAGE_FAMILIES: Final = (Codepage7Bit, Codepage8Bit, CodepageWindows, CodepageIso)
