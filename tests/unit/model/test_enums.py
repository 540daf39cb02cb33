"""Wire tokens of every protocol vocabulary, checked against explicit literals."""

import pytest

from tspl2.model.enums import (
    CODEPAGE_FAMILIES,
    Alignment,
    Barcode,
    BitmapMode,
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
)

BARCODE_TOKENS = {
    Barcode.CODE_128: "128",
    Barcode.CODE_128M: "128M",
    Barcode.EAN_128: "EAN128",
    Barcode.EAN_128M: "EAN128M",
    Barcode.INTERLEAVED_25: "25",
    Barcode.INTERLEAVED_25C: "25C",
    Barcode.STANDARD_25: "25S",
    Barcode.INDUSTRIAL_25: "25I",
    Barcode.CODE_39: "39",
    Barcode.CODE_39C: "39C",
    Barcode.CODE_93: "93",
    Barcode.EAN_13: "EAN13",
    Barcode.EAN_13_PLUS_2: "EAN13+2",
    Barcode.EAN_13_PLUS_5: "EAN13+5",
    Barcode.EAN_8: "EAN8",
    Barcode.EAN_8_PLUS_2: "EAN8+2",
    Barcode.EAN_8_PLUS_5: "EAN8+5",
    Barcode.CODABAR: "CODA",
    Barcode.POSTNET: "POST",
    Barcode.UPC_A: "UPCA",
    Barcode.UPC_A_PLUS_2: "UPCA+2",
    Barcode.UPC_A_PLUS_5: "UPCA+5",
    Barcode.UPC_E: "UPCE",
    Barcode.UPC_E_PLUS_2: "UPCE+2",
    Barcode.UPC_E_PLUS_5: "UPCE+5",
    Barcode.MSI: "MSI",
    Barcode.MSI_C: "MSIC",
    Barcode.PLESSEY: "PLESSEY",
    Barcode.CHINA_POST: "CPOST",
    Barcode.ITF_14: "ITF14",
    Barcode.EAN_14: "EAN14",
    Barcode.CODE_11: "11",
    Barcode.TELEPEN: "TELEPEN",
    Barcode.TELEPEN_NUMBER: "TELEPENN",
    Barcode.PLANET: "PLANET",
    Barcode.CODE_49: "CODE49",
    Barcode.DEUTSCHE_POST_IDENTCODE: "DPI",
    Barcode.DEUTSCHE_POST_LEITCODE: "DPL",
    Barcode.LOGMARS: "LOGMARS",
}

FONT_TOKENS = {
    Font.MONOTYPE: "0",
    Font.FONT_8X12: "1",
    Font.FONT_12X20: "2",
    Font.FONT_16X24: "3",
    Font.FONT_24X32: "4",
    Font.FONT_32X48: "5",
    Font.FONT_14X19: "6",
    Font.FONT_21X27: "7",
    Font.FONT_14X25: "8",
    Font.ROMAN: "ROMAN.TTF",
    Font.EPL_1: "1.EFT",
    Font.EPL_2: "2.EFT",
    Font.EPL_3: "3.EFT",
    Font.EPL_4: "4.EFT",
    Font.EPL_5: "5.EFT",
    Font.ZPL_A: "A.FNT",
    Font.ZPL_B: "B.FNT",
    Font.ZPL_D: "D.FNT",
    Font.ZPL_E8: "E8.FNT",
    Font.ZPL_F: "F.FNT",
    Font.ZPL_G: "G.FNT",
    Font.ZPL_H8: "H8.FNT",
    Font.ZPL_GS: "GS.FNT",
}

COUNTRY_TOKENS = {
    Country.USA: "001",
    Country.CANADIAN_FRENCH: "002",
    Country.SPANISH_LATIN_AMERICA: "003",
    Country.DUTCH: "031",
    Country.BELGIAN: "032",
    Country.FRENCH: "033",
    Country.SPANISH: "034",
    Country.HUNGARIAN: "036",
    Country.YUGOSLAVIAN: "038",
    Country.ITALIAN: "039",
    Country.SWITZERLAND: "041",
    Country.SLOVAK: "042",
    Country.UNITED_KINGDOM: "044",
    Country.DANISH: "045",
    Country.SWEDISH: "046",
    Country.NORWEGIAN: "047",
    Country.POLISH: "048",
    Country.GERMAN: "049",
    Country.BRAZIL: "055",
    Country.ENGLISH: "061",
    Country.PORTUGUESE: "351",
    Country.FINNISH: "358",
}

CODEPAGE_8BIT_TOKENS = {
    Codepage8Bit.UNITED_STATES: "437",
    Codepage8Bit.GREEK: "737",
    Codepage8Bit.MULTILINGUAL: "850",
    Codepage8Bit.GREEK_1: "851",
    Codepage8Bit.SLAVIC: "852",
    Codepage8Bit.CYRILLIC: "855",
    Codepage8Bit.TURKISH: "857",
    Codepage8Bit.PORTUGUESE: "860",
    Codepage8Bit.ICELANDIC: "861",
    Codepage8Bit.HEBREW: "862",
    Codepage8Bit.CANADIAN_FRENCH: "863",
    Codepage8Bit.ARABIC: "864",
    Codepage8Bit.NORDIC: "865",
    Codepage8Bit.RUSSIAN: "866",
    Codepage8Bit.GREEK_2: "869",
}

CODEPAGE_WINDOWS_TOKENS = {
    CodepageWindows.CENTRAL_EUROPE: "1250",
    CodepageWindows.CYRILLIC: "1251",
    CodepageWindows.LATIN_1: "1252",
    CodepageWindows.GREEK: "1253",
    CodepageWindows.TURKISH: "1254",
    CodepageWindows.HEBREW: "1255",
    CodepageWindows.ARABIC: "1256",
    CodepageWindows.BALTIC: "1257",
    CodepageWindows.VIETNAM: "1258",
    CodepageWindows.JAPANESE: "932",
    CodepageWindows.CHINESE_SIMPLIFIED: "936",
    CodepageWindows.KOREAN: "949",
    CodepageWindows.CHINESE_TRADITIONAL: "950",
    CodepageWindows.UTF8: "UTF-8",
}

CODEPAGE_ISO_TOKENS = {
    CodepageIso.LATIN_1: "8859-1",
    CodepageIso.LATIN_2: "8859-2",
    CodepageIso.LATIN_3: "8859-3",
    CodepageIso.BALTIC: "8859-4",
    CodepageIso.CYRILLIC: "8859-5",
    CodepageIso.ARABIC: "8859-6",
    CodepageIso.GREEK: "8859-7",
    CodepageIso.HEBREW: "8859-8",
    CodepageIso.TURKISH: "8859-9",
    CodepageIso.LATIN_6: "8859-10",
    CodepageIso.LATIN_9: "8859-15",
}

CODEPAGE_7BIT_TOKENS = {
    Codepage7Bit.USA: "USA",
    Codepage7Bit.BRITISH: "BRI",
    Codepage7Bit.GERMAN: "GER",
    Codepage7Bit.FRENCH: "FRE",
    Codepage7Bit.DANISH: "DAN",
    Codepage7Bit.ITALIAN: "ITA",
    Codepage7Bit.SPANISH: "SPA",
    Codepage7Bit.SWEDISH: "SWE",
    Codepage7Bit.SWISS: "SWI",
}

RSS_TOKENS = {
    RssType.RSS14: "RSS14",
    RssType.RSS14_TRUNCATED: "RSS14T",
    RssType.RSS14_STACKED: "RSS14S",
    RssType.RSS14_STACKED_OMNIDIRECTIONAL: "RSS14SO",
    RssType.RSS_LIMITED: "RSSLIM",
    RssType.RSS_EXPANDED: "RSSEXP",
    RssType.UPC_A: "UPCA",
    RssType.UPC_E: "UPCE",
    RssType.EAN_13: "EAN13",
    RssType.EAN_8: "EAN8",
    RssType.UCC128_CCA: "UCC128CCA",
    RssType.UCC128_CCC: "UCC128CCC",
}


@pytest.mark.parametrize(
    "vocabulary,tokens",
    [
        (Barcode, BARCODE_TOKENS),
        (Font, FONT_TOKENS),
        (Country, COUNTRY_TOKENS),
        (Codepage7Bit, CODEPAGE_7BIT_TOKENS),
        (Codepage8Bit, CODEPAGE_8BIT_TOKENS),
        (CodepageWindows, CODEPAGE_WINDOWS_TOKENS),
        (CodepageIso, CODEPAGE_ISO_TOKENS),
        (RssType, RSS_TOKENS),
    ],
)
def test_every_member_has_its_literal_token(vocabulary, tokens) -> None:
    assert set(vocabulary) == set(tokens), f"{vocabulary.__name__} members changed"
    for member, token in tokens.items():
        assert member.token == token, f"{member!r}"


def test_small_vocabularies() -> None:
    assert [r.token for r in Rotation] == ["0", "90", "180", "270"]
    assert [a.token for a in Alignment] == ["0", "1", "2", "3"]
    assert [h.token for h in HumanReadable] == ["0", "1", "2", "3"]
    assert [m.token for m in BitmapMode] == ["0", "1", "2"]
    assert [n.token for n in NarrowWide] == ["1,1", "1,2", "1,3", "2,5", "3,7"]
    assert [j.token for j in QrCodeJustification] == [f"J{i}" for i in range(1, 10)]


def test_selftest_tokens() -> None:
    assert SelfTest.ALL.token == ""
    assert SelfTest.PATTERN.token == "PATTERN"
    assert SelfTest.ETHERNET.token == "ETHERNET"
    assert SelfTest.WLAN.token == "WLAN"
    assert SelfTest.RS232.token == "RS232"
    assert SelfTest.SYSTEM.token == "SYSTEM"
    assert SelfTest.Z.token == "Z"
    assert SelfTest.BT.token == "BT"


def test_country_token_is_not_derived_from_name() -> None:
    assert Country.GERMAN.token == "049"
    assert Country.GERMAN.value == 49


def test_rss_size_requirements() -> None:
    needs_segment = {t for t in RssType if t.needs_segment_width}
    needs_linear = {t for t in RssType if t.needs_linear_height}
    assert needs_segment == {RssType.RSS_EXPANDED}
    assert needs_linear == {RssType.UCC128_CCA, RssType.UCC128_CCC}


def test_codepage_families() -> None:
    assert CODEPAGE_FAMILIES == (Codepage7Bit, Codepage8Bit, CodepageWindows, CodepageIso)
