import pytest

from tspl2.commands.barcode import barcode, codablock, rss, tlc39
from tspl2.exceptions import ValidationError
from tspl2.model.enums import Alignment, Barcode, HumanReadable, NarrowWide, Rotation, RssType


class TestBarcode:
    def test_code39_centered(self) -> None:
        cmd = barcode(
            177,
            0,
            Barcode.CODE_39,
            177,
            HumanReadable.ALIGNS_TO_CENTER,
            Rotation.NO_ROTATION,
            NarrowWide.N1W3,
            "0123456789AB",
            Alignment.CENTER,
        )
        assert cmd.encode() == b'BARCODE 177,0,"39",177,2,0,1,3,2,"0123456789AB"\r\n'

    def test_without_alignment(self) -> None:
        cmd = barcode(
            10,
            10,
            Barcode.EAN_13,
            80,
            HumanReadable.NOT_READABLE,
            Rotation.ROTATION_180,
            NarrowWide.N2W5,
            "400638133393",
        )
        assert cmd.text() == 'BARCODE 10,10,"EAN13",80,0,180,2,5,"400638133393"'


class TestTlc39:
    def test_defaults(self) -> None:
        cmd = tlc39(0, 0, Rotation.NO_ROTATION, "123456", "AA00000", "TLC39")
        assert cmd.text() == 'TLC39 0,0,0,40,2,4,2,4,"123456,AA00000,TLC39"'

    def test_explicit_sizes(self) -> None:
        cmd = tlc39(
            5,
            6,
            Rotation.ROTATION_90,
            "1",
            "2",
            "3",
            height=50,
            narrow=3,
            wide=6,
            cell_width=3,
            cell_height=5,
        )
        assert cmd.text() == 'TLC39 5,6,90,50,3,6,3,5,"1,2,3"'


class TestRss:
    def test_rss14(self) -> None:
        cmd = rss(10, 20, RssType.RSS14, Rotation.NO_ROTATION, 2, 1, "1234567890")
        assert cmd.text() == 'RSS 10,20,"RSS14",0,2,1,"1234567890"'

    def test_expanded_requires_segment_width(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            rss(0, 0, RssType.RSS_EXPANDED, Rotation.NO_ROTATION, 2, 1, "x")
        assert exc_info.value.field == "segment_width"
        cmd = rss(0, 0, RssType.RSS_EXPANDED, Rotation.NO_ROTATION, 2, 1, "x", segment_width=22)
        assert cmd.text() == 'RSS 0,0,"RSSEXP",0,2,1,22,"x"'

    @pytest.mark.parametrize("rss_type", [RssType.UCC128_CCA, RssType.UCC128_CCC])
    def test_composite_requires_linear_height(self, rss_type: RssType) -> None:
        with pytest.raises(ValidationError) as exc_info:
            rss(0, 0, rss_type, Rotation.NO_ROTATION, 2, 1, "x")
        assert exc_info.value.field == "linear_height"
        cmd = rss(0, 0, rss_type, Rotation.NO_ROTATION, 2, 2, "x", linear_height=500)
        assert cmd.text() == f'RSS 0,0,"{rss_type.token}",0,2,2,500,"x"'

    def test_unneeded_sizes_are_not_written(self) -> None:
        cmd = rss(0, 0, RssType.RSS14, Rotation.NO_ROTATION, 1, 1, "x", segment_width=4)
        assert cmd.text() == 'RSS 0,0,"RSS14",0,1,1,"x"'

    @pytest.mark.parametrize(
        "module_width,separator_height,segment_width",
        [(0, 1, 2), (11, 1, 2), (1, 0, 2), (1, 3, 2), (1, 1, 1), (1, 1, 23)],
    )
    def test_ranges(self, module_width: int, separator_height: int, segment_width: int) -> None:
        with pytest.raises(ValidationError):
            rss(
                0,
                0,
                RssType.RSS_EXPANDED,
                Rotation.NO_ROTATION,
                module_width,
                separator_height,
                "x",
                segment_width=segment_width,
            )

    def test_linear_height_range(self) -> None:
        with pytest.raises(ValidationError):
            rss(0, 0, RssType.UCC128_CCA, Rotation.NO_ROTATION, 1, 1, "x", linear_height=501)


class TestCodablock:
    def test_defaults(self) -> None:
        assert codablock(0, 0, Rotation.NO_ROTATION, "ABC").text() == 'CODABLOCK 0,0,0,8,8,"ABC"'

    def test_explicit_sizes(self) -> None:
        cmd = codablock(1, 2, Rotation.ROTATION_270, "ABC", row_height=10, module_width=4)
        assert cmd.text() == 'CODABLOCK 1,2,270,10,4,"ABC"'


class TestVocabularyArguments:
    def test_raw_rotation_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            barcode(
                0,
                0,
                Barcode.CODE_128,
                50,
                HumanReadable.NOT_READABLE,
                90,  # type: ignore[arg-type]
                NarrowWide.N1W1,
                "x",
            )
        assert exc_info.value.field == "rotation"

    def test_raw_symbology_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            barcode(
                0,
                0,
                "39",  # type: ignore[arg-type]
                50,
                HumanReadable.NOT_READABLE,
                Rotation.NO_ROTATION,
                NarrowWide.N1W1,
                "x",
            )
        assert exc_info.value.field == "code_type"

    def test_raw_rss_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            rss(0, 0, "RSS14", Rotation.NO_ROTATION, 1, 1, "x")  # type: ignore[arg-type]

    @pytest.mark.parametrize("rotation", [0, "0", None])
    def test_rotation_checked_everywhere(self, rotation) -> None:
        with pytest.raises(ValidationError):
            tlc39(0, 0, rotation, "1", "2", "3")
        with pytest.raises(ValidationError):
            codablock(0, 0, rotation, "ABC")
