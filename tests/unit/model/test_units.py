"""Tests for tspl2.model.units: length kinds, dot conversion and display form."""

import pytest

from tspl2.exceptions import ValidationError
from tspl2.model.units import (
    MM_PER_INCH,
    Dots,
    Imperial,
    Metric,
    TapeGeometry,
    check_resolution,
    format_number,
    single,
    to_dots,
)


class TestToDots:
    @pytest.mark.parametrize(
        "length,resolution,expected",
        [
            (Metric(25.4), 300, 300),
            (Metric(0.1), 300, 1),
            (Metric(15), 300, 177),
            (Metric(14.5), 300, 171),
            (Metric(0), 300, 0),
            (Imperial(1), 203, 203),
            (Imperial(2.5), 300, 750),
            (Imperial(0.001), 300, 0),
            (Dots(100), 203, 100),
            (Dots(-12), 300, -12),
        ],
    )
    def test_conversion(self, length, resolution: int, expected: int) -> None:
        assert to_dots(length, resolution) == expected
        assert length.to_dots(resolution) == expected

    def test_truncates_toward_zero_for_negative_lengths(self) -> None:
        assert to_dots(Metric(-0.1), 300) == -1
        assert to_dots(Imperial(-0.0049), 300) == -1
        assert to_dots(Imperial(-0.001), 300) == 0

    @pytest.mark.parametrize(
        "length,expected",
        [
            (Imperial(0.21), 62),
            (Imperial(0.41), 123),
            (Imperial(0.57), 171),
        ],
    )
    def test_single_precision_near_dot_boundary(self, length, expected: int) -> None:
        # 0.21 in is 62.99999.. dots in single precision, 0.41 in rounds up to 123.0
        assert to_dots(length, 300) == expected

    def test_single_rounds_to_float32(self) -> None:
        assert single(0.5) == 0.5
        assert single(0.1) != 0.1
        assert abs(single(0.1) - 0.1) < 1e-8

    def test_never_rounds_up(self) -> None:
        # 0.999 in at 300 dpi is 299.7 dots
        assert to_dots(Imperial(0.999), 300) == 299

    @pytest.mark.parametrize("resolution", [0, -300])
    def test_rejects_non_positive_resolution(self, resolution: int) -> None:
        for length in (Metric(1), Imperial(1), Dots(1)):
            with pytest.raises(ValidationError) as exc_info:
                to_dots(length, resolution)
            assert exc_info.value.field == "resolution"

    def test_check_resolution_accepts_positive(self) -> None:
        check_resolution(1)
        check_resolution(600)

    def test_mm_per_inch(self) -> None:
        assert MM_PER_INCH == 25.4


class TestDisplay:
    @pytest.mark.parametrize(
        "length,expected",
        [
            (Metric(30), "30 mm"),
            (Metric(30.0), "30 mm"),
            (Metric(2.5), "2.5 mm"),
            (Imperial(2.5), "2.5"),
            (Imperial(4), "4"),
            (Imperial(4.0), "4"),
            (Dots(100), "100 dot"),
        ],
    )
    def test_display_form(self, length, expected: str) -> None:
        assert length.display() == expected
        assert str(length) == expected

    def test_format_number(self) -> None:
        assert format_number(3) == "3"
        assert format_number(3.0) == "3"
        assert format_number(1.25) == "1.25"


class TestImmutability:
    def test_lengths_are_frozen(self) -> None:
        length = Metric(10)
        with pytest.raises(AttributeError):
            length.value = 20  # type: ignore[misc]

    def test_lengths_compare_by_kind_and_value(self) -> None:
        assert Metric(10) == Metric(10)
        assert Metric(10) != Imperial(10)
        assert hash(Dots(5)) == hash(Dots(5))

    def test_tape_geometry_defaults(self) -> None:
        tape = TapeGeometry(width=Metric(30), gap=Metric(2))
        assert tape.height is None
        assert tape.gap_offset is None
