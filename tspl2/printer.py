"""
Printer session.

A :class:`Printer` owns one device sink and a fixed resolution. Opening a
session declares the tape geometry (SIZE, then GAP); afterwards every
method converts its lengths to dots, validates, encodes one command,
writes it and returns the printer, so calls chain:

    >>> printer.cls().text(...).barcode(...).print(1)

The first failing call raises and the rest of the chain never runs.
Commands already written stay written; nothing is rolled back.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from types import TracebackType
from typing import Any, Dict, Optional, Tuple, Type, Union

from PIL import Image

from tspl2.commands import control, graphics, matrix2d, setup
from tspl2.commands.barcode import barcode as encode_barcode
from tspl2.commands.barcode import codablock as encode_codablock
from tspl2.commands.barcode import rss as encode_rss
from tspl2.commands.barcode import tlc39 as encode_tlc39
from tspl2.commands.text import block as encode_block
from tspl2.commands.text import text as encode_text
from tspl2.commands.base import Command
from tspl2.config import load_config
from tspl2.device import DeviceFile, DeviceSink, query_resolution
from tspl2.model.enums import (
    Alignment,
    Barcode,
    BitmapMode,
    Codepage,
    Country,
    Font,
    HumanReadable,
    NarrowWide,
    QrCodeJustification,
    Rotation,
    RssType,
    SelfTest,
)
from tspl2.model.units import Length, TapeGeometry, check_resolution, to_dots

logger = logging.getLogger(__name__)

__all__ = ["Printer"]


class Printer:
    """
    Fluent session on one TSPL/TSPL2 printer.

    Args:
        sink: Device sink receiving the encoded bytes.
        tape: Label geometry sent as SIZE and GAP on construction.
        resolution: Dots per inch. When None it is queried from the sink.
        encoding: Encoding of command lines and text content.
        owns_sink: Close the sink when the session is closed.

    Raises:
        ResolutionQueryError: If no resolution was given and the sink
            cannot report one.
        ValidationError: If the resolution is not positive.
        OSError: If writing the geometry commands fails.
    """

    def __init__(
        self,
        sink: DeviceSink,
        tape: TapeGeometry,
        resolution: Optional[int] = None,
        *,
        encoding: str = "utf-8",
        owns_sink: bool = False,
    ) -> None:
        self._sink = sink
        self._encoding = encoding
        self._owns_sink = owns_sink

        if resolution is None:
            resolution = query_resolution(sink)
        check_resolution(resolution)
        self._resolution = resolution

        logger.info(f"Printer session opened at {resolution} dpi")
        self.size(tape.width, tape.height)
        self.gap(tape.gap, tape.gap_offset)

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        tape: TapeGeometry,
        resolution: Optional[int] = None,
        *,
        encoding: str = "utf-8",
    ) -> "Printer":
        """
        Open a printer character device and start a session on it.

        The device is closed again if the session cannot be started.
        """
        device = DeviceFile(path)
        try:
            return cls(device, tape, resolution, encoding=encoding, owns_sink=True)
        except Exception:
            device.close()
            raise

    @classmethod
    def from_config(
        cls, tape: TapeGeometry, config: Optional[Dict[str, Any]] = None
    ) -> "Printer":
        """
        Start a session from configuration values.

        Args:
            tape: Label geometry.
            config: Mapping as returned by :func:`tspl2.config.load_config`;
                loaded from the default location when None.
        """
        if config is None:
            config = load_config()
        log_level = config.get("log_level")
        if log_level:
            level = logging.getLevelNamesMapping().get(str(log_level).upper())
            if level is None:
                logger.warning(f"Unknown log level {log_level!r} in configuration, ignored")
            else:
                logging.getLogger("tspl2").setLevel(level)
        return cls.open(
            config["device_path"],
            tape,
            config.get("resolution"),
            encoding=config.get("encoding", "utf-8"),
        )

    # =========================================================================
    # SESSION
    # =========================================================================

    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def encoding(self) -> str:
        return self._encoding

    def close(self) -> None:
        """Close the sink if this session opened it."""
        if self._owns_sink:
            close = getattr(self._sink, "close", None)
            if close is not None:
                close()

    def __enter__(self) -> "Printer":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def _dots(self, length: Length) -> int:
        return to_dots(length, self._resolution)

    def _optional_dots(self, length: Optional[Length]) -> Optional[int]:
        return None if length is None else self._dots(length)

    def _pair_dots(self, pair: Optional[Tuple[Length, Length]]) -> Optional[Tuple[int, int]]:
        if pair is None:
            return None
        first, second = pair
        return self._dots(first), self._dots(second)

    def send(self, command: Command) -> "Printer":
        """
        Encode and write one command.

        The whole line is encoded before the single write, so a failure
        never leaves a partial command on the device.

        Raises:
            ValidationError: If the command cannot be encoded.
            OSError: If the device write fails.
        """
        data = command.encode(self._encoding)
        if command.payload is not None:
            logger.debug(f"{command} <{len(command.payload)} payload bytes>")
        else:
            logger.debug(f"{command}")
        try:
            self._sink.write(data)
        except OSError as e:
            logger.error(f"Write of {command.opcode} failed: {e}")
            raise
        return self

    # =========================================================================
    # SETUP
    # =========================================================================

    def size(self, width: Length, height: Optional[Length] = None) -> "Printer":
        """Define label width and height (firmware < V8.13 needs the height)."""
        return self.send(setup.size(width, height))

    def gap(self, gap: Length, gap_offset: Optional[Length] = None) -> "Printer":
        """Define the gap between labels and its optional offset."""
        return self.send(setup.gap(gap, gap_offset))

    def gap_detect(self, calibration: Optional[Tuple[Length, Length]] = None) -> "Printer":
        """
        Feed paper through the gap sensor to measure paper and gap.

        Args:
            calibration: Approximate (paper length, gap length). None lets
                the printer determine both.
        """
        return self.send(setup.gap_detect(self._pair_dots(calibration)))

    def bline_detect(self, calibration: Optional[Tuple[Length, Length]] = None) -> "Printer":
        return self.send(setup.bline_detect(self._pair_dots(calibration)))

    def auto_detect(self, calibration: Optional[Tuple[Length, Length]] = None) -> "Printer":
        return self.send(setup.auto_detect(self._pair_dots(calibration)))

    def bline(self, black_line_height: Length, extra_feed: Length) -> "Printer":
        """Set black mark height and extra feed; use the same unit for both."""
        return self.send(setup.bline(black_line_height, extra_feed))

    def offset(self, distance: Length) -> "Printer":
        return self.send(setup.offset(distance))

    def speed(self, inches_per_second: Union[int, float, str]) -> "Printer":
        return self.send(setup.speed(inches_per_second))

    def density(self, level: int) -> "Printer":
        """Set darkness, 1 (lightest) to 15 (darkest)."""
        return self.send(setup.density(level))

    def direction(self, reversed_direction: bool, mirrored_image: bool = False) -> "Printer":
        return self.send(setup.direction(reversed_direction, mirrored_image))

    def reference(self, x: Length, y: Length) -> "Printer":
        return self.send(setup.reference(self._dots(x), self._dots(y)))

    def shift(self, y: Length, x: Optional[Length] = None) -> "Printer":
        """Move the label position; negative values move towards the print direction."""
        return self.send(setup.shift(self._dots(y), self._optional_dots(x)))

    def limit_feed(
        self, max_length: Length, minpaper_maxgap: Optional[Tuple[Length, Length]] = None
    ) -> "Printer":
        return self.send(setup.limit_feed(max_length, minpaper_maxgap))

    def country(self, keyboard_country: Country) -> "Printer":
        return self.send(setup.country(keyboard_country))

    def codepage(self, page: Codepage) -> "Printer":
        return self.send(setup.codepage(page))

    # =========================================================================
    # CONTROL
    # =========================================================================

    def cls(self) -> "Printer":
        """Clear the image buffer."""
        return self.send(control.cls())

    def feed(self, length: Length) -> "Printer":
        """Feed forward; the length must come to 0-9999 dots."""
        return self.send(control.feed(self._dots(length)))

    def backup(self, length: Length) -> "Printer":
        """Feed in reverse (TSPL printers)."""
        return self.send(control.backup(self._dots(length)))

    def backfeed(self, length: Length) -> "Printer":
        """Feed in reverse (TSPL2 printers)."""
        return self.send(control.backfeed(self._dots(length)))

    def formfeed(self) -> "Printer":
        return self.send(control.formfeed())

    def home(self) -> "Printer":
        return self.send(control.home())

    def print(self, sets: int, copies: Optional[int] = None) -> "Printer":
        """Print the buffered label ``sets`` times, optionally ``copies`` of each."""
        return self.send(control.print_label(sets, copies))

    def sound(self, level: int, interval: int) -> "Printer":
        return self.send(control.sound(level, interval))

    def cut(self) -> "Printer":
        return self.send(control.cut())

    def selftest(self, kind: SelfTest = SelfTest.ALL) -> "Printer":
        return self.send(control.selftest(kind))

    def eoj(self) -> "Printer":
        return self.send(control.eoj())

    def delay(self, duration: Union[timedelta, int]) -> "Printer":
        """Make the printer wait; ints are milliseconds."""
        return self.send(control.delay(duration))

    def initial_printer(self) -> "Printer":
        """Restore printer settings to defaults."""
        return self.send(control.initial_printer())

    def display(self) -> "Printer":
        """LCD image preview. Always raises UnsupportedCommandError."""
        return self.send(control.display())

    def menu(self) -> "Printer":
        """On-printer menu design. Always raises UnsupportedCommandError."""
        return self.send(control.menu())

    # =========================================================================
    # TEXT
    # =========================================================================

    def text(
        self,
        x: Length,
        y: Length,
        font: Font,
        rotation: Rotation,
        multiply_x: int,
        multiply_y: int,
        content: str,
        alignment: Optional[Alignment] = None,
    ) -> "Printer":
        return self.send(
            encode_text(
                self._dots(x),
                self._dots(y),
                font,
                rotation,
                multiply_x,
                multiply_y,
                content,
                alignment,
            )
        )

    def block(
        self,
        x: Length,
        y: Length,
        width: Length,
        height: Length,
        font: Font,
        rotation: Rotation,
        multiply_x: int,
        multiply_y: int,
        content: str,
        space: Optional[Length] = None,
        alignment: Optional[Alignment] = None,
        fit: Optional[bool] = None,
    ) -> "Printer":
        """Print a paragraph wrapped inside a box; content is limited to 4096 bytes."""
        return self.send(
            encode_block(
                self._dots(x),
                self._dots(y),
                self._dots(width),
                self._dots(height),
                font,
                rotation,
                multiply_x,
                multiply_y,
                content,
                space=self._optional_dots(space),
                alignment=alignment,
                fit=fit,
                encoding=self._encoding,
            )
        )

    # =========================================================================
    # BARCODES
    # =========================================================================

    def barcode(
        self,
        x: Length,
        y: Length,
        code_type: Barcode,
        height: Length,
        human_readable: HumanReadable,
        rotation: Rotation,
        narrow_wide: NarrowWide,
        content: str,
        alignment: Optional[Alignment] = None,
    ) -> "Printer":
        return self.send(
            encode_barcode(
                self._dots(x),
                self._dots(y),
                code_type,
                self._dots(height),
                human_readable,
                rotation,
                narrow_wide,
                content,
                alignment,
            )
        )

    def tlc39(
        self,
        x: Length,
        y: Length,
        rotation: Rotation,
        eci_number: str,
        serial_number: str,
        additional_data: str,
        height: Optional[Length] = None,
        narrow: Optional[Length] = None,
        wide: Optional[Length] = None,
        cell_width: Optional[Length] = None,
        cell_height: Optional[Length] = None,
    ) -> "Printer":
        return self.send(
            encode_tlc39(
                self._dots(x),
                self._dots(y),
                rotation,
                eci_number,
                serial_number,
                additional_data,
                height=self._optional_dots(height),
                narrow=self._optional_dots(narrow),
                wide=self._optional_dots(wide),
                cell_width=self._optional_dots(cell_width),
                cell_height=self._optional_dots(cell_height),
            )
        )

    def rss(
        self,
        x: Length,
        y: Length,
        rss_type: RssType,
        rotation: Rotation,
        module_width: Length,
        separator_height: int,
        content: str,
        segment_width: Optional[int] = None,
        linear_height: Optional[int] = None,
    ) -> "Printer":
        """
        Print a GS1 DataBar (RSS) barcode.

        ``module_width`` must come to 1-10 dots. RSS_EXPANDED needs
        ``segment_width`` (2-22); the UCC128 composites need
        ``linear_height`` (1-500).
        """
        return self.send(
            encode_rss(
                self._dots(x),
                self._dots(y),
                rss_type,
                rotation,
                self._dots(module_width),
                separator_height,
                content,
                segment_width=segment_width,
                linear_height=linear_height,
            )
        )

    def codablock(
        self,
        x: Length,
        y: Length,
        rotation: Rotation,
        content: str,
        row_height: Optional[Length] = None,
        module_width: Optional[Length] = None,
    ) -> "Printer":
        return self.send(
            encode_codablock(
                self._dots(x),
                self._dots(y),
                rotation,
                content,
                row_height=self._optional_dots(row_height),
                module_width=self._optional_dots(module_width),
            )
        )

    # =========================================================================
    # 2D SYMBOLS
    # =========================================================================

    def qrcode(
        self,
        x: Length,
        y: Length,
        ecc_level: int,
        cell_width: int,
        rotation: Rotation,
        content: str,
        justification: Optional[QrCodeJustification] = None,
    ) -> "Printer":
        """Print a QR code; ``cell_width`` is in dots (1-10)."""
        return self.send(
            matrix2d.qrcode(
                self._dots(x),
                self._dots(y),
                ecc_level,
                cell_width,
                rotation,
                content,
                justification,
            )
        )

    def data_matrix(
        self, x: Length, y: Length, width: Length, height: Length, content: str
    ) -> "Printer":
        return self.send(
            matrix2d.data_matrix(
                self._dots(x), self._dots(y), self._dots(width), self._dots(height), content
            )
        )

    def pdf417(
        self,
        x: Length,
        y: Length,
        width: Length,
        height: Length,
        rotation: Rotation,
        content: str,
    ) -> "Printer":
        return self.send(
            matrix2d.pdf417(
                self._dots(x),
                self._dots(y),
                self._dots(width),
                self._dots(height),
                rotation,
                content,
            )
        )

    def mpdf417(
        self,
        x: Length,
        y: Length,
        rotation: Rotation,
        content: str,
        module_width: Optional[Length] = None,
        module_height: Optional[Length] = None,
        columns: Optional[int] = None,
    ) -> "Printer":
        return self.send(
            matrix2d.mpdf417(
                self._dots(x),
                self._dots(y),
                rotation,
                content,
                module_width=self._optional_dots(module_width),
                module_height=self._optional_dots(module_height),
                columns=columns,
            )
        )

    def aztec(
        self,
        x: Length,
        y: Length,
        rotation: Rotation,
        size: int,
        error_control: int,
        content: Union[str, bytes],
        flg: bool = False,
        menu: bool = False,
        symbols: int = 1,
        reversed_image: bool = False,
    ) -> "Printer":
        """Print an Aztec symbol; str content is encoded with the session encoding."""
        data = content.encode(self._encoding) if isinstance(content, str) else content
        return self.send(
            matrix2d.aztec(
                self._dots(x),
                self._dots(y),
                rotation,
                size,
                error_control,
                data,
                flg=flg,
                menu=menu,
                symbols=symbols,
                reversed_image=reversed_image,
            )
        )

    # =========================================================================
    # GRAPHICS
    # =========================================================================

    def bar(self, x: Length, y: Length, width: Length, height: Length) -> "Printer":
        return self.send(
            graphics.bar(self._dots(x), self._dots(y), self._dots(width), self._dots(height))
        )

    def rectangle(
        self,
        x_start: Length,
        y_start: Length,
        x_end: Length,
        y_end: Length,
        thickness: Length,
        radius: Optional[Length] = None,
    ) -> "Printer":
        """Draw a rectangle (BOX)."""
        return self.send(
            graphics.box(
                self._dots(x_start),
                self._dots(y_start),
                self._dots(x_end),
                self._dots(y_end),
                self._dots(thickness),
                self._optional_dots(radius),
            )
        )

    def circle(self, x: Length, y: Length, diameter: Length, thickness: Length) -> "Printer":
        return self.send(
            graphics.circle(
                self._dots(x), self._dots(y), self._dots(diameter), self._dots(thickness)
            )
        )

    def ellipse(
        self, x: Length, y: Length, width: Length, height: Length, thickness: Length
    ) -> "Printer":
        return self.send(
            graphics.ellipse(
                self._dots(x),
                self._dots(y),
                self._dots(width),
                self._dots(height),
                self._dots(thickness),
            )
        )

    def diagonal(
        self,
        x_start: Length,
        y_start: Length,
        x_end: Length,
        y_end: Length,
        thickness: Length,
    ) -> "Printer":
        return self.send(
            graphics.diagonal(
                self._dots(x_start),
                self._dots(y_start),
                self._dots(x_end),
                self._dots(y_end),
                self._dots(thickness),
            )
        )

    def erase(self, x: Length, y: Length, width: Length, height: Length) -> "Printer":
        return self.send(
            graphics.erase(self._dots(x), self._dots(y), self._dots(width), self._dots(height))
        )

    def reverse(self, x: Length, y: Length, width: Length, height: Length) -> "Printer":
        return self.send(
            graphics.reverse(self._dots(x), self._dots(y), self._dots(width), self._dots(height))
        )

    def bitmap(
        self,
        x: Length,
        y: Length,
        width_bytes: int,
        height: int,
        mode: BitmapMode,
        data: bytes,
    ) -> "Printer":
        """Draw packed bitmap rows; ``data`` is written verbatim."""
        return self.send(
            graphics.bitmap(self._dots(x), self._dots(y), width_bytes, height, mode, data)
        )

    def image(
        self,
        x: Length,
        y: Length,
        image: Image.Image,
        mode: BitmapMode = BitmapMode.OVERWRITE,
        threshold: Optional[int] = None,
    ) -> "Printer":
        """Pack an already-loaded Pillow image and draw it as a BITMAP."""
        width_bytes, height, data = graphics.pack_image(image, threshold)
        return self.bitmap(x, y, width_bytes, height, mode, data)
