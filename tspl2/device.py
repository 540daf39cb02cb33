"""
Device boundary.

The encoder only needs a sink that accepts bytes: ``write(data)`` either
stores them all or raises ``OSError``. :class:`DeviceFile` is that sink for
a Unix printer character device such as ``/dev/usb/lp0``.

Resolution discovery is optional. A sink that can report its resolution
exposes ``query_resolution() -> int``; :func:`query_resolution` calls it and
turns any failure into :class:`ResolutionQueryError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Final, Optional, Protocol, Type, Union, runtime_checkable

from tspl2.exceptions import ResolutionQueryError

logger = logging.getLogger(__name__)

__all__ = [
    "DPI_QUERY",
    "DeviceSink",
    "ResolutionSource",
    "DeviceFile",
    "query_resolution",
]

# TSPL2 setting read-back; the printer answers with one line holding the dpi
DPI_QUERY: Final[bytes] = b'OUT GETSETTING$("SYSTEM","INFORMATION","DPI")\r\n'


@runtime_checkable
class DeviceSink(Protocol):
    """Anything that accepts a byte buffer and writes it, or fails."""

    def write(self, data: bytes) -> object: ...


@runtime_checkable
class ResolutionSource(Protocol):
    """Sink that can report the printer resolution."""

    def query_resolution(self) -> int: ...


class DeviceFile:
    """
    Printer character device opened for reading and writing, unbuffered.

    Args:
        path: Device path, e.g. ``/dev/usb/lp0``.

    Raises:
        OSError: If the device cannot be opened.

    Example:
        >>> with DeviceFile("/dev/usb/lp0") as device:
        ...     device.write(b"CLS\\r\\n")
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        try:
            self._file: BinaryIO = open(self.path, "r+b", buffering=0)
        except OSError as e:
            logger.error(f"Could not open printer device {self.path}: {e}")
            raise
        logger.info(f"Opened printer device {self.path}")

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = self._file.write(view)
            if not written:
                raise OSError(f"Device {self.path} accepted no data")
            view = view[written:]

    def query_resolution(self) -> int:
        """Ask the printer for its dpi and read one response line."""
        self.write(DPI_QUERY)
        response = self._file.readline()
        try:
            return int(response.strip())
        except ValueError as e:
            raise ResolutionQueryError(
                f"Unexpected resolution response from {self.path}: {response!r}", cause=e
            ) from e

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            logger.debug(f"Closed printer device {self.path}")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def __enter__(self) -> "DeviceFile":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def query_resolution(sink: DeviceSink) -> int:
    """
    Discover the printer resolution through the sink.

    Args:
        sink: Device sink; must provide ``query_resolution()``.

    Returns:
        Resolution in dots per inch (> 0).

    Raises:
        ResolutionQueryError: If the sink cannot be queried, the query fails
            or the answer is not a positive integer.
    """
    if not isinstance(sink, ResolutionSource):
        raise ResolutionQueryError(
            f"{type(sink).__name__} cannot report its resolution; "
            f"pass the resolution explicitly"
        )
    try:
        resolution = sink.query_resolution()
    except ResolutionQueryError:
        raise
    except (OSError, ValueError) as e:
        raise ResolutionQueryError(f"Resolution query failed: {e}", cause=e) from e

    if not isinstance(resolution, int) or resolution <= 0:
        raise ResolutionQueryError(f"Device reported an invalid resolution: {resolution!r}")
    logger.info(f"Device reported a resolution of {resolution} dpi")
    return resolution
