"""
tspl2
=====

Command encoder and printer session for TSPL/TSPL2 label printers.

This package provides:
    - Unit-agnostic lengths (millimeters, inches, dots) converted to dots
      at the printer resolution
    - Closed protocol vocabularies (barcode symbologies, fonts, code pages,
      countries, justifications) with explicit wire tokens
    - Per-command parameter validation before anything is written
    - Encoders for setup, control, text, barcode, 2D symbol and graphics
      commands
    - A fluent, fail-fast printer session writing to a device sink

Basic usage:
    >>> from tspl2 import Printer, TapeGeometry, Metric, Font, Rotation
    >>>
    >>> tape = TapeGeometry(width=Metric(30), height=Metric(20), gap=Metric(2))
    >>> with Printer.open("/dev/usb/lp0", tape, resolution=300) as printer:
    ...     (
    ...         printer.cls()
    ...         .text(Metric(15), Metric(14.5), Font.FONT_24X32,
    ...               Rotation.NO_ROTATION, 1, 1, "0123456789AB")
    ...         .print(1)
    ...     )

Logging:
    >>> import os
    >>> os.environ["TSPL2_LOG_LEVEL"] = "DEBUG"
    >>> from tspl2 import get_logger
    >>> get_logger(__name__).debug("Every command line is now logged")

Version: 0.1.0
License: MIT
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__description__ = "TSPL/TSPL2 label printer command encoder"
__license__ = "MIT"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

_LOGGER_NAME = "tspl2"

# =============================================================================
# LOGGING
# =============================================================================


def _setup_logging() -> None:
    """
    Initialize package-wide logging.

    Configures the ``tspl2`` logger with:
    - a stderr handler for WARNING and above
    - a rotating file handler for all enabled levels, only when the
      TSPL2_LOG_DIR environment variable names a directory

    The level comes from TSPL2_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR,
    CRITICAL), INFO by default. Repeated calls have no effect.
    """
    log_level_str = os.environ.get("TSPL2_LOG_LEVEL", "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(_LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir_env = os.environ.get("TSPL2_LOG_DIR")
    if log_dir_env:
        try:
            log_dir = Path(log_dir_env)
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / "tspl2.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Could not initialize file logging in {log_dir_env}: {e}. "
                f"Logging to console only."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``tspl2`` namespace.

    Args:
        module_name: Usually ``__name__``. Names outside the package are
            prefixed with ``tspl2.``; ``__main__`` becomes ``tspl2.main``.

    Returns:
        Logger inheriting the package handlers.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Printer session opened")
    """
    if module_name == _LOGGER_NAME or module_name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{_LOGGER_NAME}.{clean_name}")


# Logging is configured before the submodules are imported so that their
# module-level loggers attach to a ready package logger.
_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

from tspl2.config import load_config  # noqa: E402
from tspl2.device import DeviceFile, DeviceSink, query_resolution  # noqa: E402
from tspl2.exceptions import (  # noqa: E402
    ResolutionQueryError,
    TsplError,
    UnsupportedCommandError,
    ValidationError,
)
from tspl2.model.enums import (  # noqa: E402
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
)
from tspl2.model.units import Dots, Imperial, Length, Metric, TapeGeometry, to_dots  # noqa: E402
from tspl2.printer import Printer  # noqa: E402

__all__ = [
    # Version metadata
    "__version__",
    "__description__",
    "__license__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Utilities
    "get_logger",
    "load_config",
    # Measurement
    "Length",
    "Imperial",
    "Metric",
    "Dots",
    "TapeGeometry",
    "to_dots",
    # Vocabularies
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
    # Device
    "DeviceSink",
    "DeviceFile",
    "query_resolution",
    # Session
    "Printer",
    # Errors
    "TsplError",
    "ValidationError",
    "UnsupportedCommandError",
    "ResolutionQueryError",
]

_logger = get_logger(__name__)
_logger.debug(f"tspl2 v{__version__} initialized (Python {sys.version.split()[0]})")
