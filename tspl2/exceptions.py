"""
Centralized exception hierarchy for tspl2.

Guidelines:
- Validation failures are raised before any byte reaches the device.
- Device I/O failures are plain ``OSError`` and propagate unchanged.
- Catch ``TsplError`` to handle everything the encoder itself raises.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "TsplError",
    "ValidationError",
    "UnsupportedCommandError",
    "ResolutionQueryError",
]


class TsplError(Exception):
    """Base exception for all tspl2 failures."""


class ValidationError(TsplError, ValueError):
    """A command parameter violated its documented range or cardinality."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class UnsupportedCommandError(TsplError, NotImplementedError):
    """Raised by commands the library deliberately does not implement."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command} command is not supported")
        self.command = command


class ResolutionQueryError(TsplError):
    """Printer resolution could not be discovered from the device."""

    def __init__(
        self, message: str = "", *, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.__cause__ = cause
