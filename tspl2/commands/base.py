"""
Wire form of a single TSPL command.

A command is an opcode, an ordered list of arguments and an optional raw
payload. Arguments are already converted to dots and already rendered;
``Quoted`` marks the ones the protocol expects inside double quotes.

Serialized forms:
    OPCODE\\r\\n
    OPCODE a1,a2,"text"\\r\\n
    OPCODE a1,a2,<raw bytes>\\r\\n
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Optional, Tuple, Union

from tspl2.exceptions import ValidationError
from tspl2.model.enums import WireToken

__all__ = [
    "CRLF",
    "QUOTE_ESCAPE",
    "Quoted",
    "Argument",
    "Command",
    "flag",
]

CRLF: Final[bytes] = b"\r\n"

# TSPL escape for a double quote inside quoted content
QUOTE_ESCAPE: Final[str] = '\\["]'


@dataclass(frozen=True)
class Quoted:
    """Argument written inside double quotes."""

    text: str

    def __post_init__(self) -> None:
        if "\r" in self.text or "\n" in self.text:
            raise ValidationError(
                f"Quoted content must not contain CR or LF: {self.text!r}", field="content"
            )

    def escaped(self) -> str:
        """Content as written between the quotes."""
        return self.text.replace('"', QUOTE_ESCAPE)

    def render(self) -> str:
        return f'"{self.escaped()}"'


Argument = Union[int, str, Quoted, WireToken]


def flag(value: bool) -> int:
    """Boolean as the protocol's 0/1 switch."""
    return 1 if value else 0


def _render(argument: Argument) -> str:
    if isinstance(argument, Quoted):
        return argument.render()
    if isinstance(argument, WireToken):
        return argument.token
    return str(argument)


@dataclass(frozen=True)
class Command:
    """
    One encoded TSPL command.

    Args:
        opcode: Command keyword, e.g. ``"BARCODE"``.
        args: Arguments in protocol order.
        payload: Raw bytes written after the last argument and a comma,
            never re-encoded.
    """

    opcode: str
    args: Tuple[Argument, ...] = field(default_factory=tuple)
    payload: Optional[bytes] = None

    def text(self) -> str:
        """Textual part of the line, without payload or terminator."""
        rendered = ",".join(_render(a) for a in self.args)
        if self.payload is not None:
            rendered = f"{rendered}," if rendered else ","
        if not rendered:
            return self.opcode
        return f"{self.opcode} {rendered}"

    def encode(self, encoding: str = "utf-8") -> bytes:
        """
        Serialize to the exact bytes sent to the printer.

        Raises:
            ValidationError: If the text cannot be represented in ``encoding``.
        """
        line = self.text()
        try:
            data = line.encode(encoding)
        except UnicodeEncodeError as e:
            raise ValidationError(
                f"{self.opcode} cannot be encoded as {encoding}: "
                f"invalid character {e.object[e.start:e.end]!r}",
                field="content",
            ) from e
        if self.payload is not None:
            data += self.payload
        return data + CRLF

    def __str__(self) -> str:
        return self.text()
