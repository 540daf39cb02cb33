"""
Action and control commands for TSPL/TSPL2 printers.

Contains image buffer handling, paper movement, printing, the beeper,
the cutter, self tests and job synchronisation.

Reference: TSPL/TSPL2 Programming Manual, "Action Commands"
"""

from datetime import timedelta
from typing import Final, Optional, Union

from tspl2.commands.base import Command
from tspl2.exceptions import UnsupportedCommandError, ValidationError
from tspl2.model.enums import SelfTest
from tspl2.validation import MAX_FEED_DOTS, MAX_PRINT_QUANTITY, require_member, require_range

__all__ = [
    "CLS",
    "FORMFEED",
    "HOME",
    "CUT",
    "EOJ",
    "INITIALPRINTER",
    "cls",
    "feed",
    "backup",
    "backfeed",
    "formfeed",
    "home",
    "print_label",
    "sound",
    "cut",
    "selftest",
    "eoj",
    "delay",
    "initial_printer",
    "display",
    "menu",
]

# =============================================================================
# FIXED COMMANDS
# =============================================================================

CLS: Final[Command] = Command("CLS")  # clear image buffer
FORMFEED: Final[Command] = Command("FORMFEED")  # feed to next label start
HOME: Final[Command] = Command("HOME")  # feed until the sensor finds the origin
CUT: Final[Command] = Command("CUT")  # cut now, without back feeding
EOJ: Final[Command] = Command("EOJ")  # wait for preceding commands to finish
INITIALPRINTER: Final[Command] = Command("INITIALPRINTER")  # restore defaults


def cls() -> Command:
    """Clear the image buffer. Command: CLS"""
    return CLS


def formfeed() -> Command:
    return FORMFEED


def home() -> Command:
    """
    Feed until the internal sensor has determined the origin.

    SIZE and GAP should be sent first. TSPL printers back the label to the
    origin; TSPL2 printers feed it forward.
    """
    return HOME


def cut() -> Command:
    return CUT


def eoj() -> Command:
    return EOJ


def initial_printer() -> Command:
    return INITIALPRINTER


# =============================================================================
# PAPER MOVEMENT
# =============================================================================


def _movement(opcode: str, dots: int) -> Command:
    require_range(f"{opcode.lower()} length in dots", dots, 0, MAX_FEED_DOTS)
    return Command(opcode, (dots,))


def feed(dots: int) -> Command:
    """
    Feed the label forward.

    Command: FEED n

    Args:
        dots: Feed length in dots (0-9999).

    Raises:
        ValidationError: If the length is outside 0-9999 dots.
    """
    return _movement("FEED", dots)


def backup(dots: int) -> Command:
    """Feed the label in reverse (TSPL printers). Command: BACKUP n"""
    return _movement("BACKUP", dots)


def backfeed(dots: int) -> Command:
    """Feed the label in reverse (TSPL2 printers). Command: BACKFEED n"""
    return _movement("BACKFEED", dots)


# =============================================================================
# PRINTING
# =============================================================================


def print_label(sets: int, copies: Optional[int] = None) -> Command:
    """
    Print the label format stored in the image buffer.

    Command: PRINT m[,n]

    Args:
        sets: Number of label sets (1-999999999).
        copies: Copies of each label (1-999999999), optional.

    Raises:
        ValidationError: If a quantity is out of range.

    Example:
        >>> print_label(1).encode()
        b'PRINT 1\\r\\n'
    """
    require_range("sets", sets, 1, MAX_PRINT_QUANTITY)
    if copies is None:
        return Command("PRINT", (sets,))
    require_range("copies", copies, 1, MAX_PRINT_QUANTITY)
    return Command("PRINT", (sets, copies))


def sound(level: int, interval: int) -> Command:
    """
    Sound the beeper.

    Command: SOUND level,interval

    Args:
        level: Sound level 0-9.
        interval: Duration 1-4095.
    """
    require_range("sound level", level, 0, 9)
    require_range("sound interval", interval, 1, 4095)
    return Command("SOUND", (level, interval))


def selftest(kind: SelfTest = SelfTest.ALL) -> Command:
    """
    Print printer information.

    Command: SELFTEST [page]

    ``SelfTest.ALL`` sends the bare command, which prints every page.
    """
    require_member("selftest", kind, SelfTest)
    if kind is SelfTest.ALL:
        return Command("SELFTEST")
    return Command("SELFTEST", (kind,))


def delay(duration: Union[timedelta, int]) -> Command:
    """
    Make the printer wait before processing the next command.

    Command: DELAY ms

    Args:
        duration: timedelta, or an integer number of milliseconds.
    """
    if isinstance(duration, timedelta):
        milliseconds = duration // timedelta(milliseconds=1)
    else:
        milliseconds = duration
    if milliseconds < 0:
        raise ValidationError(f"delay must not be negative, got {milliseconds} ms", field="delay")
    return Command("DELAY", (milliseconds,))


# =============================================================================
# UNSUPPORTED
# =============================================================================


def display() -> Command:
    """Show the image buffer on the LCD panel. Not supported."""
    raise UnsupportedCommandError("DISPLAY")


def menu() -> Command:
    """Design an on-printer menu backed by a resident database. Not supported."""
    raise UnsupportedCommandError("MENU")
