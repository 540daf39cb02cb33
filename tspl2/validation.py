"""
Parameter checks shared by the command encoders.

Every encoder calls these before building its command, so a failing check
means nothing has been written for that call.
"""

from typing import Any, Final, Optional, Sequence, Tuple, Type, Union

from tspl2.exceptions import ValidationError

__all__ = [
    "MAX_PRINT_QUANTITY",
    "MAX_FEED_DOTS",
    "MAX_BLOCK_CONTENT_BYTES",
    "require_range",
    "require_max",
    "require_one_of",
    "require_present",
    "require_member",
    "qr_ecc_grade",
]

MAX_PRINT_QUANTITY: Final[int] = 999_999_999
MAX_FEED_DOTS: Final[int] = 9999
MAX_BLOCK_CONTENT_BYTES: Final[int] = 4096


def require_range(field: str, value: int, minimum: int, maximum: int) -> int:
    """
    Check ``minimum <= value <= maximum``.

    Returns:
        The value, so checks can be written inline.

    Raises:
        ValidationError: If value is outside the inclusive range.
    """
    if not (minimum <= value <= maximum):
        raise ValidationError(
            f"{field} must be in range {minimum}-{maximum}, got {value}", field=field
        )
    return value


def require_max(field: str, value: int, maximum: int) -> int:
    if value > maximum:
        raise ValidationError(f"{field} must be at most {maximum}, got {value}", field=field)
    return value


def require_one_of(field: str, value: int, allowed: Sequence[int]) -> int:
    if value not in allowed:
        choices = ", ".join(str(v) for v in allowed)
        raise ValidationError(f"{field} must be one of {choices}, got {value}", field=field)
    return value


def require_present(field: str, value: Optional[int], reason: str) -> int:
    if value is None:
        raise ValidationError(f"{field} is required {reason}", field=field)
    return value


def require_member(
    field: str, value: Any, vocabulary: Union[Type[Any], Tuple[Type[Any], ...]]
) -> Any:
    """
    Check that a value belongs to a closed vocabulary (or one of several).

    Raw tokens such as ``"4"`` or ``90`` are rejected even when they happen
    to match a member's wire token.

    Raises:
        ValidationError: If value is not a member.
    """
    if not isinstance(value, vocabulary):
        families = vocabulary if isinstance(vocabulary, tuple) else (vocabulary,)
        names = " or ".join(f.__name__ for f in families)
        raise ValidationError(
            f"{field} must be a {names} member, got {type(value).__name__}", field=field
        )
    return value


def qr_ecc_grade(level: int) -> str:
    """
    Map a 0-30 error correction level onto the QR grade letter.

    0-6 -> L, 7-14 -> M, 15-24 -> Q, anything higher -> H.

    Raises:
        ValidationError: If level is negative.
    """
    if level < 0:
        raise ValidationError(f"QR ECC level must not be negative, got {level}", field="ecc_level")
    if level <= 6:
        return "L"
    if level <= 14:
        return "M"
    if level <= 24:
        return "Q"
    return "H"
