"""Integer helpers: parsing, digit counting, fixed-width wrapping and hex."""

from __future__ import annotations

INT_MAX = 2**31 - 1
UINT32_MASK = 2**32 - 1

_LEADING_SPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def parse_int(text: str | None) -> int:
    """Parse a leading decimal integer the way a width field is read.

    Leading whitespace is skipped, one optional sign is accepted, then
    digits are consumed until the first non-digit.  Text without digits
    yields 0.  A magnitude above ``INT_MAX`` raises :class:`OverflowError`,
    whatever the sign.
    """
    if text is None:
        return 0
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    magnitude = int("".join(digits)) if digits else 0
    if magnitude > INT_MAX:
        raise OverflowError(f"value {magnitude} exceeds {INT_MAX}")
    return sign * magnitude


def decimal_width(number: int) -> int:
    """Return how many characters ``number`` takes in decimal, sign included."""
    return len(str(int(number)))


def digit_count(number: int, base: int) -> int:
    """Return how many digits a non-negative ``number`` has in ``base``."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    count = 1
    while number >= base:
        number //= base
        count += 1
    return count


def to_uint32(value: int) -> int:
    """Wrap ``value`` into the unsigned 32-bit range."""
    return int(value) & UINT32_MASK


def to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    unsigned = to_uint32(value)
    return unsigned - 2**32 if unsigned > INT_MAX else unsigned


def to_hex(number: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative ``number``."""
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    return format(number, "X" if upper else "x")