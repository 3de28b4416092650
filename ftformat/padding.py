"""Width, precision and alignment applied to single conversions."""

from __future__ import annotations

from dataclasses import dataclass

from .conversions import NULL_POINTER, NULL_STRING, render, render_pointer, render_string
from .numbers import digit_count, to_hex, to_int32, to_uint32

_FILLS = (" ", "0")


@dataclass(frozen=True)
class FormatSpec:
    """Options parsed from a conversion's flag section.

    ``width`` is the minimum field width, ``left_align`` is set by the
    ``-`` flag, ``fill`` is ``"0"`` when the ``0`` flag was given and
    ``precision`` is ``None`` unless a ``.`` was present.
    """

    width: int = 0
    left_align: bool = False
    fill: str = " "
    precision: int | None = None

    def __post_init__(self) -> None:
        if self.fill not in _FILLS:
            raise ValueError(f"fill must be ' ' or '0', got {self.fill!r}")
        if self.width < 0:
            raise ValueError(f"width must not be negative, got {self.width}")
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must not be negative, got {self.precision}")

    @property
    def has_precision(self) -> bool:
        return self.precision is not None


def _around(body: str, spaces: int, spec: FormatSpec) -> str:
    padding = " " * spaces
    return body + padding if spec.left_align else padding + body


def pad_char(value: str | int, spec: FormatSpec) -> str:
    """Render ``%c``: always right-aligned with spaces."""
    return " " * (spec.width - 1) + render("c", value)


def _string_with_precision(value: str | None, spec: FormatSpec) -> str:
    precision = spec.precision or 0
    natural = len(NULL_STRING) if value is None else len(value)
    shown = min(natural, precision)
    counts = value is not None or precision >= len(NULL_STRING)
    spaces = spec.width - (shown if counts else 0)
    if value is None:
        body = NULL_STRING if precision >= len(NULL_STRING) else ""
    else:
        body = value[:shown]
    return _around(body, spaces, spec)


def pad_string(value: str | bytes | None, spec: FormatSpec) -> str:
    """Render ``%s``; a precision cuts the text, ``None`` is ``(null)``.

    With a precision shorter than ``(null)``, a ``None`` argument prints
    nothing but the padding.
    """
    text = None if value is None else render_string(value)
    if spec.has_precision:
        return _string_with_precision(text, spec)
    if text is None:
        text = NULL_STRING
    return " " * (spec.width - len(text)) + text


def _zero_with_empty_precision(value: int, spec: FormatSpec) -> bool:
    return value == 0 and spec.precision == 0


def pad_int(value: int, spec: FormatSpec) -> str:
    """Render ``%d``/``%i`` for a signed 32-bit value."""
    number = to_int32(value)
    if _zero_with_empty_precision(number, spec):
        return pad_string("", spec)
    text = str(number)
    if spec.has_precision:
        precision = spec.precision or 0
        size = len(text)
        sign_apart = text.startswith("-") and precision >= size
        digits = text[1:] if sign_apart else text
        spaces = spec.width - (precision if precision >= size else size) - int(sign_apart)
        body = ("-" if sign_apart else "") + "0" * (precision - len(digits)) + digits
        return _around(body, spaces, spec)
    sign_apart = number < 0 and spec.fill == "0"
    sign = "-" if sign_apart else ""
    digits = text[1:] if sign_apart else text
    return sign + spec.fill * (spec.width - len(sign) - len(digits)) + digits


def _pad_unsigned_digits(number: int, digits: str, base: int, spec: FormatSpec) -> str:
    if _zero_with_empty_precision(number, spec):
        return pad_string("", spec)
    count = digit_count(number, base)
    if spec.has_precision:
        precision = spec.precision or 0
        spaces = spec.width - (precision if precision >= count else count)
        body = "0" * (precision - count) + digits
        return _around(body, spaces, spec)
    return spec.fill * (spec.width - count) + digits


def pad_unsigned(value: int, spec: FormatSpec) -> str:
    """Render ``%u`` for an unsigned 32-bit value."""
    number = to_uint32(value)
    return _pad_unsigned_digits(number, str(number), 10, spec)


def pad_hex(value: int, upper: bool, spec: FormatSpec) -> str:
    """Render ``%x`` or, with ``upper``, ``%X`` for an unsigned 32-bit value."""
    number = to_uint32(value)
    return _pad_unsigned_digits(number, to_hex(number, upper=upper), 16, spec)


def pad_pointer(value: object, spec: FormatSpec) -> str:
    """Render ``%p``; a null pointer is padded like the string ``(nil)``."""
    text = render_pointer(value)
    if text == NULL_POINTER:
        return pad_string(NULL_POINTER, spec)
    return " " * (spec.width - len(text)) + text


def render_with_spec(conversion: str, value: object, spec: FormatSpec) -> str:
    """Render ``value`` for ``conversion`` under ``spec``.

    Conversions other than ``c s p d i u x X`` render nothing.
    """
    if conversion == "c":
        return pad_char(value, spec)
    if conversion == "s":
        return pad_string(value, spec)
    if conversion == "p":
        return pad_pointer(value, spec)
    if conversion in ("d", "i"):
        return pad_int(value, spec)
    if conversion == "u":
        return pad_unsigned(value, spec)
    if conversion in ("x", "X"):
        return pad_hex(value, conversion == "X", spec)
    return ""