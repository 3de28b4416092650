"""Plain rendering of single conversions, without width or precision."""

from __future__ import annotations

from .numbers import to_hex, to_int32, to_uint32

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_MASK = 2**64 - 1

ARGUMENT_CONVERSIONS = frozenset("cspxXdiu")


def render_string(value: str | bytes | None) -> str:
    """Render a ``%s`` argument; text stops at the first NUL character."""
    if value is None:
        return NULL_STRING
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("latin-1")
    return str(value).split("\0", 1)[0]


def _pointer_address(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & POINTER_MASK
    return id(value) & POINTER_MASK


def render_pointer(value: object) -> str:
    """Render a ``%p`` argument: an address in lower-case hex, or ``(nil)``.

    Integers are taken as addresses; any other object stands for its
    identity.
    """
    address = _pointer_address(value)
    if address == 0:
        return NULL_POINTER
    return "0x" + to_hex(address)


def _render_char(value: str | int) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def render(conversion: str, value: object = None) -> str:
    """Render ``value`` for the conversion letter ``conversion``.

    ``%`` renders a literal percent sign and ignores ``value``; an
    unknown conversion renders nothing.
    """
    if conversion == "c":
        return _render_char(value)
    if conversion == "s":
        return render_string(value)
    if conversion == "p":
        return render_pointer(value)
    if conversion in ("x", "X"):
        return to_hex(to_uint32(value), upper=conversion == "X")
    if conversion in ("d", "i"):
        return str(to_int32(value))
    if conversion == "u":
        return str(to_uint32(value))
    if conversion == "%":
        return "%"
    return ""