"""Format strings with ``%`` directives and print them."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, TextIO

from .conversions import ARGUMENT_CONVERSIONS, render
from .numbers import decimal_width, parse_int, to_hex, to_int32, to_uint32
from .padding import FormatSpec, render_with_spec

_DIGITS = "0123456789"


@dataclass
class _Arguments:
    """The values that directives consume, in order."""

    values: tuple
    _source: Iterator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._source = iter(self.values)

    def take(self) -> object:
        try:
            return next(self._source)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None


def _plain(conversion: str, args: _Arguments) -> str:
    """Render a conversion without any flags, taking an argument if it needs one."""
    if conversion in ARGUMENT_CONVERSIONS:
        return render(conversion, args.take())
    return render(conversion)


def _with_spec(conversion: str, args: _Arguments, spec: FormatSpec) -> str:
    if conversion in ARGUMENT_CONVERSIONS:
        return render_with_spec(conversion, args.take(), spec)
    return ""


def _hash_flag(fmt: str, start: int, args: _Arguments) -> tuple[str, int]:
    following = fmt[start + 1 : start + 2]
    if following in ("x", "X"):
        number = to_uint32(args.take())
        prefix = "0" + following if number else ""
        return prefix + to_hex(number, upper=following == "X"), start + 2
    if following:
        return _plain(following, args), start + 2
    return "", start


def _sign_flag(fmt: str, start: int, args: _Arguments) -> tuple[str, int]:
    flag = fmt[start]
    following = fmt[start + 1 : start + 2]
    if following in ("d", "i"):
        number = to_int32(args.take())
        sign = flag if number >= 0 else ""
        return sign + str(number), start + 2
    if following:
        return _plain(following, args), start + 2
    return "", start


def _flag_section(fmt: str, start: int, args: _Arguments) -> tuple[str, int]:
    width = 0
    left_align = False
    fill = " "
    has_precision = False
    precision = 0
    pos = start
    while pos < len(fmt):
        char = fmt[pos]
        if char == "0":
            fill = "0"
        elif char == "-":
            left_align = True
        elif char in _DIGITS:
            width = parse_int(fmt[pos:])
            pos += decimal_width(width) - 1
        elif char == ".":
            has_precision = True
            if fmt[pos + 1 : pos + 2] in tuple(_DIGITS):
                precision = parse_int(fmt[pos + 1 :])
                pos += decimal_width(precision)
        else:
            break
        pos += 1
    if pos >= len(fmt):
        return "", pos

    conversion = fmt[pos]
    spec = FormatSpec(
        width=width,
        left_align=left_align,
        fill=fill,
        precision=precision if has_precision else None,
    )
    if has_precision:
        text = _with_spec(conversion, args, spec)
    elif width and left_align:
        text = _plain(conversion, args)
        text += " " * (width - len(text))
    elif width:
        text = _with_spec(conversion, args, spec)
    else:
        text = _plain(conversion, args)
    return text, pos + 1


def _directive(fmt: str, start: int, args: _Arguments) -> tuple[str, int]:
    """Render the directive whose first character after ``%`` is at ``start``.

    Returns the rendered text and the position where scanning resumes.
    """
    char = fmt[start]
    if char == "#":
        return _hash_flag(fmt, start, args)
    if char in ("+", " "):
        return _sign_flag(fmt, start, args)
    if char in "0-." or char in _DIGITS:
        return _flag_section(fmt, start, args)
    return _plain(char, args), start + 1


def format_text(fmt: str, *args: object) -> str:
    """Expand the ``%`` directives of ``fmt`` with ``args``.

    The format ends at its first NUL character.  Raises
    :class:`TypeError` when a directive has no argument left and
    :class:`OverflowError` when a width or precision exceeds ``INT_MAX``.
    """
    fmt = fmt.split("\0", 1)[0]
    arguments = _Arguments(args)
    pieces = []
    pos = 0
    while pos < len(fmt):
        if fmt[pos] == "%" and pos + 1 < len(fmt):
            text, pos = _directive(fmt, pos + 1, arguments)
            pieces.append(text)
        else:
            pieces.append(fmt[pos])
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: object, file: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_text(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)