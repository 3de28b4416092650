# ftformat

`ftformat` formats text the way a small C `printf` does. It handles a fixed
set of conversions and flags, and it treats numbers the way C treats 32-bit
integers: values are wrapped into the signed or unsigned 32-bit range before
they are printed.

## Installation

```
pip install ftformat
```

## Conversions

| Conversion | Argument | Output |
|------------|----------|--------|
| `%c` | a one-character string, or an integer code (taken modulo 256) | the character |
| `%s` | a string, bytes (read as Latin-1), or `None` | the text up to its first NUL; `None` prints as `(null)` |
| `%p` | an integer address, `None`, or any other object (its identity is used) | `0x` and the address in lower-case hex; `None` or `0` prints as `(nil)` |
| `%d`, `%i` | an integer | a signed 32-bit decimal |
| `%u` | an integer | an unsigned 32-bit decimal |
| `%x`, `%X` | an integer | unsigned 32-bit hex, in lower or upper case |
| `%%` | none | a literal `%` |

Any other character after `%` prints nothing and takes no argument. A `%`
at the very end of the format is printed as it is. The format itself ends at
its first NUL character.

## Flags

- `-` pads on the right instead of the left.
- `0` pads numbers with zeros instead of spaces.
- a field width, such as `%5d`, sets the minimum width.
- `.N` sets the precision. For numbers it is the minimum number of digits,
  and a zero with precision `0` prints no digits. For strings it is the
  maximum number of characters.
- `#` adds a `0x` or `0X` prefix to non-zero `%x` / `%X` values.
- `+` and a space put a `+` or a blank in front of non-negative `%d` and
  `%i` values.

`#`, `+` and space must be followed directly by the conversion letter; they
cannot be combined with a width, a precision or each other.

## Usage

```python
from ftformat.formatter import format_text, printf

format_text("%5d|%-5s|%#x", 42, "ab", 255)
# '   42|ab   |0xff'

format_text("%.3d and %08.3u", -7, 12)
# '-007 and      012'

count = printf("%s has %+d points\n", "Ann", 10)  # writes to sys.stdout
```

`printf` writes the formatted text to `sys.stdout`, or to another text
stream passed as `file=`, and returns the number of characters written.

The lower-level pieces can also be used on their own:

```python
from ftformat.conversions import render
from ftformat.padding import FormatSpec, render_with_spec
from ftformat.numbers import parse_int, to_hex

render("x", -1)                                      # 'ffffffff'
render_with_spec("s", "hello", FormatSpec(width=8))  # '   hello'
to_hex(48879, upper=True)                            # 'BEEF'
parse_int("  -42abc")                                # -42
```

- `ftformat.numbers` has `parse_int`, `decimal_width`, `digit_count`,
  `to_int32`, `to_uint32` and `to_hex`.
- `ftformat.conversions` has `render`, `render_string` and `render_pointer`.
- `ftformat.padding` has the frozen dataclass `FormatSpec` (`width`,
  `left_align`, `fill`, `precision`) and `render_with_spec`, `pad_char`,
  `pad_string`, `pad_int`, `pad_unsigned`, `pad_hex` and `pad_pointer`.

## Errors

- A width or precision larger than the largest 32-bit signed integer
  raises `OverflowError`.
- A directive with no argument left raises `TypeError`.
- `%c` given a string that is not exactly one character raises `ValueError`.

`printf` formats the whole text before writing, so when an error is raised
nothing is written.

## What it does not do

There are no floating-point conversions (`%f`, `%e`, `%g`), no length
modifiers such as `l` or `h`, and no `*` for widths or precisions taken from
the arguments. The package is a library only and installs no command.