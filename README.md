# miniprintf

`miniprintf` is a small `printf` that writes formatted text to a stream.
It returns the number of characters it wrote. Its integer conversions wrap
values the way 32-bit C integers do. Pointers are treated as 64-bit.

## Installation

```
pip install miniprintf
```

For the test suite:

```
pip install "miniprintf[test]"
pytest
```

## Conversions

| Specifier | Argument | Output |
|-----------|----------|--------|
| `%c` | a one-character string, or an integer (its low 8 bits are used as a code point) | the character |
| `%s` | a string, or `None` | the string up to any NUL character; `None` prints `(null)` |
| `%p` | an integer address, or `None` / `0` | `0x` and lowercase hex of the address taken modulo 2**64; a null address prints `0x0` |
| `%d`, `%i` | an integer | signed decimal, wrapped to 32 bits |
| `%u` | an integer | unsigned decimal, wrapped to 32 bits |
| `%x`, `%X` | an integer | lower- or uppercase hex of the unsigned 32-bit value |
| `%%` | none | a literal `%` |

If any other character follows `%`, that character is printed as it stands
and no argument is used. A lone `%` at the very end of the format is printed
unchanged. Flags, widths and precisions are not recognised. The format is
read only up to its first NUL character.

If there are too few arguments for the format, a `TypeError` is raised.
Extra arguments are ignored.

## Usage

```python
import io
from miniprintf.printf import printf, sprintf

count = printf("%s has %d items (%x)\n", "cart", 42, 42)
# prints "cart has 42 items (2a)" and a newline, and returns 23

sprintf("%d %u", -1, -1)          # '-1 4294967295'
sprintf("%X", -1)                 # 'FFFFFFFF'
sprintf("%p %p", 0, 0xdeadbeef)   # '0x0 0xdeadbeef'
sprintf("%s", None)               # '(null)'
sprintf("100%%")                  # '100%'

buffer = io.StringIO()
printf("%c%c", "o", 107, stream=buffer)
buffer.getvalue()                 # 'ok'
```

By default `printf` writes to standard output. Pass `stream=` to send its
output to any object that has a `write` method. `sprintf` returns the text as
a string and does not write it anywhere.

### Lower-level writers

`miniprintf.output` holds the writers that the conversions use. Each writer
takes a stream, writes to it and returns the number of characters written:
`put_char`, `put_str`, `put_decimal`, `put_unsigned`, `put_hex` and
`put_pointer`.

```python
import io
from miniprintf.output import put_hex, put_decimal, is_valid_base, InvalidBaseError

out = io.StringIO()
put_decimal(-2147483648, out)          # 11
put_hex(255, "0123456789abcdef", out)  # 2
out.getvalue()                         # '-2147483648ff'

is_valid_base("01")    # True
is_valid_base("0+1")   # False: '+' and '-' are not allowed
is_valid_base("0")     # False: a base needs at least two digits
is_valid_base("001")   # False: digits must not repeat
```

`put_hex` uses the first sixteen characters of its base as digits. It raises
`InvalidBaseError`, a subclass of `ValueError`, if the base is not valid or
has fewer than sixteen characters. `put_char` raises `ValueError` if it is
given anything other than a one-character string.