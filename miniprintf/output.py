"""Primitive writers used by the formatter.

Each function writes its text to a stream and returns the number of
characters written.
"""

from __future__ import annotations

from typing import TextIO

__all__ = [
    "InvalidBaseError",
    "is_valid_base",
    "put_char",
    "put_str",
    "put_decimal",
    "put_unsigned",
    "put_hex",
    "put_pointer",
]

_INT_BITS = 32
_POINTER_BITS = 64
_HEX_RADIX = 16
_NULL_TEXT = "(null)"
_NULL_POINTER = "0x0"
_POINTER_DIGITS = "0123456789abcdef"


class InvalidBaseError(ValueError):
    """Raised when a digit alphabet cannot be used as a base."""


def _to_signed32(n: int) -> int:
    span = 1 << _INT_BITS
    half = 1 << (_INT_BITS - 1)
    return (n + half) % span - half


def _to_unsigned32(n: int) -> int:
    return n % (1 << _INT_BITS)


def _in_base(n: int, digits: str) -> str:
    """Render a non-negative integer with the given digit alphabet."""
    radix = len(digits)
    out: list[str] = []
    while True:
        n, rem = divmod(n, radix)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def is_valid_base(base: str) -> bool:
    """Return True if ``base`` has at least two distinct digits and no sign characters."""
    if len(base) < 2:
        return False
    if "+" in base or "-" in base:
        return False
    return len(set(base)) == len(base)


def put_char(c: str, stream: TextIO) -> int:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)
    return 1


def put_str(s: str | None, stream: TextIO) -> int:
    """Write a string; ``None`` is written as ``(null)``.

    Output stops at the first NUL character, as it would for a C string.
    """
    text = _NULL_TEXT if s is None else s.split("\0", 1)[0]
    stream.write(text)
    return len(text)


def put_decimal(n: int, stream: TextIO) -> int:
    """Write ``n`` as a signed 32-bit decimal integer."""
    text = str(_to_signed32(n))
    stream.write(text)
    return len(text)


def put_unsigned(n: int, stream: TextIO) -> int:
    """Write ``n`` as an unsigned 32-bit decimal integer."""
    text = str(_to_unsigned32(n))
    stream.write(text)
    return len(text)


def put_hex(n: int, base: str, stream: TextIO) -> int:
    """Write ``n`` as an unsigned 32-bit hexadecimal number.

    ``base`` supplies the sixteen digit characters; it must be a valid
    base of at least sixteen characters, of which the first sixteen are used.
    """
    if not is_valid_base(base) or len(base) < _HEX_RADIX:
        raise InvalidBaseError(f"invalid hexadecimal base: {base!r}")
    text = _in_base(_to_unsigned32(n), base[:_HEX_RADIX])
    stream.write(text)
    return len(text)


def put_pointer(address: int | None, stream: TextIO) -> int:
    """Write an address as ``0x`` followed by lowercase hex digits.

    ``None`` and zero are written as ``0x0``.
    """
    if not address:
        text = _NULL_POINTER
    else:
        value = address % (1 << _POINTER_BITS)
        text = "0x" + _in_base(value, _POINTER_DIGITS)
    stream.write(text)
    return len(text)