"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import io
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from miniprintf.output import (
    put_char,
    put_decimal,
    put_hex,
    put_pointer,
    put_str,
    put_unsigned,
)

__all__ = ["printf", "sprintf"]

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _as_char(value: Any) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    return value


_CONVERSIONS: dict[str, Callable[[Any, TextIO], int]] = {
    "c": lambda v, s: put_char(_as_char(v), s),
    "s": put_str,
    "p": put_pointer,
    "d": put_decimal,
    "i": put_decimal,
    "u": put_unsigned,
    "x": lambda v, s: put_hex(v, _LOWER_HEX, s),
    "X": lambda v, s: put_hex(v, _UPPER_HEX, s),
}


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Format ``args`` according to ``fmt``, write to ``stream``, return the character count.

    A ``%`` followed by an unknown character writes that character; a
    ``%`` at the very end is written as is. Extra arguments are ignored.
    """
    out = sys.stdout if stream is None else stream
    text = fmt.split("\0", 1)[0]
    remaining = iter(args)
    chars = iter(text)
    length = 0
    for ch in chars:
        if ch != "%":
            length += put_char(ch, out)
            continue
        spec = next(chars, None)
        if spec is None:
            length += put_char(ch, out)
            break
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            length += put_char(spec, out)
        else:
            length += convert(_next_arg(remaining), out)
    return length


def sprintf(fmt: str, *args: Any) -> str:
    """Return the text :func:`printf` would write for ``fmt`` and ``args``."""
    buffer = io.StringIO()
    printf(fmt, *args, stream=buffer)
    return buffer.getvalue()