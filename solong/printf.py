"""A small printf supporting the conversions ``c s p d i u x X %``."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_CONVERSIONS = "cspdiuxX%"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_LIMIT = 2**32
_POINTER_LIMIT = 2**64


def _as_int32(value: int) -> int:
    """Reinterpret ``value`` as a signed 32-bit integer."""
    return (value - _INT_MIN) % _UINT_LIMIT + _INT_MIN


def _as_uint32(value: int) -> int:
    """Reinterpret ``value`` as an unsigned 32-bit integer."""
    return value % _UINT_LIMIT


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an integer, got {type(value).__name__}")
    return value


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def utoa(n: int) -> str:
    """Return the decimal text of an unsigned 32-bit integer."""
    if not 0 <= n < _UINT_LIMIT:
        raise OverflowError(f"{n} does not fit in an unsigned 32-bit integer")
    return str(n)


def to_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal text of an unsigned 32-bit integer, without prefix."""
    if not 0 <= n < _UINT_LIMIT:
        raise OverflowError(f"{n} does not fit in an unsigned 32-bit integer")
    return format(n, "X" if upper else "x")


def pointer_hex(value: int | None) -> str:
    """Return a pointer value as ``0x`` followed by lower-case hex digits."""
    if value is None or value == 0:
        return "0x0"
    if not 0 < value < _POINTER_LIMIT:
        raise OverflowError(f"{value} is not a valid pointer value")
    return "0x" + format(value, "x")


def _convert(conversion: str, args: list[Any]) -> str:
    if conversion == "%":
        return "%"
    if not args:
        raise TypeError(f"not enough arguments for %{conversion}")
    value = args.pop(0)
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c needs a single character")
            return value
        return chr(_require_int(value, conversion) & 0xFF)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        if value is None:
            return pointer_hex(None)
        return pointer_hex(_require_int(value, conversion) % _POINTER_LIMIT)
    if conversion in "di":
        return itoa(_as_int32(_require_int(value, conversion)))
    if conversion == "u":
        return utoa(_as_uint32(_require_int(value, conversion)))
    return to_hex(_as_uint32(_require_int(value, conversion)), conversion == "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    pending = list(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with a lone '%'")
        if conversion not in _CONVERSIONS:
            raise ValueError(f"unsupported conversion %{conversion}")
        pieces.append(_convert(conversion, pending))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return its length."""
    text = format_printf(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)