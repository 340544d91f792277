"""A small formatted-output facility with the conversions c, s, d, i, u, x, X, p and %.

Conversions take no flags, widths or precisions. An unknown conversion
character produces no output and consumes no argument; a lone trailing
'%' produces nothing.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    value = _next_arg(args, spec)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
        return value
    if spec in "di":
        return str(_to_int32(_as_int(value, spec)))
    if spec == "u":
        return str(_as_int(value, spec) & _UINT32)
    if spec in "xX":
        return format(_as_int(value, spec) & _UINT32, spec)
    # %p: an address; None stands for the null pointer.
    address = 0 if value is None else _as_int(value, spec)
    return "0x" + format(address & _UINT64, "x")


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted args."""
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a str, got {type(fmt).__name__}")
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)