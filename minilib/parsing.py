"""Reading and validating the integers given to the stack sorter.

Values are kept in argument order: the first value given is the one on
top of stack a.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from minilib.transform import INT_MAX, INT_MIN

LONG_MAX = 9223372036854775807

_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised for arguments the sorter rejects."""


def atol(s: str) -> int:
    """Parse a leading decimal integer from s with 64-bit limits.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. A value above the 64-bit maximum gives -1 and one
    below minus that maximum gives 0. An empty string is rejected.
    """
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    if not s:
        raise ValueError("cannot parse an empty string")
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    result = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0")) * sign
        if result > LONG_MAX:
            return -1
        if result < -LONG_MAX:
            return 0
    return result


def join_arguments(args: Iterable[str]) -> str:
    """Join the space-separated words of every argument, each followed by a space."""
    return "".join(
        f"{word} " for arg in args for word in arg.split(" ") if word
    )


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Return the integers named by args, in order.

    Each word must be an optional sign followed by digits and must fit in
    a 32-bit signed integer; anything else raises InputError.
    """
    words = [word for word in join_arguments(args).split(" ") if word]
    values = []
    for word in words:
        if not _NUMBER.fullmatch(word):
            raise InputError(f"not an integer: {word!r}")
        value = int(word)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {word!r}")
        values.append(value)
    return values


def is_sorted(stack: Sequence[int]) -> bool:
    """True when the values, listed top first, strictly increase."""
    return all(lower < upper for lower, upper in zip(stack, stack[1:]))


def check_duplicates(stack: Sequence[int]) -> Sequence[int]:
    """Return stack unchanged, or raise InputError if a value repeats."""
    seen = set()
    for value in stack:
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
    return stack