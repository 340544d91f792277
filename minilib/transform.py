"""Building new strings from old ones, and converting between text and integers."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \n\t\v\f\r"


def _require_str(s: object, name: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, got {type(s).__name__}")
    return s


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start beyond the end of s gives the empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in charset."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> List[str]:
    """Split s on the character sep, dropping empty words."""
    _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of f(index, char) for each character of s."""
    _require_str(s, "s")
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call f(index, char) on each element of chars, in place.

    When f returns a value other than None it replaces the element.
    The same sequence is returned.
    """
    for index, char in enumerate(chars):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars


def atoi(s: str) -> int:
    """Parse a leading decimal integer from s.

    Leading whitespace and one optional sign are accepted; parsing stops
    at the first non-digit. A value above the 32-bit maximum gives -1 and
    one below the 32-bit minimum gives 0. Text with no digits gives 0.
    """
    _require_str(s, "s")
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
        if result > INT_MAX:
            return -1
        if result < INT_MIN:
            return 0
    return result


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)