"""Bounded string searching, comparison and copying.

Positions are returned as indexes into the string, or None where nothing
was found. A string behaves as if followed by a NUL terminator, so the
terminator can be searched for and takes part in comparisons.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]

NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise c to a one-character string, truncating ints to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _require_str(s: object, name: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, got {type(s).__name__}")
    return s


def _check_count(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    _require_str(s, "s")
    target = _char(c)
    if target == NUL:
        index = s.find(NUL)
        return len(s) if index < 0 else index
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    _require_str(s, "s")
    target = _char(c)
    if target == NUL:
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns the difference of the first pair of characters that differ,
    or 0 if the strings agree within n characters. Comparison stops at
    the end of either string.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _check_count(n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of needle within the first n characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    _check_count(n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text, truncated to size - 1 characters, and the
    full length of src, which is what the caller compares against size to
    detect truncation. With size 0 nothing is copied.
    """
    _require_str(src, "src")
    _check_count(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length it tried to create. If dest
    already fills the buffer it is returned unchanged together with
    size + len(src).
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    _check_count(size, "size")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strdup(s: str) -> str:
    """Return a copy of s."""
    return str(_require_str(s, "s"))