"""String helpers working on Python ``str`` with C-string semantics where they matter."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_LLONG_MAX = 2**63 - 1
_WHITESPACE = " \t\n\v\f\r"


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign.

    A magnitude that does not fit in a signed 64-bit integer yields -1 for a
    positive number and 0 for a negative one. The result is wrapped to a
    signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + ord(ch) - ord("0")
        if number > _LLONG_MAX:
            return 0 if sign == -1 else -1
    return _to_int32(number * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(number))


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index == -1 else index


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; the NUL character matches the end."""
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; the NUL character matches the end."""
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def _compare(first, second) -> int:
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters; returns the difference of the first mismatch."""
    if length <= 0:
        return 0
    return _compare(first[:length], second[:length])


def strcmp(first: str, second: str) -> int:
    """Compare two strings; returns the difference of the first mismatch, or 0."""
    return _compare(first, second)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each element, storing any non-None result in place."""
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars