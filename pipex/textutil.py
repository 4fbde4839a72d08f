"""String helpers used when parsing commands and arguments."""

from __future__ import annotations

from collections.abc import Callable
from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"


def _check_char(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if sep == "":
        return [text] if text else []
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str | None) -> str:
    """Strip every character of ``chars`` from both ends of ``text``."""
    if chars is None:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the index of the first match, or None. An empty needle
    matches at index 0.
    """
    _check_non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of differing character
    codes, with the end of a string counting as code 0; 0 if equal.
    """
    _check_non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for NUL gives the length of the text, its terminator.
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for NUL gives the length of the text, its terminator.
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def has_newline(text: str) -> bool:
    """Tell whether ``text`` holds a newline."""
    return "\n" in text