"""String operations with the semantics of the classic C string helpers.

Positions are returned as indices, or ``None`` where nothing was found.
Functions that would write into a caller's buffer return the new string
together with the length the caller needs.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; a NUL matches the end of the text."""
    _check_char(char)
    if char == _NUL:
        index = text.find(_NUL)
        return len(text) if index < 0 else index
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; a NUL matches the end of the text."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strjoin(left: str, right: str) -> str:
    """Return ``left`` followed by ``right``."""
    return left + right


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; a result length
    of ``size`` or more means the copy was truncated.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the concatenation was meant
    to have. When ``size`` does not exceed ``len(dest)`` nothing is appended
    and the length is ``len(src) + size``.
    """
    _check_non_negative("size", size)
    dest_len = len(dest)
    src_len = len(src)
    if size == 0:
        return dest, src_len
    if size <= dest_len:
        return dest, src_len + size
    room = size - dest_len - 1
    return dest + src[:room], dest_len + src_len


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each character of a mutable sequence.

    A return value other than ``None`` replaces the character in place.
    """
    for index, char in enumerate(list(text)):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement


def strncmp(left: str, right: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns the code difference of the first unequal pair, the end of a
    string counting as code 0, or 0 when the compared parts are equal.
    """
    _check_non_negative("limit", limit)
    for index in range(limit):
        a = ord(left[index]) if index < len(left) else 0
        b = ord(right[index]) if index < len(right) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    _check_non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start beyond the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]