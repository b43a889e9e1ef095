"""String routines with C string semantics.

Input strings end at their first NUL character, if they hold one. Positions
are returned as indices, and ``None`` means "not found".
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

CharLike = int | str

_NUL = "\0"


def _cstr(s: str) -> str:
    """The part of s before its first NUL."""
    if s is None:
        raise TypeError("a string is required, not None")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Narrow c to a single character, as a C cast to char does."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> int | None:
    """Index of the first c in s; NUL matches the end of the string."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> int | None:
    """Index of the last c in s; NUL matches the end of the string."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of s up to its terminating NUL."""
    return _cstr(s)


def strjoin(first: str, second: str) -> str:
    """first followed by second."""
    return _cstr(first) + _cstr(second)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a destination of size characters, NUL included.

    Returns the copied text and the full length of src, so truncation
    happened when the length is not below size.
    """
    _check_non_negative(size, "size")
    text = _cstr(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a destination of size characters.

    Returns the resulting text and the length the result was meant to have.
    When size does not exceed the length of dst, dst is left unchanged and
    the length of src plus size is returned.
    """
    _check_non_negative(size, "size")
    tail = _cstr(src)
    if dst is None and size == 0:
        return "", len(tail)
    head = _cstr(dst)
    if size <= len(head):
        return head, len(tail) + size
    return head + tail[: size - len(head) - 1], len(tail) + len(head)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; the sign tells the ordering."""
    _check_non_negative(n, "n")
    pairs = zip_longest(_cstr(first)[:n], _cstr(second)[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle within the first length characters of haystack."""
    _check_non_negative(length, "length")
    pattern = _cstr(needle)
    if not pattern:
        return 0
    index = _cstr(haystack)[:length].find(pattern)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty past the end."""
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    text = _cstr(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(s: str, chars: str) -> str:
    """s without leading and trailing characters found in chars."""
    return _cstr(s).strip(_cstr(chars))


def split(s: str, sep: CharLike) -> list[str]:
    """The non-empty words of s separated by the character sep."""
    text = _cstr(s)
    separator = _char(sep)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, character) for each character of s."""
    return "".join(_char(f(index, ch)) for index, ch in enumerate(_cstr(s)))


def striteri(
    buffer: MutableSequence, f: Callable[[int, object], object]
) -> MutableSequence:
    """Replace each element of buffer, up to a NUL, with f(index, element).

    The buffer is changed in place and returned.
    """
    for index, value in enumerate(buffer):
        if value == _NUL or value == 0:
            break
        buffer[index] = f(index, value)
    return buffer