"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

CharLike = int | str

_UPPER_FIRST = ord("A")
_UPPER_LAST = ord("Z")
_LOWER_FIRST = ord("a")
_LOWER_LAST = ord("z")
_DIGIT_FIRST = ord("0")
_DIGIT_LAST = ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _LOWER_FIRST <= code <= _LOWER_LAST or _UPPER_FIRST <= code <= _UPPER_LAST


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if is_alpha(code) and code <= _UPPER_LAST:
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if is_alpha(code) and code >= _LOWER_FIRST:
        return _same_kind(c, code - _CASE_OFFSET)
    return c