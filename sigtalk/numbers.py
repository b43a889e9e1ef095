"""Decimal text to integer conversion with 32-bit C int semantics."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = "\f\n\r\t\v "
_U64_MODULUS = 1 << 64
_I64_MAX = (1 << 63) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Values beyond the 64-bit signed range
    give -1 (positive) or 0 (negative); anything else is narrowed to a 32-bit
    signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    result = 0
    for digit in takewhile(_is_ascii_digit, rest):
        result = (result * 10 + int(digit)) % _U64_MODULUS

    if result > _I64_MAX:
        return 0 if sign == -1 else -1
    return _to_int32(_to_int32(result) * sign)


def itoa(n: int) -> str:
    """Render n, taken as a 32-bit signed integer, in decimal."""
    return str(_to_int32(n))