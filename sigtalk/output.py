"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from sigtalk.numbers import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character; standard output when no stream is given."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write s; nothing is written when s is None."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write s followed by a newline; nothing at all when s is None."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write n, taken as a 32-bit signed integer, in decimal."""
    _target(stream).write(itoa(n))