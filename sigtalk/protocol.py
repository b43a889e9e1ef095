"""The one-bit-per-signal wire protocol.

Each byte travels as eight signals, least significant bit first: SIGUSR1
carries a 1 and SIGUSR2 a 0. A message is its bytes followed by a NUL and
a newline.
"""

from __future__ import annotations

import enum
import signal
from collections.abc import Iterator
from dataclasses import dataclass

from sigtalk.numbers import atoi

BITS_PER_BYTE = 8
TRAILER = b"\0\n"


class Bit(enum.IntEnum):
    """A bit value and the signal that carries it."""

    ZERO = 0
    ONE = 1

    @property
    def signal(self) -> int:
        """The signal number that transmits this bit."""
        return signal.SIGUSR1 if self is Bit.ONE else signal.SIGUSR2

    @classmethod
    def from_signal(cls, signum: int) -> Bit:
        """The bit carried by signal signum."""
        if signum == signal.SIGUSR1:
            return cls.ONE
        if signum == signal.SIGUSR2:
            return cls.ZERO
        raise ValueError(f"signal {signum} carries no bit")


def _as_bytes(message: str | bytes) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8", "surrogateescape")
    return bytes(message)


def parse_pid(text: str) -> int:
    """Parse a process id; raises ValueError unless it is positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError("Wrong PID")
    return pid


def encode_byte(value: int) -> Iterator[Bit]:
    """The eight bits of value, least significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    for _ in range(BITS_PER_BYTE):
        yield Bit(value & 1)
        value >>= 1


def encode_message(message: str | bytes) -> Iterator[Bit]:
    """The bits of message followed by its NUL and newline trailer."""
    for value in _as_bytes(message) + TRAILER:
        yield from encode_byte(value)


class ByteDecoder:
    """Assembles bits, least significant first, back into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: Bit | int) -> int | None:
        """Add one bit; return the byte once eight have arrived."""
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self.reset()
        return value

    def reset(self) -> None:
        """Discard any partly received byte."""
        self._value = 0
        self._count = 0


@dataclass
class AckCounter:
    """Counts acknowledgements until every bit of a message is confirmed."""

    length: int
    received: int = 0

    @classmethod
    def for_message(cls, message: str | bytes) -> AckCounter:
        """A counter for message with its two trailer bytes."""
        return cls(len(_as_bytes(message)) + len(TRAILER))

    @property
    def expected(self) -> int:
        """The number of acknowledgements the whole message needs."""
        return self.length * BITS_PER_BYTE

    @property
    def complete(self) -> bool:
        """True once every bit has been acknowledged."""
        return self.received >= self.expected

    def record(self) -> bool:
        """Count one acknowledgement; True when it is the final one."""
        self.received += 1
        return self.received == self.expected