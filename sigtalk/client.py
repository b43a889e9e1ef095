"""The sending side: transmits a message to a server one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import TextIO

from sigtalk.output import put_str
from sigtalk.protocol import AckCounter, encode_byte, encode_message, parse_pid

DEFAULT_DELAY = 50e-6
_ACK_POLL = 0.01
_USAGE = "Usage: ./client <server PID> <message>\n"


def send_byte(pid: int, value: int, delay: float = DEFAULT_DELAY) -> None:
    """Send one byte to pid, pausing delay seconds after each bit."""
    for bit in encode_byte(value):
        os.kill(pid, bit.signal)
        time.sleep(delay)


def send_message(pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> None:
    """Send message and its NUL and newline trailer to pid."""
    for bit in encode_message(message):
        os.kill(pid, bit.signal)
        time.sleep(delay)


def send_with_ack(
    pid: int,
    message: str | bytes,
    delay: float = DEFAULT_DELAY,
    stream: TextIO | None = None,
) -> AckCounter:
    """Send message and wait until the server has acknowledged every bit."""
    counter = AckCounter.for_message(message)
    done = False

    def on_ack(signum, frame):
        nonlocal done
        if counter.record():
            done = True

    previous = signal.signal(signal.SIGUSR1, on_ack)
    try:
        send_message(pid, message, delay)
        while not done:
            time.sleep(_ACK_POLL)
    finally:
        signal.signal(signal.SIGUSR1, previous)
    put_str("Message sent ✅\n", stream)
    return counter


def main(argv: list[str] | None = None) -> int:
    """Send a message: [--ack] <server PID> <message>."""
    args = list(sys.argv[1:] if argv is None else argv)
    acknowledge = "--ack" in args
    if acknowledge:
        args.remove("--ack")
    if len(args) != 2:
        put_str(_USAGE, sys.stderr)
        return 0
    try:
        pid = parse_pid(args[0])
    except ValueError:
        put_str("Wrong PID\n", sys.stderr)
        return 1
    message = os.fsencode(args[1])
    if acknowledge:
        send_with_ack(pid, message)
    else:
        send_message(pid, message)
    return 0


if __name__ == "__main__":
    sys.exit(main())