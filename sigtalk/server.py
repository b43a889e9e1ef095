"""The receiving side: rebuilds bytes from signals and writes them out."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import BinaryIO

from sigtalk.output import put_char, put_nbr, put_str
from sigtalk.protocol import Bit, ByteDecoder

_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class Server:
    """Decodes bit signals into bytes, optionally acknowledging each bit."""

    def __init__(self, output: BinaryIO | None = None, acknowledge: bool = False) -> None:
        self.output = output
        self.acknowledge = acknowledge
        self._decoder = ByteDecoder()

    def _stream(self) -> BinaryIO:
        return sys.stdout.buffer if self.output is None else self.output

    def receive(self, signum: int, sender: int | None = None) -> int | None:
        """Handle one bit signal; return the byte it completed, if any.

        When acknowledging, SIGUSR1 is sent back to sender after every bit.
        """
        value = self._decoder.feed(Bit.from_signal(signum))
        if value is not None:
            stream = self._stream()
            stream.write(bytes([value]))
            stream.flush()
        if self.acknowledge and sender:
            os.kill(sender, signal.SIGUSR1)
        return value

    def serve_forever(self) -> None:
        """Print this process id, then handle bit signals until interrupted."""
        put_str("server PID --------> ")
        put_nbr(os.getpid())
        put_char("\n")
        sys.stdout.flush()
        signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.receive(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, _SIGNALS)


def main(argv: list[str] | None = None) -> int:
    """Run the server until interrupted."""
    parser = argparse.ArgumentParser(description="Receive messages sent as signals.")
    parser.add_argument(
        "--ack", action="store_true", help="acknowledge every received bit"
    )
    args = parser.parse_args(argv)
    try:
        Server(acknowledge=args.ack).serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())