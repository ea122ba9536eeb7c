"""Receive messages sent one bit per signal and write them out as they arrive."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO, Dict, Optional, Sequence

from minitalk.protocol import ByteDecoder, render_byte

SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


class Server:
    """Turns SIGUSR1 and SIGUSR2 into bits and writes each finished byte to a stream.

    SIGUSR1 carries a set bit and SIGUSR2 a clear one. A zero byte ends a
    message and is written as a newline.
    """

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.stream: BinaryIO = sys.stdout.buffer if stream is None else stream
        self.decoder = ByteDecoder()

    def _write(self, data: bytes) -> None:
        self.stream.write(data)
        self.stream.flush()

    def handle_signal(self, signum: int, frame: Optional[FrameType] = None) -> None:
        """Take one bit from ``signum`` and write the byte it completes, if any."""
        byte = self.decoder.push(signum == signal.SIGUSR1)
        if byte is not None:
            self._write(render_byte(byte))

    def install(self) -> Dict[int, object]:
        """Make this server the handler of SIGUSR1 and SIGUSR2.

        Returns the handlers that were in place before, keyed by signal.
        """
        return {signum: signal.signal(signum, self.handle_signal) for signum in SIGNALS}

    def run(self) -> None:
        """Announce the process id, then wait for signals until interrupted.

        The previous signal handlers are put back when the loop ends.
        """
        self._write(f"Server PID: {os.getpid()}\n".encode("ascii"))
        previous = self.install()
        try:
            while True:
                signal.pause()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until it is interrupted; return the exit status."""
    try:
        Server().run()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())