"""Server: receives messages one bit per signal and writes them to output."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Sequence

from .printf import printf
from .protocol import BitDecoder

_ZERO_SIGNAL = signal.SIGUSR1
_ONE_SIGNAL = signal.SIGUSR2
_ACK_SIGNAL = signal.SIGUSR1


class Server:
    """Decodes incoming bit signals and acknowledges every one of them."""

    def __init__(self, output: BinaryIO | None = None) -> None:
        self._output = sys.stdout.buffer if output is None else output
        self._decoder = BitDecoder()

    def handle(self, signo: int, sender_pid: int) -> int | None:
        """Take one bit signal from ``sender_pid`` and acknowledge it.

        Returns the byte the bit completes, which has then been written
        to the output, or None.
        """
        if signo not in (_ZERO_SIGNAL, _ONE_SIGNAL):
            raise ValueError(f"unexpected signal {signo}")
        byte = self._decoder.feed(1 if signo == _ONE_SIGNAL else 0)
        if byte is not None:
            self._output.write(bytes((byte,)))
            self._output.flush()
        os.kill(sender_pid, _ACK_SIGNAL)
        return byte

    def serve_forever(self) -> None:
        """Wait for bit signals and handle them until interrupted."""
        signals = {_ZERO_SIGNAL, _ONE_SIGNAL}
        old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the PID, then receive messages."""
    server = Server()
    printf("Server's PID is: %i\n\n", os.getpid())
    sys.stdout.flush()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0