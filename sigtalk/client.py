"""Client: sends a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from typing import Sequence

from .printf import printf
from .protocol import BITS_PER_BYTE, Message, encode_message
from .textutil import atoi, is_all_digits

_BIT_SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)
_ACK_SIGNAL = signal.SIGUSR1


class UsageError(Exception):
    """Raised when the command line is not valid."""


def verify_arguments(argv: Sequence[str]) -> tuple[int, str]:
    """Check ``[server_pid, message]`` and return the parsed pair."""
    if len(argv) != 2:
        raise UsageError("ERROR: wrong number of arguments.")
    pid_text, message = argv
    if not pid_text or not is_all_digits(pid_text):
        raise UsageError("ERROR: enter a valid SERVER PID number.")
    return atoi(pid_text), message


def _ignore(signo, frame) -> None:
    pass


def _wait_for_ack(timeout: float | None) -> None:
    if timeout is None:
        signal.sigwaitinfo({_ACK_SIGNAL})
    elif signal.sigtimedwait({_ACK_SIGNAL}, timeout) is None:
        raise TimeoutError("server did not acknowledge in time")


def send_message(server_pid: int, message: Message, timeout: float | None = None) -> int:
    """Send ``message`` to ``server_pid`` and return the number of bytes sent.

    Each bit is one signal (SIGUSR1 for 0, SIGUSR2 for 1); the next bit is
    sent only after the server acknowledges with SIGUSR1.  Raises OSError
    if the server cannot be signalled and TimeoutError if an
    acknowledgement does not arrive within ``timeout`` seconds.
    """
    previous = signal.signal(_ACK_SIGNAL, _ignore)
    old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, {_ACK_SIGNAL})
    bits_sent = 0
    try:
        for bit in encode_message(message):
            os.kill(server_pid, _BIT_SIGNALS[bit])
            bits_sent += 1
            _wait_for_ack(timeout)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)
        signal.signal(_ACK_SIGNAL, signal.SIG_DFL if previous is None else previous)
    return bits_sent // BITS_PER_BYTE


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``client SERVER_PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        server_pid, message = verify_arguments(args)
    except UsageError as error:
        printf("%s\n", str(error))
        return 1
    try:
        send_message(server_pid, os.fsencode(message))
    except (OSError, OverflowError):
        return 1
    return 0