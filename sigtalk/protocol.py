"""Bit framing for messages: each byte is sent as eight bits, most significant first."""

from __future__ import annotations

import operator
from typing import Iterable, Iterator, Union

BITS_PER_BYTE = 8

Message = Union[str, bytes, bytearray, memoryview]


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of ``value``, most significant bit first.

    Values from -128 to 255 are accepted; negative values are taken as
    their two's-complement byte.
    """
    number = operator.index(value)
    if not -128 <= number <= 255:
        raise ValueError(f"value {number} does not fit in a byte")
    number &= 0xFF
    return tuple((number >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def encode_message(message: Message) -> Iterator[int]:
    """Yield the bits of ``message`` in sending order.

    Text is encoded as UTF-8.  The message ends at its first NUL byte,
    which is not sent.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from encode_byte(byte)


class BitDecoder:
    """Collects bits, most significant first, and yields each completed byte."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received toward the current byte."""
        return self._count

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the byte it completes, or None."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, not {bit!r}")
        self._value = ((self._value << 1) | int(bit)) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte


def decode_bits(bits: Iterable[int]) -> bytes:
    """Assemble a sequence of bits into bytes; trailing partial bytes are dropped."""
    decoder = BitDecoder()
    completed = (decoder.feed(bit) for bit in bits)
    return bytes(byte for byte in completed if byte is not None)