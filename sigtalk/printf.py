"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, TextIO

_INT_RANGE = 1 << 32
_PTR_RANGE = 1 << 64


def _signed(value: Any) -> int:
    number = operator.index(value) % _INT_RANGE
    return number - _INT_RANGE if number >= _INT_RANGE // 2 else number


def _unsigned(value: Any) -> int:
    return operator.index(value) % _INT_RANGE


def _char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) % _PTR_RANGE
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_signed(value)),
    "i": lambda value: str(_signed(value)),
    "u": lambda value: str(_unsigned(value)),
    "x": lambda value: format(_unsigned(value), "x"),
    "X": lambda value: format(_unsigned(value), "X"),
}


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions produce no output and consume no argument.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    pending = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            argument = next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        out.append(converter(argument))
    return "".join(out)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)