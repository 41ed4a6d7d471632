# sigtalk

A tiny messaging pair for POSIX systems: a server that writes whatever bytes
it receives to standard output, and a client that sends text to it using
nothing but two signals. Every byte travels as eight signals, most
significant bit first: `SIGUSR1` for a 0 bit and `SIGUSR2` for a 1 bit.
After each bit the server answers the sender with `SIGUSR1`, and the client
waits for that answer before it sends the next bit.

The client and server wait for signals with `signal.sigwaitinfo` and
`signal.sigtimedwait`, so they need a platform where Python provides those
(Linux).

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id, then writes
every byte it receives to standard output until it is interrupted with
Ctrl-C:

```
sigtalk-server
Server's PID is: 12345
```

From another terminal, send a message to that process id:

```
sigtalk-client 12345 "Hello, world!"
```

The client needs exactly two arguments: the server's PID, given as digits
only, and the message. Otherwise it prints `ERROR: wrong number of
arguments.` or `ERROR: enter a valid SERVER PID number.` and exits with
status 1. It also exits with status 1 if the server cannot be signalled.
The message is sent as bytes and ends at its first NUL byte, if it has one.

## Library use

The bit protocol in `sigtalk.protocol` works on its own, without signals:

```python
from sigtalk.protocol import encode_byte, encode_message, decode_bits, BitDecoder

assert encode_byte(ord("A")) == (0, 1, 0, 0, 0, 0, 0, 1)

bits = list(encode_message(b"hi"))
assert decode_bits(bits) == b"hi"

decoder = BitDecoder()
for bit in bits:
    byte = decoder.feed(bit)
    if byte is not None:
        print(chr(byte))
```

`encode_message` accepts `str` (encoded as UTF-8) or bytes-like objects.
`decode_bits` drops a trailing partial byte, and `BitDecoder.pending` tells
how many bits of the current byte have arrived.

From Python code:

- `sigtalk.client.send_message(server_pid, message, timeout=None)` sends a
  message and returns the number of bytes sent. It raises `OSError` if the
  server cannot be signalled and `TimeoutError` if an acknowledgement takes
  longer than `timeout` seconds.
- `sigtalk.client.verify_arguments([pid, message])` checks a command line and
  returns `(pid, message)`, raising `sigtalk.client.UsageError` otherwise.
- `sigtalk.server.Server(output)` decodes bit signals into a binary stream
  (standard output by default). `Server.handle(signo, sender_pid)` takes one
  signal, acknowledges it and returns the byte it completes, or `None`;
  `Server.serve_forever()` runs the receive loop.

The package also has some small helpers:

- `sigtalk.textutil`: C-style string handling with `atoi`, `itoa`, `split`,
  `strtrim`, `strnstr` (returns an index or `None`), `strncmp` and
  `is_all_digits`.
- `sigtalk.printf`: `format_printf(fmt, *args)` and
  `printf(fmt, *args, file=None)` for `%c %s %p %d %i %u %x %X %%`
  formatting; `printf` returns the number of characters written.
- `sigtalk.lines.LineReader(stream, buffer_size=42)`: reads lines (as bytes,
  keeping the newline) from a binary stream through a fixed-size buffer,
  either with `next_line()` or by iterating.

## What it does not do

The server keeps a single decoder for all senders, so it expects one client
at a time; bits from two clients sending at once get mixed together. Nothing
marks where one message ends and the next begins, and messages are neither
queued, stored nor encrypted.

## Running the tests

```
pip install .[test]
pytest
```