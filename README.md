# minitalk

A signal-based message receiver for POSIX systems. Text reaches a server
process through nothing but two signals, `SIGUSR1` and `SIGUSR2`.

## The wire format

Each byte is sent as eight signals, most significant bit first. `SIGUSR1`
stands for a 1 bit and `SIGUSR2` for a 0 bit. A zero byte closes the message.
The server puts each byte back together from eight signals and writes it out.
When the closing zero byte arrives it writes a newline.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
$ minitalk-server
Server PID: 12345
```

The server prints its process ID and then waits for signals until it is
interrupted. When it stops, the signal handlers that were in place before are
put back.

## Library

`minitalk.protocol` holds the encoding:

- `is_digit_str(text)` tells whether a string is made only of ASCII digits.
- `byte_bits(value)` returns the eight bits of a byte, most significant first.
- `message_bytes(message)` returns the bytes sent for a message, ending with
  the zero byte. `message_bits(message)` yields their bits.
- `render_byte(value)` returns what the receiver writes for a byte: a newline
  for zero, the byte itself otherwise.
- `ByteDecoder` takes bits one at a time through `push(bit)` and returns a
  finished byte every eighth bit.

`minitalk.server.Server(stream)` writes received bytes to `stream` (standard
output by default). `handle_signal(signum, frame)` takes one bit,
`install()` makes the server the handler of both signals and returns the
previous handlers, and `run()` prints the process ID and waits for signals.

The package also provides small helpers for characters (`minitalk.chars`),
strings (`minitalk.strings`, `minitalk.transform`), byte buffers
(`minitalk.memory`), a singly linked list (`minitalk.linked_list`), stream
output (`minitalk.output`) and printf-style formatting (`minitalk.printf`).

## What it does not do

The package has no command or function for sending messages; it only
receives them. A sender has to deliver the signals itself, for example:

```python
import os
import signal
import time

from minitalk.protocol import message_bits

for bit in message_bits("Hello there"):
    os.kill(12345, signal.SIGUSR1 if bit else signal.SIGUSR2)
    time.sleep(0.0001)
```