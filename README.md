# sigtalk

sigtalk moves text from one process to another using only two POSIX
signals. Every byte goes over the wire as eight signals, least significant
bit first: `SIGUSR1` carries a 1 and `SIGUSR2` carries a 0. After the
message, the client sends a NUL byte and then a newline.

It needs a POSIX system. The server waits for signals with
`signal.sigwaitinfo`, which Python offers on Linux but not on macOS.

## Installation

```
pip install .
```

## Running it

Start the server in one terminal. It prints its process id. After that it
writes every byte it receives to standard output, the NUL and the newline
that end a message included:

```
$ sigtalk-server
server PID --------> 41234
```

Send it a message from another terminal:

```
$ sigtalk-client 41234 "hello there"
```

By default the client sends the bits and exits without waiting for any
reply.

### Acknowledged mode

Both commands take `--ack`:

```
$ sigtalk-server --ack
$ sigtalk-client --ack 41234 "hello there"
```

With `--ack`, the server sends one `SIGUSR1` back to the sender after every
bit it receives. The client counts these replies. When the count covers the
whole message, including the NUL and the newline, it prints
`Message sent ✅` and exits. The client waits for as long as it takes, so
run a server with `--ack` before you use `--ack` on the client.

### Errors

If the PID is not a positive number, the client prints `Wrong PID` on
standard error and exits with status 1. If it gets the wrong number of
arguments, it prints a usage line on standard error and exits with
status 0 without sending anything. The server runs until it is interrupted
with Ctrl-C.

## Using it as a library

The wire format is in `sigtalk.protocol`:

```python
from sigtalk.protocol import Bit, ByteDecoder, encode_byte, encode_message

bits = list(encode_byte(ord("A")))   # least significant bit first
decoder = ByteDecoder()
decoded = [decoder.feed(bit) for bit in bits]
assert decoded[-1] == ord("A")       # a full byte comes back on the 8th bit
```

- `Bit.signal` gives the signal that carries a bit. `Bit.from_signal`
  goes the other way.
- `parse_pid(text)` raises `ValueError` unless the text gives a positive
  process id.
- `AckCounter.for_message(message)` counts acknowledgements. Its
  `record()` method returns `True` on the final one.

`sigtalk.client` provides these functions:

- `send_byte(pid, value, delay)` sends one byte.
- `send_message(pid, message, delay)` sends a message and its trailer
  without waiting for replies.
- `send_with_ack(pid, message, delay, stream)` sends a message and waits
  until every bit has been acknowledged.

The default pause after each bit is 50 microseconds.

`sigtalk.server.Server(output, acknowledge)` writes decoded bytes to a
binary stream, standard output by default. You can feed it signal numbers
directly through `Server.receive(signum, sender)`. That method returns the
completed byte, or `None` while a byte is still partial, which makes the
server easy to drive in tests. `Server.serve_forever()` is the loop that the
`sigtalk-server` command runs.

The package also comes with small helpers:

- `sigtalk.chars`: ASCII character classes and case conversion.
- `sigtalk.numbers`: `atoi` and `itoa` with 32-bit integer behaviour.
- `sigtalk.output`: writing characters, strings and numbers to a text
  stream.
- `sigtalk.memory`: operations on byte buffers.
- `sigtalk.strings`: string routines that stop at a NUL.
- `sigtalk.linkedlist`: a singly linked list.

## What it does not do

The protocol has no sender identification, no framing beyond the
trailer, and no retransmission.

- If two clients send to one server at the same time, their bits
  interleave and the output is garbled.
- If the operating system merges signals that arrive too close together,
  bits are lost. Choose a longer `delay` if that happens.

## Tests

```
pip install .[test]
pytest
```