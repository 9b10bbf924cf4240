# netlab

A handful of small networking exercises as Python tools: CRC codeword
generation and error detection, a TCP message/acknowledgement client and
server, a UDP greeting client and server, and a sender for a single UDP
packet of a chosen size. Only the standard library is used.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### CRC

```
netlab-crc [-g GENERATOR]
```

This asks for a string of binary digits, prints the data padded with zeros,
the checksum and the final codeword (data followed by checksum). The
generator polynomial defaults to `10001000000100001` (CRC-CCITT) and can be
changed with `-g`/`--generator`. It then asks whether to test error
detection: answering `0` lets you flip one bit at a chosen position
(counting from 1; invalid positions are asked again), and the program
reports whether an error is detected.

From Python:

```python
from netlab import crc

codeword = crc.encode("1011")                  # data + 16 check bits
crc.checksum("1011")                           # the 16 check bits
crc.has_error(codeword)                        # False
crc.has_error(crc.flip_bit(codeword, 2))       # True
```

Each function also takes a `generator` argument. Invalid digits, a
generator that does not start with `1`, or an out-of-range position raise
`ValueError`.

### TCP

```
netlab-tcp-server
netlab-tcp-client
```

The server asks for a port, listens on all interfaces and handles each
client in its own thread until interrupted with Ctrl-C. For each client it
prints the message it received and replies `Thanks, I got your message`.

The client asks for a host name, a port and a message, sends the message in
a 256-byte frame padded with NUL bytes (longer messages are cut to 255
bytes), and prints the acknowledgement.

From Python, `netlab.tcp_client.exchange(host, port, message)` sends one
message and returns the reply. `netlab.tcp_server.make_server(host, port)`
returns the listening server, which handles each client with `AckHandler`.

### UDP

```
netlab-udp-server
netlab-udp-client
```

The server listens on port 5000 until interrupted. It prints each datagram
it receives together with the sender's address and answers with
`Hello Client`, padded with NUL bytes to 1000 bytes. The client sends
`Hello Server` (padded the same way) to 127.0.0.1:5000 and prints the reply.

From Python, `netlab.udp_client.request(host, port, message)` sends one
datagram and returns the reply text. `netlab.udp_server.make_server(host, port)`
returns the bound server, whose handler is `GreetingHandler`.

### Single UDP packet

```
netlab-sendudp <remote-host> <pkt-size>
```

This sends one UDP datagram of `pkt-size` zero bytes, between 0 and 4096, to
port 2000 of the remote host. It exits with status 1 on wrong usage, 2 on a
bad size and 3 if sending fails. From Python, use
`netlab.sendudp.send_packet(host, size, port)`, which returns the number of
bytes sent and raises `ValueError` for a size out of range.