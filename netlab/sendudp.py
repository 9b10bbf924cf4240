"""Send a single UDP datagram of a given size to a host."""

import os
import socket
import sys

PORT = 2000
MAX_SIZE = 4096


def send_packet(host, size, port=PORT):
    """Send ``size`` zero bytes to ``host``:``port`` and return the count sent."""
    if not 0 <= size <= MAX_SIZE:
        raise ValueError(f"Packet size has to be >= 0 and <= {MAX_SIZE}")
    address = socket.gethostbyname(host)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sent = sock.sendto(bytes(size), (address, port))
    if sent != size:
        raise OSError(f"sendto: sent {sent} of {size} bytes")
    return sent


def main(argv=None):
    """Command entry point: ``<remote-host> <pkt-size>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "sendudp"
    if len(args) != 2:
        print(f"{prog} <remote-host> <pkt-size>", file=sys.stderr)
        return 1
    host, raw_size = args
    try:
        size = int(raw_size)
    except ValueError:
        size = -1
    if not 0 <= size <= MAX_SIZE:
        print(f"Packet size has to be >= 0 and <= {MAX_SIZE}", file=sys.stderr)
        return 2
    print("socket successful", file=sys.stderr)
    try:
        send_packet(host, size)
    except OSError as exc:
        print(f"sendto: {exc}", file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())