"""UDP client that greets a server and prints its reply."""

import socket
import sys

HOST = "127.0.0.1"
PORT = 5000
MAXLINE = 1000
BUFFER_SIZE = 100
MESSAGE = "Hello Server"


def request(host=HOST, port=PORT, message=MESSAGE):
    """Send ``message`` as a fixed-size datagram and return the reply text."""
    payload = message.encode()[:MAXLINE].ljust(MAXLINE, b"\0")
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect((host, port))
        sock.send(payload)
        data = sock.recv(BUFFER_SIZE)
    return data.split(b"\0", 1)[0].decode(errors="replace")


def main(argv=None):
    """Greet the local server and print its reply."""
    try:
        reply = request(HOST, PORT, MESSAGE)
    except OSError:
        print("\n Error : Connect Failed \n")
        return 0
    print(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())