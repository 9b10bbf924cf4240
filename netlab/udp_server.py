"""UDP server that replies to every datagram with a greeting."""

import socketserver
import sys

PORT = 5000
MAXLINE = 1000
BUFFER_SIZE = 100
GREETING = b"Hello Client"


class GreetingHandler(socketserver.BaseRequestHandler):
    """Print a received datagram and answer its sender with a greeting."""

    def handle(self):
        data, sock = self.request
        text = data[:BUFFER_SIZE].split(b"\0", 1)[0].decode(errors="replace")
        host, port = self.client_address[:2]
        print(f"Received from client [{host}:{port}]: {text}", flush=True)
        sock.sendto(GREETING.ljust(MAXLINE, b"\0"), self.client_address)


def make_server(host, port):
    """Return a bound UDP server that greets every client."""
    return socketserver.UDPServer((host, port), GreetingHandler)


def main(argv=None):
    """Serve on the fixed port until interrupted."""
    try:
        server = make_server("", PORT)
    except OSError as exc:
        print(f"bind failed: {exc}", file=sys.stderr)
        return 1
    with server:
        print(f"Server listening on port {PORT}...", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())