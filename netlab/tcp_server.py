"""TCP server that acknowledges each client's message."""

import socketserver
import sys

ACK = b"Thanks, I got your message"
BUFFER_SIZE = 256


class AckHandler(socketserver.BaseRequestHandler):
    """Read one message from a client, print it and send an acknowledgement."""

    def handle(self):
        print("[+] New client connected", flush=True)
        data = self.request.recv(BUFFER_SIZE)
        text = data.split(b"\0", 1)[0].decode(errors="replace")
        print(f"[+] Client sent: {text}", flush=True)
        self.request.sendall(ACK)


class _AckServer(socketserver.ThreadingTCPServer):
    daemon_threads = True


def make_server(host, port):
    """Return a bound, listening server that handles each client concurrently."""
    return _AckServer((host, port), AckHandler)


def main(argv=None):
    """Prompt for a port and serve clients until interrupted."""
    print("Server requires a port number to operate.")
    raw_port = input("Please provide a port number: ").strip()
    try:
        port = int(raw_port)
    except ValueError:
        print("ERROR, invalid port number", file=sys.stderr)
        return 1
    try:
        server = make_server("", port)
    except OSError as exc:
        print(f"ERROR on binding: {exc}", file=sys.stderr)
        return 1
    with server:
        print(f"[+] Server started on port {port}. Waiting for clients...", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())