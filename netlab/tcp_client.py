"""TCP client that sends one message and prints the server's acknowledgement."""

import socket
import sys

BUFFER_SIZE = 256


def _connect(host, port):
    return socket.create_connection((host, port))


def _send_message(sock, message):
    payload = message.encode()[: BUFFER_SIZE - 1].ljust(BUFFER_SIZE, b"\0")
    sock.sendall(payload)


def _read_ack(sock):
    data = sock.recv(BUFFER_SIZE)
    return data.split(b"\0", 1)[0].decode(errors="replace")


def exchange(host, port, message):
    """Send ``message`` in a fixed-size frame and return the server's reply."""
    with _connect(host, port) as sock:
        _send_message(sock, message)
        return _read_ack(sock)


def main(argv=None):
    """Prompt for server details and a message, then exchange it."""
    print("\nClient requires the following to operate")
    hostname = input("Please provide server hostname: ").strip()
    portnumber = input("\nPlease provide server port num: ").strip()
    try:
        port = int(portnumber)
    except ValueError:
        print("ERROR, invalid port number", file=sys.stderr)
        return 0

    try:
        sock = _connect(hostname, port)
    except socket.gaierror:
        print("ERROR, no such host", file=sys.stderr)
        return 0
    except OSError as exc:
        print(f"ERROR connecting: {exc}", file=sys.stderr)
        return 0

    with sock:
        print(f"\nConnected to server '{hostname}' at port num '{portnumber}'")
        print("Ready for communication ...")
        message = input("\nPlease enter the message: ") + "\n"

        print("\nWriting message to socket ...")
        try:
            _send_message(sock, message)
        except OSError as exc:
            print(f"ERROR writing to socket: {exc}", file=sys.stderr)
            return 0
        print("Message sent/written to socket")
        print("Client listening for server ACK ...")

        try:
            ack = _read_ack(sock)
        except OSError as exc:
            print(f"ERROR reading from socket: {exc}", file=sys.stderr)
            return 0
        print("\nRead successful for server ACK")
        print(f"Server sent this ACK : {ack}")
        print("Closing the socket ...\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())