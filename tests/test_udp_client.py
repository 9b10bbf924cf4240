import socket
import threading

import pytest

from netlab.udp_client import MAXLINE, request


@pytest.fixture
def greeter():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    received = []

    def serve():
        data, address = sock.recvfrom(4096)
        received.append(data)
        sock.sendto(b"Hello Client".ljust(MAXLINE, b"\0"), address)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    yield sock.getsockname()[1], received
    thread.join(5)
    sock.close()


def test_request_returns_reply(greeter):
    port, received = greeter
    assert request("127.0.0.1", port, "Hello Server") == "Hello Client"
    assert len(received[0]) == MAXLINE
    assert received[0].startswith(b"Hello Server\0")


def test_request_pads_with_zeros(greeter):
    port, received = greeter
    assert request("127.0.0.1", port, "hi") == "Hello Client"
    assert received[0][:2] == b"hi"
    assert received[0][2:] == bytes(MAXLINE - 2)


def test_request_truncates_long_message(greeter):
    port, received = greeter
    assert request("127.0.0.1", port, "z" * 1500) == "Hello Client"
    assert received[0] == b"z" * MAXLINE