import socket

import pytest

from netlab.sendudp import MAX_SIZE, main, send_packet


@pytest.fixture
def receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


def test_sends_zero_filled_packet(receiver):
    port = receiver.getsockname()[1]
    assert send_packet("127.0.0.1", 10, port) == 10
    data, _ = receiver.recvfrom(MAX_SIZE + 1)
    assert data == bytes(10)


def test_sends_maximum_size(receiver):
    port = receiver.getsockname()[1]
    assert send_packet("127.0.0.1", MAX_SIZE, port) == MAX_SIZE
    data, _ = receiver.recvfrom(MAX_SIZE + 1)
    assert len(data) == MAX_SIZE


def test_sends_empty_packet(receiver):
    port = receiver.getsockname()[1]
    assert send_packet("localhost", 0, port) == 0
    data, _ = receiver.recvfrom(MAX_SIZE + 1)
    assert data == b""


@pytest.mark.parametrize("size", [-1, MAX_SIZE + 1])
def test_rejects_bad_size(size):
    with pytest.raises(ValueError, match="Packet size"):
        send_packet("127.0.0.1", size, 9)


def test_main_usage(capsys):
    assert main(["127.0.0.1"]) == 1
    assert "<remote-host> <pkt-size>" in capsys.readouterr().err


@pytest.mark.parametrize("size", ["5000", "-3", "abc"])
def test_main_bad_size(size, capsys):
    assert main(["127.0.0.1", size]) == 2
    assert "Packet size has to be >= 0 and <= 4096" in capsys.readouterr().err