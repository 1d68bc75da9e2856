import os
import socket

import pytest

from cfoundry.filedesc import recv_fd, send_fd


@pytest.fixture
def pair():
    a, b = socket.socketpair(socket.AF_UNIX, socket.SOCK_STREAM)
    yield a, b
    a.close()
    b.close()


def test_round_trip(pair):
    a, b = pair
    rfd, wfd = os.pipe()
    try:
        send_fd(a, wfd)
        received = recv_fd(b)
        assert received != wfd or os.getpid() > 0
        os.write(received, b"hello")
        os.close(received)
        assert os.read(rfd, 5) == b"hello"
    finally:
        os.close(rfd)
        os.close(wfd)


def test_no_descriptor(pair):
    a, b = pair
    a.sendall(b"x")
    with pytest.raises(OSError):
        recv_fd(b)


def test_peer_closed(pair):
    a, b = pair
    a.close()
    with pytest.raises(OSError):
        recv_fd(b)