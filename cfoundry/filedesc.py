"""Passing open file descriptors over Unix-domain sockets."""

from __future__ import annotations

import socket


def send_fd(sock: socket.socket, fd: int) -> None:
    """Send descriptor ``fd`` to the peer of ``sock`` with a one-byte message."""
    sent = socket.send_fds(sock, [b"x"], [fd])
    if sent != 1:
        raise OSError("descriptor message was not sent")


def recv_fd(sock: socket.socket) -> int:
    """Receive a descriptor sent with :func:`send_fd` and return it."""
    msg, fds, _flags, _addr = socket.recv_fds(sock, 1, 1)
    if len(msg) != 1:
        for fd in fds:
            socket.close(fd)
        raise OSError("corrupt or missing descriptor message")
    if len(fds) != 1:
        raise OSError("no descriptor was passed")
    return fds[0]