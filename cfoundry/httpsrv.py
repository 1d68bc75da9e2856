"""A minimal HTTP/1.0 server that dispatches GET requests to handlers."""

from __future__ import annotations

import socket
import threading
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Dict, List, Optional

from cfoundry.hexcodec import from_byte

STATUS_MESSAGES = {
    200: "OK",
    400: "Bad Request",
    403: "Forbidden",
    404: "Not Found",
    408: "Request Timed Out",
    500: "Internal Server Error",
    501: "Not Implemented",
    503: "Server Busy",
}

DEFAULT_MIME = "binary/octet-stream"


@dataclass
class HttpParam:
    """The values given for one query parameter, in order."""

    values: List[str] = field(default_factory=list)

    @property
    def value(self) -> Optional[str]:
        """The value when the parameter was given exactly once, else None."""
        return self.values[0] if len(self.values) == 1 else None


Params = Dict[str, HttpParam]
Handler = Callable[[BinaryIO, str, Optional[Params]], None]


def urldecode(text: str) -> str:
    """Decode ``+`` as space and ``%XX`` escapes."""
    out = bytearray()
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "+":
            out += b" "
        elif ch == "%":
            if len(text) - i < 3:
                raise ValueError("truncated escape in URL")
            out.append(from_byte(text[i + 1:i + 3]))
            i += 2
        else:
            out += ch.encode("utf-8")
        i += 1
    return out.decode("utf-8", errors="replace")


def parse_query(query: str) -> Params:
    """Parse ``key=value&...`` into parameters.

    A pair without a value after ``=`` at the very end is ignored; a key
    given more than once collects all its values.
    """
    params: Params = {}
    key_start = 0
    value_start = 0
    key = ""
    inkey = True
    last = len(query) - 1
    for i, ch in enumerate(query):
        if inkey and ch == "=":
            inkey = False
            key = urldecode(query[key_start:i])
            value_start = i + 1
        elif not inkey and (ch == "&" or i == last):
            inkey = True
            end = i if ch == "&" else i + 1
            value = urldecode(query[value_start:end])
            if key:
                params.setdefault(key, HttpParam()).values.append(value)
            key_start = i + 1
    return params


def param_get(params: Optional[Params], key: str) -> Optional[HttpParam]:
    """Look up a parameter; None when there are no parameters or no such key."""
    if not params:
        return None
    return params.get(key)


def _sendline(stream: BinaryIO, text: str) -> None:
    stream.write(text.encode("utf-8") + b"\r\n")


def send_status(stream: BinaryIO, status: int, errmsg: bool = True) -> None:
    """Write the status line; for errors optionally a small HTML body too."""
    message = STATUS_MESSAGES.get(status)
    if message is None:
        raise ValueError(f"unsupported status code: {status}")
    _sendline(stream, f"HTTP/1.0 {status} {message}")
    if status != 200 and errmsg:
        _sendline(stream, "")
        _sendline(stream, f"<html><h1>{status} - {message}</h1></html>")


def send_headers(
    stream: BinaryIO, mime_type: Optional[str] = None, length: int = -1
) -> None:
    """Write the response headers and the blank line that ends them."""
    _sendline(stream, "Connection: close")
    _sendline(stream, "Server: CFL httpsrv")
    _sendline(stream, f"Content-Type: {mime_type or DEFAULT_MIME}")
    if length >= 0:
        _sendline(stream, f"Content-Length: {length}")
    _sendline(stream, "")


class HttpServer:
    """Listens on a TCP port and serves one connection per :meth:`accept`."""

    def __init__(self, port: int, max_workers: int = 10, timeout: Optional[float] = None) -> None:
        self.max_workers = max_workers
        self.timeout = timeout
        self._socket = socket.create_server(("", port))
        self._handlers: Dict[str, Handler] = {}
        self._default: Optional[Handler] = None
        self._active = 0
        self._lock = threading.Lock()

    @property
    def port(self) -> int:
        """The port the server listens on."""
        return self._socket.getsockname()[1]

    def close(self) -> None:
        """Stop listening."""
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._socket.close()

    def __enter__(self) -> "HttpServer":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def add_handler(self, uri: str, handler: Handler) -> None:
        """Serve ``uri`` with ``handler(stream, uri, params)``."""
        if not uri:
            raise ValueError("uri must not be empty")
        self._handlers[uri] = handler

    def remove_handler(self, uri: str) -> None:
        """Stop serving ``uri`` with its own handler."""
        self._handlers.pop(uri, None)

    def set_default_handler(self, handler: Optional[Handler]) -> None:
        """Serve URIs that have no handler of their own."""
        self._default = handler

    def accept(self) -> threading.Thread:
        """Accept one connection and serve it on a new thread, which is returned."""
        conn, _addr = self._socket.accept()
        conn.setblocking(True)
        if self.timeout is not None and self.timeout > 0:
            conn.settimeout(self.timeout)
        worker = threading.Thread(target=self._serve, args=(conn,), daemon=True)
        worker.start()
        return worker

    def _read_request(self, stream: BinaryIO) -> Optional[List[str]]:
        request = None
        while True:
            raw = stream.readline()
            if not raw:
                break
            line = raw.decode("latin-1").rstrip("\r\n")
            if not line:
                break
            if request is None:
                request = [part for part in line.split(" ") if part]
        return request

    def _serve(self, conn: socket.socket) -> None:
        with conn, conn.makefile("rwb") as stream:
            try:
                self._respond(stream)
                stream.flush()
            except OSError:
                pass
            finally:
                try:
                    conn.shutdown(socket.SHUT_RDWR)
                except OSError:
                    pass

    def _respond(self, stream: BinaryIO) -> None:
        request = self._read_request(stream)
        if request is None or len(request) != 3:
            send_status(stream, 400, True)
            return
        verb, target, _proto = request

        with self._lock:
            busy = self._active >= self.max_workers
            if not busy:
                self._active += 1
        if busy:
            send_status(stream, 503, True)
            return
        try:
            self._dispatch(stream, verb, target)
        finally:
            with self._lock:
                self._active -= 1

    def _dispatch(self, stream: BinaryIO, verb: str, target: str) -> None:
        if verb != "GET":
            send_status(stream, 501, True)
            return
        path, sep, query = target.partition("?")
        try:
            uri = urldecode(path)
        except ValueError:
            send_status(stream, 400, True)
            return
        handler = self._handlers.get(uri) or self._default
        if handler is None:
            send_status(stream, 404, True)
            return
        params: Optional[Params] = None
        if sep:
            try:
                params = parse_query(query)
            except ValueError:
                send_status(stream, 400, True)
                return
        handler(stream, uri, params)