import errno
import os
import threading

import pytest

from cfoundry import error
from cfoundry.error import ErrorCode


@pytest.fixture(autouse=True)
def _reset():
    error.init("prog")
    error.set_errno(ErrorCode.OK)
    yield
    error.init("<program>")
    error.set_errno(ErrorCode.OK)


def test_error_string_for_code():
    error.set_errno(ErrorCode.TIMED_OUT)
    assert error.error_string() == "connection or I/O timed out"


def test_error_string_ok():
    assert error.error_string() == "OK"


@pytest.mark.parametrize("code", [-1, len(ErrorCode), 1000])
def test_error_string_out_of_range(code):
    error.set_errno(code)
    assert error.error_string() is None


def test_errno_round_trip():
    error.set_errno(ErrorCode.BIND)
    assert error.get_errno() == ErrorCode.BIND


def test_errno_is_per_thread():
    error.set_errno(ErrorCode.FORK)
    seen = []
    thread = threading.Thread(target=lambda: seen.append(error.get_errno()))
    thread.start()
    thread.join()
    assert seen == [ErrorCode.OK]
    assert error.get_errno() == ErrorCode.FORK


def test_printf(capsys):
    error.printf("bad value %d\n", 3)
    assert capsys.readouterr().err == "prog: bad value 3\n"


def test_usage(capsys):
    error.usage("[-v] file")
    assert capsys.readouterr().err == "prog: Usage: prog [-v] file\n"


def test_init_ignores_empty_name(capsys):
    error.init(None)
    error.init("")
    error.printf("x")
    assert capsys.readouterr().err == "prog: x"


def test_syserr_reports_handled_os_error(capsys, tmp_path):
    try:
        open(tmp_path / "missing")
    except FileNotFoundError:
        error.syserr()
    assert capsys.readouterr().err == f"prog: {os.strerror(errno.ENOENT)}\n"