import io
import re
import sys

import pytest

from cfoundry import log
from cfoundry.log import Level

_LINE = re.compile(r"^\[[^\]]+\] (.*)\n$", re.DOTALL)


@pytest.fixture(autouse=True)
def _reset():
    log.set_console(True)
    log.set_stream(None)
    log.set_termattr(True)
    yield
    log.set_console(True)
    log.set_stream(None)
    log.set_termattr(True)


def test_stream_gets_timestamped_line():
    out = io.StringIO()
    log.set_console(False)
    log.set_stream(out)
    log.message(Level.INFO, "hello %s", "world")
    match = _LINE.match(out.getvalue())
    assert match is not None
    assert match.group(1) == "hello world"


def test_trailing_newline_kept_single():
    out = io.StringIO()
    log.set_console(False)
    log.set_stream(out)
    log.message(Level.ERROR, "done\n")
    assert out.getvalue().endswith("] done\n")


def test_console_output(capsys):
    log.message(Level.WARNING, "count=%d", 4)
    err = capsys.readouterr().err
    match = _LINE.match(err)
    assert match is not None
    assert match.group(1) == "count=4"


def test_console_off_writes_nothing(capsys):
    log.set_console(False)
    log.message(Level.INFO, "quiet")
    assert capsys.readouterr().err == ""


def test_stderr_not_accepted_as_stream(capsys):
    log.set_console(False)
    log.set_stream(sys.stderr)
    log.info("nothing")
    assert capsys.readouterr().err == ""


def test_helpers_write_to_stream():
    out = io.StringIO()
    log.set_console(False)
    log.set_stream(out)
    log.info("a")
    log.warning("b")
    log.error("c")
    lines = out.getvalue().splitlines()
    assert [line.rsplit(" ", 1)[1] for line in lines] == ["a", "b", "c"]


def test_none_format_is_ignored():
    out = io.StringIO()
    log.set_console(False)
    log.set_stream(out)
    log.message(Level.INFO, None)
    assert out.getvalue() == ""