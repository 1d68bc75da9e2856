import os

import pytest

from cfoundry import files
from cfoundry.files import DirList, LockType, ReadFlags


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a").write_text("alpha")
    (tmp_path / ".hidden").write_text("h")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "inner").write_text("x")
    (tmp_path / ".hdir").mkdir()
    os.symlink(tmp_path / "a", tmp_path / "link")
    return tmp_path


def test_readdir_default_includes_dot_entries(tree):
    result = files.readdir(tree, ReadFlags.SORT)
    assert result.files == sorted([".", "..", ".hdir", ".hidden", "a", "sub"])
    assert result.dirs == []


def test_readdir_skips_links(tree):
    result = files.readdir(tree)
    assert "link" not in result.files


def test_readdir_separate(tree):
    flags = ReadFlags.SEPARATE | ReadFlags.SKIPDOT | ReadFlags.SKIP2DOT | ReadFlags.SORT
    result = files.readdir(tree, flags)
    assert result == DirList(files=[".hidden", "a"], dirs=[".hdir", "sub"])


def test_readdir_skip_hidden_and_slash(tree):
    flags = (
        ReadFlags.SKIPDOT
        | ReadFlags.SKIP2DOT
        | ReadFlags.SKIPHIDDEN
        | ReadFlags.ADDSLASH
        | ReadFlags.SORT
    )
    assert files.readdir(tree, flags).files == ["a", "sub/"]


def test_readdir_skip_files_and_dirs(tree):
    base = ReadFlags.SKIPDOT | ReadFlags.SKIP2DOT | ReadFlags.SORT
    assert files.readdir(tree, base | ReadFlags.SKIPFILES).files == [".hdir", "sub"]
    assert files.readdir(tree, base | ReadFlags.SKIPDIRS).files == [".hidden", "a"]


def test_readdir_missing(tmp_path):
    with pytest.raises(OSError):
        files.readdir(tmp_path / "nope")


def test_traverse_visits_everything(tree):
    seen = {}

    def examine(path, st, depth):
        seen[os.path.relpath(path, tree)] = depth
        return True

    assert files.traverse(tree, examine) is True
    assert seen["sub"] == 0
    assert seen[os.path.join("sub", "inner")] == 1
    assert seen["a"] == 0
    assert "link" not in seen


def test_traverse_stops(tree):
    calls = []

    def examine(path, st, depth):
        calls.append(path)
        return False

    assert files.traverse(tree, examine) is False
    assert len(calls) == 1


def test_traverse_empty_path():
    with pytest.raises(ValueError):
        files.traverse("", lambda *a: True)


def test_getcwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = files.getcwd()
    assert os.path.realpath(os.fspath(cwd)) == os.path.realpath(tmp_path)


def test_type_predicates(tree):
    fifo = tree / "fifo"
    os.mkfifo(fifo)
    assert files.isfile(tree / "a")
    assert not files.isfile(tree / "sub")
    assert files.isdir(tree / "sub")
    assert not files.isdir(tree / "a")
    assert files.issymlink(tree / "link")
    assert not files.issymlink(tree / "a")
    assert files.ispipe(fifo)
    assert not files.ispipe(tree / "a")
    assert not files.isfile(tree / "missing")


def test_mkdirs_creates_parents_only(tmp_path):
    target = f"{tmp_path}/x/y/file"
    files.mkdirs(target)
    assert files.isdir(tmp_path / "x" / "y")
    assert not os.path.exists(tmp_path / "x" / "y" / "file")


def test_mkdirs_trailing_slash(tmp_path):
    files.mkdirs(f"{tmp_path}/p/q/")
    assert files.isdir(tmp_path / "p" / "q")


def test_mkdirs_failure(tmp_path):
    (tmp_path / "plain").write_text("")
    with pytest.raises(OSError):
        files.mkdirs(f"{tmp_path}/plain/below/")


def test_lock_cycle(tmp_path):
    path = tmp_path / "lockme"
    path.write_text("data")
    with open(path, "r+") as fp:
        files.lock(fp, LockType.WRITE)
        files.unlock(fp, LockType.WRITE)
        assert files.trylock(fp, LockType.READ) is True
        files.unlock(fp, LockType.READ)


def test_load(tmp_path):
    path = tmp_path / "blob"
    path.write_bytes(b"\x00abc\xff")
    assert files.load(path) == b"\x00abc\xff"


def test_load_missing(tmp_path):
    with pytest.raises(OSError):
        files.load(tmp_path / "missing")