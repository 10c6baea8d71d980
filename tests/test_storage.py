import os
import stat
import sys

import pytest

from singleclickcopy import storage
from singleclickcopy.errors import StorageError


def test_iter_lines_strips_line_endings(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\r\nb\n\nc")
    assert list(storage.iter_lines(path)) == ["a", "b", "", "c"]


def test_save_lines_atomic_leaves_no_temp_files(tmp_path):
    path = tmp_path / "out.txt"
    assert storage.save_lines_atomic(["x", "y"], path) == 2
    assert sorted(os.listdir(tmp_path)) == ["out.txt"]
    assert path.read_bytes() == b"x\ny\n"


def test_save_lines_atomic_cleans_up_on_failure(tmp_path, monkeypatch):
    path = tmp_path / "out.txt"
    path.write_text("previous\n", encoding="utf-8")

    def broken_replace(src, dst):
        raise PermissionError("locked")

    monkeypatch.setattr(storage.os, "replace", broken_replace)
    with pytest.raises(StorageError):
        storage.save_lines_atomic(["new"], path)
    assert sorted(os.listdir(tmp_path)) == ["out.txt"]
    assert path.read_text(encoding="utf-8") == "previous\n"



def test_iter_lines_drops_byte_order_mark(tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"\xef\xbb\xbfa\nb\n")
    assert list(storage.iter_lines(path)) == ["a", "b"]


def test_save_lines_atomic_unencodable_line(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("previous\n", encoding="utf-8")
    with pytest.raises(StorageError) as excinfo:
        storage.save_lines_atomic(["ok", "bad\ud800"], path)
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
    assert excinfo.value.path == path
    assert sorted(os.listdir(tmp_path)) == ["out.txt"]
    assert path.read_text(encoding="utf-8") == "previous\n"


def test_save_lines_atomic_write_interrupted(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("previous\n", encoding="utf-8")

    def lines():
        yield "first"
        raise OSError(28, "No space left on device")

    with pytest.raises(StorageError):
        storage.save_lines_atomic(lines(), path)
    assert sorted(os.listdir(tmp_path)) == ["out.txt"]
    assert path.read_text(encoding="utf-8") == "previous\n"


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX file modes")
def test_save_lines_atomic_keeps_file_mode(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("previous\n", encoding="utf-8")
    os.chmod(path, 0o640)
    storage.save_lines_atomic(["new"], path)
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o640


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX file modes")
def test_save_lines_atomic_new_file_mode(tmp_path):
    path = tmp_path / "fresh.txt"
    storage.save_lines_atomic(["new"], path)
    assert stat.S_IMODE(os.stat(path).st_mode) == storage.NEW_FILE_MODE

def test_save_lines_accepts_str_path(tmp_path):
    path = str(tmp_path / "out.txt")
    storage.save_lines_atomic(["only"], path)
    with open(path, encoding="utf-8") as f:
        assert f.read() == "only\n"


def test_remove_file(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_text("x\n", encoding="utf-8")
    assert storage.remove_file(path) is True
    assert not path.exists()
    assert storage.remove_file(path) is False


def test_remove_file_wraps_os_errors(tmp_path):
    # A directory cannot be removed with os.remove
    folder = tmp_path / "folder"
    folder.mkdir()
    with pytest.raises(StorageError):
        storage.remove_file(folder)
