import os

import pytest

from fsbox import file
from fsbox.error import ErrorKind, FsIOError


def test_write_read_text(tmp_path):
    path = tmp_path / "nested" / "dir" / "out.txt"
    file.write_text_file(path, "hello")
    assert path.is_file()
    assert file.read_text_file(path) == "hello"

    file.write_text_file(path, "replaced")
    assert file.read_text_file(path) == "replaced"


def test_append_text(tmp_path):
    path = tmp_path / "log.txt"
    file.append_text_file(path, "a\n")  # creates the file
    file.append_text_file(path, "b\n")
    assert file.read_text_file(path) == "a\nb\n"


def test_write_read_bytes(tmp_path):
    path = tmp_path / "out.bin"
    file.write_file(path, b"\x00\x01")
    file.append_file(path, b"\x02")
    assert file.read_file(path) == b"\x00\x01\x02"


def test_text_encoding(tmp_path):
    path = tmp_path / "out.txt"
    file.write_text_file(path, "データ", encoding="utf-16")
    assert file.read_file(path) == "データ".encode("utf-16")
    assert file.read_text_file(path, encoding="utf-16") == "データ"


def test_modify_file(tmp_path):
    path = tmp_path / "out.txt"

    def writer(f):
        f.write(b"first")
        f.write(b"second")

    file.modify_file(str(path), writer)
    file.modify_file(path, lambda f: f.write(b"!"), append=True)
    assert path.read_bytes() == b"firstsecond!"


def test_ensure_exists(tmp_path):
    path = tmp_path / "a" / "b.txt"
    file.ensure_exists(path)
    assert path.is_file()
    assert path.read_bytes() == b""

    # Existing content is untouched
    path.write_bytes(b"data")
    file.ensure_exists(path)
    assert path.read_bytes() == b"data"


def test_ensure_exists_directory(tmp_path):
    with pytest.raises(FsIOError) as excinfo:
        file.ensure_exists(tmp_path)
    assert excinfo.value.kind is ErrorKind.LOGICAL


def test_create_empty_truncates(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("data")
    file.create_empty(path)
    assert path.read_bytes() == b""


def test_read_missing(tmp_path):
    with pytest.raises(FsIOError) as excinfo:
        file.read_text_file(tmp_path / "missing.txt")
    assert excinfo.value.kind is ErrorKind.IO
    assert isinstance(excinfo.value.cause, FileNotFoundError)


def test_read_write_directory(tmp_path):
    with pytest.raises(FsIOError) as excinfo:
        file.read_file(tmp_path)
    assert excinfo.value.kind is ErrorKind.LOGICAL
    with pytest.raises(FsIOError) as excinfo:
        file.write_file(tmp_path, b"")
    assert excinfo.value.kind is ErrorKind.LOGICAL


def test_delete(tmp_path):
    path = tmp_path / "out.txt"
    path.touch()
    file.delete(path)
    assert not path.exists()
    file.delete(path)  # missing is fine


def test_delete_directory(tmp_path):
    with pytest.raises(FsIOError):
        file.delete(tmp_path)
    assert tmp_path.is_dir()


def test_delete_ignore_error(tmp_path):
    path = tmp_path / "out.txt"
    path.touch()
    assert file.delete_ignore_error(path)
    assert not path.exists()
    assert file.delete_ignore_error(path)
    assert not file.delete_ignore_error(tmp_path)


def test_writer_exception_propagates(tmp_path):
    def writer(f):
        raise ValueError("bad data")

    with pytest.raises(ValueError):
        file.modify_file(tmp_path / "out.txt", writer)


def test_delete_symlink_to_directory(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link"
    try:
        os.symlink(target, link, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")
    file.delete(link)
    assert not os.path.lexists(link)
    assert target.is_dir()
