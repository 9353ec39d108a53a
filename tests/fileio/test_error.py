import pytest

from fsbox.error import ErrorKind, FsIOError


def test_error_io():
    cause = FileNotFoundError(2, "No such file or directory")
    error = FsIOError.io("Unable to canonicalize path.", cause)
    assert error.kind is ErrorKind.IO
    assert error.is_io
    assert error.cause is cause
    assert str(error).startswith("Unable to canonicalize path. (")


def test_error_io_without_cause():
    error = FsIOError.io("Unable to read.")
    assert error.cause is None
    assert str(error) == "Unable to read."


def test_error_logical():
    error = FsIOError.logical("Is a directory.")
    assert error.kind is ErrorKind.LOGICAL
    assert not error.is_io
    assert error.cause is None
    assert str(error) == "Is a directory."
    assert "LOGICAL" in repr(error)


def test_error_logical_rejects_cause():
    with pytest.raises(ValueError):
        FsIOError(ErrorKind.LOGICAL, "Is a directory.", OSError())
