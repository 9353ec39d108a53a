#!/usr/bin/env python3
# Justin, 2026-10-17
"""Reading, writing and removal of whole files.

Writers always create missing parent directories beforehand, so

    >>> write_text_file("./target/out/result.txt", "ok")

works on a clean checkout. Failures are raised as 'FsIOError', with
kind LOGICAL when a directory sits where a file is expected, and IO for
errors reported by the operating system.

Changelog:
    2026-10-17 Justin: Init
"""

import os
from typing import IO, Callable

from fsbox import directory
from fsbox.error import FsIOError
from fsbox.lib.typing import PathLike
from fsbox.logging import get_logger
from fsbox.path import as_path, from_path

__all__ = [
    "ensure_exists",
    "create_empty",
    "write_file",
    "append_file",
    "write_text_file",
    "append_text_file",
    "modify_file",
    "read_file",
    "read_text_file",
    "delete",
    "delete_ignore_error",
]

logger = get_logger(__name__)


def _check_not_directory(native, action: str):
    if os.path.isdir(native) and not os.path.islink(native):
        raise FsIOError.logical(
            f"Unable to {action} file: '{from_path(native)}' is a directory."
        )


def ensure_exists(path: PathLike):
    """Creates an empty file, and its parents, only if missing."""
    native = as_path(path)
    if os.path.exists(native):
        if os.path.isfile(native):
            return
        raise FsIOError.logical(
            f"Unable to create file: '{from_path(native)}' exists and is not a file."
        )
    create_empty(native)


def create_empty(path: PathLike):
    """Creates an empty file, truncating any existing content."""
    modify_file(path, lambda f: None, append=False)


def modify_file(
    path: PathLike,
    writer: Callable[[IO[bytes]], None],
    append: bool = False,
):
    """Opens the file in binary mode and passes the handle to 'writer'.

    The file is closed once 'writer' returns. Exceptions raised by 'writer'
    itself propagate unchanged, except OSError which is wrapped.

    Examples:
        >>> modify_file("out.bin", lambda f: f.write(b"\\x00\\x01"))
    """
    native = as_path(path)
    _check_not_directory(native, "write")
    directory.create_parent(native)

    mode = "ab" if append else "wb"
    try:
        with open(native, mode) as f:
            writer(f)
    except OSError as e:
        raise FsIOError.io(f"Unable to write to file: '{from_path(native)}'.", e) from e
    logger.debug("Wrote to '%s' (append=%s)", from_path(native), append)


def write_file(path: PathLike, data: bytes):
    """Writes bytes to the file, replacing existing content."""
    modify_file(path, lambda f: f.write(data), append=False)


def append_file(path: PathLike, data: bytes):
    modify_file(path, lambda f: f.write(data), append=True)


def write_text_file(path: PathLike, text: str, encoding: str = "utf8"):
    write_file(path, text.encode(encoding))


def append_text_file(path: PathLike, text: str, encoding: str = "utf8"):
    append_file(path, text.encode(encoding))


def read_file(path: PathLike) -> bytes:
    native = as_path(path)
    _check_not_directory(native, "read")
    try:
        with open(native, "rb") as f:
            return f.read()
    except OSError as e:
        raise FsIOError.io(f"Unable to read file: '{from_path(native)}'.", e) from e


def read_text_file(path: PathLike, encoding: str = "utf8") -> str:
    """Reads the whole file as text.

    Note:
        Decoding errors are not I/O failures and raise UnicodeDecodeError.
    """
    return read_file(path).decode(encoding)


def delete(path: PathLike):
    """Deletes the file, ignoring missing paths."""
    native = as_path(path)
    _check_not_directory(native, "delete")
    try:
        os.remove(native)
    except FileNotFoundError:
        return
    except OSError as e:
        raise FsIOError.io(f"Unable to delete file: '{from_path(native)}'.", e) from e
    logger.debug("Deleted '%s'", from_path(native))


def delete_ignore_error(path: PathLike) -> bool:
    """Deletes the file, returning whether it succeeded instead of raising."""
    try:
        delete(path)
    except FsIOError as e:
        logger.debug("%s", e)
        return False
    return True
