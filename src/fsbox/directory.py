#!/usr/bin/env python3
# Justin, 2026-10-17
"""Directory creation and removal.

All functions are idempotent: creating an existing directory or deleting
a missing one is not an error.
"""

import os
import shutil

from fsbox.error import FsIOError
from fsbox.lib.typing import PathLike
from fsbox.logging import get_logger
from fsbox.path import as_path, from_path, get_parent_directory

__all__ = ["create", "create_parent", "delete"]

logger = get_logger(__name__)


def create(path: PathLike):
    """Creates the directory, including any missing parents.

    Raises:
        FsIOError: Path exists but is not a directory (LOGICAL), or
            the directory could not be created (IO).
    """
    native = as_path(path)
    if os.path.exists(native):
        if os.path.isdir(native):
            return
        raise FsIOError.logical(
            f"Unable to create directory: '{from_path(native)}' exists and is not a directory."
        )

    try:
        os.makedirs(native, exist_ok=True)
    except OSError as e:
        raise FsIOError.io(
            f"Unable to create directory: '{from_path(native)}'.", e
        ) from e
    logger.debug("Created directory '%s'", from_path(native))


def create_parent(path: PathLike):
    """Creates the parent directory of the path, if it has one.

    Examples:
        >>> create_parent("./target/logs/run.log")  # creates './target/logs'
    """
    parent = get_parent_directory(path)
    if parent is not None:
        create(parent)


def delete(path: PathLike):
    """Deletes the directory and all of its contents.

    Missing paths are ignored. A non-directory path is removed as a file.
    """
    native = as_path(path)
    try:
        if os.path.isdir(native) and not os.path.islink(native):
            shutil.rmtree(native)
        elif os.path.lexists(native):
            os.remove(native)
        else:
            return
    except OSError as e:
        raise FsIOError.io(
            f"Unable to delete directory: '{from_path(native)}'.", e
        ) from e
    logger.debug("Deleted '%s'", from_path(native))
