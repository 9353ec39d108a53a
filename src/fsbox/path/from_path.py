#!/usr/bin/env python3
# Justin, 2026-10-17
"""Construction of display strings from native paths."""

import functools
import os

from fsbox.lib.typing import PathLike
from fsbox.path.as_path import as_path

__all__ = ["from_path"]


@functools.singledispatch
def from_path(path: PathLike) -> str:
    """Returns the display string of a native path.

    Byte paths are decoded with the filesystem encoding. Undecodable bytes
    are mapped to lone surrogates ('surrogateescape'), which survives the
    round-trip back into bytes but may not be printable.
    """
    return from_path(as_path(path))


@from_path.register(str)
def _(path):
    return path


@from_path.register(bytes)
def _(path):
    return os.fsdecode(path)
