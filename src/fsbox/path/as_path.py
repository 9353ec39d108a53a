#!/usr/bin/env python3
# Justin, 2026-10-17
"""Conversion of path-like values into the native path representation.

The native representation is whatever 'os.fspath' yields, i.e. 'str' or
'bytes'. The value is passed through untouched: no normalization of
separators or '.' segments is performed, so that

    >>> from_path(as_path("./src//mod.rs"))
    './src//mod.rs'

holds. Other types can opt in by registering an implementation:

    >>> @as_path.register
    ... def _(path: Record):
    ...     return path.location
"""

import functools
import os

from fsbox.lib.typing import NativePath, PathLike

__all__ = ["as_path"]


@functools.singledispatch
def as_path(path: PathLike) -> NativePath:
    raise TypeError(
        f"Expected str, bytes or os.PathLike, not '{type(path).__name__}'"
    )


@as_path.register(str)
@as_path.register(bytes)
def _(path):
    return path


@as_path.register(os.PathLike)
def _(path):
    return os.fspath(path)
