#!/usr/bin/env python3
# Justin, 2026-10-17
"""Error type raised by the fsbox library.

Only two kinds of failures are distinguished: I/O failures, which
optionally wrap the OSError reported by the operating system, and logical
failures which do not involve the OS at all, e.g. a directory found where
a file was expected.

Examples:
    >>> try:
    ...     fsbox.path.canonicalize_as_string("./does/not/exist")
    ... except FsIOError as e:
    ...     e.kind, type(e.cause)
    (<ErrorKind.IO: 1>, <class 'FileNotFoundError'>)
"""

import enum
from typing import Optional

__all__ = ["ErrorKind", "FsIOError"]


class ErrorKind(enum.Enum):
    IO = enum.auto()
    LOGICAL = enum.auto()


class FsIOError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[OSError] = None,
    ):
        if kind is ErrorKind.LOGICAL and cause is not None:
            raise ValueError("Logical errors do not carry an OS error")
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    @classmethod
    def io(cls, message: str, cause: Optional[OSError] = None):
        return cls(ErrorKind.IO, message, cause)

    @classmethod
    def logical(cls, message: str):
        return cls(ErrorKind.LOGICAL, message)

    @property
    def is_io(self) -> bool:
        return self.kind is ErrorKind.IO

    def __str__(self):
        if self.cause is None:
            return self.message
        return f"{self.message} ({self.cause})"

    def __repr__(self):
        return f"FsIOError({self.kind.name}, {self.message!r}, cause={self.cause!r})"
