#!/usr/bin/env python3
# Justin, 2026-10-17
"""Path utility functions.

Every function accepts either a string or a path object, e.g.

    >>> get_basename("./src/path/mod.rs")
    'mod.rs'
    >>> get_parent_directory(pathlib.Path("src/path/mod.rs"))
    'src/path'

'get_basename' and 'get_parent_directory' are purely structural and never
touch the filesystem. They split paths the way the host OS does (honoring
'os.altsep' and drive prefixes), but unlike 'pathlib' keep the original
text of the remaining path, so leading './' segments are preserved.

Changelog:
    2026-10-17 Justin: Init
"""

import errno
import os
import re
import tempfile
from typing import List, Optional, Tuple

from fsbox.error import FsIOError
from fsbox.lib.typing import PathLike
from fsbox.logging import get_logger
from fsbox.path.as_path import as_path
from fsbox.path.from_path import from_path

__all__ = [
    "as_path",
    "from_path",
    "canonicalize_as_string",
    "canonicalize_or",
    "get_basename",
    "get_parent_directory",
    "get_temporary_file_path",
]

logger = get_logger(__name__)

_SEPARATORS = os.sep + (os.altsep or "")
RE_COMPONENT = re.compile(f"[^{re.escape(_SEPARATORS)}]+")


def _components(path: str) -> List[Tuple[int, int, str]]:
    """Returns (start, end, name) spans of the path components.

    Only a leading '.' of a relative path is retained as a component,
    all other '.' segments are dropped. Empty segments (repeated or
    trailing separators) are never components.
    """
    drive, rest = os.path.splitdrive(path)
    has_root = rest[:1] != "" and rest[0] in _SEPARATORS
    spans = []
    for match in RE_COMPONENT.finditer(path, len(drive)):
        name = match.group()
        if name == "." and (spans or has_root or drive):
            continue
        spans.append((match.start(), match.end(), name))
    return spans


def canonicalize_as_string(path: PathLike) -> str:
    """Returns the canonical absolute form of the path.

    Symbolic links are followed, and '.' and '..' are resolved against the
    filesystem, so the path must exist.

    Raises:
        FsIOError: Path does not exist or cannot be resolved.

    Examples:
        >>> canonicalize_as_string("./src/../src/fsbox")
        '/home/justin/fsbox/src/fsbox'
    """
    native = as_path(path)
    try:
        if len(native) == 0:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), native)
        # Kernel walk rejects e.g. "<file>/..", which realpath resolves lexically
        os.stat(native)
        resolved = os.path.realpath(native, strict=True)
    except OSError as e:
        logger.debug("Failed to canonicalize '%s': %s", from_path(native), e)
        raise FsIOError.io("Unable to canonicalize path.", e) from e
    return from_path(resolved)


def canonicalize_or(path: PathLike, fallback: str) -> str:
    """Returns the canonical form of the path, or 'fallback' if it fails.

    Examples:
        >>> canonicalize_or("./missing.txt", "./missing.txt")
        './missing.txt'
    """
    try:
        return canonicalize_as_string(path)
    except FsIOError:
        return fallback


def get_basename(path: PathLike) -> Optional[str]:
    """Returns the last path component, i.e. file or last directory name.

    None is returned if the path has no final name, e.g. '/', '.' or 'a/..'.
    """
    spans = _components(from_path(as_path(path)))
    if not spans:
        return None
    name = spans[-1][2]
    if name in (os.curdir, os.pardir):
        return None
    return name


def get_parent_directory(path: PathLike) -> Optional[str]:
    """Returns the path with the last component removed.

    An empty parent is reported as None rather than '', so single
    component relative paths such as 'mod.rs' have no parent directory.

    Examples:
        >>> get_parent_directory("./src/path/mod.rs")
        './src/path'
        >>> get_parent_directory("/usr")
        '/'
        >>> get_parent_directory("mod.rs") is None
        True
    """
    text = from_path(as_path(path))
    spans = _components(text)
    if not spans:
        return None  # root or empty path

    if len(spans) == 1:
        parent = text[: spans[0][0]]  # drive and root only
    else:
        parent = text[: spans[-2][1]]

    if parent == "":
        return None
    return parent


def get_temporary_file_path(extension: str) -> str:
    """Returns a path to a nonexistent file in the temporary directory.

    The file is not created. The name is drawn from the same generator used
    by the 'tempfile' module, and checked against the filesystem.

    Args:
        extension: File extension, with or without the leading dot.

    Examples:
        >>> get_temporary_file_path("txt")
        '/tmp/tmpk2xo1nbc.txt'
    """
    extension = extension.lstrip(".")
    suffix = f".{extension}" if extension else ""
    # File must not exist on return, hence no mkstemp
    return tempfile.mktemp(suffix=suffix, dir=tempfile.gettempdir())
