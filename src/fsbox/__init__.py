"""
Sets whatever is exposed in the `fsbox` namespace.
"""

import importlib.metadata

from fsbox import directory, file, path
from fsbox.error import ErrorKind, FsIOError

__version__ = importlib.metadata.version("fsbox")
