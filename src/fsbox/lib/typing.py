"""Type aliases shared across fsbox."""

import os

from typing import Union
from typing_extensions import TypeAlias

# Anything accepted where a path is expected
PathLike: TypeAlias = Union[os.PathLike, str, bytes]

# Result of 'os.fspath', i.e. what the OS calls take
NativePath: TypeAlias = Union[str, bytes]
