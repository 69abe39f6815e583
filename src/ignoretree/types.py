from enum import Enum
from os import PathLike
from typing import List, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Patterns declared by a single directory's pattern file, in file order
PatternSet = List[str]


class FileType(Enum):
    """Enumeration of file types for categorizing entries during traversal.

    Attributes:
        FILE: Regular file (or anything that is neither a directory nor a symlink)
        DIRECTORY: Directory
        SYMLINK: Symbolic link, never followed
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
