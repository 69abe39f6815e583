"""Deterministic pre-order traversal of a directory subtree."""

import os
import stat
from typing import Iterator, NamedTuple

from ignoretree.types import FileType, PathType


class WalkEntry(NamedTuple):
    """A filesystem entry met during traversal.

    Attributes:
        path (str): Absolute path of the entry.
        file_type (FileType): What kind of entry it is, without following symlinks.
    """

    path: str
    file_type: FileType

    @property
    def name(self) -> str:
        """The base name of the entry."""
        return os.path.basename(self.path) or self.path

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY


def _file_type(path: str) -> FileType:
    mode = os.lstat(path).st_mode
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    return FileType.FILE


def walk(root: PathType) -> Iterator[WalkEntry]:
    """Walk a subtree in pre-order, yielding the root first.

    Parents are yielded before their children and siblings are sorted by name.
    Symbolic links are reported but never followed.

    Args:
        root: The directory (or file) to start from.

    Yields:
        WalkEntry: One entry per filesystem object, with absolute paths.

    Raises:
        OSError: If an entry cannot be stat-ed or a directory cannot be listed.
            The walk stops at the first failure.

    Example:
        >>> for entry in walk("src"):  # doctest: +SKIP
        ...     print(entry.name, entry.file_type.value)
        src directory
        main.py file
    """
    root_path = os.path.abspath(root)
    entry = WalkEntry(root_path, _file_type(root_path))
    yield entry
    if entry.is_dir:
        yield from _walk_directory(root_path)


def _walk_directory(directory: str) -> Iterator[WalkEntry]:
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        entry = WalkEntry(path, _file_type(path))
        yield entry
        if entry.is_dir:
            yield from _walk_directory(path)
