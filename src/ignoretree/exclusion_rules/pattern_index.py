"""Per-directory ignore patterns and the upward exclusion check."""

import os
from collections.abc import Iterator, Mapping
from typing import Dict, Optional

from anytree import Node

from ignoretree.file_system_tree.walk import walk
from ignoretree.patterns.glob_pattern import MatchResult, match_pattern
from ignoretree.patterns.pattern_file import PATTERN_FILE_NAME, read_pattern_file
from ignoretree.types import PathType, PatternSet

from .base_rules import BaseExclusionRules


class DirectoryNode(Node):  # type: ignore
    """Node representing an indexed directory and the patterns it declares.

    Extends anytree.Node so that the chain of ancestors can be followed through
    explicit parent links.

    Attributes:
        name (str): The base name of the directory.
        directory (str): The absolute path of the directory.
        patterns (PatternSet): Patterns declared by the directory's pattern file.

    Example:
        >>> root = DirectoryNode("/project", patterns=["*.log"])
        >>> sub = DirectoryNode("/project/sub", parent=root)
        >>> [node.directory for node in sub.iter_path_reverse()]
        ['/project/sub', '/project']
    """

    def __init__(
        self, path: str, parent: Optional["DirectoryNode"] = None, patterns: Optional[PatternSet] = None
    ) -> None:
        super().__init__(os.path.basename(path) or path, parent)
        self.directory = path
        self.patterns: PatternSet = patterns if patterns is not None else []

    def matches(self, name: str) -> bool:
        """Check a base name against this directory's patterns.

        Malformed patterns never match.
        """
        return any(match_pattern(pattern, name) is MatchResult.MATCHED for pattern in self.patterns)


class PatternIndex(Mapping[str, PatternSet], BaseExclusionRules):
    """Read-only mapping from every directory of a subtree to its ignore patterns.

    The index holds exactly one entry per directory reached by the indexing walk,
    the root included. A directory without a pattern file maps to an empty list.

    Patterns declared in a directory apply to every entry below it: the exclusion
    check tests a path's base name against its containing directory's patterns and
    then against those of each ancestor in turn. There is no negation, so a match
    at any level excludes the path.

    Attributes:
        root (str): Absolute path of the indexed subtree's root.

    Example:
        >>> index = PatternIndex.build(".")  # doctest: +SKIP
        >>> index[index.root]  # doctest: +SKIP
        ['*.log', 'build']
        >>> index.exclude("logs/debug.log")  # doctest: +SKIP
        True
    """

    def __init__(self, root: DirectoryNode) -> None:
        """Wrap an already built tree of directory nodes.

        Use PatternIndex.build() to index a directory on disk.

        Args:
            root: Root node; every descendant node becomes an index entry.
        """
        self.root = root.directory
        self._nodes: Dict[str, DirectoryNode] = {node.directory: node for node in root.descendants}
        self._nodes[root.directory] = root

    @classmethod
    def build(cls, root: PathType, pattern_file_name: str = PATTERN_FILE_NAME) -> "PatternIndex":
        """Index the pattern files of every directory below root.

        Args:
            root: The directory to index, inclusive.
            pattern_file_name: Name of the pattern file looked up in each directory.

        Returns:
            PatternIndex: The completed index.

        Raises:
            OSError: If a pattern file exists but cannot be read, or if any entry
                cannot be stat-ed or any directory cannot be listed. Nothing is
                returned in that case.
        """
        nodes: Dict[str, DirectoryNode] = {}
        root_node: Optional[DirectoryNode] = None
        for entry in walk(root):
            if not entry.is_dir:
                continue
            patterns = read_pattern_file(os.path.join(entry.path, pattern_file_name))
            node = DirectoryNode(entry.path, parent=nodes.get(os.path.dirname(entry.path)), patterns=patterns)
            if root_node is None:
                root_node = node
            nodes[entry.path] = node

        if root_node is None:
            raise NotADirectoryError(f"Root path is not a directory: {root}")
        return cls(root_node)

    def __getitem__(self, directory: str) -> PatternSet:
        """Patterns of an indexed directory, as a copy the index does not share."""
        return list(self._nodes[os.path.abspath(directory)].patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, directory: object) -> bool:
        return isinstance(directory, str) and os.path.abspath(directory) in self._nodes

    def _nearest_node(self, directory: str) -> Optional[DirectoryNode]:
        """Find the closest indexed directory at or above the given one."""
        while True:
            node = self._nodes.get(directory)
            if node is not None:
                return node
            parent = os.path.dirname(directory)
            if parent == directory:
                return None
            directory = parent

    def exclude(self, path: str) -> bool:
        """Check if a path is hidden by a pattern of its directory or any ancestor.

        Args:
            path: The path to check, absolute or relative to the working directory.

        Returns:
            bool: True if the path's base name matches a pattern declared in its
                containing directory or in any directory above it.
        """
        path = os.path.abspath(path)
        name = os.path.basename(path) or path
        node = self._nearest_node(os.path.dirname(path))
        if node is None:
            return False
        return any(ancestor.matches(name) for ancestor in node.iter_path_reverse())
