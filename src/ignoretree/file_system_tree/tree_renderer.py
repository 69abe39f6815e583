"""Ignore-aware, depth-indented tree rendering.

This module provides the TreeRenderer class, which prints every entry below a
root directory that its exclusion rules do not hide, one line per entry.
"""

import os
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

from ignoretree.exclusion_rules.base_rules import BaseExclusionRules
from ignoretree.file_system_tree.walk import walk
from ignoretree.types import PathType

BRANCH = "├──"
INDENT = "   "


class TreeRenderer:
    """Renders the entries below a root directory as an indented listing.

    The first line is the root's base name. Every other surviving entry is printed
    as an indentation of three spaces per level below the first, the branch marker
    and the entry's base name. All siblings use the same marker.

    Entries are visited in pre-order with siblings sorted by name. Directories that
    the exclusion rules hide are still walked, and each of their descendants is
    filtered on its own by the same rules.

    Attributes:
        root_path (Path): The absolute path to the root directory.
        exclusion_rules (BaseExclusionRules): Rules deciding which entries are hidden.

    Example:
        >>> from ignoretree.exclusion_rules.pattern_index import PatternIndex
        >>> renderer = TreeRenderer(".", PatternIndex.build("."))  # doctest: +SKIP
        >>> renderer.render()  # doctest: +SKIP
        project
        ├──README.md
        ├──src
           ├──main.py
    """

    def __init__(self, root_path: PathType, exclusion_rules: BaseExclusionRules) -> None:
        """Initialize a TreeRenderer.

        Args:
            root_path: Path to the root directory. Can be any path-like object.
            exclusion_rules: Rules for excluding files and directories.
        """
        self.root_path = Path(os.path.abspath(root_path))
        self.exclusion_rules = exclusion_rules

    def _format_line(self, path: str) -> str:
        components = os.path.relpath(path, self.root_path).split(os.sep)
        return f"{INDENT * (len(components) - 1)}{BRANCH}{os.path.basename(path)}"

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree one line at a time, without line terminators.

        Yields:
            Lines of the tree representation.

        Raises:
            FileNotFoundError: If the root path doesn't exist. Nothing is yielded.
            OSError: If the root cannot be stat-ed, or if an entry cannot be stat-ed
                or a directory cannot be listed during the walk.
        """
        root = str(self.root_path)
        os.stat(root)

        if self.exclusion_rules.exclude(root):
            return

        yield self.root_path.name or root
        for entry in walk(root):
            if entry.path == root or self.exclusion_rules.exclude(entry.path):
                continue
            yield self._format_line(entry.path)

    def get_tree_representation(self) -> str:
        """Get the complete tree representation as a string.

        Returns:
            The lines of the tree joined with newlines.
        """
        return "\n".join(self.stream_tree_representation())

    def render(self, file: Optional[TextIO] = None) -> None:
        """Print the tree.

        Args:
            file: Where to print. Defaults to standard output.
        """
        out = file if file is not None else sys.stdout
        for line in self.stream_tree_representation():
            print(line, file=out)
