"""Ignore-aware directory tree printing.

This package prints the tree below a directory while hiding entries that match
the shell-glob patterns declared in per-directory ``.gitignore`` files.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("ignoretree")
except PackageNotFoundError:
    __version__ = "unknown"
