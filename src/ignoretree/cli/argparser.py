"""Command-line argument parsing for ignoretree.

The tool always prints the tree of the current working directory, so the parser
only provides help and version information.
"""

import argparse

from ignoretree import __version__
from ignoretree.patterns.pattern_file import PATTERN_FILE_NAME


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        The configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="ignoretree",
        description=(
            "Print the directory tree of the current working directory, hiding entries "
            f"whose names match the glob patterns in any {PATTERN_FILE_NAME} file of "
            "their directory or its ancestors."
        ),
        epilog=(
            f"Patterns are plain shell globs matched against base names, one per line; "
            f"blank lines and lines starting with '#' are ignored. {PATTERN_FILE_NAME} "
            "negation, directory-only and '**' syntax are not supported."
        ),
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser
