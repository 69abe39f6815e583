"""Command-line interface for ignoretree.

This module prints the directory tree of the current working directory, hiding
every entry whose base name matches a pattern declared in the ``.gitignore`` of
its directory or of any directory above it.

The pattern index is built once for the whole subtree before anything is printed,
so an unreadable pattern file or directory fails the run without partial output.

Exit Codes:
    0: Successful completion
    1: Runtime error (working directory, pattern index or tree could not be read)
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    $ cd /path/to/project
    $ ignoretree
    project
    ├──.gitignore
    ├──README.md
    ├──src
       ├──main.py
"""

import os
import sys
from typing import NoReturn

from ignoretree.cli.argparser import create_parser
from ignoretree.cli.safe_writer import SafeWriter
from ignoretree.cli.signal_handler import setup_signal_handling, signal_handler
from ignoretree.exclusion_rules.pattern_index import PatternIndex
from ignoretree.file_system_tree.tree_renderer import TreeRenderer


def fail(message: str, error: Exception) -> NoReturn:
    """Print a diagnostic to stderr and exit with the code matching the error."""
    print(f"Error: {message}: {error}", file=sys.stderr)
    sys.exit(126 if isinstance(error, PermissionError) else 1)


def main() -> None:
    """Main entry point for the ignoretree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()
    create_parser().parse_args()

    try:
        current_dir = os.getcwd()
    except OSError as e:
        fail("cannot determine current directory", e)

    try:
        pattern_index = PatternIndex.build(current_dir)
    except OSError as e:
        fail("cannot build ignore pattern index", e)

    renderer = TreeRenderer(current_dir, pattern_index)
    try:
        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                for line in renderer.stream_tree_representation():
                    safe_writer.write_line(line)
            except BrokenPipeError:
                pass
    except OSError as e:
        fail("cannot print directory tree", e)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
