"""Reading the per-directory pattern files."""

from typing import Iterable

from ignoretree.types import PathType, PatternSet

PATTERN_FILE_NAME = ".gitignore"


def parse_pattern_lines(lines: Iterable[str]) -> PatternSet:
    """Extract glob patterns from the lines of a pattern file.

    Each line is stripped of surrounding whitespace. Empty lines and lines starting
    with ``#`` are dropped; everything else is kept verbatim, in file order.

    Example:
        >>> parse_pattern_lines(["*.log", "", "# comment", "build"])
        ['*.log', 'build']
    """
    patterns: PatternSet = []
    for line in lines:
        pattern = line.strip()
        if pattern and not pattern.startswith("#"):
            patterns.append(pattern)
    return patterns


def read_pattern_file(path: PathType) -> PatternSet:
    """Read the patterns declared in a pattern file.

    A missing file is not an error: it declares no patterns. Bytes that are not
    valid UTF-8 are decoded the same way os.listdir() decodes file names, so such
    patterns still match the names they were written for.

    Args:
        path: Path to the pattern file.

    Returns:
        The patterns in file order, possibly empty.

    Raises:
        OSError: For any failure other than the file not existing, e.g. permission
            denied or the path being a directory.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            return parse_pattern_lines(f)
    except FileNotFoundError:
        return []
