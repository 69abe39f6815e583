"""Shell glob patterns and the per-directory files that declare them."""

from .glob_pattern import MatchResult, ShellGlobPattern, match_pattern
from .pattern_file import PATTERN_FILE_NAME, parse_pattern_lines, read_pattern_file

__all__ = [
    "MatchResult",
    "PATTERN_FILE_NAME",
    "ShellGlobPattern",
    "match_pattern",
    "parse_pattern_lines",
    "read_pattern_file",
]
