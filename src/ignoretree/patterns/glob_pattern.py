"""Shell glob patterns matched against base names.

Patterns follow flat shell-glob rules rather than the .gitignore grammar: there is
no negation prefix, no directory-only suffix, no ``**`` and no anchoring. A pattern
is always matched against a single path component.
"""

import re
from enum import Enum
from functools import lru_cache
from typing import List, Tuple

from pathspec.pattern import RegexPattern

from ignoretree.exceptions import BadPatternError

SEPARATOR = "/"


class MatchResult(Enum):
    """Outcome of matching one pattern against one name.

    Attributes:
        MATCHED: The name matches the pattern.
        NOT_MATCHED: The name does not match the pattern.
        INVALID_PATTERN: The pattern is malformed and cannot match anything.
    """

    MATCHED = "matched"
    NOT_MATCHED = "not_matched"
    INVALID_PATTERN = "invalid_pattern"


class ShellGlobPattern(RegexPattern):  # type: ignore
    """A shell glob compiled into a pathspec regular-expression pattern.

    Supported syntax:
    - ``*`` matches any sequence of non-separator characters, leading dots included
    - ``?`` matches exactly one non-separator character
    - ``[abc]``, ``[a-z]`` match one character from a class; ``[^abc]`` negates it
    - ``\\`` escapes the following character, inside or outside a class

    The whole name must match. Construction raises BadPatternError for malformed
    patterns instead of guessing at what was meant.

    Example:
        >>> ShellGlobPattern("*.log").matches("debug.log")
        True
        >>> ShellGlobPattern("*.log").matches("debug.txt")
        False
        >>> ShellGlobPattern("[")
        Traceback (most recent call last):
        ...
        ignoretree.exceptions.BadPatternError: Malformed glob pattern '[': unclosed character class
    """

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[str, bool]:
        """Translate a shell glob into an anchored regular expression.

        Args:
            pattern: The shell glob to translate.

        Returns:
            A ``(regex, include)`` pair as expected by pathspec; include is always True.

        Raises:
            BadPatternError: If the pattern is malformed.
        """
        parts: List[str] = ["^"]
        i, n = 0, len(pattern)
        while i < n:
            char = pattern[i]
            i += 1
            if char == "*":
                parts.append(f"[^{SEPARATOR}]*")
            elif char == "?":
                parts.append(f"[^{SEPARATOR}]")
            elif char == "[":
                class_regex, i = cls._translate_class(pattern, i)
                parts.append(class_regex)
            elif char == "\\":
                if i >= n:
                    raise BadPatternError(pattern, "trailing escape character")
                parts.append(re.escape(pattern[i]))
                i += 1
            else:
                parts.append(re.escape(char))
        parts.append(r"\Z")
        return "".join(parts), True

    @classmethod
    def _translate_class(cls, pattern: str, i: int) -> Tuple[str, int]:
        """Translate a character class whose opening bracket ends just before ``i``."""
        negated = i < len(pattern) and pattern[i] == "^"
        if negated:
            i += 1

        items: List[str] = []
        item_count = 0
        while True:
            # A closing bracket only ends the class once it holds at least one item
            if i < len(pattern) and pattern[i] == "]" and item_count > 0:
                i += 1
                break
            lo, i = cls._class_char(pattern, i)
            hi = lo
            if pattern[i] == "-":
                hi, i = cls._class_char(pattern, i + 1)
            item_count += 1
            # Inverted ranges are legal but match nothing
            if lo == hi:
                items.append(re.escape(lo))
            elif lo < hi:
                items.append(f"{re.escape(lo)}-{re.escape(hi)}")

        if not items:
            return ("(?s:.)" if negated else "(?!)"), i
        return f"[{'^' if negated else ''}{''.join(items)}]", i

    @staticmethod
    def _class_char(pattern: str, i: int) -> Tuple[str, int]:
        """Read one possibly escaped character of a class item.

        Returns:
            The character and the index just past it. Another character always
            follows, since the class still has to be closed.
        """
        if i >= len(pattern):
            raise BadPatternError(pattern, "unclosed character class")
        if pattern[i] in "-]":
            raise BadPatternError(pattern, f"unexpected {pattern[i]!r} in character class")
        if pattern[i] == "\\":
            i += 1
            if i >= len(pattern):
                raise BadPatternError(pattern, "trailing escape character")
        char = pattern[i]
        i += 1
        if i >= len(pattern):
            raise BadPatternError(pattern, "unclosed character class")
        return char, i

    def matches(self, name: str) -> bool:
        """Check whether a base name matches this pattern.

        Args:
            name: A single path component.

        Returns:
            bool: True if the whole name matches.
        """
        return self.regex.match(name) is not None


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> ShellGlobPattern:
    """Compile a shell glob, reusing earlier compilations of the same pattern.

    Raises:
        BadPatternError: If the pattern is malformed.
    """
    return ShellGlobPattern(pattern)


def match_pattern(pattern: str, name: str) -> MatchResult:
    """Match a base name against a shell glob.

    Malformed patterns are reported rather than raised, so callers decide what an
    invalid pattern means for them.

    Args:
        pattern: The shell glob.
        name: A single path component.

    Returns:
        MatchResult: MATCHED, NOT_MATCHED or INVALID_PATTERN.

    Example:
        >>> match_pattern("*.pyc", "module.pyc")
        <MatchResult.MATCHED: 'matched'>
        >>> match_pattern("*.pyc", "module.py")
        <MatchResult.NOT_MATCHED: 'not_matched'>
        >>> match_pattern("[a-", "a")
        <MatchResult.INVALID_PATTERN: 'invalid_pattern'>
    """
    try:
        compiled = compile_pattern(pattern)
    except BadPatternError:
        return MatchResult.INVALID_PATTERN
    return MatchResult.MATCHED if compiled.matches(name) else MatchResult.NOT_MATCHED
