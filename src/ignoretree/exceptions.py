class BadPatternError(ValueError):
    """
    Exception raised when a shell glob pattern cannot be compiled.

    A pattern is malformed when it contains an unclosed character class, an empty
    character class, a class item starting with ``-`` or ``]``, an incomplete range,
    or a trailing escape character.

    Attributes:
        pattern (str): The pattern that failed to compile.
        reason (str): Short description of what is wrong with the pattern.

    Example:
        >>> error = BadPatternError("[abc", "unclosed character class")
        >>> str(error)
        "Malformed glob pattern '[abc': unclosed character class"
    """

    def __init__(self, pattern: str, reason: str = "syntax error") -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str, optional): What is wrong with it. Defaults to "syntax error".
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Malformed glob pattern {pattern!r}: {reason}")
