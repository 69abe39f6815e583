from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Anything that can tell whether a path should be hidden from output can be used
    to filter a rendered tree.

    Example:
        >>> class HideTemporary(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith(".tmp")
        >>> HideTemporary().exclude("/project/build.tmp")
        True
        >>> HideTemporary().exclude("/project/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The file or directory path to check.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass
