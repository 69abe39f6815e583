"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .pattern_index import DirectoryNode, PatternIndex

__all__ = [
    "BaseExclusionRules",
    "DirectoryNode",
    "PatternIndex",
]
