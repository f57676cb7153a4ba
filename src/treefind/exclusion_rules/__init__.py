"""Exclusion rules for pruning entries and subtrees from a search."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
]
