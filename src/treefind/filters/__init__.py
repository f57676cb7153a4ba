"""Predicates for selecting which files a search reports."""

from .base_filter import BaseFilter
from .extension_filter import ExtensionFilter
from .filter_set import FilterSet
from .pattern_filter import PatternFilter
from .predicate_filter import PredicateFilter
from .size_filters import MaxSizeFilter, MinSizeFilter, parse_file_size

__all__ = [
    "BaseFilter",
    "ExtensionFilter",
    "FilterSet",
    "MaxSizeFilter",
    "MinSizeFilter",
    "PatternFilter",
    "PredicateFilter",
    "parse_file_size",
]
