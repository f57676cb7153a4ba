"""Depth-first directory traversal with filtering.

This package provides the Walker that enumerates a directory tree and applies a
FilterSet to every entry, along with the entry metadata type and helpers for
presenting matches as a tree.
"""
