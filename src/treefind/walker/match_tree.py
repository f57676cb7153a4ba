"""Tree presentation of search results.

Matched paths are grouped under their common directories and rendered in the
style of the Unix 'tree' command.
"""

import os
from pathlib import PurePath
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from anytree import Node, RenderTree
from anytree.render import ContStyle

from treefind.types import PathType


class MatchNode(Node):  # type: ignore
    """Node representing a matched file or one of its parent directories.

    Extends anytree.Node with a flag telling directories apart from matched files.

    Example:
        >>> root = MatchNode("root", is_dir=True)
        >>> match = MatchNode("b.rs", parent=root)
        >>> match.is_dir
        False
        >>> [node.name for node in root.children]
        ['b.rs']
    """

    def __init__(self, name: str, parent: Optional["MatchNode"] = None, is_dir: bool = False, **kwargs: Any) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir


def build_match_tree(root: PathType, paths: Iterable[str]) -> MatchNode:
    """Group matched paths into a tree rooted at the search root.

    Children keep the order in which their paths were first seen, so feeding the
    walker's pre-order output preserves traversal order.

    Args:
        root: The search root the paths were produced from.
        paths: Matched paths, each located below root.

    Returns:
        The root node of the tree.

    Example:
        >>> tree = build_match_tree("root", ["root/sub/b.rs", "root/a.txt"])
        >>> [(node.name, node.is_dir) for node in tree.descendants]
        [('sub', True), ('b.rs', False), ('a.txt', False)]
    """
    root_str = os.fspath(root)
    tree = MatchNode(root_str.rstrip("/\\") or root_str, is_dir=True)
    nodes: Dict[Tuple[str, ...], MatchNode] = {(): tree}

    for path in paths:
        parts = PurePath(os.path.relpath(path, root_str)).parts
        for i, part in enumerate(parts):
            key = parts[: i + 1]
            if key not in nodes:
                nodes[key] = MatchNode(part, parent=nodes[parts[:i]], is_dir=i < len(parts) - 1)
    return tree


def render_match_tree(tree: MatchNode) -> Iterator[str]:
    """Render a match tree one line at a time.

    Directories are suffixed with '/'.

    Example:
        >>> for line in render_match_tree(build_match_tree("root", ["root/sub/b.rs", "root/a.txt"])):
        ...     print(line)
        root/
        ├── sub/
        │   └── b.rs
        └── a.txt
    """
    for prefix, _, node in RenderTree(tree, style=ContStyle()):
        suffix = "/" if node.is_dir and not node.name.endswith(("/", "\\")) else ""
        yield f"{prefix}{node.name}{suffix}"
