"""Rendering of directory trees as text lines or JSON.

Text output follows the Unix ``tree`` command's connector style. Folders carry a
trailing slash, and collapsed folders are labelled with the reason they were not
expanded::

    project/
    ├── src/
    │   └── main.py
    ├── node_modules/ [ignored]
    ├── fixtures/ [too many entries]
    └── README.md
"""

import json
from typing import Iterator, Optional

from anytree import ContStyle, RenderTree

from lstree.file_system_tree.tree_node import TreeNode
from lstree.types import SkipReason

SKIP_MARKERS = {
    SkipReason.IGNORED_BY_RULE: "[ignored]",
    SkipReason.TOO_MANY_ENTRIES: "[too many entries]",
}


def node_label(node: TreeNode) -> str:
    """Label a node the way it appears in the text rendering.

    Example:
        >>> from lstree.types import NodeKind
        >>> node_label(TreeNode("dist", "/repo/dist", NodeKind.FOLDER, skip_reason=SkipReason.IGNORED_BY_RULE))
        'dist/ [ignored]'
    """
    if not node.is_folder:
        return node.name
    marker = SKIP_MARKERS.get(node.skip_reason)
    return f"{node.name}/ {marker}" if marker else f"{node.name}/"


def stream_tree_lines(tree: TreeNode) -> Iterator[str]:
    """Generate the text rendering of a tree one line at a time.

    Args:
        tree: Root of the tree to render.

    Yields:
        Lines without trailing newlines, root first.
    """
    for prefix, _, node in RenderTree(tree, style=ContStyle()):
        yield f"{prefix}{node_label(node)}"


def render_tree(tree: TreeNode) -> str:
    """Render a tree as text, one line per node."""
    return "\n".join(stream_tree_lines(tree))


def render_json(tree: TreeNode, indent: Optional[int] = 2) -> str:
    """Render a tree as a JSON document.

    The document is the nested form produced by TreeNode.to_dict(): skipped folders and
    files carry no ``children`` key.

    Args:
        tree: Root of the tree to render.
        indent: Indentation passed to json.dumps. None produces compact output.

    Returns:
        The JSON text.
    """
    return json.dumps(tree.to_dict(), indent=indent, ensure_ascii=False)
