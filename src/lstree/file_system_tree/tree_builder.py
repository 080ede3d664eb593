"""Depth-first construction of the directory tree.

The builder walks the filesystem depth first. At every directory it declares that
directory's ignore level, pushes it onto a copy of the rule stack it received, and
classifies the directory's entries against the whole stack. Ignored directories are kept
as stubs that are never descended into; ignored files are dropped. Symbolic links are
never represented.

Filesystem errors never escape the build. Each call site has a fixed fallback:

- a path that cannot be stat'ed becomes a zero-size file node,
- a directory that cannot be listed becomes an empty folder node,
- an entry that cannot be stat'ed is dropped,
- a missing ignore file declares no rules.
"""

import logging
import os
import stat
from threading import Event
from typing import List, Optional, Tuple

from lstree.exceptions import ScanCancelledError
from lstree.exclusion_rules.rule_stack import IgnoreRuleStack, declare_level
from lstree.file_system_tree.directory_scanner import DirectoryEntry, scan_directory
from lstree.file_system_tree.tree_node import TreeNode
from lstree.file_system_tree.tree_options import TreeOptions
from lstree.types import NodeKind, PathType, SkipReason

logger = logging.getLogger(__name__)


def sort_key(node: TreeNode) -> Tuple[bool, str]:
    """Order folders before files, then by case-sensitive name."""
    return (not node.is_folder, node.name)


def build_tree(
    path: PathType,
    options: Optional[TreeOptions] = None,
    stack: Optional[IgnoreRuleStack] = None,
    cancel_event: Optional[Event] = None,
) -> TreeNode:
    """Build the tree rooted at ``path``.

    Args:
        path: Directory to snapshot. Relative paths are made absolute against the
            current working directory; symlinks in the path are not resolved.
        options: Truncation and ignore options. Defaults to TreeOptions().
        stack: Ignore levels already in effect above ``path``. An empty stack (the
            default) makes ``path`` the scan root, which receives the version-control
            and caller-supplied patterns and is never collapsed.
        cancel_event: When set, the build stops before visiting the next directory.

    Returns:
        The root node. It is a folder whenever ``path`` is a readable directory.

    Raises:
        ScanCancelledError: If ``cancel_event`` was set during the build.

    Example:
        >>> tree = build_tree("/srv/project", TreeOptions(max_leaf=100))  # doctest: +SKIP
        >>> [child.name for child in tree.contents]  # doctest: +SKIP
        ['docs', 'src', 'README.md']
    """
    path = os.path.abspath(os.fspath(path))
    options = options if options is not None else TreeOptions()

    root = _entry_node(path)
    if root is not None:
        return root

    root = TreeNode(os.path.basename(path) or path, path, NodeKind.FOLDER)
    # Directories still to be listed, each with the stack in effect above it. A work
    # list instead of recursion keeps deep hierarchies within the interpreter's limit.
    pending: List[Tuple[TreeNode, IgnoreRuleStack]] = [(root, stack if stack is not None else IgnoreRuleStack())]
    while pending:
        folder, parent_stack = pending.pop()
        subfolders = _expand_folder(folder, options, parent_stack, cancel_event)
        # Reversed so that directories are visited in listing order
        pending.extend(reversed(subfolders))
    return root


def _entry_node(path: str) -> Optional[TreeNode]:
    """Return the leaf node for a non-directory path, or None for a directory."""
    name = os.path.basename(path) or path

    try:
        path_stat = os.lstat(path)
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return TreeNode(name, path, NodeKind.FILE, file_size=0)

    if stat.S_ISLNK(path_stat.st_mode):
        return TreeNode(name, path, NodeKind.FILE, file_size=0)

    if not stat.S_ISDIR(path_stat.st_mode):
        return TreeNode(name, path, NodeKind.FILE, file_size=path_stat.st_size)

    return None


def _expand_folder(
    folder: TreeNode,
    options: TreeOptions,
    stack: IgnoreRuleStack,
    cancel_event: Optional[Event],
) -> List[Tuple[TreeNode, IgnoreRuleStack]]:
    """List one directory into ``folder`` and return the subdirectories still to be listed."""
    path = folder.abs_path

    if cancel_event is not None and cancel_event.is_set():
        raise ScanCancelledError(path)

    is_root = len(stack) == 0
    level = declare_level(
        path,
        is_root=is_root,
        extra_patterns=options.ignore_patterns if is_root else (),
        ignore_file_name=options.ignore_file_name,
    )
    stack = stack.push(level)

    candidates: List[Tuple[DirectoryEntry, bool]] = [
        (entry, stack.is_excluded(entry.abs_path, entry.is_dir))
        for entry in scan_directory(path)
        if not entry.is_symlink
    ]

    visible_count = sum(1 for _, excluded in candidates if not excluded)
    if not is_root and options.max_leaf is not None and visible_count > options.max_leaf:
        logger.debug("Collapsing %s: %d visible entries exceed %d", path, visible_count, options.max_leaf)
        folder.skip_reason = SkipReason.TOO_MANY_ENTRIES
        return []

    children: List[TreeNode] = []
    subfolders: List[Tuple[TreeNode, IgnoreRuleStack]] = []
    for entry, excluded in candidates:
        if excluded:
            if entry.is_dir:
                children.append(
                    TreeNode(entry.name, entry.abs_path, NodeKind.FOLDER, skip_reason=SkipReason.IGNORED_BY_RULE)
                )
            continue

        if entry.is_dir:
            # Stat again: the entry may have been replaced since the listing
            node = _entry_node(entry.abs_path)
            if node is None:
                node = TreeNode(entry.name, entry.abs_path, NodeKind.FOLDER)
                subfolders.append((node, stack))
            children.append(node)
        else:
            children.append(TreeNode(entry.name, entry.abs_path, NodeKind.FILE, file_size=entry.size))

    folder.children = sorted(children, key=sort_key)
    return subfolders
