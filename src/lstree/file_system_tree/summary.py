"""Aggregate counts over a finished directory tree."""

from dataclasses import dataclass

from lstree.file_system_tree.tree_node import TreeNode
from lstree.types import SkipReason


@dataclass(frozen=True)
class TreeSummary:
    """Counts of the nodes in a tree.

    Attributes:
        total_files: Number of file nodes.
        total_folders: Number of folder nodes, root and skipped folders included.
        skipped_by_ignore: Folders collapsed because an ignore rule matched them.
        skipped_by_size: Folders collapsed because they had too many visible entries.
    """

    total_files: int = 0
    total_folders: int = 0
    skipped_by_ignore: int = 0
    skipped_by_size: int = 0


def summarize(tree: TreeNode) -> TreeSummary:
    """Count files, folders and skipped folders in a tree.

    The walk only descends through listed contents; skipped folders have none, so they
    end the walk along their branch. It keeps its own stack of pending nodes, so trees
    of any depth can be summarized.

    Args:
        tree: Root of the tree to summarize.

    Returns:
        The counts.

    Example:
        >>> from lstree.types import NodeKind
        >>> root = TreeNode("repo", "/repo", NodeKind.FOLDER)
        >>> _ = TreeNode("a.txt", "/repo/a.txt", NodeKind.FILE, file_size=1, parent=root)
        >>> summarize(root)
        TreeSummary(total_files=1, total_folders=1, skipped_by_ignore=0, skipped_by_size=0)
    """
    files = folders = ignored = too_large = 0
    pending = [tree]
    while pending:
        node = pending.pop()
        if not node.is_folder:
            files += 1
            continue
        folders += 1
        pending.extend(node.children)
        if node.skip_reason is SkipReason.IGNORED_BY_RULE:
            ignored += 1
        elif node.skip_reason is SkipReason.TOO_MANY_ENTRIES:
            too_large += 1
    return TreeSummary(files, folders, ignored, too_large)


def format_summary(summary: TreeSummary) -> str:
    """Format the counts into a human-readable string.

    Args:
        summary: Counts to format.

    Returns:
        One line per count. The skipped-folders line only appears when a folder was
        skipped.
    """
    result = [
        f"Total folders: {summary.total_folders}",
        f"Total files: {summary.total_files}",
    ]
    if summary.skipped_by_ignore or summary.skipped_by_size:
        result.append(f"Skipped folders: {summary.skipped_by_ignore} (gitignore), {summary.skipped_by_size} (size)")
    return "\n".join(result)
