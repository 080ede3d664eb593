"""Lazily built directory tree with root validation.

This module provides the FileSystemTree class, the entry point most callers want: it
checks the root up front, builds the tree on first access and serves the summary and
text rendering from the same cached tree.
"""

from pathlib import Path
from threading import Event
from typing import Iterator, Optional, Tuple

from lstree.file_system_tree.summary import TreeSummary, summarize
from lstree.file_system_tree.tree_builder import build_tree
from lstree.file_system_tree.tree_node import TreeNode
from lstree.file_system_tree.tree_options import TreeOptions
from lstree.tree_renderer import stream_tree_lines
from lstree.types import PathType


class FileSystemTree:
    """A directory tree honoring cascading .gitignore rules, built on first access.

    The root path is resolved, so a symlink given as the root is followed once; symlinks
    below the root are never followed.

    Unlike build_tree(), which absorbs every filesystem error, this class rejects a
    missing root or a root that is not a directory, so that command-line callers can
    report the mistake instead of printing a one-line tree.

    Attributes:
        root_path (Path): The resolved absolute path of the root directory.
        options (TreeOptions): Options passed to the builder.
        cancel_event (Optional[Event]): Cancellation signal passed to the builder.

    Example:
        >>> tree = FileSystemTree(".", TreeOptions(max_leaf=20))  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        project/
        ├── src/
        │   └── main.py
        ├── vendor/ [ignored]
        └── README.md
    """

    def __init__(
        self,
        root_path: PathType,
        options: Optional[TreeOptions] = None,
        cancel_event: Optional[Event] = None,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory.
            options: Tree options. Defaults to TreeOptions().
            cancel_event: When set, an in-progress build raises ScanCancelledError.
        """
        self.root_path = Path(root_path).resolve()
        self.options = options if options is not None else TreeOptions()
        self.cancel_event = cancel_event
        self._tree: Optional[TreeNode] = None
        self._summary: Optional[TreeSummary] = None

    def get_tree(self) -> TreeNode:
        """Get the root node, building the tree if it hasn't been built yet.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            ScanCancelledError: If the cancellation event was set during the build.
        """
        if self._tree is None:
            tree, _ = self._build_tree()
            return tree
        return self._tree

    def _build_tree(self) -> Tuple[TreeNode, TreeSummary]:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        tree = build_tree(self.root_path, self.options, cancel_event=self.cancel_event)
        summary = summarize(tree)
        self._tree, self._summary = tree, summary
        return tree, summary

    def get_summary(self) -> TreeSummary:
        """Get the file, folder and skip counts of the tree."""
        if self._summary is None:
            _, summary = self._build_tree()
            return summary
        return self._summary

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the text rendering of the tree one line at a time.

        Yields:
            Lines without trailing newlines.
        """
        yield from stream_tree_lines(self.get_tree())

    def get_tree_representation(self) -> str:
        """Get the complete text rendering of the tree."""
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Rebuild the tree to reflect the current filesystem state."""
        self._tree = None
        self._summary = None
        self._build_tree()
