"""Node representation for entries in the directory tree."""

from typing import Any, Dict, Optional, Tuple

from anytree import Node

from lstree.types import NodeKind, SkipReason


class TreeNode(Node):  # type: ignore
    """Node class representing a file or folder in the directory tree.

    Extends anytree.Node with the entry's absolute path, its kind, the reason it was
    collapsed (if any) and, for files, its size in bytes. Tree traversal and rendering
    come from anytree.

    A folder is expanded only when it was not skipped. Skipped folders and files have no
    contents at all, which ``contents`` reports as None; their anytree ``children`` tuple
    is always empty.

    Attributes:
        name (str): Base name of the entry.
        abs_path (str): Absolute path of the entry. anytree already uses ``path`` for the
            chain of ancestor nodes, so the filesystem path lives here.
        kind (NodeKind): Whether the entry is a file or a folder.
        skip_reason (SkipReason): Why a folder was collapsed, or SkipReason.NONE.
        file_size (Optional[int]): Size in bytes for files, None for folders.

    Example:
        >>> root = TreeNode("repo", "/repo", NodeKind.FOLDER)
        >>> stub = TreeNode("build", "/repo/build", NodeKind.FOLDER,
        ...                 skip_reason=SkipReason.IGNORED_BY_RULE, parent=root)
        >>> stub.contents is None
        True
        >>> [child.name for child in root.contents]
        ['build']
    """

    def __init__(
        self,
        name: str,
        abs_path: str,
        kind: NodeKind,
        skip_reason: SkipReason = SkipReason.NONE,
        file_size: Optional[int] = None,
        parent: Optional["TreeNode"] = None,
        children: Optional[Any] = None,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: Base name of the entry.
            abs_path: Absolute path of the entry.
            kind: NodeKind.FILE or NodeKind.FOLDER.
            skip_reason: Why the folder was collapsed. Defaults to SkipReason.NONE.
            file_size: Size in bytes. Only meaningful for files.
            parent: The parent node. Defaults to None.
            children: Initial child nodes. Defaults to None.
        """
        super().__init__(name, parent=parent, children=children)
        self.abs_path = abs_path
        self.kind = kind
        self.skip_reason = skip_reason
        self.file_size = file_size

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    @property
    def is_skipped(self) -> bool:
        return self.skip_reason is not SkipReason.NONE

    @property
    def is_expanded(self) -> bool:
        """True for folders whose entries were listed."""
        return self.is_folder and not self.is_skipped

    @property
    def contents(self) -> Optional[Tuple["TreeNode", ...]]:
        """The ordered child nodes, or None when the node has no listing at all."""
        if not self.is_expanded:
            return None
        return tuple(self.children)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree rooted at this node into plain data.

        Keys that do not apply to a node are omitted rather than set to null:
        ``children`` for files and skipped folders, ``skipped`` for unskipped nodes and
        ``size`` for folders.

        Returns:
            A JSON-serializable dictionary.

        Example:
            >>> TreeNode("a.txt", "/repo/a.txt", NodeKind.FILE, file_size=3).to_dict()
            {'name': 'a.txt', 'path': '/repo/a.txt', 'type': 'file', 'size': 3}
        """
        data: Dict[str, Any] = {"name": self.name, "path": self.abs_path, "type": self.kind.value}
        if self.is_skipped:
            data["skipped"] = self.skip_reason.value
        if not self.is_folder:
            data["size"] = self.file_size if self.file_size is not None else 0
        contents = self.contents
        if contents is not None:
            data["children"] = [child.to_dict() for child in contents]
        return data

    def __repr__(self) -> str:
        return f"TreeNode({self.abs_path!r}, kind={self.kind.value}, skip_reason={self.skip_reason.value})"
