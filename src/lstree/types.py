from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeKind(str, Enum):
    """Kind of entry a tree node represents.

    Symbolic links have no kind of their own because they never produce a node.

    Attributes:
        FILE: Regular file (or an entry that could not be inspected)
        FOLDER: Directory
    """

    FILE = "file"
    FOLDER = "folder"


class SkipReason(str, Enum):
    """Reason a folder node was not expanded.

    The values double as the ``skipped`` markers of the serialized tree.

    Attributes:
        NONE: The node was not skipped
        IGNORED_BY_RULE: Matched by a .gitignore-style rule
        TOO_MANY_ENTRIES: More visible entries than the configured maximum
    """

    NONE = "none"
    IGNORED_BY_RULE = "gitignore"
    TOO_MANY_ENTRIES = "size"
