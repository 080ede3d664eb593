"""Options controlling how a directory tree is built."""

from dataclasses import dataclass
from typing import Optional, Tuple

from lstree.exclusion_rules.rule_stack import DEFAULT_IGNORE_FILE_NAME


@dataclass(frozen=True)
class TreeOptions:
    """Options for building a directory tree.

    Attributes:
        max_leaf: Collapse any directory below the root whose visible entry count
            exceeds this value. None disables collapsing.
        ignore_patterns: Extra .gitignore-style patterns applied at the scan root only.
        ignore_file_name: Name of the per-directory ignore file.

    Example:
        >>> TreeOptions(max_leaf=50, ignore_patterns=("*.log",)).max_leaf
        50
        >>> TreeOptions(max_leaf=0)
        Traceback (most recent call last):
        ...
        ValueError: max_leaf must be a positive integer, got 0
    """

    max_leaf: Optional[int] = None
    ignore_patterns: Tuple[str, ...] = ()
    ignore_file_name: str = DEFAULT_IGNORE_FILE_NAME

    def __post_init__(self) -> None:
        if self.max_leaf is not None:
            # bool is an int subclass but never a meaningful count
            if not isinstance(self.max_leaf, int) or isinstance(self.max_leaf, bool) or self.max_leaf < 1:
                raise ValueError(f"max_leaf must be a positive integer, got {self.max_leaf!r}")
        if not self.ignore_file_name or "/" in self.ignore_file_name:
            raise ValueError(f"ignore_file_name must be a plain file name, got {self.ignore_file_name!r}")
        # Accept any iterable of patterns but store an immutable tuple
        object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))
