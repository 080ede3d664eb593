"""Cascading .gitignore resolution across nested directories.

Git reads one ignore file per directory and resolves each file's patterns relative to
the directory that holds it. A single merged matcher cannot reproduce that, because a
pattern such as ``src/generated.py`` means something different in ``/repo/.gitignore``
than in ``/repo/lib/.gitignore``. This module keeps one matcher per directory level
instead, and tests every candidate path against each level relative to that level's own
directory.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, List, Tuple

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules

logger = logging.getLogger(__name__)

# Version-control metadata is never part of the listing
VCS_METADATA_PATTERNS: Tuple[str, ...] = (".git", ".hg", ".svn")

DEFAULT_IGNORE_FILE_NAME = ".gitignore"


@dataclass(frozen=True)
class IgnoreLevel:
    """The exclusion rules declared at one directory level.

    Attributes:
        rules: Matcher for the patterns declared at this level.
        directory: Absolute path of the declaring directory.
    """

    rules: BaseExclusionRules
    directory: str

    def relative_path(self, abs_path: str) -> str:
        """Express an absolute path relative to this level's directory.

        Args:
            abs_path: Absolute path of a candidate entry.

        Returns:
            The POSIX-style relative path, or an empty string if the path does not lie
            strictly below this level's directory.
        """
        try:
            relative = PurePath(abs_path).relative_to(self.directory)
        except ValueError:
            return ""
        return relative.as_posix() if relative.parts else ""

    def excludes(self, abs_path: str, is_dir: bool) -> bool:
        """Check the entry against this level's rules only."""
        relative = self.relative_path(abs_path)
        if not relative:
            return False
        return self.rules.exclude_entry(relative, is_dir)


class IgnoreRuleStack:
    """Immutable stack of ignore levels from the scan root down to the current directory.

    A path is excluded when any level excludes it. Levels never re-include a path that an
    outer level excluded; negated patterns only act within the level that declares them.

    The stack is never mutated. push() returns a new stack, so each directory can
    extend the stack it was given while its parent and siblings keep their own.

    Example:
        >>> root = IgnoreLevel(GitIgnoreExclusionRules(["src/ignore.txt"]), "/repo")
        >>> stack = IgnoreRuleStack().push(root)
        >>> stack.is_excluded("/repo/src/ignore.txt", is_dir=False)
        True
        >>> stack.is_excluded("/repo/ignore.txt", is_dir=False)
        False
    """

    __slots__ = ("_levels",)

    def __init__(self, levels: Iterable[IgnoreLevel] = ()) -> None:
        self._levels: Tuple[IgnoreLevel, ...] = tuple(levels)

    def push(self, level: IgnoreLevel) -> "IgnoreRuleStack":
        """Return a new stack with ``level`` on top, leaving this one unchanged."""
        return IgnoreRuleStack(self._levels + (level,))

    def is_excluded(self, abs_path: str, is_dir: bool) -> bool:
        """Check whether any level excludes the entry at ``abs_path``.

        Each level tests the path relative to its own declaring directory. Levels that
        declare no rules are passed over, and evaluation stops at the first level that
        excludes the entry.

        Args:
            abs_path: Absolute path of the candidate entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if the entry is excluded by any level.
        """
        return any(level.excludes(abs_path, is_dir) for level in self._levels if level.rules.has_rules())

    def __len__(self) -> int:
        return len(self._levels)

    def __repr__(self) -> str:
        return f"IgnoreRuleStack({[level.directory for level in self._levels]!r})"


def read_ignore_declaration(directory: str, ignore_file_name: str = DEFAULT_IGNORE_FILE_NAME) -> List[str]:
    """Read the pattern lines declared by a directory's ignore file.

    A missing or unreadable file declares no rules; this is not an error.

    Args:
        directory: Directory whose ignore file should be read.
        ignore_file_name: Name of the ignore file inside the directory.

    Returns:
        The file's lines, or an empty list.
    """
    ignore_file = os.path.join(directory, ignore_file_name)
    try:
        with open(ignore_file, "r", encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()
    except FileNotFoundError:
        return []
    except OSError as e:
        logger.debug("Cannot read ignore file %s: %s", ignore_file, e)
        return []


def declare_level(
    directory: str,
    is_root: bool,
    extra_patterns: Iterable[str] = (),
    ignore_file_name: str = DEFAULT_IGNORE_FILE_NAME,
) -> IgnoreLevel:
    """Build the ignore level for a directory about to be scanned.

    At the scan root, the level also carries the fixed exclusion of version-control
    metadata and any externally supplied patterns, ahead of the root's own ignore file.

    Args:
        directory: Absolute path of the directory.
        is_root: Whether the directory is the scan root.
        extra_patterns: Patterns supplied by the caller; only used at the root.
        ignore_file_name: Name of the per-directory ignore file.

    Returns:
        The level for this directory.
    """
    rules = GitIgnoreExclusionRules()
    if is_root:
        rules.add_rules(VCS_METADATA_PATTERNS)
        rules.add_rules(extra_patterns)
    rules.add_rules(read_ignore_declaration(directory, ignore_file_name))
    return IgnoreLevel(rules, directory)
