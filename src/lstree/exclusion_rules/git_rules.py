"""Implementation of exclusion rules using .gitignore pattern syntax."""

from typing import Iterable, List, Optional

from pathspec import GitIgnoreSpec

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore pattern
    matching rules. It uses the pathspec library to match paths against patterns in the same
    way that Git does.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-only patterns (ending in /)
    - Anchored patterns (containing a / before the last character)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    One instance holds the rules declared at a single directory level. Paths handed to
    exclude() must be relative to that directory; resolving them against the right
    directory is the job of IgnoreRuleStack.

    Example:
        >>> rules = GitIgnoreExclusionRules(["node_modules/", "src/generated.py"])
        >>> rules.exclude_entry("node_modules", is_dir=True)
        True
        >>> rules.exclude_entry("node_modules", is_dir=False)
        False
        >>> rules.exclude("src/generated.py")
        True
        >>> rules.exclude("lib/src/generated.py")
        False

    Note:
        Paths must use forward slashes (/) as separators, even on Windows systems, to
        match Git's behavior.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize the rules with an optional list of pattern lines.

        Args:
            patterns: Lines in .gitignore syntax. Blank lines and comments are allowed.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines([])
        if patterns is not None:
            self.add_rules(patterns)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        The path is matched exactly as provided; no path normalization is performed.

        Args:
            path: Relative POSIX-style path. A trailing slash marks a directory.

        Returns:
            bool: True if the last pattern matching the path is not a negation.

        Example:
            >>> rules = GitIgnoreExclusionRules(["*.pyc", "!important.pyc"])
            >>> rules.exclude("test.pyc")
            True
            >>> rules.exclude("important.pyc")
            False
        """
        return self.spec.match_file(path)

    def add_rules(self, patterns: Iterable[str]) -> None:
        """Add several .gitignore lines, in order.

        Later patterns take precedence over earlier ones, which matters for negations.

        Args:
            patterns: Lines in .gitignore syntax.
        """
        self._lines.extend(patterns)
        # Recompiled from the full line list; pathspec specs are not meant to be mutated
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def has_rules(self) -> bool:
        """Check whether any pattern has been loaded.

        Returns:
            bool: True if at least one effective pattern is present.
        """
        # Blank lines and comments compile to patterns with include set to None
        return any(pattern.include is not None for pattern in self.spec.patterns)
