from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for exclusion rules scoped to one directory.

    Implementations answer whether an entry, given as a path relative to the directory
    the rules belong to, is excluded. Files and directories are asked separately because
    directory-only rules (those ending in a slash) must never match a file of the same
    name.

    Example:
        >>> class ExcludeTmp(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.rstrip("/").endswith(".tmp")
        >>> rules = ExcludeTmp()
        >>> rules.exclude_entry("build/out.tmp", is_dir=False)
        True
        >>> rules.exclude_entry("main.py", is_dir=False)
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a relative path should be excluded.

        Args:
            path (str): POSIX-style path relative to the rules' directory. A trailing
                slash marks the path as a directory.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def exclude_entry(self, path: str, is_dir: bool) -> bool:
        """
        Determine if a file or directory entry should be excluded.

        Directories are tested in their slash-terminated form first, so that
        directory-only rules apply to them, and then in their plain form.

        Args:
            path: POSIX-style path relative to the rules' directory, without a trailing slash.
            is_dir: Whether the entry is a directory.

        Returns:
            bool: True if the entry should be excluded.
        """
        if is_dir and self.exclude(path + "/"):
            return True
        return self.exclude(path)

    def has_rules(self) -> bool:
        """
        Check whether these rules can exclude anything at all.

        IgnoreRuleStack passes over rules reporting False here. Subclasses that can tell
        their rule set is empty override this.

        Returns:
            bool: True unless the implementation knows it has no rules.
        """
        return True
