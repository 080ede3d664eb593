"""Version-control-aware directory trees.

This package snapshots a directory subtree into a tree of nodes that mirrors what a
git-aware listing would show: ignored directories are reported as collapsed stubs,
and directories with too many visible entries are collapsed to bound output size.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("lstree")
except PackageNotFoundError:
    __version__ = "unknown"
