"""Listing of a single directory's immediate entries without following symlinks."""

import logging
import os
import stat
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate entry of a scanned directory, as seen by lstat.

    Attributes:
        name: Base name of the entry.
        abs_path: Absolute path of the entry.
        is_symlink: Whether the entry itself is a symbolic link.
        is_dir: Whether the entry is a directory. Always False for symlinks, even when
            they point at a directory.
        size: Size in bytes reported by lstat.
    """

    name: str
    abs_path: str
    is_symlink: bool
    is_dir: bool
    size: int


def scan_directory(directory: str) -> List[DirectoryEntry]:
    """List the immediate entries of a directory.

    Each entry is classified with a link-aware stat, so a symlink to a directory is
    reported as a symlink and never looks like something to recurse into.

    A directory that cannot be listed yields an empty list. An entry that cannot be
    stat'ed (for example because it vanished after the listing) is left out.

    Args:
        directory: Absolute path of the directory to list.

    Returns:
        The entries in listing order.
    """
    try:
        names = os.listdir(directory)
    except OSError as e:
        logger.debug("Cannot list directory %s: %s", directory, e)
        return []

    entries: List[DirectoryEntry] = []
    for name in names:
        entry_path = os.path.join(directory, name)
        try:
            entry_stat = os.lstat(entry_path)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", entry_path, e)
            continue
        entries.append(
            DirectoryEntry(
                name=name,
                abs_path=entry_path,
                is_symlink=stat.S_ISLNK(entry_stat.st_mode),
                is_dir=stat.S_ISDIR(entry_stat.st_mode),
                size=entry_stat.st_size,
            )
        )
    return entries
