"""Directory scanning and cluster aggregation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dutil.models.entry import DirectoryEntry
from dutil.utils import DEFAULT_CLUSTER_SIZE, ceiling_clusters

log = logging.getLogger(__name__)


class ScanError(OSError):
    """Raised when a scan root cannot be read."""


def scan(
    root: Path | str,
    cluster_size: int = DEFAULT_CLUSTER_SIZE,
    explicit: bool = False,
) -> list[DirectoryEntry]:
    """Scan ``root`` and return one entry per child directory plus one for root.

    Child entries come first, in name order, each covering its whole
    subtree.  The final entry is the root itself: its direct files plus
    every child total.

    Args:
        root: Directory to scan.
        cluster_size: Bytes per cluster; every file is rounded up to whole clusters.
        explicit: True when the user named ``root`` on the command line.  Labels
            are then built from ``root``; otherwise they are relative to ``.``.

    Raises:
        ScanError: If ``root`` is missing, not a directory, or unreadable.
    """
    root = os.fspath(root)
    base = root if explicit else os.curdir

    try:
        with os.scandir(root) as it:
            children = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise ScanError(f"cannot scan '{root}': {e.strerror or e}") from e

    entries: list[DirectoryEntry] = []
    total = 0
    for child in children:
        try:
            if child.is_file():
                total += ceiling_clusters(child.stat().st_size, cluster_size)
            elif child.is_dir(follow_symlinks=False):
                clusters = subtree_clusters(child.path, cluster_size)
                entries.append(DirectoryEntry(clusters, os.path.join(base, child.name)))
                total += clusters
        except OSError:
            log.debug("Cannot access: %s", child.path)

    entries.append(DirectoryEntry(total, base))
    return entries


def subtree_clusters(path: Path | str, cluster_size: int = DEFAULT_CLUSTER_SIZE) -> int:
    """Sum the cluster-rounded sizes of every regular file under ``path``.

    Unreadable directories and files are skipped.  Directory symlinks are
    not followed.
    """
    total = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_file():
                            total += ceiling_clusters(entry.stat().st_size, cluster_size)
                        elif entry.is_dir(follow_symlinks=False):
                            stack.append(entry.path)
                    except OSError:
                        log.debug("Cannot access: %s", entry.path)
        except OSError:
            log.debug("Cannot read directory: %s", current)
    return total
