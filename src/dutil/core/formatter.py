"""Reordering and rescaling of scanned entries."""

from __future__ import annotations

from dataclasses import replace

from dutil.config import ReportConfig, SizeMode, SortMode
from dutil.models.entry import DirectoryEntry


def format_entries(entries: list[DirectoryEntry], config: ReportConfig) -> list[DirectoryEntry]:
    """Apply summary, sorting, reversal and byte scaling, in that order.

    Returns a new list; ``entries`` is left untouched.  Byte scaling runs
    last so it never influences the order.
    """
    result = list(entries)

    if config.summary_only:
        result = result[-1:]

    match config.sort_mode:
        case SortMode.NAME:
            result.sort(key=lambda e: e.label)
        case SortMode.SIZE:
            result.sort(key=lambda e: (e.clusters, e.label))

    if config.reverse:
        result.reverse()

    if config.size_mode is SizeMode.BYTES:
        result = [replace(e, clusters=e.clusters * config.cluster_size) for e in result]

    return result
