"""Aligned text rendering of report entries."""

from __future__ import annotations

from dutil.config import SizeMode
from dutil.models.entry import DirectoryEntry
from dutil.utils import human_format

_SEPARATOR = "   "
_HUMAN_MIN_WIDTH = 3


def render_size(entry: DirectoryEntry, size_mode: SizeMode) -> str:
    """Render the size column text for one entry."""
    if size_mode is SizeMode.HUMAN:
        return human_format(entry.clusters)
    return str(entry.clusters)


def render_lines(entries: list[DirectoryEntry], size_mode: SizeMode) -> list[str]:
    """Render one ``<size>   <label>`` line per entry.

    The size column is left-aligned and padded to the widest rendered size
    (at least 3 characters in human-readable mode).
    """
    sizes = [render_size(e, size_mode) for e in entries]
    width = max((len(s) for s in sizes), default=0)
    if size_mode is SizeMode.HUMAN:
        width = max(width, _HUMAN_MIN_WIDTH)
    return [f"{size:<{width}}{_SEPARATOR}{entry.label}" for size, entry in zip(sizes, entries)]
