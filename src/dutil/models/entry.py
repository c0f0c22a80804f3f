"""Directory entry dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class DirectoryEntry:
    """Disk usage of one directory subtree.

    ``clusters`` counts storage clusters until the formatter rescales it
    to bytes for display.  ``label`` is what gets printed next to it:
    ``.`` / ``./name`` for the current directory, or the path as the
    user typed it.
    """

    clusters: int
    label: str
