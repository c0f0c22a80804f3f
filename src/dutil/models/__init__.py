"""dutil data models."""

from dutil.models.entry import DirectoryEntry

__all__ = [
    "DirectoryEntry",
]
